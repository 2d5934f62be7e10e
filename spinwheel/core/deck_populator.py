"""Deck Populator — builds the ordered list of wheel segments for a session.

Invariants:
    - num_prompts + num_rules + num_modifiers == total_segments
    - Prompts and rules use floor(); modifiers absorb the rounding remainder
    - Every returned item id is unique, even when a category repeats cyclically
    - An empty category is omitted, never an error
    - PURE: no hidden state; all randomness comes from the rng argument

Design Decisions:
    - Each category shuffled before drawing so cyclic repeats are locally mixed
    - Final combined shuffle so type order around the wheel is uniform
"""

import math
from typing import Sequence, TypeVar

from spinwheel.core.catalog import Modifier, Prompt, SessionRule
from spinwheel.core.domain_types import (
    PROMPT_RATIO, RULE_RATIO, TOTAL_SEGMENTS, WheelItemType,
)
from spinwheel.core.random_source import RandomSource, shuffled
from spinwheel.core.wheel_items import WheelItem, make_item

T = TypeVar("T")


def segment_counts(total_segments: int = TOTAL_SEGMENTS) -> tuple[int, int, int]:
    """(num_prompts, num_rules, num_modifiers) for a wheel of total_segments."""
    num_prompts = math.floor(total_segments * PROMPT_RATIO)
    num_rules = math.floor(total_segments * RULE_RATIO)
    num_modifiers = total_segments - num_prompts - num_rules
    return num_prompts, num_rules, num_modifiers


def draw_cyclic(items: Sequence[T], count: int, rng: RandomSource) -> list[T]:
    """Shuffle items, then take count of them wrapping around with i % len."""
    if not items:
        return []
    deck = shuffled(items, rng)
    return [deck[i % len(deck)] for i in range(count)]


def populate_wheel(
    session_rules: Sequence[SessionRule],
    prompts: Sequence[Prompt],
    modifiers: Sequence[Modifier],
    rng: RandomSource,
    total_segments: int = TOTAL_SEGMENTS,
) -> tuple[WheelItem, ...]:
    """Fresh deck from the current rule faces plus catalog prompts/modifiers."""
    num_prompts, num_rules, num_modifiers = segment_counts(total_segments)
    active_rules = [session_rule.active_rule for session_rule in session_rules]

    items: list[WheelItem] = []
    for index, prompt in enumerate(draw_cyclic(prompts, num_prompts, rng)):
        items.append(make_item(WheelItemType.PROMPT, index, prompt))
    for index, rule in enumerate(draw_cyclic(active_rules, num_rules, rng)):
        items.append(make_item(WheelItemType.RULE, index, rule))
    for index, modifier in enumerate(draw_cyclic(modifiers, num_modifiers, rng)):
        items.append(make_item(WheelItemType.MODIFIER, index, modifier))

    return tuple(shuffled(items, rng))
