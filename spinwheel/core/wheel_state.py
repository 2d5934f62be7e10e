"""Wheel State — authoritative slot layout and selectable pool for one session.

Invariants:
    - available ⊆ segments by id at all times
    - A consumed id never reappears in available; its slot holds used-<id> (END)
    - An END slot never returns to an earlier type (flip reconciliation keeps it)
    - consume_item is idempotent per id
    - is_spinning is True exactly while a SpinPlan is pending

Design Decisions:
    - Frozen dataclass + pure transitions returning new states: the shell holds
      the only reference and swaps it wholesale, so no aliasing between renders
    - END placeholders stay in available: once the early-spin guard lifts they
      are selectable, and landing on one ends the game
    - Flip reconciliation is best-effort: a re-populated deck reshuffles draws, so
      used-slot identity is matched by id only (see reconcile_after_flip)
"""

from dataclasses import dataclass, replace

from spinwheel.core.catalog import Catalog, SessionRule
from spinwheel.core.deck_populator import populate_wheel
from spinwheel.core.domain_types import TOTAL_SEGMENTS
from spinwheel.core.errors import ItemNotOnWheelError, RuleNotFoundError
from spinwheel.core.random_source import RandomSource
from spinwheel.core.spin_physics import SpinPlan
from spinwheel.core.wheel_items import (
    WheelItem, make_end_item, original_item_id, used_id,
)


@dataclass(frozen=True)
class WheelState:
    """Per-session wheel state: pure value, no IO."""

    segments: tuple[WheelItem, ...] = ()
    available: tuple[WheelItem, ...] = ()
    rotation: float = 0.0
    spin_duration_ms: int = 0
    spin_count: int = 0
    pending: SpinPlan | None = None

    # --- Computed properties ---------------------------------------------------

    @property
    def segment_count(self) -> int:
        return len(self.segments)

    @property
    def is_spinning(self) -> bool:
        return self.pending is not None

    @property
    def has_live_items(self) -> bool:
        """Whether any non-END item is still selectable."""
        return any(not item.is_end for item in self.available)

    @property
    def used_ids(self) -> set[str]:
        """Original ids of every slot consumed so far."""
        return {
            original_item_id(item.id) for item in self.segments if item.is_end
        }

    def index_of(self, item_id: str) -> int | None:
        for index, item in enumerate(self.segments):
            if item.id == item_id:
                return index
        return None


def initialize_wheel(
    session_rules: tuple[SessionRule, ...],
    catalog: Catalog,
    rng: RandomSource,
    total_segments: int = TOTAL_SEGMENTS,
) -> WheelState:
    """Fresh deck; every slot selectable."""
    segments = populate_wheel(
        session_rules, catalog.prompts, catalog.modifiers, rng, total_segments,
    )
    return WheelState(segments=segments, available=segments)


def flip_rule(
    session_rules: tuple[SessionRule, ...], rule_id: int,
) -> tuple[SessionRule, ...]:
    """Toggle is_flipped on the session rule with this group id."""
    if not any(session_rule.id == rule_id for session_rule in session_rules):
        raise RuleNotFoundError(rule_id)
    return tuple(
        session_rule.toggled() if session_rule.id == rule_id else session_rule
        for session_rule in session_rules
    )


def reconcile_after_flip(
    state: WheelState, fresh_segments: tuple[WheelItem, ...],
) -> WheelState:
    """Adopt a re-populated deck while honoring slots already used.

    END placeholders keep their index. Fresh items whose id matches the
    original id of a used slot are left out of available. Because the fresh
    deck reshuffles its draws, the used set carried over is approximate:
    neither count nor identity of used slots is guaranteed to match exactly.
    """
    previous = state.segments
    used = state.used_ids
    segments = tuple(
        previous[index] if index < len(previous) and previous[index].is_end else item
        for index, item in enumerate(fresh_segments)
    )
    available = tuple(
        item for item in segments if item.is_end or item.id not in used
    )
    return replace(state, segments=segments, available=available)


def consume_item(state: WheelState, item_id: str) -> WheelState:
    """Turn item_id's slot into END. Already-consumed or END ids are a no-op."""
    index = state.index_of(item_id)
    if index is None:
        if state.index_of(used_id(item_id)) is not None:
            return state
        raise ItemNotOnWheelError(item_id)

    consumed = state.segments[index]
    if consumed.is_end:
        return state

    placeholder = make_end_item(consumed)
    segments = state.segments[:index] + (placeholder,) + state.segments[index + 1:]
    available = tuple(
        placeholder if item.id == item_id else item for item in state.available
    )
    return replace(state, segments=segments, available=available)


def begin_spin(state: WheelState, plan: SpinPlan) -> WheelState:
    """Commit a plan: apply the rotation target and raise the spin guard."""
    return replace(
        state,
        rotation=state.rotation + plan.rotation_delta,
        spin_duration_ms=plan.duration_ms,
        pending=plan,
    )


def finish_spin(state: WheelState) -> tuple[WheelState, SpinPlan | None]:
    """Clear the spin guard and count the spin. Returns the plan that finished."""
    plan = state.pending
    if plan is None:
        return state, None
    return replace(state, pending=None, spin_count=state.spin_count + 1), plan
