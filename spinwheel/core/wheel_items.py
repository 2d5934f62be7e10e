"""Wheel Items — one physical slot on the wheel and its END placeholder.

Invariants:
    - item id is "<type>-<draw index>-<source id>" for drawn cards
    - END placeholder id is USED_ID_PREFIX + original id (provenance kept)
    - data is a snapshot: flipping a SessionRule never rewrites an existing item
    - Style is static per WheelItemType

Design Decisions:
    - Frozen dataclass: items are values, the wheel replaces them wholesale
"""

from dataclasses import dataclass

from spinwheel.core.catalog import Modifier, Prompt, Rule
from spinwheel.core.domain_types import USED_ID_PREFIX, WheelItemType


@dataclass(frozen=True)
class SegmentStyle:
    segment: str
    label_bg: str
    label_color: str


@dataclass(frozen=True)
class EndMarker:
    name: str = "END"
    description: str = "This slot has been used."


ItemData = Rule | Prompt | Modifier | EndMarker


SEGMENT_STYLES: dict[WheelItemType, SegmentStyle] = {
    WheelItemType.RULE: SegmentStyle("#FFD262", "#FFD262", "#1F2937"),
    WheelItemType.PROMPT: SegmentStyle("#C8BFE7", "#FFFFFF", "#1F2937"),
    WheelItemType.MODIFIER: SegmentStyle("#45B0C9", "#EE6352", "#F9FAFB"),
    WheelItemType.END: SegmentStyle("#111827", "#111827", "#F9FAFB"),
}

LABELS: dict[WheelItemType, str] = {
    WheelItemType.RULE: "Rule",
    WheelItemType.PROMPT: "Prompt",
    WheelItemType.MODIFIER: "Modifier",
    WheelItemType.END: "END",
}


@dataclass(frozen=True)
class WheelItem:
    id: str
    type: WheelItemType
    label: str
    data: ItemData
    color: SegmentStyle

    @property
    def is_end(self) -> bool:
        return self.type == WheelItemType.END


def make_item(
    item_type: WheelItemType, draw_index: int, data: Rule | Prompt | Modifier,
) -> WheelItem:
    """Wheel item for a drawn card. Draw index keeps cyclic repeats unique."""
    return WheelItem(
        id=f"{item_type.value.lower()}-{draw_index}-{data.id}",
        type=item_type,
        label=LABELS[item_type],
        data=data,
        color=SEGMENT_STYLES[item_type],
    )


def make_end_item(consumed: WheelItem) -> WheelItem:
    """END placeholder that takes over a consumed item's slot."""
    return WheelItem(
        id=used_id(consumed.id),
        type=WheelItemType.END,
        label=LABELS[WheelItemType.END],
        data=EndMarker(),
        color=SEGMENT_STYLES[WheelItemType.END],
    )


def used_id(item_id: str) -> str:
    return f"{USED_ID_PREFIX}{item_id}"


def original_item_id(item_id: str) -> str:
    """Strip the used- prefix, if any."""
    if item_id.startswith(USED_ID_PREFIX):
        return item_id[len(USED_ID_PREFIX):]
    return item_id
