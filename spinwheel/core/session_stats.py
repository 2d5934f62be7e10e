"""Session Stats — pure summary counts of a wheel for the rendering layer.

Invariants:
    - All inputs come from WheelState fields (no IO)
    - Returns a flat dict of integer counts (serializable as JSON)
    - Never raises; an empty wheel yields zeros

Design Decisions:
    - Pure function, not a WheelState method: state is enforcement, stats are presentation
"""

from spinwheel.core.domain_types import WheelItemType
from spinwheel.core.wheel_state import WheelState


def compute_session_stats(state: WheelState) -> dict:
    """Compute summary statistics from WheelState. Pure, no IO."""
    segments = state.segments
    live = [item for item in state.available if not item.is_end]

    def remaining(item_type: WheelItemType) -> int:
        return sum(1 for item in live if item.type == item_type)

    return {
        "total_segments": len(segments),
        "used_segments": sum(1 for item in segments if item.is_end),
        "available_items": len(state.available),
        "live_items": len(live),
        "rules_remaining": remaining(WheelItemType.RULE),
        "prompts_remaining": remaining(WheelItemType.PROMPT),
        "modifiers_remaining": remaining(WheelItemType.MODIFIER),
        "spin_count": state.spin_count,
    }
