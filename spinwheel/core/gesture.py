"""Gesture Interpreter — classifies a pointer drag on the wheel into a spin request.

Invariants:
    - FLICK: duration < 1000 ms and |distance| > 20 px, velocity = distance / duration
    - TAP: duration < 250 ms and |distance| < 20 px, velocity 0 (default spin)
    - Anything else is IGNORED and must not start a spin
"""

from dataclasses import dataclass

from spinwheel.core.domain_types import GestureKind


FLICK_MAX_DURATION_MS: float = 1000
TAP_MAX_DURATION_MS: float = 250
DRAG_THRESHOLD_PX: float = 20


@dataclass(frozen=True)
class Gesture:
    kind: GestureKind
    velocity: float = 0.0

    @property
    def spins(self) -> bool:
        return self.kind != GestureKind.IGNORED


def gesture_velocity(distance_px: float, duration_ms: float) -> float:
    """Signed drag speed in px/ms. Zero-length drags have no speed."""
    if duration_ms <= 0:
        return 0.0
    return distance_px / duration_ms


def interpret_gesture(distance_px: float, duration_ms: float) -> Gesture:
    """distance_px is start minus end, so an upward drag is positive."""
    if duration_ms < FLICK_MAX_DURATION_MS and abs(distance_px) > DRAG_THRESHOLD_PX:
        return Gesture(GestureKind.FLICK, gesture_velocity(distance_px, duration_ms))
    if duration_ms < TAP_MAX_DURATION_MS and abs(distance_px) < DRAG_THRESHOLD_PX:
        return Gesture(GestureKind.TAP, 0.0)
    return Gesture(GestureKind.IGNORED)
