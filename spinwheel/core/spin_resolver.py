"""Spin Resolver — picks the winning slot, then plans a spin that lands on it.

Invariants:
    - Winner is chosen BEFORE physics; physics only decides how to get there
    - Fewer than early_spin_guard spins + any live item ⇒ END items excluded
    - Already spinning, empty wheel, or empty pool ⇒ None (silent no-op)
    - resolve_spin is PURE: returns a plan, does NOT mutate state

Design Decisions:
    - Rejection as None rather than an exception: the game ignores a spin
      attempt while the wheel moves or when nothing can be selected; the shell
      logs it for observability
"""

from spinwheel.core.domain_types import EARLY_SPIN_GUARD
from spinwheel.core.errors import ItemNotOnWheelError
from spinwheel.core.random_source import RandomSource, choice
from spinwheel.core.spin_physics import DEFAULT_TUNING, SpinPlan, SpinTuning, plan_spin
from spinwheel.core.wheel_items import WheelItem
from spinwheel.core.wheel_state import WheelState


def candidate_pool(
    state: WheelState, early_spin_guard: int = EARLY_SPIN_GUARD,
) -> tuple[WheelItem, ...]:
    """Items a spin may select right now."""
    if state.spin_count < early_spin_guard and state.has_live_items:
        return tuple(item for item in state.available if not item.is_end)
    return state.available


def rejection_reason(
    state: WheelState, early_spin_guard: int = EARLY_SPIN_GUARD,
) -> str | None:
    """Why a spin would be ignored, or None when it may proceed."""
    if state.is_spinning:
        return "already_spinning"
    if state.segment_count == 0:
        return "empty_wheel"
    if not candidate_pool(state, early_spin_guard):
        return "no_eligible_items"
    return None


def resolve_spin(
    state: WheelState,
    velocity: float,
    rng: RandomSource,
    tuning: SpinTuning = DEFAULT_TUNING,
    early_spin_guard: int = EARLY_SPIN_GUARD,
) -> SpinPlan | None:
    """Select a winner and the rotation that lands on it; None if rejected."""
    if rejection_reason(state, early_spin_guard) is not None:
        return None

    target = choice(candidate_pool(state, early_spin_guard), rng)
    target_index = state.index_of(target.id)
    if target_index is None:
        raise ItemNotOnWheelError(target.id)

    return plan_spin(
        target=target,
        target_index=target_index,
        segment_count=state.segment_count,
        current_rotation=state.rotation,
        velocity=velocity,
        rng=rng,
        tuning=tuning,
    )
