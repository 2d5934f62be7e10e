"""Spin Physics — turns a gesture velocity and a chosen segment into a rotation.

Invariants:
    - direction is sign(velocity), +1 when velocity == 0
    - additional_revolutions = round_half_up(base + min(|v| * scale, max_bonus))
    - duration_ms = base_duration + revolutions * per_revolution
    - Un-jittered final rotation is congruent to -target_index * segment_angle (mod 360)
    - |jitter| <= segment_angle * jitter_fraction / 2 < segment_angle / 2

Design Decisions:
    - Half-up rounding (not Python's banker's round): x.5 always adds a revolution
    - Pointer sits at angle 0; segment i is centered at i * segment_angle, so
      subtracting i * segment_angle brings its middle under the pointer
"""

import math
from dataclasses import dataclass

from spinwheel.core.domain_types import (
    BASE_DURATION_MS, BASE_REVOLUTIONS, DURATION_PER_REVOLUTION_MS,
    JITTER_FRACTION, MAX_VELOCITY_BONUS, VELOCITY_SCALE,
)
from spinwheel.core.random_source import RandomSource, uniform
from spinwheel.core.wheel_items import WheelItem


@dataclass(frozen=True)
class SpinTuning:
    """Knobs for spin feel. Defaults reproduce the shipped game."""
    base_revolutions: int = BASE_REVOLUTIONS
    velocity_scale: float = VELOCITY_SCALE
    max_velocity_bonus: float = MAX_VELOCITY_BONUS
    base_duration_ms: int = BASE_DURATION_MS
    duration_per_revolution_ms: int = DURATION_PER_REVOLUTION_MS
    jitter_fraction: float = JITTER_FRACTION


DEFAULT_TUNING = SpinTuning()


@dataclass(frozen=True)
class SpinPlan:
    """Everything the animation layer needs for one committed spin."""
    target: WheelItem
    target_index: int
    rotation_delta: float
    duration_ms: int
    revolutions: int
    direction: int
    jitter: float


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def segment_angle(segment_count: int) -> float:
    return 360 / segment_count


def spin_direction(velocity: float) -> int:
    return -1 if velocity < 0 else 1


def additional_revolutions(velocity: float, tuning: SpinTuning = DEFAULT_TUNING) -> int:
    bonus = min(abs(velocity) * tuning.velocity_scale, tuning.max_velocity_bonus)
    return round_half_up(tuning.base_revolutions + bonus)


def spin_duration_ms(revolutions: int, tuning: SpinTuning = DEFAULT_TUNING) -> int:
    return tuning.base_duration_ms + revolutions * tuning.duration_per_revolution_ms


def max_jitter(segment_count: int, tuning: SpinTuning = DEFAULT_TUNING) -> float:
    """Largest landing offset from segment center, in degrees."""
    return segment_angle(segment_count) * tuning.jitter_fraction / 2


def draw_jitter(
    rng: RandomSource, segment_count: int, tuning: SpinTuning = DEFAULT_TUNING,
) -> float:
    bound = max_jitter(segment_count, tuning)
    return uniform(rng, -bound, bound)


def rotation_delta(
    current_rotation: float,
    segment_count: int,
    target_index: int,
    direction: int,
    revolutions: int,
    jitter: float = 0.0,
) -> float:
    """Delta to add to current_rotation so the pointer lands on target_index.

    The current rotation is normalized to [0, 360) and cancelled out, then
    whole revolutions are added in the spin direction and the target
    segment's angle subtracted.
    """
    normalized = current_rotation % 360
    return (
        -normalized
        + revolutions * 360 * direction
        - target_index * segment_angle(segment_count)
        + jitter
    )


def segment_index_at(rotation: float, segment_count: int) -> int:
    """Index of the segment under the pointer for a given wheel rotation."""
    angle = segment_angle(segment_count)
    normalized = (-rotation) % 360
    effective = (normalized + angle / 2) % 360
    return min(math.floor(effective / angle), segment_count - 1)


def plan_spin(
    target: WheelItem,
    target_index: int,
    segment_count: int,
    current_rotation: float,
    velocity: float,
    rng: RandomSource,
    tuning: SpinTuning = DEFAULT_TUNING,
) -> SpinPlan:
    """Full physics for a spin onto an already chosen target."""
    direction = spin_direction(velocity)
    revolutions = additional_revolutions(velocity, tuning)
    jitter = draw_jitter(rng, segment_count, tuning)
    return SpinPlan(
        target=target,
        target_index=target_index,
        rotation_delta=rotation_delta(
            current_rotation, segment_count, target_index,
            direction, revolutions, jitter,
        ),
        duration_ms=spin_duration_ms(revolutions, tuning),
        revolutions=revolutions,
        direction=direction,
        jitter=jitter,
    )
