"""Spin Physics — tests for direction, revolutions, duration, rotation target, jitter.

Tests cover:
    - velocity 0 ⇒ direction +1, 5 revolutions, 5000 ms
    - velocity 2.0 ⇒ capped bonus, 35 revolutions, 11000 ms
    - rotation 0, 4 segments, index 2, 5 revs, no jitter ⇒ delta 1620
    - Non-zero starting rotation is cancelled before adding revolutions
    - Jitter stays strictly inside half a segment; landing index matches target
"""

import random

import pytest

from spinwheel.core.spin_physics import (
    SpinTuning, additional_revolutions, draw_jitter, max_jitter, plan_spin,
    rotation_delta, round_half_up, segment_angle, segment_index_at,
    spin_direction, spin_duration_ms,
)
from tests.factories import ScriptedRandom, prompt_item


# ─── direction / revolutions / duration ──────────────────────────

def test_zero_velocity_defaults():
    assert spin_direction(0.0) == 1
    assert additional_revolutions(0.0) == 5
    assert spin_duration_ms(5) == 5000


def test_fast_velocity_is_capped():
    assert additional_revolutions(2.0) == 35
    assert spin_duration_ms(35) == 11000


def test_negative_velocity_spins_backwards():
    assert spin_direction(-0.5) == -1
    assert additional_revolutions(-0.5) == additional_revolutions(0.5) == 15


def test_revolutions_round_half_up():
    # 5 + 1.5 * 1 = 6.5 rounds up, not to even
    assert additional_revolutions(1.5, SpinTuning(velocity_scale=1.0)) == 7
    assert round_half_up(2.5) == 3
    assert round_half_up(2.49) == 2


def test_custom_tuning():
    tuning = SpinTuning(base_revolutions=2, base_duration_ms=1000, duration_per_revolution_ms=100)
    assert additional_revolutions(0.0, tuning) == 2
    assert spin_duration_ms(2, tuning) == 1200


# ─── rotation_delta ──────────────────────────────────────────────

def test_rotation_delta_reference_scenario():
    assert segment_angle(4) == 90
    assert rotation_delta(0, 4, 2, 1, 5) == 1620


def test_rotation_delta_cancels_current_rotation():
    delta = rotation_delta(30, 4, 2, 1, 5)
    assert delta == 1590
    assert (30 + delta) % 360 == 180


def test_rotation_delta_backwards():
    delta = rotation_delta(0, 4, 1, -1, 5)
    assert delta == -1890
    assert segment_index_at(delta, 4) == 1


def test_rotation_delta_handles_negative_start():
    delta = rotation_delta(-100, 20, 7, 1, 6)
    assert segment_index_at(-100 + delta, 20) == 7


# ─── segment_index_at ────────────────────────────────────────────

def test_segment_index_at_zero_is_first_segment():
    assert segment_index_at(0, 8) == 0


def test_segment_index_at_boundaries():
    # 4 segments: index 1 sits at -90 degrees, spans -135..-45
    assert segment_index_at(-90, 4) == 1
    assert segment_index_at(-134, 4) == 1
    assert segment_index_at(-46, 4) == 1


# ─── jitter ──────────────────────────────────────────────────────

def test_max_jitter_is_forty_percent_of_segment():
    assert max_jitter(4) == pytest.approx(36.0)
    assert max_jitter(20) < segment_angle(20) / 2


def test_draw_jitter_extremes():
    assert draw_jitter(ScriptedRandom([0.0]), 4) == pytest.approx(-36.0)
    assert draw_jitter(ScriptedRandom([0.5]), 4) == pytest.approx(0.0)
    assert draw_jitter(ScriptedRandom([0.999999]), 4) < 36.0


@pytest.mark.parametrize("segment_count", [4, 7, 20])
def test_jittered_plans_land_on_target(segment_count):
    rng = random.Random(1234)
    rotation = 0.0
    for spin in range(200):
        target_index = spin % segment_count
        velocity = rng.uniform(-3, 3)
        plan = plan_spin(
            prompt_item(target_index), target_index, segment_count,
            rotation, velocity, rng,
        )
        assert abs(plan.jitter) <= max_jitter(segment_count)
        rotation += plan.rotation_delta
        assert segment_index_at(rotation, segment_count) == target_index


def test_plan_spin_reference_values():
    plan = plan_spin(prompt_item(2), 2, 4, 0.0, 0.0, ScriptedRandom([0.5]))
    assert plan.direction == 1
    assert plan.revolutions == 5
    assert plan.duration_ms == 5000
    assert plan.jitter == pytest.approx(0.0)
    assert plan.rotation_delta == pytest.approx(1620.0)
