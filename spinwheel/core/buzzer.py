"""Buzzer — the special rule that can go off between turns.

Invariants:
    - Only an ACTIVE session rule whose current face is a buzzer rule can fire
    - Fires with probability buzzer_chance per resolved turn
    - Alert delay is uniform in [2000, 4000) ms
    - PURE: roll_buzzer returns an alert descriptor, the shell schedules it
"""

from dataclasses import dataclass

from spinwheel.core.catalog import Rule, SessionRule
from spinwheel.core.random_source import RandomSource, uniform


BUZZER_CHANCE: float = 0.33
BUZZER_COUNTDOWN_SECONDS: int = 20
MIN_DELAY_MS: float = 2000
MAX_DELAY_MS: float = 4000


@dataclass(frozen=True)
class BuzzerAlert:
    rule: Rule
    session_rule_id: int
    delay_ms: float
    countdown_seconds: int


def find_buzzer_rule(active_rules: tuple[SessionRule, ...]) -> SessionRule | None:
    for session_rule in active_rules:
        if session_rule.active_rule.is_buzzer:
            return session_rule
    return None


def roll_buzzer(
    active_rules: tuple[SessionRule, ...],
    rng: RandomSource,
    chance: float = BUZZER_CHANCE,
    countdown_seconds: int = BUZZER_COUNTDOWN_SECONDS,
) -> BuzzerAlert | None:
    """Decide whether the buzzer goes off after this turn."""
    buzzer_rule = find_buzzer_rule(active_rules)
    if buzzer_rule is None:
        return None
    if rng.random() >= chance:
        return None
    return BuzzerAlert(
        rule=buzzer_rule.active_rule,
        session_rule_id=buzzer_rule.id,
        delay_ms=uniform(rng, MIN_DELAY_MS, MAX_DELAY_MS),
        countdown_seconds=countdown_seconds,
    )
