"""Game Session — imperative shell that owns one game's state and drives the core.

Invariants:
    - GameSession holds the ONLY reference to WheelState; every transition
      replaces it wholesale with the value returned by a pure core function
    - No second spin while one is animating (WheelState.is_spinning guard)
    - No spin while game over is flagged; keep_playing or reset clears it
    - on_spin_end is called exactly once per committed spin and consumes
      exactly the item the resolver selected
    - Rejected spins and rejected flips are silent no-ops: they return None
      and are logged, never raised

Design Decisions:
    - PURE core, IMPURE shell: randomness, logging and session identity live here
    - Flips are ignored while a spin is in flight: re-populating mid-spin could
      drop the pending target from the wheel before it is consumed
"""

import logging
import random
import uuid
from dataclasses import dataclass

from spinwheel.config import Settings, get_settings
from spinwheel.core.buzzer import BuzzerAlert, roll_buzzer
from spinwheel.core.catalog import Catalog, SessionRule, create_session_rules, find_session_rule
from spinwheel.core.deck_populator import populate_wheel
from spinwheel.core.domain_types import WheelItemType
from spinwheel.core.errors import ErrorContext, NoSpinInProgressError
from spinwheel.core.gesture import interpret_gesture
from spinwheel.core.random_source import RandomSource
from spinwheel.core.scoreboard import (
    Player, change_score, create_players, ranked, rename_player, winners,
)
from spinwheel.core.session_stats import compute_session_stats
from spinwheel.core.spin_physics import SpinPlan, segment_index_at
from spinwheel.core.spin_resolver import rejection_reason, resolve_spin
from spinwheel.core.wheel_items import WheelItem
from spinwheel.core.wheel_state import (
    WheelState, begin_spin, consume_item, finish_spin, flip_rule,
    initialize_wheel, reconcile_after_flip,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SpinOutcome:
    """What the rendering layer shows once the wheel stops."""
    item: WheelItem
    final_rotation: float
    game_over: bool
    activated_rule: SessionRule | None = None
    buzzer: BuzzerAlert | None = None


class GameSession:
    """One local game: session rules, wheel, players and spin lifecycle."""

    def __init__(
        self,
        catalog: Catalog,
        settings: Settings | None = None,
        rng: RandomSource | None = None,
        session_id: str | None = None,
    ):
        self.catalog = catalog
        self.settings = settings or get_settings()
        self.rng = rng or random.Random(self.settings.random_seed)
        self.session_id = session_id or uuid.uuid4().hex[:12]
        self.session_rules: tuple[SessionRule, ...] = ()
        self.active_rules: tuple[SessionRule, ...] = ()
        self.players: tuple[Player, ...] = ()
        self.wheel = WheelState()
        self.game_over = False

    # --- Lifecycle ---------------------------------------------------------------

    def start(self, player_count: int | None = None) -> WheelState:
        """New session rules, new players, fresh wheel."""
        count = (
            self.settings.default_player_count if player_count is None else player_count
        )
        self.players = create_players(count)
        self.session_rules = create_session_rules(self.catalog.rule_groups)
        self.active_rules = ()
        self.game_over = False
        self.wheel = initialize_wheel(
            self.session_rules, self.catalog, self.rng,
            self.settings.total_segments,
        )
        logger.info(
            "Game started with %d players and %d segments",
            count, self.wheel.segment_count,
            extra={"session_id": self.session_id},
        )
        return self.wheel

    def reset(self) -> WheelState:
        """New game with the same number of players."""
        return self.start(len(self.players) if self.players else None)

    def keep_playing(self) -> None:
        """Dismiss game over and keep spinning the same wheel."""
        if not self.game_over:
            return
        self.game_over = False
        logger.info(
            "Game over dismissed, play continues",
            extra={"session_id": self.session_id,
                   "spin_count": self.wheel.spin_count},
        )

    # --- Rules -------------------------------------------------------------------

    def flip_rule(self, rule_id: int) -> WheelState | None:
        """Toggle a rule group and re-populate the wheel around used slots."""
        if self.wheel.is_spinning:
            logger.info(
                "Flip ignored while spinning",
                extra={"session_id": self.session_id, "rule_id": rule_id,
                       "reason": "already_spinning"},
            )
            return None

        self.session_rules = flip_rule(self.session_rules, rule_id)
        flipped = next(r for r in self.session_rules if r.id == rule_id)
        self.active_rules = tuple(
            flipped if active.id == rule_id else active
            for active in self.active_rules
        )

        fresh = populate_wheel(
            self.session_rules, self.catalog.prompts, self.catalog.modifiers,
            self.rng, self.settings.total_segments,
        )
        self.wheel = reconcile_after_flip(self.wheel, fresh)
        logger.info(
            "Rule flipped to '%s'", flipped.active_rule.name,
            extra={"session_id": self.session_id, "rule_id": rule_id,
                   "spin_count": self.wheel.spin_count},
        )
        return self.wheel

    # --- Spinning ----------------------------------------------------------------

    def request_spin(self, velocity: float = 0.0) -> SpinPlan | None:
        """Commit a spin for a gesture velocity, or ignore the request."""
        if self.game_over:
            logger.info(
                "Spin request ignored",
                extra={"session_id": self.session_id, "velocity": velocity,
                       "reason": "game_over"},
            )
            return None

        plan = resolve_spin(
            self.wheel, velocity, self.rng,
            tuning=self.settings.spin_tuning,
            early_spin_guard=self.settings.early_spin_guard,
        )
        if plan is None:
            logger.info(
                "Spin request ignored",
                extra={
                    "session_id": self.session_id,
                    "velocity": velocity,
                    "reason": rejection_reason(
                        self.wheel, self.settings.early_spin_guard,
                    ),
                },
            )
            return None

        self.wheel = begin_spin(self.wheel, plan)
        logger.info(
            "Spin committed",
            extra={
                "session_id": self.session_id,
                "item_id": plan.target.id,
                "item_type": plan.target.type.value,
                "velocity": velocity,
                "duration_ms": plan.duration_ms,
                "spin_count": self.wheel.spin_count,
            },
        )
        return plan

    def request_gesture(self, distance_px: float, duration_ms: float) -> SpinPlan | None:
        """Interpret a pointer drag and spin when it is a flick or a tap."""
        gesture = interpret_gesture(distance_px, duration_ms)
        if not gesture.spins:
            logger.debug(
                "Gesture ignored",
                extra={"session_id": self.session_id, "reason": gesture.kind.value},
            )
            return None
        return self.request_spin(gesture.velocity)

    def on_spin_end(self) -> SpinOutcome:
        """Animation finished: consume the landed item and report the result."""
        self.wheel, plan = finish_spin(self.wheel)
        if plan is None:
            raise NoSpinInProgressError(ErrorContext(
                session_id=self.session_id, spin_count=self.wheel.spin_count,
            ))

        landed_index = segment_index_at(self.wheel.rotation, self.wheel.segment_count)
        if landed_index != plan.target_index:
            logger.warning(
                "Pointer index %d differs from planned index %d",
                landed_index, plan.target_index,
                extra={"session_id": self.session_id, "item_id": plan.target.id},
            )

        item = plan.target
        self.wheel = consume_item(self.wheel, item.id)

        if item.is_end:
            self.game_over = True
            logger.info(
                "Landed on END, game over",
                extra={"session_id": self.session_id,
                       "spin_count": self.wheel.spin_count},
            )
            return SpinOutcome(
                item=item, final_rotation=self.wheel.rotation, game_over=True,
            )

        activated = self._activate_rule(item)
        buzzer = None
        if self.settings.buzzer_enabled:
            buzzer = roll_buzzer(
                self.active_rules, self.rng,
                chance=self.settings.buzzer_chance,
                countdown_seconds=self.settings.buzzer_countdown_seconds,
            )

        logger.info(
            "Spin resolved",
            extra={
                "session_id": self.session_id,
                "item_id": item.id,
                "item_type": item.type.value,
                "spin_count": self.wheel.spin_count,
            },
        )
        return SpinOutcome(
            item=item,
            final_rotation=self.wheel.rotation,
            game_over=False,
            activated_rule=activated,
            buzzer=buzzer,
        )

    def _activate_rule(self, item: WheelItem) -> SessionRule | None:
        """Landed RULE joins the active rules once."""
        if item.type != WheelItemType.RULE:
            return None
        session_rule = find_session_rule(self.session_rules, item.data.id)
        if session_rule is None:
            return None
        if any(active.id == session_rule.id for active in self.active_rules):
            return None
        self.active_rules = self.active_rules + (session_rule,)
        return session_rule

    # --- Players -----------------------------------------------------------------

    def change_score(self, player_id: int, delta: int) -> tuple[Player, ...]:
        self.players = change_score(self.players, player_id, delta)
        return self.players

    def rename_player(self, player_id: int, name: str) -> tuple[Player, ...]:
        self.players = rename_player(self.players, player_id, name)
        return self.players

    def winners(self) -> list[Player]:
        return winners(self.players)

    def standings(self) -> list[Player]:
        return ranked(self.players)

    # --- Presentation ------------------------------------------------------------

    def stats(self) -> dict:
        return {
            **compute_session_stats(self.wheel),
            "active_rules": len(self.active_rules),
            "game_over": self.game_over,
        }
