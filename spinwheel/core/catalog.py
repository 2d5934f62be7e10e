"""Card Catalog & Session Rules — immutable card data and per-session flip state.

Invariants:
    - Catalog entities (Rule, RuleGroup, Prompt, Modifier) are frozen after creation
    - One SessionRule per RuleGroup, same id, is_flipped starts False
    - A flip never mutates a SessionRule: it produces a new one

Design Decisions:
    - Frozen dataclasses over dicts: hashable, safe to snapshot into wheel items
    - Tuples for collections: a Catalog can be shared across sessions without copying
"""

from dataclasses import dataclass, replace

from spinwheel.core.domain_types import ModifierType, RuleSpecial


@dataclass(frozen=True)
class Rule:
    id: int
    name: str
    description: str
    special: RuleSpecial | None = None

    @property
    def is_buzzer(self) -> bool:
        return self.special == RuleSpecial.BUZZER


@dataclass(frozen=True)
class RuleGroup:
    """A primary rule and its flipped counterpart."""
    id: int
    name: str
    primary_rule: Rule
    flipped_rule: Rule


@dataclass(frozen=True)
class Prompt:
    id: int
    text: str


@dataclass(frozen=True)
class Modifier:
    id: int
    type: ModifierType
    name: str
    description: str


@dataclass(frozen=True)
class Catalog:
    """Read-only card data, loaded once at startup."""
    rule_groups: tuple[RuleGroup, ...] = ()
    prompts: tuple[Prompt, ...] = ()
    modifiers: tuple[Modifier, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not (self.rule_groups or self.prompts or self.modifiers)

    def without_buzzer_rules(self) -> "Catalog":
        """Drop rule groups whose primary rule is a buzzer rule."""
        return replace(
            self,
            rule_groups=tuple(
                g for g in self.rule_groups if not g.primary_rule.is_buzzer
            ),
        )


@dataclass(frozen=True)
class SessionRule:
    """Per-session wrapper around a RuleGroup tracking which face is up."""
    id: int
    group_name: str
    primary: Rule
    flipped: Rule
    is_flipped: bool = False

    @property
    def active_rule(self) -> Rule:
        return self.flipped if self.is_flipped else self.primary

    @property
    def inactive_rule(self) -> Rule:
        return self.primary if self.is_flipped else self.flipped

    def toggled(self) -> "SessionRule":
        return replace(self, is_flipped=not self.is_flipped)

    def owns(self, rule_id: int) -> bool:
        """Whether either face of this group carries rule_id."""
        return rule_id in (self.primary.id, self.flipped.id)


def create_session_rules(rule_groups: tuple[RuleGroup, ...] | list[RuleGroup]) -> tuple[SessionRule, ...]:
    """Start-of-session copy of the catalog rule groups, all unflipped."""
    return tuple(
        SessionRule(
            id=group.id,
            group_name=group.name,
            primary=group.primary_rule,
            flipped=group.flipped_rule,
        )
        for group in rule_groups
    )


def find_session_rule(
    session_rules: tuple[SessionRule, ...], rule_id: int,
) -> SessionRule | None:
    """Session rule whose primary or flipped face has rule_id."""
    for session_rule in session_rules:
        if session_rule.owns(rule_id):
            return session_rule
    return None
