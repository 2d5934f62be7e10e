"""Domain Types — enums and constants shared by every core module.

Invariants:
    - PROMPT_RATIO + RULE_RATIO <= 1.0 (modifiers take the remainder)
    - All valid item/modifier kinds encoded as Enums, no raw string matching

Design Decisions:
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum


# ─── Enums ───────────────────────────────────────────────────────

class WheelItemType(str, Enum):
    """What occupies a wheel slot. END is terminal for the slot."""
    RULE = "RULE"
    PROMPT = "PROMPT"
    MODIFIER = "MODIFIER"
    END = "END"


class ModifierType(str, Enum):
    """Modifier card kinds."""
    SWAP = "SWAP"
    FLIP = "FLIP"
    CLONE = "CLONE"
    LEFT = "LEFT"
    RIGHT = "RIGHT"


class RuleSpecial(str, Enum):
    """Rules with extra mechanics beyond being read aloud."""
    BUZZER = "BUZZER"


class GestureKind(str, Enum):
    """How a pointer drag on the wheel was interpreted."""
    FLICK = "flick"
    TAP = "tap"
    IGNORED = "ignored"


# ─── Deck Composition ────────────────────────────────────────────

TOTAL_SEGMENTS: int = 20
PROMPT_RATIO: float = 0.5
RULE_RATIO: float = 0.3
MODIFIER_RATIO: float = 0.2  # informational, modifiers absorb rounding

USED_ID_PREFIX: str = "used-"


# ─── Spin Tuning ─────────────────────────────────────────────────

EARLY_SPIN_GUARD: int = 5             # spins before END slots become selectable
BASE_REVOLUTIONS: int = 5
VELOCITY_SCALE: float = 20.0
MAX_VELOCITY_BONUS: float = 30.0
BASE_DURATION_MS: int = 4000
DURATION_PER_REVOLUTION_MS: int = 200
JITTER_FRACTION: float = 0.8          # of one segment, split either side of center


# ─── Players ─────────────────────────────────────────────────────

MIN_PLAYERS: int = 1
MAX_PLAYERS: int = 8
