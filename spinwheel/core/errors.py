"""Error Hierarchy — typed, categorized exceptions for every game failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Rejected spins are NOT errors (silent no-op, logged by the shell)
    - Consume id mismatch is an invariant violation: CRITICAL, never recovered
    - to_dict() produces the envelope handed to the rendering layer

Design Decisions:
    - Single hierarchy with SpinWheelError base: callers catch one type
    - ErrorContext as dataclass: rich observability without coupling to logging
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    BUSINESS_RULE = "business_rule"
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    session_id: str | None = None
    item_id: str | None = None
    rule_id: int | None = None
    spin_count: int | None = None
    user_message: str | None = None
    debug_info: dict[str, Any] | None = None


class SpinWheelError(Exception):
    """Base exception for all game errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()

    @property
    def recoverable(self) -> bool:
        return self.severity in (ErrorSeverity.INFO, ErrorSeverity.WARNING)

    def to_dict(self) -> dict:
        """Convert to the error envelope shown by the rendering layer."""
        return {
            "error": {
                "code": self.code,
                "message": self.context.user_message or self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "recoverable": self.recoverable,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "session_id": self.context.session_id,
                    "item_id": self.context.item_id,
                    "rule_id": self.context.rule_id,
                    "spin_count": self.context.spin_count,
                },
            }
        }


# ─── Game Errors ────────────────────────────────────────────────

class ItemNotOnWheelError(SpinWheelError):
    """Consume targeted an id that never existed on the wheel."""
    def __init__(self, item_id: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.item_id = item_id
        super().__init__(
            f"Wheel item '{item_id}' is not on the wheel; "
            "selection and consumption disagree",
            "ITEM_NOT_ON_WHEEL", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, ctx,
        )
        self.item_id = item_id


class RuleNotFoundError(SpinWheelError):
    """Flip requested for a rule group that is not in the session."""
    def __init__(self, rule_id: int, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.rule_id = rule_id
        super().__init__(
            f"Session rule '{rule_id}' not found",
            "RULE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, ctx,
        )
        self.rule_id = rule_id


class NoSpinInProgressError(SpinWheelError):
    """on_spin_end called without a spin in flight."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "No spin in progress; on_spin_end must follow exactly one spin",
            "NO_SPIN_IN_PROGRESS", ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR, context,
        )


# ─── Scoreboard Errors ──────────────────────────────────────────

class InvalidPlayerCountError(SpinWheelError):
    """Player count outside the supported range."""
    def __init__(
        self, count: int, minimum: int, maximum: int,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            f"Player count must be between {minimum} and {maximum}, got {count}",
            "INVALID_PLAYER_COUNT", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context,
        )
        self.count = count


class PlayerNotFoundError(SpinWheelError):
    """Score or name change for an unknown player."""
    def __init__(self, player_id: int, context: ErrorContext | None = None):
        super().__init__(
            f"Player '{player_id}' not found",
            "PLAYER_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, context,
        )
        self.player_id = player_id


class InvalidPlayerNameError(SpinWheelError):
    """Blank player name."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Player name cannot be empty or whitespace",
            "INVALID_PLAYER_NAME", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context,
        )


# ─── Infrastructure Errors ──────────────────────────────────────

class CatalogLoadError(SpinWheelError):
    """Catalog file unreadable or failed validation."""
    def __init__(self, message: str, source: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.debug_info = {"source": source}
        super().__init__(
            f"Card catalog '{source}' could not be loaded: {message}",
            "CATALOG_LOAD_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.CRITICAL, ctx,
        )
        self.source = source
