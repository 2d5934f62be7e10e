"""Error Hierarchy — tests for codes, categories and the error envelope."""

from spinwheel.core.errors import (
    CatalogLoadError, ErrorCategory, ErrorContext, ErrorSeverity,
    ItemNotOnWheelError, NoSpinInProgressError, RuleNotFoundError, SpinWheelError,
)


def test_all_errors_share_base():
    for error in (
        ItemNotOnWheelError("x"), RuleNotFoundError(1),
        NoSpinInProgressError(), CatalogLoadError("bad", "cards.json"),
    ):
        assert isinstance(error, SpinWheelError)


def test_item_not_on_wheel_is_critical_internal():
    error = ItemNotOnWheelError("prompt-1-1")
    assert error.category == ErrorCategory.INTERNAL
    assert error.severity == ErrorSeverity.CRITICAL
    assert not error.recoverable


def test_rule_not_found_is_recoverable():
    assert RuleNotFoundError(7).recoverable


def test_to_dict_envelope():
    error = ItemNotOnWheelError("rule-0-101", ErrorContext(session_id="abc", spin_count=3))
    body = error.to_dict()["error"]
    assert body["code"] == "ITEM_NOT_ON_WHEEL"
    assert body["category"] == "internal"
    assert body["context"]["session_id"] == "abc"
    assert body["context"]["item_id"] == "rule-0-101"
    assert body["context"]["spin_count"] == 3


def test_user_message_overrides_message():
    error = NoSpinInProgressError(ErrorContext(user_message="Wait for the wheel"))
    assert error.to_dict()["error"]["message"] == "Wait for the wheel"


def test_catalog_load_error_keeps_source():
    error = CatalogLoadError("missing", "cards.json")
    assert error.source == "cards.json"
    assert error.context.debug_info == {"source": "cards.json"}
    assert "cards.json" in error.message
