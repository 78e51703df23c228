"""Unit tests — secret redaction for logs and failure text."""

from nodiff.infrastructure.observability.redaction_service import (
    redact_dict,
    redact_text,
    redaction_processor,
)


def test_github_tokens_are_redacted() -> None:
    text = f"token ghs_{'a' * 36} and github_pat_{'B' * 30}"

    assert redact_text(text) == "token [REDACTED] and [REDACTED]"


def test_bearer_header_is_redacted() -> None:
    assert redact_text("sent Bearer abc.def-123") == "sent Bearer [REDACTED]"


def test_plain_text_is_untouched() -> None:
    assert redact_text("You made meaningless changes to:\n- a.js") == (
        "You made meaningless changes to:\n- a.js"
    )


def test_sensitive_keys_are_masked_recursively() -> None:
    data = {"github_token": "x", "nested": {"Authorization": "y", "files": ["a.js"]}}

    assert redact_dict(data) == {
        "github_token": "[REDACTED]",
        "nested": {"Authorization": "[REDACTED]", "files": ["a.js"]},
    }


def test_processor_scrubs_event_dict() -> None:
    event = {"event": "calling GitHub", "header": "Bearer ghu_" + "z" * 36}

    assert redaction_processor(None, "info", event)["header"] == "Bearer [REDACTED]"
