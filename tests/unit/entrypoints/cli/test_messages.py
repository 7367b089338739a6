"""Unit tests for the CLI message helpers."""

import pytest

from geordi.entrypoints.cli.helpers import messages

# pylint: disable=magic-value-comparison


@pytest.mark.parametrize(
    ("emit", "text"),
    [
        (messages.warn, "Values differ."),
        (messages.success, "Values are identical."),
    ],
)
def test_messages_go_to_stderr(
    capsys: pytest.CaptureFixture[str], emit, text: str
) -> None:
    """Status lines are written to stderr, never stdout."""
    emit(text)
    captured = capsys.readouterr()
    assert captured.out == ""
    assert text in captured.err


@pytest.mark.parametrize(
    ("glyph", "fallback"),
    [
        (messages.caution_glyph, "[!]"),
        (messages.success_glyph, "[OK]"),
    ],
)
def test_ascii_fallback(monkeypatch: pytest.MonkeyPatch, glyph, fallback: str) -> None:
    """Glyphs fall back to ASCII when stderr cannot encode them."""
    monkeypatch.setattr(messages, "_supports_character", lambda _c: False)
    assert glyph() == fallback
