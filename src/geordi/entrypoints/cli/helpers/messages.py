"""Terminal message helpers for the GEORDI CLI.

Small helpers for rendering status lines with emoji→ASCII fallbacks.
Messages write to stderr so stdout only carries the comparison output.
"""

import click


def _supports_character(character: str) -> bool:
    """Return True if *character* can be encoded on stderr.

    Decides whether to emit emojis or fall back to ASCII, so terminals
    without UTF-8 don't raise `UnicodeEncodeError`.

    Args:
        character: A single Unicode character to try (e.g., "⚠️", "✅").

    Returns:
        bool: True if encoding succeeds; False on `UnicodeEncodeError`.
    """
    stream = click.get_text_stream("stderr")  # pragma: no mutate
    encoding = getattr(stream, "encoding", None) or "ascii"
    try:
        character.encode(encoding)
    except UnicodeEncodeError:
        return False
    return True


def _glyph(emoji: str, fallback: str) -> str:
    return emoji if _supports_character(emoji) else fallback


def caution_glyph() -> str:
    """Warning marker suitable for terminals with/without emoji support.

    Returns:
        str: "⚠️" when stderr supports it; otherwise the ASCII fallback "[!]".
    """
    return _glyph("⚠️", "[!]")  # pragma: no mutate


def success_glyph() -> str:
    """Success marker with graceful fallbacks.

    Returns:
        str: "✅" or "[OK]" depending on stderr support.
    """
    return _glyph("✅", "[OK]")  # pragma: no mutate


def warn(msg: str) -> None:
    """Emit a yellow, bold warning line to **stderr** with a caution glyph.

    Args:
        msg: The message to display.

    Note:
        Warnings go to **stderr** so they don't mix with the difference
        report written to stdout.

    Example:
        ``⚠️  Values differ.``
    """
    click.secho(f"{caution_glyph()}  {msg}", fg="yellow", bold=True, err=True)


def success(msg: str) -> None:
    """Emit a green, bold success line to **stderr** with a success glyph.

    Args:
        msg: The message to display.

    Example:
        ``✅  Values are identical.``
    """
    click.secho(f"{success_glyph()}  {msg}", fg="green", bold=True, err=True)
