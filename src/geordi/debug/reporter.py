"""Debug output for slice runs.

The reporter keeps the debug items recorded during a test and renders its
output through the ``geordi.debug`` loggers:

- a boxed table of debug items, logged after each test when debug is enabled;
- a boxed table of stub counts when mocks are applied;
- the expected/actual values of a failed comparison, either stacked
  (``EXPECT:``/``ACTUAL:`` lines) or side by side ("horizontal" logs);
- a character-level difference of the two values.
"""

from __future__ import annotations

import logging
from typing import Any

from geordi.debug.diff_checker import find_differences

logger = logging.getLogger(__name__)

DEBUG_ITEMS_TITLE = "DEBUG ITEMS"
MOCKS_TITLE = "MOCK METRICS"
NO_DEBUG_ITEMS = "No debug items found"
MIN_WIDTH = 26
PADDING = 4
EXPECT_WORD = "EXPECT"
ACTUAL_WORD = "ACTUAL"


def _as_lines(value: Any) -> list[str]:
    return str(value).split("\n")


# ============================================================================
#                               Formatting
# ============================================================================


def make_horizontal_logs(expected: Any, actual: Any) -> str:
    """Render expected and actual side by side, one line of each per row.

    There is one row per line of the longer value; the shorter side is padded
    with blanks. The left column is at least as wide as the ``EXPECT`` title.

    Example:
        ```
        EXPECT    ACTUAL
        foo       bar
        ```
    """
    expected_lines = _as_lines(expected)
    actual_lines = _as_lines(actual)
    width = max(len(EXPECT_WORD), *(len(line) for line in expected_lines))

    rows = []
    for i in range(max(len(expected_lines), len(actual_lines))):
        line = expected_lines[i] if i < len(expected_lines) else ""
        other = actual_lines[i] if i < len(actual_lines) else ""
        rows.append(f"{line}{' ' * (width - len(line) + PADDING)}{other}")

    title_gap = " " * (width - len(EXPECT_WORD) + PADDING)
    return "\n".join([f"{EXPECT_WORD}{title_gap}{ACTUAL_WORD}", *rows])


def format_assertion(
    expected: Any,
    actual: Any,
    message: str | None = None,
    horizontal: bool = False,
) -> str:
    """Render a failed comparison.

    Args:
        expected: The value produced by the expect phase.
        actual: The value produced by the whenever phase.
        message: Optional message, shown as a ``FAILED <message>`` header.
        horizontal: Render side by side instead of stacked.

    Returns:
        str: The rendered report.
    """
    lines = [f"FAILED {message}"] if message else []
    if horizontal:
        lines.append(make_horizontal_logs(expected, actual))
    else:
        lines += [f"EXPECT: {expected}", f"ACTUAL: {actual}"]
    return "\n".join(lines)


def _box(title: str, lines: list[str]) -> str:
    width = max([MIN_WIDTH, *(len(line) for line in lines)])
    bar = "═" * (width + 2)
    left = (width - len(title)) // 2
    right = width - len(title) - left
    heading = f"║ {' ' * left}{title}{' ' * right} ║"
    content = [f"║ {line}{' ' * (width - len(line))} ║" for line in lines]
    return "\n".join([f"╔{bar}╗", heading, f"╠{bar}╣", *content, f"╚{bar}╝"])


def format_debug_items(items: dict[str, Any]) -> str:
    """Render debug items as a box of ``key=value`` lines.

    The box is at least `MIN_WIDTH` characters wide and grows to fit the
    longest line.
    """
    if not items:
        return NO_DEBUG_ITEMS
    return _box(DEBUG_ITEMS_TITLE, [f"{key}={value!r}" for key, value in items.items()])


def format_mock_metrics(counts: dict[str, int]) -> str:
    """Render stub counts as a box of ``# LABEL: n`` lines.

    Example:
        ```
        ╔════════════════════════════╗
        ║        MOCK METRICS        ║
        ╠════════════════════════════╣
        ║ # THROWN: 0                ║
        ║ # CALLED: 2                ║
        ...
        ```
    """
    return _box(MOCKS_TITLE, [f"# {label}: {count}" for label, count in counts.items()])


# ============================================================================
#                               Reporter
# ============================================================================


class DebugReporter:
    """Collects debug items and logs debug output for slice runs."""

    def __init__(self, log: logging.Logger | None = None) -> None:
        self._logger = log or logger
        self.debug_items: dict[str, Any] = {}

    def add_debug_item(self, key: str, value: Any) -> Any:
        """Record `value` under `key` and return it unchanged."""
        self.debug_items[key] = value
        return value

    def log_debug_items(self) -> None:
        """Log the recorded debug items as a boxed table."""
        self._logger.info("%s", format_debug_items(self.debug_items))

    def log_debug_mocks(self, counts: dict[str, int]) -> None:
        """Log the stub counts of the mocks applied for a test."""
        self._logger.info("%s", format_mock_metrics(counts))

    def log_assertion(
        self,
        expected: Any,
        actual: Any,
        message: str | None = None,
        horizontal: bool = False,
    ) -> None:
        """Log the values of a failed comparison."""
        self._logger.warning(
            "%s", format_assertion(expected, actual, message, horizontal)
        )

    def log_differences(self, expected: Any, actual: Any) -> None:
        """Log a character-level difference of the string forms of both values."""
        self._logger.debug("%s", find_differences(str(expected), str(actual)))

    def clear(self) -> None:
        """Forget all recorded debug items."""
        self.debug_items.clear()
