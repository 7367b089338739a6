"""Debug helpers: string differences and debug/assertion reporting."""

from .diff_checker import Difference, DifferenceGroup, find_differences
from .reporter import DebugReporter, format_assertion, make_horizontal_logs

__all__ = [
    "DebugReporter",
    "Difference",
    "DifferenceGroup",
    "find_differences",
    "format_assertion",
    "make_horizontal_logs",
]
