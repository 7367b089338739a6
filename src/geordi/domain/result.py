"""Outcome of a slice run."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from geordi.domain.errors import PhaseError, SliceAssertionError

PASSED_LINE = "PASSED"


class Outcome(str, Enum):
    """How a slice run ended."""

    PASSED = "passed"
    FAILED = "failed"
    ERRORED = "errored"


@dataclass(frozen=True)
class TestResult:
    """The structured result returned by `TestSlice.run`.

    A failed comparison is a `FAILED` outcome carrying both values; a phase
    that raised is an `ERRORED` outcome carrying the wrapping `PhaseError`.
    """

    __test__ = False  # not a pytest test class

    outcome: Outcome
    expected: Any = None
    actual: Any = None
    error: PhaseError | None = None
    message: str | None = None
    render: Callable[[Any, Any, str | None], str] | None = field(
        default=None, compare=False, repr=False
    )

    @property
    def passed(self) -> bool:
        """True when expected and actual matched."""
        return self.outcome is Outcome.PASSED

    @property
    def failed(self) -> bool:
        """True when the comparison did not match."""
        return self.outcome is Outcome.FAILED

    @property
    def errored(self) -> bool:
        """True when a phase raised."""
        return self.outcome is Outcome.ERRORED

    def report(self) -> str:
        """Human-readable description of the result.

        A pass is the single line ``PASSED``; a failure shows both values; an
        error describes the phase that raised.
        """
        if self.passed:
            return PASSED_LINE
        if self.errored:
            return str(self.error)
        if self.render is not None:
            return self.render(self.expected, self.actual, self.message)
        lines = [f"FAILED {self.message}"] if self.message else []
        lines += [f"EXPECT: {self.expected}", f"ACTUAL: {self.actual}"]
        return "\n".join(lines)

    def raise_for_outcome(self) -> None:
        """Raise if the run did not pass.

        Raises:
            SliceAssertionError: If the outcome is `FAILED`.
            PhaseError: The wrapped phase error if the outcome is `ERRORED`.
        """
        if self.errored and self.error is not None:
            raise self.error
        if self.failed:
            raise SliceAssertionError(self.report(), self.expected, self.actual)
