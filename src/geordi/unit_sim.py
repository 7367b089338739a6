"""Per-test driver that builds, runs and finalizes slices."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Any, TypeVar

from geordi.debug.reporter import DebugReporter
from geordi.domain.result import TestResult
from geordi.domain.test_slice import TestSlice
from geordi.mocking import MockRegistry, MockTask

logger = logging.getLogger(__name__)

T = TypeVar("T")


class UnitSim:
    """Entry point for writing slice tests.

    A `UnitSim` owns the debug reporter, mocks and resource folder shared by
    the slices of one test class or module. `test()` is used as a context
    manager: phases are registered inside the block, and the slice runs when
    the block exits cleanly.

    Example:
        ```py
        sim = UnitSim()

        def test_bare_minimum():
            with sim.test() as t:
                t.expect(lambda props: 15)
                t.whenever(lambda props: len("Hello Universe!"))
        ```

    Args:
        resource_folder: Folder that file-backed phases resolve names against.
        reporter: Debug reporter; a fresh one by default.
        debug_enabled: Log the debug items recorded during each test.
        horizontal_logs: Layout used by tests that do not choose one.
    """

    def __init__(
        self,
        resource_folder: str | Path | None = None,
        reporter: DebugReporter | None = None,
        debug_enabled: bool = True,
        horizontal_logs: bool = False,
    ) -> None:
        self.resource_folder = resource_folder
        self.reporter = reporter or DebugReporter()
        self.debug_enabled = debug_enabled
        self.horizontal_logs = horizontal_logs
        self.mocks = MockRegistry()

    def debug(self, value: T, key: str | None = None) -> T:
        """Record `value` as a debug item and return it unchanged.

        The key defaults to the number of items recorded so far.
        """
        if key is None:
            key = str(len(self.reporter.debug_items))
        return self.reporter.add_debug_item(key, value)

    # --- Mocks ---

    def mock(self, spec: Any) -> Any:
        """Create an autospecced mock of `spec` that this driver verifies."""
        return self.mocks.mock(spec)

    def every(self, method: Callable[..., Any], *args: Any, **kwargs: Any) -> MockTask:
        """Stub `method` for calls with exactly these arguments.

        Call it from a ``setup_mocks`` phase; configure the answer with
        ``.returns(value)`` or ``.throws(exc)``.
        """
        return self.mocks.every(method, *args, **kwargs)

    # --- Slices ---

    def new_slice(self, horizontal_logs: bool | None = None) -> TestSlice:
        """Create a slice wired to this driver's reporter, mocks and resource folder.

        Args:
            horizontal_logs: Layout of a failure report; None uses the driver's
                default.
        """
        return TestSlice(
            self.horizontal_logs if horizontal_logs is None else horizontal_logs,
            resource_folder=self.resource_folder,
            reporter=self.reporter,
            mocks=self.mocks,
        )

    @contextmanager
    def test(self, horizontal_logs: bool | None = None) -> Iterator[TestSlice]:
        """Yield a slice to configure, then run it and raise if it did not pass.

        Raises:
            IncompleteSliceError: If expect or whenever was not registered.
            SliceAssertionError: If expected and actual differ.
            PhaseError: If a phase raised, or mock verification failed.
        """
        slice_ = self.new_slice(horizontal_logs)
        try:
            yield slice_
        except BaseException:
            self._cleanup()
            raise
        self.run(slice_).raise_for_outcome()

    def run(self, slice_: TestSlice) -> TestResult:
        """Run a slice, log debug items and reset debug items and mocks.

        Returns:
            TestResult: The result, without raising for failures.
        """
        try:
            result = slice_.run()
            if self.debug_enabled:
                self.reporter.log_debug_items()
        finally:
            self._cleanup()
        return result

    def _cleanup(self) -> None:
        self.reporter.clear()
        self.mocks.clear()
