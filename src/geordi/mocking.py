"""Stubbed collaborators for slice tests, built on `unittest.mock`.

A `MockRegistry` creates autospecced mocks and records stubs registered with
`every`. Stubs are applied in the slice's ``setup_mocks`` phase, between
``expect`` and ``whenever``; after a passing comparison the registry verifies
that every stub was called and that no mock received a call without a stub.

Example:
    ```py
    repo = sim.mock(UserRepository)

    with sim.test() as t:
        t.expect_value(User("test", "1"))

        @t.setup_mocks
        def _(props):
            sim.every(repo.find_user_by_name, "test").returns(User("test", "1"))

        t.whenever(lambda props: UserService(repo).find("test"))
    ```
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any
from unittest import mock

from geordi.domain.errors import UnstubbedCallError

# pylint: disable=too-few-public-methods


def _describe(target: Any, args: tuple[Any, ...], kwargs: dict[str, Any]) -> str:
    return f"{target!r} with {mock.call(*args, **kwargs)!r}"


class MockTask:
    """One stub: a mocked method, the arguments it matches and its answer.

    `returns` and `throws` configure the answer and return the task, so a
    stub reads ``every(repo.save, user).returns(user)``. A task with neither
    answers None.
    """

    def __init__(
        self, method: Callable[..., Any], args: tuple[Any, ...], kwargs: dict[str, Any]
    ) -> None:
        self.method = method
        self.args = args
        self.kwargs = kwargs
        self.returned: Any = None
        self.throwable: BaseException | None = None

    def returns(self, value: Any) -> MockTask:
        """Answer matching calls with `value`."""
        self.returned = value
        return self

    def throws(self, exc: BaseException) -> MockTask:
        """Answer matching calls by raising `exc`."""
        self.throwable = exc
        return self

    def matches(self, method: Any, args: tuple[Any, ...], kwargs: dict[str, Any]) -> bool:
        """True when a call of `method` with these arguments is covered by the stub."""
        return method is self.method and args == self.args and kwargs == self.kwargs

    def answer(self) -> Any:
        if self.throwable is not None:
            raise self.throwable
        return self.returned

    def __repr__(self) -> str:
        return f"MockTask({_describe(self.method, self.args, self.kwargs)})"


@dataclass(frozen=True)
class MockMetrics:
    """Counts of the stubs applied for one test."""

    thrown: int = 0
    called: int = 0
    null: int = 0
    returned: int = 0

    def as_counts(self) -> dict[str, int]:
        """Counts keyed by the labels shown in the metrics box."""
        return {
            "THROWN": self.thrown,
            "CALLED": self.called,
            "NULL": self.null,
            "RETURNED": self.returned,
        }


class MockRegistry:
    """Mocks and stubs shared by the tests of one `UnitSim`."""

    def __init__(self) -> None:
        self.mocks: list[Any] = []
        self.tasks: list[MockTask] = []

    def mock(self, spec: Any) -> Any:
        """Create an autospecced mock of `spec` (a class or an object).

        Calling a method with arguments the real method rejects raises
        `TypeError`.
        """
        created = mock.create_autospec(spec, instance=isinstance(spec, type))
        self.mocks.append(created)
        return created

    def every(self, method: Callable[..., Any], *args: Any, **kwargs: Any) -> MockTask:
        """Stub calls of `method` made with exactly these arguments."""
        task = MockTask(method, args, kwargs)
        self.tasks.append(task)
        return task

    def apply(self) -> MockMetrics:
        """Install the recorded stubs on their mocks.

        Each stubbed method answers from the most recently registered stub
        matching the call, and raises `UnstubbedCallError` for any other call.

        Returns:
            MockMetrics: How many stubs throw, return None, or return a value.
        """
        by_method: dict[int, list[MockTask]] = {}
        for task in self.tasks:
            by_method.setdefault(id(task.method), []).append(task)
        for tasks in by_method.values():
            tasks[0].method.side_effect = _dispatcher(tasks)

        runnable = [t for t in self.tasks if t.throwable is None]
        null = sum(1 for t in runnable if t.returned is None)
        return MockMetrics(
            thrown=len(self.tasks) - len(runnable),
            called=len(runnable),
            null=null,
            returned=len(runnable) - null,
        )

    def verify(self) -> None:
        """Check that every stub was called and every mock call was stubbed.

        Raises:
            AssertionError: Listing the stubs never called or the calls no stub
                covers.
        """
        problems = []
        for task in self.tasks:
            try:
                task.method.assert_any_call(*task.args, **task.kwargs)
            except AssertionError:
                described = _describe(task.method, task.args, task.kwargs)
                problems.append(f"stub never called: {described}")

        for created in self.mocks:
            for name, args, kwargs in created.mock_calls:
                if name.startswith("__") or "()" in name:
                    continue
                target = _resolve(created, name)
                if not any(t.matches(target, args, kwargs) for t in self.tasks):
                    described = _describe(target, args, kwargs)
                    problems.append(f"call without a stub: {described}")

        if problems:
            raise AssertionError("Mock verification failed:\n" + "\n".join(problems))

    def clear(self) -> None:
        """Forget all stubs and reset the recorded calls of every mock."""
        for task in self.tasks:
            task.method.side_effect = None
        self.tasks.clear()
        for created in self.mocks:
            created.reset_mock()


def _resolve(root: Any, name: str) -> Any:
    target = root
    for part in filter(None, name.split(".")):
        target = getattr(target, part)
    return target


def _dispatcher(tasks: list[MockTask]) -> Callable[..., Any]:
    def side_effect(*args: Any, **kwargs: Any) -> Any:
        for task in reversed(tasks):
            if task.args == args and task.kwargs == kwargs:
                return task.answer()
        raise UnstubbedCallError(_describe(tasks[0].method, args, kwargs))

    return side_effect
