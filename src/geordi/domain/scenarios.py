"""Named scenario groups for running one test function over several inputs."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from geordi.domain.errors import DuplicateScenarioError, ScenarioArityError

SCENARIO_VAR = "scenario"


@dataclass
class Scenario:
    """One set of values, keyed by variable name.

    Attributes:
        content: Variable name to value, in declaration order.
        isolated: Whether the scenario belongs to the isolated group. When any
            scenario of a group is isolated, only isolated ones are run.
    """

    content: dict[str, Any]
    isolated: bool = False

    def arguments(self) -> dict[str, Any]:
        """The values passed to the test function (the label variable excluded)."""
        return {k: v for k, v in self.content.items() if k != SCENARIO_VAR}


@dataclass
class SimulationGroup:
    """An ordered collection of labelled scenarios sharing the same variables.

    Example:
        ```py
        SCENARIOS = (
            SimulationGroup.vars("scenario", "first", "second")
            .with_("equal", "a", "a")
            .with_("different", "a", "b")
        )
        ```
    """

    names: tuple[str, ...]
    content: dict[str, Scenario] = field(default_factory=dict)

    @classmethod
    def vars(cls, *names: str) -> SimulationGroup:
        """Create a group declaring the variable `names`."""
        return cls(tuple(names))

    def with_(self, *values: Any) -> SimulationGroup:
        """Add a scenario.

        The label is the first value, or the scenario's 1-based position when
        the first value is None.

        Raises:
            ScenarioArityError: If the number of values differs from the
                number of declared variables.
            DuplicateScenarioError: If the label is already taken.
        """
        if len(values) != len(self.names):
            raise ScenarioArityError(self.names, values)
        first = values[0] if values else None
        label = str(first if first is not None else len(self.content) + 1)
        if label in self.content:
            raise DuplicateScenarioError(label)
        self.content[label] = Scenario(dict(zip(self.names, values)))
        return self

    def isolate(self) -> SimulationGroup:
        """Mark the most recently added scenario as isolated."""
        self._last().isolated = True
        return self

    def ignore(self) -> SimulationGroup:
        """Exclude the most recently added scenario from the run.

        When nothing is isolated yet, every other scenario is isolated first,
        so the net effect is that all scenarios but the last one run.
        """
        scenarios = list(self.content.values())
        if not any(s.isolated for s in scenarios):
            for scenario in scenarios[:-1]:
                scenario.isolated = True
        self._last().isolated = False
        return self

    def extract_isolated(self) -> dict[str, Scenario]:
        """Return only the isolated scenarios, keyed by label."""
        return {k: v for k, v in self.content.items() if v.isolated}

    def selected(self) -> dict[str, Scenario]:
        """The scenarios to run: the isolated ones if any, otherwise all."""
        return self.extract_isolated() or dict(self.content)

    def argument_names(self) -> list[str]:
        """The variable names passed to the test function."""
        return [n for n in self.names if n != SCENARIO_VAR]

    def _last(self) -> Scenario:
        if not self.content:
            raise IndexError("Simulation group has no scenarios.")
        return next(reversed(self.content.values()))

    def __len__(self) -> int:
        return len(self.content)
