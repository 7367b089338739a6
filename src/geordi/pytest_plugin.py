"""Pytest integration for GEORDI.

Enable it from a top-level ``conftest.py``:

```py
pytest_plugins = ["geordi.pytest_plugin"]
```

It provides:

- the `unit_sim` fixture, a `UnitSim` configured from ini options, command
  line flags and the ``GEORDI_*`` environment variables;
- `scenarios`, which turns a `SimulationGroup` into a
  ``pytest.mark.parametrize`` mark labelled by scenario.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from geordi import config
from geordi.domain.scenarios import SimulationGroup
from geordi.unit_sim import UnitSim

RESOURCE_FOLDER_INI = "geordi_resource_folder"


def pytest_addoption(parser: pytest.Parser) -> None:
    """Register GEORDI's ini option and command line flags."""
    group = parser.getgroup("geordi", "GEORDI slice tests")
    group.addoption(
        "--geordi-no-debug",
        action="store_true",
        default=False,
        help="Do not log debug items after each slice test.",
    )
    group.addoption(
        "--geordi-horizontal-logs",
        action="store_true",
        default=False,
        help="Render failed comparisons side by side.",
    )
    parser.addini(
        RESOURCE_FOLDER_INI,
        "Folder (relative to the rootdir) holding files for file-backed phases.",
        default="",
    )


def _resource_folder(pytest_config: pytest.Config) -> Path | None:
    if ini_value := pytest_config.getini(RESOURCE_FOLDER_INI):
        return Path(pytest_config.rootpath) / ini_value
    return config.get_resource_dir()


@pytest.fixture
def unit_sim(request: pytest.FixtureRequest) -> UnitSim:
    """A `UnitSim` for the current test.

    ``--geordi-horizontal-logs`` sets the default layout; a test can still
    pass ``horizontal_logs=False`` to ``unit_sim.test()``.
    """
    pytest_config = request.config
    return UnitSim(
        horizontal_logs=(
            pytest_config.getoption("--geordi-horizontal-logs")
            or config.horizontal_logs()
        ),
        resource_folder=_resource_folder(pytest_config),
        debug_enabled=(
            not pytest_config.getoption("--geordi-no-debug")
            and config.debug_enabled()
        ),
    )


def scenarios(group: SimulationGroup) -> pytest.MarkDecorator:
    """Parametrize a test over the selected scenarios of `group`.

    Arguments are the group's variables minus ``scenario``; test ids are the
    scenario labels.

    Example:
        ```py
        @scenarios(SCENARIOS)
        def test_concat(unit_sim, first, second): ...
        ```
    """
    names = group.argument_names()
    selected = group.selected()
    values = [
        tuple(scenario.arguments()[n] for n in names) for scenario in selected.values()
    ]
    if len(names) == 1:
        values = [v[0] for v in values]
    return pytest.mark.parametrize(names, values, ids=list(selected))
