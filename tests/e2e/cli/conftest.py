"""Fixtures and test helpers for end-to-end CLI tests.

Provides a test-only `log-demo` Click command that emits log messages at every
level, plus fixtures to register that command and obtain a CliRunner.
"""

import logging
from pathlib import Path

import click
import pytest
from click.testing import CliRunner

from geordi.entrypoints.cli.main import geordi

# pylint: disable=redefined-outer-name


E2E_ROOT = Path(__file__).parent.parent.resolve()


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    """Mark every test under `tests/e2e/` as end-to-end."""
    for item in items:
        if E2E_ROOT in item.path.resolve().parents:
            item.add_marker(pytest.mark.e2e)


@click.command()
def log_demo():
    """Emit representative log messages for CLI logging tests.

    Emits DEBUG/INFO/WARNING/ERROR/CRITICAL messages on the 'geordi.demo'
    logger and additional messages on a 'some.thirdparty' logger to exercise
    logger-level filtering.
    """
    logger = logging.getLogger("geordi.demo")
    logger.debug("This is a debug-level test message.")
    logger.info("This is an info-level test message.")
    logger.warning("This is a warning-level test message.")
    logger.error("This is an error-level test message.")
    logger.critical("This is a critical-level test message.")
    third_party_logger = logging.getLogger("some.thirdparty")
    third_party_logger.debug("This is a debug-level third-party test message.")
    third_party_logger.info("This is an info-level third-party test message.")


def _remove_command_everywhere(group, name: str) -> None:
    """Remove a command from a Click group and its internal sections."""
    group.commands.pop(name, None)
    if hasattr(group, "_default_section"):
        group._default_section.commands.pop(name, None)  # pylint: disable=protected-access
    for sec in getattr(group, "_sections", []):
        getattr(sec, "commands", {}).pop(name, None)


@pytest.fixture
def registered_log_demo():
    """Register the 'log-demo' command for the duration of a test."""
    geordi.add_command(log_demo, name="log-demo")
    try:
        yield
    finally:
        _remove_command_everywhere(geordi, "log-demo")


@pytest.fixture
def runner():
    """Return a Click CliRunner for invoking CLI commands in tests."""
    return CliRunner()
