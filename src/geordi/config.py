"""Configuration utilities for GEORDI.

This module centralizes the environment variables read by the harness.
"""

import os
from pathlib import Path

RESOURCE_DIR_ENV = "GEORDI_RESOURCE_DIR"  # pragma: no mutate
DEBUG_ENV = "GEORDI_DEBUG"  # pragma: no mutate
HORIZONTAL_LOGS_ENV = "GEORDI_HORIZONTAL_LOGS"  # pragma: no mutate

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


class InvalidFlagValueError(ValueError):
    """Raised when a boolean environment variable holds an unrecognized value."""

    def __init__(self, name: str, value: str) -> None:
        super().__init__(
            f"{name}={value!r} is not a boolean; use one of "
            f"{', '.join(sorted(_TRUE_VALUES | _FALSE_VALUES))}."
        )
        self.name = name
        self.value = value


def _env_flag(name: str, default: bool) -> bool:
    if not (raw := os.environ.get(name, "").strip()):
        return default
    if raw.lower() in _TRUE_VALUES:
        return True
    if raw.lower() in _FALSE_VALUES:
        return False
    raise InvalidFlagValueError(name, raw)


def get_resource_dir() -> Path | None:
    """Get the test resource folder from the environment.

    Returns:
        The value of `GEORDI_RESOURCE_DIR` as a path, or None when unset.
    """
    if not (value := os.environ.get(RESOURCE_DIR_ENV)):
        return None
    return Path(value)


def debug_enabled(default: bool = True) -> bool:
    """Whether debug items are logged after each test (`GEORDI_DEBUG`).

    Raises:
        InvalidFlagValueError: If the variable is set to a non-boolean value.
    """
    return _env_flag(DEBUG_ENV, default)


def horizontal_logs(default: bool = False) -> bool:
    """Whether failures are rendered side by side (`GEORDI_HORIZONTAL_LOGS`).

    Raises:
        InvalidFlagValueError: If the variable is set to a non-boolean value.
    """
    return _env_flag(HORIZONTAL_LOGS_ENV, default)
