"""Per-run property bag shared between the phases of a slice."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, TypeVar

from geordi.domain.errors import MissingKeyError, TypeMismatchError

T = TypeVar("T")

# pylint: disable=too-few-public-methods


class PropertyBag:
    """A string-keyed store of arbitrary values for one slice execution.

    The given phase writes into the bag, the expect and whenever phases read
    from it. Values are stored as-is; readers narrow them with `get_as`.
    Mapping-style access mirrors `get`/`put`.

    Attributes:
        expected: The value produced by the expect phase, once it has run.
    """

    def __init__(self) -> None:
        self._entries: dict[str, Any] = {}
        self.expected: Any = None

    def put(self, key: str, value: Any) -> None:
        """Store `value` under `key`, replacing any previous value."""
        self._entries[key] = value

    def get(self, key: str) -> Any:
        """Return the value stored under `key`.

        Raises:
            MissingKeyError: If `key` was never put.
        """
        try:
            return self._entries[key]
        except KeyError:
            raise MissingKeyError(key) from None

    def get_as(self, key: str, type_: type[T]) -> T:
        """Return the value stored under `key`, checked against `type_`.

        Raises:
            MissingKeyError: If `key` was never put.
            TypeMismatchError: If the stored value is not an instance of `type_`.
        """
        value = self.get(key)
        if not isinstance(value, type_):
            raise TypeMismatchError(key, type_, value)
        return value

    # --- Mapping-style access ---

    def __getitem__(self, key: str) -> Any:
        return self.get(key)

    def __setitem__(self, key: str, value: Any) -> None:
        self.put(key, value)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"PropertyBag({self._entries!r})"


def coax(value: Any, type_: type[T]) -> T | None:
    """Return `value` if it is an instance of `type_`, otherwise None."""
    return value if isinstance(value, type_) else None


def force(value: Any, type_: type[T]) -> T:
    """Return `value` if it is an instance of `type_`.

    Raises:
        TypeMismatchError: If `value` is not an instance of `type_`.
    """
    if not isinstance(value, type_):
        raise TypeMismatchError(None, type_, value)
    return value
