"""Character-level comparison of two strings.

Each string is padded with spaces to the length of the other, then every
position that matches the other string is replaced by an underscore. What is
left visible is exactly where the two strings disagree.
"""

from __future__ import annotations

from dataclasses import dataclass

MATCH_CHAR = "_"
PAD_CHAR = " "
SEPARATOR = "-" * 64


@dataclass(frozen=True)
class Difference:
    """One side of a comparison: the original text and its difference mask."""

    original: str
    differences: str


@dataclass(frozen=True)
class DifferenceGroup:
    """Both sides of a comparison."""

    first: Difference
    second: Difference

    @classmethod
    def of(
        cls, first: str, second: str, first_diff: str, second_diff: str
    ) -> DifferenceGroup:
        """Build a group from the raw strings and their masks."""
        return cls(Difference(first, first_diff), Difference(second, second_diff))

    @property
    def identical(self) -> bool:
        """True when no position differs."""
        return self.first.original == self.second.original

    def __str__(self) -> str:
        return "\n".join(
            [
                "ORIGINAL FIRST",
                self.first.original,
                "COMPARED",
                SEPARATOR,
                self.first.differences,
                self.second.differences,
                SEPARATOR,
                "ORIGINAL SECOND",
                self.second.original,
            ]
        )


def _pad(text: str, other: str) -> str:
    if len(text) < len(other):
        return text + PAD_CHAR * (len(other) - len(text))
    return text


def _mask(text: str, other: str) -> str:
    return "".join(MATCH_CHAR if c == o else c for c, o in zip(text, other))


def find_differences(first: str, second: str) -> DifferenceGroup:
    """Compare two strings position by position.

    Args:
        first: The first string, usually the expected value.
        second: The second string, usually the actual value.

    Returns:
        DifferenceGroup: The originals and a mask for each side.

    Example:
        >>> group = find_differences("this as I test", "thou is a test!")
        >>> group.first.differences
        '__is_a__I_____ '
        >>> group.second.differences
        '__ou_i__a_____!'
    """
    padded_first = _pad(first, second)
    padded_second = _pad(second, first)
    return DifferenceGroup.of(
        first,
        second,
        _mask(padded_first, padded_second),
        _mask(padded_second, padded_first),
    )
