"""Hypothesis property tests for the property bag and slice comparison.

- **Round-trip**: `put(k, v)` followed by `get(k)` returns `v`.
- **Last write wins**: the final `put` for a key is what `get` sees.
- **Pass iff equal**: a slice passes exactly when expected == actual, and the
  result echoes both values.
- **Isolation**: two runs of identical slices never see each other's bag.
"""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from geordi.domain.properties import PropertyBag
from geordi.domain.result import Outcome
from geordi.domain.test_slice import TestSlice

pytestmark = [pytest.mark.property]

keys = st.text(min_size=1, max_size=20)
values = st.one_of(
    st.none(),
    st.booleans(),
    st.integers(),
    st.text(),
    st.lists(st.integers(), max_size=5),
    st.dictionaries(st.text(max_size=5), st.integers(), max_size=3),
)


@given(key=keys, value=values)
def test_put_then_get_round_trips(key: str, value: object) -> None:
    """A stored value is read back unchanged."""
    bag = PropertyBag()
    bag.put(key, value)
    assert bag.get(key) == value


@given(key=keys, writes=st.lists(values, min_size=1, max_size=5))
def test_last_write_wins(key: str, writes: list[object]) -> None:
    """Only the final write for a key is visible."""
    bag = PropertyBag()
    for value in writes:
        bag.put(key, value)
    assert bag.get(key) == writes[-1]
    assert len(bag) == 1


@given(expected=values, actual=values)
def test_slice_passes_iff_values_are_equal(expected: object, actual: object) -> None:
    """The outcome follows equality and the result echoes both values."""
    slice_ = TestSlice()
    slice_.expect(lambda _props: expected)
    slice_.whenever(lambda _props: actual)

    result = slice_.run()

    assert result.outcome is (Outcome.PASSED if expected == actual else Outcome.FAILED)
    assert result.expected is expected
    assert result.actual is actual


@given(key=keys, value=values)
def test_runs_never_share_a_bag(key: str, value: object) -> None:
    """Identical slices each get a fresh bag."""
    seen: list[PropertyBag] = []

    def build() -> TestSlice:
        slice_ = TestSlice()

        @slice_.given
        def _(props: PropertyBag) -> None:
            assert key not in props
            props.put(key, value)
            seen.append(props)

        slice_.expect(lambda props: len(props))
        slice_.whenever(lambda _props: 1)
        return slice_

    assert build().run().passed
    assert build().run().passed
    assert seen[0] is not seen[1]
