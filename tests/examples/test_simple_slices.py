"""Example slice tests written against the `unit_sim` fixture.

These read the way user test suites are expected to: phases registered inside
``with unit_sim.test() as t:``, resource files looked up in the configured
resource folder, and scenario groups turned into parametrized cases.
"""

import json

import pytest

from geordi import SimulationGroup, UnitSim
from geordi.domain.errors import SliceAssertionError
from geordi.pytest_plugin import scenarios

# pylint: disable=magic-value-comparison

GREETING = "Hello Universe!"


def test_bare_minimum(unit_sim: UnitSim) -> None:
    """The greeting is fifteen characters long."""
    with unit_sim.test() as t:
        t.expect(lambda _props: 15)
        t.whenever(lambda _props: len(GREETING))


def test_with_setup(unit_sim: UnitSim) -> None:
    """Setup values are shared with the later phases."""
    with unit_sim.test() as t:
        t.given(lambda props: props.put("greeting", GREETING))
        t.expect(lambda _props: 15)
        t.whenever(lambda props: len(props.get_as("greeting", str)))


def test_decorator_style(unit_sim: UnitSim) -> None:
    """Phases may be registered with decorators."""
    with unit_sim.test() as t:

        @t.given
        def _(props):
            props["crew"] = ["Picard", "Riker", "La Forge"]

        @t.expect
        def _(props):
            return unit_sim.debug(len(props["crew"]), "crew size")

        @t.whenever
        def _(props):
            props["crew"].append("Data")
            return len(props["crew"]) - 1


def test_mismatch_is_reported(unit_sim: UnitSim) -> None:
    """A mismatch fails the test with both values in the message."""
    with pytest.raises(SliceAssertionError, match="EXPECT: foo\nACTUAL: bar"):
        with unit_sim.test() as t:
            t.expect_value("foo")
            t.whenever(lambda _props: "bar")


def test_file_content(unit_sim: UnitSim) -> None:
    """Expected values may be derived from a resource file."""
    with unit_sim.test() as t:
        t.expect_from_file_content("greeting.txt", lambda text, _props: text.strip())
        t.whenever(lambda _props: GREETING)


def test_file_path(unit_sim: UnitSim) -> None:
    """Actions may receive the path of a resource file."""
    with unit_sim.test() as t:
        t.expect_value(["engineering", "bridge"])
        t.whenever_with_file(
            "crew.json",
            lambda path, _props: json.loads(path.read_text(encoding="utf-8"))["stations"],
        )


def test_json_ignores_formatting(unit_sim: UnitSim) -> None:
    """JSON phases compare compact forms."""
    with unit_sim.test() as t:
        t.expect_from_file_content(
            "crew.json", lambda text, _props: json.loads(text)["name"]
        )
        t.then_equals("crew member name")
        t.whenever(lambda _props: "Geordi La Forge")

    with unit_sim.test() as t:
        t.expect_json(
            lambda _props: '{"rank": "Lieutenant Commander", "stations": ["engineering"]}'
        )
        t.whenever_json(
            lambda _props: json.dumps(
                {"rank": "Lieutenant Commander", "stations": ["engineering"]}, indent=4
            )
        )


def test_raises(unit_sim: UnitSim) -> None:
    """An expected exception is the actual value."""
    with unit_sim.test() as t:
        t.expect_value(ZeroDivisionError)
        t.whenever_raises(ZeroDivisionError, lambda _props: 1 / 0)


def test_map_equals(unit_sim: UnitSim) -> None:
    """Values may be compared through a mapping."""
    with unit_sim.test() as t:
        t.expect_value("Hello Universe!")
        t.whenever(lambda _props: "HELLO UNIVERSE!")
        t.map_equals(str.lower, "case-insensitive greeting")


SCENARIOS = (
    SimulationGroup.vars("scenario", "first", "second", "joined")
    .with_("two words", "warp", "core", "warp core")
    .with_("empty second", "warp", "", "warp ")
    .with_(None, "", "", " ")
)


@scenarios(SCENARIOS)
def test_concatenation(unit_sim: UnitSim, first: str, second: str, joined: str) -> None:
    """Joining two words with a space."""
    with unit_sim.test() as t:
        t.expect_value(joined)
        t.whenever(lambda _props: f"{first} {second}")
