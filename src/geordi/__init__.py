"""GEORDI

A small behavior-driven test harness. Tests are written as slices with
declared phases (given, expect, whenever) sharing a per-run property bag,
and the harness compares the expected value against the actual one.
"""

from geordi.domain.properties import PropertyBag
from geordi.domain.result import Outcome, TestResult
from geordi.domain.scenarios import SimulationGroup
from geordi.domain.test_slice import TestSlice
from geordi.mocking import MockRegistry, MockTask
from geordi.unit_sim import UnitSim

__all__ = [
    "__version__",
    "MockRegistry",
    "MockTask",
    "Outcome",
    "PropertyBag",
    "SimulationGroup",
    "TestResult",
    "TestSlice",
    "UnitSim",
]
__version__ = "0.1.0"
