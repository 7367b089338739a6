"""Harness error definitions."""

# ============================================================================
#                           General harness errors
# ============================================================================


class HarnessError(Exception):
    """Base class for all harness errors."""


# ============================================================================
#                       Slice configuration errors
# ============================================================================


class SliceConfigurationError(HarnessError):
    """Raised when a slice is used in a way its lifecycle does not allow."""


class IncompleteSliceError(SliceConfigurationError):
    """Raised when a slice is run without an expect or a whenever phase."""

    def __init__(self, missing: list[str]) -> None:
        super().__init__(
            f"Slice cannot run, missing required phase(s): {', '.join(missing)}."
        )
        self.missing = missing


class DuplicatePhaseError(SliceConfigurationError):
    """Raised when the same phase is registered more than once."""

    def __init__(self, phase: str) -> None:
        super().__init__(f"Phase '{phase}' has already been registered.")
        self.phase = phase


class SliceAlreadyRunError(SliceConfigurationError):
    """Raised when a slice that has completed is run again."""

    def __init__(self) -> None:
        super().__init__("Slice has already been run and cannot be reused.")


# ============================================================================
#                               Phase errors
# ============================================================================


class PhaseError(HarnessError):
    """Base class for errors raised by a registered phase callback.

    The original exception is available both as `cause` and as `__cause__`.
    """

    phase: str = "phase"

    def __init__(self, cause: BaseException) -> None:
        super().__init__(
            f"{self.phase} phase raised {type(cause).__name__}: {cause}"
        )
        self.cause = cause


class SetupError(PhaseError):
    """Raised when the given/setup phase fails."""

    phase = "given"


class ExpectationError(PhaseError):
    """Raised when the expect phase fails."""

    phase = "expect"


class ActionError(PhaseError):
    """Raised when the whenever phase fails."""

    phase = "whenever"


class ComparisonError(PhaseError):
    """Raised when a custom comparison fails with something other than an assertion."""

    phase = "then"


class MockSetupError(PhaseError):
    """Raised when the setup_mocks phase fails or a stub cannot be applied."""

    phase = "setup_mocks"


class TeardownError(PhaseError):
    """Raised when the teardown phase fails."""

    phase = "teardown"


class VerificationError(PhaseError):
    """Raised when a stubbed mock call was never made, or an unstubbed one was."""

    phase = "verify"


# ============================================================================
#                           Property bag errors
# ============================================================================


class PropertyError(HarnessError):
    """Base class for property bag errors."""


class MissingKeyError(PropertyError, KeyError):
    """Raised when a property bag is read with a key that was never put."""

    def __init__(self, key: str) -> None:
        super().__init__(f"No property named '{key}' has been set.")
        self.key = key

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the message readable.
        return str(self.args[0])


class TypeMismatchError(PropertyError, TypeError):
    """Raised when a stored value is not of the type requested by the reader."""

    def __init__(self, key: str | None, expected_type: type, actual: object) -> None:
        subject = f"Property '{key}'" if key is not None else "Value"
        super().__init__(
            f"{subject} is {type(actual).__name__}, expected {expected_type.__name__}."
        )
        self.key = key
        self.expected_type = expected_type
        self.actual = actual


# ============================================================================
#                           Resource and scenario errors
# ============================================================================


class ResourceNotFoundError(HarnessError, FileNotFoundError):
    """Raised when a test resource file cannot be found."""

    def __init__(self, path: str) -> None:
        super().__init__(f"File not found: {path}")
        self.path = path

    def __str__(self) -> str:
        return str(self.args[0])


class ScenarioArityError(HarnessError, ValueError):
    """Raised when a scenario does not provide one value per declared variable."""

    def __init__(self, names: tuple[str, ...], values: tuple[object, ...]) -> None:
        super().__init__(
            f"Scenario has {len(values)} value(s) but {len(names)} variable(s) "
            f"were declared: {', '.join(names)}."
        )
        self.names = names
        self.values = values


class DuplicateScenarioError(HarnessError, ValueError):
    """Raised when a scenario label is already used in its group."""

    def __init__(self, label: str) -> None:
        super().__init__(f"Scenario '{label}' is already defined in this group.")
        self.label = label


# ============================================================================
#                               Mock errors
# ============================================================================


class UnstubbedCallError(HarnessError):
    """Raised when a mock is called with arguments no stub was registered for."""

    def __init__(self, call: str) -> None:
        super().__init__(f"No answer stubbed for {call}.")
        self.call = call


# ============================================================================
#                               Assertion failure
# ============================================================================


class SliceAssertionError(AssertionError):
    """Raised by `TestResult.raise_for_outcome` when expected and actual differ."""

    def __init__(self, report: str, expected: object, actual: object) -> None:
        super().__init__(report)
        self.expected = expected
        self.actual = actual
