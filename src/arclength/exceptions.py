"""Exception hierarchy for arclength."""

from typing import Any


class ArcLengthError(Exception):
    """Base exception for all arclength errors."""

    pass


class InvalidArgumentError(ArcLengthError):
    """A public entry point received a malformed argument."""

    def __init__(self, name: str, reason: str, value: Any = None) -> None:
        self.name = name
        self.reason = reason
        self.value = value
        super().__init__(f"Invalid argument '{name}': {reason}")


class InvalidCurveError(InvalidArgumentError):
    """Curve has too few or malformed control points."""

    def __init__(self, reason: str, point_count: int | None = None) -> None:
        self.point_count = point_count
        super().__init__("curve", reason, point_count)


class ConfigurationError(InvalidArgumentError):
    """Unsupported numerical configuration (e.g. quadrature order)."""

    def __init__(self, name: str, reason: str, value: Any = None) -> None:
        super().__init__(name, reason, value)


class EvaluationError(ArcLengthError):
    """A caller-supplied function returned a non-finite or non-numeric result."""

    def __init__(self, source: str, value: Any) -> None:
        self.source = source
        self.value = value
        super().__init__(
            f"{source} returned a non-finite or non-Decimal value: {value!r}"
        )
