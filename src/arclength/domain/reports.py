"""Structured results of the verification checks.

A failed check is data, not an exception: every report carries ``valid`` and
an ``errors`` list so that batch tooling can aggregate them.
"""

from dataclasses import dataclass, field, fields
from decimal import Decimal
from typing import Any


def _serialize(value: Any) -> Any:
    if isinstance(value, Decimal):
        return str(value)
    if isinstance(value, list):
        return [_serialize(v) for v in value]
    if isinstance(value, dict):
        return {k: _serialize(v) for k, v in value.items()}
    if hasattr(value, "to_dict"):
        return value.to_dict()
    return value


class _Report:
    """Shared serialization for report dataclasses."""

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-friendly dictionary (Decimals as strings)."""
        return {f.name: _serialize(getattr(self, f.name)) for f in fields(self)}  # type: ignore[arg-type]


@dataclass(frozen=True)
class BoundsReport(_Report):
    """Chord length <= arc length <= control polygon length."""

    valid: bool
    chord_length: Decimal
    polygon_length: Decimal
    arc_length: Decimal
    ratio: Decimal
    errors: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class SubdivisionReport(_Report):
    """Quadrature length compared with a uniform chord sum."""

    valid: bool
    quadrature_length: Decimal
    subdivision_length: Decimal
    difference: Decimal
    underestimate: bool
    errors: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class AdditivityReport(_Report):
    """L(0, t) + L(t, 1) compared with L(0, 1)."""

    valid: bool
    total_length: Decimal
    left_length: Decimal
    right_length: Decimal
    sum: Decimal
    error: Decimal
    errors: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class RoundtripReport(_Report):
    """Length -> t -> length roundtrip through the inverse solver."""

    valid: bool
    target_length: Decimal
    found_t: Decimal
    verified_length: Decimal
    error: Decimal
    converged: bool
    errors: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class TableReport(_Report):
    """Monotonicity, boundaries and lookup accuracy of a built table."""

    valid: bool
    is_monotonic: bool
    max_gap: Decimal
    table_size: int
    total_length: Decimal
    errors: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class VerificationSummary(_Report):
    """All checks run by ``verify_all``, keyed by check name."""

    valid: bool
    results: dict[str, _Report] = field(default_factory=dict)

    @property
    def errors(self) -> list[str]:
        """Errors of every failed check, prefixed with the check name."""
        return [
            f"{name}: {error}"
            for name, report in self.results.items()
            for error in getattr(report, "errors", [])
        ]
