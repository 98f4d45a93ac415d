"""Result types returned by the arc length operations.

All results are frozen: once an operation returns them they never change.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Any


@dataclass(frozen=True, slots=True)
class InverseResult:
    """Outcome of an inverse arc length solve.

    Callers must check ``converged`` before trusting ``t`` for downstream
    geometry; exhausting the iteration budget is not an error.

    Attributes:
        t: Parameter in [0, 1]
        length: Arc length from 0 to t, recomputed after the solve
        iterations: Solver iterations performed
        converged: Whether the residual or step fell below tolerance
    """

    t: Decimal
    length: Decimal
    iterations: int
    converged: bool

    def to_dict(self) -> dict[str, Any]:
        return {
            "t": str(self.t),
            "length": str(self.length),
            "iterations": self.iterations,
            "converged": self.converged,
        }


@dataclass(frozen=True, slots=True)
class PathLocation:
    """Position on a multi-segment path at a given arc length.

    Attributes:
        segment_index: Index of the segment containing the position
        t: Local parameter on that segment
        total_length: Cumulative path length from the start up to (segment, t)
    """

    segment_index: int
    t: Decimal
    total_length: Decimal

    def to_dict(self) -> dict[str, Any]:
        return {
            "segment_index": self.segment_index,
            "t": str(self.t),
            "total_length": str(self.total_length),
        }


@dataclass(frozen=True, slots=True)
class TableEntry:
    """One (t, cumulative length) sample of an arc length table."""

    t: Decimal
    length: Decimal

    def to_tuple(self) -> tuple[Decimal, Decimal]:
        return (self.t, self.length)
