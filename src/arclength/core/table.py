"""Precomputed arc length lookup tables.

A table samples the cumulative arc length at uniform parameters
t = i / sample_count. Lookups binary-search the samples and interpolate
linearly (O(log n)); refined lookups feed that estimate to the inverse
solver as its starting point.
"""

from collections.abc import Iterator
from decimal import Decimal
from typing import Any

import structlog

from arclength.config.settings import DEFAULT_ARC_LENGTH_TOLERANCE
from arclength.context import ComputationContext, resolve_context
from arclength.core._validation import positive_decimal, require_positive_int
from arclength.core.arc_length import curve_arc_length
from arclength.core.inverse import solve_inverse
from arclength.domain import Curve, TableEntry, as_curve
from arclength.exceptions import InvalidArgumentError

logger = structlog.get_logger(__name__)


class ArcLengthTable:
    """Immutable (t, cumulative length) samples of one curve.

    Invariants: t strictly ascends from 0 to 1, lengths never decrease, the
    first entry is (0, 0) and the last is (1, total_length).

    Example:
        table = ArcLengthTable.build(points, sample_count=100)
        t = table.get_t(table.total_length / 2)
        exact_t = table.get_t_refined(table.total_length / 2)
    """

    __slots__ = ("_context", "_curve", "_entries", "_total_length")

    def __init__(
        self,
        curve: Curve,
        entries: tuple[TableEntry, ...],
        context: ComputationContext,
    ) -> None:
        """Wrap precomputed entries; use ``build`` to sample a curve."""
        if len(entries) < 3:
            raise InvalidArgumentError("entries", "a table needs at least 3 entries", len(entries))
        self._curve = curve
        self._entries = entries
        self._total_length = entries[-1].length
        self._context = context

    @classmethod
    def build(
        cls,
        curve: Curve | Any,
        sample_count: int = 100,
        tolerance: Any = DEFAULT_ARC_LENGTH_TOLERANCE,
        max_depth: int = 50,
        min_depth: int = 3,
        *,
        context: ComputationContext | None = None,
    ) -> "ArcLengthTable":
        """Sample a curve's cumulative arc length.

        Args:
            curve: Curve, or sequence of (x, y) control points
            sample_count: Number of uniform intervals (>= 2, so that a
                bracketing pair always exists for the binary search)
            tolerance: Integration tolerance per interval
            max_depth: Maximum subdivision depth
            min_depth: Minimum subdivision depth
            context: Precision context (module default when None)

        Returns:
            Table with sample_count + 1 entries

        Raises:
            InvalidArgumentError: If sample_count < 2 or not an integer
            InvalidCurveError: If the curve is malformed
        """
        ctx = resolve_context(context)
        with ctx.activate():
            resolved = as_curve(curve, ctx)
            require_positive_int("sample_count", sample_count)
            if sample_count < 2:
                raise InvalidArgumentError("sample_count", "must be at least 2", sample_count)
            tol = positive_decimal(ctx, "tolerance", tolerance)

            samples = Decimal(sample_count)
            total = Decimal(0)
            entries = [TableEntry(t=Decimal(0), length=total)]
            prev_t = Decimal(0)

            for i in range(1, sample_count + 1):
                t = Decimal(i) / samples
                total += curve_arc_length(resolved, prev_t, t, tol, max_depth, min_depth)
                entries.append(TableEntry(t=t, length=total))
                prev_t = t

        logger.debug(
            "Arc length table built",
            sample_count=sample_count,
            total_length=str(total),
        )
        return cls(resolved, tuple(entries), ctx)

    @property
    def curve(self) -> Curve:
        return self._curve

    @property
    def entries(self) -> tuple[TableEntry, ...]:
        return self._entries

    @property
    def total_length(self) -> Decimal:
        return self._total_length

    @property
    def sample_count(self) -> int:
        return len(self._entries) - 1

    @property
    def context(self) -> ComputationContext:
        return self._context

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[TableEntry]:
        return iter(self._entries)

    def __getitem__(self, index: int) -> TableEntry:
        return self._entries[index]

    def get_t(self, target_length: Any) -> Decimal:
        """Approximate t for an arc length by binary search + interpolation.

        Args:
            target_length: Arc length from t=0; clamped into [0, total]

        Returns:
            Interpolated parameter in [0, 1]
        """
        ctx = self._context
        with ctx.activate():
            s = ctx.to_finite_decimal(target_length, "target_length")
            return self._lookup(s)

    def _lookup(self, s: Decimal) -> Decimal:
        if s <= 0:
            return Decimal(0)
        if s >= self._total_length:
            return Decimal(1)

        entries = self._entries
        lo = 0
        hi = len(entries) - 1

        while hi - lo > 1:
            mid = (lo + hi) // 2
            if entries[mid].length < s:
                lo = mid
            else:
                hi = mid

        s0, t0 = entries[lo].length, entries[lo].t
        s1, t1 = entries[hi].length, entries[hi].t

        if s1 == s0:
            return (t0 + t1) / 2

        fraction = (s - s0) / (s1 - s0)
        return t0 + (t1 - t0) * fraction

    def get_t_refined(
        self,
        target_length: Any,
        tolerance: Any = DEFAULT_ARC_LENGTH_TOLERANCE,
        max_iterations: int = 100,
        length_tolerance: Any = DEFAULT_ARC_LENGTH_TOLERANCE,
        max_depth: int = 50,
        min_depth: int = 3,
    ) -> Decimal:
        """Table lookup followed by inverse-solver refinement.

        The interpolated ``get_t`` estimate is the solver's initial guess.

        Args:
            target_length: Arc length from t=0 (finite, >= 0)
            tolerance: Solver convergence threshold
            max_iterations: Solver iteration budget
            length_tolerance: Integration tolerance
            max_depth: Maximum subdivision depth
            min_depth: Minimum subdivision depth

        Returns:
            Refined parameter

        Raises:
            InvalidArgumentError: On a negative or non-finite target
        """
        ctx = self._context
        with ctx.activate():
            s = ctx.to_finite_decimal(target_length, "target_length")
            if s < 0:
                raise InvalidArgumentError("target_length", "must be non-negative", target_length)
            tol = positive_decimal(ctx, "tolerance", tolerance)
            length_tol = positive_decimal(ctx, "length_tolerance", length_tolerance)
            require_positive_int("max_iterations", max_iterations)

            result = solve_inverse(
                self._curve,
                s,
                tolerance=tol,
                max_iterations=max_iterations,
                length_tolerance=length_tol,
                initial_guess=self._lookup(s),
                max_depth=max_depth,
                min_depth=min_depth,
            )
            return result.t

    def __repr__(self) -> str:
        return (
            f"ArcLengthTable(sample_count={self.sample_count}, "
            f"total_length={self._total_length})"
        )


def create_arc_length_table(
    curve: Curve | Any,
    sample_count: int = 100,
    tolerance: Any = DEFAULT_ARC_LENGTH_TOLERANCE,
    max_depth: int = 50,
    min_depth: int = 3,
    *,
    context: ComputationContext | None = None,
) -> ArcLengthTable:
    """Build an ArcLengthTable; see ``ArcLengthTable.build``."""
    return ArcLengthTable.build(
        curve,
        sample_count,
        tolerance,
        max_depth,
        min_depth,
        context=context,
    )
