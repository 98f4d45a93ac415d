"""Arc length over multi-segment paths.

A path is an ordered sequence of independent curves. Its length is the sum
of the segment lengths; a global length maps to a (segment, local t) pair.
"""

from collections.abc import Sequence
from decimal import Decimal
from typing import Any

from arclength.config.settings import DEFAULT_ARC_LENGTH_TOLERANCE
from arclength.context import ComputationContext, resolve_context
from arclength.core._validation import (
    non_negative_decimal,
    positive_decimal,
    require_positive_int,
)
from arclength.core.arc_length import curve_arc_length
from arclength.core.inverse import solve_inverse
from arclength.domain import Curve, PathLocation, as_curve
from arclength.exceptions import InvalidArgumentError


def _resolve_segments(segments: Any, context: ComputationContext) -> list[Curve]:
    if isinstance(segments, (str, bytes)) or not isinstance(segments, Sequence):
        raise InvalidArgumentError("segments", "must be a sequence of curves", segments)
    if len(segments) == 0:
        raise InvalidArgumentError("segments", "must not be empty", segments)
    return [as_curve(segment, context) for segment in segments]


def path_arc_length(
    segments: Sequence[Curve | Any],
    tolerance: Any = DEFAULT_ARC_LENGTH_TOLERANCE,
    max_depth: int = 50,
    min_depth: int = 3,
    *,
    context: ComputationContext | None = None,
) -> Decimal:
    """Compute the total arc length of a path.

    Args:
        segments: Curves (or control point sequences), in path order
        tolerance: Integration tolerance per segment
        max_depth: Maximum subdivision depth
        min_depth: Minimum subdivision depth
        context: Precision context (module default when None)

    Returns:
        Sum of the segment lengths

    Raises:
        InvalidArgumentError: If segments is empty or not a sequence
        InvalidCurveError: If a segment is malformed
    """
    ctx = resolve_context(context)
    with ctx.activate():
        curves = _resolve_segments(segments, ctx)
        tol = positive_decimal(ctx, "tolerance", tolerance)

        total = Decimal(0)
        for curve in curves:
            total += curve_arc_length(
                curve, Decimal(0), Decimal(1), tol, max_depth, min_depth
            )
        return total


def path_inverse_arc_length(
    segments: Sequence[Curve | Any],
    target_length: Any,
    tolerance: Any = DEFAULT_ARC_LENGTH_TOLERANCE,
    max_iterations: int = 100,
    length_tolerance: Any = DEFAULT_ARC_LENGTH_TOLERANCE,
    max_depth: int = 50,
    min_depth: int = 3,
    *,
    context: ComputationContext | None = None,
) -> PathLocation:
    """Locate the segment and local parameter at a global arc length.

    Segment lengths are accumulated in order; the first segment whose end
    reaches the target is solved for the residual length. Targets beyond
    the path's end clamp to t=1 on the last segment.

    Args:
        segments: Curves (or control point sequences), in path order
        target_length: Arc length from the path start (finite, >= 0)
        tolerance: Inverse solver convergence threshold
        max_iterations: Inverse solver iteration budget
        length_tolerance: Integration tolerance
        max_depth: Maximum subdivision depth
        min_depth: Minimum subdivision depth
        context: Precision context (module default when None)

    Returns:
        PathLocation with segment index, local t and cumulative length

    Raises:
        InvalidArgumentError: On an empty path or a negative/non-finite target
        InvalidCurveError: If a segment is malformed
    """
    ctx = resolve_context(context)
    with ctx.activate():
        curves = _resolve_segments(segments, ctx)
        target = non_negative_decimal(ctx, "target_length", target_length)
        tol = positive_decimal(ctx, "tolerance", tolerance)
        length_tol = positive_decimal(ctx, "length_tolerance", length_tolerance)
        require_positive_int("max_iterations", max_iterations)

        zero = Decimal(0)
        if target == 0:
            return PathLocation(segment_index=0, t=zero, total_length=zero)

        accumulated = zero
        for index, curve in enumerate(curves):
            segment_length = curve_arc_length(
                curve, zero, Decimal(1), length_tol, max_depth, min_depth
            )
            next_accumulated = accumulated + segment_length

            if target <= next_accumulated:
                result = solve_inverse(
                    curve,
                    target - accumulated,
                    tolerance=tol,
                    max_iterations=max_iterations,
                    length_tolerance=length_tol,
                    max_depth=max_depth,
                    min_depth=min_depth,
                )
                return PathLocation(
                    segment_index=index,
                    t=result.t,
                    total_length=accumulated + result.length,
                )

            accumulated = next_accumulated

        return PathLocation(
            segment_index=len(curves) - 1,
            t=Decimal(1),
            total_length=accumulated,
        )
