"""Arc length of a single curve over a parameter range.

L(t0, t1) = integral from t0 to t1 of |B'(t)| dt, computed with adaptive
Gauss-Legendre quadrature at the context's working precision.
"""

from decimal import Decimal
from typing import Any

from arclength.config.settings import DEFAULT_ARC_LENGTH_TOLERANCE
from arclength.context import ComputationContext, resolve_context
from arclength.core._validation import positive_decimal, require_depths, unit_parameter
from arclength.core.integrator import adaptive_integrate
from arclength.core.speed import speed
from arclength.domain import Curve, as_curve


def arc_length(
    curve: Curve | Any,
    t0: Any = 0,
    t1: Any = 1,
    tolerance: Any = DEFAULT_ARC_LENGTH_TOLERANCE,
    max_depth: int = 50,
    min_depth: int = 3,
    *,
    context: ComputationContext | None = None,
) -> Decimal:
    """Compute the arc length of a curve between two parameters.

    Arc length is a magnitude over an unordered pair of endpoints, so
    ``t0 > t1`` is computed with the endpoints swapped.

    Args:
        curve: Curve, or sequence of (x, y) control points
        t0: Start parameter in [0, 1]
        t1: End parameter in [0, 1]
        tolerance: Integration error tolerance
        max_depth: Maximum subdivision depth
        min_depth: Minimum subdivision depth
        context: Precision context (module default when None)

    Returns:
        Arc length (>= 0)

    Raises:
        InvalidCurveError: If the curve has fewer than 2 control points
        InvalidArgumentError: On a non-finite or out-of-range parameter,
            a non-positive tolerance or a bad depth

    Example:
        length = arc_length([[0, 0], [3, 4]])          # ~5
        partial = arc_length(cubic_points, 0, "0.5")
    """
    ctx = resolve_context(context)
    with ctx.activate():
        resolved = as_curve(curve, ctx)
        start = unit_parameter(ctx, "t0", t0)
        end = unit_parameter(ctx, "t1", t1)
        tol = positive_decimal(ctx, "tolerance", tolerance)
        require_depths(max_depth, min_depth)
        return curve_arc_length(resolved, start, end, tol, max_depth, min_depth)


def curve_arc_length(
    curve: Curve,
    t0: Decimal,
    t1: Decimal,
    tolerance: Decimal,
    max_depth: int = 50,
    min_depth: int = 3,
) -> Decimal:
    """Arc length for already-normalized arguments.

    Runs in the caller's active Decimal context; used by the other core
    modules once their public entry point has normalized its inputs.
    """
    if t0 > t1:
        t0, t1 = t1, t0

    if t0 == t1:
        return Decimal(0)

    return adaptive_integrate(
        lambda t: speed(curve, t),
        t0,
        t1,
        tolerance,
        max_depth,
        min_depth,
    )
