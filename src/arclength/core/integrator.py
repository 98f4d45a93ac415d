"""Adaptive Gauss-Legendre integration.

Each interval is integrated with the 5- and 10-point rules; their
difference serves as the error estimate. Intervals that disagree by more
than their share of the tolerance are split at the midpoint, and each half
gets half of the parent's tolerance. The two rules are not an embedded
Gauss-Kronrod pair, so the halving is a heuristic error budget rather than
a rigorous bound; convergence behaviour elsewhere depends on it as is.

Recursion depth is bounded by ``max_depth`` (at most MAX_SUPPORTED_DEPTH).
"""

from decimal import Decimal

import structlog

from arclength.core._validation import require_depths, require_non_negative_int
from arclength.core.quadrature import Integrand, gauss_legendre
from arclength.exceptions import InvalidArgumentError

logger = structlog.get_logger(__name__)


def adaptive_integrate(
    f: Integrand,
    a: Decimal,
    b: Decimal,
    tolerance: Decimal,
    max_depth: int = 50,
    min_depth: int = 3,
    depth: int = 0,
) -> Decimal:
    """Integrate f over [a, b] to within (heuristically) ``tolerance``.

    The 10-point estimate of an interval is accepted once
    ``depth >= min_depth`` and either the 5/10-point estimates differ by less
    than the interval's tolerance or ``depth >= max_depth``. Hitting the depth
    cap returns the best estimate without raising.

    Args:
        f: Integrand returning finite Decimals
        a: Start of interval
        b: End of interval
        tolerance: Error budget for [a, b], must be positive
        max_depth: Hard cap on subdivision depth
        min_depth: Levels forced before any estimate is accepted
        depth: Depth of [a, b] in the subdivision tree

    Returns:
        Integral approximation

    Raises:
        InvalidArgumentError: On a non-positive tolerance or a bad depth value
    """
    if not isinstance(tolerance, Decimal) or not tolerance.is_finite() or tolerance <= 0:
        raise InvalidArgumentError("tolerance", "must be a positive finite Decimal", tolerance)
    require_depths(max_depth, min_depth)
    require_non_negative_int("depth", depth)

    return _integrate(f, a, b, tolerance, max_depth, min_depth, depth)


def _integrate(
    f: Integrand,
    a: Decimal,
    b: Decimal,
    tolerance: Decimal,
    max_depth: int,
    min_depth: int,
    depth: int,
) -> Decimal:
    i5 = gauss_legendre(f, a, b, 5)
    i10 = gauss_legendre(f, a, b, 10)
    error = abs(i5 - i10)

    if depth >= min_depth and (error < tolerance or depth >= max_depth):
        if error >= tolerance:
            logger.debug(
                "Depth cap reached",
                a=str(a),
                b=str(b),
                error=str(error),
                tolerance=str(tolerance),
                depth=depth,
            )
        return i10

    mid = (a + b) / 2
    half_tolerance = tolerance / 2

    left = _integrate(f, a, mid, half_tolerance, max_depth, min_depth, depth + 1)
    right = _integrate(f, mid, b, half_tolerance, max_depth, min_depth, depth + 1)

    return left + right
