"""Inverse arc length: find t such that L(0, t) equals a target length.

Newton-Raphson on f(t) = L(0, t) - target with f'(t) = |B'(t)|, falling
back to bisection half-steps where the speed collapses (cusps) and where a
Newton step would leave [0, 1].
"""

from decimal import Decimal
from typing import Any

import structlog

from arclength.config.settings import DEFAULT_ARC_LENGTH_TOLERANCE
from arclength.context import ComputationContext, resolve_context
from arclength.core._validation import (
    non_negative_decimal,
    positive_decimal,
    require_depths,
    require_positive_int,
)
from arclength.core.arc_length import curve_arc_length
from arclength.core.speed import speed
from arclength.domain import Curve, InverseResult, as_curve

logger = structlog.get_logger(__name__)

# Speeds below this are treated as a singular point where f/f' is unstable.
NEAR_ZERO_SPEED_THRESHOLD = Decimal("1e-60")


def inverse_arc_length(
    curve: Curve | Any,
    target_length: Any,
    tolerance: Any = DEFAULT_ARC_LENGTH_TOLERANCE,
    max_iterations: int = 100,
    length_tolerance: Any = DEFAULT_ARC_LENGTH_TOLERANCE,
    initial_guess: Any = None,
    *,
    max_depth: int = 50,
    min_depth: int = 3,
    context: ComputationContext | None = None,
) -> InverseResult:
    """Find the parameter at which the arc length from 0 reaches a target.

    Targets at or beyond the curve's total length clamp to t=1. Running out
    of iterations is not an error: the result comes back with
    ``converged=False`` and callers decide whether it is good enough.

    Args:
        curve: Curve, or sequence of (x, y) control points
        target_length: Desired arc length from t=0 (finite, >= 0)
        tolerance: Residual / step-size convergence threshold
        max_iterations: Maximum solver iterations
        length_tolerance: Integration tolerance for each arc length evaluation
        initial_guess: Starting t (clamped to [0, 1]); target/total when None
        max_depth: Maximum subdivision depth for each integration
        min_depth: Minimum subdivision depth for each integration
        context: Precision context (module default when None)

    Returns:
        InverseResult with t, the length at t, iteration count and status

    Raises:
        InvalidCurveError: If the curve has fewer than 2 control points
        InvalidArgumentError: On a negative or non-finite target, a
            non-positive tolerance, a non-positive iteration budget or a
            bad depth

    Example:
        total = arc_length(points)
        result = inverse_arc_length(points, total / 2)
        if result.converged:
            midpoint_t = result.t
    """
    ctx = resolve_context(context)
    with ctx.activate():
        resolved = as_curve(curve, ctx)
        target = non_negative_decimal(ctx, "target_length", target_length)
        tol = positive_decimal(ctx, "tolerance", tolerance)
        length_tol = positive_decimal(ctx, "length_tolerance", length_tolerance)
        require_positive_int("max_iterations", max_iterations)
        require_depths(max_depth, min_depth)
        guess = (
            None
            if initial_guess is None
            else ctx.to_finite_decimal(initial_guess, "initial_guess")
        )

        return solve_inverse(
            resolved,
            target,
            tolerance=tol,
            max_iterations=max_iterations,
            length_tolerance=length_tol,
            initial_guess=guess,
            max_depth=max_depth,
            min_depth=min_depth,
        )


def solve_inverse(
    curve: Curve,
    target: Decimal,
    tolerance: Decimal,
    max_iterations: int,
    length_tolerance: Decimal,
    initial_guess: Decimal | None = None,
    max_depth: int = 50,
    min_depth: int = 3,
) -> InverseResult:
    """Inverse solve for already-normalized arguments.

    Runs in the caller's active Decimal context.
    """
    if target == 0:
        return InverseResult(t=Decimal(0), length=Decimal(0), iterations=0, converged=True)

    zero = Decimal(0)
    one = Decimal(1)

    def length_to(t: Decimal) -> Decimal:
        return curve_arc_length(curve, zero, t, length_tolerance, max_depth, min_depth)

    total_length = length_to(one)

    if total_length == 0:
        logger.warning(
            "Degenerate curve has zero length",
            target_length=str(target),
            control_points=len(curve.control_points),
        )
        return InverseResult(t=one, length=zero, iterations=0, converged=False)

    if target >= total_length:
        return InverseResult(t=one, length=total_length, iterations=0, converged=True)

    t = initial_guess if initial_guess is not None else target / total_length
    t = min(max(t, zero), one)

    converged = False
    iterations = 0

    for _ in range(max_iterations):
        iterations += 1

        f = length_to(t) - target
        if abs(f) < tolerance:
            converged = True
            break

        f_prime = speed(curve, t)

        if f_prime < NEAR_ZERO_SPEED_THRESHOLD:
            # Bisection half-step toward the side that holds the root
            if f < 0:
                t = t + (one - t) / 2
            else:
                t = t / 2
            continue

        delta = f / f_prime
        t_new = t - delta

        if t_new < 0:
            t = t / 2
        elif t_new > 1:
            t = t + (one - t) / 2
        else:
            t = t_new

        if abs(delta) < tolerance:
            converged = True
            break

    final_length = length_to(t)

    if not converged:
        logger.warning(
            "Inverse arc length did not converge",
            target_length=str(target),
            t=str(t),
            residual=str(abs(final_length - target)),
            iterations=iterations,
        )

    return InverseResult(t=t, length=final_length, iterations=iterations, converged=converged)
