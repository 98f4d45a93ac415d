"""Curve speed |B'(t)|, the arc length integrand."""

from decimal import Decimal

from arclength.domain import Curve
from arclength.exceptions import EvaluationError, InvalidCurveError


def speed(curve: Curve, t: Decimal) -> Decimal:
    """Magnitude of the first derivative at parameter t.

    Near-zero results at cusps are returned as computed; the inverse solver
    is responsible for treating small speeds as singular.

    Args:
        curve: Curve with at least 2 control points
        t: Curve parameter

    Returns:
        sqrt(dx^2 + dy^2)

    Raises:
        InvalidCurveError: If the curve has fewer than 2 control points
        EvaluationError: If the derivative is not a finite Decimal vector
    """
    count = len(curve.control_points)
    if count < 2:
        raise InvalidCurveError("at least 2 control points are required", count)

    d = curve.derivative(t, 1)
    dx, dy = d.x, d.y
    for component in (dx, dy):
        if not isinstance(component, Decimal) or not component.is_finite():
            raise EvaluationError("curve derivative", component)

    return (dx * dx + dy * dy).sqrt()
