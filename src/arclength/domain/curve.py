"""Curve types consumed by the arc length core.

This module defines:
- Point: An immutable 2D point with Decimal coordinates
- Curve: Protocol the core relies on (control points, evaluate, derivative)
- BezierCurve: Concrete Bezier evaluator of any degree
- as_curve: Normalize a raw control point sequence into a BezierCurve
"""

from collections.abc import Sequence
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Protocol, runtime_checkable

from arclength.context import ComputationContext, resolve_context
from arclength.exceptions import InvalidArgumentError, InvalidCurveError


@dataclass(frozen=True, slots=True)
class Point:
    """A point (or vector) in 2D space.

    Attributes:
        x: X coordinate
        y: Y coordinate
    """

    x: Decimal
    y: Decimal

    def to_tuple(self) -> tuple[Decimal, Decimal]:
        """Convert to simple (x, y) tuple."""
        return (self.x, self.y)

    def to_dict(self) -> dict[str, str]:
        """Serialize to dictionary with exact string coordinates."""
        return {"x": str(self.x), "y": str(self.y)}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Point":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with x and y fields

        Returns:
            Point instance
        """
        return cls(x=Decimal(data["x"]), y=Decimal(data["y"]))


@runtime_checkable
class Curve(Protocol):
    """Parametric curve evaluable on t in [0, 1]."""

    @property
    def control_points(self) -> Sequence[Point]: ...

    def evaluate(self, t: Decimal) -> Point: ...

    def derivative(self, t: Decimal, order: int = 1) -> Point: ...


def _de_casteljau(points: Sequence[Point], t: Decimal) -> Point:
    one_minus_t = 1 - t
    xs = [p.x for p in points]
    ys = [p.y for p in points]

    while len(xs) > 1:
        xs = [xs[i] * one_minus_t + xs[i + 1] * t for i in range(len(xs) - 1)]
        ys = [ys[i] * one_minus_t + ys[i + 1] * t for i in range(len(ys) - 1)]

    return Point(xs[0], ys[0])


def _hodograph(points: Sequence[Point]) -> tuple[Point, ...]:
    degree = len(points) - 1
    return tuple(
        Point(
            (points[i + 1].x - points[i].x) * degree,
            (points[i + 1].y - points[i].y) * degree,
        )
        for i in range(degree)
    )


@dataclass(frozen=True)
class BezierCurve:
    """A Bezier curve of degree len(control_points) - 1.

    Evaluation uses de Casteljau's algorithm; derivatives evaluate the
    hodograph (the derivative's own Bezier control points). Arithmetic runs
    in the caller's active Decimal context.

    Attributes:
        control_points: Two or more control points
    """

    control_points: tuple[Point, ...]

    def __post_init__(self) -> None:
        if len(self.control_points) < 2:
            raise InvalidCurveError(
                "at least 2 control points are required", len(self.control_points)
            )

    @property
    def degree(self) -> int:
        return len(self.control_points) - 1

    @property
    def start(self) -> Point:
        return self.control_points[0]

    @property
    def end(self) -> Point:
        return self.control_points[-1]

    def evaluate(self, t: Decimal) -> Point:
        """Point on the curve at parameter t."""
        return _de_casteljau(self.control_points, t)

    def hodograph(self, order: int = 1) -> tuple[Point, ...]:
        """Control points of the ``order``-th derivative curve.

        Returns a single zero vector when order exceeds the degree.
        """
        if order > self.degree:
            return (Point(Decimal(0), Decimal(0)),)

        points: tuple[Point, ...] = self.control_points
        for _ in range(order):
            points = _hodograph(points)
        return points

    def derivative(self, t: Decimal, order: int = 1) -> Point:
        """The ``order``-th derivative vector at parameter t.

        Args:
            t: Curve parameter
            order: Derivative order (0 evaluates the curve itself)

        Returns:
            Derivative vector as a Point
        """
        if order < 0:
            raise InvalidArgumentError("order", "must be non-negative", order)
        if order == 0:
            return self.evaluate(t)

        points = self.hodograph(order)
        if len(points) == 1:
            return points[0]
        return _de_casteljau(points, t)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {"control_points": [p.to_dict() for p in self.control_points]}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "BezierCurve":
        """Deserialize from dictionary."""
        return cls(tuple(Point.from_dict(p) for p in data["control_points"]))

    @classmethod
    def from_points(
        cls,
        points: Sequence[Any],
        context: ComputationContext | None = None,
    ) -> "BezierCurve":
        """Build a curve from Points or (x, y) pairs of number-like values.

        Args:
            points: Control points
            context: Context used to normalize coordinates

        Returns:
            BezierCurve with Decimal coordinates

        Raises:
            InvalidCurveError: If fewer than 2 points or a point is malformed
        """
        if isinstance(points, (str, bytes)) or not isinstance(points, Sequence):
            raise InvalidCurveError("control points must be a sequence")
        if len(points) < 2:
            raise InvalidCurveError("at least 2 control points are required", len(points))

        ctx = resolve_context(context)
        normalized = []
        for i, point in enumerate(points):
            if isinstance(point, Point):
                coords: Sequence[Any] = point.to_tuple()
            elif isinstance(point, Sequence) and not isinstance(point, (str, bytes)):
                coords = point
            else:
                raise InvalidCurveError(f"control point {i} is not an (x, y) pair")

            if len(coords) != 2:
                raise InvalidCurveError(f"control point {i} must have exactly 2 coordinates")

            normalized.append(
                Point(
                    ctx.to_finite_decimal(coords[0], f"points[{i}].x"),
                    ctx.to_finite_decimal(coords[1], f"points[{i}].y"),
                )
            )

        return cls(tuple(normalized))


def as_curve(curve: Any, context: ComputationContext | None = None) -> Curve:
    """Normalize a public ``curve`` argument.

    Curve implementations pass through unchanged (after checking they have at
    least 2 control points); anything else is treated as a sequence of
    control points.

    Raises:
        InvalidCurveError: If the curve is malformed
    """
    if isinstance(curve, Curve):
        count = len(curve.control_points)
        if count < 2:
            raise InvalidCurveError("at least 2 control points are required", count)
        return curve

    return BezierCurve.from_points(curve, context)
