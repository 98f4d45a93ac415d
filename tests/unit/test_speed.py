"""Unit tests for curve speed evaluation."""

from decimal import Decimal

import pytest

from arclength.context import ComputationContext
from arclength.core.speed import speed
from arclength.domain import BezierCurve, Point
from arclength.exceptions import EvaluationError, InvalidCurveError

CTX = ComputationContext()


class _StubCurve:
    """Minimal curve whose derivative is fixed."""

    def __init__(self, points: tuple[Point, ...], derivative: Point) -> None:
        self._points = points
        self._derivative = derivative

    @property
    def control_points(self) -> tuple[Point, ...]:
        return self._points

    def evaluate(self, t: Decimal) -> Point:
        return self._points[0]

    def derivative(self, t: Decimal, order: int = 1) -> Point:
        return self._derivative


ORIGIN = Point(Decimal(0), Decimal(0))


class TestSpeed:
    """Tests for speed()."""

    def test_line_speed_is_chord_length(self) -> None:
        """A 3-4-5 line moves at constant speed 5."""
        curve = BezierCurve.from_points([[0, 0], [3, 4]])
        with CTX.activate():
            for t in ("0", "0.3", "1"):
                assert speed(curve, Decimal(t)) == 5

    def test_cubic_speed(self) -> None:
        """Arch cubic: |B'(0)| = 300, |B'(0.5)| = 150."""
        curve = BezierCurve.from_points([[0, 0], [0, 100], [100, 100], [100, 0]])
        with CTX.activate():
            assert speed(curve, Decimal(0)) == 300
            assert speed(curve, Decimal("0.5")) == 150

    def test_cusp_has_zero_speed(self) -> None:
        """The self-intersecting cubic stops at t = 0.5."""
        curve = BezierCurve.from_points([[0, 0], [1, 1], [0, 1], [1, 0]])
        with CTX.activate():
            assert speed(curve, Decimal("0.5")) == 0
            assert speed(curve, Decimal("0.25")) > 0

    def test_speed_precision(self) -> None:
        """Speeds carry the full working precision."""
        curve = BezierCurve.from_points([[0, 0], [1, 1]])
        with CTX.activate():
            value = speed(curve, Decimal("0.5"))
            expected = Decimal(2).sqrt()
        assert value == expected
        assert len(value.as_tuple().digits) == CTX.precision

    def test_too_few_control_points(self) -> None:
        """Curves bypassing validation are still rejected."""
        curve = _StubCurve((ORIGIN,), ORIGIN)
        with pytest.raises(InvalidCurveError):
            speed(curve, Decimal(0))

    def test_non_decimal_derivative(self) -> None:
        """A float derivative component is an evaluation defect."""
        curve = _StubCurve((ORIGIN, ORIGIN), Point(1.0, Decimal(0)))  # type: ignore[arg-type]
        with pytest.raises(EvaluationError):
            speed(curve, Decimal(0))

    def test_non_finite_derivative(self) -> None:
        """An infinite derivative component is an evaluation defect."""
        curve = _StubCurve((ORIGIN, ORIGIN), Point(Decimal(0), Decimal("Infinity")))
        with pytest.raises(EvaluationError):
            speed(curve, Decimal(0))
