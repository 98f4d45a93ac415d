"""End-to-end tests of arc length properties and reference scenarios.

These run at the library's default tolerances where the point of the test is
precision, and at relaxed options elsewhere.
"""

from decimal import Decimal

import pytest

from arclength import (
    arc_length,
    create_arc_length_table,
    inverse_arc_length,
    path_arc_length,
    path_inverse_arc_length,
    verify_additivity,
    verify_bounds,
    verify_inverse_roundtrip,
    verify_table,
)
from arclength.config import IntegrationConfig, InverseConfig
from arclength.context import ComputationContext

LENGTH_OPTS = {"max_depth": 20, "min_depth": 2}
FAST_LENGTH = {"tolerance": "1e-15", **LENGTH_OPTS}
FAST_INVERSE = {"tolerance": "1e-12", "length_tolerance": "1e-15", **LENGTH_OPTS}
FAST_INTEGRATION = IntegrationConfig(tolerance=Decimal("1e-15"), max_depth=20, min_depth=2)

HORIZONTAL = [[0, 0], [10, 0]]
ARCH = [[0, 0], [0, 100], [100, 100], [100, 0]]
S_CURVE = [[0, 0], [40, 120], [60, -120], [100, 0]]
QUADRATIC = [[0, 0], [50, 80], [100, 0]]
CUSP = [[0, 0], [1, 1], [0, 1], [1, 0]]

CURVES = {
    "line": HORIZONTAL,
    "quadratic": QUADRATIC,
    "arch": ARCH,
    "s_curve": S_CURVE,
    "cusp": CUSP,
}


class TestScenarios:
    """Reference scenarios at default tolerances."""

    def test_line_length(self) -> None:
        """A 10-unit horizontal line measures 10."""
        assert abs(arc_length(HORIZONTAL) - 10) < Decimal("1e-25")

    def test_line_inverse_midpoint(self) -> None:
        """Length 5 on that line is reached at t = 0.5."""
        result = inverse_arc_length(HORIZONTAL, 5)
        assert result.converged
        assert abs(result.t - Decimal("0.5")) < Decimal("1e-25")

    def test_inverse_zero(self) -> None:
        """Length 0 is t = 0 without iterating."""
        result = inverse_arc_length(ARCH, 0)
        assert result.to_dict() == {
            "t": "0",
            "length": "0",
            "iterations": 0,
            "converged": True,
        }

    def test_inverse_past_end(self) -> None:
        """total + 1 clamps to the end of the curve."""
        total = arc_length(ARCH)
        result = inverse_arc_length(ARCH, total + 1)

        assert result.t == 1
        assert result.length == total
        assert result.converged

    def test_cubic_length_range(self) -> None:
        """The arch is longer than its chord and well short of its polygon."""
        length = arc_length(ARCH)
        assert Decimal(100) < length < Decimal("341.4")

    def test_table_matches_inverse(self) -> None:
        """Table lookup at half length is close to the exact inverse."""
        table = create_arc_length_table(ARCH, 100, **FAST_LENGTH)
        half = table.total_length / 2

        approx = table.get_t(half)
        exact = inverse_arc_length(ARCH, half, **FAST_INVERSE).t

        assert abs(approx - exact) <= 2 * table.total_length / 100


class TestProperties:
    """Invariants that hold for every curve."""

    @pytest.mark.parametrize("name", list(CURVES))
    def test_non_negative(self, name: str) -> None:
        """Arc length is never negative."""
        assert arc_length(CURVES[name], **FAST_LENGTH) >= 0

    @pytest.mark.parametrize("name", list(CURVES))
    def test_bounds(self, name: str) -> None:
        """chord <= arc <= control polygon."""
        report = verify_bounds(CURVES[name], tolerance="1e-12", integration=FAST_INTEGRATION)
        assert report.valid, report.errors

    @pytest.mark.parametrize("split", ["0.1", "0.5", "0.77"])
    def test_additivity_at_default_tolerance(self, split: str) -> None:
        """L(0, t) + L(t, 1) matches L(0, 1) to 1e-25."""
        report = verify_additivity(ARCH, split)
        assert report.valid, report.errors
        assert report.error <= Decimal("1e-25")

    @pytest.mark.parametrize("name", ["quadratic", "arch", "s_curve", "cusp"])
    def test_roundtrip(self, name: str) -> None:
        """length -> t -> length reproduces the target."""
        points = CURVES[name]
        target = arc_length(points, **FAST_LENGTH) * Decimal("0.4")

        report = verify_inverse_roundtrip(
            points,
            target,
            "1e-10",
            integration=FAST_INTEGRATION,
            inverse=InverseConfig(
                tolerance=Decimal("1e-12"), length_tolerance=Decimal("1e-15")
            ),
        )

        assert report.valid, report.errors
        assert report.converged

    def test_roundtrip_default_tolerance(self) -> None:
        """Default tolerances roundtrip to 1e-25."""
        target = arc_length(ARCH) / 3
        report = verify_inverse_roundtrip(ARCH, target)
        assert report.valid, report.errors

    def test_idempotent(self) -> None:
        """Repeated calls give identical results."""
        assert arc_length(S_CURVE, **FAST_LENGTH) == arc_length(S_CURVE, **FAST_LENGTH)

    @pytest.mark.parametrize("name", ["quadratic", "arch", "s_curve"])
    def test_table_invariants(self, name: str) -> None:
        """Tables are monotone with exact boundary entries."""
        report = verify_table(CURVES[name], 20, "1e-12", integration=FAST_INTEGRATION)
        assert report.valid, report.errors

    def test_reversed_curve_same_length(self) -> None:
        """Reversing the control points does not change the length."""
        forward = arc_length(S_CURVE, **FAST_LENGTH)
        backward = arc_length(list(reversed(S_CURVE)), **FAST_LENGTH)
        assert abs(forward - backward) < Decimal("1e-13")

    def test_scaling(self) -> None:
        """Scaling a curve by k scales its length by k."""
        scaled = [[3 * x, 3 * y] for x, y in ARCH]
        with ComputationContext().activate():
            expected = arc_length(ARCH, **FAST_LENGTH) * 3
        assert abs(arc_length(scaled, **FAST_LENGTH) - expected) < Decimal("1e-12")


class TestPaths:
    """Path aggregation end to end."""

    def test_path_inverse_locates_every_segment(self) -> None:
        """Targets inside each segment map back to that segment."""
        segments = [HORIZONTAL, [[10, 0], [10, 50], [60, 50], [60, 0]], QUADRATIC]
        lengths = [arc_length(segment, **FAST_LENGTH) for segment in segments]

        accumulated = Decimal(0)
        for index, segment_length in enumerate(lengths):
            with ComputationContext().activate():
                target = accumulated + segment_length / 2
            location = path_inverse_arc_length(segments, target, **FAST_INVERSE)

            assert location.segment_index == index
            assert abs(location.total_length - target) < Decimal("1e-10")
            with ComputationContext().activate():
                accumulated += segment_length

        total = path_arc_length(segments, **FAST_LENGTH)
        assert abs(total - accumulated) < Decimal("1e-13")
