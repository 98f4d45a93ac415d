"""Unit tests for arc length lookup tables.

Tests cover:
- Table construction and its invariants
- Approximate lookups (clamping, interpolation)
- Refined lookups through the inverse solver
- Validation of sample counts and targets
"""

from decimal import Decimal

import pytest

from arclength import arc_length
from arclength.context import ComputationContext
from arclength.core.table import ArcLengthTable, create_arc_length_table
from arclength.domain import TableEntry
from arclength.exceptions import InvalidArgumentError, InvalidCurveError

LENGTH_OPTS = {"max_depth": 20, "min_depth": 2}
FAST_BUILD = {"tolerance": "1e-15", **LENGTH_OPTS}
FAST_REFINE = {"tolerance": "1e-12", "length_tolerance": "1e-15", **LENGTH_OPTS}

LINE = [[0, 0], [3, 4]]
ARCH = [[0, 0], [0, 100], [100, 100], [100, 0]]


@pytest.fixture(scope="module")
def arch_table() -> ArcLengthTable:
    """Arch cubic sampled at 10 intervals."""
    return ArcLengthTable.build(ARCH, 10, **FAST_BUILD)


@pytest.fixture(scope="module")
def line_table() -> ArcLengthTable:
    """3-4-5 line sampled at 10 intervals."""
    return ArcLengthTable.build(LINE, 10, **FAST_BUILD)


class TestBuild:
    """Tests for table construction."""

    def test_entry_count(self, arch_table: ArcLengthTable) -> None:
        """sample_count intervals give sample_count + 1 entries."""
        assert arch_table.sample_count == 10
        assert len(arch_table) == 11
        assert len(arch_table.entries) == 11

    def test_boundaries(self, arch_table: ArcLengthTable) -> None:
        """First entry is (0, 0); last is (1, total)."""
        assert arch_table[0] == TableEntry(t=Decimal(0), length=Decimal(0))
        assert arch_table[-1].t == 1
        assert arch_table[-1].length == arch_table.total_length

    def test_uniform_parameters(self, arch_table: ArcLengthTable) -> None:
        """Samples sit at t = i / sample_count."""
        assert [entry.t for entry in arch_table] == [Decimal(i) / 10 for i in range(11)]

    def test_lengths_strictly_increase(self, arch_table: ArcLengthTable) -> None:
        """A regular curve gives strictly growing cumulative lengths."""
        lengths = [entry.length for entry in arch_table]
        assert all(b > a for a, b in zip(lengths, lengths[1:]))

    def test_total_matches_direct_length(self, arch_table: ArcLengthTable) -> None:
        """Cumulative sum agrees with one integration over [0, 1]."""
        direct = arc_length(ARCH, **FAST_BUILD)
        assert abs(arch_table.total_length - direct) < Decimal("1e-13")

    def test_curve_is_normalized(self, arch_table: ArcLengthTable) -> None:
        """Raw points are stored as a BezierCurve."""
        assert arch_table.curve.control_points[3].x == 100

    def test_custom_context(self) -> None:
        """Tables remember the context they were built with."""
        ctx = ComputationContext(precision=60)
        table = ArcLengthTable.build(LINE, 2, **FAST_BUILD, context=ctx)
        assert table.context is ctx
        assert len(table[1].length.as_tuple().digits) <= 60

    def test_degenerate_curve(self) -> None:
        """Zero-length curves produce an all-zero table."""
        table = ArcLengthTable.build([[5, 5], [5, 5]], 4, **FAST_BUILD)
        assert table.total_length == 0
        assert all(entry.length == 0 for entry in table)

    def test_create_function(self) -> None:
        """create_arc_length_table is equivalent to build."""
        table = create_arc_length_table(LINE, 4, **FAST_BUILD)
        assert isinstance(table, ArcLengthTable)
        assert table.entries == ArcLengthTable.build(LINE, 4, **FAST_BUILD).entries

    @pytest.mark.parametrize("sample_count", [0, 1, -5, True])
    def test_bad_sample_count(self, sample_count: int) -> None:
        """At least two intervals are required."""
        with pytest.raises(InvalidArgumentError):
            ArcLengthTable.build(LINE, sample_count)

    def test_bad_curve(self) -> None:
        """Malformed curves are rejected."""
        with pytest.raises(InvalidCurveError):
            ArcLengthTable.build([[0, 0]], 4)

    def test_direct_construction_needs_entries(self) -> None:
        """A table needs at least three samples."""
        zero = TableEntry(t=Decimal(0), length=Decimal(0))
        with pytest.raises(InvalidArgumentError):
            ArcLengthTable(None, (zero,), ComputationContext())  # type: ignore[arg-type]

    def test_repr(self, arch_table: ArcLengthTable) -> None:
        """repr shows sample count."""
        assert "sample_count=10" in repr(arch_table)


class TestLookup:
    """Tests for get_t."""

    def test_clamps_low(self, arch_table: ArcLengthTable) -> None:
        """Non-positive lengths map to t=0."""
        assert arch_table.get_t(0) == 0
        assert arch_table.get_t(-10) == 0

    def test_clamps_high(self, arch_table: ArcLengthTable) -> None:
        """Lengths at or past the total map to t=1."""
        assert arch_table.get_t(arch_table.total_length) == 1
        assert arch_table.get_t(arch_table.total_length * 2) == 1

    def test_sample_points(self, arch_table: ArcLengthTable) -> None:
        """Lookups at sampled lengths return the sampled t."""
        entry = arch_table[4]
        assert abs(arch_table.get_t(entry.length) - entry.t) < Decimal("1e-60")

    def test_line_interpolation_is_exact(self, line_table: ArcLengthTable) -> None:
        """Linear interpolation is exact for constant speed."""
        assert abs(line_table.get_t("2.5") - Decimal("0.5")) < Decimal("1e-12")
        assert abs(line_table.get_t("1.25") - Decimal("0.25")) < Decimal("1e-12")

    def test_interpolates_between_samples(self, arch_table: ArcLengthTable) -> None:
        """Lookups between samples fall between the bracketing t values."""
        lo, hi = arch_table[2], arch_table[3]
        t = arch_table.get_t((lo.length + hi.length) / 2)
        assert lo.t < t < hi.t

    def test_approximation_error(self, arch_table: ArcLengthTable) -> None:
        """The interpolated t is close to the exact inverse."""
        half = arch_table.total_length / 2
        # Symmetric arch: half the length is exactly at t = 0.5
        assert abs(arch_table.get_t(half) - Decimal("0.5")) < Decimal("1e-12")

    def test_non_finite_target(self, arch_table: ArcLengthTable) -> None:
        """NaN lookups are rejected."""
        with pytest.raises(InvalidArgumentError):
            arch_table.get_t("NaN")


class TestRefinedLookup:
    """Tests for get_t_refined."""

    def test_refined_reaches_target(self, arch_table: ArcLengthTable) -> None:
        """Refinement converges to the exact parameter."""
        target = arch_table.total_length * Decimal("0.3")

        t = arch_table.get_t_refined(target, **FAST_REFINE)

        recovered = arc_length(ARCH, 0, t, **FAST_BUILD)
        assert abs(recovered - target) < Decimal("1e-11")

    def test_refined_beats_interpolation(self, arch_table: ArcLengthTable) -> None:
        """Refined t is at least as accurate as the table estimate."""
        target = arch_table.total_length * Decimal("0.37")

        rough = arch_table.get_t(target)
        refined = arch_table.get_t_refined(target, **FAST_REFINE)

        rough_error = abs(arc_length(ARCH, 0, rough, **FAST_BUILD) - target)
        refined_error = abs(arc_length(ARCH, 0, refined, **FAST_BUILD) - target)
        assert refined_error <= rough_error

    def test_refined_zero(self, arch_table: ArcLengthTable) -> None:
        """Zero length is t=0."""
        assert arch_table.get_t_refined(0, **FAST_REFINE) == 0

    def test_refined_negative_target(self, arch_table: ArcLengthTable) -> None:
        """Negative targets are rejected rather than clamped."""
        with pytest.raises(InvalidArgumentError):
            arch_table.get_t_refined(-1)

    def test_refined_bad_iterations(self, arch_table: ArcLengthTable) -> None:
        """At least one iteration is required."""
        with pytest.raises(InvalidArgumentError):
            arch_table.get_t_refined(1, max_iterations=0)
