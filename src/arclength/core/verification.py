"""Independent cross-checks of the arc length operations.

These are opt-in diagnostics: each check recomputes expensive integrals on
its own and is never called from the arc length or inverse hot paths.
A failed check is reported in the returned report (``valid=False`` with
populated ``errors``); only malformed input raises.

Key functions:
- verify_bounds: chord length <= arc length <= control polygon length
- verify_subdivision: quadrature length dominates a uniform chord sum
- verify_additivity: L(0, t) + L(t, 1) == L(0, 1)
- verify_inverse_roundtrip: length -> t -> length reproduces the target
- verify_table: table monotonicity, boundaries and lookup accuracy
- verify_all: all of the above with settings-driven defaults
"""

import time
from collections.abc import Callable, Sequence
from decimal import Decimal
from typing import Any

import structlog

from arclength.config import (
    ArcLengthSettings,
    IntegrationConfig,
    InverseConfig,
    get_default_settings,
)
from arclength.context import ComputationContext, resolve_context
from arclength.core._validation import (
    non_negative_decimal,
    require_positive_int,
    unit_parameter,
)
from arclength.core.arc_length import curve_arc_length
from arclength.core.inverse import solve_inverse
from arclength.core.table import ArcLengthTable
from arclength.domain import (
    AdditivityReport,
    BoundsReport,
    Curve,
    Point,
    RoundtripReport,
    SubdivisionReport,
    TableReport,
    VerificationSummary,
    as_curve,
)
from arclength.utils.logging import VerificationLogger

logger = structlog.get_logger(__name__)

TABLE_ROUNDTRIP_FRACTIONS = (Decimal("0.25"), Decimal("0.5"), Decimal("0.75"))


def _distance(p: Point, q: Point) -> Decimal:
    dx = q.x - p.x
    dy = q.y - p.y
    return (dx * dx + dy * dy).sqrt()


def _polygon_length(points: Sequence[Point]) -> Decimal:
    total = Decimal(0)
    for i in range(len(points) - 1):
        total += _distance(points[i], points[i + 1])
    return total


def _full_length(curve: Curve, integration: IntegrationConfig) -> Decimal:
    return curve_arc_length(
        curve,
        Decimal(0),
        Decimal(1),
        integration.tolerance,
        integration.max_depth,
        integration.min_depth,
    )


def verify_bounds(
    curve: Curve | Any,
    computed_length: Any = None,
    tolerance: Any = Decimal("1e-30"),
    integration: IntegrationConfig | None = None,
    *,
    context: ComputationContext | None = None,
) -> BoundsReport:
    """Check chord length <= arc length <= control polygon length.

    A Bezier curve lies in the convex hull of its control polygon and is
    never longer than it, and never shorter than the straight chord.

    Args:
        curve: Curve, or sequence of (x, y) control points
        computed_length: Length to check (computed when None)
        tolerance: Slack allowed on both bounds
        integration: Integration options (defaults when None)
        context: Precision context (module default when None)

    Returns:
        BoundsReport
    """
    ctx = resolve_context(context)
    integration = integration or IntegrationConfig()

    with ctx.activate():
        resolved = as_curve(curve, ctx)
        tol = non_negative_decimal(ctx, "tolerance", tolerance)
        length = (
            _full_length(resolved, integration)
            if computed_length is None
            else non_negative_decimal(ctx, "computed_length", computed_length)
        )

        points = resolved.control_points
        chord_length = _distance(points[0], points[-1])
        polygon_length = _polygon_length(points)

        errors = []
        if length < chord_length - tol:
            errors.append(f"Arc length {length} < chord length {chord_length}")
        if length > polygon_length + tol:
            errors.append(f"Arc length {length} > polygon length {polygon_length}")

        ratio = length / chord_length if chord_length > 0 else Decimal(1)

    return BoundsReport(
        valid=not errors,
        chord_length=chord_length,
        polygon_length=polygon_length,
        arc_length=length,
        ratio=ratio,
        errors=errors,
    )


def verify_subdivision(
    curve: Curve | Any,
    subdivisions: int = 16,
    tolerance: Any = Decimal("1e-20"),
    integration: IntegrationConfig | None = None,
    *,
    context: ComputationContext | None = None,
) -> SubdivisionReport:
    """Compare the quadrature length with a uniform chord-sum approximation.

    Any inscribed polyline is no longer than the curve, so the quadrature
    length must dominate the chord sum (up to ``tolerance``).

    Args:
        curve: Curve, or sequence of (x, y) control points
        subdivisions: Number of uniform chords
        tolerance: Allowed excess of the chord sum over the quadrature length
        integration: Integration options (defaults when None)
        context: Precision context (module default when None)

    Returns:
        SubdivisionReport
    """
    ctx = resolve_context(context)
    integration = integration or IntegrationConfig()

    with ctx.activate():
        resolved = as_curve(curve, ctx)
        require_positive_int("subdivisions", subdivisions)
        tol = non_negative_decimal(ctx, "tolerance", tolerance)

        quadrature_length = _full_length(resolved, integration)

        subdivision_length = Decimal(0)
        prev_point = resolved.evaluate(Decimal(0))
        for i in range(1, subdivisions + 1):
            curr_point = resolved.evaluate(Decimal(i) / Decimal(subdivisions))
            subdivision_length += _distance(prev_point, curr_point)
            prev_point = curr_point

        difference = abs(quadrature_length - subdivision_length)

        errors = []
        if quadrature_length < subdivision_length - tol:
            errors.append(
                f"Quadrature length {quadrature_length} < chord sum {subdivision_length}"
            )

    return SubdivisionReport(
        valid=not errors,
        quadrature_length=quadrature_length,
        subdivision_length=subdivision_length,
        difference=difference,
        underestimate=quadrature_length > subdivision_length,
        errors=errors,
    )


def verify_additivity(
    curve: Curve | Any,
    t: Any,
    tolerance: Any = Decimal("1e-25"),
    integration: IntegrationConfig | None = None,
    *,
    context: ComputationContext | None = None,
) -> AdditivityReport:
    """Check L(0, t) + L(t, 1) == L(0, 1) within tolerance.

    Raises:
        InvalidArgumentError: If t is outside [0, 1]
    """
    ctx = resolve_context(context)
    integration = integration or IntegrationConfig()

    with ctx.activate():
        resolved = as_curve(curve, ctx)
        split = unit_parameter(ctx, "t", t)
        tol = non_negative_decimal(ctx, "tolerance", tolerance)

        def length(a: Decimal, b: Decimal) -> Decimal:
            return curve_arc_length(
                resolved,
                a,
                b,
                integration.tolerance,
                integration.max_depth,
                integration.min_depth,
            )

        total_length = length(Decimal(0), Decimal(1))
        left_length = length(Decimal(0), split)
        right_length = length(split, Decimal(1))

        total = left_length + right_length
        error = abs(total - total_length)

        errors = []
        if error > tol:
            errors.append(f"L(0,{split}) + L({split},1) differs from L(0,1) by {error}")

    return AdditivityReport(
        valid=not errors,
        total_length=total_length,
        left_length=left_length,
        right_length=right_length,
        sum=total,
        error=error,
        errors=errors,
    )


def verify_inverse_roundtrip(
    curve: Curve | Any,
    target_length: Any,
    tolerance: Any = Decimal("1e-25"),
    integration: IntegrationConfig | None = None,
    inverse: InverseConfig | None = None,
    *,
    context: ComputationContext | None = None,
) -> RoundtripReport:
    """Check that length -> t -> length reproduces the target.

    The check is valid only when the error is within tolerance and the
    solver reported convergence.

    Raises:
        InvalidArgumentError: On a negative or non-finite target
    """
    ctx = resolve_context(context)
    integration = integration or IntegrationConfig()
    inverse = inverse or InverseConfig()

    with ctx.activate():
        resolved = as_curve(curve, ctx)
        target = non_negative_decimal(ctx, "target_length", target_length)
        tol = non_negative_decimal(ctx, "tolerance", tolerance)

        result = solve_inverse(
            resolved,
            target,
            tolerance=inverse.tolerance,
            max_iterations=inverse.max_iterations,
            length_tolerance=inverse.length_tolerance,
            max_depth=integration.max_depth,
            min_depth=integration.min_depth,
        )
        verified_length = curve_arc_length(
            resolved,
            Decimal(0),
            result.t,
            integration.tolerance,
            integration.max_depth,
            integration.min_depth,
        )
        error = abs(verified_length - target)

        errors = []
        if error > tol:
            errors.append(f"Roundtrip error {error} exceeds tolerance {tol}")
        if not result.converged:
            errors.append(f"Inverse solver did not converge after {result.iterations} iterations")

    return RoundtripReport(
        valid=not errors,
        target_length=target,
        found_t=result.t,
        verified_length=verified_length,
        error=error,
        converged=result.converged,
        errors=errors,
    )


def verify_table(
    curve: Curve | Any,
    sample_count: int = 50,
    total_tolerance: Any = Decimal("1e-20"),
    integration: IntegrationConfig | None = None,
    *,
    context: ComputationContext | None = None,
) -> TableReport:
    """Build a table and check its invariants and lookup accuracy.

    Checks monotonic lengths, the (0, 0) and (1, total) boundary entries,
    the table total against a direct computation, and that ``get_t`` at a
    few length fractions lands within two sample spacings of the target.
    """
    ctx = resolve_context(context)
    integration = integration or IntegrationConfig()

    with ctx.activate():
        resolved = as_curve(curve, ctx)
        tol = non_negative_decimal(ctx, "total_tolerance", total_tolerance)

        table = ArcLengthTable.build(
            resolved,
            sample_count,
            integration.tolerance,
            integration.max_depth,
            integration.min_depth,
            context=ctx,
        )
        entries = table.entries

        errors = []
        is_monotonic = True
        max_gap = Decimal(0)

        for i in range(1, len(entries)):
            prev, curr = entries[i - 1], entries[i]
            if curr.length < prev.length:
                is_monotonic = False
                errors.append(
                    f"Table not monotonic at index {i}: {prev.length} > {curr.length}"
                )
            if curr.t <= prev.t:
                errors.append(f"Table t not ascending at index {i}: {prev.t} >= {curr.t}")
            max_gap = max(max_gap, curr.length - prev.length)

        first, last = entries[0], entries[-1]
        if first.t != 0 or first.length != 0:
            errors.append(
                f"First entry should be t=0, length=0, got t={first.t}, length={first.length}"
            )
        if last.t != 1:
            errors.append(f"Last entry should have t=1, got t={last.t}")
        if last.length != table.total_length:
            errors.append(
                f"Last entry length {last.length} differs from total {table.total_length}"
            )

        direct_length = _full_length(resolved, integration)
        if abs(table.total_length - direct_length) > tol:
            errors.append(
                f"Table total length {table.total_length} differs from "
                f"direct computation {direct_length}"
            )

        max_roundtrip_error = table.total_length / Decimal(sample_count) * 2
        for fraction in TABLE_ROUNDTRIP_FRACTIONS:
            target = table.total_length * fraction
            found_t = table.get_t(target)
            recovered = curve_arc_length(
                resolved,
                Decimal(0),
                found_t,
                integration.tolerance,
                integration.max_depth,
                integration.min_depth,
            )
            roundtrip_error = abs(recovered - target)
            if roundtrip_error > max_roundtrip_error:
                errors.append(f"get_t roundtrip error too large at {fraction}: {roundtrip_error}")

    return TableReport(
        valid=not errors,
        is_monotonic=is_monotonic,
        max_gap=max_gap,
        table_size=len(entries),
        total_length=table.total_length,
        errors=errors,
    )


def verify_all(
    curve: Curve | Any,
    settings: ArcLengthSettings | None = None,
    *,
    context: ComputationContext | None = None,
    verification_logger: VerificationLogger | None = None,
) -> VerificationSummary:
    """Run every check with settings-driven tolerances.

    Args:
        curve: Curve, or sequence of (x, y) control points
        settings: Library settings (defaults when None)
        context: Precision context (built from settings when None)
        verification_logger: Collects per-check logs and statistics

    Returns:
        VerificationSummary keyed by check name
    """
    settings = settings or get_default_settings()
    ctx = context or ComputationContext(settings.precision.precision)
    vlogger = verification_logger or VerificationLogger(logger)
    integration = settings.integration
    cfg = settings.verification

    with ctx.activate():
        resolved = as_curve(curve, ctx)
        total_length = _full_length(resolved, integration)
        half_length = total_length / 2

    checks: list[tuple[str, Callable[[], Any]]] = [
        (
            "bounds",
            lambda: verify_bounds(
                resolved, total_length, cfg.bounds_tolerance, integration, context=ctx
            ),
        ),
        (
            "subdivision",
            lambda: verify_subdivision(
                resolved, cfg.subdivisions, cfg.subdivision_tolerance, integration, context=ctx
            ),
        ),
        (
            "additivity",
            lambda: verify_additivity(
                resolved, cfg.additivity_split, cfg.additivity_tolerance, integration, context=ctx
            ),
        ),
        (
            "inverse_roundtrip",
            lambda: verify_inverse_roundtrip(
                resolved,
                half_length,
                cfg.roundtrip_tolerance,
                integration,
                settings.inverse,
                context=ctx,
            ),
        ),
        (
            "table",
            lambda: verify_table(
                resolved, cfg.table_samples, cfg.table_total_tolerance, integration, context=ctx
            ),
        ),
    ]

    vlogger.log_run_start(len(checks), time.time())

    results = {}
    for name, check in checks:
        start = time.time()
        report = check()
        vlogger.log_check(name, report.valid, report.errors, (time.time() - start) * 1000)
        results[name] = report

    valid = all(report.valid for report in results.values())
    vlogger.log_run_complete(valid, time.time())

    return VerificationSummary(valid=valid, results=results)
