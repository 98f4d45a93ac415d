"""Settings-bound facade over the arc length operations.

ArcLengthEngine binds one ArcLengthSettings and one ComputationContext so
that callers configure precision, tolerances and logging once and then call
the operations without repeating keyword arguments.
"""

from collections.abc import Sequence
from decimal import Decimal
from typing import Any

from arclength.config import ArcLengthSettings, get_default_settings
from arclength.context import ComputationContext
from arclength.core.arc_length import arc_length
from arclength.core.inverse import inverse_arc_length
from arclength.core.path import path_arc_length, path_inverse_arc_length
from arclength.core.table import ArcLengthTable
from arclength.core.verification import verify_all
from arclength.domain import Curve, InverseResult, PathLocation, VerificationSummary
from arclength.utils.logging import VerificationLogger, configure_logging


class ArcLengthEngine:
    """Arc length operations with configured defaults.

    Example:
        settings = ArcLengthSettings(precision=PrecisionConfig(precision=100))
        engine = ArcLengthEngine(settings)
        total = engine.arc_length(points)
        result = engine.inverse_arc_length(points, total / 2)
    """

    def __init__(self, settings: ArcLengthSettings | None = None) -> None:
        """Initialize engine with settings.

        Args:
            settings: Library settings (defaults when None)
        """
        self.settings = settings or get_default_settings()
        self.context = ComputationContext(self.settings.precision.precision)
        self.logger = None

        log_cfg = self.settings.logging
        if log_cfg.enabled:
            self.logger = configure_logging(
                log_file=log_cfg.log_file,
                console_level=log_cfg.log_level,
                file_level=log_cfg.file_log_level,
            )

    def arc_length(self, curve: Curve | Any, t0: Any = 0, t1: Any = 1) -> Decimal:
        """Arc length of a curve between two parameters."""
        cfg = self.settings.integration
        return arc_length(
            curve,
            t0,
            t1,
            cfg.tolerance,
            cfg.max_depth,
            cfg.min_depth,
            context=self.context,
        )

    def inverse_arc_length(
        self,
        curve: Curve | Any,
        target_length: Any,
        initial_guess: Any = None,
    ) -> InverseResult:
        """Parameter at which the arc length from 0 reaches ``target_length``."""
        inv = self.settings.inverse
        integ = self.settings.integration
        return inverse_arc_length(
            curve,
            target_length,
            inv.tolerance,
            inv.max_iterations,
            inv.length_tolerance,
            initial_guess,
            max_depth=integ.max_depth,
            min_depth=integ.min_depth,
            context=self.context,
        )

    def path_arc_length(self, segments: Sequence[Curve | Any]) -> Decimal:
        """Total arc length of a multi-segment path."""
        cfg = self.settings.integration
        return path_arc_length(
            segments,
            cfg.tolerance,
            cfg.max_depth,
            cfg.min_depth,
            context=self.context,
        )

    def path_inverse_arc_length(
        self,
        segments: Sequence[Curve | Any],
        target_length: Any,
    ) -> PathLocation:
        """Segment index and local t at a global arc length."""
        inv = self.settings.inverse
        integ = self.settings.integration
        return path_inverse_arc_length(
            segments,
            target_length,
            inv.tolerance,
            inv.max_iterations,
            inv.length_tolerance,
            integ.max_depth,
            integ.min_depth,
            context=self.context,
        )

    def create_table(
        self,
        curve: Curve | Any,
        sample_count: int | None = None,
    ) -> ArcLengthTable:
        """Build an arc length table (configured sample count when None)."""
        cfg = self.settings.integration
        return ArcLengthTable.build(
            curve,
            self.settings.table.sample_count if sample_count is None else sample_count,
            cfg.tolerance,
            cfg.max_depth,
            cfg.min_depth,
            context=self.context,
        )

    def verify(
        self,
        curve: Curve | Any,
        verification_logger: VerificationLogger | None = None,
    ) -> VerificationSummary:
        """Run the full verification suite on a curve."""
        return verify_all(
            curve,
            self.settings,
            context=self.context,
            verification_logger=verification_logger,
        )
