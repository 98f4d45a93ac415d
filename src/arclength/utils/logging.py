"""Logging utilities for arclength."""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import structlog


@dataclass
class VerificationStats:
    """Statistics from a verification run."""

    checks_run: int = 0
    checks_passed: int = 0
    checks_failed: int = 0
    errors: list[tuple[str, str]] = field(default_factory=list)
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate verification duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure structured logging on top of the stdlib logging module.

    The library never configures logging on import; applications (or an
    ArcLengthEngine with logging enabled) call this once.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)

    if not quiet:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, console_level.upper()))
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("arclength")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=console_level,
    )

    return logger


class VerificationLogger:
    """Logger for tracking verification checks and their statistics."""

    def __init__(self, logger: Any) -> None:
        self._logger = logger
        self._stats = VerificationStats()

    def log_run_start(self, check_count: int, start_time: float) -> None:
        """Log start of a verification run."""
        self._logger.debug("Verification started", checks=check_count)
        self._stats.start_time = start_time

    def log_run_complete(self, valid: bool, end_time: float) -> None:
        """Log end of a verification run."""
        self._stats.end_time = end_time
        self._logger.info(
            "Verification complete",
            valid=valid,
            passed=self._stats.checks_passed,
            failed=self._stats.checks_failed,
            duration_s=round(self._stats.duration_seconds, 3),
        )

    def log_check(
        self,
        name: str,
        valid: bool,
        errors: list[str],
        duration_ms: float,
    ) -> None:
        """Log the outcome of a single check."""
        self._stats.checks_run += 1

        if valid:
            self._stats.checks_passed += 1
            self._logger.info(
                "Check passed",
                check=name,
                duration_ms=round(duration_ms, 2),
            )
            return

        self._stats.checks_failed += 1
        self._stats.errors.extend((name, error) for error in errors)
        self._logger.warning(
            "Check failed",
            check=name,
            errors=errors,
            duration_ms=round(duration_ms, 2),
        )

    @property
    def stats(self) -> VerificationStats:
        """Get current verification statistics."""
        return self._stats
