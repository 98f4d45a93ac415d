"""Configuration settings for arclength."""

from decimal import Decimal
from pathlib import Path

from pydantic import BaseModel, Field

from arclength.context import DEFAULT_PRECISION, MIN_PRECISION

DEFAULT_ARC_LENGTH_TOLERANCE = Decimal("1e-30")
MAX_SUPPORTED_DEPTH = 500


class PrecisionConfig(BaseModel):
    """Working precision of the Decimal computation context."""

    precision: int = Field(
        default=DEFAULT_PRECISION,
        ge=MIN_PRECISION,
        description="Significant digits used for all arithmetic",
    )


class IntegrationConfig(BaseModel):
    """Configuration for adaptive Gauss-Legendre integration."""

    tolerance: Decimal = Field(
        default=DEFAULT_ARC_LENGTH_TOLERANCE,
        gt=0,
        description="Error budget for the whole interval; halved at each split",
    )
    max_depth: int = Field(
        default=50,
        ge=0,
        le=MAX_SUPPORTED_DEPTH,
        description="Hard cap on subdivision depth",
    )
    min_depth: int = Field(
        default=3,
        ge=0,
        description="Subdivision levels forced before accepting a result",
    )


class InverseConfig(BaseModel):
    """Configuration for the Newton/bisection inverse solver."""

    tolerance: Decimal = Field(
        default=DEFAULT_ARC_LENGTH_TOLERANCE,
        gt=0,
        description="Residual and step-size convergence threshold",
    )
    max_iterations: int = Field(
        default=100,
        ge=1,
        description="Maximum solver iterations before reporting non-convergence",
    )
    length_tolerance: Decimal = Field(
        default=DEFAULT_ARC_LENGTH_TOLERANCE,
        gt=0,
        description="Integration tolerance for each arc length evaluation",
    )


class TableConfig(BaseModel):
    """Configuration for arc length lookup tables."""

    sample_count: int = Field(
        default=100,
        ge=2,
        description="Number of uniform parameter intervals in the table",
    )


class VerificationConfig(BaseModel):
    """Tolerances and sample counts for the verification checks."""

    bounds_tolerance: Decimal = Field(
        default=DEFAULT_ARC_LENGTH_TOLERANCE,
        ge=0,
        description="Slack allowed on the chord/polygon bounds",
    )
    subdivision_tolerance: Decimal = Field(
        default=Decimal("1e-20"),
        ge=0,
        description="Slack allowed when the chord sum exceeds the quadrature length",
    )
    subdivisions: int = Field(
        default=32,
        ge=1,
        description="Chord count for the subdivision cross-check",
    )
    additivity_tolerance: Decimal = Field(
        default=Decimal("1e-25"),
        ge=0,
        description="Maximum |L(0,t) + L(t,1) - L(0,1)|",
    )
    additivity_split: Decimal = Field(
        default=Decimal("0.5"),
        ge=0,
        le=1,
        description="Split parameter for the additivity check",
    )
    roundtrip_tolerance: Decimal = Field(
        default=Decimal("1e-25"),
        ge=0,
        description="Maximum length error of a length -> t -> length roundtrip",
    )
    table_samples: int = Field(
        default=20,
        ge=2,
        description="Sample count of the table built by the table check",
    )
    table_total_tolerance: Decimal = Field(
        default=Decimal("1e-20"),
        ge=0,
        description="Maximum difference between table total and direct length",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    enabled: bool = Field(
        default=False,
        description="Configure structlog when an engine is created",
    )
    log_file: Path | None = Field(
        default=None,
        description="Path to log file (no file output when None)",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class ArcLengthSettings(BaseModel):
    """Main library settings."""

    precision: PrecisionConfig = Field(default_factory=PrecisionConfig)
    integration: IntegrationConfig = Field(default_factory=IntegrationConfig)
    inverse: InverseConfig = Field(default_factory=InverseConfig)
    table: TableConfig = Field(default_factory=TableConfig)
    verification: VerificationConfig = Field(default_factory=VerificationConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> ArcLengthSettings:
    """Get default library settings."""
    return ArcLengthSettings()
