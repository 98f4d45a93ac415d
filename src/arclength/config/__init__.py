"""Configuration management for arclength.

This module provides configuration management using Pydantic models.
Every public operation also accepts plain keyword arguments; the models
collect defaults for the engine facade and the verification suite.

Key classes:
- PrecisionConfig: Working precision of the computation context
- IntegrationConfig: Adaptive quadrature settings
- InverseConfig: Inverse solver settings
- TableConfig: Lookup table settings
- VerificationConfig: Verification check tolerances
- LoggingConfig: Logging settings
- ArcLengthSettings: Main library settings
"""

from arclength.config.settings import (
    DEFAULT_ARC_LENGTH_TOLERANCE,
    MAX_SUPPORTED_DEPTH,
    ArcLengthSettings,
    IntegrationConfig,
    InverseConfig,
    LoggingConfig,
    PrecisionConfig,
    TableConfig,
    VerificationConfig,
    get_default_settings,
)

__all__ = [
    "DEFAULT_ARC_LENGTH_TOLERANCE",
    "MAX_SUPPORTED_DEPTH",
    "ArcLengthSettings",
    "IntegrationConfig",
    "InverseConfig",
    "LoggingConfig",
    "PrecisionConfig",
    "TableConfig",
    "VerificationConfig",
    "get_default_settings",
]
