"""Utility functions for arclength.

This module provides utility functions including:

- Logging setup and configuration
- Verification statistics tracking
- Rich rendering of verification summaries
"""

from arclength.utils.logging import (
    VerificationLogger,
    VerificationStats,
    configure_logging,
)
from arclength.utils.report import build_summary_table, render_verification_summary

__all__ = [
    "VerificationLogger",
    "VerificationStats",
    "build_summary_table",
    "configure_logging",
    "render_verification_summary",
]
