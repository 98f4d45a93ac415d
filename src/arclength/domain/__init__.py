"""Domain models for arclength.

This module contains the curve types consumed by the core and the result
types it produces. All models are designed to be:

- Immutable (frozen dataclasses)
- Decimal-valued, serializable with exact string coordinates
- Independent of any document format

Key classes:
- Point: A 2D point or vector with Decimal coordinates
- Curve: Protocol for curves the core can integrate
- BezierCurve: Bezier evaluator of arbitrary degree
- InverseResult: Outcome of an inverse arc length solve
- PathLocation: Segment index and local t on a multi-segment path
- TableEntry: One sample of an arc length table
- *Report / VerificationSummary: Verification check results
"""

from arclength.domain.curve import BezierCurve, Curve, Point, as_curve
from arclength.domain.reports import (
    AdditivityReport,
    BoundsReport,
    RoundtripReport,
    SubdivisionReport,
    TableReport,
    VerificationSummary,
)
from arclength.domain.results import InverseResult, PathLocation, TableEntry

__all__: list[str] = [
    # Curves
    "Point",
    "Curve",
    "BezierCurve",
    "as_curve",
    # Results
    "InverseResult",
    "PathLocation",
    "TableEntry",
    # Reports
    "AdditivityReport",
    "BoundsReport",
    "RoundtripReport",
    "SubdivisionReport",
    "TableReport",
    "VerificationSummary",
]
