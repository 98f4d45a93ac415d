"""arclength - Arbitrary-precision arc length of Bezier curves.

arclength computes the arc length of Bezier curves and its inverse (the
parameter at which a given length is reached) with Decimal arithmetic at a
configurable working precision, using adaptive Gauss-Legendre quadrature and
a Newton-Raphson solver with bisection fallback. Lookup tables give fast
approximate inversion with optional exact refinement, and a verification
suite cross-checks results by independent methods.

Example:
    >>> from arclength import arc_length, inverse_arc_length
    >>> line = [[0, 0], [10, 0]]
    >>> round(arc_length(line), 20)
    Decimal('10.00000000000000000000')
"""

from arclength.config import ArcLengthSettings, get_default_settings
from arclength.context import ComputationContext
from arclength.core import (
    ArcLengthEngine,
    ArcLengthTable,
    arc_length,
    create_arc_length_table,
    inverse_arc_length,
    path_arc_length,
    path_inverse_arc_length,
    verify_additivity,
    verify_all,
    verify_bounds,
    verify_inverse_roundtrip,
    verify_subdivision,
    verify_table,
)
from arclength.domain import BezierCurve, InverseResult, PathLocation, Point
from arclength.exceptions import (
    ArcLengthError,
    ConfigurationError,
    EvaluationError,
    InvalidArgumentError,
    InvalidCurveError,
)

__version__ = "0.1.0"

__all__ = [
    "ArcLengthEngine",
    "ArcLengthError",
    "ArcLengthSettings",
    "ArcLengthTable",
    "BezierCurve",
    "ComputationContext",
    "ConfigurationError",
    "EvaluationError",
    "InvalidArgumentError",
    "InvalidCurveError",
    "InverseResult",
    "PathLocation",
    "Point",
    "__version__",
    "arc_length",
    "create_arc_length_table",
    "get_default_settings",
    "inverse_arc_length",
    "path_arc_length",
    "path_inverse_arc_length",
    "verify_additivity",
    "verify_all",
    "verify_bounds",
    "verify_inverse_roundtrip",
    "verify_subdivision",
    "verify_table",
]
