"""Core numerical algorithms for arclength.

This module contains the core algorithms for:

- Gauss-Legendre quadrature (fixed 5- and 10-point rules)
- Adaptive interval subdivision driven by the 5/10-point disagreement
- Arc length of curves and multi-segment paths
- Inverse arc length (Newton-Raphson with bisection fallback)
- Precomputed lookup tables with exact refinement
- Independent verification checks

All functions are:
- Pure (identical inputs give identical outputs)
- Synchronous and free of shared mutable state
- Normalizing their inputs once, at the public entry point

Key functions:
- gauss_legendre: Single-interval fixed-order quadrature
- speed: Curve speed |B'(t)|
- adaptive_integrate: Recursive adaptive quadrature
- arc_length: Arc length over a parameter range
- inverse_arc_length: Parameter at a given arc length
- path_arc_length / path_inverse_arc_length: Multi-segment variants
- create_arc_length_table: Build an ArcLengthTable
- verify_*: Verification checks

Key classes:
- ArcLengthTable: Immutable cumulative length samples
- ArcLengthEngine: Settings-bound facade
"""

from arclength.core.arc_length import arc_length
from arclength.core.engine import ArcLengthEngine
from arclength.core.integrator import adaptive_integrate
from arclength.core.inverse import NEAR_ZERO_SPEED_THRESHOLD, inverse_arc_length
from arclength.core.path import path_arc_length, path_inverse_arc_length
from arclength.core.quadrature import GAUSS_LEGENDRE, gauss_legendre
from arclength.core.speed import speed
from arclength.core.table import ArcLengthTable, create_arc_length_table
from arclength.core.verification import (
    verify_additivity,
    verify_all,
    verify_bounds,
    verify_inverse_roundtrip,
    verify_subdivision,
    verify_table,
)

__all__ = [
    # Constants
    "GAUSS_LEGENDRE",
    "NEAR_ZERO_SPEED_THRESHOLD",
    # Classes
    "ArcLengthEngine",
    "ArcLengthTable",
    # Numerical building blocks
    "adaptive_integrate",
    "gauss_legendre",
    "speed",
    # Arc length operations
    "arc_length",
    "create_arc_length_table",
    "inverse_arc_length",
    "path_arc_length",
    "path_inverse_arc_length",
    # Verification
    "verify_additivity",
    "verify_all",
    "verify_bounds",
    "verify_inverse_roundtrip",
    "verify_subdivision",
    "verify_table",
]
