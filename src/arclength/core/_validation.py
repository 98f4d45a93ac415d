"""Internal argument checks shared by the public entry points.

Not intended for public use.
"""

from decimal import Decimal
from typing import Any

from arclength.config.settings import MAX_SUPPORTED_DEPTH
from arclength.context import ComputationContext
from arclength.exceptions import InvalidArgumentError


def require_non_negative_int(name: str, value: Any) -> int:
    """Reject bools, non-integers and negatives."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(name, "must be an integer", value)
    if value < 0:
        raise InvalidArgumentError(name, "must be non-negative", value)
    return value


def require_depths(max_depth: Any, min_depth: Any) -> None:
    """Subdivision depths: non-negative ints, max_depth capped."""
    require_non_negative_int("max_depth", max_depth)
    require_non_negative_int("min_depth", min_depth)
    if max_depth > MAX_SUPPORTED_DEPTH:
        raise InvalidArgumentError(
            "max_depth", f"must not exceed {MAX_SUPPORTED_DEPTH}", max_depth
        )


def require_positive_int(name: str, value: Any) -> int:
    require_non_negative_int(name, value)
    if value == 0:
        raise InvalidArgumentError(name, "must be positive", value)
    return value


def positive_decimal(context: ComputationContext, name: str, value: Any) -> Decimal:
    """Normalize a tolerance: finite and strictly positive."""
    result = context.to_finite_decimal(value, name)
    if result <= 0:
        raise InvalidArgumentError(name, "must be positive", value)
    return result


def non_negative_decimal(context: ComputationContext, name: str, value: Any) -> Decimal:
    """Normalize a length: finite and >= 0."""
    result = context.to_finite_decimal(value, name)
    if result < 0:
        raise InvalidArgumentError(name, "must be non-negative", value)
    return result


def unit_parameter(context: ComputationContext, name: str, value: Any) -> Decimal:
    """Normalize a curve parameter: finite and within [0, 1]."""
    result = context.to_finite_decimal(value, name)
    if result < 0 or result > 1:
        raise InvalidArgumentError(name, "must be within [0, 1]", value)
    return result
