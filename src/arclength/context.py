"""Explicit precision context for Decimal computations.

Each public operation takes an optional ComputationContext and runs its
arithmetic inside ``context.activate()``, which enters a thread-local copy of
the underlying ``decimal.Context``. Several contexts with different precisions
can therefore be used side by side, including from different threads.

Inputs are normalized once at the public boundary with ``to_decimal``;
everything below that boundary works on Decimal only.
"""

import decimal
from collections.abc import Iterator
from contextlib import contextmanager
from decimal import Decimal
from typing import Any

from arclength.exceptions import InvalidArgumentError

MIN_PRECISION = 50
DEFAULT_PRECISION = 80


class ComputationContext:
    """Working precision and rounding for a family of computations.

    Example:
        ctx = ComputationContext(precision=100)
        length = arc_length(points, context=ctx)
    """

    def __init__(
        self,
        precision: int = DEFAULT_PRECISION,
        rounding: str = decimal.ROUND_HALF_EVEN,
    ) -> None:
        """Create a context.

        Args:
            precision: Significant digits (at least MIN_PRECISION)
            rounding: One of the ``decimal`` rounding modes

        Raises:
            InvalidArgumentError: If precision is not an integer >= MIN_PRECISION
        """
        if isinstance(precision, bool) or not isinstance(precision, int):
            raise InvalidArgumentError("precision", "must be an integer", precision)
        if precision < MIN_PRECISION:
            raise InvalidArgumentError(
                "precision", f"must be at least {MIN_PRECISION} digits", precision
            )

        self._context = decimal.Context(
            prec=precision,
            rounding=rounding,
            Emax=decimal.MAX_EMAX,
            Emin=decimal.MIN_EMIN,
            traps=[decimal.InvalidOperation, decimal.DivisionByZero, decimal.Overflow],
        )

    @property
    def precision(self) -> int:
        """Configured number of significant digits."""
        return self._context.prec

    @property
    def rounding(self) -> str:
        return self._context.rounding

    @contextmanager
    def activate(self) -> Iterator[decimal.Context]:
        """Run the enclosed block with this context's precision."""
        with decimal.localcontext(self._context) as ctx:
            yield ctx

    def to_decimal(self, value: Any, name: str = "value") -> Decimal:
        """Normalize a number-like input to a Decimal at this precision.

        Floats go through their shortest ``repr`` so that ``0.1`` becomes
        ``Decimal("0.1")`` rather than its binary expansion.

        Args:
            value: Decimal, int, str or float
            name: Argument name used in error messages

        Returns:
            Decimal rounded to this context's precision

        Raises:
            InvalidArgumentError: If the value cannot be converted
        """
        if isinstance(value, bool):
            raise InvalidArgumentError(name, "booleans are not numbers", value)

        if isinstance(value, float):
            value = repr(value)
        elif not isinstance(value, (Decimal, int, str)):
            raise InvalidArgumentError(
                name, f"unsupported type {type(value).__name__}", value
            )

        try:
            return self._context.create_decimal(value)
        except (decimal.DecimalException, ValueError) as e:
            raise InvalidArgumentError(name, "not a valid number", value) from e

    def to_finite_decimal(self, value: Any, name: str = "value") -> Decimal:
        """Like ``to_decimal`` but also rejects NaN and infinities."""
        result = self.to_decimal(value, name)
        if not result.is_finite():
            raise InvalidArgumentError(name, "must be finite", value)
        return result

    def __repr__(self) -> str:
        return f"ComputationContext(precision={self.precision}, rounding={self.rounding!r})"


DEFAULT_CONTEXT = ComputationContext()


def resolve_context(context: ComputationContext | None) -> ComputationContext:
    """Return ``context`` or the module default when None."""
    return DEFAULT_CONTEXT if context is None else context
