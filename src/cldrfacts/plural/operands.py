"""CLDR plural operands.

Derives the operand set (n, i, v, w, f, t, c, e) that plural rule
relations are evaluated against. See UTS #35 Part 3, "Plural Operand
Meanings".

    n  absolute value of the source number
    i  integer digits of n
    v  number of visible fraction digits in n, with trailing zeros
    w  number of visible fraction digits in n, without trailing zeros
    f  visible fraction digits in n, with trailing zeros
    t  visible fraction digits in n, without trailing zeros
    c  compact decimal exponent (always 0, compact notation not supported)
    e  synonym for c

Visible fraction digits are significant: Decimal("1.50") has v=2, f=50,
w=1, t=5, while the int 1 has v=0. Integral floats are treated as integers
(1.0 behaves like 1); other floats go through their shortest repr.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from cldrfacts.diagnostics import ErrorTemplate, InvalidArgumentError
from cldrfacts.enums import Operand

__all__ = ["PluralOperands", "PluralValue"]

type PluralValue = int | float | Decimal | str
"""Values accepted by the plural engine."""


@dataclass(frozen=True, slots=True)
class PluralOperands:
    """Operand set for one source number.

    Examples:
        >>> PluralOperands.from_value(5)
        PluralOperands(n=5, i=5, v=0, w=0, f=0, t=0, c=0)
        >>> ops = PluralOperands.from_value(Decimal("-1.50"))
        >>> (ops.n, ops.i, ops.v, ops.w, ops.f, ops.t)
        (Decimal('1.50'), 1, 2, 1, 50, 5)
    """

    n: int | Decimal
    i: int
    v: int = 0
    w: int = 0
    f: int = 0
    t: int = 0
    c: int = 0

    def get(self, operand: Operand) -> int | Decimal:
        """Return the value of one operand."""
        match operand:
            case Operand.N:
                return self.n
            case Operand.I:
                return self.i
            case Operand.V:
                return self.v
            case Operand.W:
                return self.w
            case Operand.F:
                return self.f
            case Operand.T:
                return self.t
            case Operand.C | Operand.E:
                return self.c

    @classmethod
    def from_value(cls, value: PluralValue) -> PluralOperands:
        """Derive operands from a number.

        Args:
            value: int, Decimal, finite float, or numeric string

        Returns:
            PluralOperands for the absolute value of ``value``

        Raises:
            InvalidArgumentError: If value is a bool, not finite, or not numeric
        """
        if isinstance(value, bool):
            raise InvalidArgumentError(ErrorTemplate.unsupported_operand_value(value))

        if isinstance(value, int):
            magnitude = abs(value)
            return cls(n=magnitude, i=magnitude)

        if isinstance(value, float):
            if not math.isfinite(value):
                raise InvalidArgumentError(ErrorTemplate.unsupported_operand_value(value))
            if value.is_integer():
                magnitude = abs(int(value))
                return cls(n=magnitude, i=magnitude)
            return cls._from_decimal(Decimal(repr(value)))

        if isinstance(value, Decimal):
            if not value.is_finite():
                raise InvalidArgumentError(ErrorTemplate.unsupported_operand_value(value))
            return cls._from_decimal(value)

        if isinstance(value, str):
            try:
                parsed = Decimal(value.strip())
            except InvalidOperation as e:
                raise InvalidArgumentError(ErrorTemplate.unsupported_operand_value(value)) from e
            if not parsed.is_finite():
                raise InvalidArgumentError(ErrorTemplate.unsupported_operand_value(value))
            return cls._from_decimal(parsed)

        raise InvalidArgumentError(ErrorTemplate.unsupported_operand_value(value))

    @classmethod
    def _from_decimal(cls, value: Decimal) -> PluralOperands:
        magnitude = abs(value)
        # Fixed-point text keeps the visible fraction digits, e.g. "1.50", "100".
        text = format(magnitude, "f")
        integer_text, _, fraction_text = text.partition(".")
        trimmed = fraction_text.rstrip("0")
        return cls(
            n=magnitude,
            i=int(integer_text),
            v=len(fraction_text),
            w=len(trimmed),
            f=int(fraction_text) if fraction_text else 0,
            t=int(trimmed) if trimmed else 0,
        )
