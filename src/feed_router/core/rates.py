"""
Exact value primitives: Rate (integer mantissa over a power-of-ten scale) and
Ratio (arbitrary-precision numerator/denominator).

- Rate: what one oracle hop reports, mantissa / 10^scale. Built from a raw answer and feed decimals.
- Ratio: the running value while folding an amount through a path. Always gcd-reduced,
  denominator strictly positive; the sign lives on the numerator.
- No float arithmetic anywhere: floats given as amounts are read through their shortest repr.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from fractions import Fraction
from math import gcd
from typing import Union

from .constants import MAX_AMOUNT_DIGITS, MAX_AMOUNT_EXPONENT
from .exc import AmountDomainError, InvariantViolation

#: Inputs accepted as an amount.
AmountLike = Union[int, str, Decimal, float, Fraction, "Ratio"]


def _ten_pow(n: int) -> int:
    """Return 10**n for n >= 0 (internal helper)."""
    if n < 0:
        raise ValueError("_ten_pow expects non-negative exponent")
    return 10 ** n


# ----------------------------
# Rate
# ----------------------------

@dataclass(frozen=True)
class Rate:
    """Exact oracle rate: mantissa / 10^scale."""
    mantissa: int
    scale: int

    def __post_init__(self):
        if self.scale < 0:
            raise InvariantViolation(f"Rate scale must be >= 0, got {self.scale}")

    @classmethod
    def from_answer(cls, answer: int, decimals: int) -> "Rate":
        """Normalise a raw oracle answer scaled by 10^decimals."""
        return cls(answer, decimals)

    def as_fraction(self) -> Fraction:
        return Fraction(self.mantissa, _ten_pow(self.scale))

    def to_decimal(self) -> Decimal:
        """Decimal view for logs/printing only."""
        return Decimal(self.mantissa).scaleb(-self.scale)


# ----------------------------
# Ratio (exact rational)
# ----------------------------

@dataclass(frozen=True)
class Ratio:
    """Exact rational value numerator / denominator (denominator > 0, reduced)."""
    numerator: int
    denominator: int = 1

    def __post_init__(self):
        if self.denominator == 0:
            raise ZeroDivisionError("Ratio denominator must be non-zero")
        num, den = self.numerator, self.denominator
        if den < 0:
            num, den = -num, -den
        g = gcd(num, den)
        if g > 1:
            num //= g
            den //= g
        # frozen: write back the canonical form
        object.__setattr__(self, "numerator", num)
        object.__setattr__(self, "denominator", den)

    # ------------- constructors -------------

    @classmethod
    def from_decimal(cls, x: Decimal) -> "Ratio":
        """Exact bridge from Decimal; rejects NaN, infinities and out-of-bound magnitudes.

        Zero short-circuits before the exponent is looked at, so "0E+30000000" is cheap.
        """
        if x.is_nan() or x.is_infinite():
            raise AmountDomainError(f"invalid Decimal amount: {x}")
        if x.is_zero():
            return cls(0, 1)
        sign, digits, exp = x.as_tuple()
        if abs(exp) > MAX_AMOUNT_EXPONENT:
            raise AmountDomainError(
                f"amount exponent {exp} outside [-{MAX_AMOUNT_EXPONENT}, {MAX_AMOUNT_EXPONENT}]"
            )
        if len(digits) > MAX_AMOUNT_DIGITS:
            raise AmountDomainError(
                f"amount has {len(digits)} significant digits (max {MAX_AMOUNT_DIGITS})"
            )
        m = int("".join(str(d) for d in digits))
        if sign:
            m = -m
        if exp >= 0:
            return cls(m * _ten_pow(exp), 1)
        return cls(m, _ten_pow(-exp))

    @classmethod
    def from_amount(cls, amount: AmountLike) -> "Ratio":
        """Parse any accepted amount input into an exact Ratio.

        bool is rejected (it is an int subclass but never a meaningful amount).
        """
        if isinstance(amount, Ratio):
            return amount
        if isinstance(amount, bool):
            raise AmountDomainError(f"boolean is not a valid amount: {amount!r}")
        if isinstance(amount, int):
            return cls(amount, 1)
        if isinstance(amount, Fraction):
            return cls(amount.numerator, amount.denominator)
        if isinstance(amount, Decimal):
            return cls.from_decimal(amount)
        if isinstance(amount, float):
            # repr gives the shortest string that round-trips, e.g. 0.001 -> "0.001"
            return cls._from_text(repr(amount))
        if isinstance(amount, str):
            return cls._from_text(amount)
        raise AmountDomainError(f"unsupported amount type: {type(amount).__name__}")

    @classmethod
    def _from_text(cls, text: str) -> "Ratio":
        try:
            d = Decimal(text)
        except InvalidOperation as exc:
            raise AmountDomainError(f"not a decimal amount: {text!r}") from exc
        return cls.from_decimal(d)

    # ------------- predicates -------------

    def is_zero(self) -> bool:
        return self.numerator == 0

    # ------------- arithmetic (integer domain) -------------

    def mul_rate(self, rate: Rate) -> "Ratio":
        """value * (rm / 10^rs)"""
        return Ratio(self.numerator * rate.mantissa, self.denominator * _ten_pow(rate.scale))

    def div_rate(self, rate: Rate) -> "Ratio":
        """value / (rm / 10^rs) = value * 10^rs / rm"""
        if rate.mantissa == 0:
            raise ZeroDivisionError("division by zero rate")
        return Ratio(self.numerator * _ten_pow(rate.scale), self.denominator * rate.mantissa)

    # ------------- conversions -------------

    def as_fraction(self) -> Fraction:
        return Fraction(self.numerator, self.denominator)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Ratio):
            return (self.numerator, self.denominator) == (other.numerator, other.denominator)
        if isinstance(other, (int, Fraction)) and not isinstance(other, bool):
            return self.as_fraction() == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self.numerator, self.denominator))


__all__ = [
    "AmountLike",
    "Rate",
    "Ratio",
]
