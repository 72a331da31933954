"""
Canonical decimal rendering of exact ratios.

Core arithmetic stays in the integer/rational domain; this module is the only
place where a value becomes a string. Rendering is exact: a ratio whose
reduced denominator has prime factors other than 2 and 5 cannot be written as
a finite decimal and is rejected rather than rounded.
"""

from __future__ import annotations

from decimal import Decimal
from math import gcd
from typing import Tuple

from .exc import NonTerminatingResult
from .rates import AmountLike, Ratio


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _strip_factor(n: int, p: int) -> Tuple[int, int]:
    """Remove every factor p from n; return (rest, multiplicity)."""
    k = 0
    while n % p == 0:
        n //= p
        k += 1
    return n, k


def _decimal_places(denominator: int) -> int:
    """Smallest k with denominator | 10^k, or -1 when none exists."""
    rest, twos = _strip_factor(denominator, 2)
    rest, fives = _strip_factor(rest, 5)
    if rest != 1:
        return -1
    return max(twos, fives)


#: Width of the digit chunks used by `_digits`; well under the interpreter's
#: int-to-str limit (sys.get_int_max_str_digits, 4300 by default).
_CHUNK_DIGITS = 1000
_CHUNK = 10 ** _CHUNK_DIGITS


def _digits(n: int) -> str:
    """Decimal digits of n >= 0, with no length limit."""
    parts = []
    while n >= _CHUNK:
        n, low = divmod(n, _CHUNK)
        parts.append(str(low).rjust(_CHUNK_DIGITS, "0"))
    parts.append(str(n))
    return "".join(reversed(parts))


# ---------------------------------------------------------------------------
# Formatting
# ---------------------------------------------------------------------------

def format_ratio(numerator: int, denominator: int) -> str:
    """Render numerator/denominator as a canonical decimal string.

    - no exponent, no leading '+', no trailing fractional zeros
    - the decimal point is omitted when there is no fractional part
    - exact zero renders as '0'; negatives carry a leading '-'

    Examples:
      format_ratio(500, 1)           -> '500'
      format_ratio(1, 10)            -> '0.1'
      format_ratio(-3, 4)            -> '-0.75'
    """
    if denominator == 0:
        raise ZeroDivisionError("format_ratio(): zero denominator")
    if numerator == 0:
        return "0"
    if denominator < 0:
        numerator, denominator = -numerator, -denominator

    g = gcd(numerator, denominator)
    num, den = numerator // g, denominator // g

    places = _decimal_places(den)
    if places < 0:
        raise NonTerminatingResult(numerator, denominator)

    sign = "-" if num < 0 else ""
    scaled = abs(num) * (10 ** places // den)
    int_part, frac_part = divmod(scaled, 10 ** places) if places else (scaled, 0)

    if places == 0 or frac_part == 0:
        return f"{sign}{_digits(int_part)}"
    frac_digits = _digits(frac_part).rjust(places, "0").rstrip("0")
    return f"{sign}{_digits(int_part)}.{frac_digits}"


def format_value(value: Ratio) -> str:
    """Render an exact Ratio canonically."""
    return format_ratio(value.numerator, value.denominator)


def format_amount(amount: AmountLike) -> str:
    """Render any accepted amount input canonically (e.g. Decimal('5.00') -> '5')."""
    return format_value(Ratio.from_amount(amount))


def ratio_to_decimal(value: Ratio) -> Decimal:
    """Decimal view of a terminating Ratio, for logging/printing only."""
    return Decimal(format_value(value))


__all__ = [
    "format_ratio",
    "format_value",
    "format_amount",
    "ratio_to_decimal",
]
