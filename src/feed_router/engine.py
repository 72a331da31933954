from __future__ import annotations

import logging
from typing import Iterable, List, Sequence, Tuple

from .core import InvalidAnswer, InvariantViolation, Path, Rate, Ratio

logger = logging.getLogger(__name__)

# ----------------------------
# Exact composition
# ----------------------------

Hop = Tuple[Rate, bool]


def fold(amount: Ratio, hops: Iterable[Hop]) -> Ratio:
    """Fold `amount` through (rate, forward) hops in path order.

    Forward hops multiply the numerator by the rate mantissa and the denominator
    by 10^scale; reverse hops do the opposite. The value stays an exact ratio
    of integers throughout: nothing is truncated between hops, so the only
    place precision could be lost is rendering, which refuses to round.
    """
    value = amount
    for i, (rate, forward) in enumerate(hops):
        if rate.mantissa == 0:
            raise InvalidAnswer(f"hop {i}", rate.mantissa, detail="zero rate cannot be composed")
        value = value.mul_rate(rate) if forward else value.div_rate(rate)
    return value


def compose_path(amount: Ratio, path: Path, rates: Sequence[Rate]) -> Ratio:
    """Pair each edge of `path` with its resolved rate and fold `amount` through them."""
    if len(rates) != len(path):
        raise InvariantViolation(f"compose_path(): {len(rates)} rates for {len(path)} hops")
    hops: List[Hop] = [(rate, edge.forward) for edge, rate in zip(path, rates)]
    value = fold(amount, hops)
    logger.debug("composed %s through %s -> %s/%s", amount, path, value.numerator, value.denominator)
    return value


def path_rate(path: Path, rates: Sequence[Rate]) -> Ratio:
    """Exact rate of the whole path (value of one source unit in destination units)."""
    return compose_path(Ratio(1), path, rates)


__all__ = [
    "Hop",
    "fold",
    "compose_path",
    "path_rate",
]
