"""
feed_router core
================

Unified exports for the exact-arithmetic primitives, feed datatypes and
exceptions. All arithmetic is performed on arbitrary-precision integers
(Rate mantissa/scale, Ratio numerator/denominator); Decimal appears only at
input parsing and for display.
"""

# NOTE:
#   Nothing in `core` performs I/O. Oracle reads live in `feed_router.resolver`
#   and `feed_router.transport`; graph search in `feed_router.path_builder`.

from .constants import (
    LATEST_ROUND_DATA_SELECTOR,
    DEFAULT_RPC_TIMEOUT,
    DEFAULT_BLOCK_TAG,
    MAX_AMOUNT_EXPONENT,
    MAX_AMOUNT_DIGITS,
)

# Exact values
from .rates import (
    AmountLike,
    Rate,
    Ratio,
)

# Rendering
from .fmt import (
    format_ratio,
    format_value,
    format_amount,
    ratio_to_decimal,
)

# Feed datatypes
from .datatypes import (
    Feed,
    Edge,
    Path,
)

# Exceptions
from .exc import (
    FeedRouterError,
    TransportConfigError,
    FeedDefinitionError,
    AmountDomainError,
    InvariantViolation,
    NoRouteFound,
    OracleUnavailable,
    InvalidAnswer,
    NonTerminatingResult,
)

__all__ = [
    # constants
    "LATEST_ROUND_DATA_SELECTOR",
    "DEFAULT_RPC_TIMEOUT",
    "DEFAULT_BLOCK_TAG",
    "MAX_AMOUNT_EXPONENT",
    "MAX_AMOUNT_DIGITS",
    # values
    "AmountLike",
    "Rate",
    "Ratio",
    # fmt
    "format_ratio",
    "format_value",
    "format_amount",
    "ratio_to_decimal",
    # datatypes
    "Feed",
    "Edge",
    "Path",
    # exceptions
    "FeedRouterError",
    "TransportConfigError",
    "FeedDefinitionError",
    "AmountDomainError",
    "InvariantViolation",
    "NoRouteFound",
    "OracleUnavailable",
    "InvalidAnswer",
    "NonTerminatingResult",
]
