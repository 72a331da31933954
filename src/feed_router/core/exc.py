"""
Core exception types for feed_router.

These are dependency-free and may be imported by all modules. Every failure
raised by the converter derives from `FeedRouterError`.
"""

__all__ = [
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


class FeedRouterError(Exception):
    """Base class for all feed_router errors."""
    pass


class TransportConfigError(FeedRouterError):
    """Raised when neither a pre-built provider nor an endpoint is supplied."""
    pass


class FeedDefinitionError(FeedRouterError):
    """Raised when a feed record is malformed (same asset on both sides, bad decimals)."""
    pass


class AmountDomainError(FeedRouterError):
    """Raised when an amount input cannot be taken as an exact decimal value."""
    pass


class InvariantViolation(FeedRouterError):
    """Raised when an internal precondition would be broken."""
    pass


class NoRouteFound(FeedRouterError):
    """Raised when no chain of feeds connects the two assets.

    Attributes
    ----------
    source : str
        Asset the conversion starts from.
    destination : str
        Asset the conversion should end in.
    """

    def __init__(self, source, destination):
        super().__init__(f"No route found from '{source}' to '{destination}'")
        self.source = source
        self.destination = destination


class OracleUnavailable(FeedRouterError):
    """Raised when reading an oracle fails at the transport or contract level."""

    def __init__(self, address, reason):
        super().__init__(f"Oracle at {address} is unavailable: {reason}")
        self.address = address
        self.reason = reason


class InvalidAnswer(FeedRouterError):
    """Raised when an oracle answer is non-positive or otherwise unusable."""

    def __init__(self, address, answer, *, detail=None):
        msg = f"Oracle at {address} returned an invalid answer: {answer!r}"
        if detail:
            msg = f"{msg} ({detail})"
        super().__init__(msg)
        self.address = address
        self.answer = answer


def _short_int(n):
    """str(n), or a size summary when n is too long to print in a message."""
    if n.bit_length() > 4000:
        return f"<{n.bit_length()}-bit integer>"
    return str(n)


class NonTerminatingResult(FeedRouterError):
    """Raised when an exact ratio has no finite decimal expansion."""

    def __init__(self, numerator, denominator):
        super().__init__(
            f"Ratio {_short_int(numerator)}/{_short_int(denominator)} has no finite decimal representation"
        )
        self.numerator = numerator
        self.denominator = denominator
