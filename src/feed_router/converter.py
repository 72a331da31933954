"""Conversion entry point: validate, short-circuit, route, read, compose, render.

Pipeline stages for `run_conversion`:
  1. transport validation (done when the request is built, before any await)
  2. amount == 0                -> "0"
  3. from_asset == to_asset     -> amount rendered canonically
  4. FeedGraph -> find_path -> RateResolver.resolve_path -> compose_path -> format_value

Stages 2 and 3 succeed regardless of whether the assets appear in any feed.
No step is retried; every failure propagates to the caller.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

from .config import RpcConfig
from .core import AmountLike, Feed, Ratio, format_value
from .engine import compose_path
from .graph import FeedGraph
from .path_builder import find_path
from .resolver import RateResolver
from .transport import OracleReader, Transport, make_transport

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConversionRequest:
    """One conversion: amount of `from_asset` to express in `to_asset`."""

    amount: Ratio
    from_asset: str
    to_asset: str
    transport: Transport
    feeds: Tuple[Feed, ...] = ()

    @classmethod
    def build(
        cls,
        amount: AmountLike,
        from_asset: str,
        to_asset: str,
        feeds: Iterable[Feed] = (),
        *,
        provider: Optional[OracleReader] = None,
        endpoint: Optional[str] = None,
        config: Optional[RpcConfig] = None,
    ) -> "ConversionRequest":
        # Transport is validated first: a missing transport fails even for shortcut requests.
        transport = make_transport(provider, endpoint, config)
        return cls(
            amount=Ratio.from_amount(amount),
            from_asset=from_asset,
            to_asset=to_asset,
            transport=transport,
            feeds=tuple(feeds),
        )


async def run_conversion(request: ConversionRequest) -> str:
    """Execute a validated request and return the canonical decimal result."""
    if request.amount.is_zero():
        return "0"
    if request.from_asset == request.to_asset:
        return format_value(request.amount)

    graph = FeedGraph.from_feeds(request.feeds)
    path = find_path(graph, request.from_asset, request.to_asset)

    reader = request.transport.open()
    try:
        rates = await RateResolver(reader).resolve_path(path)
    finally:
        request.transport.release(reader)

    result = format_value(compose_path(request.amount, path, rates))
    logger.debug("convert %s %s -> %s %s", format_value(request.amount),
                 request.from_asset, result, request.to_asset)
    return result


async def convert(
    amount: AmountLike,
    from_asset: str,
    to_asset: str,
    feeds: Iterable[Feed] = (),
    *,
    provider: Optional[OracleReader] = None,
    endpoint: Optional[str] = None,
    config: Optional[RpcConfig] = None,
) -> str:
    """Convert `amount` of `from_asset` into `to_asset` using the supplied oracle feeds.

    Exactly one of `provider` (a ready OracleReader) or `endpoint` (JSON-RPC URL)
    is needed; `provider` is used when both are given.

    Raises TransportConfigError, NoRouteFound, OracleUnavailable, InvalidAnswer,
    NonTerminatingResult or AmountDomainError.
    """
    request = ConversionRequest.build(
        amount, from_asset, to_asset, feeds,
        provider=provider, endpoint=endpoint, config=config,
    )
    return await run_conversion(request)


__all__ = [
    "ConversionRequest",
    "run_conversion",
    "convert",
]
