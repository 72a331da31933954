# Top-level API for feed_router.
"""
Top-level API for feed_router.

Converts an amount of one asset into another through a sparse network of
price-oracle feeds, each quoting exactly one asset pair:
  - convert / run_conversion: the asynchronous conversion pipeline
  - FeedGraph / find_path: bidirectional feed graph and shortest-route search
  - RateResolver: concurrent per-hop oracle reads
  - compose_path / fold: exact rational composition of hop rates

All arithmetic is integer/rational; results are rendered as canonical decimal
strings without rounding.
"""

from __future__ import annotations

from .converter import ConversionRequest, convert, run_conversion
from .graph import FeedGraph
from .path_builder import find_path
from .resolver import RateResolver
from .engine import compose_path, fold, path_rate
from .transport import (
    OracleReader,
    JsonRpcOracleReader,
    DirectTransport,
    RemoteTransport,
    make_transport,
)
from .config import RpcConfig
from .assets import SUPPORTED_ASSETS, is_supported_asset

from .core import (
    Feed,
    Edge,
    Path,
    Rate,
    Ratio,
    format_ratio,
    format_amount,
    FeedRouterError,
    TransportConfigError,
    FeedDefinitionError,
    AmountDomainError,
    NoRouteFound,
    OracleUnavailable,
    InvalidAnswer,
    NonTerminatingResult,
)

__all__ = [
    # pipeline
    "ConversionRequest",
    "convert",
    "run_conversion",
    "FeedGraph",
    "find_path",
    "RateResolver",
    "compose_path",
    "fold",
    "path_rate",
    # transport / config
    "OracleReader",
    "JsonRpcOracleReader",
    "DirectTransport",
    "RemoteTransport",
    "make_transport",
    "RpcConfig",
    # registry
    "SUPPORTED_ASSETS",
    "is_supported_asset",
    # core types
    "Feed",
    "Edge",
    "Path",
    "Rate",
    "Ratio",
    "format_ratio",
    "format_amount",
    # exceptions
    "FeedRouterError",
    "TransportConfigError",
    "FeedDefinitionError",
    "AmountDomainError",
    "NoRouteFound",
    "OracleUnavailable",
    "InvalidAnswer",
    "NonTerminatingResult",
]
