"""Oracle transports.

A transport is either a pre-built reader handle (`DirectTransport`) or a
JSON-RPC endpoint (`RemoteTransport`) from which a `JsonRpcOracleReader` is
built on demand. Readers expose a single async operation, `latest_answer`,
returning the raw integer answer of the aggregator's `latestRoundData()`.

The JSON-RPC reader issues blocking `requests` calls in worker threads; it
does not retry. Timeouts are the only cancellation policy it applies.
"""
from __future__ import annotations

import asyncio
import itertools
import logging
from dataclasses import dataclass, field
from typing import Any, Optional, Protocol, Union, runtime_checkable

import requests

from .config import RpcConfig
from .core.constants import (
    ABI_WORD_HEX,
    LATEST_ROUND_DATA_SELECTOR,
    ROUND_DATA_ANSWER_INDEX,
    ROUND_DATA_WORDS,
)
from .core.exc import InvalidAnswer, OracleUnavailable, TransportConfigError

logger = logging.getLogger(__name__)

MISSING_TRANSPORT_MESSAGE = "Either 'provider' or 'endpoint' must be defined"


@runtime_checkable
class OracleReader(Protocol):
    """Reads the most recent raw answer of the oracle at `address`."""

    async def latest_answer(self, address: str) -> int:
        ...


# ---------------------------------------------------------------------------
# ABI decoding
# ---------------------------------------------------------------------------

def _signed_word(word_hex: str) -> int:
    """Decode one 32-byte ABI word as a two's-complement int256."""
    value = int(word_hex, 16)
    if value >= 1 << 255:
        value -= 1 << 256
    return value


def decode_latest_answer(address: str, result: Any) -> int:
    """Extract `answer` from the hex payload of a latestRoundData() eth_call."""
    if not isinstance(result, str) or not result.startswith("0x"):
        raise InvalidAnswer(address, result, detail="eth_call result is not a hex string")
    payload = result[2:]
    if len(payload) < ROUND_DATA_WORDS * ABI_WORD_HEX:
        raise InvalidAnswer(address, result, detail=f"expected {ROUND_DATA_WORDS} ABI words")
    start = ROUND_DATA_ANSWER_INDEX * ABI_WORD_HEX
    try:
        return _signed_word(payload[start:start + ABI_WORD_HEX])
    except ValueError as exc:
        raise InvalidAnswer(address, result, detail="answer word is not hex") from exc


# ---------------------------------------------------------------------------
# JSON-RPC reader
# ---------------------------------------------------------------------------

class JsonRpcOracleReader:
    """Reads aggregator answers over Ethereum JSON-RPC (`eth_call`)."""

    def __init__(self, endpoint: str, config: Optional[RpcConfig] = None,
                 session: Optional[requests.Session] = None) -> None:
        if not endpoint:
            raise TransportConfigError("endpoint must be a non-empty URL")
        self.endpoint = endpoint
        self.config = config or RpcConfig()
        self._session = session or requests.Session()
        self._ids = itertools.count(1)

    def _post(self, method: str, params: list) -> Any:
        """JSON-RPC call wrapper. Returns the 'result' member (not the envelope)."""
        payload = {"jsonrpc": "2.0", "id": next(self._ids), "method": method, "params": params}
        r = self._session.post(self.endpoint, json=payload, timeout=self.config.timeout)
        r.raise_for_status()
        out = r.json()
        if "error" in out:
            raise RuntimeError(f"RPC error: {out['error']}")
        if "result" not in out:
            raise RuntimeError(f"Bad RPC response (no 'result'): {out}")
        return out["result"]

    def latest_answer_sync(self, address: str) -> int:
        call = {"to": address, "data": LATEST_ROUND_DATA_SELECTOR}
        logger.debug("eth_call latestRoundData to=%s via %s", address, self.endpoint)
        try:
            result = self._post("eth_call", [call, self.config.block_tag])
        except (requests.RequestException, ValueError, RuntimeError) as exc:
            raise OracleUnavailable(address, exc) from exc
        return decode_latest_answer(address, result)

    async def latest_answer(self, address: str) -> int:
        return await asyncio.to_thread(self.latest_answer_sync, address)

    def close(self) -> None:
        self._session.close()

    def __enter__(self) -> "JsonRpcOracleReader":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


# ---------------------------------------------------------------------------
# Transport variants
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class DirectTransport:
    """Pre-built reader handle supplied by the caller."""
    reader: OracleReader

    def open(self) -> OracleReader:
        return self.reader

    def release(self, reader: OracleReader) -> None:
        # caller owns the handle
        pass


@dataclass(frozen=True)
class RemoteTransport:
    """JSON-RPC endpoint; a reader is built per conversion and closed afterwards."""
    endpoint: str
    config: RpcConfig = field(default_factory=RpcConfig)

    def open(self) -> OracleReader:
        return JsonRpcOracleReader(self.endpoint, self.config)

    def release(self, reader: JsonRpcOracleReader) -> None:
        reader.close()


Transport = Union[DirectTransport, RemoteTransport]


def make_transport(provider: Optional[OracleReader] = None, endpoint: Optional[str] = None,
                   config: Optional[RpcConfig] = None) -> Transport:
    """Pick the transport variant; the pre-built provider wins when both are given."""
    if provider is not None:
        if endpoint:
            logger.debug("both provider and endpoint given; using provider")
        return DirectTransport(provider)
    if endpoint:
        return RemoteTransport(endpoint, config or RpcConfig())
    raise TransportConfigError(MISSING_TRANSPORT_MESSAGE)


__all__ = [
    "OracleReader",
    "JsonRpcOracleReader",
    "DirectTransport",
    "RemoteTransport",
    "Transport",
    "make_transport",
    "decode_latest_answer",
    "MISSING_TRANSPORT_MESSAGE",
]
