"""JSON-RPC reader configuration.

Values come from keyword arguments or, via `RpcConfig.from_env()`, from
environment variables (FEED_ROUTER_RPC_TIMEOUT, FEED_ROUTER_BLOCK_TAG).
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .core.constants import (
    DEFAULT_BLOCK_TAG,
    DEFAULT_RPC_TIMEOUT,
    ENV_BLOCK_TAG,
    ENV_RPC_TIMEOUT,
)
from .core.exc import TransportConfigError


@dataclass(frozen=True)
class RpcConfig:
    """Reader configuration.

    timeout: per-request timeout in seconds, handed to requests.
    block_tag: block parameter of eth_call ("latest", "pending" or a hex block number).
    """
    timeout: float = DEFAULT_RPC_TIMEOUT
    block_tag: str = DEFAULT_BLOCK_TAG

    def __post_init__(self):
        if self.timeout <= 0:
            raise TransportConfigError(f"RPC timeout must be > 0, got {self.timeout}")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "RpcConfig":
        env = os.environ if environ is None else environ
        raw_timeout = env.get(ENV_RPC_TIMEOUT, "")
        try:
            timeout = float(raw_timeout) if raw_timeout else DEFAULT_RPC_TIMEOUT
        except ValueError as exc:
            raise TransportConfigError(f"{ENV_RPC_TIMEOUT} must be a number, got {raw_timeout!r}") from exc
        return cls(timeout=timeout, block_tag=env.get(ENV_BLOCK_TAG) or DEFAULT_BLOCK_TAG)


__all__ = ["RpcConfig"]
