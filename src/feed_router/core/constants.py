"""
feed_router constants
=====================

Contract selectors, JSON-RPC defaults and environment variable names.
"""

# ---------------------------------------------------------------------------
# Aggregator contract (Chainlink AggregatorV3Interface)
# ---------------------------------------------------------------------------

#: keccak256("latestRoundData()")[:4]
LATEST_ROUND_DATA_SELECTOR: str = "0xfeaf968c"

#: latestRoundData() returns (roundId, answer, startedAt, updatedAt, answeredInRound).
ROUND_DATA_WORDS: int = 5
ROUND_DATA_ANSWER_INDEX: int = 1

#: ABI word width in bytes / hex characters.
ABI_WORD_BYTES: int = 32
ABI_WORD_HEX: int = ABI_WORD_BYTES * 2


# ---------------------------------------------------------------------------
# JSON-RPC defaults
# ---------------------------------------------------------------------------

DEFAULT_RPC_TIMEOUT: float = 30.0
DEFAULT_BLOCK_TAG: str = "latest"


# ---------------------------------------------------------------------------
# Environment variables
# ---------------------------------------------------------------------------

ENV_RPC_URL: str = "FEED_ROUTER_RPC_URL"
ENV_RPC_TIMEOUT: str = "FEED_ROUTER_RPC_TIMEOUT"
ENV_BLOCK_TAG: str = "FEED_ROUTER_BLOCK_TAG"


# ---------------------------------------------------------------------------
# Amount input bounds
# ---------------------------------------------------------------------------

#: Largest |exponent| accepted in a decimal amount (e.g. "1E+1000").
MAX_AMOUNT_EXPONENT: int = 1000
#: Largest number of significant digits accepted in a decimal amount.
MAX_AMOUNT_DIGITS: int = 1000


__all__ = [
    "LATEST_ROUND_DATA_SELECTOR",
    "ROUND_DATA_WORDS",
    "ROUND_DATA_ANSWER_INDEX",
    "ABI_WORD_BYTES",
    "ABI_WORD_HEX",
    "DEFAULT_RPC_TIMEOUT",
    "DEFAULT_BLOCK_TAG",
    "ENV_RPC_URL",
    "ENV_RPC_TIMEOUT",
    "ENV_BLOCK_TAG",
    "MAX_AMOUNT_EXPONENT",
    "MAX_AMOUNT_DIGITS",
]
