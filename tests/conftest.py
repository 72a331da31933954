from __future__ import annotations

import asyncio
from typing import Dict, List, Optional

import pytest

from feed_router.core import Feed


# -----------------------------
# Test helpers (in-memory oracle readers)
# -----------------------------


class StaticReader:
    """Oracle reader stub answering from a dict keyed by feed address.

    - calls: addresses read, in call order (to assert no network on shortcuts).
    - delays: optional per-address sleep (seconds) to shuffle completion order.
    - cancelled: addresses whose read was cancelled while sleeping.
    """

    def __init__(self, answers: Dict[str, object], delays: Optional[Dict[str, float]] = None) -> None:
        self.answers = dict(answers)
        self.delays = dict(delays or {})
        self.calls: List[str] = []
        self.completed: List[str] = []
        self.cancelled: List[str] = []

    async def latest_answer(self, address: str):
        self.calls.append(address)
        delay = self.delays.get(address, 0.0)
        if delay:
            try:
                await asyncio.sleep(delay)
            except asyncio.CancelledError:
                self.cancelled.append(address)
                raise
        answer = self.answers[address]
        if isinstance(answer, BaseException):
            raise answer
        self.completed.append(address)
        return answer


# Answers for the A..F chain:
#   A/B: 100, B/C: 0.2, C/D: 0.001 (8 decimals)
#   D/E: 999_999_999_999_999_999, E/F: 0.000_000_000_000_000_001 (18 decimals)
CHAIN_ANSWERS: Dict[str, int] = {
    "0xAB": 10_000_000_000,
    "0xBC": 20_000_000,
    "0xCD": 100_000,
    "0xDE": int("999999999999999999000000000000000000"),
    "0xEF": 1,
}


# -----------------------------
# Pytest fixtures
# -----------------------------

@pytest.fixture()
def chain_feeds() -> List[Feed]:
    return [
        Feed(id=0, from_asset="A", to_asset="B", address="0xAB", decimals=8),
        Feed(id=1, from_asset="B", to_asset="C", address="0xBC", decimals=8),
        Feed(id=2, from_asset="C", to_asset="D", address="0xCD", decimals=8),
        Feed(id=3, from_asset="D", to_asset="E", address="0xDE", decimals=18),
        Feed(id=4, from_asset="E", to_asset="F", address="0xEF", decimals=18),
    ]


@pytest.fixture()
def chain_reader() -> StaticReader:
    return StaticReader(CHAIN_ANSWERS)


@pytest.fixture()
def make_reader():
    """Factory fixture: build a StaticReader with custom answers/delays."""
    def _make(answers: Dict[str, object], delays: Optional[Dict[str, float]] = None) -> StaticReader:
        return StaticReader(answers, delays)
    return _make


@pytest.fixture()
def chain_answers() -> Dict[str, int]:
    return dict(CHAIN_ANSWERS)
