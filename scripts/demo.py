"""Demo: oracle-feed conversions over a synthetic feed chain (no network).

Feed chain A -> B -> C -> D -> E -> F with answers:
  A/B = 100 (8 dec), B/C = 0.2 (8 dec), C/D = 0.001 (8 dec),
  D/E = 999999999999999999 (18 dec), E/F = 0.000000000000000001 (18 dec)

Scenarios:
S1) shortcuts (zero amount, same asset)
S2) forward single/multi hop
S3) reverse multi hop
S4) full-precision composition across 18-decimal feeds
"""
from __future__ import annotations

import argparse
import asyncio
import logging
from typing import Dict, List, Tuple

from feed_router import Feed, FeedRouterError, FeedGraph, convert, find_path

DEMO_FEEDS: List[Feed] = [
    Feed(0, "A", "B", "0xAB", 8),
    Feed(1, "B", "C", "0xBC", 8),
    Feed(2, "C", "D", "0xCD", 8),
    Feed(3, "D", "E", "0xDE", 18),
    Feed(4, "E", "F", "0xEF", 18),
]

DEMO_ANSWERS: Dict[str, int] = {
    "0xAB": 10_000_000_000,
    "0xBC": 20_000_000,
    "0xCD": 100_000,
    "0xDE": 999999999999999999_000000000000000000,
    "0xEF": 1,
}

SCENARIOS: List[Tuple[str, str, str, str]] = [
    ("S1", "0", "Anything", "Unknown"),
    ("S1", "5", "A", "A"),
    ("S2", "5", "A", "B"),
    ("S2", "5", "A", "C"),
    ("S2", "5", "A", "D"),
    ("S3", "5", "D", "A"),
    ("S2", "0.001", "C", "D"),
    ("S2", "1000000", "A", "B"),
    ("S4", "1", "D", "F"),
    ("S4", "1", "F", "A"),
]


class StaticReader:
    """In-memory oracle reader keyed by feed address."""

    def __init__(self, answers: Dict[str, int]) -> None:
        self.answers = answers

    async def latest_answer(self, address: str) -> int:
        return self.answers[address]


async def run_all() -> None:
    reader = StaticReader(DEMO_ANSWERS)
    graph = FeedGraph.from_feeds(DEMO_FEEDS)
    for tag, amount, src, dst in SCENARIOS:
        route = str(find_path(graph, src, dst)) if src != dst and src in graph else "-"
        try:
            out = await convert(amount, src, dst, DEMO_FEEDS, provider=reader)
        except FeedRouterError as exc:
            out = f"error: {exc}"
        print(f"[{tag}] {amount} {src} -> {out} {dst}  | route: {route}")


def main() -> None:
    ap = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
    ap.add_argument("-v", "--verbose", action="store_true")
    args = ap.parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
    asyncio.run(run_all())


if __name__ == "__main__":
    main()
