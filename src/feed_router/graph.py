"""Feed graph: bidirectional adjacency over assets.

Each feed registers two directed edges, forward (from -> to) and reverse
(to -> from). Neighbour lists keep the input feed order so path search is
reproducible for a given feed list.
"""
from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Tuple

from .core import Edge, Feed

logger = logging.getLogger(__name__)


class FeedGraph:
    """Adjacency mapping AssetCode -> list of outgoing Edges."""

    def __init__(self) -> None:
        self._adj: Dict[str, List[Edge]] = {}
        self._feed_count = 0

    @classmethod
    def from_feeds(cls, feeds: Iterable[Feed]) -> "FeedGraph":
        g = cls()
        for feed in feeds:
            g.add_feed(feed)
        logger.debug("built feed graph: %d feeds, %d assets", g._feed_count, len(g._adj))
        return g

    def add_feed(self, feed: Feed) -> None:
        # Parallel/duplicate feeds are kept; search takes whichever it meets first.
        self._adj.setdefault(feed.from_asset, []).append(Edge(feed, True))
        self._adj.setdefault(feed.to_asset, []).append(Edge(feed, False))
        self._feed_count += 1

    def neighbours(self, asset: str) -> List[Edge]:
        """Outgoing edges of `asset` in input order (empty for unknown assets)."""
        return self._adj.get(asset, [])

    def assets(self) -> Tuple[str, ...]:
        return tuple(self._adj)

    def __contains__(self, asset: object) -> bool:
        return asset in self._adj

    def __len__(self) -> int:
        return len(self._adj)

    @property
    def feed_count(self) -> int:
        return self._feed_count


__all__ = ["FeedGraph"]
