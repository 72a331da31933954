"""Per-hop oracle reads.

`RateResolver` reads the board: it fetches a hop's raw answer and normalises
it with the feed's decimals. Direction is not applied here; inversion is the
engine's job.
"""
from __future__ import annotations

import asyncio
import logging
from typing import List

from .core import Edge, FeedRouterError, InvalidAnswer, OracleUnavailable, Path, Rate
from .transport import OracleReader

logger = logging.getLogger(__name__)


class RateResolver:
    """Resolve Edges to exact Rates through an oracle reader."""

    def __init__(self, reader: OracleReader) -> None:
        self.reader = reader

    async def resolve(self, edge: Edge) -> Rate:
        feed = edge.feed
        try:
            answer = await self.reader.latest_answer(feed.address)
        except FeedRouterError:
            raise
        except Exception as exc:
            raise OracleUnavailable(feed.address, exc) from exc

        if not isinstance(answer, int) or isinstance(answer, bool):
            raise InvalidAnswer(feed.address, answer, detail="answer must be an integer")
        if answer <= 0:
            raise InvalidAnswer(feed.address, answer, detail="answer must be positive")

        rate = Rate.from_answer(answer, feed.decimals)
        logger.debug("feed %s (%s) -> %s", feed.id, feed.pair, rate.to_decimal())
        return rate

    async def resolve_path(self, path: Path) -> List[Rate]:
        """Fetch every hop concurrently; results come back in path order.

        One failing read fails the whole join. Reads still in flight are
        cancelled and awaited before the error propagates, so no task outlives
        the call and later failures are not left unretrieved.
        """
        tasks = [asyncio.ensure_future(self.resolve(edge)) for edge in path]
        try:
            return list(await asyncio.gather(*tasks))
        except BaseException:
            for t in tasks:
                if not t.done():
                    t.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            raise


__all__ = ["RateResolver"]
