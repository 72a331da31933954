"""Path search over the feed graph.

Breadth-first search with unit edge cost. The visited set guarantees
termination on cyclic graphs and a simple path (no asset repeats).

Tie-break rule: among equally short routes the first one discovered wins,
where neighbours are expanded in the input feed order. Route selection is
therefore reproducible for a given feed ordering.
"""
from __future__ import annotations

import logging
from collections import deque
from typing import Deque, Dict, List, Optional

from .core import Edge, InvariantViolation, NoRouteFound, Path
from .graph import FeedGraph

logger = logging.getLogger(__name__)


def _walk_back(parents: Dict[str, Optional[Edge]], destination: str) -> Path:
    """Rebuild the hop list from the BFS parent map (destination back to source)."""
    hops: List[Edge] = []
    node = destination
    edge = parents[node]
    while edge is not None:
        hops.append(edge)
        node = edge.source
        edge = parents[node]
    hops.reverse()
    return Path(tuple(hops))


def find_path(graph: FeedGraph, source: str, destination: str) -> Path:
    """Return the shortest hop sequence from `source` to `destination`.

    Raises NoRouteFound if the destination is unreachable.
    """
    if source == destination:
        raise InvariantViolation("find_path(): source and destination must differ")

    # parent edge per discovered asset; None marks the source
    parents: Dict[str, Optional[Edge]] = {source: None}
    queue: Deque[str] = deque([source])

    while queue:
        asset = queue.popleft()
        for edge in graph.neighbours(asset):
            nxt = edge.target
            if nxt in parents:
                continue
            parents[nxt] = edge
            if nxt == destination:
                path = _walk_back(parents, destination)
                logger.debug("route %s (%d hops)", path, len(path))
                return path
            queue.append(nxt)

    raise NoRouteFound(source, destination)


__all__ = ["find_path"]
