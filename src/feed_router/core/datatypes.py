"""
Core datatypes for routing over oracle feeds.

These datatypes are immutable so that graph construction and path search stay
pure functions of the caller-supplied feed list.

Notes:
- A Feed quotes one unit of `from_asset` in units of `to_asset`, scaled by 10^decimals.
- An Edge is one direction over a Feed: forward multiplies by the rate, reverse divides.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Mapping, Tuple

from .exc import FeedDefinitionError


# ---------------------------------------------------------------------------
# Feed
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Feed:
    """Oracle configuration for one asset pair.

    Fields:
    - id: unique identifier of the feed.
    - from_asset: asset being priced (base).
    - to_asset: asset the price is quoted in (quote).
    - address: contract locator passed to the oracle reader.
    - decimals: number of fractional digits carried by the raw answer.
    """

    id: int
    from_asset: str
    to_asset: str
    address: str
    decimals: int

    def __post_init__(self):
        if not isinstance(self.id, int) or isinstance(self.id, bool):
            raise FeedDefinitionError(f"feed id must be int, got {self.id!r}")
        for name in ("from_asset", "to_asset", "address"):
            value = getattr(self, name)
            if not isinstance(value, str) or not value:
                raise FeedDefinitionError(f"feed {self.id}: {name} must be a non-empty string, got {value!r}")
        if self.from_asset == self.to_asset:
            raise FeedDefinitionError(
                f"feed {self.id}: from and to must differ (both '{self.from_asset}')"
            )
        if not isinstance(self.decimals, int) or isinstance(self.decimals, bool):
            raise FeedDefinitionError(f"feed {self.id}: decimals must be int, got {self.decimals!r}")
        if self.decimals < 0:
            raise FeedDefinitionError(f"feed {self.id}: decimals must be >= 0, got {self.decimals}")

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "Feed":
        """Build a Feed from a JSON-shaped record (`id`, `from`, `to`, `address`, `decimals`).

        Values are taken as-is; no coercion, so 8.9 decimals or a null asset code is rejected.
        """
        if not isinstance(data, Mapping):
            raise FeedDefinitionError(f"feed record must be an object, got {data!r}")
        try:
            return cls(
                id=data["id"],
                from_asset=data["from"],
                to_asset=data["to"],
                address=data["address"],
                decimals=data["decimals"],
            )
        except KeyError as exc:
            raise FeedDefinitionError(f"feed record missing field {exc.args[0]!r}: {dict(data)}") from exc

    @property
    def pair(self) -> str:
        return f"{self.from_asset}/{self.to_asset}"


# ---------------------------------------------------------------------------
# Edge
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Edge:
    """A traversable direction over a Feed.

    forward=True walks from_asset -> to_asset and applies the rate;
    forward=False walks to_asset -> from_asset and applies its reciprocal.
    """

    feed: Feed
    forward: bool

    @property
    def source(self) -> str:
        return self.feed.from_asset if self.forward else self.feed.to_asset

    @property
    def target(self) -> str:
        return self.feed.to_asset if self.forward else self.feed.from_asset

    def __str__(self) -> str:
        arrow = "*" if self.forward else "/"
        return f"{self.source}->{self.target} ({arrow}{self.feed.pair})"


# ---------------------------------------------------------------------------
# Path
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Path:
    """Ordered hops from the source asset to the destination asset (simple path)."""

    edges: Tuple[Edge, ...]

    def __len__(self) -> int:
        return len(self.edges)

    def __iter__(self) -> Iterator[Edge]:
        return iter(self.edges)

    def assets(self) -> Tuple[str, ...]:
        """Return the visited assets in order, source first."""
        if not self.edges:
            return ()
        return (self.edges[0].source,) + tuple(e.target for e in self.edges)

    def __str__(self) -> str:
        return " -> ".join(self.assets())


__all__ = [
    "Feed",
    "Edge",
    "Path",
]
