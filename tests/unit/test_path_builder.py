import pytest

from feed_router.core import Feed, InvariantViolation, NoRouteFound
from feed_router.graph import FeedGraph
from feed_router.path_builder import find_path


def _route(path):
    return [(e.feed.id, e.forward) for e in path]


def test_forward_multi_hop(chain_feeds):
    path = find_path(FeedGraph.from_feeds(chain_feeds), "A", "D")
    print("[path-forward] A->D:", path)
    assert path.assets() == ("A", "B", "C", "D")
    assert _route(path) == [(0, True), (1, True), (2, True)]


def test_reverse_multi_hop(chain_feeds):
    path = find_path(FeedGraph.from_feeds(chain_feeds), "D", "A")
    print("[path-reverse] D->A:", path)
    assert path.assets() == ("D", "C", "B", "A")
    assert _route(path) == [(2, False), (1, False), (0, False)]


def test_mixed_directions():
    feeds = [Feed(0, "ETH", "USD", "0x1", 8), Feed(1, "BTC", "USD", "0x2", 8)]
    path = find_path(FeedGraph.from_feeds(feeds), "ETH", "BTC")
    assert _route(path) == [(0, True), (1, False)]


def test_shortest_route_wins_over_longer_one():
    print("[path-shortest] direct X/Y beats X->M->N->Y even when listed last")
    feeds = [
        Feed(0, "X", "M", "0x1", 8),
        Feed(1, "M", "N", "0x2", 8),
        Feed(2, "N", "Y", "0x3", 8),
        Feed(3, "X", "Y", "0x4", 8),
    ]
    path = find_path(FeedGraph.from_feeds(feeds), "X", "Y")
    assert _route(path) == [(3, True)]


def test_tie_break_is_first_in_input_order():
    print("[path-tie] two 2-hop routes: the one built from earlier feeds wins")
    feeds = [
        Feed(0, "S", "P", "0x1", 8),
        Feed(1, "S", "Q", "0x2", 8),
        Feed(2, "Q", "T", "0x3", 8),
        Feed(3, "P", "T", "0x4", 8),
    ]
    path = find_path(FeedGraph.from_feeds(feeds), "S", "T")
    assert path.assets() == ("S", "P", "T")
    # reversing the feed order flips the choice
    path2 = find_path(FeedGraph.from_feeds(list(reversed(feeds))), "S", "T")
    assert path2.assets() == ("S", "Q", "T")


def test_cycle_terminates_with_simple_path():
    feeds = [
        Feed(0, "A", "B", "0x1", 8),
        Feed(1, "B", "C", "0x2", 8),
        Feed(2, "C", "A", "0x3", 8),
        Feed(3, "C", "D", "0x4", 8),
    ]
    path = find_path(FeedGraph.from_feeds(feeds), "A", "D")
    assets = path.assets()
    assert assets[0] == "A" and assets[-1] == "D"
    assert len(set(assets)) == len(assets)
    assert len(path) == 2


def test_unreachable_raises_no_route_found(chain_feeds):
    feeds = list(chain_feeds) + [Feed(9, "X", "Y", "0xXY", 8)]
    with pytest.raises(NoRouteFound) as ei:
        find_path(FeedGraph.from_feeds(feeds), "A", "Y")
    print("[path-unreachable]", ei.value)
    assert ei.value.source == "A" and ei.value.destination == "Y"
    assert "A" in str(ei.value) and "Y" in str(ei.value)


def test_unknown_source_raises_no_route_found(chain_feeds):
    with pytest.raises(NoRouteFound):
        find_path(FeedGraph.from_feeds(chain_feeds), "Unknown", "A")


def test_same_endpoints_is_a_precondition_violation(chain_feeds):
    with pytest.raises(InvariantViolation):
        find_path(FeedGraph.from_feeds(chain_feeds), "A", "A")
