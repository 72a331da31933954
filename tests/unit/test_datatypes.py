import pytest

from feed_router.core.datatypes import Edge, Feed, Path
from feed_router.core.exc import FeedDefinitionError


def test_feed_rejects_same_asset_on_both_sides():
    print("[feed-invalid] from == to -> expect FeedDefinitionError")
    with pytest.raises(FeedDefinitionError):
        Feed(id=0, from_asset="BTC", to_asset="BTC", address="0x1", decimals=8)


@pytest.mark.parametrize("decimals", [-1, 1.5, True])
def test_feed_rejects_bad_decimals(decimals):
    with pytest.raises(FeedDefinitionError):
        Feed(id=0, from_asset="BTC", to_asset="USD", address="0x1", decimals=decimals)


def test_feed_from_mapping():
    f = Feed.from_mapping({"id": 7, "from": "ETH", "to": "USD", "address": "0xabc", "decimals": 8})
    assert f == Feed(7, "ETH", "USD", "0xabc", 8)
    assert f.pair == "ETH/USD"


def test_feed_from_mapping_missing_field():
    with pytest.raises(FeedDefinitionError):
        Feed.from_mapping({"id": 7, "from": "ETH", "address": "0xabc", "decimals": 8})


@pytest.mark.parametrize("field,value", [
    ("decimals", 8.9),
    ("decimals", "8"),
    ("from", None),
    ("to", ""),
    ("address", 123),
    ("id", "7"),
])
def test_feed_from_mapping_does_not_coerce(field, value):
    record = {"id": 7, "from": "ETH", "to": "USD", "address": "0xabc", "decimals": 8}
    record[field] = value
    print(f"[feed-from-mapping] {field}={value!r} -> expect FeedDefinitionError")
    with pytest.raises(FeedDefinitionError):
        Feed.from_mapping(record)


def test_feed_from_mapping_rejects_non_mapping():
    with pytest.raises(FeedDefinitionError):
        Feed.from_mapping(["ETH", "USD"])


def test_edge_direction_and_path_assets():
    f1 = Feed(0, "A", "B", "0xAB", 8)
    f2 = Feed(1, "C", "B", "0xCB", 8)
    fwd = Edge(f1, True)
    rev = Edge(f2, False)
    assert (fwd.source, fwd.target) == ("A", "B")
    assert (rev.source, rev.target) == ("B", "C")
    path = Path((fwd, rev))
    assert len(path) == 2
    assert path.assets() == ("A", "B", "C")
    assert str(path) == "A -> B -> C"
    assert Path(()).assets() == ()
