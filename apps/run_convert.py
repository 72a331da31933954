#!/usr/bin/env python3
"""Command-line launcher: convert an amount between assets via oracle feeds.

Example:
  python apps/run_convert.py 5 BTC USD --feeds feeds.json --endpoint https://rpc.example
The endpoint defaults to $FEED_ROUTER_RPC_URL.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

from feed_router import SUPPORTED_ASSETS, Feed, FeedDefinitionError, FeedRouterError, RpcConfig, convert
from feed_router.core.constants import ENV_RPC_URL


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Convert an amount between assets using price-oracle feeds.")
    parser.add_argument("amount", nargs="?", help="Amount to convert (decimal string)")
    parser.add_argument("from_asset", nargs="?", help="Source asset code")
    parser.add_argument("to_asset", nargs="?", help="Destination asset code")
    parser.add_argument("--feeds", type=Path, help="JSON file with a list of feed records")
    parser.add_argument("--endpoint", default=os.environ.get(ENV_RPC_URL, ""),
                        help=f"JSON-RPC URL (default: ${ENV_RPC_URL})")
    parser.add_argument("--timeout", type=float, default=None, help="RPC timeout in seconds")
    parser.add_argument("--list-assets", action="store_true", help="Print the supported asset codes and exit")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser.parse_args(argv)


def load_feeds(path: Path) -> List[Feed]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            records = json.load(f)
    except OSError as exc:
        raise FeedDefinitionError(f"{path}: cannot read feeds file: {exc}") from exc
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise FeedDefinitionError(f"{path}: invalid JSON: {exc}") from exc
    if not isinstance(records, list):
        raise FeedDefinitionError(f"{path}: expected a JSON list of feed records")
    return [Feed.from_mapping(r) for r in records]


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.list_assets:
        print("\n".join(SUPPORTED_ASSETS))
        return 0

    if args.amount is None or args.from_asset is None or args.to_asset is None:
        print("amount, from_asset and to_asset are required", file=sys.stderr)
        return 2

    try:
        feeds = load_feeds(args.feeds) if args.feeds else []
        config = RpcConfig.from_env()
        if args.timeout is not None:
            config = RpcConfig(timeout=args.timeout, block_tag=config.block_tag)
        result = asyncio.run(convert(
            args.amount, args.from_asset, args.to_asset, feeds,
            endpoint=args.endpoint or None, config=config,
        ))
    except FeedRouterError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    print(result)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
