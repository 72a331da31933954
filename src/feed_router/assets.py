"""Static registry of supported asset codes.

Informational only: conversion never consults it. Unknown codes are accepted
whenever a shortcut applies or a feed route exists.
"""
from __future__ import annotations

from typing import Tuple

SUPPORTED_ASSETS: Tuple[str, ...] = (
    "USD", "ETH", "BTC", "LINK", "XAU", "SNX", "DAI", "COMP", "DASH", "AUD",
    "LTC", "GBP", "ETC", "BCH", "XRP", "EOS", "XAG", "KNC", "SDEFI", "FIL",
    "MCAP", "XMR", "BNT", "SXP", "TRX", "N225", "UNI", "XTZ", "DOT", "JPY",
    "EUR", "BNB", "OXT", "ADX", "YFI", "SCEX", "REN", "FNX", "BRENT", "AAVE",
    "FTSE", "CHF", "ADA", "USDC", "USDT", "SUSD", "TUSD", "ZRX", "BAT", "LRC",
    "MKR", "MANA", "BUSD", "REP", "ENJ", "CRV", "PAX", "XDR", "CRO", "DMG",
    "RCN", "BZRX", "WOM",
)


def is_supported_asset(code: str) -> bool:
    return code in SUPPORTED_ASSETS


__all__ = ["SUPPORTED_ASSETS", "is_supported_asset"]
