"""Test helpers module for shared test utilities.

- constants: Mints, decimals and prices of the test assets
- factories: Snapshot and request factory functions
"""

from tests.helpers.constants import (
    ASSET_DECIMALS,
    ASSET_PRICES,
    MSOL,
    MSOL_ID,
    ONE_DOLLAR,
    ONE_MSOL,
    ONE_SOL,
    ONE_USDC,
    ONE_USDT,
    SOL,
    SOL_ID,
    USDC,
    USDC_ID,
    USDT,
    USDT_ID,
)
from tests.helpers.factories import make_asset, make_price, make_request, make_snapshot

__all__ = [
    # Constants
    "USDC",
    "SOL",
    "MSOL",
    "USDT",
    "USDC_ID",
    "SOL_ID",
    "MSOL_ID",
    "USDT_ID",
    "ASSET_DECIMALS",
    "ASSET_PRICES",
    "ONE_DOLLAR",
    "ONE_USDC",
    "ONE_SOL",
    "ONE_MSOL",
    "ONE_USDT",
    # Factories
    "make_asset",
    "make_price",
    "make_snapshot",
    "make_request",
]
