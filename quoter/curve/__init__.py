"""Sell-side and buy-side price curve integration.

Both legs of a swap share one band walker (walk_bands) and differ only in
the direction prices may move and in the quantity being consumed.
"""

from quoter.curve.integrator import (
    CurveFill,
    buy_amount,
    integrate_buy,
    integrate_sell,
    sell_value,
    tier_fees,
    walk_bands,
)

__all__ = [
    "CurveFill",
    "walk_bands",
    "tier_fees",
    "integrate_sell",
    "integrate_buy",
    "sell_value",
    "buy_amount",
]
