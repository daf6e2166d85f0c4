"""Post-trade weight guardrails.

A swap is only allowed if it keeps both assets inside their rebalancing
band. The band around each target weight is

    target * (1 +/- rebalance_threshold * lp_offset_threshold / 10^8)

with the ceiling capped at full weight. Post-trade weights are projected on
a trade inflated by a safety margin, so a quote that passes here still
passes if the price moves a little before settlement.
"""

from __future__ import annotations

from dataclasses import dataclass

import structlog

from quoter.constants import BPS_DIVIDER, SAFETY_MARGIN_BPS, WEIGHT_MULTIPLIER
from quoter.errors import BuyerWeightBelowMinimum, SellerWeightExceeded
from quoter.math.fixed_point import amount_to_value, apply_bps, mul_div, saturating_sub

logger = structlog.get_logger()

# Rebalance and offset thresholds are both in basis points
_BAND_SCALE = BPS_DIVIDER * BPS_DIVIDER


@dataclass(frozen=True)
class TradeSide:
    """One asset's position in the pool, priced at its mid price."""

    holding: int
    decimals: int
    avg_price: int

    def value_of(self, amount: int) -> int:
        return amount_to_value(amount, self.decimals, self.avg_price)


@dataclass(frozen=True)
class WeightProjection:
    """Projected pool state after a (safety-inflated) trade.

    Weights are on the WEIGHT_MULTIPLIER scale.
    """

    seller_weight: int
    buyer_weight: int
    pool_value_after: int


def project_trade(
    pool_value: int,
    seller: TradeSide,
    sold_amount: int,
    buyer: TradeSide,
    bought_amount: int,
    safety_margin_bps: int = SAFETY_MARGIN_BPS,
    weight_multiplier: int = WEIGHT_MULTIPLIER,
) -> WeightProjection:
    """Project both assets' weights after the trade.

    Args:
        pool_value: Total pool value before the trade
        seller: Pool position of the asset the trader sells
        sold_amount: Raw amount sold into the pool
        buyer: Pool position of the asset the trader buys
        bought_amount: Raw amount leaving the pool (spot output minus the
            share of fees the pool keeps)
        safety_margin_bps: Inflation applied to both amounts
        weight_multiplier: Scale of the returned weights

    Returns:
        WeightProjection with the projected weights
    """
    seller_before = seller.value_of(seller.holding)
    buyer_before = buyer.value_of(buyer.holding)

    safe_sold = apply_bps(sold_amount, safety_margin_bps, BPS_DIVIDER)
    seller_after = seller.value_of(seller.holding + safe_sold)

    safe_bought = min(apply_bps(bought_amount, safety_margin_bps, BPS_DIVIDER), buyer.holding)
    buyer_after = buyer.value_of(buyer.holding - safe_bought)

    pool_value_after = pool_value + seller_after + buyer_after
    pool_value_after = saturating_sub(pool_value_after, seller_before)
    pool_value_after = saturating_sub(pool_value_after, buyer_before)

    return WeightProjection(
        seller_weight=mul_div(seller_after, weight_multiplier, pool_value_after),
        buyer_weight=mul_div(buyer_after, weight_multiplier, pool_value_after),
        pool_value_after=pool_value_after,
    )


def allowed_weight_band(
    target_weight: int,
    rebalance_threshold: int,
    lp_offset_threshold: int,
    weight_multiplier: int = WEIGHT_MULTIPLIER,
) -> tuple[int, int]:
    """Return (min_weight, max_weight) swaps may leave an asset at.

    Examples:
        # 10% rebalance band, half of it open to swaps: +/- 5%
        allowed_weight_band(5000, 1000, 5000) == (4750, 5250)
    """
    offset = rebalance_threshold * lp_offset_threshold
    max_weight = min(mul_div(target_weight, _BAND_SCALE + offset, _BAND_SCALE), weight_multiplier)
    min_weight = mul_div(target_weight, saturating_sub(_BAND_SCALE, offset), _BAND_SCALE)
    return min_weight, max_weight


def check_weights(
    projection: WeightProjection,
    seller_target_weight: int,
    buyer_target_weight: int,
    rebalance_threshold: int,
    lp_offset_threshold: int,
    removing_dust: bool = False,
    weight_multiplier: int = WEIGHT_MULTIPLIER,
) -> None:
    """Reject the trade if it would leave either asset outside its band.

    Args:
        projection: Projected post-trade weights
        seller_target_weight: Target weight of the sold asset
        buyer_target_weight: Target weight of the bought asset
        rebalance_threshold: Pool rebalance band, in basis points
        lp_offset_threshold: Share of the band open to swaps, in basis points
        removing_dust: Waives the seller-side ceiling (the pool is selling off
            a position whose target weight was set to zero)
        weight_multiplier: Scale of the weights

    Raises:
        SellerWeightExceeded: If the sold asset ends above its maximum weight
        BuyerWeightBelowMinimum: If the bought asset ends below its minimum weight
    """
    _, seller_max = allowed_weight_band(
        seller_target_weight, rebalance_threshold, lp_offset_threshold, weight_multiplier
    )
    buyer_min, _ = allowed_weight_band(
        buyer_target_weight, rebalance_threshold, lp_offset_threshold, weight_multiplier
    )

    if projection.seller_weight > seller_max:
        if not removing_dust:
            raise SellerWeightExceeded(projection.seller_weight, seller_max)
        logger.debug(
            "seller_weight_ceiling_waived",
            weight=projection.seller_weight,
            allowed=seller_max,
        )

    if projection.buyer_weight < buyer_min:
        raise BuyerWeightBelowMinimum(projection.buyer_weight, buyer_min)
