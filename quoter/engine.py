"""Quote engine for swaps against a managed multi-asset pool.

The engine is a pure function of (snapshot, request): it keeps no state
between calls, performs no I/O and can be shared freely across threads.

Pricing pipeline for one quote:

1. Validate the pool is tradable and both assets are supported and held.
2. Total the pool's value at mid prices (any offline oracle aborts).
3. Derive each asset's target holding from its target weight.
4. Integrate the sold amount along the input's sell curve into a USD value,
   then that value along the output's buy curve into an output amount.
5. Price the same trade at bid/ask only (no curve, no fees) and cap it at the
   pool's inventory; the quote is the smaller of the two and the difference
   is the fee.
6. Split the fee by recipient and check post-trade weights.
"""

from __future__ import annotations

import structlog

from quoter.config import DEFAULT_QUOTE_CONFIG, QuoteConfig
from quoter.constants import FEE_RATE_SCALE
from quoter.curve import integrate_buy, integrate_sell
from quoter.errors import (
    AssetNotInComposition,
    AssetNotSupported,
    LiquidityProvisionDisabled,
    OracleStale,
    QuoteOutcome,
    QuoteRejected,
)
from quoter.fees import split_fees
from quoter.math.fixed_point import amount_to_value, mul_div, value_to_amount
from quoter.models.pool import PoolSnapshot
from quoter.models.quote import QuoteRequest, QuoteResult, TradeLeg
from quoter.weights import TradeSide, check_weights, project_trade

logger = structlog.get_logger()


class QuoteEngine:
    """Prices swaps against pool snapshots.

    Attributes:
        config: Protocol parameters (safety margin, base asset, weight scale)
    """

    def __init__(self, config: QuoteConfig | None = None) -> None:
        """Initialize with optional configuration.

        Args:
            config: Quote configuration. Uses DEFAULT_QUOTE_CONFIG if not provided.
        """
        self.config = config or DEFAULT_QUOTE_CONFIG

    def quote(self, snapshot: PoolSnapshot, request: QuoteRequest) -> QuoteResult:
        """Price a swap.

        Args:
            snapshot: Materialized pool state
            request: Assets and input amount

        Returns:
            QuoteResult with output amount and fees

        Raises:
            QuoteRejected: One of its subclasses, if the pool refuses the trade
        """
        composition = snapshot.composition
        if composition.lp_disabled:
            raise LiquidityProvisionDisabled()

        from_id, to_id = self._resolve_assets(snapshot, request)
        from_index = composition.index_of(from_id)
        if from_index is None:
            raise AssetNotInComposition(request.input_mint, "input")
        to_index = composition.index_of(to_id)
        if to_index is None:
            raise AssetNotInComposition(request.output_mint, "output")

        pool_value = self.pool_value(snapshot)

        from_settings = snapshot.assets[from_id]
        to_settings = snapshot.assets[to_id]
        from_price = snapshot.prices[from_id]
        to_price = snapshot.prices[to_id]
        from_holding = composition.amounts[from_index]
        to_holding = composition.amounts[to_index]

        from_target = value_to_amount(
            mul_div(composition.target_weights[from_index], pool_value, composition.weight_sum),
            from_settings.decimals,
            from_price.avg_price,
        )
        to_target = value_to_amount(
            mul_div(composition.target_weights[to_index], pool_value, composition.weight_sum),
            to_settings.decimals,
            to_price.avg_price,
        )

        sell_fill = integrate_sell(
            request.amount,
            from_settings,
            from_price,
            from_holding,
            from_target,
            snapshot.curves[from_id].sell,
        )
        buy_fill = integrate_buy(
            sell_fill.output,
            to_settings,
            to_price,
            to_holding,
            to_target,
            snapshot.curves[to_id].buy,
        )

        spot_amount = value_to_amount(
            amount_to_value(request.amount, from_settings.decimals, from_price.sell_price),
            to_settings.decimals,
            to_price.buy_price,
        )
        fair_amount = value_to_amount(
            amount_to_value(request.amount, from_settings.decimals, from_price.avg_price),
            to_settings.decimals,
            to_price.avg_price,
        )

        spot_amount = min(spot_amount, to_holding)
        output_amount = min(buy_fill.output, spot_amount)
        total_fees = spot_amount - output_amount
        fee_split = split_fees(total_fees, snapshot.fee_recipients)
        fee_rate_raw = mul_div(total_fees, FEE_RATE_SCALE, fair_amount)

        projection = project_trade(
            pool_value,
            seller=TradeSide(from_holding, from_settings.decimals, from_price.avg_price),
            sold_amount=request.amount,
            buyer=TradeSide(to_holding, to_settings.decimals, to_price.avg_price),
            bought_amount=spot_amount - fee_split.pool,
            safety_margin_bps=self.config.safety_margin_bps,
            weight_multiplier=self.config.weight_multiplier,
        )
        removing_dust = (
            from_id == self.config.base_asset_id and composition.target_weights[to_index] == 0
        )
        check_weights(
            projection,
            seller_target_weight=composition.target_weights[from_index],
            buyer_target_weight=composition.target_weights[to_index],
            rebalance_threshold=composition.rebalance_threshold,
            lp_offset_threshold=composition.lp_offset_threshold,
            removing_dust=removing_dust,
            weight_multiplier=self.config.weight_multiplier,
        )

        logger.debug(
            "quote_computed",
            pool_id=snapshot.pool_id,
            input_mint=request.input_mint,
            output_mint=request.output_mint,
            amount_in=request.amount,
            amount_out=output_amount,
            sell_value=sell_fill.output,
            curve_amount=buy_fill.output,
            spot_amount=spot_amount,
            total_fees=total_fees,
            seller_weight=projection.seller_weight,
            buyer_weight=projection.buyer_weight,
        )

        return QuoteResult(
            input_amount=request.amount,
            output_amount=output_amount,
            total_fee_amount=total_fees,
            fee_mint=request.output_mint,
            fee_split=fee_split,
            fair_amount=fair_amount,
            fee_rate_raw=fee_rate_raw,
        )

    def try_quote(self, snapshot: PoolSnapshot, request: QuoteRequest) -> QuoteOutcome:
        """Price a swap, returning rejections as values instead of raising.

        Use this from routing code that only needs to know whether this pool
        can serve the trade.
        """
        try:
            return QuoteOutcome.success(self.quote(snapshot, request))
        except QuoteRejected as e:
            logger.debug(
                "quote_rejected",
                pool_id=snapshot.pool_id,
                input_mint=request.input_mint,
                output_mint=request.output_mint,
                amount_in=request.amount,
                reason=e.reason.value,
                detail=e.detail,
            )
            return QuoteOutcome.rejected(e)

    def pool_value(self, snapshot: PoolSnapshot) -> int:
        """Total USD value of the pool's holdings at mid prices.

        Raises:
            OracleStale: If any held asset's oracle is offline
        """
        composition = snapshot.composition
        total = 0
        for asset_id, amount in zip(composition.asset_ids, composition.amounts, strict=True):
            price = snapshot.prices[asset_id]
            if not price.is_live:
                raise OracleStale(asset_id)
            total += amount_to_value(amount, snapshot.assets[asset_id].decimals, price.avg_price)
        return total

    def describe_trade(self, snapshot: PoolSnapshot, request: QuoteRequest) -> list[TradeLeg]:
        """Describe a swap for the instruction encoder.

        Returns the settings-table ids of both assets and the input amount.
        The program enforces its own weight checks at settlement, so no
        minimum output is passed.

        Raises:
            AssetNotSupported: If either mint is missing from the settings table
        """
        from_id, to_id = self._resolve_assets(snapshot, request)
        return [TradeLeg(asset_ids=(from_id, to_id), amount=request.amount, minimum_amount_out=0)]

    def reserve_assets(self, snapshot: PoolSnapshot) -> list[str]:
        """Mints of the held assets that are open for swaps, in composition order."""
        mints = []
        for asset_id in snapshot.composition.asset_ids:
            settings = snapshot.assets[asset_id]
            if settings.lp_enabled:
                mints.append(settings.mint)
        return mints

    @staticmethod
    def _resolve_assets(snapshot: PoolSnapshot, request: QuoteRequest) -> tuple[int, int]:
        from_id = snapshot.find_asset(request.input_mint)
        if from_id is None:
            raise AssetNotSupported(request.input_mint, "input")
        to_id = snapshot.find_asset(request.output_mint)
        if to_id is None:
            raise AssetNotSupported(request.output_mint, "output")
        return from_id, to_id


# Singleton engine instance; the engine is stateless so one is enough
engine = QuoteEngine()


def get_default_engine() -> QuoteEngine:
    """Get the default engine instance."""
    return engine
