"""Tests for sell-side curve integration.

The test asset has 6 decimals and a $1.00 oracle price, so raw amounts and
USD values coincide unless a curve moves the price.
"""

import pytest

from quoter.curve import integrate_sell, sell_value
from quoter.models.pool import AssetSettings, CurvePoint, OraclePrice, PriceCurve

ONE = 1_000_000
TARGET = 10_000 * ONE
PRICE = OraclePrice(buy_price=ONE, sell_price=ONE, avg_price=ONE)
FLAT = PriceCurve.flat()

TIERED = AssetSettings(mint="X", decimals=6, fee_before_target_bps=10, fee_after_target_bps=30)
NO_FEES = AssetSettings(mint="X", decimals=6, fee_before_target_bps=0, fee_after_target_bps=0)

# 100 tokens at $0.99, then 100 tokens at $0.98
SLOPED = PriceCurve((CurvePoint(100 * ONE, 990_000), CurvePoint(100 * ONE, 980_000)))


class TestFeeTiers:
    """Tests for the before/after-target fee split."""

    def test_below_target_pays_before_tier(self):
        fill = integrate_sell(ONE, TIERED, PRICE, TARGET - ONE, TARGET, FLAT)
        assert fill.value_before_target == ONE
        assert fill.value_after_target == 0
        assert fill.fee_value == 1_000
        assert fill.output == 999_000

    def test_at_target_pays_after_tier(self):
        fill = integrate_sell(ONE, TIERED, PRICE, TARGET, TARGET, FLAT)
        assert fill.value_before_target == 0
        assert fill.value_after_target == ONE
        assert fill.fee_value == 3_000

    def test_one_unit_past_target_switches_tier(self):
        """Selling exactly the gap to target stays in the before tier; one more unit does not."""
        gap = ONE
        exact = integrate_sell(gap, TIERED, PRICE, TARGET - gap, TARGET, FLAT)
        assert exact.value_before_target == gap
        assert exact.value_after_target == 0

        over = integrate_sell(gap + 1, TIERED, PRICE, TARGET - gap, TARGET, FLAT)
        assert over.value_before_target == gap
        assert over.value_after_target == 1

    def test_band_edge_at_target(self):
        """One band exactly as wide as the gap to target: the band edge is the tier edge."""
        gap = ONE
        curve = PriceCurve((CurvePoint(gap, ONE),))

        exact = integrate_sell(gap, TIERED, PRICE, TARGET - gap, TARGET, curve)
        assert exact.value_before_target == gap
        assert exact.value_after_target == 0
        assert exact.bands_used == 1

        over = integrate_sell(gap + 1, TIERED, PRICE, TARGET - gap, TARGET, curve)
        assert over.value_before_target == gap
        assert over.value_after_target == 1
        assert over.bands_used == 2

    def test_split_within_a_band(self):
        """40 tokens below target, 100 sold: 40 at 10 bps, 60 at 30 bps."""
        fill = integrate_sell(100 * ONE, TIERED, PRICE, TARGET - 40 * ONE, TARGET, FLAT)
        assert fill.value_before_target == 40 * ONE
        assert fill.value_after_target == 60 * ONE
        assert fill.fee_value == 40_000 + 180_000
        assert fill.output == 99_780_000

    def test_conserves_value(self):
        fill = integrate_sell(100 * ONE, TIERED, PRICE, TARGET - 40 * ONE, TARGET, FLAT)
        gross = fill.value_before_target + fill.value_after_target
        assert fill.output + fill.fee_value == gross


class TestPriceImpact:
    """Tests for walking the sell curve."""

    def test_flat_curve_trades_at_oracle(self):
        assert sell_value(250 * ONE, NO_FEES, PRICE, TARGET, TARGET, FLAT) == 250 * ONE

    def test_bands_then_tail(self):
        """100 @ 0.99 + 100 @ 0.98 + 50 @ 0.98 (tail at the last band price)."""
        fill = integrate_sell(250 * ONE, NO_FEES, PRICE, TARGET, TARGET, SLOPED)
        assert fill.output == 99_000_000 + 98_000_000 + 49_000_000
        assert fill.bands_used == 3

    def test_small_trade_uses_first_band_only(self):
        fill = integrate_sell(10 * ONE, NO_FEES, PRICE, TARGET, TARGET, SLOPED)
        assert fill.output == 9_900_000
        assert fill.bands_used == 1

    def test_offset_when_already_above_target(self):
        """150 tokens past target: the first band is used up, half of the second remains."""
        value = sell_value(100 * ONE, NO_FEES, PRICE, TARGET + 150 * ONE, TARGET, SLOPED)
        assert value == 49_000_000 + 49_000_000

    def test_below_target_has_no_offset(self):
        value = sell_value(10 * ONE, NO_FEES, PRICE, TARGET - 150 * ONE, TARGET, SLOPED)
        assert value == 9_900_000

    def test_curve_price_disabled(self):
        settings = AssetSettings(
            mint="X",
            decimals=6,
            fee_before_target_bps=0,
            fee_after_target_bps=0,
            use_curve_price=False,
        )
        assert sell_value(250 * ONE, settings, PRICE, TARGET, TARGET, SLOPED) == 250 * ONE

    def test_better_curve_price_ignored(self):
        curve = PriceCurve((CurvePoint(100 * ONE, 1_010_000),))
        assert sell_value(50 * ONE, NO_FEES, PRICE, TARGET, TARGET, curve) == 50 * ONE

    def test_zero_amount(self):
        fill = integrate_sell(0, TIERED, PRICE, TARGET, TARGET, SLOPED)
        assert fill.output == 0
        assert fill.fee_value == 0

    @pytest.mark.parametrize("holding", [TARGET - 300 * ONE, TARGET, TARGET + 150 * ONE])
    def test_monotonic_in_amount(self, holding):
        """Selling more never yields less value."""
        amounts = [ONE * n for n in (1, 10, 50, 99, 100, 101, 150, 200, 250, 1_000)]
        values = [sell_value(a, TIERED, PRICE, holding, TARGET, SLOPED) for a in amounts]
        assert values == sorted(values)
