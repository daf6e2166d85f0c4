"""Price-impact curve integration.

A pool prices a swap in two legs. The sold asset is integrated along its sell
curve into a USD value, then that value is integrated along the bought
asset's buy curve into an output amount. Both legs walk the same banded
curve:

- bands are measured from the pool's target holding outward, so when the
  pool already sits past its target on the traded side the first units
  start partway through the curve (the curve offset);
- a band's price is adopted only when it is worse for the trader than the
  running price, so size never improves the rate;
- after the listed bands an open-ended tail band absorbs whatever is left at
  the last adopted price.

Within each band the traded quantity is split where the pool's running
holding crosses its target. The part that moves holdings toward the target
pays the before-target fee tier, the rest pays the after-target tier.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass

from quoter.constants import BPS_DIVIDER
from quoter.math.fixed_point import amount_to_value, mul_div, saturating_sub, value_to_amount
from quoter.models.pool import AssetSettings, OraclePrice, PriceCurve


@dataclass(frozen=True)
class CurveFill:
    """Result of integrating one leg of a swap.

    Attributes:
        output: USD value (sell leg) or raw amount (buy leg) produced
        fee_value: USD value withheld as fees across all bands
        value_before_target: Gross value traded in the before-target tier
        value_after_target: Gross value traded in the after-target tier
        bands_used: Number of bands (including the tail) that contributed
    """

    output: int
    fee_value: int
    value_before_target: int
    value_after_target: int
    bands_used: int


def walk_bands(
    curve: PriceCurve,
    start_price: int,
    use_curve_price: bool,
    offset: int,
    adopt: Callable[[int, int], bool],
    tail: Callable[[int], int],
) -> Iterator[tuple[int, int]]:
    """Yield (available_amount, price) for each band a trade can consume.

    Args:
        curve: Bands to walk, in order
        start_price: Oracle price the walk starts from
        use_curve_price: If False, band prices are never adopted
        offset: Band width already consumed before this trade
        adopt: adopt(band_price, running_price) is True when the band price
            is worse for the trader and should replace the running price
        tail: tail(running_price) returns the width of the open-ended band
            after the listed ones; it is called lazily so it can read the
            caller's remaining budget

    Yields:
        Width still available in each band after the offset, and the
        effective price for that band.
    """
    price = start_price
    for point in curve.points:
        if use_curve_price and adopt(point.price, price):
            price = point.price
        if point.amount <= offset:
            offset -= point.amount
            continue
        yield point.amount - offset, price
        offset = 0

    tail_amount = tail(price)
    if tail_amount > 0:
        yield tail_amount, price


def tier_fees(value_before: int, value_after: int, settings: AssetSettings) -> int:
    """Fees for a band: each tier's value times its basis-point rate."""
    return mul_div(value_before, settings.fee_before_target_bps, BPS_DIVIDER) + mul_div(
        value_after, settings.fee_after_target_bps, BPS_DIVIDER
    )


def integrate_sell(
    amount: int,
    settings: AssetSettings,
    price: OraclePrice,
    holding: int,
    target: int,
    curve: PriceCurve,
) -> CurveFill:
    """Integrate selling `amount` raw units into the pool along its sell curve.

    Selling grows the pool's holding. Units sold while the holding is below
    target pay the before-target fee; units that push it to or past target
    pay the after-target fee.

    Args:
        amount: Raw amount the trader sells
        settings: Sold asset's settings
        price: Sold asset's oracle price (the walk starts at sell_price)
        holding: Pool's current raw holding of the sold asset
        target: Pool's target raw holding of the sold asset
        curve: Sold asset's sell curve

    Returns:
        CurveFill whose output is the USD value net of fees
    """
    remaining = amount
    current = holding
    output = fee_total = before_total = after_total = bands = 0

    for band_amount, band_price in walk_bands(
        curve,
        start_price=price.sell_price,
        use_curve_price=settings.use_curve_price,
        offset=saturating_sub(holding, target),
        adopt=lambda candidate, running: candidate < running,
        tail=lambda _running: remaining,
    ):
        interval = min(band_amount, remaining)
        if current >= target:
            amount_before = 0
        elif current + interval >= target:
            amount_before = target - current
        else:
            amount_before = interval
        amount_after = interval - amount_before

        value_before = amount_to_value(amount_before, settings.decimals, band_price)
        value_after = amount_to_value(amount_after, settings.decimals, band_price)
        fees = tier_fees(value_before, value_after, settings)

        output += value_before + value_after - fees
        fee_total += fees
        before_total += value_before
        after_total += value_after
        bands += 1

        remaining -= interval
        current += interval
        if remaining == 0:
            break

    return CurveFill(output, fee_total, before_total, after_total, bands)


def integrate_buy(
    value: int,
    settings: AssetSettings,
    price: OraclePrice,
    holding: int,
    target: int,
    curve: PriceCurve,
) -> CurveFill:
    """Integrate spending a USD `value` budget on the pool's buy curve.

    Buying draws the pool's holding down. Value spent while the holding is
    above target pays the before-target fee; value that takes it to or below
    target pays the after-target fee.

    Args:
        value: USD value budget (net value of the sell leg)
        settings: Bought asset's settings
        price: Bought asset's oracle price (the walk starts at buy_price)
        holding: Pool's current raw holding of the bought asset
        target: Pool's target raw holding of the bought asset
        curve: Bought asset's buy curve

    Returns:
        CurveFill whose output is the raw amount bought net of fees
    """
    decimals = settings.decimals
    value_left = value
    current = holding
    output = fee_total = before_total = after_total = bands = 0

    for band_amount, band_price in walk_bands(
        curve,
        start_price=price.buy_price,
        use_curve_price=settings.use_curve_price,
        offset=saturating_sub(target, holding),
        adopt=lambda candidate, running: candidate > running,
        tail=lambda running: value_to_amount(value_left * 2, decimals, running),
    ):
        amount_in_band = band_amount
        value_in_band = amount_to_value(amount_in_band, decimals, band_price)
        if value_in_band > value_left:
            value_in_band = value_left
            amount_in_band = value_to_amount(value_in_band, decimals, band_price)

        if current <= target:
            value_before = 0
        elif current <= target + amount_in_band:
            value_before = saturating_sub(
                value_in_band,
                amount_to_value(target + amount_in_band - current, decimals, band_price),
            )
        else:
            value_before = value_in_band
        value_after = value_in_band - value_before
        fees = tier_fees(value_before, value_after, settings)

        bought = value_to_amount(value_in_band - fees, decimals, band_price)
        output += bought
        fee_total += fees
        before_total += value_before
        after_total += value_after
        bands += 1

        value_left -= value_in_band
        current = saturating_sub(current, bought)
        if value_left == 0:
            break

    return CurveFill(output, fee_total, before_total, after_total, bands)


def sell_value(
    amount: int,
    settings: AssetSettings,
    price: OraclePrice,
    holding: int,
    target: int,
    curve: PriceCurve,
) -> int:
    """USD value, net of fees, produced by selling `amount` into the pool."""
    return integrate_sell(amount, settings, price, holding, target, curve).output


def buy_amount(
    value: int,
    settings: AssetSettings,
    price: OraclePrice,
    holding: int,
    target: int,
    curve: PriceCurve,
) -> int:
    """Raw amount, net of fees, bought from the pool with a USD `value` budget."""
    return integrate_buy(value, settings, price, holding, target, curve).output
