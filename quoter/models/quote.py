"""Quote request and result types."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from quoter.constants import BPS_DIVIDER


@dataclass(frozen=True)
class QuoteRequest:
    """Swap `amount` raw units of `input_mint` for `output_mint`."""

    input_mint: str
    output_mint: str
    amount: int


@dataclass(frozen=True)
class FeeSplit:
    """Collected fees, partitioned by recipient.

    `pool` is the residual kept by the pool, so the four parts always sum to
    the total.
    """

    protocol: int
    host: int
    manager: int
    pool: int

    @property
    def total(self) -> int:
        return self.protocol + self.host + self.manager + self.pool


@dataclass(frozen=True)
class QuoteResult:
    """Priced swap.

    Attributes:
        input_amount: Raw input amount, as requested
        output_amount: Raw output amount the trader receives
        total_fee_amount: Spot-price output minus output_amount, in output
            asset units
        fee_mint: Asset the fee is denominated in (the output asset)
        fee_split: total_fee_amount by recipient
        fair_amount: Output at mid prices, used as the fee-rate denominator
        fee_rate_raw: Fee in millionths of fair_amount
    """

    input_amount: int
    output_amount: int
    total_fee_amount: int
    fee_mint: str
    fee_split: FeeSplit
    fair_amount: int
    fee_rate_raw: int

    @property
    def effective_fee_rate(self) -> Decimal:
        """Fee rate in basis points."""
        return Decimal(self.fee_rate_raw) / Decimal(100)

    @property
    def fee_pct(self) -> Decimal:
        """Fee rate in percent."""
        return Decimal(self.fee_rate_raw) / Decimal(BPS_DIVIDER)


@dataclass(frozen=True)
class TradeLeg:
    """What an instruction encoder needs to settle one swap.

    Attributes:
        asset_ids: (input asset id, output asset id) in the settings table
        amount: Raw input amount
        minimum_amount_out: Slippage floor passed to the program
    """

    asset_ids: tuple[int, int]
    amount: int
    minimum_amount_out: int = 0
