"""Pydantic models for the quote API request and response bodies.

Amounts in responses are decimal strings so u64 values survive JSON clients
that parse numbers as doubles.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from quoter.errors import QuoteRejected, RejectionReason
from quoter.models.quote import QuoteRequest, QuoteResult, TradeLeg
from quoter.models.snapshot import SnapshotModel
from quoter.models.types import U64


class QuoteBody(BaseModel):
    """Request body for /quote and /describe-trade."""

    snapshot: SnapshotModel
    input_mint: str = Field(alias="inputMint", min_length=1)
    output_mint: str = Field(alias="outputMint", min_length=1)
    amount: U64

    model_config = {"populate_by_name": True}

    def to_request(self) -> QuoteRequest:
        return QuoteRequest(
            input_mint=self.input_mint,
            output_mint=self.output_mint,
            amount=self.amount,
        )


class SnapshotBody(BaseModel):
    """Request body for endpoints that only need a snapshot."""

    snapshot: SnapshotModel


class FeeSplitModel(BaseModel):
    protocol: str
    host: str
    manager: str
    pool: str


class QuoteModel(BaseModel):
    """A priced swap."""

    input_amount: str = Field(alias="inputAmount")
    output_amount: str = Field(alias="outputAmount")
    total_fee_amount: str = Field(alias="totalFeeAmount")
    fee_mint: str = Field(alias="feeMint")
    effective_fee_rate: str = Field(
        alias="effectiveFeeRate", description="Fee rate in basis points"
    )
    fee_pct: str = Field(alias="feePct", description="Fee rate in percent")
    fee_split: FeeSplitModel = Field(alias="feeSplit")

    model_config = {"populate_by_name": True}

    @classmethod
    def from_result(cls, result: QuoteResult) -> QuoteModel:
        split = result.fee_split
        return cls(
            input_amount=str(result.input_amount),
            output_amount=str(result.output_amount),
            total_fee_amount=str(result.total_fee_amount),
            fee_mint=result.fee_mint,
            effective_fee_rate=str(result.effective_fee_rate),
            fee_pct=str(result.fee_pct),
            fee_split=FeeSplitModel(
                protocol=str(split.protocol),
                host=str(split.host),
                manager=str(split.manager),
                pool=str(split.pool),
            ),
        )


class RejectionModel(BaseModel):
    """Why the pool refused the trade."""

    reason: RejectionReason
    detail: str

    @classmethod
    def from_error(cls, error: QuoteRejected) -> RejectionModel:
        return cls(reason=error.reason, detail=error.detail)


class QuoteResponse(BaseModel):
    """Either a quote or a rejection."""

    quote: QuoteModel | None = None
    rejection: RejectionModel | None = None


class TradeLegModel(BaseModel):
    """Settlement inputs for the instruction encoder."""

    from_asset_id: int = Field(alias="fromAssetId")
    to_asset_id: int = Field(alias="toAssetId")
    amount: str
    minimum_amount_out: str = Field(alias="minimumAmountOut")

    model_config = {"populate_by_name": True}

    @classmethod
    def from_leg(cls, leg: TradeLeg) -> TradeLegModel:
        return cls(
            from_asset_id=leg.asset_ids[0],
            to_asset_id=leg.asset_ids[1],
            amount=str(leg.amount),
            minimum_amount_out=str(leg.minimum_amount_out),
        )


class DescribeTradeResponse(BaseModel):
    legs: list[TradeLegModel] | None = None
    rejection: RejectionModel | None = None


class ReserveAssetsResponse(BaseModel):
    mints: list[str]
