"""Pydantic models for pool snapshots supplied as JSON.

The account-decoding collaborator (or a test fixture) hands the quoter an
already-materialized snapshot. These models validate it and build the
immutable PoolSnapshot the engine consumes.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, model_validator

from quoter.constants import FEE_SHARE_BASE, MAX_CURVE_POINTS
from quoter.models.pool import (
    AssetCurves,
    AssetSettings,
    CurvePoint,
    FeeRecipients,
    OraclePrice,
    PoolComposition,
    PoolSnapshot,
    PriceCurve,
)
from quoter.models.types import U64, Bps


class CurvePointModel(BaseModel):
    """One price band."""

    amount: U64
    price: U64


class CurvesModel(BaseModel):
    """Sell and buy price bands for one asset."""

    sell: list[CurvePointModel] = Field(default_factory=list, max_length=MAX_CURVE_POINTS)
    buy: list[CurvePointModel] = Field(default_factory=list, max_length=MAX_CURVE_POINTS)

    def to_curves(self) -> AssetCurves:
        return AssetCurves(
            sell=PriceCurve(tuple(CurvePoint(p.amount, p.price) for p in self.sell)),
            buy=PriceCurve(tuple(CurvePoint(p.amount, p.price) for p in self.buy)),
        )


class OracleModel(BaseModel):
    """Oracle price feed state."""

    buy_price: U64 = Field(alias="buyPrice")
    sell_price: U64 = Field(alias="sellPrice")
    avg_price: U64 = Field(alias="avgPrice")
    live: bool = True

    model_config = {"populate_by_name": True}

    def to_price(self) -> OraclePrice:
        return OraclePrice(
            buy_price=self.buy_price,
            sell_price=self.sell_price,
            avg_price=self.avg_price,
            is_live=self.live,
        )


class AssetModel(BaseModel):
    """Settings-table entry with its oracle and curves."""

    mint: str = Field(min_length=1)
    # Token decimals fit a u8 on-chain; u64 math caps useful values well below
    decimals: int = Field(ge=0, le=19)
    fee_before_target_bps: Bps = Field(alias="feeBeforeTargetBps")
    fee_after_target_bps: Bps = Field(alias="feeAfterTargetBps")
    use_curve_price: bool = Field(default=True, alias="useCurvePrice")
    lp_enabled: bool = Field(default=True, alias="lpEnabled")
    oracle: OracleModel
    curves: CurvesModel = Field(default_factory=CurvesModel)

    model_config = {"populate_by_name": True}

    def to_settings(self) -> AssetSettings:
        return AssetSettings(
            mint=self.mint,
            decimals=self.decimals,
            fee_before_target_bps=self.fee_before_target_bps,
            fee_after_target_bps=self.fee_after_target_bps,
            use_curve_price=self.use_curve_price,
            lp_enabled=self.lp_enabled,
        )


class CompositionModel(BaseModel):
    """Current pool holdings and rebalancing parameters."""

    asset_ids: list[int] = Field(alias="assetIds")
    amounts: list[U64]
    target_weights: list[U64] = Field(alias="targetWeights")
    weight_sum: U64 = Field(alias="weightSum")
    rebalance_threshold: U64 = Field(alias="rebalanceThreshold")
    lp_offset_threshold: U64 = Field(alias="lpOffsetThreshold")
    lp_disabled: bool = Field(default=False, alias="lpDisabled")

    model_config = {"populate_by_name": True}

    @model_validator(mode="after")
    def _check_alignment(self) -> CompositionModel:
        if not (len(self.asset_ids) == len(self.amounts) == len(self.target_weights)):
            raise ValueError("assetIds, amounts and targetWeights must have the same length")
        if len(set(self.asset_ids)) != len(self.asset_ids):
            raise ValueError("assetIds must be unique")
        return self

    def to_composition(self) -> PoolComposition:
        return PoolComposition(
            asset_ids=tuple(self.asset_ids),
            amounts=tuple(self.amounts),
            target_weights=tuple(self.target_weights),
            weight_sum=self.weight_sum,
            rebalance_threshold=self.rebalance_threshold,
            lp_offset_threshold=self.lp_offset_threshold,
            lp_disabled=self.lp_disabled,
        )


class FeeRecipientsModel(BaseModel):
    """Percent shares of collected fees for protocol, host and manager."""

    protocol_bps: Bps = Field(default=0, alias="protocolBps")
    host_bps: Bps = Field(default=0, alias="hostBps")
    manager_bps: Bps = Field(default=0, alias="managerBps")

    model_config = {"populate_by_name": True}

    @model_validator(mode="after")
    def _check_total(self) -> FeeRecipientsModel:
        recipients = self.to_recipients()
        if not recipients.is_valid:
            raise ValueError(
                f"Fee shares must sum to at most {FEE_SHARE_BASE}, got {recipients.total_bps}"
            )
        return self

    def to_recipients(self) -> FeeRecipients:
        return FeeRecipients(
            protocol_bps=self.protocol_bps,
            host_bps=self.host_bps,
            manager_bps=self.manager_bps,
        )


class SnapshotModel(BaseModel):
    """A complete pool snapshot."""

    pool_id: str = Field(alias="poolId")
    composition: CompositionModel
    assets: list[AssetModel]
    fee_recipients: FeeRecipientsModel = Field(
        default_factory=FeeRecipientsModel, alias="feeRecipients"
    )

    model_config = {"populate_by_name": True}

    @model_validator(mode="after")
    def _check_references(self) -> SnapshotModel:
        for asset_id in self.composition.asset_ids:
            if not 0 <= asset_id < len(self.assets):
                raise ValueError(f"Composition references unknown asset id {asset_id}")
        mints = [asset.mint for asset in self.assets]
        if len(set(mints)) != len(mints):
            raise ValueError("Asset mints must be unique")
        return self

    def to_snapshot(self) -> PoolSnapshot:
        """Build the immutable snapshot the engine consumes."""
        return PoolSnapshot(
            pool_id=self.pool_id,
            composition=self.composition.to_composition(),
            assets=tuple(asset.to_settings() for asset in self.assets),
            prices=tuple(asset.oracle.to_price() for asset in self.assets),
            curves=tuple(asset.curves.to_curves() for asset in self.assets),
            fee_recipients=self.fee_recipients.to_recipients(),
        )


def load_snapshot(data: dict) -> PoolSnapshot:
    """Validate snapshot JSON data and build a PoolSnapshot.

    Raises:
        pydantic.ValidationError: If the data does not match the schema
    """
    return SnapshotModel.model_validate(data).to_snapshot()
