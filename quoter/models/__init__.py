"""Data models for pool snapshots and quotes."""

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
from quoter.models.quote import FeeSplit, QuoteRequest, QuoteResult, TradeLeg
from quoter.models.snapshot import SnapshotModel, load_snapshot
from quoter.models.types import U64, Bps

__all__ = [
    # Types
    "U64",
    "Bps",
    # Snapshot dataclasses
    "AssetSettings",
    "OraclePrice",
    "CurvePoint",
    "PriceCurve",
    "AssetCurves",
    "FeeRecipients",
    "PoolComposition",
    "PoolSnapshot",
    # Quote types
    "QuoteRequest",
    "QuoteResult",
    "FeeSplit",
    "TradeLeg",
    # Snapshot schema
    "SnapshotModel",
    "load_snapshot",
]
