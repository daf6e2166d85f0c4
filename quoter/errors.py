"""Quote error classes and result types.

Rejections are business-rule outcomes: the pool snapshot is valid but this
trade is not allowed right now. They carry a RejectionReason so collaborators
can translate them (e.g. drop this pricing source from a route) without
parsing messages.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from quoter.models.quote import QuoteResult


class RejectionReason(str, Enum):
    """Why a quote was rejected."""

    LIQUIDITY_PROVISION_DISABLED = "liquidity_provision_disabled"
    ASSET_NOT_SUPPORTED = "asset_not_supported"
    ASSET_NOT_IN_COMPOSITION = "asset_not_in_composition"
    ORACLE_STALE = "oracle_stale"
    SELLER_WEIGHT_EXCEEDED = "seller_weight_exceeded"
    BUYER_WEIGHT_BELOW_MINIMUM = "buyer_weight_below_minimum"


class QuoteError(Exception):
    """Base error for quoter operations."""

    pass


class InvalidSnapshotError(QuoteError, ValueError):
    """Pool snapshot tables are inconsistent (misaligned or dangling ids)."""

    pass


class QuoteRejected(QuoteError):
    """Base class for trades the pool refuses to quote.

    Attributes:
        reason: Machine-readable rejection kind
        detail: Human-readable explanation
    """

    reason: RejectionReason

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail


class LiquidityProvisionDisabled(QuoteRejected):
    """Manager has disabled liquidity provision on this pool."""

    reason = RejectionReason.LIQUIDITY_PROVISION_DISABLED

    def __init__(self) -> None:
        super().__init__("Manager has disabled liquidity provision on this pool")


class AssetNotSupported(QuoteRejected):
    """Requested asset is absent from the settings table."""

    reason = RejectionReason.ASSET_NOT_SUPPORTED

    def __init__(self, mint: str, role: str) -> None:
        super().__init__(f"{role.capitalize()} asset {mint} not found in supported assets")
        self.mint = mint
        self.role = role


class AssetNotInComposition(QuoteRejected):
    """Requested asset is supported but not currently held by the pool."""

    reason = RejectionReason.ASSET_NOT_IN_COMPOSITION

    def __init__(self, mint: str, role: str) -> None:
        super().__init__(f"{role.capitalize()} asset {mint} not found in the pool composition")
        self.mint = mint
        self.role = role


class OracleStale(QuoteRejected):
    """A held asset's price feed is not live."""

    reason = RejectionReason.ORACLE_STALE

    def __init__(self, asset_id: int) -> None:
        super().__init__(f"Oracle for asset {asset_id} is offline")
        self.asset_id = asset_id


class SellerWeightExceeded(QuoteRejected):
    """Selling asset would exceed its maximum allowed weight after the trade."""

    reason = RejectionReason.SELLER_WEIGHT_EXCEEDED

    def __init__(self, weight: int, allowed: int) -> None:
        super().__init__(f"Input asset weight {weight} exceeds max allowed weight {allowed}")
        self.weight = weight
        self.allowed = allowed


class BuyerWeightBelowMinimum(QuoteRejected):
    """Buying asset would fall below its minimum allowed weight after the trade."""

    reason = RejectionReason.BUYER_WEIGHT_BELOW_MINIMUM

    def __init__(self, weight: int, allowed: int) -> None:
        super().__init__(f"Output asset weight {weight} is below min allowed weight {allowed}")
        self.weight = weight
        self.allowed = allowed


@dataclass(frozen=True)
class QuoteOutcome:
    """Result of a quote attempt that never raises on rejection.

    Examples:
        outcome = engine.try_quote(snapshot, request)
        if outcome.is_valid:
            out = outcome.result.output_amount
        else:
            skip_source(outcome.rejection)
    """

    result: QuoteResult | None
    rejection: RejectionReason | None = None
    detail: str | None = None

    @property
    def is_valid(self) -> bool:
        """True if a quote was produced."""
        return self.rejection is None

    @property
    def is_rejected(self) -> bool:
        """True if the pool refused the trade."""
        return self.rejection is not None

    @classmethod
    def success(cls, result: QuoteResult) -> QuoteOutcome:
        """Create an outcome carrying a quote."""
        return cls(result=result)

    @classmethod
    def rejected(cls, error: QuoteRejected) -> QuoteOutcome:
        """Create an outcome from a rejection."""
        return cls(result=None, rejection=error.reason, detail=error.detail)
