"""Pool snapshot dataclasses.

Immutable value types describing one materialized view of a pool: its
composition, the per-asset settings table, oracle prices and price curves.
The settings, prices and curves tables are aligned: the index of an entry is
the asset id used by the composition.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from quoter.constants import FEE_SHARE_BASE, MAX_CURVE_POINTS
from quoter.errors import InvalidSnapshotError


@dataclass(frozen=True)
class AssetSettings:
    """Per-asset configuration from the settings table.

    Attributes:
        mint: Asset identifier (token mint address)
        decimals: Exponent for raw-amount scaling (USDC = 6)
        fee_before_target_bps: Fee on the part of a trade that moves holdings
            toward the target
        fee_after_target_bps: Fee on the part of a trade that pushes holdings
            past the target
        use_curve_price: If False, curves are ignored and the oracle bid/ask
            is used for any size
        lp_enabled: If False, the asset is not advertised as tradable
    """

    mint: str
    decimals: int
    fee_before_target_bps: int
    fee_after_target_bps: int
    use_curve_price: bool = True
    lp_enabled: bool = True


@dataclass(frozen=True)
class OraclePrice:
    """Live price snapshot for one asset, on the pool's USD value scale."""

    buy_price: int
    sell_price: int
    avg_price: int
    is_live: bool = True


@dataclass(frozen=True)
class CurvePoint:
    """One price band: `amount` units of the asset trade at `price`."""

    amount: int
    price: int


@dataclass(frozen=True)
class PriceCurve:
    """Ordered price bands for one asset in one direction.

    Band widths are measured from the pool's target holding outward: the
    first band is the price for the first units traded past the target, the
    second for the units after those, and so on.
    """

    points: tuple[CurvePoint, ...] = ()

    def __post_init__(self) -> None:
        if len(self.points) > MAX_CURVE_POINTS:
            raise InvalidSnapshotError(
                f"Curve has {len(self.points)} points, max is {MAX_CURVE_POINTS}"
            )
        for point in self.points:
            if point.amount < 0 or point.price < 0:
                raise InvalidSnapshotError(f"Curve point must be non-negative: {point}")

    @property
    def thresholds(self) -> tuple[int, ...]:
        """Cumulative band edges (running sum of band widths)."""
        edges = []
        total = 0
        for point in self.points:
            total += point.amount
            edges.append(total)
        return tuple(edges)

    @classmethod
    def flat(cls) -> PriceCurve:
        """A curve with no bands: every unit trades at the oracle price."""
        return cls(points=())


@dataclass(frozen=True)
class AssetCurves:
    """Sell-side and buy-side curves for one asset."""

    sell: PriceCurve = field(default_factory=PriceCurve)
    buy: PriceCurve = field(default_factory=PriceCurve)


@dataclass(frozen=True)
class FeeRecipients:
    """Shares of collected fees paid out to external recipients.

    Each share is a percentage (base 100) of the total fee. Whatever is left
    after the three shares stays in the pool.
    """

    protocol_bps: int = 0
    host_bps: int = 0
    manager_bps: int = 0

    @property
    def total_bps(self) -> int:
        return self.protocol_bps + self.host_bps + self.manager_bps

    @property
    def is_valid(self) -> bool:
        """True if the explicit shares leave a non-negative pool residual."""
        return (
            min(self.protocol_bps, self.host_bps, self.manager_bps) >= 0
            and self.total_bps <= FEE_SHARE_BASE
        )


@dataclass(frozen=True)
class PoolComposition:
    """Current holdings and rebalancing parameters of the pool.

    Attributes:
        asset_ids: Held assets, as indices into the settings table
        amounts: Raw holding per held asset
        target_weights: Target value-weight per held asset (over weight_sum)
        weight_sum: Sum of target weights
        rebalance_threshold: Rebalance band in basis points
        lp_offset_threshold: Fraction of the rebalance band open to swaps,
            in basis points
        lp_disabled: Manager switch that disables all swaps
    """

    asset_ids: tuple[int, ...]
    amounts: tuple[int, ...]
    target_weights: tuple[int, ...]
    weight_sum: int
    rebalance_threshold: int
    lp_offset_threshold: int
    lp_disabled: bool = False

    def __post_init__(self) -> None:
        if not (len(self.asset_ids) == len(self.amounts) == len(self.target_weights)):
            raise InvalidSnapshotError(
                "Composition tables must align: "
                f"{len(self.asset_ids)} ids, {len(self.amounts)} amounts, "
                f"{len(self.target_weights)} weights"
            )

    def index_of(self, asset_id: int) -> int | None:
        """Position of an asset in the composition, or None if not held."""
        try:
            return self.asset_ids.index(asset_id)
        except ValueError:
            return None


@dataclass(frozen=True)
class PoolSnapshot:
    """Everything the engine needs to price a swap against one pool.

    Refreshed wholesale by the caller before a batch of quotes; the engine
    only reads it.
    """

    pool_id: str
    composition: PoolComposition
    assets: tuple[AssetSettings, ...]
    prices: tuple[OraclePrice, ...]
    curves: tuple[AssetCurves, ...]
    fee_recipients: FeeRecipients = field(default_factory=FeeRecipients)

    def __post_init__(self) -> None:
        if not (len(self.assets) == len(self.prices) == len(self.curves)):
            raise InvalidSnapshotError(
                "Asset tables must align: "
                f"{len(self.assets)} settings, {len(self.prices)} prices, "
                f"{len(self.curves)} curves"
            )
        for asset_id in self.composition.asset_ids:
            if not 0 <= asset_id < len(self.assets):
                raise InvalidSnapshotError(
                    f"Composition references asset {asset_id} missing from settings table"
                )

    def find_asset(self, mint: str) -> int | None:
        """Asset id for a mint, or None if the asset is not supported."""
        for asset_id, settings in enumerate(self.assets):
            if settings.mint == mint:
                return asset_id
        return None
