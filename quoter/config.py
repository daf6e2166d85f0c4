"""Quote engine configuration."""

from dataclasses import dataclass

from quoter.constants import BASE_ASSET_ID, SAFETY_MARGIN_BPS, WEIGHT_MULTIPLIER


@dataclass(frozen=True)
class QuoteConfig:
    """Centralized configuration for quote computation.

    Holds the protocol parameters that are fixed per deployment, so tests can
    run the engine with different guardrails without patching constants.

    Attributes:
        safety_margin_bps: Inflation applied to sold and bought amounts before
            projecting post-trade weights (default: 100 = 1%)
        base_asset_id: Settings-table id of the reserve asset that may be
            sold to clear out zero-weight positions (default: 0)
        weight_multiplier: Scale of target and projected weights
            (default: 10,000)
    """

    safety_margin_bps: int = SAFETY_MARGIN_BPS
    base_asset_id: int = BASE_ASSET_ID
    weight_multiplier: int = WEIGHT_MULTIPLIER


# Default configuration instance
DEFAULT_QUOTE_CONFIG = QuoteConfig()
