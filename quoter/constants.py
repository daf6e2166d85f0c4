"""Protocol constants for the fund swap quoter.

Centralizes the fixed-point scales and protocol parameters shared by the
curve integrators, the fee splitter and the weight checks.
"""

# Integer widths of the on-chain program. Amounts and values are u64,
# intermediate products in mul_div are u128.
U64_MAX = 2**64 - 1
U128_MAX = 2**128 - 1

# Trading fee tiers and thresholds are expressed in basis points
BPS_DIVIDER = 10_000

# Target weights and projected weights share this scale
WEIGHT_MULTIPLIER = 10_000

# Protocol/host/manager fee shares are percentages of the collected fee,
# not basis points
FEE_SHARE_BASE = 100

# Fixed number of price points per curve (per asset, per direction)
MAX_CURVE_POINTS = 10

# Settings-table index of the base/reserve asset (used by the dust exception)
BASE_ASSET_ID = 0

# Extra units added to a trade before projecting post-trade weights
# (100 bps = 1%)
SAFETY_MARGIN_BPS = 100

# Raw fee rates are expressed in millionths of the fair output amount:
# raw / 100 is basis points, raw / 10_000 is percent
FEE_RATE_SCALE = BPS_DIVIDER * 100
