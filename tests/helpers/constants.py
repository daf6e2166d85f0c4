"""Asset constants for tests.

Prices are on a 6-decimal USD value scale: 1_000_000 is $1.00.
"""

# Mints (Solana mainnet)
USDC = "EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v"
SOL = "So11111111111111111111111111111111111111112"
MSOL = "mSoLzYCxHdYgdzU16g5QSh3i5K3z3KZK7ytfqcJm7So"
USDT = "Es9vMFrzaCERmJfrF4H2FYD4KCoNkY11McCe8BenwNYB"

# Settings-table ids of the default asset table
USDC_ID = 0
SOL_ID = 1
MSOL_ID = 2
USDT_ID = 3

ASSET_DECIMALS = {
    USDC: 6,
    SOL: 9,
    MSOL: 9,
    USDT: 6,
}

ONE_DOLLAR = 1_000_000

ASSET_PRICES = {
    USDC: ONE_DOLLAR,
    SOL: 20 * ONE_DOLLAR,
    MSOL: 22 * ONE_DOLLAR,
    USDT: ONE_DOLLAR,
}

# Whole-token multipliers
ONE_USDC = 10**6
ONE_SOL = 10**9
ONE_MSOL = 10**9
ONE_USDT = 10**6
