"""Fixed-point conversion between raw token amounts and USD values.

Raw amounts are integers scaled by 10^decimals of their asset. USD values and
oracle prices are integers on the pool's value scale, so that

    value = amount * price / 10^decimals

All helpers follow the program's u64/u128 integer model: a multiply-divide is
computed in a 128-bit intermediate and the quotient must fit in 64 bits.
Degenerate inputs do not raise: a division by zero, an intermediate
overflow or a quotient that does not fit returns 0, and the zero surfaces
later as an empty quote leg or a weight rejection.
"""

from __future__ import annotations

from quoter.constants import U64_MAX, U128_MAX

__all__ = [
    "mul_div",
    "amount_to_value",
    "value_to_amount",
    "apply_bps",
    "saturating_sub",
]


def mul_div(a: int, b: int, c: int) -> int:
    """Compute floor(a * b / c), failing to zero.

    Args:
        a: First factor (non-negative)
        b: Second factor (non-negative)
        c: Divisor

    Returns:
        floor(a * b / c), or 0 if c is zero, if a * b does not fit in
        128 bits, or if the quotient does not fit in 64 bits.

    Examples:
        mul_div(10, 3, 4) == 7
        mul_div(10, 3, 0) == 0
    """
    if c == 0:
        return 0
    product = a * b
    if product < 0 or product > U128_MAX:
        return 0
    quotient = product // c
    if quotient < 0 or quotient > U64_MAX:
        return 0
    return quotient


def amount_to_value(amount: int, decimals: int, price: int) -> int:
    """Convert a raw token amount to a USD value at the given price."""
    return mul_div(amount, price, 10**decimals)


def value_to_amount(value: int, decimals: int, price: int) -> int:
    """Convert a USD value to a raw token amount at the given price.

    Inverse of amount_to_value up to rounding: converting an amount to a value
    and back may lose a few units, never gain.
    """
    return mul_div(value, 10**decimals, price)


def apply_bps(amount: int, bps: int, divider: int) -> int:
    """Inflate an amount by bps / divider, rounding down.

    apply_bps(x, 100, 10_000) == x * 101 // 100
    """
    return amount * (divider + bps) // divider


def saturating_sub(a: int, b: int) -> int:
    """Subtract, clamping the result to zero."""
    return a - b if a > b else 0
