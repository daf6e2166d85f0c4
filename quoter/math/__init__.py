"""Mathematical utilities for the quoter.

This package provides the integer primitives used by every pricing step:
- mul_div: guarded 128-bit multiply-divide that fails to zero
- amount_to_value / value_to_amount: raw amount <-> USD value conversion
"""

from quoter.math.fixed_point import (
    amount_to_value,
    apply_bps,
    mul_div,
    saturating_sub,
    value_to_amount,
)

__all__ = [
    "mul_div",
    "amount_to_value",
    "value_to_amount",
    "apply_bps",
    "saturating_sub",
]
