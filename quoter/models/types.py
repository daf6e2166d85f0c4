"""Shared type definitions for the snapshot and API models."""

from typing import Annotated, Any

from pydantic import BeforeValidator, Field

from quoter.constants import U64_MAX


def validate_u64(value: Any) -> int:
    """Validate that a value is a u64, given as int or decimal string.

    Args:
        value: Value to validate (string or int)

    Returns:
        The value as int

    Raises:
        ValueError: If value is not a non-negative integer within u64 range
    """
    if isinstance(value, bool):
        raise ValueError("U64 cannot be a boolean")

    if isinstance(value, str):
        try:
            value = int(value)
        except ValueError as err:
            raise ValueError(f"U64 must be a decimal integer string: '{value}'") from err

    if not isinstance(value, int):
        raise ValueError(f"U64 must be string or int, got {type(value).__name__}")

    if value < 0:
        raise ValueError(f"U64 cannot be negative: {value}")
    if value > U64_MAX:
        raise ValueError(f"U64 overflow: {value} > 2^64-1")

    return value


# 64-bit unsigned integer, accepted as int or decimal string
U64 = Annotated[
    int,
    BeforeValidator(validate_u64),
    Field(description="64-bit unsigned integer"),
]

# Basis points (or percent shares), small non-negative integers
Bps = Annotated[int, Field(ge=0, le=65_535)]
