from __future__ import annotations

from typing import SupportsIndex, TypeAlias

# Use where optimal type is `int`, but other integral types are also acceptable (and will be converted to `int`)
IntLike: TypeAlias = int | SupportsIndex

_LONG_BITS = 64
_LONG_MODULUS = 1 << _LONG_BITS
_LONG_MIN = -(1 << (_LONG_BITS - 1))


def as_int(value: IntLike) -> int:
    """Converts an integral input to `int` without losing precision.

    Floats and strings are rejected on purpose: a float may already carry rounding
    noise, and strings have their own parsing entry points.

    Args:
        value: Input value as `int` or any object implementing `__index__`.

    Returns:
        Value converted to `int`.

    Raises:
        TypeError: If $value is a `bool` or is not integral.
    """
    # Raise: `bool` is an `int` subclass, but True/False are never amounts
    if isinstance(value, bool):
        raise TypeError(f"$value must be an integer, but provided value is a bool: {value}")

    if isinstance(value, int):
        return int(value)

    if hasattr(value, "__index__"):
        return value.__index__()

    raise TypeError(f"$value must be an integer, but provided value is: {value!r} (type '{type(value).__name__}')")


def truncated_divmod(dividend: int, divisor: int) -> tuple[int, int]:
    """Divide rounding the quotient toward zero.

    Python's `divmod` floors toward negative infinity; this helper instead gives the
    remainder the sign of $dividend, so that `quotient * divisor + remainder == dividend`
    and `abs(remainder) < abs(divisor)`.

    Args:
        dividend: Integer to divide.
        divisor: Non-zero integer to divide by.

    Returns:
        Tuple of (quotient, remainder).

    Raises:
        ZeroDivisionError: If $divisor is zero.

    Examples:
        >>> truncated_divmod(7, 2)
        (3, 1)
        >>> truncated_divmod(-7, 2)
        (-3, -1)
        >>> divmod(-7, 2)
        (-4, 1)
    """
    quotient = abs(dividend) // abs(divisor)
    if (dividend < 0) != (divisor < 0):
        quotient = -quotient
    return quotient, dividend - quotient * divisor


def to_signed_64(value: int) -> int:
    """Keep the low-order 64 bits of $value, read as a signed two's-complement number.

    Values outside [-2**63, 2**63) wrap around silently.
    """
    return ((value - _LONG_MIN) % _LONG_MODULUS) + _LONG_MIN


def int_to_twos_complement(value: int) -> bytes:
    """Encode $value as minimal big-endian two's-complement bytes (at least one byte)."""
    # One extra bit for the sign; negative values need one bit less than their magnitude
    length = (value + (value < 0)).bit_length() // 8 + 1
    return value.to_bytes(length, "big", signed=True)


def int_from_twos_complement(data: bytes) -> int:
    """Decode big-endian two's-complement bytes into `int`.

    Raises:
        ValueError: If $data is empty.
    """
    if len(data) == 0:
        raise ValueError("$data cannot be empty")
    return int.from_bytes(data, "big", signed=True)
