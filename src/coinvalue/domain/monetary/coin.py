from __future__ import annotations

import re
from functools import lru_cache
from typing import ClassVar, TYPE_CHECKING

from coinvalue.domain.monetary.errors import (
    DivisionByZeroError,
    InvalidComponentError,
    MalformedAmountError,
    SupplyExceededError,
)
from coinvalue.domain.monetary.network_parameters import NetworkParameters
from coinvalue.domain.monetary.network_registry import DEFAULT_NETWORK
from coinvalue.format.protocol import FRIENDLY, PLAIN, FormatStyle
from coinvalue.utils.numeric_tools import (
    IntLike,
    as_int,
    int_from_twos_complement,
    int_to_twos_complement,
    to_signed_64,
    truncated_divmod,
)

if TYPE_CHECKING:
    from coinvalue.format.protocol import DecimalFormatter

_DECIMAL_INTEGER = re.compile(r"-?[0-9]+")
_RADIX_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"


class Coin:
    """Represents an exact monetary amount, counted in indivisible units. This class is immutable.

    The amount is a Python `int`, so arithmetic never overflows and never drifts the way
    floating-point values do. Results may be negative (a debit, or a subtraction that went
    below zero); callers needing non-negative amounts must check explicitly.

    Only `value_of_human` validates the range of an amount. Every other entry point wraps the
    raw unit count as given.

    Examples:
        >>> Coin.value_of_human(1, 50)
        Coin(150000000)
        >>> Coin(150_000).to_plain_string()
        '0.0015'
        >>> Coin(100).divide_and_remainder(Coin(3))
        (Coin(33), Coin(1))
    """

    # Constants, assigned below the class body
    ZERO: ClassVar[Coin]
    ONE: ClassVar[Coin]
    SATOSHI: ClassVar[Coin]
    TEN: ClassVar[Coin]
    NEGATIVE_SATOSHI: ClassVar[Coin]
    COIN: ClassVar[Coin]
    CENT: ClassVar[Coin]
    FIFTY_COINS: ClassVar[Coin]
    MILLICOIN: ClassVar[Coin]
    MICROCOIN: ClassVar[Coin]
    NUM_COIN_DECIMALS: ClassVar[int]

    __slots__ = ("_value",)

    def __init__(self, value: IntLike):
        """Initialize Coin with an exact number of indivisible units.

        Args:
            value: Number of units; any integer, including negative ones.

        Raises:
            TypeError: If $value is not an integer (floats and bools are rejected).
        """
        object.__setattr__(self, "_value", as_int(value))

    # region Construction

    @classmethod
    def value_of(cls, value: IntLike) -> Coin:
        """Wrap $value units without any range check."""
        return cls(value)

    @classmethod
    def value_of_human(cls, coins: IntLike, cents: IntLike, params: NetworkParameters = DEFAULT_NETWORK) -> Coin:
        """Convert an amount expressed the way humans are used to into units.

        This is the guarded entry point for untrusted input: both components and the resulting
        amount are validated.

        Args:
            coins: Whole coins, must be >= 0.
            cents: Hundredths of a coin, must be in [0, 100).
            params: Network defining units per coin and the maximum money supply.

        Returns:
            Coin: `coins * units_per_coin + cents * units_per_cent` units.

        Raises:
            InvalidComponentError: If $cents is outside [0, 100) or $coins is negative.
            SupplyExceededError: If the result is above $params.max_money.
        """
        # Raise: $params must be NetworkParameters to know the scale and the supply limit
        if not isinstance(params, NetworkParameters):
            raise TypeError(f"Cannot call `value_of_human` because $params is not NetworkParameters (got type '{type(params).__name__}')")

        coins = as_int(coins)
        cents = as_int(cents)

        # Raise: cents must be a hundredth of a coin
        if not 0 <= cents < 100:
            raise InvalidComponentError(f"Cannot call `value_of_human` because $cents ({cents}) is not in [0, 100)")

        # Raise: whole coins cannot be negative
        if coins < 0:
            raise InvalidComponentError(f"Cannot call `value_of_human` because $coins ({coins}) is negative")

        value = coins * params.units_per_coin + cents * params.units_per_cent

        # Raise: never build more money than can exist
        if value > params.max_money:
            raise SupplyExceededError(value, params.max_money)

        return cls(value)

    @classmethod
    def parse_coin(cls, text: str) -> Coin:
        """Parse a base-10 integer count of units, like "150000" or "-1".

        Args:
            text: Text matching `[-]digit+`; no decimal point, sign "+", spaces or separators.

        Returns:
            Coin: The parsed amount.

        Raises:
            MalformedAmountError: If $text is not a signed decimal integer.
        """
        if not isinstance(text, str):
            raise TypeError(f"Cannot call `parse_coin` because $text is not str (got type '{type(text).__name__}')")

        if _DECIMAL_INTEGER.fullmatch(text) is None:
            raise MalformedAmountError(text, "expected a base-10 integer count of units")

        return cls(int(text))

    @classmethod
    def from_string(cls, text: str, radix: int) -> Coin:
        """Parse a signed integer count of units written in $radix.

        Args:
            text: Text matching `[-]digit+`, where digits are valid for $radix (case-insensitive).
            radix: Base between 2 and 36.

        Returns:
            Coin: The parsed amount.

        Raises:
            ValueError: If $radix is outside [2, 36].
            MalformedAmountError: If $text is not a signed integer in $radix.
        """
        # Raise: radix must be a base Python can parse
        if not isinstance(radix, int) or isinstance(radix, bool) or not 2 <= radix <= 36:
            raise ValueError(f"Cannot call `from_string` because $radix ({radix}) is not in [2, 36]")

        if not isinstance(text, str):
            raise TypeError(f"Cannot call `from_string` because $text is not str (got type '{type(text).__name__}')")

        pattern = rf"-?[{_RADIX_DIGITS[:radix]}]+"
        if re.fullmatch(pattern, text, flags=re.IGNORECASE) is None:
            raise MalformedAmountError(text, f"expected a base-{radix} integer count of units")

        return cls(int(text, radix))

    @classmethod
    def from_bytes(cls, data: bytes) -> Coin:
        """Read units from big-endian two's-complement bytes, as written by `to_byte_array`.

        Raises:
            MalformedAmountError: If $data is empty.
        """
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise TypeError(f"Cannot call `from_bytes` because $data is not bytes (got type '{type(data).__name__}')")

        try:
            value = int_from_twos_complement(bytes(data))
        except ValueError as e:
            raise MalformedAmountError(data, "no bytes") from e
        return cls(value)

    # endregion

    # region Arithmetic

    def add(self, value: Coin) -> Coin:
        return Coin(self._value + _require_coin(value, "add")._value)

    def subtract(self, value: Coin) -> Coin:
        return Coin(self._value - _require_coin(value, "subtract")._value)

    def multiply(self, value: Coin | IntLike) -> Coin:
        """Multiply by another amount or by an integer factor.

        Multiplying two amounts is a raw-integer operation (its unit is units squared); no
        dimensional check is done.
        """
        factor = value._value if isinstance(value, Coin) else as_int(value)
        return Coin(self._value * factor)

    def divide(self, value: Coin) -> Coin:
        """Divide by $value, truncating the quotient toward zero.

        Raises:
            DivisionByZeroError: If $value is zero.
        """
        return self.divide_and_remainder(value)[0]

    def divide_and_remainder(self, value: Coin) -> tuple[Coin, Coin]:
        """Divide by $value, returning the truncated quotient and the remainder.

        The remainder takes the sign of this amount, so that
        `quotient.multiply(value).add(remainder) == self` always holds.

        Raises:
            DivisionByZeroError: If $value is zero.
        """
        divisor = _require_coin(value, "divide_and_remainder")._value

        # Raise: there is no fallback quotient for a zero divisor
        if divisor == 0:
            raise DivisionByZeroError(f"Cannot divide {self} by zero")

        quotient, remainder = truncated_divmod(self._value, divisor)
        return Coin(quotient), Coin(remainder)

    def shift_left(self, n: int) -> Coin:
        """Multiply by 2 ** $n."""
        return Coin(self._value << _require_shift(n, "shift_left"))

    def shift_right(self, n: int) -> Coin:
        """Divide by 2 ** $n, rounding toward negative infinity.

        This is an arithmetic shift: `Coin(-3).shift_right(1)` is `Coin(-2)`, while
        `Coin(-3).divide(Coin(2))` is `Coin(-1)`.
        """
        return Coin(self._value >> _require_shift(n, "shift_right"))

    def negate(self) -> Coin:
        return Coin(-self._value)

    # endregion

    # region Predicates

    def signum(self) -> int:
        """Return -1, 0 or 1 following the sign of this amount."""
        return (self._value > 0) - (self._value < 0)

    def is_positive(self) -> bool:
        """Returns True if and only if this amount is greater than zero."""
        return self.signum() == 1

    def is_negative(self) -> bool:
        """Returns True if and only if this amount is less than zero."""
        return self.signum() == -1

    def is_zero(self) -> bool:
        """Returns True if and only if this amount is zero."""
        return self.signum() == 0

    def compare_to(self, other: Coin) -> int:
        """Return -1, 0 or 1 as this amount is less than, equal to or greater than $other."""
        other_value = _require_coin(other, "compare_to")._value
        return (self._value > other_value) - (self._value < other_value)

    def is_greater_than(self, other: Coin) -> bool:
        return self.compare_to(other) > 0

    def is_less_than(self, other: Coin) -> bool:
        return self.compare_to(other) < 0

    # endregion

    # region Conversion

    @property
    def value(self) -> int:
        """Get the exact number of indivisible units."""
        return self._value

    def to_int(self) -> int:
        """Return the exact number of indivisible units."""
        return self._value

    def long_value(self) -> int:
        """Return the units as a signed 64-bit machine integer.

        Only the low-order 64 bits are kept: values outside [-2**63, 2**63) wrap around
        silently. Every amount within the maximum supply of the predefined networks fits.
        """
        return to_signed_64(self._value)

    def to_byte_array(self) -> bytes:
        """Return the units as minimal big-endian two's-complement bytes."""
        return int_to_twos_complement(self._value)

    def to_friendly_string(self, formatter: DecimalFormatter | None = None) -> str:
        """Returns the value as a "0.12" type string.

        More digits after the decimal mark are used if necessary (up to 8), but two are
        always present.
        """
        return self._format(FRIENDLY, formatter)

    def to_plain_string(self, formatter: DecimalFormatter | None = None) -> str:
        """Returns the value as a plain decimal string in whole coins, with no trailing zeros.

        For instance, a value of 150000 units gives "0.0015".
        """
        return self._format(PLAIN, formatter)

    def _format(self, style: FormatStyle, formatter: DecimalFormatter | None) -> str:
        if formatter is None:
            formatter = _default_formatter()
        return formatter.format(self, style.min_decimals, style.max_extra_decimals)

    # endregion

    # region Protocols

    def __setattr__(self, name, value):
        raise AttributeError(f"Cannot set attribute '{name}' because {self.__class__.__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"Cannot delete attribute '{name}' because {self.__class__.__name__} is immutable")

    def __reduce__(self):
        return (self.__class__, (self._value,))

    # Comparison operators (agree with `compare_to`)
    def __eq__(self, other) -> bool:
        """Check exact equality with another Coin."""
        if not isinstance(other, Coin):
            return False
        return self._value == other._value

    def __hash__(self) -> int:
        """Hash based on the unit count, so equal amounts hash equally."""
        return hash(self._value)

    def __lt__(self, other) -> bool:
        if not isinstance(other, Coin):
            return NotImplemented
        return self._value < other._value

    def __le__(self, other) -> bool:
        if not isinstance(other, Coin):
            return NotImplemented
        return self._value <= other._value

    def __gt__(self, other) -> bool:
        if not isinstance(other, Coin):
            return NotImplemented
        return self._value > other._value

    def __ge__(self, other) -> bool:
        if not isinstance(other, Coin):
            return NotImplemented
        return self._value >= other._value

    # Arithmetic operators
    def __add__(self, other):
        """Add two Coin objects."""
        if not isinstance(other, Coin):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        """Subtract two Coin objects."""
        if not isinstance(other, Coin):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other):
        """Multiply by a Coin or an integer factor."""
        try:
            return self.multiply(other)
        except TypeError:
            return NotImplemented

    def __rmul__(self, other):
        """Right multiplication: integer * Coin."""
        return self.__mul__(other)

    def __lshift__(self, n):
        if not isinstance(n, int) or isinstance(n, bool):
            return NotImplemented
        return self.shift_left(n)

    def __rshift__(self, n):
        if not isinstance(n, int) or isinstance(n, bool):
            return NotImplemented
        return self.shift_right(n)

    def __neg__(self):
        return self.negate()

    def __pos__(self):
        return self

    def __abs__(self):
        return self.negate() if self.is_negative() else self

    def __bool__(self) -> bool:
        return not self.is_zero()

    def __int__(self) -> int:
        return self._value

    def __index__(self) -> int:
        return self._value

    # String representations
    def __str__(self) -> str:
        """Return the unit count, like '150000'."""
        return str(self._value)

    def __repr__(self) -> str:
        """Return string like 'Coin(150000)'."""
        return f"{self.__class__.__name__}({self._value})"

    # endregion


def _require_coin(value: object, method: str) -> Coin:
    # Raise: arithmetic and comparison are only defined between amounts
    if not isinstance(value, Coin):
        raise TypeError(f"Cannot call `{method}` because $value is not Coin (got type '{type(value).__name__}')")
    return value


def _require_shift(n: object, method: str) -> int:
    # Raise: shift distance must be a non-negative int
    if not isinstance(n, int) or isinstance(n, bool) or n < 0:
        raise ValueError(f"Cannot call `{method}` because $n ({n!r}) is not a non-negative integer")
    return n


@lru_cache(maxsize=None)
def _default_formatter() -> DecimalFormatter:
    # Imported here because `coin_format` builds on `Coin`
    from coinvalue.format.coin_format import CoinFormat

    return CoinFormat(DEFAULT_NETWORK)


# region Constants

NUM_COIN_DECIMALS = DEFAULT_NETWORK.coin_decimals

ZERO = Coin(0)
ONE = Coin(1)
SATOSHI = ONE
TEN = Coin(10)
NEGATIVE_SATOSHI = Coin(-1)
COIN = Coin(DEFAULT_NETWORK.units_per_coin)
CENT = Coin(DEFAULT_NETWORK.units_per_cent)
FIFTY_COINS = COIN.multiply(50)

# 0.001 coins, also known as 1 milli-coin
MILLICOIN = COIN.divide(Coin(1000))

# 0.000001 coins, also known as 1 micro-coin
MICROCOIN = MILLICOIN.divide(Coin(1000))

Coin.NUM_COIN_DECIMALS = NUM_COIN_DECIMALS
Coin.ZERO = ZERO
Coin.ONE = ONE
Coin.SATOSHI = SATOSHI
Coin.TEN = TEN
Coin.NEGATIVE_SATOSHI = NEGATIVE_SATOSHI
Coin.COIN = COIN
Coin.CENT = CENT
Coin.FIFTY_COINS = FIFTY_COINS
Coin.MILLICOIN = MILLICOIN
Coin.MICROCOIN = MICROCOIN

# endregion
