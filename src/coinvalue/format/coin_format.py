from __future__ import annotations

import logging
import re

from coinvalue.domain.monetary.coin import Coin
from coinvalue.domain.monetary.errors import MalformedAmountError
from coinvalue.domain.monetary.network_parameters import NetworkParameters
from coinvalue.domain.monetary.network_registry import DEFAULT_NETWORK

from .protocol import DecimalFormatter

logger = logging.getLogger(__name__)


class CoinFormat(DecimalFormatter):
    """Default decimal formatter for coin amounts.

    Amounts are rendered in a denomination selected by $shift: 0 for whole coins, 3 for
    millicoins and 6 for microcoins. Digits beyond the requested precision are rounded half-up
    (away from zero), and a rendering never shows more precision than the network has.

    Args:
        params: Network whose scale constants define one whole coin.
        shift: Decimal places the denomination is shifted from whole coins (0, 3 or 6).
        decimal_mark: Character separating whole and fractional digits.
        negative_sign: Text prefixed to negative amounts.

    Examples:
        >>> fmt = CoinFormat()
        >>> fmt.format(Coin(150_000_000), 2, 6)
        '1.50'
        >>> fmt.with_shift(3).format(Coin(150_000), 0, 8)
        '1.5'
    """

    SUPPORTED_SHIFTS = (0, 3, 6)

    __slots__ = ("_params", "_shift", "_decimal_mark", "_negative_sign", "_pattern")

    def __init__(
        self,
        params: NetworkParameters = DEFAULT_NETWORK,
        shift: int = 0,
        decimal_mark: str = ".",
        negative_sign: str = "-",
    ) -> None:
        # Raise: $params must be NetworkParameters to know the scale of one coin
        if not isinstance(params, NetworkParameters):
            raise TypeError(f"Cannot call `CoinFormat.__init__` because $params is not NetworkParameters (got type '{type(params).__name__}')")

        # Raise: $shift must select a known denomination that the network can express
        if not isinstance(shift, int) or shift not in self.SUPPORTED_SHIFTS or shift > params.coin_decimals:
            raise ValueError(f"Cannot call `CoinFormat.__init__` because $shift ({shift}) is not one of {self.SUPPORTED_SHIFTS} within {params.coin_decimals} decimals")

        # Raise: $decimal_mark must be a single non-digit character
        if not isinstance(decimal_mark, str) or len(decimal_mark) != 1 or decimal_mark.isdigit():
            raise ValueError(f"Cannot call `CoinFormat.__init__` because $decimal_mark ('{decimal_mark}') is not a single non-digit character")

        # Raise: $negative_sign must be non-empty, distinct from $decimal_mark and from the positive sign "+"
        if not isinstance(negative_sign, str) or not negative_sign or negative_sign in (decimal_mark, "+") or any(ch.isdigit() for ch in negative_sign):
            raise ValueError(f"Cannot call `CoinFormat.__init__` because $negative_sign ('{negative_sign}') is empty, contains digits, or equals $decimal_mark or '+'")

        self._params = params
        self._shift = shift
        self._decimal_mark = decimal_mark
        self._negative_sign = negative_sign
        self._pattern = re.compile(
            rf"(?P<sign>{re.escape(negative_sign)}|\+)?(?P<whole>[0-9]*)(?:{re.escape(decimal_mark)}(?P<fraction>[0-9]*))?",
        )

        logger.debug(f"Created {self!r}")

    # region Properties

    @property
    def params(self) -> NetworkParameters:
        """Get the network whose scale this formatter uses."""
        return self._params

    @property
    def shift(self) -> int:
        """Get the denomination shift."""
        return self._shift

    @property
    def decimal_mark(self) -> str:
        return self._decimal_mark

    @property
    def negative_sign(self) -> str:
        return self._negative_sign

    @property
    def scale(self) -> int:
        """Number of fractional digits needed to express one unit in this denomination."""
        return self._params.coin_decimals - self._shift

    # endregion

    def with_shift(self, shift: int) -> CoinFormat:
        """Return a copy of this formatter rendering in another denomination."""
        return self.__class__(self._params, shift, self._decimal_mark, self._negative_sign)

    def format(self, amount: Coin, min_decimals: int, max_extra_decimals: int) -> str:
        """Implements: DecimalFormatter.format

        Render $amount with at least $min_decimals and at most $min_decimals +
        $max_extra_decimals fractional digits. Trailing zeros beyond $min_decimals are removed.

        Args:
            amount: The amount to render.
            min_decimals: Fractional digits always shown.
            max_extra_decimals: Further fractional digits shown only when non-zero.

        Returns:
            Decimal text, e.g. "1.50" or "-0.0015".

        Raises:
            TypeError: If $amount is not Coin.
            ValueError: If $min_decimals or $max_extra_decimals is negative.
        """
        # Raise: only Coin amounts can be formatted
        if not isinstance(amount, Coin):
            raise TypeError(f"Cannot call `format` because $amount is not Coin (got type '{type(amount).__name__}')")

        # Raise: digit counts must not be negative
        if min_decimals < 0 or max_extra_decimals < 0:
            raise ValueError(f"Cannot call `format` because $min_decimals ({min_decimals}) or $max_extra_decimals ({max_extra_decimals}) is negative")

        scale = self.scale
        max_decimals = min_decimals + max_extra_decimals
        magnitude = abs(amount.value)

        # Round half-up when the network has more precision than we may show
        if max_decimals < scale:
            factor = 10 ** (scale - max_decimals)
            magnitude, dropped = divmod(magnitude, factor)
            if dropped * 2 >= factor:
                magnitude += 1
            fraction_digits = max_decimals
        else:
            fraction_digits = scale

        whole, fraction = divmod(magnitude, 10**fraction_digits)
        fraction_text = str(fraction).zfill(fraction_digits) if fraction_digits > 0 else ""
        fraction_text = fraction_text.ljust(min_decimals, "0")

        # Strip trailing zeros down to the guaranteed minimum
        keep = len(fraction_text)
        while keep > min_decimals and fraction_text[keep - 1] == "0":
            keep -= 1
        fraction_text = fraction_text[:keep]

        text = str(whole)
        if fraction_text:
            text += self._decimal_mark + fraction_text
        if amount.value < 0 and magnitude != 0:
            text = self._negative_sign + text
        return text

    def parse(self, text: str) -> Coin:
        """Implements: DecimalFormatter.parse

        Read decimal text such as "1.50", "-0.0015", "+12" or ".5" in this formatter's
        denomination.

        Args:
            text: Decimal text to read.

        Returns:
            Coin: The exact amount.

        Raises:
            MalformedAmountError: If $text is not a decimal number, or has more fractional digits
                than the denomination can represent.
        """
        if not isinstance(text, str):
            raise TypeError(f"Cannot call `parse` because $text is not str (got type '{type(text).__name__}')")

        match = self._pattern.fullmatch(text)
        if match is None:
            raise MalformedAmountError(text, "expected digits with an optional sign and decimal mark")

        whole = match.group("whole")
        fraction = match.group("fraction") or ""

        # Raise: at least one digit is required (rejects "", "-" and ".")
        if not whole and not fraction:
            raise MalformedAmountError(text, "no digits")

        # Raise: sub-unit precision cannot be represented
        scale = self.scale
        if len(fraction) > scale:
            raise MalformedAmountError(text, f"more than {scale} fractional digits")

        value = int(whole or "0") * 10**scale + int(fraction.ljust(scale, "0") or "0")
        if match.group("sign") == self._negative_sign:
            value = -value
        return Coin(value)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._params.id!r}, shift={self._shift}, decimal_mark={self._decimal_mark!r}, negative_sign={self._negative_sign!r})"
