from __future__ import annotations

from typing import NamedTuple, Protocol, TYPE_CHECKING

if TYPE_CHECKING:
    from coinvalue.domain.monetary.coin import Coin


# region Configuration


class FormatStyle(NamedTuple):
    """Number of fractional digits a formatter should render.

    Attributes:
        min_decimals: Fractional digits always shown, padded with zeros when needed.
        max_extra_decimals: Further fractional digits shown only when they are not
            trailing zeros.
    """

    min_decimals: int
    max_extra_decimals: int


# Human-oriented: "1.50", "0.0015", "12.00"
FRIENDLY = FormatStyle(min_decimals=2, max_extra_decimals=6)

# Shortest exact decimal: "1.5", "0.0015", "12"
PLAIN = FormatStyle(min_decimals=0, max_extra_decimals=8)


# endregion

# region Interface


class DecimalFormatter(Protocol):
    """Renders amounts as human-readable decimal text and reads them back.

    Implementations must hold only construction-time configuration, so one instance can be
    shared between threads.
    """

    def format(self, amount: Coin, min_decimals: int, max_extra_decimals: int) -> str:
        """Render $amount as decimal text.

        Args:
            amount: The amount to render.
            min_decimals: Fractional digits always shown.
            max_extra_decimals: Further fractional digits shown only when non-zero.

        Returns:
            Decimal text such as "1.50".
        """
        ...

    def parse(self, text: str) -> Coin:
        """Read decimal text produced by `format` back into an amount.

        Raises:
            MalformedAmountError: If $text is not a decimal amount this formatter can represent.
        """
        ...


# endregion
