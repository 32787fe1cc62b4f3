from __future__ import annotations

from coinvalue.domain.monetary.coin import Coin
from coinvalue.domain.monetary.errors import MalformedAmountError
from coinvalue.format.protocol import DecimalFormatter


class RecordingFormatter(DecimalFormatter):
    """Stub DecimalFormatter that records every call and renders its arguments verbatim.

    `format` returns text like "150000|2|6" (units, min decimals, max extra decimals), so tests
    can see exactly what an amount delegated.
    """

    def __init__(self) -> None:
        self.calls: list[tuple[Coin, int, int]] = []

    def format(self, amount: Coin, min_decimals: int, max_extra_decimals: int) -> str:
        self.calls.append((amount, min_decimals, max_extra_decimals))
        return f"{amount.value}|{min_decimals}|{max_extra_decimals}"

    def parse(self, text: str) -> Coin:
        units, _, _ = text.partition("|")
        try:
            return Coin(int(units))
        except ValueError as e:
            raise MalformedAmountError(text) from e
