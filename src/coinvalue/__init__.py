__version__ = "0.1.0"

from coinvalue.domain.monetary.coin import Coin
from coinvalue.domain.monetary.errors import (
    CoinError,
    DivisionByZeroError,
    InvalidComponentError,
    MalformedAmountError,
    SupplyExceededError,
)
from coinvalue.domain.monetary.network_parameters import NetworkParameters
from coinvalue.format.coin_format import CoinFormat
from coinvalue.format.protocol import DecimalFormatter

__all__ = [
    "Coin",
    "CoinError",
    "CoinFormat",
    "DecimalFormatter",
    "DivisionByZeroError",
    "InvalidComponentError",
    "MalformedAmountError",
    "NetworkParameters",
    "SupplyExceededError",
]
