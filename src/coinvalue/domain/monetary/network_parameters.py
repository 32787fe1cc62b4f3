from __future__ import annotations

import logging
from typing import Dict

logger = logging.getLogger(__name__)


class NetworkParameters:
    """Protocol scale constants of a coin network.

    Amounts are counted in indivisible units; these parameters say how many units make one
    whole coin and how many units can ever exist.

    Attributes:
        id (str): Network identifier (e.g., "org.dogecoin.production").
        code (str): Ticker of the coin (e.g., "DOGE", "BTC").
        coin_decimals (int): Number of decimal places in one whole coin (2-18).
        max_money_coins (int): Maximum money supply, in whole coins.
    """

    # Class-level registry for predefined networks
    _registry: Dict[str, "NetworkParameters"] = {}

    __slots__ = ("_id", "_code", "_coin_decimals", "_max_money_coins")

    def __init__(self, id: str, code: str, coin_decimals: int, max_money_coins: int):
        """Initialize a NetworkParameters instance.

        Args:
            id (str): Network identifier.
            code (str): Ticker of the coin.
            coin_decimals (int): Number of decimal places in one whole coin (2-18). At least
                two are needed so that one cent (1/100 coin) is a whole number of units.
            max_money_coins (int): Maximum money supply, in whole coins.

        Raises:
            ValueError: If parameters are invalid.
        """
        # Raise: $id must be a non-empty string
        if not isinstance(id, str) or not id.strip():
            raise ValueError(f"$id must be a non-empty string, but provided value is: '{id}'")

        # Raise: $code must be a non-empty string
        if not isinstance(code, str) or not code.strip():
            raise ValueError(f"$code must be a non-empty string, but provided value is: '{code}'")

        # Raise: $coin_decimals must allow a whole number of units per cent
        if not isinstance(coin_decimals, int) or isinstance(coin_decimals, bool) or coin_decimals < 2 or coin_decimals > 18:
            raise ValueError(f"$coin_decimals must be an integer between 2 and 18, but provided value is: {coin_decimals}")

        # Raise: $max_money_coins must be a positive integer
        if not isinstance(max_money_coins, int) or isinstance(max_money_coins, bool) or max_money_coins <= 0:
            raise ValueError(f"$max_money_coins must be a positive integer, but provided value is: {max_money_coins}")

        self._id = id.strip()
        self._code = code.upper().strip()
        self._coin_decimals = coin_decimals
        self._max_money_coins = max_money_coins

    @property
    def id(self) -> str:
        """Get the network identifier."""
        return self._id

    @property
    def code(self) -> str:
        """Get the coin ticker."""
        return self._code

    @property
    def coin_decimals(self) -> int:
        """Get the number of decimal places in one whole coin."""
        return self._coin_decimals

    @property
    def max_money_coins(self) -> int:
        """Get the maximum money supply in whole coins."""
        return self._max_money_coins

    @property
    def units_per_coin(self) -> int:
        """Number of indivisible units in one whole coin."""
        return 10**self._coin_decimals

    @property
    def units_per_cent(self) -> int:
        """Number of indivisible units in one hundredth of a coin."""
        return self.units_per_coin // 100

    @property
    def max_money(self) -> int:
        """Maximum money supply, in indivisible units."""
        return self._max_money_coins * self.units_per_coin

    @classmethod
    def register(cls, params: "NetworkParameters", overwrite: bool = False) -> None:
        """Register network parameters in the global registry.

        Args:
            params (NetworkParameters): The parameters to register.
            overwrite (bool): Whether to overwrite existing parameters with the same id.

        Raises:
            ValueError: If parameters with the same id already exist and overwrite is False.
            TypeError: If params is not a NetworkParameters instance.
        """
        if not isinstance(params, NetworkParameters):
            raise TypeError(f"$params must be a NetworkParameters instance, but provided value is: {params}")

        existing = cls._registry.get(params.id)
        if existing is not None:
            if not overwrite:
                raise ValueError(f"Network with id '{params.id}' already exists in registry. Use overwrite=True to replace it.")
            if existing != params:
                logger.warning(f"Replacing registered network '{params.id}': {existing!r} -> {params!r}")

        cls._registry[params.id] = params
        logger.debug(f"Registered network '{params.id}' ({params.code}, {params.coin_decimals} decimals)")

    @classmethod
    def from_id(cls, id: str) -> "NetworkParameters":
        """Get network parameters from registry by id.

        Args:
            id (str): Network identifier to look up.

        Returns:
            NetworkParameters: The registered instance.

        Raises:
            ValueError: If id is not found in registry.
        """
        if not isinstance(id, str):
            raise TypeError(f"$id must be a string, but provided value is: {id}")

        id = id.strip()
        if id not in cls._registry:
            raise ValueError(f"Network with id '{id}' not found in registry. Available networks: {list(cls._registry.keys())}")

        return cls._registry[id]

    def __eq__(self, other) -> bool:
        if not isinstance(other, NetworkParameters):
            return False
        return (self.id, self.code, self.coin_decimals, self.max_money_coins) == (other.id, other.code, other.coin_decimals, other.max_money_coins)

    def __hash__(self) -> int:
        return hash((self.id, self.code, self.coin_decimals, self.max_money_coins))

    def __str__(self) -> str:
        return self.id

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}('{self.id}', '{self.code}', {self.coin_decimals}, {self.max_money_coins})"
