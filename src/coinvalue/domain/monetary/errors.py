"""Errors raised by monetary amounts and their formatters."""

from __future__ import annotations


class CoinError(Exception):
    """Base class for all errors raised while building or operating on coin amounts."""


class MalformedAmountError(CoinError, ValueError):
    """Raised when text cannot be read as an amount."""

    def __init__(self, text: object, reason: str | None = None):
        self.text = text
        self.reason = reason

        message = f"Cannot parse amount from $text ({text!r})"
        if reason:
            message += f" - {reason}"

        super().__init__(message)


class InvalidComponentError(CoinError, ValueError):
    """Raised when a whole-coin or cent component of a human amount is out of range."""


class SupplyExceededError(CoinError, ValueError):
    """Raised when a human amount would exceed the maximum money supply of the network."""

    def __init__(self, value: int, max_money: int):
        self.value = value
        self.max_money = max_money
        super().__init__(f"Amount $value ({value}) exceeds the maximum money supply $max_money ({max_money})")


class DivisionByZeroError(CoinError, ZeroDivisionError):
    """Raised when an amount is divided by a zero amount."""
