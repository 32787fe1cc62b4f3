from __future__ import annotations

import logging

from coinvalue.domain.monetary.coin import CENT, Coin
from coinvalue.domain.monetary.errors import CoinError
from coinvalue.domain.monetary.network_registry import BITCOIN_MAIN
from coinvalue.format.coin_format import CoinFormat


logger = logging.getLogger(__name__)


def run() -> None:
    # Amounts typed in by a user go through the guarded constructor
    payment = Coin.value_of_human(12, 50)
    fee = CENT.multiply(3)

    # Raw unit counts (e.g. read from a transaction) are wrapped as they are
    balance = Coin.parse_coin("2500000000")

    # Spend payment plus fee
    remaining = balance.subtract(payment).subtract(fee)
    logger.info(f"Remaining balance: {remaining.to_friendly_string()} ({remaining} units)")

    # Split the payment between three recipients; the remainder stays with the sender
    share, change = payment.divide_and_remainder(Coin(3))
    logger.info(f"Each recipient gets {share.to_plain_string()}, change is {change.to_plain_string()}")

    # Render in millicoins
    millis = CoinFormat(shift=3)
    logger.info(f"Payment in millicoins: {payment.to_plain_string(millis)}")

    # Amounts above the maximum supply of the network are rejected
    try:
        Coin.value_of_human(21_000_001, 0, params=BITCOIN_MAIN)
    except CoinError as e:
        logger.info(f"Rejected amount: {e}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    run()
