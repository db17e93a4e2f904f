"""
Payment variants - Concrete implementations of the payment capability.

Each variant reports the paid amount in tenge through its output writer.
"""

from typing import Callable

from configs import DOLLAR_PAID_TEMPLATE, DOLLAR_TO_TENGE_RATE, TENGE_PAID_TEMPLATE
from core.interfaces import Payment
from loggers import logger


class TengePayment(Payment):
    """Payment in tenge, reported without conversion."""

    def __init__(self, write_line: Callable[[str], None] = print) -> None:
        self._write_line = write_line

    def pay(self, amount: float) -> None:
        logger.debug(f"Tenge payment: {amount}")
        self._write_line(TENGE_PAID_TEMPLATE.format(amount=amount))


class DollarPayment(Payment):
    """
    Payment in dollars.

    The amount is converted to tenge at the fixed rate before it is
    reported, together with the accepted dollar amount.
    """

    def __init__(self, write_line: Callable[[str], None] = print) -> None:
        """
        Initialize the payment.

        Args:
            write_line: Output function for the payment report.
        """
        self._write_line = write_line

    @staticmethod
    def convert(amount: float) -> float:
        """
        Convert a dollar amount to tenge.

        Args:
            amount: Amount in dollars.

        Returns:
            Amount in tenge.
        """
        return amount * DOLLAR_TO_TENGE_RATE

    def pay(self, amount: float) -> None:
        converted = self.convert(amount)
        logger.debug(f"Dollar payment: {amount} -> {converted} tenge")
        self._write_line(DOLLAR_PAID_TEMPLATE.format(converted=converted, amount=amount))
