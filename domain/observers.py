"""
Payment Observers - Reactions to a completed payment.
"""

from typing import Callable

from configs import PAYMENT_RECORDED_TEMPLATE
from core.interfaces import PaymentObserver
from loggers import logger


class PaymentLogger(PaymentObserver):
    """
    Observer that records the payment on the console.

    The amount is reported as received, i.e. the amount entered by the
    user before any currency conversion.
    """

    def __init__(self, write_line: Callable[[str], None] = print) -> None:
        self._write_line = write_line

    def notify(self, amount: float) -> None:
        logger.info(f"Recording payment of {amount}")
        self._write_line(PAYMENT_RECORDED_TEMPLATE.format(amount=amount))
