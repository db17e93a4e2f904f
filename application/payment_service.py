"""
Payment Service - Console orchestration of a single payment.

Reads the currency and the amount, pays through the factory-built payment
and notifies the observers.
"""

import math
from typing import Callable, Iterable, Optional

from configs import (
    AMOUNT_PROMPT,
    CURRENCY_PROMPT,
    EXIT_OK,
    UNSUPPORTED_CURRENCY_MESSAGE,
)
from core.exceptions import InvalidAmountError
from core.interfaces import PaymentObserver
from domain.observers import PaymentLogger
from domain.payment_factory import create_payment
from event_system import PaymentEventPublisher
from loggers import logger


def parse_amount(raw: str) -> float:
    """
    Parse an amount typed on the console.

    Args:
        raw: Raw input line.

    Returns:
        The amount as a float. Negative and zero amounts are accepted.

    Raises:
        InvalidAmountError: If the input is not a finite decimal number.
    """
    try:
        text = raw.strip()
        # float() also takes digit separators, which the console does not
        amount = float(text) if "_" not in text else None
    except (AttributeError, ValueError):
        amount = None

    if amount is None or not math.isfinite(amount):
        raise InvalidAmountError(f"Invalid amount: {raw!r}", value=raw)
    return amount


class PaymentTerminal:
    """
    Console terminal accepting one payment per run.

    Attributes:
        read_line: Callable prompting for and returning one input line.
        write_line: Callable writing one output line.
    """

    def __init__(
        self,
        read_line: Callable[[str], str] = input,
        write_line: Callable[[str], None] = print,
        observers: Optional[Iterable[PaymentObserver]] = None,
    ) -> None:
        """
        Initialize the terminal.

        Args:
            read_line: Input function, receives the prompt.
            write_line: Output function for every line of the run, including
                the payment report and the default logger record.
            observers: Observers notified after the payment.
                Defaults to a single PaymentLogger.
        """
        self.read_line = read_line
        self.write_line = write_line
        self._observers = observers

    def _build_publisher(self) -> PaymentEventPublisher:
        publisher = PaymentEventPublisher()
        observers = self._observers
        if observers is None:
            observers = [PaymentLogger(self.write_line)]
        for observer in observers:
            publisher.attach(observer)
        return publisher

    def run(self) -> int:
        """
        Run one payment.

        Returns:
            Process exit code.

        Raises:
            InvalidAmountError: If the entered amount is not a number.
        """
        currency_code = self.read_line(CURRENCY_PROMPT)
        payment = create_payment(currency_code, self.write_line)

        if payment is None:
            self.write_line(UNSUPPORTED_CURRENCY_MESSAGE)
            return EXIT_OK

        amount = parse_amount(self.read_line(AMOUNT_PROMPT))
        logger.info(f"Paying {amount} with {type(payment).__name__}")
        payment.pay(amount)

        # Observers always receive the amount as entered, before conversion
        self._build_publisher().notify_observers(amount)
        return EXIT_OK
