"""
Payment Adapters - Present any payment variant through the payment capability.

The adapter performs no conversion of its own; it forwards calls to the
wrapped payment unchanged.
"""

from core.interfaces import Payment
from loggers import logger


class PaymentAdapter(Payment):
    """
    Adapter over an existing payment implementation.

    Makes a foreign-currency payment usable anywhere a payment is expected
    without changes to the calling code.
    """

    def __init__(self, payment: Payment) -> None:
        """
        Initialize the adapter.

        Args:
            payment: The payment implementation to delegate to.
        """
        self._payment = payment

    @property
    def adaptee(self) -> Payment:
        """Get the wrapped payment."""
        return self._payment

    def pay(self, amount: float) -> None:
        """Delegate the payment to the wrapped implementation."""
        logger.debug(f"Adapter forwarding {amount} to {type(self._payment).__name__}")
        self._payment.pay(amount)
