"""
Interfaces for the currency payment demo.

Defines the payment and observer capabilities as abstract base classes.
"""

from abc import ABC, abstractmethod


# =============================================================================
# Payment Interface
# =============================================================================


class Payment(ABC):
    """Capability to accept an amount and report it as paid."""

    @abstractmethod
    def pay(self, amount: float) -> None:
        """
        Pay the given amount.

        Args:
            amount: Amount in the currency of the implementation.
        """
        ...


# =============================================================================
# Observer Interface
# =============================================================================


class PaymentObserver(ABC):
    """Capability notified after a payment has been made."""

    @abstractmethod
    def notify(self, amount: float) -> None:
        """
        Handle a completed payment.

        Args:
            amount: Amount as entered by the user.
        """
        ...
