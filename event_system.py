"""
Event system for the currency payment demo.

This module provides the observer registry that fans a completed payment
out to every attached observer.
"""

from core.interfaces import PaymentObserver
from loggers import logger


class PaymentEventPublisher:
    """
    Publisher for completed payments.

    Observers are notified synchronously, in the order they were attached.

    Attributes:
        observers: Snapshot of the attached observers.
    """

    def __init__(self) -> None:
        """Initialize the publisher with no observers."""
        self._observers: list[PaymentObserver] = []

    @property
    def observers(self) -> tuple[PaymentObserver, ...]:
        """Get the attached observers."""
        return tuple(self._observers)

    def __len__(self) -> int:
        return len(self._observers)

    def attach(self, observer: PaymentObserver) -> None:
        """
        Attach an observer.

        Args:
            observer: The observer to notify on payments.
        """
        self._observers.append(observer)

    def detach(self, observer: PaymentObserver) -> None:
        """
        Detach an observer.

        Args:
            observer: The observer to remove. Unknown observers are ignored.
        """
        try:
            self._observers.remove(observer)
        except ValueError:
            pass

    def notify_observers(self, amount: float) -> None:
        """
        Notify every attached observer of a payment.

        Args:
            amount: Amount as entered by the user.
        """
        logger.debug(f"Notifying {len(self._observers)} observer(s) of {amount}")
        for observer in self._observers:
            observer.notify(amount)
