"""
Core module - Foundation layer.

Contains:
- Exceptions
- Interfaces (abstract capabilities)
- Value Objects
"""

from .exceptions import (
    PaymentSystemError,
    PaymentError,
    InvalidAmountError,
)
from .interfaces import (
    Payment,
    PaymentObserver,
)
from .value_objects import Currency


__all__ = [
    # Exceptions
    "PaymentSystemError",
    "PaymentError",
    "InvalidAmountError",
    # Interfaces
    "Payment",
    "PaymentObserver",
    # Value Objects
    "Currency",
]
