"""
Domain layer - Payment variants, adapter, factory and observers.

Contains:
- TengePayment, DollarPayment: Payment variants
- PaymentAdapter: Pass-through adapter for foreign-currency payments
- create_payment: Factory selecting a payment by currency code
- PaymentLogger: Observer recording completed payments
"""

from .payments import TengePayment, DollarPayment
from .payment_adapters import PaymentAdapter
from .payment_factory import create_payment
from .observers import PaymentLogger


__all__ = [
    "TengePayment",
    "DollarPayment",
    "PaymentAdapter",
    "create_payment",
    "PaymentLogger",
]
