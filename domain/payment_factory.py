"""
Payment Factory - Builds the payment variant for a currency code.
"""

from typing import Callable, Optional

from core.interfaces import Payment
from core.value_objects import Currency
from domain.payment_adapters import PaymentAdapter
from domain.payments import DollarPayment, TengePayment
from loggers import logger


def create_payment(
    currency_code: Optional[str],
    write_line: Callable[[str], None] = print,
) -> Optional[Payment]:
    """
    Create a payment for the given currency code.

    Codes are case-insensitive: ``t`` selects tenge, ``d`` selects dollars
    (wrapped in a ``PaymentAdapter``). A new object is built on every call.

    Args:
        currency_code: Code as typed by the user, may be None.
        write_line: Output function handed to the payment variant.

    Returns:
        A payment instance, or None if the currency is not supported.
    """
    currency = Currency.from_code(currency_code)

    if currency is Currency.TENGE:
        return TengePayment(write_line)
    if currency is Currency.DOLLAR:
        return PaymentAdapter(DollarPayment(write_line))

    logger.info(f"Unsupported currency code: {currency_code!r}")
    return None
