"""
Application layer - Console orchestration.

Contains:
- PaymentTerminal: One interactive payment run
- parse_amount: Amount parsing for console input
"""

from .payment_service import PaymentTerminal, parse_amount


__all__ = [
    "PaymentTerminal",
    "parse_amount",
]
