"""
Configuration module for the currency payment demo.

This module provides the fixed constants shared by the payment variants
and the console terminal.
"""

from typing import Final


# =============================================================================
# Currency Configuration
# =============================================================================

TENGE_CODE: Final[str] = "t"
DOLLAR_CODE: Final[str] = "d"

# Illustrative only, never looked up
DOLLAR_TO_TENGE_RATE: Final[float] = 452.0


# =============================================================================
# Console Texts
# =============================================================================

CURRENCY_PROMPT: Final[str] = "Choose a currency for payment t (tenge) / d (dollars): "
AMOUNT_PROMPT: Final[str] = "Enter the amount to pay: "
UNSUPPORTED_CURRENCY_MESSAGE: Final[str] = "Unsupported currency selected."

TENGE_PAID_TEMPLATE: Final[str] = "Paid {amount} tenge."
DOLLAR_PAID_TEMPLATE: Final[str] = "Paid {converted} tenge (accepted {amount} dollars)"
PAYMENT_RECORDED_TEMPLATE: Final[str] = "Payment recorded for amount {amount} tenge."


# =============================================================================
# Exit Codes
# =============================================================================

EXIT_OK: Final[int] = 0
EXIT_ERROR: Final[int] = 1
EXIT_INTERRUPTED: Final[int] = 130
