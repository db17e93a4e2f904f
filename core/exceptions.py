"""
Custom exceptions for the currency payment demo.

Provides a hierarchy of typed exceptions for better error handling
and more informative error messages.
"""

from typing import Any, Optional


class PaymentSystemError(Exception):
    """Base exception for all payment system errors."""

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        """
        Initialize the exception.

        Args:
            message: Human-readable error message.
            code: Optional error code for programmatic handling.
            details: Optional additional error details.
        """
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for reporting."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


# =============================================================================
# Payment Errors
# =============================================================================


class PaymentError(PaymentSystemError):
    """Base exception for payment-related errors."""

    pass


class InvalidAmountError(PaymentError):
    """Entered amount is not a number."""

    def __init__(self, message: str, value: Any = None, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.details["value"] = value

