"""
Value Objects for the currency payment demo.

Immutable objects that represent values in the domain.
"""

from enum import Enum
from typing import Optional

from configs import DOLLAR_CODE, TENGE_CODE


# =============================================================================
# Currency
# =============================================================================


class Currency(str, Enum):
    """
    Currencies accepted at the terminal, keyed by their console code.

    Codes are matched case-insensitively.
    """

    TENGE = TENGE_CODE
    DOLLAR = DOLLAR_CODE

    @classmethod
    def from_code(cls, code: Optional[str]) -> Optional["Currency"]:
        """
        Look up a currency by its console code.

        Args:
            code: Raw code as typed by the user, may be None.

        Returns:
            Matching currency, or None when the code is unsupported.
        """
        if not isinstance(code, str):
            return None
        try:
            return cls(code.lower())
        except ValueError:
            return None

