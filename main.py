"""
Currency Payment Demo - Main entry point.

Runs a single interactive payment on the console.
"""

import sys

from application.payment_service import PaymentTerminal
from configs import EXIT_ERROR, EXIT_INTERRUPTED
from core.exceptions import PaymentSystemError
from loggers import logger


def main() -> int:
    """
    Main entry point for the payment terminal.

    Returns:
        Process exit code.
    """
    terminal = PaymentTerminal()
    try:
        return terminal.run()
    except PaymentSystemError as e:
        logger.error(f"Payment failed: {e.to_dict()}")
        return EXIT_ERROR
    except EOFError:
        logger.info("Input closed before payment completed")
        return EXIT_ERROR
    except KeyboardInterrupt:
        logger.info("Application stopped by user")
        return EXIT_INTERRUPTED


if __name__ == "__main__":
    sys.exit(main())
