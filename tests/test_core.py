"""
Unit tests for the core layer, settings and logging setup.
"""

import logging

import pytest

from core.exceptions import (
    PaymentSystemError,
    PaymentError,
    InvalidAmountError,
)
from core.value_objects import Currency
from infrastructure.settings import Settings, get_settings
from loggers import get_logger


# =============================================================================
# Currency Tests
# =============================================================================


class TestCurrency:
    """Tests for the Currency value object."""

    @pytest.mark.parametrize(
        "code, expected",
        [("t", Currency.TENGE), ("T", Currency.TENGE), ("d", Currency.DOLLAR), ("D", Currency.DOLLAR)],
    )
    def test_from_code(self, code, expected):
        assert Currency.from_code(code) is expected

    @pytest.mark.parametrize("code", ["x", "", "dd", None, 1])
    def test_from_code_unsupported(self, code):
        assert Currency.from_code(code) is None


# =============================================================================
# Exception Tests
# =============================================================================


class TestExceptions:
    """Tests for custom exceptions."""

    def test_payment_system_error(self):
        """Test PaymentSystemError creation and to_dict."""
        error = PaymentSystemError("Test error", code="TEST_001")
        assert error.message == "Test error"
        assert error.code == "TEST_001"

        d = error.to_dict()
        assert d["error"] == "TEST_001"
        assert d["message"] == "Test error"
        assert d["details"] == {}

    def test_default_code_is_class_name(self):
        assert PaymentError("x").code == "PaymentError"

    def test_invalid_amount_error(self):
        error = InvalidAmountError("Invalid amount", value="abc")
        assert isinstance(error, PaymentError)
        assert error.details["value"] == "abc"


# =============================================================================
# Settings Tests
# =============================================================================


class TestSettings:
    """Tests for Settings configuration."""

    def test_settings_defaults(self):
        settings = Settings()
        assert settings.logging.logger_name == "CURRENCY_PAYMENT"
        assert settings.logging.level == "INFO"
        assert settings.logging.log_file is None

    def test_get_settings_singleton(self):
        assert get_settings() is get_settings()


# =============================================================================
# Logger Tests
# =============================================================================


class TestGetLogger:
    """Tests for the logger factory."""

    def test_no_duplicate_handlers(self):
        first = get_logger("test_no_duplicate_handlers")
        second = get_logger("test_no_duplicate_handlers")
        assert first is second
        assert len(second.handlers) == 1

    def test_file_handler(self, tmp_path):
        """Test a rotating file handler is added when a log file is given."""
        log_file = tmp_path / "payments.log"
        test_logger = get_logger("test_file_handler", log_file=str(log_file), level=logging.INFO)
        try:
            assert len(test_logger.handlers) == 2
            test_logger.info("payment recorded")
            for handler in test_logger.handlers:
                handler.flush()
            assert "payment recorded" in log_file.read_text(encoding="utf-8")
        finally:
            for handler in list(test_logger.handlers):
                handler.close()
                test_logger.removeHandler(handler)

    def test_default_logger_shows_info(self):
        """Test the project logger emits INFO diagnostics by default."""
        from loggers import logger

        assert logger.isEnabledFor(logging.INFO)
        assert not logger.isEnabledFor(logging.DEBUG)
