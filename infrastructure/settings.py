"""
Application settings.

Provides typed configuration for the ambient services (logging).
Nothing is read from the environment or from files.
"""

from dataclasses import dataclass, field
from typing import Optional


# =============================================================================
# Configuration Classes
# =============================================================================


@dataclass(frozen=True)
class LoggingSettings:
    """Diagnostic logging settings."""

    logger_name: str = "CURRENCY_PAYMENT"
    level: str = "INFO"
    log_file: Optional[str] = None


# =============================================================================
# Main Settings
# =============================================================================


@dataclass
class Settings:
    """
    Main application settings.

    Aggregates all configuration sections.
    """

    logging: LoggingSettings = field(default_factory=LoggingSettings)


# =============================================================================
# Settings Singleton
# =============================================================================


_settings: Settings | None = None


def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns:
        Settings instance.
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
