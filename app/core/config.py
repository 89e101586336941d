# Standard library imports
import os
from typing import Final, FrozenSet, List, Optional

# Local application imports
from ..domain.constants import DEFAULT_DISPOSABLE_EMAIL_DOMAINS


def _split_csv(raw_value: Optional[str]) -> List[str]:
    """Split a comma-separated environment value into trimmed, non-empty items"""
    if not raw_value:
        return []
    return [item.strip() for item in raw_value.split(",") if item.strip()]


class Settings:
    """
    Application settings loaded from environment variables.

    This class centralizes all configuration settings for the application.
    All settings are loaded from environment variables with sensible defaults.
    """

    def __init__(self) -> None:
        # Database Configuration
        self.mongo_uri: Final[str] = os.getenv("MONGO_URI", "mongodb://localhost:27017")
        self.mongo_database_name: Final[str] = os.getenv("MONGO_DB_NAME", "user_service")

        # HTTP Configuration
        self.cors_allowed_origins: Final[List[str]] = (
            _split_csv(os.getenv("CORS_ALLOWED_ORIGINS")) or ["*"]
        )

        # Validation Configuration
        configured_domains = _split_csv(os.getenv("DISPOSABLE_EMAIL_DOMAINS"))
        self.disposable_email_domains: Final[FrozenSet[str]] = (
            frozenset(domain.lower() for domain in configured_domains)
            if configured_domains
            else DEFAULT_DISPOSABLE_EMAIL_DOMAINS
        )

        # Logging / time Configuration
        self.log_level: Final[str] = os.getenv("LOG_LEVEL", "INFO").upper()
        self.local_timezone: Final[str] = os.getenv("LOCAL_TIMEZONE", "UTC")


# Global settings instance (singleton pattern)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get application settings (singleton pattern)

    Returns:
        Settings instance with all configuration values
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
