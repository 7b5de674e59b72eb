"""
Configuration management for FundLedger.
Uses pydantic-settings for type-safe, centralized configuration.
"""

import logging
from typing import Literal, Optional
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.
    Uses pydantic-settings for validation and type safety.
    """

    model_config = SettingsConfigDict(
        env_file='.env',
        env_file_encoding='utf-8',
        extra='ignore'  # Allow extra fields in .env for flexibility
    )

    # Database
    database_url: str = "sqlite:///fund_ledger.db"
    db_echo: bool = False

    # Ledger
    fund_code_prefix: str = "FUND"
    notification_channel: Literal["log", "email"] = "log"
    persistence_raise_on_error: bool = False

    # Logging
    log_level: str = "INFO"

    # Email / SMTP Configuration
    smtp_server: str = "smtp.gmail.com"
    smtp_port: int = 587
    smtp_username: Optional[str] = None
    smtp_password: Optional[str] = None
    from_email: Optional[str] = None

    @property
    def email_from(self) -> Optional[str]:
        """Get the from email address, defaulting to smtp_username."""
        return self.from_email or self.smtp_username

    @property
    def is_email_configured(self) -> bool:
        """Check if email service is properly configured."""
        return all([
            self.smtp_username,
            self.smtp_password,
            self.email_from
        ])


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get or create the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reload_settings() -> Settings:
    """Reload settings from environment (useful for testing)."""
    global _settings
    _settings = Settings()
    return _settings


def configure_logging(settings: Optional[Settings] = None) -> None:
    """Configure root logging from settings."""
    settings = settings or get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
