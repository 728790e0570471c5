"""
Configuration Management Module

Provides centralized configuration using pydantic-settings for environment-based configuration.
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional

from .currency import Currency


class BankConfig(BaseSettings):
    """Simple bank configuration"""

    model_config = SettingsConfigDict(
        env_prefix="SIMPLE_BANK_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore"
    )

    # Display configuration
    currency: str = "USD"
    timestamp_format: str = "%Y-%m-%d %H:%M:%S"  # Console transaction lines

    # Logging configuration
    log_level: str = "WARNING"
    log_format: str = "json"  # json or text
    log_file: Optional[str] = None  # If None, logs to stderr

    @field_validator("currency")
    @classmethod
    def _check_currency(cls, value: str) -> str:
        return Currency.from_code(value).code

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        value = value.upper()
        if value not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {value}")
        return value

    @field_validator("log_format")
    @classmethod
    def _check_log_format(cls, value: str) -> str:
        value = value.lower()
        if value not in ("json", "text"):
            raise ValueError("log_format must be 'json' or 'text'")
        return value

    @property
    def currency_enum(self) -> Currency:
        return Currency.from_code(self.currency)


# Global configuration instance
config = BankConfig()


def get_config() -> BankConfig:
    """Get global configuration instance"""
    return config


def reload_config() -> BankConfig:
    """Reload configuration from environment"""
    global config
    config = BankConfig()
    return config
