"""
Configuration Management Module

Provides centralized configuration using pydantic-settings for environment-based configuration.
"""

from typing import Literal, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class AccountsConfig(BaseSettings):
    """Bounded accounts configuration"""

    model_config = SettingsConfigDict(
        env_prefix="BANK_ACCOUNTS_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging configuration
    log_level: str = "INFO"
    log_format: Literal["json", "text"] = "json"
    log_file: Optional[str] = None  # If None, logs to stderr
    log_rejected_operations: bool = True  # Refused withdraw/deposit at INFO instead of DEBUG

    # Concurrency
    thread_safe: bool = True  # Per-account lock around check-then-set


# Global configuration instance
config = AccountsConfig()


def get_config() -> AccountsConfig:
    """Get global configuration instance"""
    return config


def reload_config() -> AccountsConfig:
    """Reload configuration from environment"""
    global config
    config = AccountsConfig()
    return config
