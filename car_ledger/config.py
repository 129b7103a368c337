"""
Configuration Management Module

Provides centralized configuration using pydantic-settings for environment-based configuration.
"""

from pydantic_settings import BaseSettings
from typing import Optional


class CarLedgerConfig(BaseSettings):
    """Car ledger configuration"""

    # Logging configuration
    log_level: str = "WARNING"
    log_format: str = "json"  # json or text
    log_file: Optional[str] = None  # If None, logs to stderr

    # Car validation rules
    earliest_model_year: int = 1886  # First production automobile
    model_year_lookahead: int = 1  # Next year's models may already be on sale

    # Console behaviour
    seed_sample_cars: bool = True
    price_decimals: int = 2

    class Config:
        env_prefix = "CAR_LEDGER_"
        env_file = ".env"
        case_sensitive = False


# Global configuration instance
config = CarLedgerConfig()


def get_config() -> CarLedgerConfig:
    """Get global configuration instance"""
    return config


def reload_config() -> CarLedgerConfig:
    """Reload configuration from environment"""
    global config
    config = CarLedgerConfig()
    return config
