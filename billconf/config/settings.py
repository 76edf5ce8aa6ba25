"""
Configuration Management for billconf

Uses pydantic-settings for type-safe configuration from environment variables.

DESIGN DECISION: The billing data itself lives in a YAML file. Only the
runtime knobs (where that file is, how to log) come from the environment,
so the same bill can be loaded under different logging setups.
"""

import logging
from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings.
    
    Loads configuration from BILLCONF_* environment variables and .env file.
    """
    
    model_config = SettingsConfigDict(
        env_prefix="BILLCONF_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )
    
    config_path: Path = Field(
        default=Path("billing.yaml"),
        description="Path to the YAML billing configuration"
    )
    log_level: str = Field(
        default="INFO",
        description="Minimum level for emitted log events"
    )
    log_json: bool = Field(
        default=True,
        description="Render log events as JSON (console renderer otherwise)"
    )
    
    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Only accept level names the logging module knows."""
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level
    
    @property
    def log_level_number(self) -> int:
        """Numeric logging level for stdlib handlers."""
        return logging.getLevelName(self.log_level)


@lru_cache()
def get_settings() -> Settings:
    """
    Get application settings (cached).
    
    Uses LRU cache to ensure settings are only loaded once.
    Call get_settings.cache_clear() to reload if needed.
    """
    return Settings()
