"""
Configuration management using Pydantic Settings.

Type-safe, validated configuration loaded from environment variables
prefixed with ``FRAMECHAIN_``.

Architecture:
- Flat Settings structure (no nesting)
- All config loaded from environment variables
- Type validation via Pydantic

Usage:
    from framechain.core.config import get_settings

    if get_settings().is_development:
        ...
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from framechain.core.enums import Environment

LOG_LEVELS: frozenset[str] = frozenset(
    {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
)


class Settings(BaseSettings):
    """
    Library settings (flat structure).

    Configuration precedence:
        1. Environment variables (FRAMECHAIN_ENVIRONMENT, FRAMECHAIN_LOG_LEVEL)
        2. Default values
    """

    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Runtime environment (development, testing, ci, production)",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    model_config = SettingsConfigDict(
        env_prefix="FRAMECHAIN_",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """
        Normalize and validate the log level name.

        Args:
            v: Level name, any case.

        Returns:
            str: Upper-case level name.

        Raises:
            ValueError: If the level is not one of the five standard levels.
        """
        level = v.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {sorted(LOG_LEVELS)}")
        return level

    @property
    def is_development(self) -> bool:
        """True if environment is DEVELOPMENT."""
        return self.environment == Environment.DEVELOPMENT

    @property
    def is_testing(self) -> bool:
        """True if environment is TESTING."""
        return self.environment == Environment.TESTING

    @property
    def is_ci(self) -> bool:
        """True if environment is CI."""
        return self.environment == Environment.CI

    @property
    def is_production(self) -> bool:
        """True if environment is PRODUCTION."""
        return self.environment == Environment.PRODUCTION


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings: Settings loaded once per process, on first use.

    Raises:
        pydantic.ValidationError: If FRAMECHAIN_* variables are invalid.
    """
    return Settings()

