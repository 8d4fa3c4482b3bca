"""
==============================================================================
Catalog Settings Module
==============================================================================

Configuration management for the shop catalog using Pydantic Settings.

A single cached Settings instance is shared by the whole process.

Configuration Priority (highest to lowest):
------------------------------------------
1. Environment variables (prefixed with SHOP_)
2. .env file
3. Default values

==============================================================================
"""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


# Module logger
logger = logging.getLogger(__name__)


SELECTION_ORDERS = ("insertion", "id")


class Settings(BaseSettings):
    """
    Catalog settings loaded from environment variables.

    Attributes:
        app_name: Display name used in log output
        app_env: Environment mode (development/staging/production)
        debug: Force DEBUG logging regardless of log_level
        log_level: Logging level name
        result_limit: Maximum candidates kept by a search (truncation window)
        selection_order: Candidate order applied before truncation
        reject_empty_ids: Refuse products whose id is blank

    Example:
        >>> settings = Settings()
        >>> settings.result_limit
        10
    """

    model_config = SettingsConfigDict(
        env_prefix="SHOP_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_default=True,
    )

    # =========================================================================
    # APPLICATION SETTINGS
    # =========================================================================
    app_name: str = Field(
        default="Shop Catalog",
        description="Display name used in log output"
    )

    app_env: str = Field(
        default="development",
        description="Environment mode: development, staging, production"
    )

    debug: bool = Field(
        default=False,
        description="Force DEBUG logging"
    )

    log_level: str = Field(
        default="INFO",
        description="Logging level name"
    )

    # =========================================================================
    # CATALOG SETTINGS
    # =========================================================================
    result_limit: int = Field(
        default=10,
        ge=1,
        le=1000,
        description="Maximum number of candidates kept by a search"
    )

    selection_order: str = Field(
        default="insertion",
        description="Candidate order before truncation: insertion or id"
    )

    reject_empty_ids: bool = Field(
        default=False,
        description="Refuse products with a blank id"
    )

    # =========================================================================
    # VALIDATORS
    # =========================================================================
    @field_validator("app_env")
    @classmethod
    def validate_app_env(cls, value: str) -> str:
        """Normalize the environment name, falling back to development."""
        valid_envs = {"development", "staging", "production"}
        normalized = value.lower().strip()

        if normalized not in valid_envs:
            logger.warning(
                f"Unknown environment '{value}', defaulting to 'development'"
            )
            return "development"

        return normalized

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """
        Validate the logging level name.

        Raises:
            ValueError: If the level is not a standard logging level
        """
        supported = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}
        normalized = value.upper().strip()

        if normalized not in supported:
            raise ValueError(
                f"Unsupported log level: {value}. "
                f"Supported: {', '.join(sorted(supported))}"
            )

        return normalized

    @field_validator("selection_order")
    @classmethod
    def validate_selection_order(cls, value: str) -> str:
        """
        Validate the candidate selection order.

        Raises:
            ValueError: If the order is not one of SELECTION_ORDERS
        """
        normalized = value.lower().strip()

        if normalized not in SELECTION_ORDERS:
            raise ValueError(
                f"Unsupported selection order: {value}. "
                f"Supported: {', '.join(SELECTION_ORDERS)}"
            )

        return normalized

    # =========================================================================
    # COMPUTED PROPERTIES
    # =========================================================================
    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.app_env == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.app_env == "production"

    @property
    def effective_log_level(self) -> int:
        """Numeric logging level, DEBUG when debug mode is on."""
        if self.debug:
            return logging.DEBUG
        return logging.getLevelName(self.log_level)

    def __repr__(self) -> str:
        """String representation for debugging."""
        return (
            f"Settings(app_name={self.app_name!r}, "
            f"app_env={self.app_env!r}, "
            f"result_limit={self.result_limit}, "
            f"selection_order={self.selection_order!r})"
        )


# =============================================================================
# SINGLETON INSTANCE MANAGEMENT
# =============================================================================

@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Get the global Settings instance.

    Call ``get_settings.cache_clear()`` to reload after changing the
    environment.

    Returns:
        Global Settings instance
    """
    settings = Settings()

    if settings.debug:
        logger.info(f"Configuration loaded: {settings}")

    return settings
