"""Centralized configuration using Pydantic Settings.

This module provides a single source of truth for the sorter's
tunable behaviour. Every setting can be overridden via environment
variables:
- ITS_SORTING_SEGMENT_DIAGNOSIS=false
- ITS_SORTING_MAX_TICKETS=500
- ITS_RENDER_DEFAULT_FORMAT=human
- ITS_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal, Optional

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from .domain.errors import ConfigurationError


class SortingConfig(BaseSettings):
    """Sorting engine configuration.

    Environment variables prefixed with ITS_SORTING_.
    """

    model_config = SettingsConfigDict(env_prefix="ITS_SORTING_")

    segment_diagnosis: bool = True
    tight_connection_warnings: bool = True
    max_tickets: Optional[int] = Field(default=None, ge=1)


class RenderingConfig(BaseSettings):
    """Itinerary output configuration.

    Environment variables prefixed with ITS_RENDER_.
    """

    model_config = SettingsConfigDict(env_prefix="ITS_RENDER_")

    default_format: Literal["json", "human", "both"] = "json"


class ObservabilityConfig(BaseSettings):
    """Logging and observability configuration.

    Environment variables prefixed with ITS_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="ITS_LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    structured: bool = False  # Set True for JSON logging


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

        config = get_config()
        print(config.sorting.segment_diagnosis)

    Environment variables prefixed with ITS_.
    """

    model_config = SettingsConfigDict(env_prefix="ITS_")

    sorting: SortingConfig = Field(default_factory=SortingConfig)
    rendering: RenderingConfig = Field(default_factory=RenderingConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.

    Returns:
        The application configuration instance.

    Raises:
        ConfigurationError: If an environment variable holds an invalid value.
    """
    try:
        return AppConfig()
    except ValidationError as e:
        raise _configuration_error(e) from e


def _configuration_error(error: ValidationError) -> ConfigurationError:
    prefixes = {
        settings.__name__: settings.model_config.get("env_prefix", "")
        for settings in (
            SortingConfig,
            RenderingConfig,
            ObservabilityConfig,
            AppConfig,
        )
    }
    first = error.errors()[0]
    field_name = ".".join(str(part) for part in first["loc"])
    setting_name = f"{prefixes.get(error.title, '')}{field_name}".upper()
    return ConfigurationError(
        f"Invalid value for {setting_name}: {first['msg']}",
        cause=error,
        setting_name=setting_name,
    )


def reset_config() -> None:
    """Reset the configuration cache.

    Call this in tests to ensure a fresh configuration is loaded.
    """
    get_config.cache_clear()
