"""Centralized configuration using Pydantic Settings.

Defaults reproduce the stock console behaviour: exports land in the
current working directory as ``cities.txt`` and ``roads.txt`` and only
warnings reach the log stream.

Configuration can be overridden via environment variables:
- RBP_STORAGE_DATA_DIR=/path/to/exports
- RBP_CONSOLE_MAX_NAME_RETRIES=5
- RBP_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class StorageConfig(BaseSettings):
    """Export file configuration.

    Environment variables prefixed with RBP_STORAGE_.
    """

    model_config = SettingsConfigDict(env_prefix="RBP_STORAGE_")

    data_dir: Path = Field(default_factory=Path.cwd)
    cities_file: str = "cities.txt"
    roads_file: str = "roads.txt"

    @property
    def cities_path(self) -> Path:
        """Full path to the city export file."""
        return self.data_dir / self.cities_file

    @property
    def roads_path(self) -> Path:
        """Full path to the road export file."""
        return self.data_dir / self.roads_file


class ConsoleConfig(BaseSettings):
    """Interactive console configuration.

    Environment variables prefixed with RBP_CONSOLE_.
    """

    model_config = SettingsConfigDict(env_prefix="RBP_CONSOLE_")

    # Attempts per city slot before a batch add gives up on it
    max_name_retries: int = Field(default=3, ge=1)
    budget_unit: str = "Billion Frw"


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with RBP_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="RBP_LOG_")

    level: str = "WARNING"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

        config = get_config()
        print(config.storage.roads_path)
        print(config.console.max_name_retries)

    Environment variables prefixed with RBP_.
    """

    model_config = SettingsConfigDict(env_prefix="RBP_")

    storage: StorageConfig = Field(default_factory=StorageConfig)
    console: ConsoleConfig = Field(default_factory=ConsoleConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.

    Returns:
        The application configuration instance.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache.

    Call this in tests to ensure a fresh configuration is loaded.
    """
    get_config.cache_clear()
