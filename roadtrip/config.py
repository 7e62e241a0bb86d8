"""Centralized configuration using Pydantic Settings.

This module provides a single source of truth for the dataset locations
and the few constants the ingestion heuristics depend on:
- the end date marking an identity record as "still valid"
- the letter used to pad two-letter capital-distance codes

Configuration can be overridden via environment variables:
- IRT_DATA_DATA_DIR=/path/to/data
- IRT_DATA_CURRENT_END_DATE=2020-12-31
- IRT_QUERY_SUGGESTION_CUTOFF=90
- IRT_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET")


class DatasetConfig(BaseSettings):
    """Dataset file configuration.

    Environment variables prefixed with IRT_DATA_.
    """

    model_config = SettingsConfigDict(env_prefix="IRT_DATA_")

    data_dir: Path = Field(
        default_factory=lambda: Path(__file__).resolve().parent.parent / "data"
    )
    borders_file: str = "borders.txt"
    capdist_file: str = "capdist.csv"
    state_name_file: str = "state_name.tsv"

    current_end_date: str = "2020-12-31"
    code_padding_letter: str = "G"

    @field_validator("code_padding_letter")
    @classmethod
    def _single_letter(cls, value: str) -> str:
        if len(value) != 1 or not value.isalpha():
            raise ValueError(f"Padding must be a single letter, got {value!r}")
        return value

    @property
    def borders_path(self) -> Path:
        """Full path to the border-adjacency text file."""
        return self.data_dir / self.borders_file

    @property
    def capdist_path(self) -> Path:
        """Full path to the capital-distance CSV file."""
        return self.data_dir / self.capdist_file

    @property
    def state_name_path(self) -> Path:
        """Full path to the country-identity TSV file."""
        return self.data_dir / self.state_name_file


class QueryConfig(BaseSettings):
    """Interactive query configuration.

    Environment variables prefixed with IRT_QUERY_.
    """

    model_config = SettingsConfigDict(env_prefix="IRT_QUERY_")

    # Minimum rapidfuzz ratio (0-100) for a "did you mean" suggestion
    suggestion_cutoff: float = Field(default=80.0, ge=0, le=100)


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with IRT_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="IRT_LOG_")

    level: str = "WARNING"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    @field_validator("level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level {value!r}")
        return level


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

        config = get_config()
        print(config.datasets.borders_path)

    Environment variables prefixed with IRT_.
    """

    model_config = SettingsConfigDict(env_prefix="IRT_")

    datasets: DatasetConfig = Field(default_factory=DatasetConfig)
    query: QueryConfig = Field(default_factory=QueryConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache."""
    get_config.cache_clear()
