"""Configuration management for autorename."""

import re
from functools import lru_cache
from typing import Annotated

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from .exceptions import ConfigurationError
from .normalizer.models import DEFAULT_UPPER_CASE_EXCEPTIONS, NormalizationOptions

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_prefix="AUTORENAME_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Normalization settings
    start_with_upper_case: bool = Field(default=False, description="Start every word with an upper case letter")
    remove_brackets: bool = Field(default=False, description="Remove bracketed annotations")
    remove_starting_number: bool = Field(default=False, description="Remove a leading track number")
    upper_case_exceptions: Annotated[list[str], NoDecode] = Field(
        default_factory=lambda: list(DEFAULT_UPPER_CASE_EXCEPTIONS),
        description="Words kept verbatim when changing case ('|' or ',' separated in the environment)",
    )

    # Rename settings
    force_overwrite: bool = Field(default=False, description="Overwrite existing destination files")

    # Display settings
    show_extension: bool = Field(default=False, description="Show file extensions in listings")
    show_full_path: bool = Field(default=False, description="Show full paths in listings")

    # Processing settings
    max_workers: int = Field(default=4, ge=1, le=64, description="Number of threads computing proposals")

    # Logging settings
    log_level: str = Field(default="INFO", description="Logging level")
    log_json: bool = Field(default=False, description="Render logs as JSON")

    @field_validator("upper_case_exceptions", mode="before")
    @classmethod
    def split_exceptions(cls, value: object) -> object:
        """Accept a '|' or ',' separated string as well as a list."""
        if isinstance(value, str):
            return [word for word in re.split(r"[|,]", value) if word.strip()]
        return value

    @field_validator("upper_case_exceptions")
    @classmethod
    def strip_exceptions(cls, value: list[str]) -> list[str]:
        """Drop surrounding whitespace and empty entries."""
        return [word.strip() for word in value if word.strip()]

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Validate the logging level name."""
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Invalid log level: {value}")
        return level

    def to_options(self) -> NormalizationOptions:
        """Build the normalization options described by these settings."""
        return NormalizationOptions(
            start_with_upper_case=self.start_with_upper_case,
            remove_brackets=self.remove_brackets,
            remove_starting_number=self.remove_starting_number,
            upper_case_exceptions=frozenset(self.upper_case_exceptions),
        )


def load_settings(**overrides: object) -> Settings:
    """
    Load settings from the environment, applying explicit overrides.

    Raises:
        ConfigurationError: If the environment or the overrides are invalid
    """
    try:
        return Settings(**overrides)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}", {"errors": e.errors()}) from e


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings."""
    return load_settings()
