"""Settings for the tracing CLI, read from SIMPLE_CORE_* environment variables."""

import logging

from pydantic import NonNegativeInt, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Small-step traces stop after this many reductions
    max_steps: NonNegativeInt = 10_000

    # Logging
    log_level: str = "WARNING"

    model_config = SettingsConfigDict(env_prefix="SIMPLE_CORE_", extra="ignore")

    @field_validator("log_level")
    @classmethod
    def known_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level '{value}'")
        return level
