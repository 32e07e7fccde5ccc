"""Runtime settings for the task runner.

Configuration is loaded from:
- environment variables
- and a local `.env` file (if present)

Task inputs never come from here; they are passed on the command line.
"""

from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class RunnerSettings(BaseSettings):
    """Settings for a single runner invocation.

    Environment variables:
    - LOG_LEVEL                   (optional)
    - ROSALIND_DATA_ENCODING      (optional)
    - ROSALIND_MAX_NUMERIC_PARAM  (optional)

    Notes:
        Pydantic-settings supports overriding the env file in tests via:
        `RunnerSettings(_env_file=path_to_env)`.
    """

    log_level: str = Field(
        default="WARNING",
        validation_alias="LOG_LEVEL",
        description="Root logging level (logs go to stderr)",
    )

    data_encoding: str = Field(
        default="utf-8",
        validation_alias="ROSALIND_DATA_ENCODING",
        description="Text encoding used to read data files",
    )

    max_numeric_param: int = Field(
        default=100_000,
        gt=0,
        validation_alias="ROSALIND_MAX_NUMERIC_PARAM",
        description="Inclusive upper bound for numeric task parameters",
    )

    model_config = SettingsConfigDict(
        env_prefix="",
        env_file=".env",
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown log level: {value!r}")
        return level
