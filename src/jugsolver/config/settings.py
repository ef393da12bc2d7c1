"""Configuration settings and loading."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import Field, field_validator
from pydantic import ValidationError as PydanticValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from jugsolver.errors import ConfigValidationError, ErrorContext

DEFAULT_CONFIG_FILE = "jugsolver.yaml"
DEFAULT_MAX_STATES = 1_000_000
OUTPUT_FORMATS = ("console", "json", "markdown", "table")


class SolverConfig(BaseSettings):
    """Configuration for the jug solver and its command line."""

    model_config = SettingsConfigDict(
        env_prefix="JUGSOLVER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    max_states: int = Field(
        default=DEFAULT_MAX_STATES,
        description="Upper bound on states the breadth-first search may visit",
    )
    output_format: str = "console"
    color: bool = True
    verbose: bool = False

    @field_validator("max_states", mode="after")
    @classmethod
    def validate_max_states(cls, v: int) -> int:
        if v <= 0:
            raise ConfigValidationError(
                message=f"max_states must be positive, got {v}",
                field="max_states",
                value=v,
            )
        return v

    @field_validator("output_format", mode="before")
    @classmethod
    def validate_output_format(cls, v: str) -> str:
        if v not in OUTPUT_FORMATS:
            raise ConfigValidationError(
                message=f"Invalid output format: {v!r}. Valid: {list(OUTPUT_FORMATS)}",
                field="output_format",
                value=v,
                context=ErrorContext(extra={"valid_formats": list(OUTPUT_FORMATS)}),
            )
        return v


def load_config(config_path: str | Path | None = None) -> SolverConfig:
    """Load configuration from file and environment.

    Priority: CLI args > env vars > config file > defaults
    """
    config_data: dict[str, Any] = {}

    if config_path is None and Path(DEFAULT_CONFIG_FILE).exists():
        config_path = DEFAULT_CONFIG_FILE

    if config_path is not None:
        config_path = Path(config_path)
        if config_path.exists():
            with open(config_path) as f:
                loaded = yaml.safe_load(f) or {}
            if not isinstance(loaded, dict):
                raise ConfigValidationError(
                    message=f"{config_path} must contain a mapping at the top level",
                    value=loaded,
                )
            config_data = loaded

    env_overrides = _get_env_overrides()
    config_data.update(env_overrides)

    try:
        return SolverConfig(**config_data)
    except PydanticValidationError as e:
        raise ConfigValidationError(
            message=f"Invalid configuration: {e.errors()[0]['msg']}",
            field=".".join(str(p) for p in e.errors()[0]["loc"]),
            cause=e,
        ) from e


def default_max_states() -> int:
    """Search budget for library calls made without a SolverConfig.

    Only ``JUGSOLVER_MAX_STATES`` is consulted; the command-line settings
    are left to ``load_config``.
    """
    overrides = _get_env_overrides(only=("JUGSOLVER_MAX_STATES",))
    return overrides.get("max_states", DEFAULT_MAX_STATES)


def _parse_bool(value: str) -> bool:
    return value.lower() in ("true", "1", "yes")


def _get_env_overrides(only: tuple[str, ...] | None = None) -> dict[str, Any]:
    """Get configuration overrides from environment variables."""
    overrides: dict[str, Any] = {}

    env_mappings = {
        "JUGSOLVER_MAX_STATES": ("max_states", int),
        "JUGSOLVER_OUTPUT_FORMAT": "output_format",
        "JUGSOLVER_COLOR": ("color", _parse_bool),
        "JUGSOLVER_VERBOSE": ("verbose", _parse_bool),
    }

    for env_key, config_key in env_mappings.items():
        if only is not None and env_key not in only:
            continue
        value = os.environ.get(env_key)
        if value is not None:
            if isinstance(config_key, tuple):
                key, converter = config_key
                try:
                    overrides[key] = converter(value)
                except ValueError as e:
                    raise ConfigValidationError(
                        message=f"{env_key} has an invalid value: {value!r}",
                        field=key,
                        value=value,
                        cause=e,
                    ) from e
            else:
                overrides[config_key] = value

    return overrides
