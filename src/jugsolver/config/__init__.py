"""Configuration for jugsolver."""

from jugsolver.config.settings import (
    DEFAULT_CONFIG_FILE,
    DEFAULT_MAX_STATES,
    OUTPUT_FORMATS,
    SolverConfig,
    default_max_states,
    load_config,
)

__all__ = [
    "DEFAULT_CONFIG_FILE",
    "DEFAULT_MAX_STATES",
    "OUTPUT_FORMATS",
    "SolverConfig",
    "default_max_states",
    "load_config",
]
