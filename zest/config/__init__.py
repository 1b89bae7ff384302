"""Config module - YAML run configuration."""

from .schema import (
    ColorMode,
    RunConfig,
    ConfigIssue,
    ConfigValidation,
)
from .parser import DEFAULT_CONFIG_FILE, parse_config, parse_config_data
from .validator import validate_config

__all__ = [
    "ColorMode",
    "RunConfig",
    "ConfigIssue",
    "ConfigValidation",
    "DEFAULT_CONFIG_FILE",
    "parse_config",
    "parse_config_data",
    "validate_config",
]
