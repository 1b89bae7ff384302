"""YAML config parser for zest.

Parses ``zest.yaml`` files into RunConfig objects.
"""

from pathlib import Path
from typing import Union

import yaml

from ..errors import ConfigError
from .schema import RunConfig

DEFAULT_CONFIG_FILE = "zest.yaml"


def parse_config(file_path: Union[str, Path]) -> RunConfig:
    """Parse a YAML config file into a RunConfig.

    Args:
        file_path: Path to the YAML config file.

    Returns:
        Parsed RunConfig. An empty file yields the defaults.

    Raises:
        FileNotFoundError: If the config file doesn't exist.
        ConfigError: If the YAML is malformed or has wrongly typed fields.
    """
    file_path = Path(file_path)

    if not file_path.exists():
        raise FileNotFoundError(f"Config file not found: {file_path}")

    try:
        with open(file_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Malformed YAML in {file_path}: {e}") from e

    if data is None:
        return RunConfig()

    return parse_config_data(data, source=str(file_path))


def parse_config_data(data: dict, source: str = "<inline>") -> RunConfig:
    """Build a RunConfig from a dictionary (already loaded YAML).

    Unknown keys are ignored.

    Raises:
        ConfigError: If the data is not a mapping or a field has the wrong type.
    """
    if not isinstance(data, dict):
        raise ConfigError(f"Config must be a YAML mapping, got {type(data).__name__} in {source}")

    values = {
        k.replace("-", "_"): v for k, v in data.items()
        if isinstance(k, str) and k.replace("-", "_") in RunConfig.__dataclass_fields__
    }

    if "show_traces" in values and not isinstance(values["show_traces"], bool):
        raise ConfigError(f"'show_traces' must be a boolean in {source}")

    pattern = values.get("pattern")
    if pattern is not None and not (
        isinstance(pattern, str)
        or (isinstance(pattern, list) and all(isinstance(p, str) for p in pattern))
    ):
        raise ConfigError(f"'pattern' must be a string or list of strings in {source}")

    return RunConfig(**values)
