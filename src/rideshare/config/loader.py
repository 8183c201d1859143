"""
Configuration loading utilities.

Supports environment variable interpolation and config inheritance.
Every key is optional; an empty file yields the defaults.
"""

import os
import re
from pathlib import Path
from typing import Any

import yaml

from rideshare.config.settings import DataPathsConfig, LoggingConfig, RideShareConfig

_ENV_PATTERN = re.compile(r"\$\{([^}:]+)(?::([^}]*))?\}")


def _interpolate_env_vars(value: str) -> str:
    """
    Interpolate environment variables in string values.

    Supports ${VAR} and ${VAR:default} syntax.
    """

    def replacer(match: re.Match[str]) -> str:
        default = match.group(2)
        return os.environ.get(match.group(1), default if default is not None else "")

    return _ENV_PATTERN.sub(replacer, value)


def _process_config_values(obj: Any) -> Any:
    """Recursively interpolate env vars in every string of a parsed document."""
    if isinstance(obj, str):
        return _interpolate_env_vars(obj)
    if isinstance(obj, dict):
        return {k: _process_config_values(v) for k, v in obj.items()}
    if isinstance(obj, list):
        return [_process_config_values(item) for item in obj]
    return obj


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries, with override taking precedence."""
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def load_yaml(path: Path) -> dict[str, Any]:
    """Load a YAML file and process environment variables."""
    with path.open(encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if data is None:
        return {}
    if not isinstance(data, dict):
        msg = f"Config file must contain a mapping at top level: {path}"
        raise ValueError(msg)
    return _process_config_values(data)


def load_config(
    config_path: Path,
    base_path: Path | None = None,
) -> RideShareConfig:
    """
    Load configuration from YAML file(s).

    Recognized layout:

        project: my-rides
        data:
          root: ./data
          drivers: drivers.csv
          riders: riders.csv
          trips: trips.csv
        logging:
          level: INFO
          json: false

    Relative data roots are resolved against the config file's directory.

    Args:
        config_path: Path to the main configuration file.
        base_path: Optional path to base configuration for inheritance.
            Defaults to a base.yaml next to config_path, if present.

    Returns:
        Fully validated RideShareConfig instance.
    """
    if base_path is not None:
        base_data = load_yaml(base_path)
    else:
        potential_base = config_path.parent / "base.yaml"
        base_data = (
            load_yaml(potential_base)
            if potential_base.exists() and potential_base != config_path
            else {}
        )

    merged = _deep_merge(base_data, load_yaml(config_path))

    data_section = merged.get("data") or {}
    data_root = Path(data_section.get("root", "./data"))
    if not data_root.is_absolute():
        data_root = config_path.parent / data_root

    path_overrides = {
        name: Path(data_section[name])
        for name in ("drivers", "riders", "trips")
        if data_section.get(name)
    }
    data_paths = DataPathsConfig(data_root=data_root, **path_overrides)

    logging_section = merged.get("logging") or {}
    logging_config = LoggingConfig(
        level=logging_section.get("level", "INFO"),
        json_output=bool(logging_section.get("json", False)),
    )

    return RideShareConfig(
        project=merged.get("project", "rideshare"),
        data_paths=data_paths,
        logging=logging_config,
    )
