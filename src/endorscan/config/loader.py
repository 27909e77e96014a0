"""Action input loading and merging.

Inputs are layered with this precedence (highest first):
1. CLI flags (cli_overrides)
2. ``INPUT_*`` environment variables set by the runner
3. Optional YAML file (--config)
4. Built-in defaults

The YAML file is a flat mapping of input names to values and supports
``${VAR}`` / ``${VAR:-default}`` expansion.
"""

from __future__ import annotations

import os
import re
from dataclasses import fields
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from endorscan.config.models import ActionInputs
from endorscan.config.validation import check_unknown_keys
from endorscan.core.logging import get_logger
from endorscan.github.toolkit import InputError, get_input, parse_boolean

LOGGER = get_logger(__name__)

# Environment variable pattern: ${VAR} or ${VAR:-default}
ENV_VAR_PATTERN = re.compile(r"\$\{([^}:]+)(?::-([^}]*))?\}")


class ConfigError(Exception):
    """Input loading or parsing error."""

    pass


def load_inputs(
    environ: Optional[Mapping[str, str]] = None,
    config_path: Optional[Path] = None,
    cli_overrides: Optional[Dict[str, Any]] = None,
) -> ActionInputs:
    """Load action inputs with proper precedence.

    Args:
        environ: Environment holding ``INPUT_*`` variables (defaults to os.environ).
        config_path: Optional YAML file of input values.
        cli_overrides: Values from CLI flags; ``None`` entries are ignored.

    Returns:
        Merged ActionInputs instance.

    Raises:
        ConfigError: If the file is missing or invalid, or a value has
            the wrong type.
    """
    env = os.environ if environ is None else environ
    merged: Dict[str, Any] = {}

    if config_path is not None:
        if not config_path.exists():
            raise ConfigError(f"Config file not found: {config_path}")
        try:
            file_values = load_yaml_file(config_path, env)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e
        for issue in check_unknown_keys(file_values, source=str(config_path)):
            LOGGER.warning(issue.format())
        merged.update(
            {k: v for k, v in file_values.items() if k in ActionInputs.field_names()}
        )
        LOGGER.debug(f"Loaded inputs from {config_path}")

    for name in ActionInputs.field_names():
        value = get_input(name, env)
        if value:
            merged[name] = value

    if cli_overrides:
        merged.update({k: v for k, v in cli_overrides.items() if v is not None})

    return dict_to_inputs(merged)


def load_yaml_file(path: Path, environ: Optional[Mapping[str, str]] = None) -> Dict[str, Any]:
    """Load and parse a YAML input file, expanding environment variables.

    Raises:
        yaml.YAMLError: If YAML parsing fails.
        ConfigError: If the document is not a mapping.
    """
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if data is None:
        return {}

    if not isinstance(data, dict):
        raise ConfigError(f"Config file must be a YAML mapping, got {type(data).__name__}")

    env = os.environ if environ is None else environ
    return {str(k): expand_env_vars(v, env) for k, v in data.items()}


def expand_env_vars(data: Any, environ: Mapping[str, str]) -> Any:
    """Recursively expand ${VAR} and ${VAR:-default} in string values."""
    if isinstance(data, dict):
        return {k: expand_env_vars(v, environ) for k, v in data.items()}
    elif isinstance(data, list):
        return [expand_env_vars(item, environ) for item in data]
    elif isinstance(data, str):
        return ENV_VAR_PATTERN.sub(lambda m: _env_var_replacer(m, environ), data)
    else:
        return data


def _env_var_replacer(match: re.Match[str], environ: Mapping[str, str]) -> str:
    var_name = match.group(1)
    default_value = match.group(2)

    value = environ.get(var_name)
    if value is not None:
        return value
    if default_value is not None:
        return default_value

    LOGGER.warning(f"Environment variable ${var_name} is not set and has no default")
    return ""


def dict_to_inputs(data: Dict[str, Any]) -> ActionInputs:
    """Convert raw values to a typed ActionInputs, coercing strings.

    Raises:
        ConfigError: If a value cannot be converted.
    """
    values: Dict[str, Any] = {}
    for f in fields(ActionInputs):
        if f.name not in data:
            continue
        raw = data[f.name]
        try:
            values[f.name] = _coerce(f.name, raw, f.default)
        except (InputError, ValueError) as e:
            raise ConfigError(str(e)) from e
    return ActionInputs(**values)


def _coerce(name: str, raw: Any, default: Any) -> Any:
    if isinstance(default, bool):
        if isinstance(raw, bool):
            return raw
        return parse_boolean(name, str(raw).strip())
    if isinstance(default, int):
        if isinstance(raw, bool):
            raise ValueError(f"Input {name} must be an integer, got {raw!r}")
        value = int(str(raw).strip())
        if value < 0:
            raise ValueError(f"Input {name} must not be negative, got {value}")
        return value
    if raw is None:
        return ""
    return str(raw).strip()
