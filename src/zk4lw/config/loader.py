"""Loads the ``.zk4lw.yaml`` server list.

The file names the ensemble members and the port/timeout defaults they
share. String values may reference the environment as ``${VAR}`` or
``${VAR:-default}``, so one file can serve several deployments; a
reference to an unset variable without a default is left as written.
"""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from zk4lw.config.models import Zk4lwConfig

CONFIG_FILENAME = ".zk4lw.yaml"

_ENV_VAR_PATTERN = re.compile(r"\$\{([^}]+)\}")


def _interpolate_env(value: str) -> str:
    """Substitute every ``${...}`` reference in one string."""

    def _replace(match: re.Match[str]) -> str:
        expr = match.group(1)
        if ":-" in expr:
            var_name, default = expr.split(":-", 1)
            return os.environ.get(var_name.strip(), default)
        return os.environ.get(expr.strip(), match.group(0))

    return _ENV_VAR_PATTERN.sub(_replace, value)


def _interpolate_recursive(data: Any) -> Any:
    """Apply env substitution to every string in a parsed YAML tree.

    Mapping keys are left alone. Numbers and booleans pass through, but a
    port written as ``${ZK_PORT:-2181}`` comes back as a string; pydantic
    coerces it when the models are built.
    """
    if isinstance(data, str):
        return _interpolate_env(data)
    if isinstance(data, dict):
        return {k: _interpolate_recursive(v) for k, v in data.items()}
    if isinstance(data, list):
        return [_interpolate_recursive(item) for item in data]
    return data


def find_config_file(start: Path | None = None) -> Path | None:
    """Return the nearest .zk4lw.yaml in *start* (default cwd) or one of its parents."""
    current = (start or Path.cwd()).resolve()
    for ancestor in [current, *current.parents]:
        candidate = ancestor / CONFIG_FILENAME
        if candidate.exists():
            return candidate
    return None


def load_config(path: Path | None = None) -> Zk4lwConfig:
    """Read, interpolate and validate the server list.

    Raises FileNotFoundError when no file is found, yaml.YAMLError when it
    does not parse and ValueError when its content is not a valid server
    list. An empty file yields a config with no servers.
    """
    config_path = path or find_config_file()
    if not config_path or not config_path.exists():
        raise FileNotFoundError(
            f"Could not find {CONFIG_FILENAME}. Create one from .zk4lw.yaml.example or specify a path."
        )
    with config_path.open("r", encoding="utf-8") as fh:
        raw = yaml.safe_load(fh) or {}
    if not isinstance(raw, dict):
        raise ValueError(f"Invalid configuration in {config_path}: expected a mapping, got {type(raw).__name__}")
    data = _interpolate_recursive(raw)
    try:
        return Zk4lwConfig(**data)
    except ValidationError as exc:
        raise ValueError(f"Invalid configuration in {config_path}: {exc}") from exc
