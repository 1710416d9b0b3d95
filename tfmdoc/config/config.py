"""
Configuration loading for tfmdoc.

Config merges three layers, lowest precedence first: built-in DEFAULTS, an
optional YAML file, and TFMDOC_* environment variables. Command-line flags
are applied on top by the tools themselves.
"""

from __future__ import annotations

import copy
import os
from pathlib import Path
from typing import Any

import yaml

from ..exceptions import ConfigError
from .constants import (
    DEFAULT_CONFIG_FILENAME,
    DEFAULTS,
    ENV_PREFIX,
    MAX_CONFIG_SIZE_BYTES,
    STRING_SECTIONS,
)


def _check_file_size(fname_path: Path) -> None:
    """Reject oversized config files before parsing them."""
    file_size = fname_path.stat().st_size
    if file_size > MAX_CONFIG_SIZE_BYTES:
        raise ConfigError(
            f"configuration file is {file_size} bytes, "
            f"exceeding maximum size of {MAX_CONFIG_SIZE_BYTES} bytes",
            path=fname_path,
        )


def _load_yaml(fname_path: Path) -> dict[str, Any]:
    """Read a YAML mapping from disk."""
    try:
        with open(fname_path) as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigError(f"cannot read configuration: {e}", path=fname_path) from e
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid YAML: {e}", path=fname_path) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(
            f"configuration root must be a mapping, got {type(data).__name__}",
            path=fname_path,
        )
    return data


def _merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge override into base, returning base."""
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            _merge(base[key], value)
        else:
            base[key] = value
    return base


class Config:
    """
    Layered configuration with dotted-key access.

    Environment Variable Override Format:
        TFMDOC_<SECTION>_<KEY>=value

    The first component after the prefix names the section and the rest is
    the key, so underscores in keys survive:

        TFMDOC_LOGGING_LEVEL=debug        -> logging.level
        TFMDOC_MODULE_REPO_URL=https://.. -> module.repo_url

    Example:
        config = Config(".tfmdoc.yaml")
        config.get("toc.depth")          # 3 unless overridden
        config.get("missing.key", "x")   # "x"
    """

    def __init__(
        self,
        fname: str | Path | None = None,
        enable_env_overrides: bool = True,
        env_prefix: str = ENV_PREFIX,
    ):
        """
        Initialize configuration.

        Args:
            fname: Path to a YAML configuration file, or None for defaults only
            enable_env_overrides: Whether to apply environment variable overrides
            env_prefix: Prefix for environment variables (default: 'TFMDOC_')

        Raises:
            ConfigError: If the file is missing, too large or not a YAML mapping
        """
        self._env_prefix = env_prefix
        self._path: Path | None = None
        self._data: dict[str, Any] = copy.deepcopy(DEFAULTS)

        if fname is not None:
            fname_path = Path(fname)
            if not fname_path.is_file():
                raise ConfigError("configuration file not found", path=fname_path)
            _check_file_size(fname_path)
            self._path = fname_path.resolve()
            _merge(self._data, _load_yaml(fname_path))

        if enable_env_overrides:
            self._apply_env_overrides()

    @property
    def path(self) -> Path | None:
        """Resolved path of the loaded file, or None when only defaults are used."""
        return self._path

    def get(self, key: str, default: Any = None) -> Any:
        """Look up a dotted key such as 'toc.depth'."""
        current: Any = self._data
        for part in key.split("."):
            if not isinstance(current, dict) or part not in current:
                return default
            current = current[part]
        return current

    def set(self, key: str, value: Any) -> None:
        """Set a dotted key, creating intermediate sections as needed."""
        parts = key.split(".")
        current = self._data
        for part in parts[:-1]:
            if not isinstance(current.get(part), dict):
                current[part] = {}
            current = current[part]
        current[parts[-1]] = value

    def get_int(self, key: str, default: int | None = None, minimum: int = 0) -> int:
        """
        Look up a dotted key that must hold a whole number.

        Raises:
            ConfigError: If the value is missing, not an integer or below minimum
        """
        value = self.get(key, default)
        if isinstance(value, bool) or not isinstance(value, int):
            raise ConfigError(f"'{key}' must be an integer", value=value)
        if value < minimum:
            raise ConfigError(f"'{key}' must be at least {minimum}", value=value)
        return value

    def _apply_env_overrides(self) -> None:
        """Apply TFMDOC_* environment variables on top of file values."""
        for key, value in self.get_env_overrides().items():
            self.set(key, value)

    def get_env_overrides(self) -> dict[str, Any]:
        """
        Collect the environment overrides that apply to this config.

        Returns:
            Mapping of dotted key to converted value
        """
        overrides = {}
        for env_key, env_value in os.environ.items():
            if not env_key.startswith(self._env_prefix):
                continue
            section, _, key = env_key[len(self._env_prefix) :].lower().partition("_")
            if not section or not key:
                continue
            if section in STRING_SECTIONS:
                overrides[f"{section}.{key}"] = env_value
            else:
                overrides[f"{section}.{key}"] = self._convert_env_value(env_value)
        return overrides

    @staticmethod
    def _convert_env_value(value: str) -> bool | int | float | str | None:
        """Convert an environment variable string to a typed value."""
        if value.lower() in ("null", "none", ""):
            return None

        if value.lower() in ("true", "false"):
            return value.lower() == "true"

        try:
            if "." in value:
                return float(value)
            return int(value)
        except ValueError:
            pass

        return value


def find_default_config(start: Path | None = None) -> Path | None:
    """
    Look for .tfmdoc.yaml in the start directory (cwd by default).

    Returns:
        Path to the file, or None if there is none
    """
    candidate = (start or Path.cwd()) / DEFAULT_CONFIG_FILENAME
    return candidate if candidate.is_file() else None
