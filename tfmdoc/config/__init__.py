"""
Configuration package.

Config loads an optional YAML file, layers TFMDOC_* environment overrides on
top and exposes dotted-key access:

    config = Config(".tfmdoc.yaml")
    depth = config.get("toc.depth")
"""

from .config import Config, find_default_config
from .constants import DEFAULT_CONFIG_FILENAME, DEFAULTS, ENV_PREFIX, MAX_CONFIG_SIZE_BYTES

__all__ = [
    "Config",
    "find_default_config",
    "DEFAULTS",
    "DEFAULT_CONFIG_FILENAME",
    "ENV_PREFIX",
    "MAX_CONFIG_SIZE_BYTES",
]
