"""
Configuration-related constants and resource limits.
"""

# Maximum config file size (1MB); a docs config is a handful of keys
MAX_CONFIG_SIZE_BYTES = 1024 * 1024

ENV_PREFIX = "TFMDOC_"

DEFAULT_CONFIG_FILENAME = ".tfmdoc.yaml"

# Built-in defaults, lowest precedence
DEFAULTS: dict = {
    "module": {
        "path": None,
        "repo_url": "",
        "module_path": "",
    },
    "toc": {
        "depth": 3,
        "skip": 0,
    },
    "logging": {
        "level": "info",
        "colors": True,
    },
}

# Sections whose environment overrides are kept as raw strings (URLs, paths)
STRING_SECTIONS = ("module",)
