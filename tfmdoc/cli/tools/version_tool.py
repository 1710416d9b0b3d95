"""Version information tool."""

from __future__ import annotations

import argparse
import importlib
from typing import Any

import tfmdoc

from .base import Tool, ToolConfig


def _get_build_info() -> dict[str, Any]:
    """Build info written by setup.py at build time, if present."""
    try:
        build_info = importlib.import_module("tfmdoc._build_info")
    except ImportError:
        return {"commit": None, "modified": None}
    return {
        "commit": getattr(build_info, "COMMIT_SHORT", "") or None,
        "modified": getattr(build_info, "MODIFIED", None),
    }


class VersionTool(Tool):
    """Display version and build information."""

    def __init__(self, out=None):
        super().__init__(ToolConfig(name="version", help_text="Show version"), out)

    def run(self, args: argparse.Namespace) -> int:
        build = _get_build_info()
        if build["commit"]:
            dirty = "*" if build["modified"] else ""
            self.out.write(f"tfmdoc {tfmdoc.__version__} ({build['commit']}{dirty})")
        else:
            self.out.write(f"tfmdoc {tfmdoc.__version__}")
        return 0
