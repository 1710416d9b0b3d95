"""Shared options for tools that document a Terraform module."""

from __future__ import annotations

import argparse

from ...exceptions import ToolError
from ...inspect import Module, load_module
from .base import Tool


class ModuleTool(Tool):
    """Tool that loads a module given --path, --repo-url and --module-path."""

    def add_args(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument(
            "--path",
            help="Terraform module directory, or terraform-config-inspect JSON output",
        )
        parser.add_argument(
            "--repo-url", dest="repo_url", help="URL prefix for source links"
        )
        parser.add_argument(
            "--module-path",
            dest="module_path",
            help="Path of the module relative to the repository",
        )

    def link_base(self, args: argparse.Namespace) -> tuple[str, str]:
        """(repo_url, module_path), used verbatim in source links."""
        repo_url = self.option(args, "repo_url", "module.repo_url") or ""
        module_path = self.option(args, "module_path", "module.module_path") or ""
        return str(repo_url), str(module_path)

    def load(self, args: argparse.Namespace) -> Module:
        """
        Load the module named by --path or module.path in the config.

        Raises:
            ToolError: If no path is given
            ModuleLoadError: If the module cannot be loaded
        """
        path = self.option(args, "path", "module.path")
        if not path:
            raise ToolError("no module path set (use --path or module.path)")
        return load_module(str(path), self.lg)
