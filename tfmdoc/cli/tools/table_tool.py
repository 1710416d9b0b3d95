"""Print one documentation table for a module."""

from __future__ import annotations

import argparse

from ...extract import render_module_table
from .base import ToolConfig
from .module_tool import ModuleTool

_TABLE_TOOLS = {
    "vars": ToolConfig(
        name="vars",
        aliases=["variables"],
        help_text="Print the input variables table",
    ),
    "outputs": ToolConfig(name="outputs", help_text="Print the outputs table"),
    "resources": ToolConfig(
        name="resources",
        aliases=["managed-resources"],
        help_text="Print the managed resources table",
    ),
    "data-sources": ToolConfig(
        name="data-sources",
        aliases=["data"],
        help_text="Print the data sources table",
    ),
    "modules": ToolConfig(
        name="modules",
        aliases=["module-calls"],
        help_text="Print the module calls table",
    ),
}

TABLE_KINDS = tuple(_TABLE_TOOLS)


class TableTool(ModuleTool):
    """
    Print a Markdown table for one kind of module item.

    Example:
        tfmdoc vars --path modules/vpc --repo-url https://git.example.com/infra/-/blob/main --module-path modules/vpc
    """

    def __init__(self, kind: str, out=None):
        self.kind = kind
        super().__init__(_TABLE_TOOLS[kind], out)

    def run(self, args: argparse.Namespace) -> int:
        module = self.load(args)
        repo_url, module_path = self.link_base(args)
        self.out.write(render_module_table(self.kind, module, repo_url, module_path))
        self.lg.debug("rendered table", extra={"kind": self.kind})
        return 0
