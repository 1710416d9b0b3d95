"""Subcommands of the tfmdoc CLI."""

from .base import Tool, ToolConfig
from .render_tool import RenderTool
from .table_tool import TABLE_KINDS, TableTool
from .toc_tool import TocTool
from .version_tool import VersionTool

__all__ = [
    "Tool",
    "ToolConfig",
    "RenderTool",
    "TABLE_KINDS",
    "TableTool",
    "TocTool",
    "VersionTool",
]
