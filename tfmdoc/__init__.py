"""
tfmdoc - Markdown documentation for Terraform modules.

Renders variable, output, resource, data source and module-call tables
from module metadata, and splices them together with a generated table of
contents into a README template.
"""

from importlib.metadata import PackageNotFoundError, version

from .exceptions import (
    ConfigError,
    DocsError,
    ModuleLoadError,
    ScanError,
    TemplateError,
    ToolError,
    ValidationError,
)
from .markdown import TableSpec, build_toc, render_table, render_toc, slugify

try:
    __version__ = version("tfmdoc")
except PackageNotFoundError:
    # Package not installed, use fallback (development mode)
    __version__ = "0.3.0-dev"

__all__ = [
    "__version__",
    # Markdown core
    "slugify",
    "build_toc",
    "render_toc",
    "TableSpec",
    "render_table",
    # Exceptions
    "DocsError",
    "ConfigError",
    "ValidationError",
    "ScanError",
    "ModuleLoadError",
    "TemplateError",
    "ToolError",
]
