"""
Exception hierarchy for tfmdoc.

Every error raised by the package derives from DocsError, so the command
line entry point can catch a single type and turn it into an exit status.
"""

from typing import Any


class DocsError(Exception):
    """
    Base exception for all tfmdoc errors.

    Example:
        try:
            toc = build_toc(data)
        except DocsError as e:
            lg.error(f"documentation failed: {e}")
    """

    def __init__(self, message: str, **context: Any) -> None:
        """
        Initialize the exception with a message and optional context.

        Args:
            message: Human-readable error message
            **context: Additional context information (stored in self.context)
        """
        super().__init__(message)
        self.message = message
        self.context = context

    def __str__(self) -> str:
        """String representation with context if available."""
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message


class ConfigError(DocsError):
    """
    Configuration-related errors.

    Examples:
        - Config file not found or too large
        - Invalid YAML syntax
        - Root of the document is not a mapping
    """

    pass


class ValidationError(DocsError):
    """Invalid argument values, such as a negative TOC depth."""

    pass


class ScanError(DocsError):
    """
    Raised when the table of contents scan cannot read its input.

    A partially built table of contents is never returned alongside
    this error.
    """

    pass


class ModuleLoadError(DocsError):
    """
    Terraform module metadata could not be loaded.

    Examples:
        - Module path does not exist
        - Inspection JSON is malformed or reports error diagnostics
        - A .tf file is not valid HCL
    """

    pass


class TemplateError(DocsError):
    """Template loading or rendering failed."""

    pass


class ToolError(DocsError):
    """
    Command-line tool errors.

    Examples:
        - Required option missing from both flags and config
        - Output file cannot be written
    """

    pass
