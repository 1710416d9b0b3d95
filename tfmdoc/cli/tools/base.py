"""
Base tool class for tfmdoc subcommands.

A tool declares its name and help through ToolConfig, adds its arguments to
an argparse subparser and implements run(). Logging and configuration are
attached by setup() before run() is called.
"""

from __future__ import annotations

import argparse
from dataclasses import dataclass, field
from typing import Any

from ...config import Config
from ...exceptions import ToolError
from ...log import Logger, LoggerFactory
from ..output import ConsoleOutput, OutputWriter


@dataclass
class ToolConfig:
    """Configuration for a tool."""

    name: str
    aliases: list[str] = field(default_factory=list)
    help_text: str = ""
    description: str = ""


class Tool:
    """
    Base class for subcommands.

    Subclasses either pass a ToolConfig to __init__ or override
    _create_config().
    """

    def __init__(self, config: ToolConfig | None = None, out: OutputWriter | None = None):
        self.config = config or self._create_config()
        self.out: OutputWriter = out if out is not None else ConsoleOutput()
        self._logger: Logger | None = None
        self._settings: Config | None = None

    def _create_config(self) -> ToolConfig:
        """Create default configuration. Override in subclasses."""
        raise ToolError("tool has no name", cls=self.__class__.__name__)

    @property
    def name(self) -> str:
        return self.config.name

    @property
    def cmd(self) -> tuple[list[str], dict[str, Any]]:
        """(args, kwargs) for subparsers.add_parser()."""
        return [self.name], {
            "aliases": self.config.aliases,
            "help": self.config.help_text,
            "description": self.config.description or self.config.help_text,
        }

    @property
    def lg(self) -> Logger:
        """
        Get the logger instance.

        Raises:
            ToolError: If accessed before setup() is called
        """
        if self._logger is None:
            raise ToolError(f"logger not initialized for tool '{self.name}'")
        return self._logger

    @property
    def settings(self) -> Config:
        """Layered configuration; defaults only until setup() is called."""
        if self._settings is None:
            self._settings = Config(enable_env_overrides=False)
        return self._settings

    def add_args(self, parser: argparse.ArgumentParser) -> None:
        """Add tool-specific arguments. Override in subclasses."""
        pass

    def setup(self, lg: Logger, settings: Config) -> None:
        """Attach a derived logger and the loaded configuration."""
        self._logger = LoggerFactory.derive(lg, self.name)
        self._settings = settings
        self.configure()

    def configure(self) -> None:
        """Hook run at the end of setup(). Override in subclasses."""
        pass

    def option(self, args: argparse.Namespace, dest: str, key: str) -> Any:
        """
        Resolve an option: command-line value if given, else the config value.

        Args:
            args: Parsed arguments
            dest: Attribute name on args
            key: Dotted config key
        """
        value = getattr(args, dest, None)
        if value is not None:
            return value
        return self.settings.get(key)

    def int_option(self, args: argparse.Namespace, dest: str, key: str) -> int:
        """
        Resolve a whole-number option; config values are type checked.

        Raises:
            ConfigError: If the config value is not a non-negative integer
        """
        value = getattr(args, dest, None)
        if value is not None:
            return value
        return self.settings.get_int(key)

    def run(self, args: argparse.Namespace) -> int:
        """Run the tool and return an exit code."""
        raise NotImplementedError
