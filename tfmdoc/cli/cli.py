#!/usr/bin/env python3
"""
tfmdoc CLI - Markdown documentation for Terraform modules.

Usage:
    tfmdoc vars --path modules/vpc
    tfmdoc render --path modules/vpc --template README.tpl.md -o README.md
    tfmdoc toc README.md
    tfmdoc --help
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

import tfmdoc
from tfmdoc.cli.output import OutputWriter
from tfmdoc.cli.tools import (
    TABLE_KINDS,
    RenderTool,
    TableTool,
    TocTool,
    Tool,
    VersionTool,
)
from tfmdoc.config import Config, find_default_config
from tfmdoc.exceptions import DocsError
from tfmdoc.log import LogConfig, Logger, LoggerFactory


def _build_tools(out: OutputWriter | None = None) -> list[Tool]:
    """Instantiate every subcommand, sharing one output writer."""
    tools: list[Tool] = [TableTool(kind, out) for kind in TABLE_KINDS]
    tools += [RenderTool(out), TocTool(out), VersionTool(out)]
    return tools


def build_parser(tools: Sequence[Tool]) -> argparse.ArgumentParser:
    """Build the argument parser with one subparser per tool."""
    parser = argparse.ArgumentParser(
        prog="tfmdoc",
        description="Generate Markdown documentation for Terraform modules",
    )
    parser.add_argument(
        "-v", "--version", action="version", version=f"tfmdoc {tfmdoc.__version__}"
    )
    parser.add_argument(
        "-c", "--config", help="YAML config file (default: ./.tfmdoc.yaml if present)"
    )
    parser.add_argument(
        "--log-level", dest="log_level", help="trace, debug, info, warning, error or false"
    )
    parser.add_argument(
        "--no-color", dest="colors", action="store_false", default=None,
        help="Disable colored log output",
    )

    subs = parser.add_subparsers(dest="command", metavar="COMMAND", required=True)
    for tool in tools:
        cmd_args, cmd_kwargs = tool.cmd
        sub = subs.add_parser(*cmd_args, **cmd_kwargs)
        tool.add_args(sub)
        sub.set_defaults(tool=tool)
    return parser


def _setup(args: argparse.Namespace) -> tuple[Config, Logger]:
    """Load configuration and create the root logger; flags win over config."""
    config = Config(args.config or find_default_config())
    if args.log_level is not None:
        config.set("logging.level", args.log_level)
    if args.colors is not None:
        config.set("logging.colors", args.colors)
    return config, LoggerFactory.create_root(LogConfig.from_config(config))


def main(argv: Sequence[str] | None = None, out: OutputWriter | None = None) -> int:
    """
    Main entry point for the tfmdoc CLI.

    Returns:
        0 on success, 1 when documentation could not be produced. Usage
        errors exit with status 2 through argparse.
    """
    parser = build_parser(_build_tools(out))
    args = parser.parse_args(argv)

    try:
        config, lg = _setup(args)
    except DocsError as e:
        print(f"tfmdoc: error: {e}", file=sys.stderr)
        return 1

    tool: Tool = args.tool
    try:
        tool.setup(lg, config)
        return tool.run(args)
    except DocsError as e:
        tool.lg.error(str(e), extra={"command": tool.name})
        return 1


if __name__ == "__main__":
    sys.exit(main())
