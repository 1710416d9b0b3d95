"""Print the table of contents of a Markdown file."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from ...exceptions import ToolError
from ...markdown import build_toc
from .base import Tool, ToolConfig


class TocTool(Tool):
    """
    Print a numbered, linked table of contents for a Markdown document.

    Example:
        tfmdoc toc README.md --depth 2 --skip 1
        cat README.md | tfmdoc toc -
    """

    def __init__(self, out=None):
        config = ToolConfig(
            name="toc",
            help_text="Print a table of contents for a Markdown file",
            description=(
                "Scan ATX (#) and setext (=== / ---) headings and print them "
                "as an indented ordered list of anchor links."
            ),
        )
        super().__init__(config, out)

    def add_args(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument("file", help="Markdown file, or '-' for stdin")
        parser.add_argument(
            "-d",
            "--depth",
            type=int,
            default=0,
            help="Deepest heading level to include, 0 for all (default: 0)",
        )
        parser.add_argument(
            "-s",
            "--skip",
            type=int,
            default=0,
            help="Number of leading headings to leave out (default: 0)",
        )

    def _read(self, name: str) -> bytes:
        if name == "-":
            return sys.stdin.buffer.read()
        try:
            return Path(name).read_bytes()
        except OSError as e:
            raise ToolError(f"cannot read document: {e}", path=name) from e

    def run(self, args: argparse.Namespace) -> int:
        lines = build_toc(self._read(args.file), args.depth, args.skip)
        self.out.write("\n".join(lines))
        self.lg.debug("built table of contents", extra={"entries": len(lines) - 2})
        return 0
