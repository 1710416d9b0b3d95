"""
Command-line interface for tfmdoc.

Usage:
    tfmdoc vars --path modules/vpc --repo-url https://git.example.com/infra/-/blob/main
    tfmdoc render --path modules/vpc --template modules/vpc/README.tpl.md -o README.md
    tfmdoc toc README.md --depth 2
"""

from .output import BufferedOutput, ConsoleOutput, OutputWriter

__all__ = [
    "BufferedOutput",
    "ConsoleOutput",
    "OutputWriter",
]
