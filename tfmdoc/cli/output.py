"""
Output abstraction for CLI tools.

Tools write Markdown through an OutputWriter so tests can inspect what was
produced without capturing stdout.
"""

import sys
from typing import Protocol, TextIO


class OutputWriter(Protocol):
    """Protocol for CLI output writing."""

    def write(self, text: str = "") -> None:
        """Write text with trailing newline."""
        ...

    def write_raw(self, text: str) -> None:
        """Write text without trailing newline."""
        ...


class ConsoleOutput:
    """
    Output writer for a stream (stdout by default).

    Example:
        out = ConsoleOutput()
        out.write("| Variable | Type |")
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream if stream is not None else sys.stdout

    def write(self, text: str = "") -> None:
        print(text, file=self._stream)

    def write_raw(self, text: str) -> None:
        print(text, end="", file=self._stream)

    def flush(self) -> None:
        self._stream.flush()


class BufferedOutput:
    """
    Output writer that captures output in memory.

    Example:
        out = BufferedOutput()
        out.write("Line 1")
        out.write_raw("partial")
        assert out.text == "Line 1\\npartial"
    """

    def __init__(self) -> None:
        self._parts: list[str] = []

    def write(self, text: str = "") -> None:
        self._parts.append(text + "\n")

    def write_raw(self, text: str) -> None:
        self._parts.append(text)

    def flush(self) -> None:
        pass

    @property
    def text(self) -> str:
        """Everything written so far, exactly as written."""
        return "".join(self._parts)

    @property
    def lines(self) -> list[str]:
        """Written text split into lines, without terminators."""
        return self.text.splitlines()

    def clear(self) -> None:
        self._parts.clear()
