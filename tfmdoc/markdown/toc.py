"""
Table of contents generation for Markdown documents.

The document is scanned once, line by line, keeping only the previous line
as look-back. Each line is classified as an ATX heading (``# Title``), a
setext underline (``===`` or ``---`` under a non-blank line) or plain text.
Headings are filtered by depth, the first ``skip`` survivors are dropped,
and the rest become numbered list items linking to their slugs.

All scan state (previous line, slug counters) lives inside one call, so
building the TOC of one document never affects the numbering of another.
"""

from __future__ import annotations

import enum
import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import NamedTuple

from ..exceptions import ScanError, ValidationError
from .slug import slugify

TOC_TITLE = "Table of Contents"
INDENT = "   "

_ATX = re.compile(r"(#+) ?(.+)")
_SETEXT1 = re.compile(r"=+")
_SETEXT2 = re.compile(r"-+")

Document = bytes | str | Iterable[str]


class LineKind(enum.Enum):
    ATX = "atx"
    SETEXT1 = "setext1"
    SETEXT2 = "setext2"
    PLAIN = "plain"


class LineClass(NamedTuple):
    """Result of classifying one line; level is the heading level (1-based)."""

    kind: LineKind
    title: str = ""
    level: int = 0


_PLAIN = LineClass(LineKind.PLAIN)


def classify_line(line: str, previous: str | None) -> LineClass:
    """
    Classify a line given the line before it.

    Setext underlines only count when the previous line has content;
    otherwise a run of '=' or '-' is plain text (or a thematic break).
    """
    m = _ATX.fullmatch(line)
    if m:
        return LineClass(LineKind.ATX, m.group(2), len(m.group(1)))

    if previous is None or not previous.strip():
        return _PLAIN
    if _SETEXT1.fullmatch(line):
        return LineClass(LineKind.SETEXT1, previous, 1)
    if _SETEXT2.fullmatch(line):
        return LineClass(LineKind.SETEXT2, previous, 2)
    return _PLAIN


@dataclass(frozen=True)
class HeadingEvent:
    """A heading found by the scan; depth is zero-based."""

    title: str
    depth: int
    source_order: int


@dataclass(frozen=True)
class TocEntry:
    title: str
    slug: str
    depth: int

    def render(self) -> str:
        """Render as an indented ordered-list link."""
        return f"{INDENT * self.depth}1. [{self.title}](#{self.slug})"


class SlugRegistry:
    """
    Hands out unique slugs for one TOC build.

    The first claim of a slug returns it unchanged; later claims return
    ``slug-1``, ``slug-2``, ... skipping any candidate already handed out.
    """

    def __init__(self) -> None:
        self._seen: dict[str, int] = {}

    def claim(self, slug: str) -> str:
        if slug not in self._seen:
            self._seen[slug] = 1
            return slug

        while True:
            candidate = f"{slug}-{self._seen[slug]}"
            self._seen[slug] += 1
            if candidate not in self._seen:
                self._seen[candidate] = 1
                return candidate

    def __contains__(self, slug: object) -> bool:
        return slug in self._seen

    def __len__(self) -> int:
        return len(self._seen)


def _iter_lines(document: Document) -> Iterator[str]:
    """Yield lines without their terminators; a trailing CR is dropped too."""
    if isinstance(document, (bytes, bytearray)):
        document = bytes(document).decode("utf-8")

    lines: Iterable[str]
    if isinstance(document, str):
        text = document[:-1] if document.endswith("\n") else document
        lines = text.split("\n") if text else []
    else:
        lines = (line[:-1] if line.endswith("\n") else line for line in document)

    for line in lines:
        yield line[:-1] if line.endswith("\r") else line


def _check_limits(max_depth: int, skip: int) -> None:
    if max_depth < 0:
        raise ValidationError("max depth must not be negative", max_depth=max_depth)
    if skip < 0:
        raise ValidationError("skip count must not be negative", skip=skip)


def scan_headings(document: Document, max_depth: int = 0) -> Iterator[HeadingEvent]:
    """
    Yield the headings of a document in source order.

    Args:
        document: Markdown as bytes (UTF-8), str or an iterable of lines
        max_depth: Deepest heading level to keep (1 = '#' only); 0 keeps all

    Raises:
        ScanError: If the input cannot be read or decoded
    """
    previous: str | None = None
    order = 0
    try:
        for line in _iter_lines(document):
            line_class = classify_line(line, previous)
            previous = line
            if line_class.kind is LineKind.PLAIN:
                continue

            order += 1
            if max_depth > 0 and line_class.level > max_depth:
                continue
            yield HeadingEvent(line_class.title, line_class.level - 1, order - 1)
    except (OSError, UnicodeDecodeError) as e:
        raise ScanError(f"failed to read document: {e}", line=order) from e


def build_toc_entries(
    document: Document, max_depth: int = 0, skip: int = 0
) -> list[TocEntry]:
    """
    Build TOC entries for a document.

    Args:
        document: Markdown as bytes, str or an iterable of lines
        max_depth: Deepest heading level to include; 0 means unlimited
        skip: Number of leading headings to leave out (e.g. the document title)

    Returns:
        One entry per emitted heading, in source order

    Raises:
        ScanError: If the input cannot be read or decoded
        ValidationError: If max_depth or skip is negative
    """
    _check_limits(max_depth, skip)

    registry = SlugRegistry()
    entries = []
    for event in scan_headings(document, max_depth):
        if skip > 0:
            skip -= 1
            continue
        slug = registry.claim(slugify(event.title))
        entries.append(TocEntry(event.title, slug, event.depth))
    return entries


def build_toc(document: Document, max_depth: int = 0, skip: int = 0) -> list[str]:
    """
    Build the TOC lines: a two-line title banner followed by one line per entry.

    Example:
        >>> build_toc(b"# Intro\\n## Usage\\n")
        ['Table of Contents', '=================', '1. [Intro](#intro)', '   1. [Usage](#usage)']
    """
    entries = build_toc_entries(document, max_depth, skip)
    return [TOC_TITLE, "=" * len(TOC_TITLE)] + [entry.render() for entry in entries]


def render_toc(document: Document, max_depth: int = 0, skip: int = 0) -> str:
    """Build the TOC and join it into one Markdown string."""
    return "\n".join(build_toc(document, max_depth, skip))
