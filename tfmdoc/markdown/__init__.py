"""
Markdown document assembly: heading slugs, table of contents and tables.

Example:
    from tfmdoc.markdown import TableSpec, render_table, render_toc

    print(render_toc(open("README.tpl.md", "rb").read(), max_depth=3))
    print(render_table(TableSpec(["Name"], ["----"], [["vpc_id"]])))
"""

from .slug import slugify
from .table import TableSpec, escape_cell, render_table
from .toc import (
    TOC_TITLE,
    HeadingEvent,
    LineKind,
    SlugRegistry,
    TocEntry,
    build_toc,
    build_toc_entries,
    classify_line,
    render_toc,
    scan_headings,
)

__all__ = [
    "slugify",
    "TableSpec",
    "escape_cell",
    "render_table",
    "TOC_TITLE",
    "HeadingEvent",
    "LineKind",
    "SlugRegistry",
    "TocEntry",
    "build_toc",
    "build_toc_entries",
    "classify_line",
    "render_toc",
    "scan_headings",
]
