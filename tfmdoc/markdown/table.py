"""
Markdown table rendering.

Tables are rendered without any validation: rule tokens are copied
verbatim and rows whose length differs from the header are emitted as they
are, producing a visibly misaligned table rather than an error.
"""

import re
from collections.abc import Sequence
from dataclasses import dataclass, field

_NEWLINE = re.compile(r"\r?\n")

TableRow = Sequence[str]


@dataclass
class TableSpec:
    """Headers, per-column rule tokens (e.g. '----' or ':---:') and rows."""

    headers: Sequence[str]
    column_rules: Sequence[str]
    rows: list[TableRow] = field(default_factory=list)


def escape_cell(text: str) -> str:
    """
    Keep a cell on one physical line by turning newlines into <br>.

    Pipes are not escaped; a '|' in the content splits the cell.
    """
    return _NEWLINE.sub("<br>", text)


def _row(cells: Sequence[str]) -> str:
    return "|" + "".join(f" {cell} |" for cell in cells)


def render_table(table: TableSpec) -> str:
    """
    Render a TableSpec as Markdown.

    Returns:
        Header row, rule row and one line per data row, joined with newlines
        and without a trailing newline.

    Example:
        >>> print(render_table(TableSpec(["Variable", "Type"], ["----", "------"], [["x", "string"]])))
        | Variable | Type |
        | ---- | ------ |
        | x | string |
    """
    lines = [_row(table.headers), _row(table.column_rules)]
    lines.extend(_row([escape_cell(cell) for cell in row]) for row in table.rows)
    return "\n".join(lines)
