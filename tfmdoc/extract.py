"""
Table builders: map Module metadata onto TableSpec rows.

Each builder keys its rows by item name and sorts by that key, so output
never depends on the order in which the inspector returned items. Every
table ends with a source-location link of the form::

    [main.tf: 12](https://git.example.com/repo/blob/main/modules/vpc/main.tf#L12)
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

from .exceptions import ValidationError
from .inspect.models import Module, Resource, SourcePos
from .markdown.table import TableRow, TableSpec, render_table

VARIABLE_HEADERS = ["Variable", "Type", "Description", "Code Position"]
VARIABLE_RULES = ["----", "------", "--------", "------"]

OUTPUT_HEADERS = ["Output name", "Description", "Code Position"]
RESOURCE_HEADERS = ["Resource Name", "Resource Type", "Code Position"]
MODULE_HEADERS = ["Module Name", "Module Source", "Module Location"]
THREE_COLUMN_RULES = ["----", "--------", "------"]


def source_link(pos: SourcePos, base_url: str, module_path: str) -> str:
    """Render a line-anchored link to where an item is declared."""
    tffile = pos.basename
    return f"[{tffile}: {pos.line}]({base_url}/{module_path}/{tffile}#L{pos.line})"


def _sorted_rows(keyed: Iterable[tuple[Any, TableRow]]) -> list[TableRow]:
    """Sort (key, row) pairs by key; a later duplicate key replaces an earlier one."""
    rows = dict(keyed)
    return [rows[key] for key in sorted(rows)]


def variables_table(module: Module, base_url: str = "", module_path: str = "") -> TableSpec:
    rows = _sorted_rows(
        (
            v.name,
            [v.name, v.type, v.description, source_link(v.pos, base_url, module_path)],
        )
        for v in module.variables.values()
    )
    return TableSpec(VARIABLE_HEADERS, VARIABLE_RULES, rows)


def outputs_table(module: Module, base_url: str = "", module_path: str = "") -> TableSpec:
    rows = _sorted_rows(
        (o.name, [o.name, o.description, source_link(o.pos, base_url, module_path)])
        for o in module.outputs.values()
    )
    return TableSpec(OUTPUT_HEADERS, THREE_COLUMN_RULES, rows)


def _resource_rows(
    resources: Iterable[Resource], base_url: str, module_path: str
) -> list[TableRow]:
    # Same-named resources of different types are both kept, ordered by type
    return _sorted_rows(
        ((r.name, r.type), [r.name, r.type, source_link(r.pos, base_url, module_path)])
        for r in resources
    )


def managed_resources_table(
    module: Module, base_url: str = "", module_path: str = ""
) -> TableSpec:
    rows = _resource_rows(module.managed_resources.values(), base_url, module_path)
    return TableSpec(RESOURCE_HEADERS, THREE_COLUMN_RULES, rows)


def data_sources_table(
    module: Module, base_url: str = "", module_path: str = ""
) -> TableSpec:
    rows = _resource_rows(module.data_resources.values(), base_url, module_path)
    return TableSpec(RESOURCE_HEADERS, THREE_COLUMN_RULES, rows)


def modules_table(module: Module, base_url: str = "", module_path: str = "") -> TableSpec:
    rows = _sorted_rows(
        (m.name, [m.name, m.source, source_link(m.pos, base_url, module_path)])
        for m in module.module_calls.values()
    )
    return TableSpec(MODULE_HEADERS, THREE_COLUMN_RULES, rows)


TableBuilder = Callable[[Module, str, str], TableSpec]

TABLES: dict[str, TableBuilder] = {
    "vars": variables_table,
    "outputs": outputs_table,
    "resources": managed_resources_table,
    "data-sources": data_sources_table,
    "modules": modules_table,
}


def render_module_table(
    kind: str, module: Module, base_url: str = "", module_path: str = ""
) -> str:
    """
    Build and render one table by kind ('vars', 'outputs', 'resources',
    'data-sources' or 'modules').

    Raises:
        ValidationError: If kind is unknown
    """
    builder = TABLES.get(kind)
    if builder is None:
        raise ValidationError(
            f"unknown table kind '{kind}'", choices=", ".join(sorted(TABLES))
        )
    return render_table(builder(module, base_url, module_path))
