"""Tests for tfmdoc.extract table builders."""

import pytest

from tfmdoc.exceptions import ValidationError
from tfmdoc.extract import (
    TABLES,
    data_sources_table,
    managed_resources_table,
    modules_table,
    outputs_table,
    render_module_table,
    source_link,
    variables_table,
)
from tfmdoc.inspect import Module, SourcePos, Variable, module_from_inspect_json

BASE = "https://git.example.com/infra/-/blob/main"
MODULE_PATH = "modules/bucket"


@pytest.fixture
def module(inspect_data) -> Module:
    return module_from_inspect_json(inspect_data)


def _link(filename: str, line: int) -> str:
    return f"[{filename}: {line}]({BASE}/{MODULE_PATH}/{filename}#L{line})"


class TestSourceLink:
    """Tests for source_link()."""

    def test_format(self):
        pos = SourcePos("/abs/path/modules/bucket/main.tf", 42)

        assert source_link(pos, BASE, MODULE_PATH) == (
            f"[main.tf: 42]({BASE}/modules/bucket/main.tf#L42)"
        )

    def test_empty_base_and_module_path(self):
        assert source_link(SourcePos("main.tf", 1), "", "") == "[main.tf: 1](//main.tf#L1)"


class TestVariablesTable:
    """Tests for variables_table()."""

    def test_headers_and_rules(self, module):
        table = variables_table(module, BASE, MODULE_PATH)

        assert list(table.headers) == ["Variable", "Type", "Description", "Code Position"]
        assert list(table.column_rules) == ["----", "------", "--------", "------"]

    def test_rows_sorted_by_name(self, module):
        table = variables_table(module, BASE, MODULE_PATH)
        assert [row[0] for row in table.rows] == ["alpha", "mu", "zeta"]

    def test_row_content(self, module):
        alpha = variables_table(module, BASE, MODULE_PATH).rows[0]

        assert list(alpha) == [
            "alpha",
            "list(string)",
            "First line\nsecond line",
            _link("variables.tf", 1),
        ]

    def test_rendered(self, module):
        lines = render_module_table("vars", module, BASE, MODULE_PATH).split("\n")

        assert lines[0] == "| Variable | Type | Description | Code Position |"
        assert lines[2] == (
            f"| alpha | list(string) | First line<br>second line | {_link('variables.tf', 1)} |"
        )
        assert lines[3] == f"| mu |  |  | {_link('variables.tf', 5)} |"
        assert len(lines) == 5

    def test_order_independent_of_input_order(self):
        pos = SourcePos("v.tf", 1)
        forward = Module(".", variables={n: Variable(n, pos) for n in ["zeta", "alpha", "mu"]})
        backward = Module(".", variables={n: Variable(n, pos) for n in ["mu", "alpha", "zeta"]})

        assert variables_table(forward).rows == variables_table(backward).rows
        assert [r[0] for r in variables_table(forward).rows] == ["alpha", "mu", "zeta"]


class TestOtherTables:
    """Tests for the output, resource, data source and module tables."""

    def test_outputs(self, module):
        table = outputs_table(module, BASE, MODULE_PATH)

        assert list(table.headers) == ["Output name", "Description", "Code Position"]
        assert [list(r) for r in table.rows] == [
            ["arn", "Bucket ARN", _link("outputs.tf", 5)],
            ["bucket_id", "Bucket ID", _link("outputs.tf", 1)],
        ]

    def test_managed_resources_same_name_different_type(self, module):
        table = managed_resources_table(module, BASE, MODULE_PATH)

        assert list(table.headers) == ["Resource Name", "Resource Type", "Code Position"]
        assert [(r[0], r[1]) for r in table.rows] == [
            ("bucket", "aws_kms_key"),
            ("this", "aws_s3_bucket"),
            ("this", "aws_s3_bucket_policy"),
        ]
        assert table.rows[0][2] == _link("kms.tf", 3)

    def test_data_sources(self, module):
        table = data_sources_table(module, BASE, MODULE_PATH)
        assert [list(r) for r in table.rows] == [
            ["bucket", "aws_iam_policy_document", _link("policy.tf", 2)]
        ]

    def test_modules(self, module):
        table = modules_table(module, BASE, MODULE_PATH)

        assert list(table.headers) == ["Module Name", "Module Source", "Module Location"]
        assert list(table.column_rules) == ["----", "--------", "------"]
        assert [list(r) for r in table.rows] == [
            ["logging", "../logging", _link("main.tf", 20)]
        ]

    def test_empty_module(self):
        text = render_module_table("outputs", Module("."))
        assert text == "| Output name | Description | Code Position |\n| ---- | -------- | ------ |"


class TestRenderModuleTable:
    """Tests for the TABLES registry."""

    def test_registry_kinds(self):
        assert set(TABLES) == {"vars", "outputs", "resources", "data-sources", "modules"}

    def test_unknown_kind(self, module):
        with pytest.raises(ValidationError, match="unknown table kind"):
            render_module_table("locals", module)
