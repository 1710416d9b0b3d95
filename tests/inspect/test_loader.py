"""Tests for tfmdoc.inspect.loader."""

import io
import json

import pytest

from tfmdoc.exceptions import ModuleLoadError
from tfmdoc.inspect import (
    Module,
    SourcePos,
    load_module,
    module_from_hcl,
    module_from_inspect_json,
)
from tfmdoc.inspect.loader import _clean
from tfmdoc.log import LogConfig, LoggerFactory


class TestClean:
    """Tests for stripping python-hcl2 wrappers."""

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("${string}", "string"),
            ("${list(string)}", "list(string)"),
            ('"quoted"', "quoted"),
            ("plain", "plain"),
            ("", ""),
            (5, 5),
            (None, None),
        ],
    )
    def test_clean(self, raw, expected):
        assert _clean(raw) == expected


class TestModuleFromInspectJson:
    """Tests for module_from_inspect_json()."""

    def test_collections(self, inspect_data):
        module = module_from_inspect_json(inspect_data)

        assert module.path == "modules/bucket"
        assert set(module.variables) == {"zeta", "alpha", "mu"}
        assert set(module.outputs) == {"bucket_id", "arn"}
        assert len(module.managed_resources) == 3
        assert len(module.data_resources) == 1
        assert set(module.module_calls) == {"logging"}

    def test_variable_fields(self, inspect_data):
        alpha = module_from_inspect_json(inspect_data).variables["alpha"]

        assert alpha.type == "list(string)"
        assert alpha.description == "First line\nsecond line"
        assert alpha.required is False
        assert alpha.pos == SourcePos("modules/bucket/variables.tf", 1)
        assert alpha.pos.basename == "variables.tf"

    def test_resource_fields(self, inspect_data):
        module = module_from_inspect_json(inspect_data)

        bucket = module.managed_resources["aws_s3_bucket.this"]
        assert (bucket.mode, bucket.type, bucket.name) == ("managed", "aws_s3_bucket", "this")
        assert bucket.provider == "aws"
        assert bucket.key == "aws_s3_bucket.this"

    def test_missing_sections_are_empty(self):
        module = module_from_inspect_json({"path": "."})

        assert module == Module(path=".")
        assert module.counts() == {
            "variables": 0,
            "outputs": 0,
            "resources": 0,
            "data": 0,
            "modules": 0,
        }

    def test_error_diagnostics_fail(self, inspect_data):
        inspect_data["diagnostics"] = [
            {"severity": "warning", "summary": "deprecated"},
            {"severity": "error", "summary": "Unsupported block type"},
        ]

        with pytest.raises(ModuleLoadError, match="Unsupported block type"):
            module_from_inspect_json(inspect_data, "module.json")

    def test_warning_diagnostics_pass(self, inspect_data):
        inspect_data["diagnostics"] = [{"severity": "warning", "summary": "deprecated"}]
        assert module_from_inspect_json(inspect_data).variables

    def test_not_an_object(self):
        with pytest.raises(ModuleLoadError):
            module_from_inspect_json(["not", "a", "module"])

    def test_malformed_item(self, inspect_data):
        inspect_data["variables"]["zeta"]["pos"] = {"filename": "x.tf", "line": "many"}

        with pytest.raises(ModuleLoadError, match="malformed"):
            module_from_inspect_json(inspect_data)


class TestModuleFromHcl:
    """Tests for module_from_hcl() on python-hcl2 style dicts."""

    @pytest.fixture
    def parsed(self):
        return {
            "mod/variables.tf": {
                "variable": [
                    {
                        "region": {
                            "type": "${string}",
                            "description": "AWS region",
                            "default": "us-east-1",
                            "__start_line__": 1,
                            "__end_line__": 5,
                        }
                    },
                    {"name": {"__start_line__": 7, "__end_line__": 7}},
                ]
            },
            "mod/main.tf": {
                "resource": [
                    {"aws_s3_bucket": {"b": {"bucket": "x", "__start_line__": 3}}}
                ],
                "data": [
                    {
                        "aws_region": {
                            "current": {"provider": "${aws.west}", "__start_line__": 1}
                        }
                    }
                ],
                "module": [
                    {
                        '"vpc"': {
                            "source": "terraform-aws-modules/vpc/aws",
                            "version": "5.0.0",
                            "__start_line__": 10,
                        }
                    }
                ],
                "output": [
                    {"id": {"value": "${aws_s3_bucket.b.id}", "__start_line__": 20}}
                ],
            },
        }

    def test_variables(self, parsed):
        module = module_from_hcl(parsed, "mod")

        region = module.variables["region"]
        assert region.type == "string"
        assert region.description == "AWS region"
        assert region.default == "us-east-1"
        assert region.required is False
        assert region.pos == SourcePos("mod/variables.tf", 1)

        name = module.variables["name"]
        assert name.type == ""
        assert name.required is True
        assert name.pos.line == 7

    def test_resources_and_data(self, parsed):
        module = module_from_hcl(parsed)

        bucket = module.managed_resources["aws_s3_bucket.b"]
        assert bucket.mode == "managed"
        assert bucket.provider == "aws"
        assert bucket.pos == SourcePos("mod/main.tf", 3)

        region = module.data_resources["aws_region.current"]
        assert region.mode == "data"
        assert region.provider == "aws.west"

    def test_module_calls_and_outputs(self, parsed):
        module = module_from_hcl(parsed)

        vpc = module.module_calls["vpc"]
        assert vpc.source == "terraform-aws-modules/vpc/aws"
        assert vpc.version == "5.0.0"
        assert vpc.pos.line == 10
        assert module.outputs["id"].description == ""
        assert module.outputs["id"].pos.line == 20


@pytest.mark.integration
class TestLoadModule:
    """Tests for load_module() against the filesystem."""

    def test_json_file(self, inspect_file):
        module = load_module(inspect_file)
        assert set(module.variables) == {"zeta", "alpha", "mu"}

    def test_missing_path(self, tmp_path):
        with pytest.raises(ModuleLoadError, match="does not exist"):
            load_module(tmp_path / "nope")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "module.json"
        path.write_text("{not json")

        with pytest.raises(ModuleLoadError, match="invalid JSON"):
            load_module(path)

    def test_directory_without_tf_files(self, tmp_path):
        with pytest.raises(ModuleLoadError, match="no .tf files"):
            load_module(tmp_path)

    def test_error_carries_path_context(self, tmp_path):
        path = tmp_path / "module.json"
        path.write_text(json.dumps({"diagnostics": [{"severity": "error"}]}))

        with pytest.raises(ModuleLoadError) as exc_info:
            load_module(path)
        assert exc_info.value.context["path"] == path

    def test_directory_files_traced(self, tmp_path):
        (tmp_path / "variables.tf").write_text(
            'variable "region" {\n  type    = string\n  default = "us-east-1"\n}\n'
        )
        stream = io.StringIO()
        lg = LoggerFactory.create_root(LogConfig.from_params("trace", colors=False), stream)

        module = load_module(tmp_path, lg)

        assert set(module.variables) == {"region"}
        assert module.variables["region"].required is False
        assert "parsed file [file:variables.tf] [/]" in stream.getvalue()
        assert "loaded module" in stream.getvalue()
