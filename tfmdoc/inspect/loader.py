"""
Module metadata loading.

Two sources are supported:

- a ``.json`` file holding ``terraform-config-inspect --json`` output
- a module directory, whose ``*.tf`` files are parsed with python-hcl2

Both produce the same Module model. Block metadata comes from python-hcl2's
``with_meta`` mode, which records the first line of every block.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import hcl2
from lark.exceptions import LarkError

from ..exceptions import ModuleLoadError
from ..log import Logger
from .models import Module, ModuleCall, Output, Resource, SourcePos, Variable

_START_LINE = "__start_line__"


def _clean(value: Any) -> Any:
    """Strip python-hcl2 expression wrappers and quotes from a scalar."""
    if not isinstance(value, str):
        return value
    if value.startswith("${") and value.endswith("}"):
        value = value[2:-1]
    if len(value) >= 2 and value[0] == value[-1] == '"':
        value = value[1:-1]
    return value


def _text(value: Any) -> str:
    value = _clean(value)
    return "" if value is None else str(value)


def _pos_from_json(data: dict[str, Any]) -> SourcePos:
    pos = data.get("pos") or {}
    return SourcePos(pos.get("filename", ""), int(pos.get("line", 0)))


def _resource_from_json(data: dict[str, Any]) -> Resource:
    provider = data.get("provider") or ""
    if isinstance(provider, dict):
        provider = provider.get("name", "")
    return Resource(
        mode=data.get("mode", ""),
        type=data.get("type", ""),
        name=data.get("name", ""),
        pos=_pos_from_json(data),
        provider=provider,
    )


def _check_diagnostics(data: dict[str, Any], source: Path) -> None:
    """Fail the load when the inspector reported any error diagnostics."""
    errors = [
        d for d in data.get("diagnostics") or [] if d.get("severity") == "error"
    ]
    if errors:
        summaries = "; ".join(d.get("summary", "unknown error") for d in errors)
        raise ModuleLoadError(f"problem loading module: {summaries}", path=source)


def module_from_inspect_json(data: dict[str, Any], source: Path | str = "") -> Module:
    """
    Build a Module from decoded terraform-config-inspect JSON.

    Raises:
        ModuleLoadError: If the document reports error diagnostics or is not
            shaped like inspector output
    """
    source = Path(source)
    if not isinstance(data, dict):
        raise ModuleLoadError("inspection output must be a JSON object", path=source)
    _check_diagnostics(data, source)

    try:
        module = Module(path=data.get("path", str(source)))
        for key, v in (data.get("variables") or {}).items():
            module.variables[key] = Variable(
                name=v.get("name", key),
                pos=_pos_from_json(v),
                type=v.get("type") or "",
                description=v.get("description") or "",
                default=v.get("default"),
                required=bool(v.get("required", "default" not in v)),
            )
        for key, o in (data.get("outputs") or {}).items():
            module.outputs[key] = Output(
                name=o.get("name", key),
                pos=_pos_from_json(o),
                description=o.get("description") or "",
                sensitive=bool(o.get("sensitive", False)),
            )
        for key, r in (data.get("managed_resources") or {}).items():
            module.managed_resources[key] = _resource_from_json(r)
        for key, r in (data.get("data_resources") or {}).items():
            module.data_resources[key] = _resource_from_json(r)
        for key, m in (data.get("module_calls") or {}).items():
            module.module_calls[key] = ModuleCall(
                name=m.get("name", key),
                source=m.get("source") or "",
                pos=_pos_from_json(m),
                version=m.get("version") or "",
            )
    except (AttributeError, TypeError, ValueError) as e:
        raise ModuleLoadError(f"malformed inspection output: {e}", path=source) from e
    return module


def _labelled_blocks(blocks: list[dict[str, Any]]) -> list[tuple[str, dict[str, Any]]]:
    """Flatten [{label: body}, ...] into (label, body) pairs."""
    return [
        (_text(label), body)
        for block in blocks or []
        for label, body in block.items()
        if isinstance(body, dict)
    ]


def _add_hcl_file(module: Module, filename: str, parsed: dict[str, Any]) -> None:
    def pos(body: dict[str, Any]) -> SourcePos:
        return SourcePos(filename, int(body.get(_START_LINE, 0)))

    for name, body in _labelled_blocks(parsed.get("variable", [])):
        module.variables[name] = Variable(
            name=name,
            pos=pos(body),
            type=_text(body.get("type")),
            description=_text(body.get("description")),
            default=_clean(body.get("default")),
            required="default" not in body,
        )

    for name, body in _labelled_blocks(parsed.get("output", [])):
        module.outputs[name] = Output(
            name=name,
            pos=pos(body),
            description=_text(body.get("description")),
            sensitive=bool(_clean(body.get("sensitive", False))),
        )

    for mode, block_type, target in (
        ("managed", "resource", module.managed_resources),
        ("data", "data", module.data_resources),
    ):
        for rtype, named in _labelled_blocks(parsed.get(block_type, [])):
            for name, body in named.items():
                if not isinstance(body, dict):
                    continue
                resource = Resource(
                    mode=mode,
                    type=rtype,
                    name=_text(name),
                    pos=pos(body),
                    provider=_text(body.get("provider")) or rtype.split("_")[0],
                )
                target[resource.key] = resource

    for name, body in _labelled_blocks(parsed.get("module", [])):
        module.module_calls[name] = ModuleCall(
            name=name,
            source=_text(body.get("source")),
            pos=pos(body),
            version=_text(body.get("version")),
        )


def module_from_hcl(parsed_files: dict[str, dict[str, Any]], path: str = ".") -> Module:
    """
    Build a Module from python-hcl2 output.

    Args:
        parsed_files: Mapping of file name to the dict hcl2.load(..., with_meta=True)
            returned for it
        path: Module directory, recorded on the Module
    """
    module = Module(path=path)
    for filename in sorted(parsed_files):
        _add_hcl_file(module, filename, parsed_files[filename])
    return module


def _load_json(source: Path) -> Module:
    try:
        data = json.loads(source.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as e:
        raise ModuleLoadError(f"cannot read inspection output: {e}", path=source) from e
    except json.JSONDecodeError as e:
        raise ModuleLoadError(f"invalid JSON: {e}", path=source) from e
    return module_from_inspect_json(data, source)


def _load_directory(source: Path, lg: Logger | None = None) -> Module:
    parsed: dict[str, dict[str, Any]] = {}
    for tf_file in sorted(source.glob("*.tf")):
        try:
            with open(tf_file, encoding="utf-8") as f:
                parsed[str(tf_file)] = hcl2.load(f, with_meta=True)
        except OSError as e:
            raise ModuleLoadError(f"cannot read {tf_file.name}: {e}", path=source) from e
        except (LarkError, UnicodeDecodeError) as e:
            raise ModuleLoadError(f"invalid HCL in {tf_file.name}: {e}", path=source) from e
        if lg is not None:
            lg.trace("parsed file", extra={"file": tf_file.name})

    if not parsed:
        raise ModuleLoadError("no .tf files found", path=source)
    return module_from_hcl(parsed, str(source))


def load_module(path: str | Path, lg: Logger | None = None) -> Module:
    """
    Load module metadata from a directory or an inspection JSON file.

    Args:
        path: Module directory, or a .json file from terraform-config-inspect
        lg: Optional logger for load diagnostics

    Returns:
        The loaded Module

    Raises:
        ModuleLoadError: If the path is missing or cannot be parsed
    """
    source = Path(path)
    if not source.exists():
        raise ModuleLoadError("module path does not exist", path=source)

    if source.is_dir():
        module = _load_directory(source, lg)
    else:
        module = _load_json(source)

    if lg is not None:
        lg.debug("loaded module", extra={"path": source, **module.counts()})
    return module
