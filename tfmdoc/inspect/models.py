"""
Terraform module metadata.

Collections are dicts keyed the way terraform-config-inspect keys them:
variables, outputs and module calls by name, resources by ``type.name``.
Their iteration order carries no meaning; table builders sort.

The models mirror what the inspector reports, so some fields (a variable's
default and required flag, an output's sensitive flag, a resource's mode and
provider) are loaded and kept for library callers even though no table
renders them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class SourcePos:
    filename: str
    line: int

    @property
    def basename(self) -> str:
        """Last '/'-separated component of the filename."""
        return self.filename.split("/")[-1]


@dataclass
class Variable:
    name: str
    pos: SourcePos
    type: str = ""
    description: str = ""
    default: Any = None
    required: bool = True


@dataclass
class Output:
    name: str
    pos: SourcePos
    description: str = ""
    sensitive: bool = False


@dataclass
class Resource:
    """A managed resource or data source (mode 'managed' or 'data')."""

    mode: str
    type: str
    name: str
    pos: SourcePos
    provider: str = ""

    @property
    def key(self) -> str:
        return f"{self.type}.{self.name}"


@dataclass
class ModuleCall:
    name: str
    source: str
    pos: SourcePos
    version: str = ""


@dataclass
class Module:
    """Everything documented about one Terraform module directory."""

    path: str
    variables: dict[str, Variable] = field(default_factory=dict)
    outputs: dict[str, Output] = field(default_factory=dict)
    managed_resources: dict[str, Resource] = field(default_factory=dict)
    data_resources: dict[str, Resource] = field(default_factory=dict)
    module_calls: dict[str, ModuleCall] = field(default_factory=dict)

    def counts(self) -> dict[str, int]:
        """Item counts per collection, for logging."""
        return {
            "variables": len(self.variables),
            "outputs": len(self.outputs),
            "resources": len(self.managed_resources),
            "data": len(self.data_resources),
            "modules": len(self.module_calls),
        }
