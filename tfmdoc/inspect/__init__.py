"""
Terraform module inspection.

Loads module metadata either from ``terraform-config-inspect --json`` output
or by parsing the ``*.tf`` files of a module directory.

Example:
    from tfmdoc.inspect import load_module

    module = load_module("modules/vpc")
    for name, var in module.variables.items():
        print(name, var.pos.line)
"""

from .loader import load_module, module_from_hcl, module_from_inspect_json
from .models import Module, ModuleCall, Output, Resource, SourcePos, Variable

__all__ = [
    "load_module",
    "module_from_hcl",
    "module_from_inspect_json",
    "Module",
    "ModuleCall",
    "Output",
    "Resource",
    "SourcePos",
    "Variable",
]
