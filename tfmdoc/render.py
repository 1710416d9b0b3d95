"""
README template rendering.

A template is a Markdown file with Jinja2 placeholders for the generated
fragments, for example::

    # My Module

    {{ MarkdownTOC }}

    ## Inputs
    {{ TerraformVarsTable }}

    ## Examples
    {{ rawfile("examples/basic.md") }}

The table of contents is built from the raw template text before any
placeholder is substituted, so it lists the template's own headings.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any

import jinja2

from .exceptions import TemplateError
from .extract import (
    data_sources_table,
    managed_resources_table,
    modules_table,
    outputs_table,
    variables_table,
)
from .inspect.models import Module
from .markdown import render_table, render_toc


@dataclass
class TemplateData:
    """Values exposed to templates, under the names templates refer to."""

    TerraformVarsTable: str = ""
    TerraformOutputsTable: str = ""
    TerraformManagedResourcesTable: str = ""
    TerraformDataSourcesTable: str = ""
    TerraformModulesTable: str = ""
    MarkdownTOC: str = ""
    RepoBaseUrl: str = ""

    @classmethod
    def build(
        cls,
        module: Module,
        template_text: str | bytes,
        base_url: str = "",
        module_path: str = "",
        toc_depth: int = 3,
        toc_skip: int = 0,
    ) -> TemplateData:
        """
        Render every table for a module plus the template's own TOC.

        Raises:
            ScanError: If the template text cannot be scanned for headings
        """
        return cls(
            TerraformVarsTable=render_table(variables_table(module, base_url, module_path)),
            TerraformOutputsTable=render_table(outputs_table(module, base_url, module_path)),
            TerraformManagedResourcesTable=render_table(
                managed_resources_table(module, base_url, module_path)
            ),
            TerraformDataSourcesTable=render_table(
                data_sources_table(module, base_url, module_path)
            ),
            TerraformModulesTable=render_table(modules_table(module, base_url, module_path)),
            MarkdownTOC=render_toc(template_text, toc_depth, toc_skip),
            RepoBaseUrl=base_url,
        )

    def as_context(self) -> dict[str, Any]:
        return asdict(self)


class TemplateRenderer:
    """
    Render one template file with Jinja2.

    Undefined placeholders are errors rather than empty strings, and the
    template's trailing newline is preserved.
    """

    def __init__(self, template_path: str | Path):
        self.template_path = Path(template_path)
        self.template_dir = self.template_path.parent
        self._env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(str(self.template_dir)),
            undefined=jinja2.StrictUndefined,
            keep_trailing_newline=True,
            autoescape=False,
        )
        self._env.globals["rawfile"] = self.rawfile

    def read_source(self) -> str:
        """Return the raw template text."""
        try:
            return self.template_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise TemplateError(
                f"failed to read template: {e}", template=self.template_path
            ) from e

    def rawfile(self, name: str) -> str:
        """Contents of a file relative to the template's directory."""
        path = self.template_dir / name
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise TemplateError(f"rawfile '{name}' failed: {e}", template=path) from e

    def render(self, data: TemplateData) -> str:
        """
        Render the template with the given data.

        Raises:
            TemplateError: If the template cannot be loaded, has a syntax
                error or references an undefined value
        """
        try:
            template = self._env.get_template(self.template_path.name)
            return template.render(**data.as_context())
        except jinja2.TemplateSyntaxError as e:
            raise TemplateError(
                f"problem loading template: {e.message}",
                template=self.template_path,
                line=e.lineno,
            ) from e
        except jinja2.TemplateNotFound as e:
            raise TemplateError(
                "problem loading template: not found", template=self.template_path
            ) from e
        except jinja2.UndefinedError as e:
            raise TemplateError(
                f"failed rendering template: {e.message}", template=self.template_path
            ) from e
