"""Render a README template with tables and a table of contents."""

from __future__ import annotations

import argparse
from pathlib import Path

from ...exceptions import ToolError
from ...render import TemplateData, TemplateRenderer
from .base import ToolConfig
from .module_tool import ModuleTool


class RenderTool(ModuleTool):
    """
    Fill a Jinja2 README template with the module's tables and a TOC.

    The TOC lists the template's own headings, up to --toc-depth levels.

    Example:
        tfmdoc render --path modules/vpc --template modules/vpc/README.tpl.md
        tfmdoc render --path modules/vpc --template README.tpl.md -o README.md --toc-skip 1
    """

    def __init__(self, out=None):
        config = ToolConfig(
            name="render",
            aliases=["r"],
            help_text="Render a README template",
            description=(
                "Render a Jinja2 template, exposing TerraformVarsTable, "
                "TerraformOutputsTable, TerraformManagedResourcesTable, "
                "TerraformDataSourcesTable, TerraformModulesTable, MarkdownTOC "
                "and RepoBaseUrl, plus rawfile(name) for including files."
            ),
        )
        super().__init__(config, out)

    def add_args(self, parser: argparse.ArgumentParser) -> None:
        super().add_args(parser)
        parser.add_argument(
            "-t", "--template", required=True, help="Path of the template to render"
        )
        parser.add_argument(
            "-o", "--output", dest="output_file", help="Write to file instead of stdout"
        )
        parser.add_argument(
            "--toc-depth",
            dest="toc_depth",
            type=int,
            help="Deepest heading level in the TOC, 0 for all (default: 3)",
        )
        parser.add_argument(
            "--toc-skip",
            dest="toc_skip",
            type=int,
            help="Number of leading headings to leave out of the TOC (default: 0)",
        )

    def run(self, args: argparse.Namespace) -> int:
        renderer = TemplateRenderer(args.template)
        source = renderer.read_source()
        module = self.load(args)
        repo_url, module_path = self.link_base(args)

        data = TemplateData.build(
            module,
            source,
            base_url=repo_url,
            module_path=module_path,
            toc_depth=self.int_option(args, "toc_depth", "toc.depth"),
            toc_skip=self.int_option(args, "toc_skip", "toc.skip"),
        )
        text = renderer.render(data)

        if args.output_file:
            self._write_file(Path(args.output_file), text)
        else:
            self.out.write_raw(text)
        return 0

    def _write_file(self, path: Path, text: str) -> None:
        try:
            path.write_text(text, encoding="utf-8")
        except OSError as e:
            raise ToolError(f"cannot write output: {e}", path=path) from e
        self.lg.info("wrote documentation", extra={"path": path})
