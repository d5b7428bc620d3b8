"""In-process generation for file templates (``type: go-template``)."""

from __future__ import annotations

from pathlib import Path

from forge.errors import ErrorKind, ForgeError
from forge.generator.executor import ExecuteParams, Executor
from forge.scaffolder.renderer import RenderContext, TemplateRenderer
from forge.templates.descriptor import TemplateDescriptor
from forge.utils import check_toolchain

GO = "go"


async def check_go() -> None:
    """Raise ``TOOLCHAIN_NOT_FOUND`` unless ``go version`` succeeds."""
    if not await check_toolchain(GO, ["version"]):
        raise ForgeError(ErrorKind.TOOLCHAIN_NOT_FOUND, "Go toolchain not found")


class FileTemplateExecutor(Executor):
    """Renders a template's ``filesDir`` tree into the project directory."""

    def __init__(self, template: TemplateDescriptor) -> None:
        if template.files_path is None:
            raise ValueError(f"template '{template.name}' has no path; load it via Registry")
        self.template = template
        self.renderer = TemplateRenderer(template.files_path)

    async def validate(self) -> None:
        await check_go()

    def build_context(self, params: ExecuteParams) -> RenderContext:
        return RenderContext(
            project_name=params.artifact_id,
            module_name=params.module,
            version=params.version,
            go_version=self.template.file_config.min_go_version,
        )

    async def execute(self, params: ExecuteParams) -> list[Path]:
        return await self.renderer.render_tree(params.output_dir, self.build_context(params))

    def next_steps(self, params: ExecuteParams) -> list[str]:
        return ["go mod tidy", "go build ./..."]
