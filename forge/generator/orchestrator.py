"""Generation orchestrator.

Sequences one ``forge new`` run:

1. apply defaults (version per flavor, package from group id)
2. validate every parameter and report all violations together
3. check the toolchain the template kind needs
4. resolve the output directory and refuse a non-empty target
5. dispatch to the Maven executor or the file-template renderer
6. report the created project

Nothing is retried; the first failing step aborts the run with a
:class:`~forge.errors.ForgeError`.  Cancelling the calling task kills any
running subprocess, but files already written are left in place.
"""

from __future__ import annotations

import time
from pathlib import Path

from pydantic import BaseModel, Field

from forge.errors import ErrorKind, ForgeError
from forge.generator.executor import ExecuteParams, Executor, resolve_output_dir
from forge.generator.files import FileTemplateExecutor
from forge.generator.maven import MavenExecutor
from forge.output import Printer
from forge.templates.descriptor import TemplateDescriptor
from forge.utils import format_duration
from forge.validation import validate_all


# ---------------------------------------------------------------------------
# Request / result models
# ---------------------------------------------------------------------------


class GenerationRequest(BaseModel):
    """Parameters supplied by the caller (CLI flags or wizard answers)."""

    artifact_id: str = ""
    group_id: str = ""
    version: str = ""
    package: str = ""
    module: str = ""
    output_dir: Path = Field(default=Path("."))


class GenerationResult(BaseModel):
    """Outcome of a successful run."""

    template: str
    artifact_id: str
    version: str
    project_dir: Path
    files: list[Path] = Field(default_factory=list)
    duration: float = 0.0


# ---------------------------------------------------------------------------
# Orchestrator
# ---------------------------------------------------------------------------


class Generator:
    """Creates one project from one template.

    Args:
        template: Descriptor loaded through the registry.
        printer: Output sink for progress and success messages.
    """

    def __init__(self, template: TemplateDescriptor, printer: Printer | None = None) -> None:
        self.template = template
        self.printer = printer or Printer()

    def executor(self) -> Executor:
        """Pick the executor for the template kind."""
        if self.template.is_archetype:
            return MavenExecutor(self.template, quiet=self.printer.quiet)
        if self.template.is_file_template:
            return FileTemplateExecutor(self.template)
        raise ForgeError(
            ErrorKind.INVALID_TEMPLATE,
            f"template '{self.template.name}' has unsupported type '{self.template.kind}'",
            path=self.template.path,
        )

    async def generate(self, request: GenerationRequest) -> GenerationResult:
        """Run the full generation sequence.

        Raises:
            ForgeError: ``VALIDATION_FAILED`` with every violation, or the
                error of the first failing step.
        """
        started = time.monotonic()

        version = request.version or self.template.default_version
        errors = validate_all(
            request.artifact_id,
            request.group_id,
            version,
            request.package,
            request.module,
            flavor=self.template.flavor,
        )
        if errors:
            raise ForgeError(
                ErrorKind.VALIDATION_FAILED,
                f"validation failed with {len(errors)} error(s)",
                violations=errors,
            )
        package = request.package or request.group_id

        executor = self.executor()
        await executor.validate()

        output_dir = resolve_output_dir(request.output_dir, request.artifact_id)
        params = ExecuteParams(
            output_dir=output_dir,
            artifact_id=request.artifact_id,
            version=version,
            group_id=request.group_id,
            package=package,
            module=request.module,
        )

        self.printer.println(
            f"Creating project '{params.artifact_id}' from template '{self.template.name}'..."
        )
        files = await executor.execute(params)

        duration = time.monotonic() - started
        self.printer.project_created(params.artifact_id, executor.next_steps(params))
        self.printer.info(f"Done in {format_duration(duration)}")

        return GenerationResult(
            template=self.template.name,
            artifact_id=params.artifact_id,
            version=version,
            project_dir=params.project_dir,
            files=files,
            duration=duration,
        )
