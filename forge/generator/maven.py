"""Maven archetype generation.

Drives the two-step ``mvn install`` / ``mvn archetype:generate`` sequence.
Maven itself is opaque: only its exit status and captured stderr matter.
"""

from __future__ import annotations

from pathlib import Path

from forge.errors import ErrorKind, ForgeError
from forge.generator.executor import ExecuteParams, Executor
from forge.templates.descriptor import TemplateDescriptor
from forge.utils import check_toolchain, run_command

MVN = "mvn"
FORGE_TEMPLATE_VERSION = "1.0.0"


async def check_maven() -> None:
    """Raise ``TOOLCHAIN_NOT_FOUND`` unless ``mvn -version`` succeeds."""
    if not await check_toolchain(MVN, ["-version"]):
        raise ForgeError(
            ErrorKind.TOOLCHAIN_NOT_FOUND,
            "Maven is not installed or not in PATH",
        )


def generate_args(template: TemplateDescriptor, params: ExecuteParams) -> list[str]:
    """Build the ``mvn archetype:generate`` argument list."""
    coordinates = template.archetype
    args = [
        MVN,
        "archetype:generate",
        "-q",
        f"-DarchetypeGroupId={coordinates.group_id}",
        f"-DarchetypeArtifactId={coordinates.artifact_id}",
        f"-DarchetypeVersion={coordinates.version}",
        f"-DgroupId={params.group_id}",
        f"-DartifactId={params.artifact_id}",
        f"-Dversion={params.version}",
        f"-Dpackage={params.package}",
        f"-DforgeArchetypeVersion={coordinates.version}",
        f"-DforgeTemplateVersion={template.version or FORGE_TEMPLATE_VERSION}",
        "-DinteractiveMode=false",
    ]
    if params.output_dir:
        args.append(f"-DoutputDirectory={params.output_dir}")
    return args


class MavenExecutor(Executor):
    """Generates a project from a Maven archetype template.

    Args:
        template: Descriptor of an archetype template; ``path`` must be set.
        quiet: Swallow Maven's stdout instead of passing it through.
    """

    def __init__(self, template: TemplateDescriptor, quiet: bool = False) -> None:
        self.template = template
        self.quiet = quiet

    async def validate(self) -> None:
        await check_maven()

    async def execute(self, params: ExecuteParams) -> list[Path]:
        await self.install()
        await self.generate(params)
        return []

    async def install(self) -> None:
        """Install the archetype into the local repository, skipping its tests."""
        cmd = [MVN, "install", "-DskipTests", "-DskipITs", "-q"]
        returncode, _, stderr = await self._run(
            cmd, cwd=self.template.path, passthrough_stdout=not self.quiet
        )
        if returncode != 0:
            raise ForgeError(
                ErrorKind.EXTERNAL_PROCESS_ERROR,
                f"maven install failed: {stderr}",
            )

    async def generate(self, params: ExecuteParams) -> None:
        """Run ``archetype:generate`` into ``params.output_dir``."""
        returncode, stdout, stderr = await self._run(
            generate_args(self.template, params), cwd=self.template.path
        )
        if returncode != 0:
            raise ForgeError(
                ErrorKind.EXTERNAL_PROCESS_ERROR,
                f"archetype generation failed: {stderr or stdout}",
            )

    def next_steps(self, params: ExecuteParams) -> list[str]:
        name = params.artifact_id
        return [
            "mvn clean package",
            f"java -jar {name}-bootstrap/target/{name}-bootstrap-{params.version}.jar",
        ]

    async def _run(
        self, cmd: list[str], cwd: Path | None, passthrough_stdout: bool = False
    ) -> tuple[int, str, str]:
        try:
            return await run_command(cmd, cwd=cwd, passthrough_stdout=passthrough_stdout)
        except FileNotFoundError as exc:
            raise ForgeError(
                ErrorKind.TOOLCHAIN_NOT_FOUND,
                "Maven is not installed or not in PATH",
                cause=exc,
            ) from exc
