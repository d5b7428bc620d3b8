"""Executor seam shared by the archetype and file-template generators."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from forge.errors import ErrorKind, ForgeError
from forge.utils import is_empty_dir


class ExecuteParams(BaseModel):
    """Parameters handed to an executor once validation has passed."""

    model_config = ConfigDict(frozen=True)

    output_dir: Path = Field(..., description="Resolved absolute parent directory")
    artifact_id: str = Field(..., description="Project name, also the project directory name")
    version: str
    group_id: str = ""
    package: str = ""
    module: str = ""

    @property
    def project_dir(self) -> Path:
        return self.output_dir / self.artifact_id


class Executor(ABC):
    """Produces a project for one template kind."""

    @abstractmethod
    async def validate(self) -> None:
        """Check the required toolchain; raise ``TOOLCHAIN_NOT_FOUND`` if missing."""

    @abstractmethod
    async def execute(self, params: ExecuteParams) -> list[Path]:
        """Generate the project and return the files written, when known."""

    def next_steps(self, params: ExecuteParams) -> list[str]:
        """Commands to suggest once the project exists."""
        return []


def resolve_output_dir(output_dir: str | Path, artifact_id: str) -> Path:
    """Resolve *output_dir* to an absolute path and check the target is free.

    The output directory is created if missing.  ``output_dir/artifact_id``
    may be absent or an empty directory; anything else is refused without
    touching it.

    Raises:
        ForgeError: ``TARGET_NOT_EMPTY`` or ``IO_ERROR``.
    """
    absolute = Path(output_dir).expanduser().absolute()
    target = absolute / artifact_id

    if target.exists():
        if not target.is_dir():
            raise ForgeError(
                ErrorKind.TARGET_NOT_EMPTY,
                f"target '{target}' already exists and is not a directory",
                path=target,
            )
        try:
            occupied = not is_empty_dir(target)
        except OSError as exc:
            raise ForgeError.io_error(target, exc) from exc
        if occupied:
            raise ForgeError(
                ErrorKind.TARGET_NOT_EMPTY,
                f"target directory '{target}' already exists and is not empty",
                path=target,
            )

    try:
        absolute.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise ForgeError.io_error(absolute, exc) from exc
    return absolute
