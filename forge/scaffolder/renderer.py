"""Jinja2 rendering of file templates into a project tree.

A file template is a directory tree.  Files whose name ends in ``.j2`` are
rendered with Jinja2; every other file is copied byte-for-byte.  Both file
and directory paths go through :func:`transform_path`, so a template author
can name an entry ``{{project_name}}`` and have it renamed per project.

Rendering is not transactional: when a file fails to render, files already
written stay on disk.
"""

from __future__ import annotations

import asyncio
import shutil
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, TemplateError
from pydantic import BaseModel, ConfigDict

from forge.errors import ErrorKind, ForgeError
from forge.scaffolder.casing import HELPERS
from forge.templates.descriptor import DEFAULT_GO_VERSION


# ---------------------------------------------------------------------------
# Conventions
# ---------------------------------------------------------------------------

TEMPLATE_SUFFIX = ".j2"
PROJECT_NAME_TOKEN = "{{project_name}}"


# ---------------------------------------------------------------------------
# Render context
# ---------------------------------------------------------------------------


class RenderContext(BaseModel):
    """Variables available inside a file template."""

    model_config = ConfigDict(frozen=True)

    project_name: str
    module_name: str = ""
    version: str = ""
    go_version: str = DEFAULT_GO_VERSION

    def as_dict(self) -> dict[str, Any]:
        return self.model_dump()


def transform_path(relative_path: str, project_name: str) -> str:
    """Map a template-relative path to its destination-relative path.

    Strips the template suffix from the last segment and substitutes every
    project-name token.

    Examples::

        transform_path("cmd/{{project_name}}/main.go.j2", "my-api")
            -> "cmd/my-api/main.go"
    """
    if relative_path.endswith(TEMPLATE_SUFFIX):
        relative_path = relative_path[: -len(TEMPLATE_SUFFIX)]
    return relative_path.replace(PROJECT_NAME_TOKEN, project_name)


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders one template's file tree.

    Args:
        template_dir: The template's file-source directory (the descriptor's
            ``filesDir``).  Jinja2 ``include``/``import`` resolve against it.
    """

    def __init__(self, template_dir: str | Path) -> None:
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=False,
            keep_trailing_newline=True,
            undefined=StrictUndefined,
        )
        # Helpers are callable as functions and usable as filters.
        self.env.globals.update(HELPERS)
        self.env.filters.update(HELPERS)
        self.crlf_env = self.env.overlay(newline_sequence="\r\n")

    # -- Single template rendering -----------------------------------------

    def render(self, template_path: str, context: RenderContext) -> str:
        """Render the template at *template_path* (relative, POSIX separators).

        Line endings follow the source: a template with CRLF line endings
        renders with CRLF line endings.

        Raises:
            ForgeError: ``TEMPLATE_RENDER_ERROR`` on a parse or execution failure,
                ``IO_ERROR`` if the source cannot be read.
        """
        source = self.template_dir / template_path
        try:
            env = self.crlf_env if b"\r\n" in source.read_bytes() else self.env
        except OSError as exc:
            raise ForgeError.io_error(source, exc) from exc
        try:
            template = env.get_template(template_path)
            return template.render(**context.as_dict())
        except (TemplateError, TypeError, ValueError) as exc:
            raise ForgeError(
                ErrorKind.TEMPLATE_RENDER_ERROR,
                f"failed to render template {source}",
                path=source,
                cause=exc,
            ) from exc

    # -- Tree rendering (async) --------------------------------------------

    async def render_tree(self, output_dir: str | Path, context: RenderContext) -> list[Path]:
        """Materialize the template tree under ``output_dir/project_name``.

        Directories are created idempotently, ``.j2`` files are rendered and
        all other files copied verbatim.  Entries are visited in sorted order
        so parents always precede their children.

        Returns:
            The written file paths, in write order.

        Raises:
            ForgeError: ``TEMPLATE_FILES_MISSING`` if the template directory is
                absent, ``TEMPLATE_RENDER_ERROR`` or ``IO_ERROR`` on the first
                failing entry.
        """
        if not self.template_dir.is_dir():
            raise ForgeError(
                ErrorKind.TEMPLATE_FILES_MISSING,
                f"template files directory not found: {self.template_dir}",
                path=self.template_dir,
            )

        project_dir = Path(output_dir) / context.project_name
        await asyncio.to_thread(_make_dir, project_dir)

        written: list[Path] = []
        for source in sorted(self.template_dir.rglob("*")):
            relative = source.relative_to(self.template_dir).as_posix()
            destination = project_dir / transform_path(relative, context.project_name)

            if source.is_dir():
                await asyncio.to_thread(_make_dir, destination)
                continue

            if source.name.endswith(TEMPLATE_SUFFIX):
                content = await asyncio.to_thread(self.render, relative, context)
                await asyncio.to_thread(_write_file, destination, content, source)
            else:
                await asyncio.to_thread(_copy_file, source, destination)
            written.append(destination)

        return written


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _make_dir(path: Path) -> None:
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise ForgeError.io_error(path, exc) from exc


def _write_file(path: Path, content: str, source: Path) -> None:
    """Synchronous helper: create parent dirs, write content, keep the mode bits."""
    _make_dir(path.parent)
    try:
        path.write_text(content, encoding="utf-8", newline="")
        shutil.copymode(source, path)
    except OSError as exc:
        raise ForgeError.io_error(path, exc) from exc


def _copy_file(source: Path, destination: Path) -> None:
    _make_dir(destination.parent)
    try:
        destination.write_bytes(source.read_bytes())
        shutil.copymode(source, destination)
    except OSError as exc:
        raise ForgeError.io_error(destination, exc) from exc
