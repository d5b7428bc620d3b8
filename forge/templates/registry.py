"""Template discovery and lookup.

The registry scans a templates root with one subdirectory per template.  A
subdirectory counts as a template only when it holds a parsable
``template.yaml``.
"""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import ValidationError as PydanticValidationError

from forge.errors import ErrorKind, ForgeError
from forge.templates.descriptor import DESCRIPTOR_FILENAME, TemplateDescriptor


class Registry:
    """Answers listing, existence and lookup queries for templates.

    Args:
        templates_dir: Resolved templates root directory.
    """

    def __init__(self, templates_dir: str | Path) -> None:
        self.templates_dir = Path(templates_dir)

    # -- Public API --------------------------------------------------------

    def list(self) -> list[TemplateDescriptor]:
        """Return every valid template, in directory-iteration order.

        Subdirectories with a missing or unparsable descriptor are skipped.
        """
        templates: list[TemplateDescriptor] = []
        for entry in self._iter_dirs():
            try:
                templates.append(self._load(entry.name))
            except ForgeError:
                continue
        return templates

    def list_names(self) -> list[str]:
        """Directory names of every valid template, usable with :meth:`get`."""
        return [template.ref for template in self.list()]

    def get(self, name: str) -> TemplateDescriptor:
        """Load the template called *name*.

        Raises:
            ForgeError: ``TEMPLATE_NOT_FOUND`` when the directory or its
                descriptor is absent, ``INVALID_TEMPLATE`` when the
                descriptor cannot be parsed.
        """
        return self._load(name)

    def exists(self, name: str) -> bool:
        """Return ``True`` if *name* has a directory and a parsable descriptor."""
        try:
            self._load(name)
        except ForgeError:
            return False
        return True

    # -- Internal helpers --------------------------------------------------

    def _iter_dirs(self) -> list[Path]:
        try:
            return [entry for entry in self.templates_dir.iterdir() if entry.is_dir()]
        except OSError as exc:
            raise ForgeError(
                ErrorKind.IO_ERROR,
                f"failed to read templates directory {self.templates_dir}",
                path=self.templates_dir,
                cause=exc,
            ) from exc

    def _load(self, name: str) -> TemplateDescriptor:
        template_dir = self.templates_dir / name
        descriptor_path = template_dir / DESCRIPTOR_FILENAME

        if (
            not _is_single_segment(name)
            or not template_dir.is_dir()
            or not descriptor_path.is_file()
        ):
            raise ForgeError.template_not_found(name, self._available_names(exclude=name))

        try:
            raw = descriptor_path.read_text(encoding="utf-8")
        except OSError as exc:
            raise ForgeError.io_error(descriptor_path, exc) from exc

        try:
            data = yaml.safe_load(raw)
            return TemplateDescriptor.from_document(data, template_dir)
        except (yaml.YAMLError, PydanticValidationError, ValueError) as exc:
            raise ForgeError(
                ErrorKind.INVALID_TEMPLATE,
                f"template '{name}' is invalid (failed to parse {DESCRIPTOR_FILENAME})",
                path=descriptor_path,
                cause=exc,
            ) from exc

    def _available_names(self, exclude: str = "") -> list[str]:
        """Names of other templates whose descriptor parses."""
        try:
            entries = self._iter_dirs()
        except ForgeError:
            return []

        names: list[str] = []
        for entry in entries:
            if entry.name == exclude:
                continue
            descriptor_path = entry / DESCRIPTOR_FILENAME
            if not descriptor_path.is_file():
                continue
            try:
                TemplateDescriptor.from_document(
                    yaml.safe_load(descriptor_path.read_text(encoding="utf-8")), entry
                )
            except (OSError, yaml.YAMLError, PydanticValidationError, ValueError):
                continue
            names.append(entry.name)
        return names


def _is_single_segment(name: str) -> bool:
    """A template name is one directory entry directly under the root."""
    return bool(name) and name not in (".", "..") and "/" not in name and "\\" not in name
