"""Error taxonomy for forge.

Every failure the core reports is a :class:`ForgeError` tagged with an
:class:`ErrorKind`.  Callers branch on ``error.kind`` rather than on exception
subclasses, so a "template not found" error and an "invalid template" error
are the same Python type carrying different tags and payloads.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from forge.validation import ValidationError


class ErrorKind(str, Enum):
    """Tag identifying what went wrong."""

    REQUIRED = "required"
    INVALID_FORMAT = "invalid_format"
    VALIDATION_FAILED = "validation_failed"
    TEMPLATE_NOT_FOUND = "template_not_found"
    INVALID_TEMPLATE = "invalid_template"
    TARGET_NOT_EMPTY = "target_not_empty"
    TOOLCHAIN_NOT_FOUND = "toolchain_not_found"
    TEMPLATE_FILES_MISSING = "template_files_missing"
    TEMPLATE_RENDER_ERROR = "template_render_error"
    IO_ERROR = "io_error"
    EXTERNAL_PROCESS_ERROR = "external_process_error"
    CANCELLED = "cancelled"


class ForgeError(Exception):
    """Raised when a forge operation fails.

    Attributes:
        kind: The error tag.
        message: Human-readable description of the failing step.
        name: Template name involved in the failure, if any.
        path: Filesystem path involved in the failure, if any.
        available: Names of valid templates (``TEMPLATE_NOT_FOUND`` only).
        violations: Every parameter violation (``VALIDATION_FAILED`` only).
        cause: The underlying exception, if any.
    """

    def __init__(
        self,
        kind: ErrorKind,
        message: str,
        *,
        name: str = "",
        path: str | Path | None = None,
        available: list[str] | None = None,
        violations: list[ValidationError] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        self.kind = kind
        self.message = message
        self.name = name
        self.path = Path(path) if path is not None else None
        self.available = list(available or [])
        self.violations = list(violations or [])
        self.cause = cause
        super().__init__(message)

    def __str__(self) -> str:
        if self.cause is not None:
            return f"{self.message}: {self.cause}"
        return self.message

    # -- Constructors for the common cases ---------------------------------

    @classmethod
    def template_not_found(cls, name: str, available: list[str]) -> "ForgeError":
        return cls(
            ErrorKind.TEMPLATE_NOT_FOUND,
            f"template '{name}' not found",
            name=name,
            available=available,
        )

    @classmethod
    def io_error(cls, path: str | Path, cause: BaseException) -> "ForgeError":
        return cls(
            ErrorKind.IO_ERROR,
            f"filesystem operation failed on {path}",
            path=path,
            cause=cause,
        )
