"""Parameter validation for project generation.

Pure functions that check the naming and versioning parameters a user passes
to ``forge new``.  Each validator returns ``None`` on success or a
:class:`ValidationError` describing the violation; :func:`validate_all`
collects every violation for a template flavor so that callers can report
them all in one pass.
"""

from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict

from forge.errors import ErrorKind


# ---------------------------------------------------------------------------
# Patterns
# ---------------------------------------------------------------------------

ARTIFACT_ID_PATTERN = re.compile(r"^[a-z][a-z0-9-]*$")
DOTTED_IDENTIFIER_PATTERN = re.compile(r"^[a-z][a-z0-9]*(\.[a-z][a-z0-9]*)*$")
VERSION_PATTERN = re.compile(r"^[0-9]+\.[0-9]+\.[0-9]+(-[a-zA-Z0-9]+)?$")
MODULE_PATH_PATTERN = re.compile(r"^[a-z0-9][a-z0-9.\-]*(/[A-Za-z0-9._~\-]+)*$")

FLAVOR_JAVA = "java"
FLAVOR_GO = "go"


# ---------------------------------------------------------------------------
# Result model
# ---------------------------------------------------------------------------


class ValidationError(BaseModel):
    """A single parameter violation.

    This is a value, not an exception: validators return it and the
    orchestrator decides whether to abort after collecting all of them.
    """

    model_config = ConfigDict(frozen=True)

    field: str
    value: str
    message: str
    help: str
    kind: ErrorKind

    def __str__(self) -> str:
        return f"{self.field}: {self.message}"


# ---------------------------------------------------------------------------
# Individual validators
# ---------------------------------------------------------------------------


def validate_name(value: str) -> ValidationError | None:
    """Validate a project name (Maven artifactId / directory name)."""
    if value == "":
        return ValidationError(
            field="artifact-id",
            value=value,
            message="artifact-id is required",
            help="Provide a project name using -a or --artifact-id",
            kind=ErrorKind.REQUIRED,
        )
    if not ARTIFACT_ID_PATTERN.fullmatch(value):
        return ValidationError(
            field="artifact-id",
            value=value,
            message=f"invalid artifactId '{value}'",
            help="artifactId must be lowercase letters, numbers, and hyphens (e.g., my-project)",
            kind=ErrorKind.INVALID_FORMAT,
        )
    return None


def validate_dotted_identifier(
    value: str,
    field: str,
    *,
    required: bool,
    required_message: str = "",
    help_text: str = "",
) -> ValidationError | None:
    """Validate a dot-separated lowercase identifier such as ``com.example``.

    When *required* is ``False`` an empty value is accepted; the caller fills
    it from a fallback later.
    """
    if value == "":
        if not required:
            return None
        return ValidationError(
            field=field,
            value=value,
            message=required_message or f"{field} is required",
            help=help_text,
            kind=ErrorKind.REQUIRED,
        )
    if not DOTTED_IDENTIFIER_PATTERN.fullmatch(value):
        return ValidationError(
            field=field,
            value=value,
            message=f"invalid {field} '{value}'",
            help=help_text,
            kind=ErrorKind.INVALID_FORMAT,
        )
    return None


def validate_group_id(value: str) -> ValidationError | None:
    """Validate a Maven groupId.  Required for Java templates."""
    error = validate_dotted_identifier(
        value,
        "group-id",
        required=True,
        required_message="group-id is required for Java templates",
        help_text="Provide a Maven groupId using -g or --group-id",
    )
    if error is not None and error.kind is ErrorKind.INVALID_FORMAT:
        return error.model_copy(
            update={
                "message": f"invalid groupId '{value}'",
                "help": "groupId must be a valid Maven groupId (e.g., com.example)",
            }
        )
    return error


def validate_package(value: str) -> ValidationError | None:
    """Validate a Java package name.  Empty defaults to the groupId."""
    return validate_dotted_identifier(
        value,
        "package",
        required=False,
        help_text="package must be a valid Java package name (e.g., com.example.project)",
    )


def validate_version(value: str) -> ValidationError | None:
    """Validate a SemVer-style version.  Empty is accepted (a default applies)."""
    if value == "":
        return None
    if not VERSION_PATTERN.fullmatch(value):
        return ValidationError(
            field="version",
            value=value,
            message=f"invalid version '{value}'",
            help="version must be in SemVer format (e.g., 1.0.0-SNAPSHOT)",
            kind=ErrorKind.INVALID_FORMAT,
        )
    return None


def validate_module_path(value: str) -> ValidationError | None:
    """Validate a Go module path such as ``github.com/example/my-service``."""
    if value == "":
        return ValidationError(
            field="module",
            value=value,
            message="module is required for Go templates",
            help="Provide a Go module path using -m or --module",
            kind=ErrorKind.REQUIRED,
        )
    if not MODULE_PATH_PATTERN.fullmatch(value):
        return ValidationError(
            field="module",
            value=value,
            message=f"invalid module path '{value}'",
            help="module must be a slash-separated path (e.g., github.com/example/my-service)",
            kind=ErrorKind.INVALID_FORMAT,
        )
    return None


# ---------------------------------------------------------------------------
# Aggregation
# ---------------------------------------------------------------------------


def validate_all(
    artifact_id: str,
    group_id: str = "",
    version: str = "",
    package: str = "",
    module: str = "",
    *,
    flavor: str = FLAVOR_JAVA,
) -> list[ValidationError]:
    """Run every validator relevant to *flavor* and return all violations.

    The ``java`` flavor checks artifact id, group id, version and package; the
    ``go`` flavor checks artifact id, version and module path.
    """
    if flavor == FLAVOR_JAVA:
        checks = [
            validate_name(artifact_id),
            validate_group_id(group_id),
            validate_version(version),
            validate_package(package),
        ]
    elif flavor == FLAVOR_GO:
        checks = [
            validate_name(artifact_id),
            validate_version(version),
            validate_module_path(module),
        ]
    else:
        raise ValueError(f"unknown template flavor: {flavor!r}")

    return [error for error in checks if error is not None]
