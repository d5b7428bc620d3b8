"""Template descriptor models.

A template directory carries a ``template.yaml`` describing what kind of
template it is, which build tool or runtime it targets, and which parameters
it expects.  The models below mirror that document; camelCase keys in YAML
map to snake_case attributes through field aliases.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from forge.validation import FLAVOR_GO, FLAVOR_JAVA

DESCRIPTOR_FILENAME = "template.yaml"
DEFAULT_FILES_DIR = "files"
DEFAULT_GO_VERSION = "1.21"

_MODEL_CONFIG = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


class TemplateKind(str, Enum):
    """Serialized ``type`` values of a descriptor."""

    ARCHETYPE = "maven-archetype"
    FILE_TEMPLATE = "go-template"


class ParameterDef(BaseModel):
    """A declared template parameter.  Used for listing only."""

    model_config = _MODEL_CONFIG

    name: str
    description: str = ""
    pattern: str = ""
    default: str = ""


class ModuleDef(BaseModel):
    """A module the template generates (e.g. ``my-service-domain``)."""

    model_config = _MODEL_CONFIG

    name: str
    description: str = ""


class ParameterConfig(BaseModel):
    model_config = _MODEL_CONFIG

    required: list[ParameterDef] = Field(default_factory=list)
    optional: list[ParameterDef] = Field(default_factory=list)


class ArchetypeCoordinates(BaseModel):
    """Maven coordinates of the archetype a template installs."""

    model_config = _MODEL_CONFIG

    group_id: str = Field(default="", alias="groupId")
    artifact_id: str = Field(default="", alias="artifactId")
    version: str = ""


class FileTemplateConfig(BaseModel):
    """Settings for in-process rendered templates."""

    model_config = _MODEL_CONFIG

    min_go_version: str = Field(default=DEFAULT_GO_VERSION, alias="minGoVersion")
    files_dir: str = Field(default=DEFAULT_FILES_DIR, alias="filesDir")


class StackInfo(BaseModel):
    """Technology stack the generated project uses."""

    model_config = _MODEL_CONFIG

    language: str = ""
    jdk: str = ""
    go_version: str = Field(default="", alias="goVersion")
    framework: str = ""
    framework_version: str = Field(default="", alias="frameworkVersion")
    build_tool: str = Field(default="", alias="buildTool")


class TemplateDescriptor(BaseModel):
    """Parsed ``template.yaml``.

    ``path`` is never read from the document; the registry sets it after a
    successful load via :meth:`from_document`.
    """

    model_config = _MODEL_CONFIG

    name: str = ""
    version: str = ""
    description: str = ""
    kind: str = Field(default="", alias="type")
    archetype: ArchetypeCoordinates = Field(default_factory=ArchetypeCoordinates)
    file_config: FileTemplateConfig = Field(
        default_factory=FileTemplateConfig, alias="goConfig"
    )
    parameters: ParameterConfig = Field(default_factory=ParameterConfig)
    modules: list[ModuleDef] = Field(default_factory=list)
    stack: StackInfo = Field(default_factory=StackInfo)
    path: Path | None = Field(default=None, exclude=True)

    @classmethod
    def from_document(cls, data: Any, path: Path) -> "TemplateDescriptor":
        """Validate a parsed YAML document and attach the template *path*."""
        if not isinstance(data, dict):
            raise ValueError("descriptor must be a mapping")
        document = {key: value for key, value in data.items() if key != "path"}
        descriptor = cls.model_validate(document)
        return descriptor.model_copy(
            update={"path": path, "name": descriptor.name or path.name}
        )

    # -- Kind predicates ---------------------------------------------------

    @property
    def is_archetype(self) -> bool:
        return self.kind == TemplateKind.ARCHETYPE.value or (
            self.kind != TemplateKind.FILE_TEMPLATE.value
            and self.stack.language == "java"
        )

    @property
    def is_file_template(self) -> bool:
        return not self.is_archetype and (
            self.kind == TemplateKind.FILE_TEMPLATE.value or self.stack.language == "go"
        )

    @property
    def flavor(self) -> str:
        """Validation/default profile: ``java`` or ``go``."""
        return FLAVOR_GO if self.is_file_template else FLAVOR_JAVA

    @property
    def default_version(self) -> str:
        return "0.1.0" if self.flavor == FLAVOR_GO else "1.0.0-SNAPSHOT"

    @property
    def ref(self) -> str:
        """Directory name the registry looks this template up by."""
        return self.path.name if self.path is not None else self.name

    @property
    def files_path(self) -> Path | None:
        """Directory holding the files of a file template."""
        if self.path is None:
            return None
        return self.path / self.file_config.files_dir
