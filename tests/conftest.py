"""Shared pytest fixtures for the forge test suite.

Provides reusable fixtures for:
- Temporary templates roots with file-template and archetype templates
- A Printer that records output instead of writing to the terminal
- A Config pointing at the temporary templates root
"""

from __future__ import annotations

import io
import textwrap
from pathlib import Path
from typing import Callable

import pytest
from rich.console import Console

from forge.config import Config
from forge.output import Printer
from forge.templates import Registry


# ---------------------------------------------------------------------------
# Descriptors
# ---------------------------------------------------------------------------

GO_DESCRIPTOR = textwrap.dedent(
    """\
    name: {name}
    version: 1.0.0
    description: Go service template
    type: go-template
    goConfig:
      minGoVersion: "1.22"
      filesDir: files
    stack:
      language: go
    parameters:
      required:
        - name: artifactId
          description: Project name
        - name: module
          description: Go module path
      optional:
        - name: version
          default: 0.1.0
    """
)

JAVA_DESCRIPTOR = textwrap.dedent(
    """\
    name: {name}
    version: 1.0.0
    description: Java DDD archetype
    type: maven-archetype
    archetype:
      groupId: io.forge.archetypes
      artifactId: java-ddd-archetype
      version: 1.0.0
    stack:
      language: java
      jdk: "17"
    parameters:
      required:
        - name: groupId
        - name: artifactId
    modules:
      - name: domain
        description: Domain layer
    """
)


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------

@pytest.fixture
def templates_root(tmp_path: Path) -> Path:
    """Empty templates root directory."""
    root = tmp_path / "templates"
    root.mkdir()
    return root


@pytest.fixture
def make_template(templates_root: Path) -> Callable[..., Path]:
    """Factory that writes a template directory under ``templates_root``.

    Usage::

        make_template("go-service", GO_DESCRIPTOR, files={"go.mod.j2": "..."})
    """

    def _make(
        name: str,
        descriptor: str | None = GO_DESCRIPTOR,
        files: dict[str, str | bytes] | None = None,
    ) -> Path:
        template_dir = templates_root / name
        template_dir.mkdir(parents=True, exist_ok=True)
        if descriptor is not None:
            (template_dir / "template.yaml").write_text(
                descriptor.replace("{name}", name), encoding="utf-8"
            )
        for relative, content in (files or {}).items():
            target = template_dir / "files" / relative
            target.parent.mkdir(parents=True, exist_ok=True)
            if isinstance(content, bytes):
                target.write_bytes(content)
            else:
                target.write_text(content, encoding="utf-8")
        return template_dir

    return _make


@pytest.fixture
def go_template(make_template: Callable[..., Path]) -> Path:
    """A small file template using the project-name token and casing helpers."""
    return make_template(
        "go-service",
        GO_DESCRIPTOR,
        files={
            "go.mod.j2": "module {{ module_name }}\n\ngo {{ go_version }}\n",
            "cmd/{{project_name}}/main.go.j2": (
                "package main\n\n"
                "// {{ pascal_case(project_name) }} v{{ version }}\n"
                'const envPrefix = "{{ project_name | env_prefix }}"\n'
            ),
            "README.md": "# {{project_name}}\n",
        },
    )


@pytest.fixture
def java_template(make_template: Callable[..., Path]) -> Path:
    return make_template("java-ddd", JAVA_DESCRIPTOR)


@pytest.fixture
def registry(templates_root: Path) -> Registry:
    return Registry(templates_root)


# ---------------------------------------------------------------------------
# Config & output
# ---------------------------------------------------------------------------

@pytest.fixture
def config(tmp_path: Path, templates_root: Path) -> Config:
    return Config(forge_home=tmp_path, templates_dir_override=templates_root)


@pytest.fixture
def printer() -> Printer:
    """Printer whose stdout/stderr consoles write to in-memory buffers.

    Read the output with ``printer.console.file.getvalue()``.
    """
    return Printer(
        console=Console(file=io.StringIO(), no_color=True, width=120),
        err_console=Console(file=io.StringIO(), no_color=True, width=120),
    )


@pytest.fixture
def go_descriptor() -> str:
    """Raw ``template.yaml`` text of a file template (``{name}`` placeholder)."""
    return GO_DESCRIPTOR


@pytest.fixture
def java_descriptor() -> str:
    """Raw ``template.yaml`` text of an archetype template (``{name}`` placeholder)."""
    return JAVA_DESCRIPTOR
