"""Tests for template discovery (forge.templates.registry)."""

from __future__ import annotations

from pathlib import Path

import pytest

from forge.errors import ErrorKind, ForgeError
from forge.templates import Registry

pytestmark = pytest.mark.unit


@pytest.fixture
def mixed_root(make_template, go_template, templates_root: Path) -> Path:
    """One valid template, one without a descriptor, one with broken YAML."""
    make_template("no-descriptor", descriptor=None)
    make_template("broken", descriptor="name: [unterminated\n")
    (templates_root / "README.txt").write_text("not a template")
    return templates_root


class TestList:
    def test_only_valid_templates_listed(self, mixed_root: Path):
        registry = Registry(mixed_root)
        assert registry.list_names() == ["go-service"]

    def test_empty_root(self, registry: Registry):
        assert registry.list() == []

    def test_missing_root_is_io_error(self, tmp_path: Path):
        with pytest.raises(ForgeError) as exc_info:
            Registry(tmp_path / "missing").list()
        assert exc_info.value.kind is ErrorKind.IO_ERROR

    def test_listed_templates_carry_path(self, registry: Registry, go_template: Path):
        [template] = registry.list()
        assert template.path == go_template

    def test_names_are_directory_names(self, make_template, registry: Registry, go_descriptor: str):
        make_template("go-svc", descriptor=go_descriptor.replace("{name}", "Go Service"))
        assert registry.list_names() == ["go-svc"]
        [template] = registry.list()
        assert template.name == "Go Service"
        assert template.ref == "go-svc"
        assert registry.get(registry.list_names()[0]).ref == "go-svc"


class TestGet:
    def test_get_valid(self, registry: Registry, java_template: Path):
        template = registry.get("java-ddd")
        assert template.name == "java-ddd"
        assert template.is_archetype
        assert template.path == java_template

    def test_missing_descriptor_is_not_found(self, mixed_root: Path):
        with pytest.raises(ForgeError) as exc_info:
            Registry(mixed_root).get("no-descriptor")
        error = exc_info.value
        assert error.kind is ErrorKind.TEMPLATE_NOT_FOUND
        assert error.name == "no-descriptor"
        assert error.available == ["go-service"]

    def test_unknown_name_is_not_found(self, mixed_root: Path):
        with pytest.raises(ForgeError) as exc_info:
            Registry(mixed_root).get("nope")
        assert exc_info.value.kind is ErrorKind.TEMPLATE_NOT_FOUND
        assert "nope" in str(exc_info.value)

    def test_file_entry_is_not_a_template(self, mixed_root: Path):
        with pytest.raises(ForgeError) as exc_info:
            Registry(mixed_root).get("README.txt")
        assert exc_info.value.kind is ErrorKind.TEMPLATE_NOT_FOUND

    def test_broken_yaml_is_invalid_template(self, mixed_root: Path):
        with pytest.raises(ForgeError) as exc_info:
            Registry(mixed_root).get("broken")
        error = exc_info.value
        assert error.kind is ErrorKind.INVALID_TEMPLATE
        assert error.cause is not None
        assert error.path == mixed_root / "broken" / "template.yaml"

    def test_non_mapping_document_is_invalid_template(self, make_template, registry: Registry):
        make_template("scalar", descriptor="just a string\n")
        with pytest.raises(ForgeError) as exc_info:
            registry.get("scalar")
        assert exc_info.value.kind is ErrorKind.INVALID_TEMPLATE

    def test_name_defaults_to_directory(self, make_template, registry: Registry):
        make_template("unnamed", descriptor="type: go-template\n")
        assert registry.get("unnamed").name == "unnamed"

    def test_document_path_is_ignored(self, make_template, registry: Registry, java_descriptor: str):
        template_dir = make_template(
            "pathy", descriptor=java_descriptor + "path: /somewhere/else\n"
        )
        assert registry.get("pathy").path == template_dir


class TestExists:
    def test_exists(self, mixed_root: Path):
        registry = Registry(mixed_root)
        assert registry.exists("go-service") is True
        assert registry.exists("no-descriptor") is False
        assert registry.exists("broken") is False
        assert registry.exists("missing") is False
        assert registry.exists("") is False

    def test_yaml_name_is_not_a_lookup_key(self, make_template, registry: Registry, go_descriptor: str):
        make_template("go-svc", descriptor=go_descriptor.replace("{name}", "go-service"))
        assert registry.exists("go-svc") is True
        assert registry.exists("go-service") is False


class TestNameContainment:
    @pytest.fixture
    def outside(self, tmp_path: Path, templates_root: Path, go_descriptor: str) -> Path:
        """A valid template next to, not inside, the templates root."""
        outside = tmp_path / "outside"
        outside.mkdir()
        (outside / "template.yaml").write_text(go_descriptor.replace("{name}", "outside"))
        (templates_root / "group" / "inner").mkdir(parents=True)
        (templates_root / "group" / "inner" / "template.yaml").write_text(
            go_descriptor.replace("{name}", "inner")
        )
        return outside

    @pytest.mark.parametrize("name", ["../outside", "..", ".", "group/inner", "group\\inner"])
    def test_multi_segment_names_rejected(self, registry: Registry, outside: Path, name: str):
        with pytest.raises(ForgeError) as exc_info:
            registry.get(name)
        assert exc_info.value.kind is ErrorKind.TEMPLATE_NOT_FOUND
        assert registry.exists(name) is False

    def test_absolute_path_rejected(self, registry: Registry, outside: Path):
        with pytest.raises(ForgeError) as exc_info:
            registry.get(str(outside))
        assert exc_info.value.kind is ErrorKind.TEMPLATE_NOT_FOUND
