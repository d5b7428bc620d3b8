"""Tests for the interactive wizard (forge.wizard).

``Prompt.ask`` and ``Confirm.ask`` are patched with scripted answers, in the
order the wizard asks its questions.
"""

from __future__ import annotations

import io
from pathlib import Path
from unittest.mock import patch

import pytest
from rich.console import Console
from rich.prompt import Confirm, Prompt

from forge.errors import ErrorKind, ForgeError
from forge.templates import Registry
from forge.wizard import Wizard, WizardAnswers

pytestmark = pytest.mark.unit


@pytest.fixture
def console() -> Console:
    return Console(file=io.StringIO(), no_color=True, width=120)


@pytest.fixture
def both_templates(go_template: Path, java_template: Path, registry: Registry) -> Registry:
    return registry


class TestWizard:
    def test_java_flow(self, both_templates: Registry, console: Console):
        answers = [
            "java-ddd",
            "my-service",
            "com.example",
            "1.0.0-SNAPSHOT",
            "com.example.svc",
            "./projects",
        ]
        with (
            patch.object(Prompt, "ask", side_effect=answers),
            patch.object(Confirm, "ask", return_value=True),
        ):
            result = Wizard(both_templates, console=console).run()

        assert result == WizardAnswers(
            template="java-ddd",
            artifact_id="my-service",
            group_id="com.example",
            version="1.0.0-SNAPSHOT",
            package="com.example.svc",
            output_dir=Path("./projects"),
        )
        summary = console.file.getvalue()
        assert "Group ID:    com.example" in summary
        assert "Package:     com.example.svc" in summary

    def test_go_flow_asks_for_module(self, both_templates: Registry, console: Console):
        answers = ["go-service", "my-api", "github.com/acme/my-api", "0.1.0", "."]
        with (
            patch.object(Prompt, "ask", side_effect=answers) as mock_ask,
            patch.object(Confirm, "ask", return_value=True),
        ):
            result = Wizard(both_templates, console=console).run()

        assert result.template == "go-service"
        assert result.module == "github.com/acme/my-api"
        assert result.group_id == ""
        assert result.package == ""
        module_prompt = mock_ask.call_args_list[2]
        assert module_prompt.kwargs["default"] == "github.com/example/my-api"

    def test_template_chosen_by_directory_name(
        self, make_template, registry: Registry, go_descriptor: str, console: Console
    ):
        make_template("go-svc", descriptor=go_descriptor.replace("{name}", "Go Service"))
        answers = ["go-svc", "my-api", "github.com/acme/my-api", "0.1.0", "."]
        with (
            patch.object(Prompt, "ask", side_effect=answers) as mock_ask,
            patch.object(Confirm, "ask", return_value=True),
        ):
            result = Wizard(registry, console=console).run()

        assert mock_ask.call_args_list[0].kwargs["choices"] == ["go-svc"]
        assert result.template == "go-svc"
        assert registry.exists(result.template)

    def test_invalid_answer_is_asked_again(self, both_templates: Registry, console: Console):
        answers = ["go-service", "My_Api", "", "my-api", "github.com/acme/my-api", "0.1.0", "."]
        with (
            patch.object(Prompt, "ask", side_effect=answers),
            patch.object(Confirm, "ask", return_value=True),
        ):
            result = Wizard(both_templates, console=console).run()

        assert result.artifact_id == "my-api"
        output = console.file.getvalue()
        assert "invalid artifactId 'My_Api'" in output
        assert "artifact-id is required" in output

    def test_package_defaults_to_group(self, both_templates: Registry, console: Console):
        answers = ["java-ddd", "svc", "com.example", "", "", "."]
        with (
            patch.object(Prompt, "ask", side_effect=answers),
            patch.object(Confirm, "ask", return_value=True),
        ):
            result = Wizard(both_templates, console=console).run()

        assert result.package == "com.example"
        assert result.version == "1.0.0-SNAPSHOT"

    def test_defaults_offered(self, both_templates: Registry, console: Console):
        defaults = WizardAnswers(template="go-service", artifact_id="my-api", module="example.com/x")
        with (
            patch.object(Prompt, "ask", side_effect=["go-service", "my-api", "example.com/x", "0.1.0", "."]) as mock_ask,
            patch.object(Confirm, "ask", return_value=True),
        ):
            Wizard(both_templates, console=console, defaults=defaults).run()

        template_prompt, artifact_prompt, module_prompt = mock_ask.call_args_list[:3]
        assert template_prompt.kwargs["default"] == "go-service"
        assert sorted(template_prompt.kwargs["choices"]) == ["go-service", "java-ddd"]
        assert artifact_prompt.kwargs["default"] == "my-api"
        assert module_prompt.kwargs["default"] == "example.com/x"

    def test_declined_summary_cancels(self, both_templates: Registry, console: Console):
        with (
            patch.object(Prompt, "ask", side_effect=["go-service", "my-api", "example.com/x", "", "."]),
            patch.object(Confirm, "ask", return_value=False),
        ):
            with pytest.raises(ForgeError) as exc_info:
                Wizard(both_templates, console=console).run()
        assert exc_info.value.kind is ErrorKind.CANCELLED

    def test_no_templates(self, registry: Registry, console: Console):
        with pytest.raises(ForgeError) as exc_info:
            Wizard(registry, console=console).run()
        assert exc_info.value.kind is ErrorKind.TEMPLATE_NOT_FOUND
