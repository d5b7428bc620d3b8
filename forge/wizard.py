"""Interactive project setup.

Walks the user through template selection and every parameter the chosen
template needs, validating each answer with the same rules as the
non-interactive path and re-asking until it passes.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable

from pydantic import BaseModel
from rich.console import Console
from rich.markup import escape
from rich.prompt import Confirm, Prompt

from forge.errors import ErrorKind, ForgeError
from forge.templates.descriptor import TemplateDescriptor
from forge.templates.registry import Registry
from forge.validation import (
    FLAVOR_JAVA,
    ValidationError,
    validate_group_id,
    validate_module_path,
    validate_name,
    validate_package,
    validate_version,
)

DEFAULT_TEMPLATE = "java-ddd"


class WizardAnswers(BaseModel):
    """Values collected by the wizard (also used to pre-populate it)."""

    template: str = DEFAULT_TEMPLATE
    artifact_id: str = ""
    group_id: str = ""
    version: str = ""
    package: str = ""
    module: str = ""
    output_dir: Path = Path(".")


class Wizard:
    """Prompts for a :class:`WizardAnswers`.

    Args:
        registry: Source of the template choices.
        console: Console the prompts are printed on.
        defaults: Values offered as prompt defaults.
    """

    def __init__(
        self,
        registry: Registry,
        console: Console | None = None,
        defaults: WizardAnswers | None = None,
    ) -> None:
        self.registry = registry
        self.console = console or Console()
        self.defaults = defaults or WizardAnswers()

    def run(self) -> WizardAnswers:
        """Ask every question and return the confirmed answers.

        Raises:
            ForgeError: ``TEMPLATE_NOT_FOUND`` when no templates exist,
                ``CANCELLED`` when the user declines the summary.
        """
        template = self._prompt_template()
        answers = WizardAnswers(template=template.ref)

        answers.artifact_id = self._ask(
            "Enter project name (artifactId)", self.defaults.artifact_id, validate_name
        )
        if template.flavor == FLAVOR_JAVA:
            answers.group_id = self._ask(
                "Enter groupId", self.defaults.group_id, validate_group_id
            )
        else:
            module_default = self.defaults.module or f"github.com/example/{answers.artifact_id}"
            answers.module = self._ask("Enter module path", module_default, validate_module_path)

        answers.version = (
            self._ask(
                "Enter version",
                self.defaults.version or template.default_version,
                validate_version,
            )
            or template.default_version
        )

        if template.flavor == FLAVOR_JAVA:
            answers.package = (
                self._ask(
                    "Enter package",
                    self.defaults.package or answers.group_id,
                    validate_package,
                )
                or answers.group_id
            )

        output_dir = Prompt.ask(
            "Enter output directory",
            default=str(self.defaults.output_dir),
            console=self.console,
        )
        answers.output_dir = Path(output_dir or str(self.defaults.output_dir))

        self._confirm(answers, template)
        return answers

    # -- Individual prompts ------------------------------------------------

    def _prompt_template(self) -> TemplateDescriptor:
        templates = self.registry.list()
        if not templates:
            raise ForgeError.template_not_found(self.defaults.template, [])

        names = [template.ref for template in templates]
        for template in templates:
            self.console.print(
                f"  [bold]{escape(template.ref)}[/bold]  {escape(template.description)}"
            )
        default = self.defaults.template if self.defaults.template in names else names[0]
        choice = Prompt.ask(
            "Select a template", choices=names, default=default, console=self.console
        )
        return templates[names.index(choice)]

    def _ask(
        self,
        message: str,
        default: str,
        validator: Callable[[str], ValidationError | None],
    ) -> str:
        while True:
            if default:
                value = Prompt.ask(message, default=default, console=self.console)
            else:
                value = Prompt.ask(message, console=self.console)
            value = (value or "").strip()
            error = validator(value)
            if error is None:
                return value
            self.console.print(f"[red]✗ {escape(error.message)}[/red]")
            if error.help:
                self.console.print(f"  [dim]{escape(error.help)}[/dim]")

    def _confirm(self, answers: WizardAnswers, template: TemplateDescriptor) -> None:
        self.console.print()
        self.console.print("Summary:")
        self.console.print(f"  Template:    {escape(answers.template)}")
        self.console.print(f"  Project:     {escape(answers.artifact_id)}")
        if template.flavor == FLAVOR_JAVA:
            self.console.print(f"  Group ID:    {escape(answers.group_id)}")
        else:
            self.console.print(f"  Module:      {escape(answers.module)}")
        self.console.print(f"  Version:     {escape(answers.version)}")
        if template.flavor == FLAVOR_JAVA:
            self.console.print(f"  Package:     {escape(answers.package)}")
        self.console.print(
            f"  Output:      {escape(str(answers.output_dir / answers.artifact_id))}"
        )
        self.console.print()

        if not Confirm.ask("Proceed with project creation?", default=True, console=self.console):
            raise ForgeError(ErrorKind.CANCELLED, "project creation cancelled")
