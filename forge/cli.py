"""forge command-line interface.

Usage::

    forge templates
    forge show go-service
    forge new -g com.example -a my-service
    forge new -t go-service -a my-api -m github.com/acme/my-api -o ./projects
    forge new --interactive
    forge version
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

from forge.config import Config
from forge.errors import ErrorKind, ForgeError
from forge.generator import GenerationRequest, Generator
from forge.output import Printer
from forge.templates import Registry
from forge.validation import FLAVOR_JAVA
from forge.wizard import DEFAULT_TEMPLATE, Wizard, WizardAnswers

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_CANCELLED = 130


# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------


def build_parser(config: Config) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="forge",
        description="Forge -- engineering scaffold CLI for generating projects from templates",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  forge new -g com.example -a my-service\n"
            "  forge new -t go-service -a my-api -m github.com/acme/my-api\n"
            "  forge templates\n"
            "  forge new            # starts the wizard when parameters are missing\n"
        ),
    )
    parser.add_argument(
        "--version", action="version", version=f"forge version {config.version}"
    )
    parser.add_argument("--no-color", action="store_true", help="Disable colored output")
    parser.add_argument(
        "--quiet", "-q", action="store_true", help="Suppress non-essential output"
    )

    sub = parser.add_subparsers(dest="command", metavar="COMMAND")

    sub.add_parser("templates", help="List available templates")

    show = sub.add_parser("show", help="Show a template's details and parameters")
    show.add_argument("name", help="Template name")

    new = sub.add_parser("new", help="Create a new project from a template")
    new.add_argument("--template", "-t", default=DEFAULT_TEMPLATE, help="Template to use")
    new.add_argument("--group-id", "-g", default="", help="Maven groupId (Java templates)")
    new.add_argument("--artifact-id", "-a", default="", help="Project name (required)")
    new.add_argument(
        "--version", "-v",
        dest="project_version",
        default="",
        help="Project version (default: 1.0.0-SNAPSHOT for Java, 0.1.0 for Go)",
    )
    new.add_argument("--package", "-p", default="", help="Java package (defaults to groupId)")
    new.add_argument("--module", "-m", default="", help="Go module path (Go templates)")
    new.add_argument("--output", "-o", default=".", help="Output directory (default: .)")
    new.add_argument(
        "--interactive", action="store_true", help="Enable interactive mode (wizard)"
    )

    sub.add_parser("version", help="Print the version number")
    return parser


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


def cmd_templates(registry: Registry, printer: Printer) -> int:
    templates = registry.list()
    if not templates:
        printer.warning("No templates found")
        return EXIT_OK

    printer.println("Available templates:")
    printer.println()
    printer.table(
        ["NAME", "TYPE", "DESCRIPTION"],
        [[t.ref, t.kind, t.description] for t in templates],
    )
    return EXIT_OK


def cmd_show(registry: Registry, printer: Printer, name: str) -> int:
    template = registry.get(name)
    details = {
        "Name": template.name,
        "Version": template.version,
        "Type": template.kind,
        "Description": template.description,
        "Language": template.stack.language,
        "Path": str(template.path),
    }
    if template.is_archetype:
        coords = template.archetype
        details["Archetype"] = f"{coords.group_id}:{coords.artifact_id}:{coords.version}"
    else:
        details["Min Go version"] = template.file_config.min_go_version
        details["Files dir"] = template.file_config.files_dir
    printer.summary(details, title=f"Template {template.name}")

    rows = [
        [p.name, "yes", p.default, p.description] for p in template.parameters.required
    ] + [
        [p.name, "no", p.default, p.description] for p in template.parameters.optional
    ]
    printer.table(["PARAMETER", "REQUIRED", "DEFAULT", "DESCRIPTION"], rows, title="Parameters")
    printer.table(
        ["MODULE", "DESCRIPTION"],
        [[m.name, m.description] for m in template.modules],
        title="Modules",
    )
    return EXIT_OK


def should_run_interactive(args: argparse.Namespace, registry: Registry) -> bool:
    """Decide whether ``forge new`` should start the wizard."""
    if args.interactive:
        return True
    if not sys.stdin.isatty():
        return False
    if not args.artifact_id:
        return True
    if not args.group_id and registry.exists(args.template):
        return registry.get(args.template).flavor == FLAVOR_JAVA
    return False


def cmd_new(args: argparse.Namespace, registry: Registry, printer: Printer) -> int:
    if should_run_interactive(args, registry):
        wizard = Wizard(
            registry,
            console=printer.console,
            defaults=WizardAnswers(
                template=args.template,
                artifact_id=args.artifact_id,
                group_id=args.group_id,
                version=args.project_version,
                package=args.package,
                module=args.module,
                output_dir=Path(args.output),
            ),
        )
        answers = wizard.run()
    else:
        answers = WizardAnswers(
            template=args.template,
            artifact_id=args.artifact_id,
            group_id=args.group_id,
            version=args.project_version,
            package=args.package,
            module=args.module,
            output_dir=Path(args.output),
        )

    template = registry.get(answers.template)
    request = GenerationRequest(
        artifact_id=answers.artifact_id,
        group_id=answers.group_id,
        version=answers.version,
        package=answers.package,
        module=answers.module,
        output_dir=answers.output_dir,
    )
    asyncio.run(Generator(template, printer).generate(request))
    return EXIT_OK


# ---------------------------------------------------------------------------
# Entry points
# ---------------------------------------------------------------------------


def report(error: ForgeError, printer: Printer) -> None:
    """Print *error* the way its kind calls for."""
    if error.kind is ErrorKind.VALIDATION_FAILED:
        printer.validation_errors(error.violations)
    elif error.kind is ErrorKind.TEMPLATE_NOT_FOUND:
        printer.template_not_found(error.name, error.available)
    else:
        printer.error(str(error))


def run(argv: list[str] | None = None, config: Config | None = None) -> int:
    """Parse *argv*, execute the command and return the exit status."""
    config = config or Config.from_env()
    parser = build_parser(config)
    args = parser.parse_args(argv)

    config = config.model_copy(
        update={
            "quiet": config.quiet or args.quiet,
            "no_color": config.no_color or args.no_color,
        }
    )
    printer = Printer(config)
    registry = Registry(config.templates_dir)

    try:
        if args.command == "templates":
            return cmd_templates(registry, printer)
        if args.command == "show":
            return cmd_show(registry, printer, args.name)
        if args.command == "new":
            return cmd_new(args, registry, printer)
        if args.command == "version":
            print(f"forge version {config.version}")
            return EXIT_OK
        parser.print_help()
        return EXIT_ERROR
    except ForgeError as exc:
        if exc.kind is ErrorKind.CANCELLED:
            printer.error(str(exc))
            return EXIT_CANCELLED
        report(exc, printer)
        return EXIT_ERROR
    except KeyboardInterrupt:
        printer.error("cancelled")
        return EXIT_CANCELLED


def main() -> None:
    """CLI entry point for ``forge`` and ``python -m forge``."""
    sys.exit(run())


if __name__ == "__main__":
    main()
