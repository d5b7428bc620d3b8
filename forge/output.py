"""Rich-based terminal output.

:class:`Printer` is the one place forge writes user-facing messages.  It is
constructed from a :class:`~forge.config.Config` and handed to whoever needs
it.  Quiet mode silences everything except errors, which always go to
stderr.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.table import Table

if TYPE_CHECKING:
    from forge.config import Config
    from forge.validation import ValidationError


class Printer:
    """Formatted output to stdout/stderr.

    Args:
        config: Supplies the ``quiet`` and ``no_color`` switches.
        console: Console for regular output (defaults to stdout).
        err_console: Console for errors (defaults to stderr).
    """

    def __init__(
        self,
        config: Config | None = None,
        console: Console | None = None,
        err_console: Console | None = None,
    ) -> None:
        self.quiet = bool(config and config.quiet)
        no_color = bool(config and config.no_color)
        self.console = console or Console(no_color=no_color, highlight=False)
        self.err_console = err_console or Console(
            stderr=True, no_color=no_color, highlight=False
        )

    # -- Plain messages ----------------------------------------------------

    def println(self, message: str = "") -> None:
        if self.quiet:
            return
        self.console.print(message)

    def info(self, message: str) -> None:
        if self.quiet:
            return
        self.console.print(f"[cyan]i[/cyan] {message}")

    def success(self, message: str) -> None:
        if self.quiet:
            return
        self.console.print(f"[bold green]✓[/bold green] {message}")

    def warning(self, message: str) -> None:
        if self.quiet:
            return
        self.console.print(f"[bold yellow]Warning:[/bold yellow] {message}")

    def error(self, message: str) -> None:
        self.err_console.print(f"[bold red]Error:[/bold red] {escape(message)}")

    # -- Structured output -------------------------------------------------

    def table(self, headers: list[str], rows: list[list[str]], title: str | None = None) -> None:
        """Print a table with one column per header."""
        if self.quiet or not rows:
            return
        table = Table(title=title, show_header=True, header_style="bold cyan")
        for header in headers:
            table.add_column(header)
        for row in rows:
            table.add_row(*(escape(cell) for cell in row))
        self.console.print(table)

    def summary(self, data: dict[str, str], title: str = "Summary") -> None:
        """Print a two-column key/value summary table."""
        if self.quiet:
            return
        table = Table(title=title, show_header=False)
        table.add_column("Item", style="dim", no_wrap=True)
        table.add_column("Value")
        for key, value in data.items():
            table.add_row(key, escape(str(value)))
        self.console.print(table)

    def validation_errors(self, errors: list[ValidationError]) -> None:
        """List every parameter violation with its remediation hint."""
        self.err_console.print()
        self.err_console.print(
            f"[bold red]Error:[/bold red] Validation failed with {len(errors)} error(s):"
        )
        self.err_console.print()
        for error in errors:
            self.err_console.print(f"  [red]✗[/red] {escape(str(error))}")
            if error.help:
                self.err_console.print(f"    [dim]{escape(error.help)}[/dim]")
        self.err_console.print()
        self.err_console.print("For usage information, run: forge new --help")

    def template_not_found(self, name: str, available: list[str]) -> None:
        self.error(f"Template '{name}' not found")
        if available:
            self.err_console.print()
            self.err_console.print("Available templates:")
            for template_name in available:
                self.err_console.print(f"  - {escape(template_name)}")

    def project_created(self, artifact_id: str, next_steps: list[str]) -> None:
        """Print the success banner followed by suggested next steps."""
        self.println()
        self.success("Project created successfully!")
        self.println()
        if next_steps:
            self.println("Next steps:")
            self.println(f"  cd {escape(artifact_id)}")
            for step in next_steps:
                self.println(f"  {escape(step)}")
