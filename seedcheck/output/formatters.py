"""
Report formatters.

Render a ValidationReport either as a human-readable rich report or as
JSON for other tools.
"""

import json
from abc import ABC, abstractmethod
from typing import Dict, Optional, Type

import click
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.rule import Rule
from rich.text import Text

from ..preflight.models import CheckResult, CheckStatus, ValidationReport
from ..config.models import CheckKind


NEXT_STEPS = [
    "Read README.md for an overview",
    "Review USAGE_GUIDE.md for detailed instructions",
    "Browse .github/agents/ to understand each agent's role",
    "Check templates/ for project structure examples",
    "Use cookiecutter to generate a new project",
]

STATUS_STYLES = {
    CheckStatus.PASS: ("✓", "green"),
    CheckStatus.WARNING: ("⚠", "yellow"),
    CheckStatus.FAIL: ("✗", "red"),
}


class ReportFormatter(ABC):
    """Base class for report formatters."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    @abstractmethod
    def render(self, report: ValidationReport) -> None:
        """Write the report to the console."""
        pass


class TextFormatter(ReportFormatter):
    """Human-readable report with a banner, grouped check lines and a summary."""

    title = "Agentic Project Seed - Setup Validation"

    def render(self, report: ValidationReport) -> None:
        console = self.console

        console.print(Panel.fit(f"[bold]{self.title}[/bold]", border_style="blue"))
        console.print(f"Project root: [cyan]{escape(str(report.root))}[/cyan]", soft_wrap=True)
        console.print()

        current_group = None
        for result in report.results:
            if result.group != current_group:
                if current_group is not None:
                    console.print()
                current_group = result.group
                console.print(Text(f"Checking {current_group}...", style="bold"), soft_wrap=True)
                console.print(Rule(style="dim"))
            console.print(self.format_line(result), soft_wrap=True)

        console.print()
        self._render_summary(report)

    @staticmethod
    def format_line(result: CheckResult) -> Text:
        """Build the single report line for a check result."""
        glyph, style = STATUS_STYLES[result.status]
        label = result.check.label
        line = Text()
        line.append(glyph, style=style)
        line.append(" ")

        if result.check.kind == CheckKind.MIN_SIZE:
            line.append(f"{label} {result.message}")
        elif result.status == CheckStatus.PASS:
            line.append(label)
        else:
            line.append(f"{label} ({result.message})")

        return line

    def _render_summary(self, report: ValidationReport) -> None:
        console = self.console

        console.print(Panel.fit("[bold]Validation Summary[/bold]", border_style="blue"))
        console.print()
        console.print(f"[green]Passed:[/green]   {report.passed_count}")
        console.print(f"[yellow]Warnings:[/yellow] {report.warning_count}")
        console.print(f"[red]Failed:[/red]   {report.failed_count}")
        console.print()

        if report.success:
            console.print("[green]✓ All checks passed![/green]")
            console.print()
            console.print("Your agentic project seed is properly set up and ready to use.")
            console.print()
            console.print("Next steps:")
            for number, step in enumerate(NEXT_STEPS, 1):
                console.print(f"{number}. {step}", soft_wrap=True)
        else:
            console.print("[red]✗ Some checks failed.[/red]")
            console.print()
            console.print("Please ensure all required files are present and properly configured.")
            console.print("Refer to the GitHub repository for the complete setup.")
        console.print()


class JsonFormatter(ReportFormatter):
    """Machine-readable report."""

    def render(self, report: ValidationReport) -> None:
        click.echo(json.dumps(report.to_dict(), indent=2), file=self.console.file)


FORMATTERS: Dict[str, Type[ReportFormatter]] = {
    "text": TextFormatter,
    "json": JsonFormatter,
}


def get_formatter(name: str, console: Optional[Console] = None) -> ReportFormatter:
    """
    Get a report formatter by name.

    Raises:
        ValueError: If no formatter is registered under the name
    """
    formatter_cls = FORMATTERS.get(name.lower())
    if formatter_cls is None:
        raise ValueError(
            f"Unknown output format: {name}. Available: {', '.join(sorted(FORMATTERS))}"
        )
    return formatter_cls(console)
