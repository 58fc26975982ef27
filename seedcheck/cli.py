"""
Command-line interface for the agentic project seed validator.

Provides commands for validating a project checkout, listing the
configured checks and exporting the built-in checklist.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from . import __version__
from .config import ChecklistLoader, Checklist, ConfigError, get_default_checklist
from .output.formatters import FORMATTERS, get_formatter
from .preflight import SetupChecker

console = Console()

logger = logging.getLogger(__name__)


def _configure_logging(verbose: bool) -> None:
    """Send log records to stderr through rich."""
    handler = RichHandler(
        console=Console(stderr=True),
        show_time=False,
        show_path=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))

    package_logger = logging.getLogger("seedcheck")
    package_logger.handlers = [handler]
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    package_logger.propagate = False


def _load_checklist(checklist: Optional[str]) -> Checklist:
    if checklist:
        return ChecklistLoader(checklist).load()
    return get_default_checklist()


# ============================================================
# Main CLI Group
# ============================================================

@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="seedcheck")
@click.pass_context
def cli(ctx):
    """
    Agentic Project Seed Validator

    Verify that a project seed checkout contains every agent, template
    and guide file, and that the key documents have real content.
    Runs `validate` on the current directory when no command is given.
    """
    if ctx.invoked_subcommand is None:
        ctx.invoke(validate)


# ============================================================
# VALIDATE Command
# ============================================================

@cli.command()
@click.option(
    "--root",
    "-r",
    type=click.Path(exists=True, file_okay=False),
    default=".",
    help="Project root to validate (default: current directory)",
)
@click.option("--checklist", "-c", type=click.Path(), help="Custom YAML checklist")
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(sorted(FORMATTERS)),
    default="text",
    help="Report format",
)
@click.option("--group", "-g", type=str, help="Only run the checks of one group")
@click.option("--no-color", is_flag=True, help="Disable coloured output")
@click.option("--verbose", "-v", is_flag=True, help="Log every probe to stderr")
def validate(
    root: str = ".",
    checklist: Optional[str] = None,
    output_format: str = "text",
    group: Optional[str] = None,
    no_color: bool = False,
    verbose: bool = False,
):
    """Validate a project seed checkout."""
    _configure_logging(verbose)
    out = Console(no_color=no_color, highlight=False)

    try:
        checker = SetupChecker(Path(root).resolve(), _load_checklist(checklist))
    except ConfigError as e:
        out.print(f"[red]✗ Checklist error: {escape(str(e))}[/red]")
        sys.exit(2)

    if group:
        report = checker.run_group(group)
        if report is None:
            titles = ", ".join(g.title for g in checker.checklist.groups)
            out.print(f"[red]✗ Unknown group: {escape(group)}. Available: {escape(titles)}[/red]", soft_wrap=True)
            sys.exit(2)
    else:
        report = checker.run_all()

    get_formatter(output_format, out).render(report)
    logger.debug(report.summary())
    sys.exit(report.exit_code)


# ============================================================
# LIST Command
# ============================================================

@cli.command("list")
@click.option("--checklist", "-c", type=click.Path(), help="Custom YAML checklist")
def list_checks(checklist: Optional[str]):
    """List the configured checks."""
    try:
        loaded = _load_checklist(checklist)
    except ConfigError as e:
        console.print(f"[red]✗ Checklist error: {escape(str(e))}[/red]")
        sys.exit(2)

    table = Table(title=f"Checks ({len(loaded)})")
    table.add_column("Group", style="cyan")
    table.add_column("Kind", style="magenta")
    table.add_column("Path", style="white")
    table.add_column("Threshold", justify="right")
    table.add_column("Label", style="dim")

    for title, check in loaded.iter_grouped():
        table.add_row(
            Text(title),
            check.kind.value,
            Text(check.path),
            f">{check.threshold}" if check.threshold is not None else "",
            Text(check.label),
        )

    console.print(table)


# ============================================================
# INIT-CHECKLIST Command
# ============================================================

@cli.command("init-checklist")
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False),
    default="./seedcheck.yaml",
    help="Output file for the checklist",
)
@click.option("--force", is_flag=True, help="Overwrite an existing file")
def init_checklist(output: str, force: bool):
    """Write the built-in checklist as YAML to start a custom one."""
    output_path = Path(output)

    if output_path.exists() and not force:
        console.print(f"[yellow]{escape(output)} already exists. Use --force to overwrite.[/yellow]")
        sys.exit(1)

    written = ChecklistLoader.save(get_default_checklist(), output_path)
    console.print(f"[green]✓ Wrote checklist to {escape(str(written))}[/green]")


# ============================================================
# Entry Point
# ============================================================

if __name__ == "__main__":
    cli()
