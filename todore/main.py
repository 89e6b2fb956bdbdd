"""
Main CLI entry point using Typer.

LEARNING NOTES:
- Typer is a modern CLI framework that uses Python type hints
- The Annotated[] syntax adds metadata (help text, defaults, validation)
- Rich provides the colored error messages and panels

This module defines the command-line interface:
- `todore run` - Start an interactive TODO session
- `todore export` - Render the saved tasks file without a session
- `todore config` - Show current configuration
- `todore version` - Show version information

The CLI only wires things together: settings -> logging -> storage ->
session. The task list logic lives in models.py and session.py.
"""

from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from . import __version__
from .config import Settings, get_settings
from .errors import TodoError
from .formatters import ExportFormat
from .logging_setup import setup_logging
from .models import TaskList
from .session import Session
from .storage import export_path, load_task_list, save_task_list, write_export


app = typer.Typer(
    name="todore",
    help="An interactive in-memory TODO list.",
    add_completion=False,
    no_args_is_help=True,
)

console = Console()


def _load_settings() -> Settings:
    try:
        return get_settings()
    except Exception as e:
        console.print(
            f"[red bold]Configuration Error:[/red bold] {escape(str(e))}\n\n"
            "Check the TODORE_* variables in your environment or .env file."
        )
        raise typer.Exit(1)


def _load_tasks(path: Path) -> TaskList:
    try:
        return load_task_list(path)
    except (TodoError, OSError) as e:
        console.print(f"[red]Error loading tasks from {escape(str(path))}:[/red] {escape(str(e))}")
        raise typer.Exit(1)


# ============================================================================
# Main Command: run
# ============================================================================

@app.command()
def run(
    tasks_file: Annotated[
        Optional[Path],
        typer.Option(
            "--tasks-file", "-t",
            help="JSON file to seed the list from (default: TODORE_TASKS_FILE or tasks.json)."
        )
    ] = None,

    no_load: Annotated[
        bool,
        typer.Option(
            "--no-load",
            help="Start with an empty list even if the tasks file exists."
        )
    ] = False,

    save: Annotated[
        Optional[bool],
        typer.Option(
            "--save/--no-save",
            help="Write the list back to the tasks file when the session ends."
        )
    ] = None,

    fail_fast: Annotated[
        Optional[bool],
        typer.Option(
            "--fail-fast/--keep-going",
            help="End the session on the first error instead of reporting it."
        )
    ] = None,
) -> None:
    """
    Start an interactive TODO session.

    \b
    Examples:
        # Seed from ./tasks.json if present
        todore run

        # Use another file and save changes on quit
        todore run -t ~/todo.json --save
    """
    settings = _load_settings()
    setup_logging(console_level=settings.log_level, log_file=settings.log_file)

    path = tasks_file or settings.tasks_file
    should_load = settings.load_on_start and not no_load
    should_save = settings.save_on_quit if save is None else save
    stop_on_error = settings.fail_fast if fail_fast is None else fail_fast

    task_list = _load_tasks(path) if should_load else TaskList()
    session = Session(task_list, console=console, fail_fast=stop_on_error)

    try:
        session.run()
    except (TodoError, OSError) as e:
        console.print(f"[red bold]Error:[/red bold] {escape(str(e))}")
        raise typer.Exit(1)
    except KeyboardInterrupt:
        console.print("\n[yellow]Cancelled by user.[/yellow]")
        raise typer.Exit(130)

    if should_save:
        try:
            saved = save_task_list(session.task_list, path)
        except OSError as e:
            console.print(f"[red]Failed to save tasks to {escape(str(path))}:[/red] {escape(str(e))}")
            raise typer.Exit(1)
        console.print(f"[green]Tasks saved to:[/green] {escape(str(saved))}")


# ============================================================================
# Utility Commands
# ============================================================================

@app.command()
def export(
    output_format: Annotated[
        ExportFormat,
        typer.Option(
            "--format", "-f",
            help="Output format."
        )
    ] = ExportFormat.JSON,

    output_file: Annotated[
        Optional[str],
        typer.Option(
            "--output", "-o",
            help="Write output to file instead of stdout."
        )
    ] = None,

    tasks_file: Annotated[
        Optional[Path],
        typer.Option(
            "--tasks-file", "-t",
            help="JSON file to read (default: TODORE_TASKS_FILE or tasks.json)."
        )
    ] = None,
) -> None:
    """Render the saved tasks file as JSON, YAML or plain text."""
    settings = _load_settings()
    setup_logging(console_level=settings.log_level, log_file=settings.log_file)

    task_list = _load_tasks(tasks_file or settings.tasks_file)
    output = task_list.export(output_format)

    if output_file:
        try:
            out = write_export(output, export_path(output_file, output_format))
        except OSError as e:
            console.print(f"[red]Failed to write {escape(output_file)}:[/red] {escape(str(e))}")
            raise typer.Exit(1)
        console.print(f"[green]Exported to:[/green] {escape(str(out))}")
    else:
        # Plain echo keeps tabs and text byte-exact for piping
        typer.echo(output)


@app.command()
def config() -> None:
    """Show current configuration."""
    settings = _load_settings()
    console.print(Panel(
        f"[bold]Tasks File:[/bold] {escape(str(settings.tasks_file))}\n"
        f"[bold]Load On Start:[/bold] {settings.load_on_start}\n"
        f"[bold]Save On Quit:[/bold] {settings.save_on_quit}\n"
        f"[bold]Fail Fast:[/bold] {settings.fail_fast}\n"
        f"[bold]Log Level:[/bold] {settings.log_level}\n"
        f"[bold]Log File:[/bold] {escape(str(settings.log_file or '-'))}",
        title="Current Configuration",
        border_style="green"
    ))


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold]todore[/bold] version {__version__}")


if __name__ == "__main__":
    app()
