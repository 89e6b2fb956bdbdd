"""
The interactive read-parse-apply-print loop.

Each step shows the current tasks (as JSON) and the menu, reads one line,
lowercases and trims it, parses it into a command and applies it to the
task list. The loop ends on quit or end of input.

Errors from parsing or from the task list are reported and the loop keeps
going. With fail_fast=True they propagate instead and end the session.
"""

import logging
from collections.abc import Callable

from rich.console import Console
from rich.markup import escape

from .commands import (
    HELP_TEXT,
    AddCommand,
    Command,
    ExportCommand,
    QuitCommand,
    RemoveCommand,
    TaskField,
    UpdateCommand,
    parse_command,
)
from .errors import TodoError
from .formatters import ExportFormat
from .models import Task, TaskList, TaskStatus
from .storage import export_path, write_export

logger = logging.getLogger(__name__)


class Session:
    """
    One interactive session over a single TaskList.

    The session is the only thing that hands out task ids. The counter
    starts just past the highest id already in the list (0 for an empty
    list), so tasks seeded from a file keep their ids and new ones never
    collide with them.

    Example:
        session = Session(read_line=lambda: "q")
        session.run()
    """

    def __init__(
        self,
        task_list: TaskList | None = None,
        *,
        console: Console | None = None,
        read_line: Callable[[], str] | None = None,
        fail_fast: bool = False,
    ) -> None:
        self.task_list = task_list if task_list is not None else TaskList()
        self.console = console or Console()
        self.fail_fast = fail_fast
        self.next_id = self.task_list.next_id()
        self._read_line = read_line or self.console.input

    def run(self) -> TaskList:
        """Run until quit or end of input, then return the task list."""
        self.console.print("[bold]Welcome to the Todore in-memory TODO list![/bold]")
        logger.info("Session started with %d task(s)", len(self.task_list))

        while self.step():
            pass

        logger.info("Session ended with %d task(s)", len(self.task_list))
        return self.task_list

    def step(self) -> bool:
        """
        Show the list and menu, then read and apply one command.

        Returns:
            False when the session should end, True otherwise
        """
        self.show()

        try:
            raw = self._read_line()
        except EOFError:
            logger.info("End of input, leaving session")
            return False

        line = raw.strip().lower()
        self.console.print(f"You chose: {escape(line)}")

        try:
            return self.apply(parse_command(line))
        except (TodoError, OSError) as e:
            if self.fail_fast:
                raise
            logger.info("Command %r failed: %s", line, e)
            self.console.print(f"[red]Error:[/red] {escape(str(e))}")
            return True

    def show(self) -> None:
        """Print the current tasks (if any) and the command menu."""
        if self.task_list:
            self.console.print("Here are your current tasks:")
            self._print_plain(self.task_list.export(ExportFormat.JSON))
        self._print_plain(HELP_TEXT)

    def apply(self, command: Command) -> bool:
        """
        Apply a parsed command to the task list.

        Returns:
            False for QuitCommand, True for everything else

        Raises:
            ParseError: If a status value is not a valid synonym
            NotFoundError: If an update targets a missing id
        """
        if isinstance(command, AddCommand):
            self.add_task(command.description)

        elif isinstance(command, RemoveCommand):
            self.task_list.remove(command.id)

        elif isinstance(command, UpdateCommand):
            if command.field == TaskField.STATUS:
                status = TaskStatus.parse(command.new_value)
                self.task_list.update_status(command.id, status)
            else:
                self.task_list.update_description(command.id, command.new_value)

        elif isinstance(command, ExportCommand):
            self.export(command.format, command.destination)

        elif isinstance(command, QuitCommand):
            return False

        return True

    def add_task(self, description: str) -> Task:
        """Create a task with the next id and append it."""
        task = Task(id=self.next_id, description=description)
        self.task_list.add(task)
        self.next_id += 1
        return task

    def export(self, export_format: ExportFormat, destination: str | None = None) -> None:
        """
        Print the rendered list, or write it to destination when given.

        A destination without an extension gets the format's own one.
        """
        content = self.task_list.export(export_format)

        if destination:
            out = write_export(content, export_path(destination, export_format))
            self.console.print(f"[green]Exported to:[/green] {escape(str(out))}")
        else:
            self._print_plain(content)

    def _print_plain(self, text: str) -> None:
        # Task text is user input, so never interpret it as Rich markup
        self.console.print(text, markup=False, highlight=False, soft_wrap=True)
