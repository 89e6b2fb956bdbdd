"""
Parsing of one line of session input into a structured command.

LEARNING NOTES:
- Each command is a small Pydantic model, so the session loop can use
  isinstance() checks and get typed fields back
- Parsing never touches the task list; it only turns text into data
- Every failure is a ParseError with a message the user can act on

Command syntax (one per line):
    a|add <description-word>
    r|remove <id>
    u|update <id> s|status|d|description <value-word>
    e|export j|json|y|yaml|p|plaintext [<output-file>]
    q|quit

Arguments are split on single spaces and only the word right after the
keyword is captured, so "add buy milk" adds a task called "buy".
"""

import re
from enum import Enum

from pydantic import BaseModel, Field

from .errors import ParseError
from .formatters import ExportFormat
from .models import TaskStatus

HELP_TEXT = """Below are the options:
[a | add] <TODO-item>
[r | remove] <TODO-item-id>
[u | update] <TODO-item-id> [s | status] | [d | description] <new-value>
[e | export] [j | json] | [y | yaml] | [p | plaintext] [<output-file>]
[q | quit]"""

_ID_PATTERN = re.compile(r"[0-9]+")


class TaskField(str, Enum):
    """Which field of a task an update command changes."""
    DESCRIPTION = "description"
    STATUS = "status"

    @classmethod
    def parse(cls, text: str) -> "TaskField":
        try:
            return _FIELD_SELECTORS[text.lower()]
        except KeyError:
            raise ParseError(f"Invalid field argument: '{text}'") from None


_FIELD_SELECTORS = {
    "d": TaskField.DESCRIPTION,
    "description": TaskField.DESCRIPTION,
    "s": TaskField.STATUS,
    "status": TaskField.STATUS,
}


class AddCommand(BaseModel):
    description: str


class RemoveCommand(BaseModel):
    id: int = Field(ge=0)


class UpdateCommand(BaseModel):
    """
    Change one field of a task.

    new_value stays the raw word that was typed. For status updates the
    parser has already checked that it is a valid status synonym.
    """

    id: int = Field(ge=0)
    field: TaskField
    new_value: str


class ExportCommand(BaseModel):
    """Render the list; destination None means print to the screen."""

    format: ExportFormat
    destination: str | None = None


class QuitCommand(BaseModel):
    pass


Command = AddCommand | RemoveCommand | UpdateCommand | ExportCommand | QuitCommand


def parse_command(line: str) -> Command:
    """
    Parse one line of input.

    Args:
        line: The raw line, already trimmed by the caller

    Returns:
        One of the command models

    Raises:
        ParseError: For unknown commands, missing arguments or bad values
    """
    parts = line.split(" ")
    name = parts[0].lower()
    args = parts[1:]

    if name in ("a", "add"):
        _require(args, 1, "add")
        return AddCommand(description=args[0])

    if name in ("r", "remove"):
        _require(args, 1, "remove")
        return RemoveCommand(id=_parse_id(args[0]))

    if name in ("u", "update"):
        _require(args, 3, "update")
        task_id = _parse_id(args[0])
        field = TaskField.parse(args[1])
        new_value = args[2]
        if field == TaskField.STATUS:
            # Validate now so a bad status is reported as a parse failure
            TaskStatus.parse(new_value)
        return UpdateCommand(id=task_id, field=field, new_value=new_value)

    if name in ("e", "export"):
        _require(args, 1, "export")
        export_format = ExportFormat.parse(args[0])
        destination = args[1] if len(args) > 1 and args[1] else None
        return ExportCommand(format=export_format, destination=destination)

    if name in ("q", "quit"):
        return QuitCommand()

    raise ParseError(f"Invalid command: '{parts[0]}'")


def _require(args: list[str], count: int, command: str) -> None:
    if len(args) < count:
        raise ParseError(f"Invalid arguments for {command}.")


def _parse_id(text: str) -> int:
    if not _ID_PATTERN.fullmatch(text):
        raise ParseError(f"Invalid task id: '{text}'")
    return int(text)
