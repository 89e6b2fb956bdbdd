"""
Output formatting for task lists.

LEARNING NOTES:
- Separating formatting from data models follows "separation of concerns"
- The models know what the data IS; formatters know how to DISPLAY it
- The set of formats is fixed, so an Enum with one render() method is all
  the dispatch we need (no plugin registry)

Supports three output formats:
- Plaintext: one line per task, easy to read or grep
- JSON: machine-readable, and the only format that can be imported back
- YAML: the same data as JSON in an indentation-based layout

Each formatter takes a TaskList and returns a string.
"""

from enum import Enum

import yaml

from .errors import ParseError
from .models import TaskList


def format_as_plaintext(task_list: TaskList) -> str:
    """
    Format tasks as "<id>: <description>\\t<status>" lines.

    Lines are joined with newlines and there is no trailing newline,
    so an empty list gives an empty string.
    """
    return "\n".join(
        f"{task.id}: {task.description}\t{task.status.display_name}"
        for task in task_list.tasks
    )


def format_as_json(task_list: TaskList, indent: int = 2) -> str:
    """
    Format the task list as pretty-printed JSON.

    LEARNING NOTE:
    model_dump_json() writes the status Enum as its value ("NotStarted"),
    which is the same thing TaskList.import_json() expects to read back.

    Args:
        task_list: The TaskList to format
        indent: Number of spaces for indentation

    Returns:
        JSON string representation
    """
    return task_list.model_dump_json(indent=indent)


def format_as_yaml(task_list: TaskList) -> str:
    """
    Format the task list as block-style YAML.

    mode="json" turns the Enum into plain strings first, so safe_dump
    never has to represent Python objects. sort_keys=False keeps the
    id / description / status order of the model.
    """
    return yaml.safe_dump(
        task_list.model_dump(mode="json"),
        default_flow_style=False,
        sort_keys=False,
        allow_unicode=True,
    )


class ExportFormat(str, Enum):
    """
    Supported export formats.

    LEARNING NOTE:
    This is a str Enum, so Typer can use it directly as a --format choice.
    """
    PLAINTEXT = "plaintext"
    JSON = "json"
    YAML = "yaml"

    def render(self, task_list: TaskList) -> str:
        """Render the task list in this format."""
        return _RENDERERS[self](task_list)

    @property
    def suffix(self) -> str:
        """Conventional file extension for this format."""
        return _SUFFIXES[self]

    @classmethod
    def parse(cls, text: str) -> "ExportFormat":
        """
        Parse a format selector: json/j, yaml/y or plaintext/p.

        Raises:
            ParseError: If the selector is not recognized
        """
        try:
            return _SELECTORS[text.strip().lower()]
        except KeyError:
            raise ParseError(f"Invalid export format: '{text}'") from None


_RENDERERS = {
    ExportFormat.PLAINTEXT: format_as_plaintext,
    ExportFormat.JSON: format_as_json,
    ExportFormat.YAML: format_as_yaml,
}

_SUFFIXES = {
    ExportFormat.PLAINTEXT: ".txt",
    ExportFormat.JSON: ".json",
    ExportFormat.YAML: ".yaml",
}

_SELECTORS = {
    "p": ExportFormat.PLAINTEXT,
    "plaintext": ExportFormat.PLAINTEXT,
    "j": ExportFormat.JSON,
    "json": ExportFormat.JSON,
    "y": ExportFormat.YAML,
    "yaml": ExportFormat.YAML,
}
