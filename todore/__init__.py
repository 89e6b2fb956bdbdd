"""
Todore - an interactive in-memory TODO list.

Tasks are added, removed and updated through short commands typed into
a session, and the list can be exported as plain text, JSON or YAML.
JSON exports can be imported back.

CLI Usage:
    $ todore run
    $ todore export --format yaml -o tasks.yaml

Programmatic Usage:
    from todore import ExportFormat, Task, TaskList

    tasks = TaskList()
    tasks.add(Task(id=1, description="Write docs"))
    print(tasks.export(ExportFormat.PLAINTEXT))
"""

__version__ = "0.1.0"

from .commands import parse_command
from .errors import NotFoundError, ParseError, TodoError
from .formatters import ExportFormat, format_as_json, format_as_plaintext, format_as_yaml
from .models import Task, TaskList, TaskStatus
from .session import Session

__all__ = [
    "__version__",
    # Models
    "Task",
    "TaskList",
    "TaskStatus",
    # Errors
    "TodoError",
    "ParseError",
    "NotFoundError",
    # Formatters
    "ExportFormat",
    "format_as_plaintext",
    "format_as_json",
    "format_as_yaml",
    # Session
    "parse_command",
    "Session",
]
