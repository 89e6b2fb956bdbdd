"""
Exception types raised by the task list and the command parser.

LEARNING NOTE:
A small hierarchy lets callers choose how much to catch. The session loop
catches TodoError to recover from any user mistake, while tests can check
for the exact subclass.
"""


class TodoError(Exception):
    """Base class for every error the todo core raises."""
    pass


class ParseError(TodoError):
    """
    Raised when text cannot be understood.

    Covers malformed command lines, ids, field selectors, status synonyms,
    export formats and import payloads.
    """
    pass


class NotFoundError(TodoError):
    """Raised when an update targets an id that is not in the list."""

    def __init__(self, task_id: int) -> None:
        self.task_id = task_id
        super().__init__(f"Task with id {task_id} was not found")
