"""
Pydantic models for the in-memory task list.

LEARNING NOTES:
- Pydantic models validate data on the way in and serialize it on the way out
- The JSON export is just model_dump_json(), and the import is
  model_validate_json(), so the two can never drift apart
- TaskStatus is a "str Enum" whose values are the symbolic names
  ("NotStarted", ...), which is exactly what ends up in the JSON file

These models define:
- The lifecycle state of a task
- A single task
- The ordered task list with its mutation operations
"""

import logging
from enum import Enum
from typing import TYPE_CHECKING

from pydantic import BaseModel, Field, ValidationError

from .errors import NotFoundError, ParseError

if TYPE_CHECKING:
    from .formatters import ExportFormat

logger = logging.getLogger(__name__)


class TaskStatus(str, Enum):
    """
    Lifecycle state of a task.

    LEARNING NOTE:
    Any status may follow any other; there are no transition guards.
    The value is what gets serialized, display_name is what people read.
    """
    NOT_STARTED = "NotStarted"
    IN_PROGRESS = "InProgress"
    COMPLETED = "Completed"

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]

    @classmethod
    def parse(cls, text: str) -> "TaskStatus":
        """
        Parse a user-typed status synonym such as "ip" or "completed".

        Raises:
            ParseError: If the text is not a recognized synonym
        """
        try:
            return _STATUS_SYNONYMS[text.strip().lower()]
        except KeyError:
            raise ParseError(f"Unknown task status: '{text}'") from None


_DISPLAY_NAMES = {
    TaskStatus.NOT_STARTED: "Not Started",
    TaskStatus.IN_PROGRESS: "In Progress",
    TaskStatus.COMPLETED: "Completed",
}

_STATUS_SYNONYMS = {
    "not started": TaskStatus.NOT_STARTED,
    "ns": TaskStatus.NOT_STARTED,
    "in progress": TaskStatus.IN_PROGRESS,
    "ip": TaskStatus.IN_PROGRESS,
    "completed": TaskStatus.COMPLETED,
    "c": TaskStatus.COMPLETED,
}


class Task(BaseModel):
    """
    A single to-do entry.

    Example:
        task = Task(id=1, description="Buy milk")
        task.status  # TaskStatus.NOT_STARTED
    """

    id: int = Field(
        ge=0,
        description="Task identifier (unsigned)"
    )

    description: str = Field(
        description="What needs to be done"
    )

    status: TaskStatus = Field(
        default=TaskStatus.NOT_STARTED,
        description="Current lifecycle state"
    )


class TaskList(BaseModel):
    """
    Ordered collection of tasks for one session.

    Insertion order is preserved and nothing is ever sorted. Ids are not
    required to be unique: remove() deletes every match while the update
    methods only touch the first one.

    LEARNING NOTE:
    The single `tasks` field gives the JSON form its shape:
        {"tasks": [{"id": 1, "description": "...", "status": "NotStarted"}]}
    """

    tasks: list[Task] = Field(
        default_factory=list,
        description="Tasks in insertion order"
    )

    def __len__(self) -> int:
        return len(self.tasks)

    def add(self, task: Task) -> None:
        """Append a task to the end of the list."""
        self.tasks.append(task)
        logger.debug("Added task %d: %r", task.id, task.description)

    def remove(self, task_id: int) -> None:
        """
        Remove every task with the given id.

        Removing an id that is not present does nothing.
        """
        before = len(self.tasks)
        self.tasks = [task for task in self.tasks if task.id != task_id]
        logger.debug("Removed %d task(s) with id %d", before - len(self.tasks), task_id)

    def update_status(self, task_id: int, new_status: TaskStatus) -> None:
        """
        Set the status of the first task with the given id.

        Raises:
            NotFoundError: If no task has that id
        """
        task = self._find(task_id)
        task.status = new_status
        logger.debug("Task %d status -> %s", task_id, new_status.value)

    def update_description(self, task_id: int, new_description: str) -> None:
        """
        Set the description of the first task with the given id.

        Raises:
            NotFoundError: If no task has that id
        """
        task = self._find(task_id)
        task.description = new_description
        logger.debug("Task %d description -> %r", task_id, new_description)

    def next_id(self) -> int:
        """Return one more than the highest id present, or 0 for an empty list."""
        return max((task.id for task in self.tasks), default=-1) + 1

    def export(self, export_format: "ExportFormat") -> str:
        """Render the list with the given format. Does not modify the list."""
        return export_format.render(self)

    def import_json(self, payload: str) -> None:
        """
        Replace all tasks with the ones in a JSON export.

        The payload is fully parsed before anything is assigned, so a
        malformed payload leaves the current tasks untouched.

        Raises:
            ParseError: If the payload is not a valid task list
        """
        imported = TaskList.from_json(payload)
        self.tasks = imported.tasks
        logger.info("Imported %d task(s)", len(self.tasks))

    @classmethod
    def from_json(cls, payload: str | bytes) -> "TaskList":
        """
        Build a new TaskList from its JSON form.

        Raises:
            ParseError: If the payload is not a valid task list
        """
        try:
            return cls.model_validate_json(payload)
        except ValidationError as e:
            first = e.errors()[0]
            location = ".".join(str(part) for part in first["loc"])
            detail = f"{location}: {first['msg']}" if location else first["msg"]
            raise ParseError(f"Invalid task list: {detail}") from e

    def _find(self, task_id: int) -> Task:
        for task in self.tasks:
            if task.id == task_id:
                return task
        raise NotFoundError(task_id)
