"""
Storage module for reading and writing task files.

ARCHITECTURE NOTES:
- This module handles ALL file system operations
- The task list itself only deals in strings: import_json() takes one,
  export() returns one
- main.py and session.py call these functions but don't know HOW they work

Single Responsibility: This file ONLY deals with persistence (loading/saving).
"""

import logging
from pathlib import Path

from .formatters import ExportFormat
from .models import TaskList

logger = logging.getLogger(__name__)


def load_task_list(path: Path) -> TaskList:
    """
    Load a task list from a JSON file.

    A missing file is not an error: it just means there are no saved
    tasks yet, so an empty list is returned.

    Raises:
        ParseError: If the file exists but is not a valid task list
    """
    path = Path(path).expanduser()

    if not path.exists():
        logger.info("No tasks file at %s, starting empty", path)
        return TaskList()

    task_list = TaskList.from_json(path.read_bytes())
    logger.info("Loaded %d task(s) from %s", len(task_list), path)
    return task_list


def save_task_list(task_list: TaskList, path: Path) -> Path:
    """
    Save the task list as JSON so load_task_list() can read it back.

    Returns the resolved path that was written.
    """
    return write_export(task_list.export(ExportFormat.JSON), path)


def export_path(destination: str | Path, export_format: ExportFormat) -> Path:
    """Add the format's conventional extension when destination has none."""
    path = Path(destination)
    if path.name not in ("", "..") and not path.suffix:
        path = path.with_suffix(export_format.suffix)
    return path


def write_export(content: str, path: str | Path) -> Path:
    """
    Write already-rendered export text to a file, creating parent folders.

    Returns the resolved path that was written.
    """
    out = Path(path).expanduser().resolve()
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(content, encoding="utf-8")
    logger.info("Wrote %d characters to %s", len(content), out)
    return out
