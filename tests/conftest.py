# tests/conftest.py

from __future__ import annotations

import io
import os
from pathlib import Path

import pytest
from rich.console import Console

from todore.config import reset_settings
from todore.models import Task, TaskList, TaskStatus


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """
    Run every test in an empty directory with no TODORE_* variables,
    so a developer's .env or tasks.json never leaks into the results.
    """
    for key in list(os.environ):
        if key.upper().startswith("TODORE_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture()
def sample_list() -> TaskList:
    """[{1, "Task 1", NotStarted}, {2, "Task 2", Completed}]"""
    return TaskList(tasks=[
        Task(id=1, description="Task 1"),
        Task(id=2, description="Task 2", status=TaskStatus.COMPLETED),
    ])


@pytest.fixture()
def console() -> Console:
    """A Rich console that writes into memory instead of the terminal."""
    return Console(file=io.StringIO(), width=200, color_system=None)
