# tests/test_models.py

from __future__ import annotations

import pytest

from todore.errors import NotFoundError, ParseError
from todore.formatters import ExportFormat
from todore.models import Task, TaskList, TaskStatus


def test_new_task_starts_not_started() -> None:
    task = Task(id=42, description="Test task")
    assert task.id == 42
    assert task.description == "Test task"
    assert task.status is TaskStatus.NOT_STARTED


def test_task_rejects_negative_id() -> None:
    with pytest.raises(ValueError):
        Task(id=-1, description="nope")


def test_add_appends_in_order() -> None:
    tasks = TaskList()
    tasks.add(Task(id=2, description="b"))
    tasks.add(Task(id=1, description="a"))
    tasks.add(Task(id=2, description="c"))

    assert [(t.id, t.description) for t in tasks.tasks] == [(2, "b"), (1, "a"), (2, "c")]
    assert all(t.status is TaskStatus.NOT_STARTED for t in tasks.tasks)


def test_remove_deletes_all_matches_and_is_idempotent() -> None:
    tasks = TaskList()
    tasks.add(Task(id=1, description="a"))
    tasks.add(Task(id=2, description="b"))
    tasks.add(Task(id=1, description="c"))

    tasks.remove(1)
    assert [t.id for t in tasks.tasks] == [2]

    tasks.remove(1)
    assert [t.id for t in tasks.tasks] == [2]


def test_remove_missing_id_is_noop(sample_list: TaskList) -> None:
    sample_list.remove(999)
    assert len(sample_list) == 2


def test_update_status_touches_only_first_match() -> None:
    tasks = TaskList()
    tasks.add(Task(id=1, description="a"))
    tasks.add(Task(id=1, description="b"))
    tasks.add(Task(id=2, description="c"))

    tasks.update_status(1, TaskStatus.IN_PROGRESS)

    assert [t.status for t in tasks.tasks] == [
        TaskStatus.IN_PROGRESS,
        TaskStatus.NOT_STARTED,
        TaskStatus.NOT_STARTED,
    ]


def test_update_description(sample_list: TaskList) -> None:
    sample_list.update_description(2, "Test123")
    assert sample_list.tasks[1].description == "Test123"
    assert sample_list.tasks[0].description == "Task 1"


@pytest.mark.parametrize("update", [
    lambda tl: tl.update_status(999, TaskStatus.COMPLETED),
    lambda tl: tl.update_description(999, "New description"),
])
def test_update_missing_id_raises_not_found(sample_list: TaskList, update) -> None:
    before = sample_list.model_dump()

    with pytest.raises(NotFoundError) as exc_info:
        update(sample_list)

    assert exc_info.value.task_id == 999
    assert str(exc_info.value) == "Task with id 999 was not found"
    assert sample_list.model_dump() == before


def test_any_status_may_follow_any_other(sample_list: TaskList) -> None:
    sample_list.update_status(2, TaskStatus.NOT_STARTED)
    sample_list.update_status(2, TaskStatus.IN_PROGRESS)
    assert sample_list.tasks[1].status is TaskStatus.IN_PROGRESS


def test_next_id() -> None:
    assert TaskList().next_id() == 0
    tasks = TaskList(tasks=[Task(id=4, description="a"), Task(id=2, description="b")])
    assert tasks.next_id() == 5


def test_json_round_trip(sample_list: TaskList) -> None:
    payload = sample_list.export(ExportFormat.JSON)

    imported = TaskList()
    imported.import_json(payload)

    assert imported.tasks == sample_list.tasks


def test_import_replaces_existing_tasks(sample_list: TaskList) -> None:
    tasks = TaskList(tasks=[Task(id=9, description="old")])
    tasks.import_json(sample_list.export(ExportFormat.JSON))
    assert [t.id for t in tasks.tasks] == [1, 2]


@pytest.mark.parametrize("payload", [
    "invalid json",
    "",
    "[]",
    '{"tasks": [{"id": -1, "description": "x", "status": "NotStarted"}]}',
    '{"tasks": [{"id": 1, "description": "x", "status": "Done"}]}',
    '{"tasks": [{"id": 1, "status": "NotStarted"}]}',
])
def test_import_malformed_payload_leaves_list_untouched(sample_list: TaskList, payload: str) -> None:
    before = sample_list.model_dump()

    with pytest.raises(ParseError):
        sample_list.import_json(payload)

    assert sample_list.model_dump() == before


class TestTaskStatus:
    @pytest.mark.parametrize("text, expected", [
        ("not started", TaskStatus.NOT_STARTED),
        ("ns", TaskStatus.NOT_STARTED),
        ("in progress", TaskStatus.IN_PROGRESS),
        ("ip", TaskStatus.IN_PROGRESS),
        ("completed", TaskStatus.COMPLETED),
        ("c", TaskStatus.COMPLETED),
        ("C", TaskStatus.COMPLETED),
    ])
    def test_parse_synonyms(self, text: str, expected: TaskStatus) -> None:
        assert TaskStatus.parse(text) is expected

    @pytest.mark.parametrize("text", ["invalid", "", "notstarted", "done"])
    def test_parse_rejects_unknown(self, text: str) -> None:
        with pytest.raises(ParseError):
            TaskStatus.parse(text)

    def test_display_names(self) -> None:
        assert TaskStatus.NOT_STARTED.display_name == "Not Started"
        assert TaskStatus.IN_PROGRESS.display_name == "In Progress"
        assert TaskStatus.COMPLETED.display_name == "Completed"

    def test_serialized_as_variant_name(self) -> None:
        assert Task(id=1, description="x").model_dump(mode="json")["status"] == "NotStarted"
