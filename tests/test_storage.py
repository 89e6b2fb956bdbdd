# tests/test_storage.py

from __future__ import annotations

from pathlib import Path

import pytest

from todore.errors import ParseError
from todore.formatters import ExportFormat
from todore.models import TaskList
from todore.storage import export_path, load_task_list, save_task_list, write_export


def test_missing_file_gives_empty_list(tmp_path: Path) -> None:
    tasks = load_task_list(tmp_path / "nope.json")
    assert len(tasks) == 0


def test_save_then_load(sample_list: TaskList, tmp_path: Path) -> None:
    path = tmp_path / "nested" / "tasks.json"

    saved = save_task_list(sample_list, path)

    assert saved == path.resolve()
    assert load_task_list(path).tasks == sample_list.tasks


def test_malformed_file_raises_parse_error(tmp_path: Path) -> None:
    path = tmp_path / "tasks.json"
    path.write_text("invalid json", encoding="utf-8")

    with pytest.raises(ParseError):
        load_task_list(path)


def test_write_export_writes_text_verbatim(tmp_path: Path) -> None:
    out = write_export("a\tb", tmp_path / "out.txt")
    assert out.read_text(encoding="utf-8") == "a\tb"


def test_file_that_is_not_utf8_raises_parse_error(tmp_path: Path) -> None:
    path = tmp_path / "tasks.json"
    path.write_bytes(b"\xff")

    with pytest.raises(ParseError):
        load_task_list(path)


@pytest.mark.parametrize("destination, expected", [
    ("out", "out.yaml"),
    ("reports/out", "reports/out.yaml"),
    ("out.txt", "out.txt"),
    ("out.yaml", "out.yaml"),
])
def test_export_path_adds_missing_extension(destination: str, expected: str) -> None:
    assert export_path(destination, ExportFormat.YAML) == Path(expected)
