# tests/test_cli.py

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from types import SimpleNamespace

import pytest
from click.testing import CliRunner

from todo_cli.cli.commands import parse_due_date
from todo_cli.cli.main import cli
from todo_cli.errors import InvalidDateError
from todo_cli.tasks.task_store import load_collection


@pytest.fixture()
def run(settings: SimpleNamespace):
    runner = CliRunner()

    def _run(*args: str, input: str | None = None):
        return runner.invoke(cli, list(args), obj=settings, input=input)

    return _run


def _stored(settings: SimpleNamespace):
    return load_collection(settings.data_file)


def test_add_persists_task_and_prints_detail(run, settings) -> None:
    result = run("add", "Buy milk")

    assert result.exit_code == 0, result.output
    assert "Task added successfully! (ID: 1)" in result.output
    assert "Task Details" in result.output
    assert "Medium" in result.output

    tasks = _stored(settings).list_all()
    assert [(t.id, t.title, t.priority.value) for t in tasks] == [(1, "Buy milk", "Medium")]


def test_add_with_priority_and_due_date(run, settings) -> None:
    result = run("add", "File taxes", "-p", "H", "--due", "2020-01-01")

    assert result.exit_code == 0, result.output
    assert "OVERDUE" in result.output
    task = _stored(settings).find(1)
    assert task.priority.value == "High"
    assert task.due_date == datetime(2020, 1, 1, 23, 59, 59, tzinfo=timezone.utc)


def test_add_invalid_priority_fails_without_writing(run, settings) -> None:
    result = run("add", "Something", "--priority", "urgent")

    assert result.exit_code == 1
    assert "Invalid priority 'urgent'" in result.output
    assert not Path(settings.data_file).exists()


def test_add_invalid_date_fails(run, settings) -> None:
    result = run("add", "Something", "--due", "12/31/2025")

    assert result.exit_code == 1
    assert "Invalid date format '12/31/2025'" in result.output
    assert not Path(settings.data_file).exists()


def test_add_blank_title_rejected_by_default_settings(run, settings) -> None:
    result = run("add", "   ")

    assert result.exit_code == 1
    assert "must not be empty" in result.output


def test_add_blank_title_allowed_when_configured(run, settings) -> None:
    settings.allow_empty_titles = True
    result = run("add", "")

    assert result.exit_code == 0, result.output
    assert _stored(settings).count() == 1


def test_list_shows_tasks_and_statistics(run) -> None:
    run("add", "Buy milk")
    run("add", "File taxes", "-p", "high", "-d", "2020-01-01")

    result = run("list")

    assert result.exit_code == 0, result.output
    assert "All Tasks" in result.output
    assert "Buy milk" in result.output
    assert "File taxes" in result.output
    assert "2 task(s)" in result.output
    assert "Statistics" in result.output
    assert "Overdue:   1" in result.output


@pytest.mark.parametrize(
    ("filter_name", "present", "absent"),
    [
        ("pending", "Buy milk", "Water plants"),
        ("completed", "Water plants", "Buy milk"),
        ("overdue", "File taxes", "Buy milk"),
    ],
)
def test_list_filters(run, filter_name: str, present: str, absent: str) -> None:
    run("add", "Buy milk")
    run("add", "File taxes", "-d", "2020-01-01")
    run("add", "Water plants", "-p", "low")
    run("complete", "3")

    result = run("ls", filter_name)

    assert result.exit_code == 0, result.output
    assert present in result.output
    assert absent not in result.output


def test_list_by_priority_orders_high_first(run) -> None:
    run("add", "T1", "-p", "low")
    run("add", "T2", "-p", "high")
    run("add", "T3", "-p", "medium")
    run("add", "T4", "-p", "high")

    result = run("list", "--by-priority")

    assert result.exit_code == 0, result.output
    out = result.output
    assert out.index("T2") < out.index("T4") < out.index("T3") < out.index("T1")


def test_list_empty(run) -> None:
    result = run("list")

    assert result.exit_code == 0, result.output
    assert "No tasks found." in result.output
    assert "Total:     0" in result.output


def test_list_rejects_unknown_filter(run) -> None:
    result = run("list", "someday")
    assert result.exit_code == 2


def test_complete_marks_task_and_second_call_is_informational(run, settings) -> None:
    run("add", "Buy milk")

    first = run("complete", "1")
    assert first.exit_code == 0, first.output
    assert "Task 1 marked as completed!" in first.output
    assert _stored(settings).find(1).completed is True

    second = run("c", "1")
    assert second.exit_code == 0, second.output
    assert "Task 1 is already completed" in second.output


def test_complete_unknown_id_fails(run) -> None:
    result = run("complete", "42")

    assert result.exit_code == 1
    assert "Task with ID 42 not found" in result.output


def test_delete_removes_task(run, settings) -> None:
    run("add", "Buy milk")
    run("add", "Walk dog")

    result = run("d", "1")

    assert result.exit_code == 0, result.output
    assert "Task 1 'Buy milk' deleted!" in result.output
    stored = _stored(settings)
    assert [t.id for t in stored.list_all()] == [2]
    assert stored.next_id == 3

    again = run("delete", "1")
    assert again.exit_code == 1
    assert "not found" in again.output


def test_show_task_and_missing_task(run) -> None:
    run("add", "Buy milk", "-p", "l")

    result = run("s", "1")
    assert result.exit_code == 0, result.output
    assert "Task Details" in result.output
    assert "Buy milk" in result.output
    assert "Pending" in result.output
    assert "Low" in result.output

    missing = run("show", "9")
    assert missing.exit_code == 1
    assert "Task with ID 9 not found" in missing.output


def test_clear_with_nothing_completed(run) -> None:
    run("add", "Buy milk")
    result = run("clear")

    assert result.exit_code == 0, result.output
    assert "No completed tasks to clear" in result.output


def test_clear_cancelled_at_prompt_keeps_tasks(run, settings) -> None:
    run("add", "Buy milk")
    run("complete", "1")

    result = run("clear", input="n\n")

    assert result.exit_code == 0, result.output
    assert "About to delete 1 completed task(s)" in result.output
    assert "Operation cancelled" in result.output
    assert _stored(settings).count() == 1


def test_clear_confirmed_removes_completed(run, settings) -> None:
    run("add", "Buy milk")
    run("add", "Walk dog")
    run("complete", "1")

    result = run("clear", input="y\n")

    assert result.exit_code == 0, result.output
    assert "Cleared 1 completed task(s)!" in result.output
    stored = _stored(settings)
    assert [t.title for t in stored.list_all()] == ["Walk dog"]
    assert stored.next_id == 3


def test_clear_force_skips_prompt(run, settings) -> None:
    run("add", "Buy milk")
    run("complete", "1")

    result = run("clear", "--force")

    assert result.exit_code == 0, result.output
    assert "Are you sure" not in result.output
    assert _stored(settings).is_empty()


def test_file_option_overrides_settings(run, settings, tmp_path: Path) -> None:
    other = tmp_path / "elsewhere" / "work.json"

    result = run("--file", str(other), "a", "Deploy")

    assert result.exit_code == 0, result.output
    assert json.loads(other.read_text("utf-8"))["tasks"][0]["title"] == "Deploy"
    assert not Path(settings.data_file).exists()


def test_corrupt_file_reports_error(run, settings) -> None:
    Path(settings.data_file).write_text("{broken", "utf-8")

    result = run("list")

    assert result.exit_code == 1
    assert "JSON parsing failed" in result.output


def test_log_file_written(run, settings) -> None:
    run("add", "Buy milk")
    log_file = Path(settings.log_dir) / "todo.log"
    assert log_file.exists()
    assert "Added task id=1" in log_file.read_text("utf-8")


def test_parse_due_date() -> None:
    assert parse_due_date("2025-12-31") == datetime(2025, 12, 31, 23, 59, 59, tzinfo=timezone.utc)
    with pytest.raises(InvalidDateError) as exc:
        parse_due_date("invalid-date")
    assert exc.value.value == "invalid-date"


def test_unusable_log_dir_reports_error(run, settings, tmp_path: Path) -> None:
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("", "utf-8")
    settings.log_dir = blocker / "logs"

    result = run("list")

    assert result.exit_code == 1
    assert "✗" in result.output
    assert "Cannot set up logging" in result.output
    assert result.exception is None or isinstance(result.exception, SystemExit)
