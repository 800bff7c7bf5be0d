# src/todo_cli/cli/display.py

"""Terminal rendering. click strips the colors when stdout is not a TTY."""

from __future__ import annotations

from collections.abc import Sequence

import click

from ..tasks.task_collection import TaskStats
from ..tasks.task_models import Priority, Task

RULE = "─" * 60

_PRIORITY_SHORT = {
    Priority.HIGH: click.style("HIGH", fg="red", bold=True),
    Priority.MEDIUM: click.style("MED", fg="yellow"),
    Priority.LOW: click.style("LOW", fg="blue"),
}
_PRIORITY_COLOR = {Priority.HIGH: "red", Priority.MEDIUM: "yellow", Priority.LOW: "blue"}


def format_task(task: Task) -> str:
    """One-line summary: status, id, priority, title, due date."""
    status = click.style("✓", fg="green", bold=True) if task.completed else click.style("○", fg="yellow")
    title = click.style(task.title, strikethrough=True, dim=True) if task.completed else task.title

    due_info = ""
    if task.due_date is not None:
        due_str = task.due_date.strftime("%Y-%m-%d")
        due_info = f" 📅 {click.style(due_str, fg='red' if task.is_overdue() else 'cyan')}"

    return f"{status} [{click.style(f'{task.id:3}', fg='cyan')}] {_PRIORITY_SHORT[task.priority]} | {title}{due_info}"


def print_tasks(tasks: Sequence[Task], title: str) -> None:
    if not tasks:
        click.echo(click.style("📭 No tasks found.", dim=True))
        return

    click.echo()
    click.echo(click.style(title, bold=True, underline=True))
    click.echo(click.style(RULE, dim=True))
    for task in tasks:
        click.echo(format_task(task))
    click.echo(click.style(RULE, dim=True))
    click.echo(f"{click.style(str(len(tasks)), fg='cyan', bold=True)} task(s)")


def print_task_detail(task: Task) -> None:
    def row(label: str, value: str) -> None:
        click.echo(f"{click.style(label, bold=True)}: {value}")

    click.echo()
    click.echo(click.style("Task Details", bold=True, underline=True))
    click.echo(click.style(RULE, dim=True))

    row("ID", click.style(str(task.id), fg="cyan"))
    row("Title", task.title)
    row(
        "Status",
        click.style("Completed ✓", fg="green") if task.completed else click.style("Pending ○", fg="yellow"),
    )
    row("Priority", click.style(task.priority.value, fg=_PRIORITY_COLOR[task.priority]))
    row("Created", click.style(task.created_at.strftime("%Y-%m-%d %H:%M:%S"), dim=True))

    if task.due_date is None:
        row("Due Date", click.style("None", dim=True))
    else:
        due_str = task.due_date.strftime("%Y-%m-%d %H:%M:%S")
        if task.is_overdue():
            row("Due Date", f"{due_str} {click.style('(OVERDUE!)', fg='red', bold=True)}")
        else:
            row("Due Date", click.style(due_str, fg="cyan"))

    click.echo(click.style(RULE, dim=True))


def print_statistics(stats: TaskStats) -> None:
    click.echo(click.style("📊 Statistics", bold=True))
    click.echo(f"  Total:     {click.style(str(stats.total), fg='cyan')}")
    click.echo(f"  Pending:   {click.style(str(stats.pending), fg='yellow')}")
    click.echo(f"  Completed: {click.style(str(stats.completed), fg='green')}")
    if stats.overdue > 0:
        click.echo(f"  Overdue:   {click.style(str(stats.overdue), fg='red', bold=True)}")


def print_success(message: str) -> None:
    click.echo(f"{click.style('✓', fg='green', bold=True)} {click.style(message, fg='green')}")


def print_error(message: str) -> None:
    click.echo(f"{click.style('✗', fg='red', bold=True)} {click.style(message, fg='red')}", err=True)


def print_info(message: str) -> None:
    click.echo(f"{click.style('ℹ', fg='cyan', bold=True)} {message}")
