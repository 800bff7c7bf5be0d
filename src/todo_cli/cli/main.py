# src/todo_cli/cli/main.py

"""
CLI entrypoint.

Initializes logging from settings, resolves the data file (settings or
--file) and dispatches one subcommand. Each invocation runs a single command
and exits.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any

import click

from ..config import get_settings
from ..errors import TodoError
from ..logging_setup import setup_logging
from .commands import (
    AppContext,
    ListFilter,
    handle_add,
    handle_clear,
    handle_complete,
    handle_delete,
    handle_list,
    handle_show,
)
from .display import print_error

logger = logging.getLogger(__name__)


class AliasedGroup(click.Group):
    """click.Group that also resolves short aliases (add -> a, list -> ls, ...)."""

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._aliases: dict[str, str] = {}

    def command(self, *args: Any, aliases: list[str] | None = None, **kwargs: Any):
        decorator = super().command(*args, **kwargs)

        def register(f: Callable[..., Any]) -> click.Command:
            cmd = decorator(f)
            for alias in aliases or []:
                self._aliases[alias.lower()] = cmd.name or ""
            return cmd

        return register

    def get_command(self, ctx: click.Context, cmd_name: str) -> click.Command | None:
        cmd = super().get_command(ctx, cmd_name)
        if cmd is not None:
            return cmd
        target = self._aliases.get(cmd_name.lower())
        if target is None:
            return None
        return super().get_command(ctx, target)

    def resolve_command(self, ctx: click.Context, args: list[str]):
        # Report the canonical name, not the alias, to click.
        _, cmd, rest = super().resolve_command(ctx, args)
        return (cmd.name if cmd is not None else None), cmd, rest


def _reports_errors(f: Callable[..., Any]) -> Callable[..., Any]:
    """Turn TodoError (and crashes) into a red message and exit status 1."""

    @functools.wraps(f)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        ctx = click.get_current_context()
        try:
            return f(*args, **kwargs)
        except TodoError as e:
            logger.debug("Command failed: %s", e, exc_info=True)
            print_error(str(e))
            ctx.exit(1)
        except (click.exceptions.Exit, click.Abort, click.ClickException):
            raise
        except Exception:
            logger.exception("Command handler crashed.")
            print_error("Internal error while handling the command (see log file).")
            ctx.exit(1)

    return wrapper


@click.group(cls=AliasedGroup)
@click.option(
    "--file",
    "data_file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Task file to use instead of the configured one.",
)
@click.version_option(package_name="todo-cli")
@click.pass_context
def cli(ctx: click.Context, data_file: Path | None) -> None:
    """A simple and elegant CLI todo list manager."""
    # Tests inject settings through ctx.obj; normal runs read the environment.
    settings = ctx.obj if ctx.obj is not None else get_settings()

    level_name = str(getattr(settings, "log_level", "WARNING")).upper()
    console_level = getattr(logging, level_name, logging.WARNING)
    if not isinstance(console_level, int):
        console_level = logging.WARNING
    try:
        setup_logging(log_dir=settings.log_dir, console_level=console_level)
    except OSError as e:
        print_error(f"Cannot set up logging in {settings.log_dir}: {e}")
        ctx.exit(1)

    path = data_file if data_file is not None else Path(settings.data_file)
    logger.debug("Using task file %s", path)
    ctx.obj = AppContext(settings=settings, data_file=path)


@cli.command(aliases=["a"])
@click.argument("title")
@click.option("-p", "--priority", default="medium", show_default=True, help="high (h), medium (m), low (l)")
@click.option("-d", "--due", default=None, help="Due date (YYYY-MM-DD).")
@click.pass_obj
@_reports_errors
def add(app: AppContext, title: str, priority: str, due: str | None) -> None:
    """Add a new task."""
    handle_add(app, title, priority, due)


@cli.command(name="list", aliases=["ls"])
@click.argument(
    "filter_name",
    metavar="[all|pending|completed|overdue]",
    required=False,
    default=ListFilter.ALL.value,
    type=click.Choice([f.value for f in ListFilter], case_sensitive=False),
)
@click.option("--by-priority", is_flag=True, help="Sort High -> Low (stable).")
@click.pass_obj
@_reports_errors
def list_cmd(app: AppContext, filter_name: str, by_priority: bool) -> None:
    """List tasks."""
    handle_list(app, ListFilter(filter_name.lower()), by_priority=by_priority)


@cli.command(aliases=["c"])
@click.argument("task_id", metavar="ID", type=click.IntRange(min=0))
@click.pass_obj
@_reports_errors
def complete(app: AppContext, task_id: int) -> None:
    """Mark a task as completed."""
    handle_complete(app, task_id)


@cli.command(aliases=["d"])
@click.argument("task_id", metavar="ID", type=click.IntRange(min=0))
@click.pass_obj
@_reports_errors
def delete(app: AppContext, task_id: int) -> None:
    """Delete a task."""
    handle_delete(app, task_id)


@cli.command(aliases=["s"])
@click.argument("task_id", metavar="ID", type=click.IntRange(min=0))
@click.pass_obj
@_reports_errors
def show(app: AppContext, task_id: int) -> None:
    """Show task details."""
    handle_show(app, task_id)


@cli.command()
@click.option("-f", "--force", is_flag=True, help="Skip the confirmation prompt.")
@click.pass_obj
@_reports_errors
def clear(app: AppContext, force: bool) -> None:
    """Remove all completed tasks."""
    handle_clear(app, force)


def main() -> None:
    cli(prog_name="todo")


if __name__ == "__main__":
    main()
