"""Command-line interface for tazu.

One command per process run: `list` (also the default when no subcommand is
given), `add`, `delete` and `done`. Each command performs a single
TaskList operation and maps its outcome to a message and an exit code.
"""
import contextlib
import logging
import sys
from pathlib import Path
from typing import Iterator, Optional

import click

from config import get_settings
from logging_setup import setup_logging
from models import Task
from storage import CorruptStoreError, Storage
from tasklist import InvalidDescriptionError, InvalidPriorityError, TaskList
from theme import color, ID_COLOR, DONE_COLOR, PENDING_COLOR, WARN_COLOR, SUCCESS_COLOR, ERROR_COLOR, STRIKE

__version__ = "1.0.0"

logger = logging.getLogger(__name__)

CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


# --- output helpers ---
def _success(message: str) -> None:
    click.echo(color(message, SUCCESS_COLOR))


def _fail(message: str) -> None:
    """Print an error to stderr and stop with exit code 1."""
    click.echo(color(message, ERROR_COLOR), err=True)
    sys.exit(1)


@contextlib.contextmanager
def _store_errors(tasks: TaskList) -> Iterator[None]:
    try:
        yield
    except CorruptStoreError as exc:
        logger.debug("Corrupt store", exc_info=True)
        _fail(str(exc))
    except OSError as exc:
        logger.debug("I/O failure on %s", tasks.storage.path, exc_info=True)
        _fail(f"Cannot access task file {tasks.storage.path}: {exc.strerror or exc}")


def format_task(task: Task, now: int) -> str:
    """Render one task as the multi-line block shown by `list`."""
    elapsed_minutes = max(0, now - task.created_at) // (1000 * 60)
    hours, minutes = divmod(elapsed_minutes, 60)
    if task.done:
        description = color(task.description, STRIKE)
        status = color('Done', DONE_COLOR)
    else:
        description = color(task.description, DONE_COLOR)
        status = color('Pending', PENDING_COLOR)
    return (
        f"{color(str(task.id), ID_COLOR)}. {description}\n"
        f"    - Age: {hours}h {minutes}m\n"
        f"    - Priority: {task.priority}\n"
        f"    - Link: {task.link or 'N/A'}\n"
        f"    - Status: {status}\n"
    )


# -------------------- commands --------------------
@click.group(invoke_without_command=True, context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, prog_name="tazu")
@click.option("--file", "tasks_file", type=click.Path(dir_okay=False, path_type=Path),
              help="Task file to use (default: $TAZU_FILE or ~/.tazu/tasks.json).")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging on stderr.")
@click.pass_context
def cli(ctx: click.Context, tasks_file: Optional[Path], verbose: bool) -> None:
    """A simple task manager CLI tool."""
    settings = get_settings()
    setup_logging(
        console_level=logging.DEBUG if verbose else settings.log_level,
        log_file=settings.log_file,
    )
    path = tasks_file or settings.tasks_file
    logger.debug("Using task file %s", path)
    ctx.obj = TaskList(Storage(path))
    if ctx.invoked_subcommand is None:
        ctx.invoke(list_tasks)


@cli.command("list")
@click.pass_obj
def list_tasks(tasks: TaskList) -> None:
    """List all tasks."""
    with _store_errors(tasks):
        items = tasks.list()
    if not items:
        click.echo(color('No tasks available.', WARN_COLOR))
        return
    now = tasks.clock()
    for task in items:
        click.echo(format_task(task, now))


@cli.command("add")
@click.argument("description", nargs=-1, required=True)
@click.option("-p", "--priority", type=int, default=1, show_default=True, help="Task priority (1-10).")
@click.option("-l", "--link", default=None, help="Optional link.")
@click.pass_obj
def add_task(tasks: TaskList, description: tuple, priority: int, link: Optional[str]) -> None:
    """Add a new task."""
    text = ' '.join(description)
    try:
        with _store_errors(tasks):
            task = tasks.add(text, priority=priority, link=link)
    except (InvalidPriorityError, InvalidDescriptionError) as exc:
        _fail(str(exc))
    _success(f"Task added successfully! (#{task.id})")


@cli.command("delete")
@click.argument("task_id", metavar="ID", type=int)
@click.pass_obj
def delete_task(tasks: TaskList, task_id: int) -> None:
    """Delete a task."""
    with _store_errors(tasks):
        removed = tasks.delete(task_id)
    if not removed:
        _fail('Task not found.')
    _success('Task deleted successfully!')


@cli.command("done")
@click.argument("task_id", metavar="ID", type=int)
@click.pass_obj
def mark_done(tasks: TaskList, task_id: int) -> None:
    """Mark a task as done."""
    with _store_errors(tasks):
        found = tasks.mark_done(task_id)
    if not found:
        _fail('Task not found.')
    _success('Task marked as done!')
