"""CLI interface for pomotree using Typer.

Usage:
    pomotree                 # Launch the terminal UI
    pomotree status          # Print tasks and timer
    pomotree add "Title"     # Append a root task
    pomotree export          # Write the checklist export
"""

from pathlib import Path
from typing import Optional

import typer

from pomotree import __version__
from pomotree.domain.task import count_completed
from pomotree.infrastructure.storage import render_checklist
from pomotree.interfaces.cli.common import (
    config_dir_option,
    open_session,
    print_error,
    print_info,
    print_separator,
    print_success,
)
from pomotree.tui.widgets.timer_panel import timer_summary

app = typer.Typer(
    name="pomotree",
    help="Hierarchical task list with a Pomodoro timer",
    add_completion=False,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"pomotree version {__version__}")
        raise typer.Exit()


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    config_dir: Optional[Path] = config_dir_option,
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-v",
        help="Show version and exit",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """pomotree - tasks and subtasks next to a Pomodoro timer.

    Without a command, opens the full-screen interface.
    """
    ctx.obj = config_dir
    if ctx.invoked_subcommand is None:
        run_tui(config_dir)


def run_tui(config_dir: Path | None) -> None:
    """Open the terminal UI and persist once more on the way out."""
    from pomotree.tui import PomoTreeApp

    session, settings = open_session(config_dir, console_logging=False)
    session.export()
    PomoTreeApp(session, settings).run()


@app.command("status")
def status(ctx: typer.Context) -> None:
    """Show the task tree and the timer."""
    session, _ = open_session(ctx.obj)
    tree = session.tree

    typer.echo(f"Progress: {count_completed(tree.tasks)}/{len(tree)} tasks complete")
    typer.echo(f"Timer: {timer_summary(session.timer)}")
    print_separator()
    typer.echo(render_checklist(tree.tasks), nl=False)


@app.command("add")
def add(
    ctx: typer.Context,
    title: str = typer.Argument(..., help="Title of the new root task"),
) -> None:
    """Append a root task."""
    session, _ = open_session(ctx.obj)
    if not session.tree.insert_root(title):
        print_error("Task title cannot be empty.")
        raise typer.Exit(1)
    task = session.tree.tasks[-1]
    if not session.persist():
        print_error("Task added but state could not be saved.")
        raise typer.Exit(1)
    print_success(f"Added task {task.id}: {task.title}")


@app.command("export")
def export(ctx: typer.Context) -> None:
    """Write the checklist export."""
    session, _ = open_session(ctx.obj)
    if session.repository is None or not session.export():
        print_error("Could not write the export.")
        raise typer.Exit(1)
    print_info(f"Exported to {session.repository.export_file}")
