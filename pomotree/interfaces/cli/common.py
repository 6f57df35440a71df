"""Shared utilities for pomotree CLI commands.

- Session bootstrap (config directory, settings, logging, prior state)
- Formatted output helpers (error, success, info, warning)
"""

import logging
from pathlib import Path

import typer

from pomotree.config import HOME_ENV, Settings, get_config_dir, load_settings
from pomotree.infrastructure.storage import StateRepository
from pomotree.logging_setup import setup_logging
from pomotree.session import Session

logger = logging.getLogger(__name__)

# Reusable config directory option
# Usage: def my_command(config_dir: Optional[Path] = config_dir_option) -> None:
config_dir_option = typer.Option(
    None,
    "--config-dir",
    "-c",
    help=f"Directory for state and exports (or set {HOME_ENV} env var)",
    envvar=HOME_ENV,
)


def open_session(
    config_dir: Path | None = None,
    *,
    console_logging: bool = True,
) -> tuple[Session, Settings]:
    """Build a session wired to the config directory and load prior state.

    A config directory that cannot be created is reported and the
    session starts fresh, without persistence.
    """
    try:
        resolved: Path | None = get_config_dir(config_dir)
    except OSError as e:
        print_warning(f"Could not create config directory: {e}")
        resolved = None

    settings = load_settings(resolved) if resolved else Settings()
    setup_logging(resolved, level=settings.log_level, console=console_logging)

    logger.debug(f"Using config directory {resolved}")

    repository = StateRepository(resolved, export_path=settings.export_path)
    session = Session(repository, notification_seconds=settings.notification_seconds)
    session.load()
    return session, settings


def print_error(msg: str) -> None:
    """Print a formatted error message."""
    typer.echo(typer.style(f"Error: {msg}", fg=typer.colors.RED), err=True)


def print_success(msg: str) -> None:
    """Print a formatted success message."""
    typer.echo(typer.style(msg, fg=typer.colors.GREEN))


def print_info(msg: str) -> None:
    """Print a formatted info message."""
    typer.echo(typer.style(msg, fg=typer.colors.BLUE))


def print_warning(msg: str) -> None:
    """Print a formatted warning message."""
    typer.echo(typer.style(f"Warning: {msg}", fg=typer.colors.YELLOW), err=True)


def print_separator(char: str = "=", width: int = 60) -> None:
    typer.echo(char * width)
