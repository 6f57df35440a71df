"""Logging configuration.

The TUI owns the terminal, so interactive runs log to a file only.
CLI commands also echo warnings to stderr.
"""

import logging
import sys
from pathlib import Path

from .config import LOG_FILE

LOG_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    log_dir: Path | None,
    *,
    level: int | str = logging.INFO,
    console: bool = False,
) -> None:
    """Configure the root logger.

    Call this once, before the first log line. A log directory that
    cannot be created leaves file logging off instead of failing.
    """
    root = logging.getLogger()
    root.setLevel(level)

    # Remove any pre-existing handlers to avoid duplicates.
    for handler in list(root.handlers):
        root.removeHandler(handler)

    fmt = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    if log_dir is not None:
        try:
            log_dir.mkdir(parents=True, exist_ok=True)
            fh = logging.FileHandler(str(log_dir / LOG_FILE), encoding="utf-8")
        except OSError as e:
            print(f"Warning: file logging disabled: {e}", file=sys.stderr)
        else:
            fh.setFormatter(fmt)
            root.addHandler(fh)

    if console:
        ch = logging.StreamHandler(sys.stderr)
        ch.setLevel(logging.WARNING)
        ch.setFormatter(fmt)
        root.addHandler(ch)

    if not root.handlers:
        root.addHandler(logging.NullHandler())

    logging.captureWarnings(True)
