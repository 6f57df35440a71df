"""Configuration storage for pomotree.

Everything lives in one directory: ``state.json``, ``tasks.txt``,
``settings.json`` and the log file. Resolution order is an explicit
override, then ``$POMOTREE_HOME``, then ``$XDG_CONFIG_HOME/pomotree``,
then ``~/.config/pomotree``.
"""

import json
import logging
import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ValidationError, field_validator

logger = logging.getLogger(__name__)

APP_DIR_NAME = "pomotree"
HOME_ENV = "POMOTREE_HOME"
EXPORT_ENV = "POMOTREE_EXPORT_PATH"

STATE_FILE = "state.json"
EXPORT_FILE = "tasks.txt"
SETTINGS_FILE = "settings.json"
LOG_FILE = "pomotree.log"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseModel):
    """User settings. Every field has a default."""

    poll_interval: float = 0.05
    notification_seconds: float = 1.0
    export_path: Optional[str] = None
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"unknown log level {value!r}")
        return level


def resolve_config_dir(override: Path | str | None = None) -> Path:
    """Work out the config directory without touching the filesystem."""
    if override:
        return Path(override).expanduser()
    env_home = os.environ.get(HOME_ENV)
    if env_home:
        return Path(env_home).expanduser()
    xdg = os.environ.get("XDG_CONFIG_HOME")
    base = Path(xdg).expanduser() if xdg else Path.home() / ".config"
    return base / APP_DIR_NAME


def get_config_dir(override: Path | str | None = None) -> Path:
    """Get the pomotree config directory, creating it if needed.

    Raises:
        OSError: If the directory cannot be created.
    """
    config_dir = resolve_config_dir(override)
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir


def load_settings(config_dir: Path) -> Settings:
    """Load settings.json; a missing or broken file gives the defaults."""
    settings_file = config_dir / SETTINGS_FILE
    settings = Settings()
    if settings_file.exists():
        try:
            data = json.loads(settings_file.read_text(encoding="utf-8"))
            settings = Settings(**data)
        except (json.JSONDecodeError, ValidationError, TypeError, OSError) as e:
            logger.warning(f"Ignoring unreadable {settings_file}: {e}")
    env_export = os.environ.get(EXPORT_ENV)
    if env_export:
        settings = settings.model_copy(update={"export_path": env_export})
    return settings
