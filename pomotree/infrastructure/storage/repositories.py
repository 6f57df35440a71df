"""Snapshot persistence for a pomotree session.

Wraps state.json and tasks.txt with Result-based error handling. The
text export, and the optional extra copy of it, are secondary sinks:
their failures are logged and never change the snapshot result.
"""

import logging
from collections.abc import Sequence
from pathlib import Path

from pomotree.config import EXPORT_FILE, STATE_FILE
from pomotree.domain.shared.result import Err, Ok, Result
from pomotree.domain.task import Task
from pomotree.infrastructure.storage.json_storage import JsonStorage
from pomotree.infrastructure.storage.snapshot import Snapshot, parse_snapshot
from pomotree.infrastructure.storage.text_export import render_checklist

logger = logging.getLogger(__name__)


class StateRepository:
    """Repository for the session snapshot and its text export.

    Args:
        config_dir: Directory holding state.json and tasks.txt. None when
            no config directory could be located; every call then
            returns Err.
        export_path: Optional extra location for the text export.
        storage: JsonStorage instance to use. Creates new one if not provided.
    """

    def __init__(
        self,
        config_dir: Path | None,
        export_path: Path | str | None = None,
        storage: JsonStorage | None = None,
    ) -> None:
        self._config_dir = config_dir
        self._export_path = Path(export_path).expanduser() if export_path else None
        self._storage = storage or JsonStorage()

    @property
    def state_file(self) -> Path | None:
        return self._config_dir / STATE_FILE if self._config_dir else None

    @property
    def export_file(self) -> Path | None:
        return self._config_dir / EXPORT_FILE if self._config_dir else None

    def load(self) -> Result[Snapshot | None, str]:
        """Load the last snapshot.

        Returns:
            Ok(Snapshot) if found, Ok(None) if there is no prior state,
            Err(str) if the file exists but cannot be read or parsed.
        """
        if self.state_file is None:
            return Err("Could not find config directory")

        result = self._storage.load_json(self.state_file)
        if isinstance(result, Err):
            return result
        if result.value is None:
            return Ok(None)
        return Ok(parse_snapshot(result.value))

    def save(self, snapshot: Snapshot) -> Result[None, str]:
        """Write the snapshot to state.json."""
        if self.state_file is None:
            return Err("Could not find config directory")
        return self._storage.save_json(self.state_file, snapshot.to_json())

    def export_text(self, tasks: Sequence[Task]) -> Result[Path, str]:
        """Write tasks.txt, plus the extra copy when one is configured.

        Returns:
            Ok(path of tasks.txt), or Err if tasks.txt could not be written.
            A failing extra copy is only logged.
        """
        if self.export_file is None:
            return Err("Could not find config directory")

        content = render_checklist(tasks)
        result = self._storage.write_text(self.export_file, content)
        if isinstance(result, Err):
            return result

        if self._export_path is not None:
            extra = self._storage.write_text(self._export_path, content)
            if isinstance(extra, Err):
                logger.warning(f"Could not write extra export: {extra.error}")

        return Ok(self.export_file)
