"""File storage with Result-based error handling.

A thin wrapper around file I/O returning Result types instead of
raising. It knows nothing about snapshots or tasks.
"""

import json
from pathlib import Path
from typing import Any

from pomotree.domain.shared.result import Err, Ok, Result


class JsonStorage:
    """Low-level JSON and text file I/O.

    Example:
        storage = JsonStorage()
        result = storage.load_json(Path("state.json"))
        if isinstance(result, Ok) and result.value is not None:
            data = result.value
    """

    def load_json(self, path: Path) -> Result[dict[str, Any] | None, str]:
        """Load a JSON object from a file.

        Returns:
            Ok(dict) on success, Ok(None) if the file does not exist,
            Err(str) if it cannot be read or is not a JSON object.
        """
        try:
            if not path.exists():
                return Ok(None)

            data = json.loads(path.read_text(encoding="utf-8"))
            if not isinstance(data, dict):
                return Err(f"Expected a JSON object in {path}, got {type(data).__name__}")
            return Ok(data)

        except json.JSONDecodeError as e:
            return Err(f"Invalid JSON in {path}: {e}")
        except UnicodeDecodeError as e:
            return Err(f"Unreadable text in {path}: {e}")
        except PermissionError:
            return Err(f"Permission denied reading {path}")
        except OSError as e:
            return Err(f"Error reading {path}: {e}")

    def save_json(
        self,
        path: Path,
        data: dict[str, Any],
        indent: int = 2,
    ) -> Result[None, str]:
        """Serialize ``data`` and write it to ``path``."""
        try:
            content = json.dumps(data, indent=indent, ensure_ascii=False)
        except (TypeError, ValueError) as e:
            return Err(f"Data not JSON serializable: {e}")
        return self.write_text(path, content)

    def write_text(self, path: Path, content: str) -> Result[None, str]:
        """Write text to ``path``, creating parent directories."""
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
            return Ok(None)

        except PermissionError:
            return Err(f"Permission denied writing {path}")
        except OSError as e:
            return Err(f"Error writing {path}: {e}")
