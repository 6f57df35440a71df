"""Storage infrastructure for pomotree.

Persistence implementations using Result monads for explicit error
handling.
"""

from pomotree.infrastructure.storage.json_storage import JsonStorage
from pomotree.infrastructure.storage.repositories import StateRepository
from pomotree.infrastructure.storage.snapshot import Snapshot, parse_snapshot
from pomotree.infrastructure.storage.text_export import render_checklist

__all__ = [
    "JsonStorage",
    "StateRepository",
    "Snapshot",
    "parse_snapshot",
    "render_checklist",
]
