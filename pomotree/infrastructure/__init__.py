"""Infrastructure layer for pomotree (file persistence)."""

from pomotree.infrastructure.storage import JsonStorage, Snapshot, StateRepository

__all__ = ["JsonStorage", "Snapshot", "StateRepository"]
