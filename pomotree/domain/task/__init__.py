"""Task domain - the task forest and its navigation.

Key Types:
    Task - A task owning its ordered subtasks
    FlatEntry - Task with its position in the flattened view
    TaskTree - The forest plus selection, with all mutations

Traversal Functions:
    fold_forest - Fundamental fold operation
    walk - Pre-order flattening
    resolve - Path resolution
    flat_index / locate - Flat index conversions
"""

from .models import MAX_TITLE_LENGTH, FlatEntry, Task, normalize_title
from .traversal import (
    count_completed,
    count_forest,
    count_nodes,
    flat_index,
    fold_forest,
    locate,
    max_id,
    resolve,
    set_completed,
    valid_prefix,
    walk,
)
from .tree import TaskTree

__all__ = [
    # Models
    "Task",
    "FlatEntry",
    "MAX_TITLE_LENGTH",
    "normalize_title",
    # Traversal
    "fold_forest",
    "walk",
    "count_nodes",
    "count_forest",
    "count_completed",
    "max_id",
    "resolve",
    "valid_prefix",
    "set_completed",
    "flat_index",
    "locate",
    # Forest
    "TaskTree",
]
