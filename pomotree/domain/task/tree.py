"""The task forest with path-addressed mutation and flat navigation."""

import logging
from collections.abc import Iterator

from ..types import MAX_DEPTH, Selection
from .models import FlatEntry, Task, normalize_title
from .traversal import (
    count_forest,
    flat_index,
    locate,
    max_id,
    resolve,
    set_completed,
    valid_prefix,
    walk,
)

logger = logging.getLogger(__name__)


class TaskTree:
    """Owns the ordered forest of tasks and the current selection.

    Every operation re-resolves the selection against the current
    forest before acting. Validation failures (empty titles, depth cap,
    stale paths) return False and leave the forest untouched.
    """

    def __init__(self, tasks: list[Task] | None = None, next_id: int = 1) -> None:
        self.tasks: list[Task] = tasks if tasks is not None else []
        self.next_id = max(next_id, max_id(self.tasks) + 1, 1)
        self.selection = Selection()
        self.validate_selection()

    # =========================================================================
    # Queries
    # =========================================================================

    def __len__(self) -> int:
        return count_forest(self.tasks)

    def is_empty(self) -> bool:
        return not self.tasks

    def selected_task(self) -> Task | None:
        """Resolve the current selection, or None if it no longer resolves."""
        return resolve(self.tasks, self.selection.index, self.selection.path)

    def flatten(self) -> Iterator[FlatEntry]:
        """Pre-order view of the forest. Computed fresh on every call."""
        return walk(self.tasks)

    # =========================================================================
    # Mutation
    # =========================================================================

    def _allocate_id(self) -> int:
        new_id = self.next_id
        self.next_id += 1
        return new_id

    def insert_root(self, title: str) -> bool:
        """Append a new root task.

        Returns:
            True if the task was added, False if the title was empty.
        """
        clean = normalize_title(title)
        if clean is None:
            return False
        self.tasks.append(Task(id=self._allocate_id(), title=clean))
        self.validate_selection()
        return True

    def insert_child(self, title: str, selection: Selection | None = None) -> bool:
        """Append a new subtask under the selected task.

        Fails when the title is empty, when the selected task sits at the
        maximum depth, or when the selection no longer resolves. The
        selection itself is not changed.
        """
        target = selection if selection is not None else self.selection
        clean = normalize_title(title)
        if clean is None:
            return False
        if target.depth >= MAX_DEPTH:
            return False
        parent = resolve(self.tasks, target.index, target.path)
        if parent is None:
            return False
        parent.subtasks.append(Task(id=self._allocate_id(), title=clean))
        return True

    def toggle_completion(self, selection: Selection | None = None) -> bool:
        """Flip the selected task and force every descendant to the new value."""
        target = selection if selection is not None else self.selection
        task = resolve(self.tasks, target.index, target.path)
        if task is None:
            return False
        set_completed(task, not task.completed)
        return True

    def delete_selected(self) -> bool:
        """Remove the selected task and its subtree, then repair the selection.

        The selection stays at the same position (now the next sibling),
        falls back to the last sibling if the removed task was last, and
        moves up to the parent when no siblings remain.
        """
        sel = self.selection
        if sel.is_root:
            if sel.index >= len(self.tasks):
                self.validate_selection()
                return False
            del self.tasks[sel.index]
            self.validate_selection()
            return True

        parent = resolve(self.tasks, sel.index, sel.path[:-1])
        position = sel.path[-1]
        if parent is None or position >= len(parent.subtasks):
            self.validate_selection()
            return False

        del parent.subtasks[position]
        if not parent.subtasks:
            self.selection = sel.parent()
        elif position >= len(parent.subtasks):
            self.selection = sel.sibling(len(parent.subtasks) - 1)
        return True

    def clear_all(self) -> None:
        """Drop every task and reset the selection. Ids are not reused."""
        self.tasks.clear()
        self.selection = Selection()

    # =========================================================================
    # Navigation
    # =========================================================================

    def move_selection_up(self) -> bool:
        return self._step(-1)

    def move_selection_down(self) -> bool:
        return self._step(1)

    def _step(self, delta: int) -> bool:
        if not self.tasks:
            return False
        self.validate_selection()
        current = flat_index(self.tasks, self.selection.index, self.selection.path)
        target = current + delta
        if target < 0 or target >= count_forest(self.tasks):
            return False
        found = locate(self.tasks, target)
        if found is None:
            return False
        index, path = found
        self.selection = Selection(index=index, path=path)
        return True

    def validate_selection(self) -> None:
        """Clamp the selection to an existing task, or to the empty state."""
        if not self.tasks:
            self.selection = Selection()
            return
        sel = self.selection
        if sel.index >= len(self.tasks):
            self.selection = Selection(index=len(self.tasks) - 1)
            return
        kept = valid_prefix(self.tasks, sel.index, sel.path)
        if kept != sel.path:
            logger.debug(f"Selection {sel} clamped to path {kept}")
            self.selection = Selection(index=sel.index, path=kept)
