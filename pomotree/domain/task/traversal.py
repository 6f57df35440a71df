"""Pure traversal functions over the task forest.

All functions in this module are free of I/O. Positions are expressed
as (root index, child-index path) pairs and are resolved against the
forest they are given; nothing here holds on to a task between calls.

Flattening order is pre-order depth-first: each root, then all of its
descendants depth-first, then the next root. The flat index of a task
is the number of tasks emitted strictly before it in that order.
"""

from collections.abc import Callable, Iterator, Sequence
from typing import TypeVar

from .models import FlatEntry, Task

T = TypeVar("T")


# =============================================================================
# Fundamental Operations
# =============================================================================


def fold_forest(
    tasks: Sequence[Task],
    initial: T,
    f: Callable[[T, Task, int, tuple[int, ...]], T],
) -> T:
    """Fold over every task in flattening order.

    Args:
        tasks: The root tasks
        initial: Starting accumulator value
        f: Function (accumulator, task, root_index, path) -> new_accumulator

    Returns:
        Final accumulated value after visiting all tasks
    """

    def fold_task(acc: T, task: Task, index: int, path: tuple[int, ...]) -> T:
        acc = f(acc, task, index, path)
        for position, child in enumerate(task.subtasks):
            acc = fold_task(acc, child, index, path + (position,))
        return acc

    result = initial
    for index, root in enumerate(tasks):
        result = fold_task(result, root, index, ())
    return result


def walk(tasks: Sequence[Task]) -> Iterator[FlatEntry]:
    """Yield every task in flattening order with its position."""

    def walk_task(task: Task, index: int, path: tuple[int, ...]) -> Iterator[FlatEntry]:
        yield FlatEntry(index=index, path=path, task=task)
        for position, child in enumerate(task.subtasks):
            yield from walk_task(child, index, path + (position,))

    for index, root in enumerate(tasks):
        yield from walk_task(root, index, ())


def count_nodes(task: Task) -> int:
    """Count a task and all of its descendants."""
    return 1 + sum(count_nodes(child) for child in task.subtasks)


def count_forest(tasks: Sequence[Task]) -> int:
    """Count every task in the forest."""
    return sum(count_nodes(task) for task in tasks)


def count_completed(tasks: Sequence[Task]) -> int:
    """Count completed tasks anywhere in the forest."""

    def count(acc: int, task: Task, index: int, path: tuple[int, ...]) -> int:
        return acc + 1 if task.completed else acc

    return fold_forest(tasks, 0, count)


def max_id(tasks: Sequence[Task]) -> int:
    """Return the largest task id in the forest, or 0 when empty."""

    def biggest(acc: int, task: Task, index: int, path: tuple[int, ...]) -> int:
        return max(acc, task.id)

    return fold_forest(tasks, 0, biggest)


# =============================================================================
# Path Resolution
# =============================================================================


def resolve(tasks: Sequence[Task], index: int, path: Sequence[int]) -> Task | None:
    """Resolve a (root index, path) pair to a task.

    Returns None when the root index or any step of the path is out of
    range.
    """
    if index < 0 or index >= len(tasks):
        return None
    task = tasks[index]
    for position in path:
        if position < 0 or position >= len(task.subtasks):
            return None
        task = task.subtasks[position]
    return task


def valid_prefix(tasks: Sequence[Task], index: int, path: Sequence[int]) -> tuple[int, ...]:
    """Return the longest prefix of ``path`` that still resolves under ``index``."""
    if index < 0 or index >= len(tasks):
        return ()
    task = tasks[index]
    kept: list[int] = []
    for position in path:
        if position < 0 or position >= len(task.subtasks):
            break
        kept.append(position)
        task = task.subtasks[position]
    return tuple(kept)


def set_completed(task: Task, completed: bool) -> None:
    """Overwrite the completion flag of a task and every descendant."""
    task.completed = completed
    for child in task.subtasks:
        set_completed(child, completed)


# =============================================================================
# Flat Index
# =============================================================================


def flat_index(tasks: Sequence[Task], index: int, path: Sequence[int]) -> int:
    """Compute the flat index of the task at (index, path).

    Every earlier root contributes its whole subtree; every step down
    the path contributes the subtrees of the earlier siblings plus the
    parent itself. The position must resolve.
    """
    flat = sum(count_nodes(tasks[i]) for i in range(index))
    current = tasks[index]
    for position in path:
        flat += sum(count_nodes(current.subtasks[i]) for i in range(position))
        flat += 1
        current = current.subtasks[position]
    return flat


def locate(tasks: Sequence[Task], target: int) -> tuple[int, tuple[int, ...]] | None:
    """Resolve a flat index back to a (root index, path) pair.

    Walks the same order as ``flat_index`` and stops at the matching
    count. Returns None when ``target`` is past the end.
    """
    if target < 0:
        return None
    for count, entry in enumerate(walk(tasks)):
        if count == target:
            return entry.index, entry.path
    return None
