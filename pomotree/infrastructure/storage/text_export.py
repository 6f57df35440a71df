"""Human-readable checklist export of the task forest."""

from collections.abc import Sequence

from pomotree.domain.task import Task, walk

EMPTY_EXPORT = "No tasks yet.\n"


def render_checklist(tasks: Sequence[Task]) -> str:
    """Render tasks as an indented ``[x]``/``[ ]`` checklist."""
    if not tasks:
        return EMPTY_EXPORT
    lines = []
    for entry in walk(tasks):
        checkbox = "[x]" if entry.task.completed else "[ ]"
        lines.append(f"{'  ' * entry.depth}{checkbox} {entry.task.title}")
    return "\n".join(lines) + "\n"
