"""Task list widget: the flattened forest with the selection highlighted."""

from typing import Optional

from rich.text import Text
from textual.widgets import Static

from pomotree.domain.task import TaskTree
from pomotree.theme import Theme

EMPTY_MESSAGE = "No tasks yet. Press 'a' to add a task."


def render_tasks(tree: TaskTree, theme: Theme) -> Text:
    """Build the task list as Rich text.

    Titles go in as plain text so user input is never read as markup.
    """
    text = Text()
    if tree.is_empty():
        text.append(EMPTY_MESSAGE, style=theme.completed)
        return text

    selection = tree.selection
    for row, entry in enumerate(tree.flatten()):
        if row:
            text.append("\n")
        selected = entry.index == selection.index and entry.path == selection.path
        if selected:
            style = f"bold reverse {theme.selected}"
        elif entry.task.completed:
            style = theme.completed
        else:
            style = theme.normal
        checkbox = "[x]" if entry.task.completed else "[ ]"
        text.append(f"{'  ' * entry.depth}{checkbox}", style=style)
        text.append(" ")
        text.append(entry.task.title, style=style)
    return text


class TaskListWidget(Static):
    """Widget displaying every task in navigation order."""

    DEFAULT_CSS = """
    TaskListWidget {
        background: $surface;
        padding: 0 1;
        border: solid $primary;
        height: 1fr;
    }
    """

    def __init__(
        self,
        id: Optional[str] = None,
        classes: Optional[str] = None,
    ) -> None:
        super().__init__(id=id, classes=classes)
        self.border_title = "Tasks"

    def show(self, tree: TaskTree, theme: Theme) -> None:
        """Redraw from the current tree."""
        self.update(render_tasks(tree, theme))
