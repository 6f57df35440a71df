"""Input prompt and settings menu widgets."""

from typing import Optional

from rich.text import Text
from textual.widgets import Static

from pomotree.session import MENU_OPTIONS, InputMode, Session

NORMAL_HELP = (
    "Commands: a=add task, s=add subtask, x=toggle, ↑↓/jk=navigate, "
    "p=play/pause, r=reset, t=theme, w=save, c=delete, cc=clear all, "
    "Esc=menu, q=quit"
)

PROMPTS: dict[InputMode, str] = {
    InputMode.NORMAL: NORMAL_HELP,
    InputMode.ADDING_TASK: "Enter task name (Enter to confirm, Esc to cancel):",
    InputMode.ADDING_SUBTASK: "Enter subtask name (Enter to confirm, Esc to cancel):",
    InputMode.MENU: "↑↓/jk=navigate, Enter=select, Esc/q=close",
    InputMode.CONFIRMING_DELETE: "Delete selected task/subtask? (y/n):",
    InputMode.CONFIRMING_CLEAR: "Clear all tasks? (y/n):",
}


def render_prompt(session: Session) -> Text:
    text = Text(PROMPTS[session.mode], style=session.theme.prompt)
    if session.mode.is_text_entry:
        text.append(" ")
        text.append(session.input_buffer)
        text.append("_", style="blink")
    return text


def render_menu(session: Session) -> Text:
    theme = session.theme
    text = Text()
    for position, option in enumerate(MENU_OPTIONS):
        if position:
            text.append("\n")
        if position == session.menu_selection:
            text.append(option.value, style=f"bold reverse {theme.selected}")
        else:
            text.append(option.value, style=theme.normal)
    return text


class PromptBar(Static):
    """Bottom bar with key help or the text being typed."""

    DEFAULT_CSS = """
    PromptBar {
        border: solid $primary;
        padding: 0 1;
        height: auto;
    }
    """

    def __init__(self, id: Optional[str] = None, classes: Optional[str] = None) -> None:
        super().__init__(id=id, classes=classes)
        self.border_title = "Input"

    def show(self, session: Session) -> None:
        self.update(render_prompt(session))


class MenuPanel(Static):
    """Settings menu, only visible in menu mode."""

    DEFAULT_CSS = """
    MenuPanel {
        border: thick $primary;
        background: $surface;
        padding: 0 2;
        width: 40;
        height: auto;
        margin: 0 2;
    }
    """

    def __init__(self, id: Optional[str] = None, classes: Optional[str] = None) -> None:
        super().__init__(id=id, classes=classes)
        self.border_title = "Settings Menu"

    def show(self, session: Session) -> None:
        self.display = session.mode == InputMode.MENU
        if self.display:
            self.update(render_menu(session))
