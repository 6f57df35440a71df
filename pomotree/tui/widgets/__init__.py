"""TUI widgets for pomotree."""

from .prompt import MenuPanel, PromptBar
from .task_list import TaskListWidget
from .timer_panel import TimerPanel

__all__ = [
    "MenuPanel",
    "PromptBar",
    "TaskListWidget",
    "TimerPanel",
]
