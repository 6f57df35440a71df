# tests/test_widgets.py

from __future__ import annotations

from pomotree.domain.task import TaskTree
from pomotree.domain.timer import PomodoroTimer
from pomotree.domain.types import Selection
from pomotree.session import Command, Event, InputMode, Session
from pomotree.theme import ThemeName, get_theme
from pomotree.tui.widgets.prompt import NORMAL_HELP, render_menu, render_prompt
from pomotree.tui.widgets.task_list import EMPTY_MESSAGE, render_tasks
from pomotree.tui.widgets.timer_panel import format_clock, timer_summary

from .fakes import FakeClock

THEME = get_theme(ThemeName.DEFAULT)


def test_format_clock() -> None:
    assert format_clock(1500) == "25:00"
    assert format_clock(61) == "01:01"
    assert format_clock(0) == "00:00"
    assert format_clock(-4) == "00:00"


def test_timer_summary(clock: FakeClock) -> None:
    timer = PomodoroTimer(clock=clock)
    timer.cycles = 2
    timer.start()
    clock.advance(1)
    assert timer_summary(timer) == "Work | 24:59 | Running | Cycles: 2 | 0%"


def test_render_empty_tree() -> None:
    assert render_tasks(TaskTree(), THEME).plain == EMPTY_MESSAGE


def test_render_tasks_indents_and_checks(tree: TaskTree) -> None:
    tree.tasks[1].completed = True
    assert render_tasks(tree, THEME).plain.splitlines() == [
        "[ ] A",
        "  [ ] B",
        "    [ ] D",
        "  [ ] C",
        "[x] E",
    ]


def test_selected_row_is_highlighted(tree: TaskTree) -> None:
    tree.selection = Selection(0, (1,))
    text = render_tasks(tree, THEME)
    highlighted = {
        text.plain[span.start : span.end]
        for span in text.spans
        if "reverse" in str(span.style)
    }
    assert highlighted == {"  [ ]", "C"}


def test_titles_are_not_markup() -> None:
    tree = TaskTree()
    tree.insert_root("[bold]not bold[/bold]")
    assert render_tasks(tree, THEME).plain == "[ ] [bold]not bold[/bold]"


def test_prompt_shows_buffer_while_typing(clock: FakeClock) -> None:
    session = Session(clock=clock)
    assert render_prompt(session).plain == NORMAL_HELP
    session.dispatch(Event(Command.ADD_TASK))
    session.dispatch(Event(Command.CHAR, "h"))
    assert session.mode == InputMode.ADDING_TASK
    assert render_prompt(session).plain.endswith(": h_")


def test_menu_lists_options(clock: FakeClock) -> None:
    session = Session(clock=clock)
    assert render_menu(session).plain.splitlines() == [
        "Close Menu",
        "Reset Pomodoro",
        "Save Tasks",
        "Clear All Tasks",
        "Change Theme",
        "Quit",
    ]
