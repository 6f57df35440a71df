"""Pomodoro timer panel."""

from typing import Optional

from rich.console import Group
from rich.progress_bar import ProgressBar
from rich.text import Text
from textual.widgets import Static

from pomotree.domain.timer import Phase, PomodoroTimer
from pomotree.theme import Theme

PROGRESS_STEPS = 1000


def phase_color(phase: Phase, theme: Theme) -> str:
    if phase == Phase.WORK:
        return theme.work
    if phase == Phase.SHORT_BREAK:
        return theme.short_break
    return theme.long_break


def format_clock(seconds: int) -> str:
    """Format whole seconds as ``MM:SS``."""
    minutes, secs = divmod(max(0, seconds), 60)
    return f"{minutes:02d}:{secs:02d}"


def timer_summary(timer: PomodoroTimer) -> str:
    """One-line description, e.g. ``Work | 24:59 | Running | Cycles: 2 | 0%``."""
    percent = round(timer.progress() * 100)
    return (
        f"{timer.phase.label} | {format_clock(timer.remaining_seconds())} | "
        f"{timer.status.value} | Cycles: {timer.cycles} | {percent}%"
    )


def render_timer(timer: PomodoroTimer, theme: Theme) -> Group:
    color = phase_color(timer.phase, theme)
    label = Text(timer_summary(timer), style=f"bold {color}")
    bar = ProgressBar(
        total=PROGRESS_STEPS,
        completed=round(timer.progress() * PROGRESS_STEPS),
        complete_style=theme.secondary,
        finished_style=theme.secondary,
    )
    return Group(label, bar)


class TimerPanel(Static):
    """Panel showing the phase, countdown and progress."""

    DEFAULT_CSS = """
    TimerPanel {
        background: $surface;
        padding: 0 1;
        border: solid $primary;
        height: auto;
    }
    """

    def __init__(
        self,
        id: Optional[str] = None,
        classes: Optional[str] = None,
    ) -> None:
        super().__init__(id=id, classes=classes)
        self.border_title = "Pomodoro Timer"

    def show(self, timer: PomodoroTimer, theme: Theme) -> None:
        self.update(render_timer(timer, theme))
