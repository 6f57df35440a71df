"""Timer domain - the Pomodoro state machine."""

from .models import (
    LONG_BREAK_EVERY,
    PHASE_DURATIONS,
    PHASE_LABELS,
    Phase,
    RunStatus,
    phase_for_duration,
)
from .pomodoro import Clock, PomodoroTimer

__all__ = [
    "Phase",
    "RunStatus",
    "PHASE_DURATIONS",
    "PHASE_LABELS",
    "LONG_BREAK_EVERY",
    "phase_for_duration",
    "Clock",
    "PomodoroTimer",
]
