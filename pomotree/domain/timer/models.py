"""Timer enumerations and the fixed phase durations."""

from datetime import timedelta
from enum import Enum


class Phase(str, Enum):
    """Where we are in the Pomodoro cycle."""

    WORK = "Work"
    SHORT_BREAK = "ShortBreak"
    LONG_BREAK = "LongBreak"

    @property
    def label(self) -> str:
        return PHASE_LABELS[self]


class RunStatus(str, Enum):
    """Whether the clock is moving. Independent of the phase."""

    STOPPED = "Stopped"
    RUNNING = "Running"
    PAUSED = "Paused"


PHASE_DURATIONS: dict[Phase, timedelta] = {
    Phase.WORK: timedelta(minutes=25),
    Phase.SHORT_BREAK: timedelta(minutes=5),
    Phase.LONG_BREAK: timedelta(minutes=15),
}

PHASE_LABELS: dict[Phase, str] = {
    Phase.WORK: "Work",
    Phase.SHORT_BREAK: "Short Break",
    Phase.LONG_BREAK: "Long Break",
}

# Every Nth completed work phase earns a long break.
LONG_BREAK_EVERY = 4


def phase_for_duration(duration: timedelta) -> Phase | None:
    """Return the phase whose fixed duration equals ``duration``, if any."""
    for phase, fixed in PHASE_DURATIONS.items():
        if fixed == duration:
            return phase
    return None
