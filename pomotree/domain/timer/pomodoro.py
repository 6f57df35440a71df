"""Pomodoro timer state machine.

There is no background thread: elapsed time is always computed on
demand from the instant the current run started, so the displayed
value is exact no matter how often the loop polls.
"""

import logging
from collections.abc import Callable
from datetime import datetime, timedelta

from .models import (
    LONG_BREAK_EVERY,
    PHASE_DURATIONS,
    Phase,
    RunStatus,
    phase_for_duration,
)

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


class PomodoroTimer:
    """Work/break cycle timer with pause and resume.

    ``remaining`` holds the time left as of the last pause or stop. While
    running, the live value is ``remaining - (now - started_at)``.

    Args:
        clock: Callable returning the current instant. Tests pass a
            synthetic clock; production uses ``datetime.now``.
    """

    def __init__(self, clock: Clock = datetime.now) -> None:
        self._clock = clock
        self.phase = Phase.WORK
        self.status = RunStatus.STOPPED
        self.duration = PHASE_DURATIONS[Phase.WORK]
        self.remaining = self.duration
        self.started_at: datetime | None = None
        self.cycles = 0

    def _elapsed(self) -> timedelta:
        if self.started_at is None:
            return timedelta(0)
        return self._clock() - self.started_at

    # =========================================================================
    # Transitions
    # =========================================================================

    def start(self) -> None:
        """Start or resume. Starting while running keeps the current anchor."""
        if self.status in (RunStatus.STOPPED, RunStatus.PAUSED):
            self.started_at = self._clock()
        self.status = RunStatus.RUNNING

    def pause(self) -> None:
        """Bank the elapsed time into ``remaining``. Only acts while running."""
        if self.status != RunStatus.RUNNING:
            return
        # May go negative here; readers clamp.
        self.remaining -= self._elapsed()
        self.started_at = None
        self.status = RunStatus.PAUSED

    def toggle(self) -> None:
        if self.status == RunStatus.RUNNING:
            self.pause()
        else:
            self.start()

    def reset(self) -> None:
        """Stop and rewind to the full duration of the current phase."""
        # The phase picks the duration; no further realignment is needed.
        self.sync_duration_with_phase()
        self.status = RunStatus.STOPPED
        self.started_at = None
        self.remaining = self.duration

    def update(self) -> bool:
        """Check whether the running phase has elapsed.

        Returns:
            True exactly when a phase finished on this call.
        """
        if self.status != RunStatus.RUNNING or self.started_at is None:
            return False
        if self._elapsed() < self.remaining:
            return False
        finished = self.phase
        self.remaining = timedelta(0)
        self.status = RunStatus.STOPPED
        self.advance_cycle()
        logger.info(f"{finished.label} phase finished, next up: {self.phase.label}")
        return True

    def advance_cycle(self) -> None:
        """Move to the next phase. The only place the cycle count changes."""
        if self.phase == Phase.WORK:
            self.cycles += 1
            if self.cycles % LONG_BREAK_EVERY == 0:
                self.phase = Phase.LONG_BREAK
            else:
                self.phase = Phase.SHORT_BREAK
        else:
            self.phase = Phase.WORK
        self.duration = PHASE_DURATIONS[self.phase]
        self.remaining = self.duration
        self.started_at = None

    # =========================================================================
    # Consistency
    # =========================================================================

    def sync_duration_with_phase(self) -> None:
        self.duration = PHASE_DURATIONS[self.phase]

    def sync_phase_with_duration(self) -> None:
        """Make the phase agree with the duration.

        The duration wins when it is one of the fixed values; otherwise it
        is re-derived from the phase.
        """
        phase = phase_for_duration(self.duration)
        if phase is None:
            self.sync_duration_with_phase()
        elif phase != self.phase:
            logger.debug(f"Phase {self.phase.value} realigned to {phase.value}")
            self.phase = phase

    # =========================================================================
    # Reads
    # =========================================================================

    def remaining_seconds(self) -> int:
        """Whole seconds left, never negative."""
        left = self.remaining
        if self.status == RunStatus.RUNNING:
            left -= self._elapsed()
        return max(0, int(left.total_seconds()))

    def progress(self) -> float:
        """Fraction of the phase already spent, clamped to [0, 1]."""
        total = int(self.duration.total_seconds())
        if total == 0:
            return 0.0
        fraction = (total - self.remaining_seconds()) / total
        return min(1.0, max(0.0, fraction))

    def restore(
        self,
        phase: Phase,
        status: RunStatus,
        remaining_seconds: int | None,
        cycles: int,
    ) -> None:
        """Load persisted values and repair anything inconsistent.

        A missing or negative remaining time resets the phase. A running
        timer is re-anchored at the current instant so it resumes from
        the saved value.
        """
        self.phase = phase
        self.cycles = max(0, cycles)
        self.sync_duration_with_phase()
        self.started_at = None
        if remaining_seconds is None:
            self.reset()
            return
        if remaining_seconds < 0:
            logger.warning(f"Invalid remaining time {remaining_seconds}s, resetting timer")
            self.reset()
            return
        # Clamp first: timedelta overflows on huge values.
        seconds = min(remaining_seconds, int(self.duration.total_seconds()))
        self.remaining = timedelta(seconds=seconds)
        self.status = status
        if status == RunStatus.RUNNING:
            self.started_at = self._clock()

    def __repr__(self) -> str:
        return (
            f"PomodoroTimer(phase={self.phase.value}, status={self.status.value}, "
            f"remaining={self.remaining_seconds()}s, cycles={self.cycles})"
        )
