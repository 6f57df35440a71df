# tests/test_pomodoro.py

from __future__ import annotations

from datetime import timedelta

import pytest

from pomotree.domain.timer import Phase, PomodoroTimer, RunStatus

from .fakes import FakeClock

WORK = 25 * 60
SHORT = 5 * 60
LONG = 15 * 60


@pytest.fixture()
def timer(clock: FakeClock) -> PomodoroTimer:
    return PomodoroTimer(clock=clock)


def test_initial_state(timer: PomodoroTimer) -> None:
    assert timer.phase == Phase.WORK
    assert timer.status == RunStatus.STOPPED
    assert timer.cycles == 0
    assert timer.remaining_seconds() == WORK
    assert timer.progress() == 0.0


def test_running_timer_counts_down(timer: PomodoroTimer, clock: FakeClock) -> None:
    timer.start()
    clock.advance(60)
    assert timer.status == RunStatus.RUNNING
    assert timer.remaining_seconds() == WORK - 60
    assert timer.progress() == pytest.approx(60 / WORK)


def test_start_while_running_keeps_anchor(timer: PomodoroTimer, clock: FakeClock) -> None:
    timer.start()
    clock.advance(30)
    timer.start()
    clock.advance(30)
    assert timer.remaining_seconds() == WORK - 60


def test_pause_freezes_and_resume_continues(timer: PomodoroTimer, clock: FakeClock) -> None:
    timer.start()
    clock.advance(100)
    timer.pause()
    assert timer.status == RunStatus.PAUSED
    assert timer.remaining_seconds() == WORK - 100

    clock.advance(500)
    assert timer.remaining_seconds() == WORK - 100

    timer.start()
    clock.advance(10)
    assert timer.remaining_seconds() == WORK - 110


def test_pause_when_not_running_is_noop(timer: PomodoroTimer) -> None:
    timer.pause()
    assert timer.status == RunStatus.STOPPED
    assert timer.remaining_seconds() == WORK


def test_toggle(timer: PomodoroTimer) -> None:
    timer.toggle()
    assert timer.status == RunStatus.RUNNING
    timer.toggle()
    assert timer.status == RunStatus.PAUSED
    timer.toggle()
    assert timer.status == RunStatus.RUNNING


def test_remaining_never_negative(timer: PomodoroTimer, clock: FakeClock) -> None:
    timer.start()
    clock.advance(WORK + 500)
    assert timer.remaining_seconds() == 0
    assert timer.progress() == 1.0

    timer.pause()
    assert timer.remaining_seconds() == 0


def test_update_before_expiry(timer: PomodoroTimer, clock: FakeClock) -> None:
    timer.start()
    clock.advance(WORK - 1)
    assert not timer.update()
    assert timer.phase == Phase.WORK


def test_update_when_stopped(timer: PomodoroTimer, clock: FakeClock) -> None:
    clock.advance(WORK * 2)
    assert not timer.update()


def test_update_finishes_phase(timer: PomodoroTimer, clock: FakeClock) -> None:
    timer.start()
    clock.advance(WORK)
    assert timer.update()
    assert timer.phase == Phase.SHORT_BREAK
    assert timer.status == RunStatus.STOPPED
    assert timer.cycles == 1
    assert timer.remaining_seconds() == SHORT
    assert not timer.update()


def test_break_returns_to_work(timer: PomodoroTimer) -> None:
    timer.phase = Phase.SHORT_BREAK
    timer.cycles = 1
    timer.advance_cycle()
    assert timer.phase == Phase.WORK
    assert timer.cycles == 1
    assert timer.duration == timedelta(minutes=25)


@pytest.mark.parametrize(
    ("cycles", "phase", "seconds"),
    [
        (0, Phase.SHORT_BREAK, SHORT),
        (2, Phase.SHORT_BREAK, SHORT),
        (3, Phase.LONG_BREAK, LONG),
        (7, Phase.LONG_BREAK, LONG),
    ],
)
def test_every_fourth_work_phase_earns_long_break(
    timer: PomodoroTimer, cycles: int, phase: Phase, seconds: int
) -> None:
    timer.cycles = cycles
    timer.advance_cycle()
    assert timer.cycles == cycles + 1
    assert timer.phase == phase
    assert timer.remaining_seconds() == seconds


def test_reset_rewinds_current_phase(timer: PomodoroTimer, clock: FakeClock) -> None:
    timer.start()
    clock.advance(300)
    timer.reset()
    assert timer.status == RunStatus.STOPPED
    assert timer.phase == Phase.WORK
    assert timer.remaining_seconds() == WORK
    assert timer.started_at is None


def test_reset_derives_duration_from_phase(timer: PomodoroTimer) -> None:
    timer.phase = Phase.SHORT_BREAK
    timer.reset()
    assert timer.phase == Phase.SHORT_BREAK
    assert timer.duration == timedelta(minutes=5)
    assert timer.remaining_seconds() == SHORT


def test_known_duration_wins_over_phase(timer: PomodoroTimer) -> None:
    timer.duration = timedelta(minutes=15)
    timer.sync_phase_with_duration()
    assert timer.phase == Phase.LONG_BREAK


def test_unknown_duration_is_rederived(timer: PomodoroTimer) -> None:
    timer.phase = Phase.SHORT_BREAK
    timer.duration = timedelta(minutes=7)
    timer.sync_phase_with_duration()
    assert timer.phase == Phase.SHORT_BREAK
    assert timer.duration == timedelta(minutes=5)


def test_progress_with_zero_duration(timer: PomodoroTimer) -> None:
    timer.duration = timedelta(0)
    assert timer.progress() == 0.0


class TestRestore:
    """Loading persisted timer values."""

    def test_running_timer_is_reanchored(self, timer: PomodoroTimer, clock: FakeClock) -> None:
        timer.restore(Phase.WORK, RunStatus.RUNNING, 600, 2)
        assert timer.status == RunStatus.RUNNING
        assert timer.cycles == 2
        clock.advance(60)
        assert timer.remaining_seconds() == 540

    def test_paused_timer_keeps_remaining(self, timer: PomodoroTimer, clock: FakeClock) -> None:
        timer.restore(Phase.LONG_BREAK, RunStatus.PAUSED, 200, 4)
        clock.advance(60)
        assert timer.phase == Phase.LONG_BREAK
        assert timer.remaining_seconds() == 200

    def test_remaining_is_clamped_to_duration(self, timer: PomodoroTimer) -> None:
        timer.restore(Phase.SHORT_BREAK, RunStatus.STOPPED, 900, 0)
        assert timer.remaining_seconds() == SHORT

    def test_missing_remaining_resets(self, timer: PomodoroTimer) -> None:
        timer.restore(Phase.SHORT_BREAK, RunStatus.RUNNING, None, 1)
        assert timer.status == RunStatus.STOPPED
        assert timer.remaining_seconds() == SHORT

    def test_negative_remaining_resets(self, timer: PomodoroTimer) -> None:
        timer.restore(Phase.WORK, RunStatus.PAUSED, -5, 1)
        assert timer.status == RunStatus.STOPPED
        assert timer.remaining_seconds() == WORK

    def test_negative_cycles_become_zero(self, timer: PomodoroTimer) -> None:
        timer.restore(Phase.WORK, RunStatus.STOPPED, 100, -3)
        assert timer.cycles == 0

    def test_huge_remaining_is_clamped(self, timer: PomodoroTimer) -> None:
        timer.restore(Phase.WORK, RunStatus.PAUSED, 10**15, 0)
        assert timer.status == RunStatus.PAUSED
        assert timer.remaining_seconds() == WORK


def test_reset_after_mismatched_duration(timer: PomodoroTimer) -> None:
    timer.phase = Phase.LONG_BREAK
    timer.duration = timedelta(minutes=25)
    timer.reset()
    assert timer.phase == Phase.LONG_BREAK
    assert timer.duration == timedelta(minutes=15)
    assert timer.remaining_seconds() == LONG
