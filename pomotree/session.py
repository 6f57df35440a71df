"""The session: one task forest, one timer, and the UI state around them.

The input decoder turns key presses into ``Event`` objects and hands
them to ``Session.dispatch``. The renderer only reads session state.
Persistence goes through an optional ``StateRepository``; without one
the session runs purely in memory.
"""

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional

from pomotree.domain.shared.result import Err
from pomotree.domain.task import TaskTree
from pomotree.domain.timer import Clock, PomodoroTimer
from pomotree.infrastructure.storage import Snapshot, StateRepository
from pomotree.theme import Theme, ThemeName, get_theme, next_theme

logger = logging.getLogger(__name__)


class InputMode(str, Enum):
    NORMAL = "normal"
    ADDING_TASK = "adding-task"
    ADDING_SUBTASK = "adding-subtask"
    MENU = "menu"
    CONFIRMING_DELETE = "confirming-delete"
    CONFIRMING_CLEAR = "confirming-clear"

    @property
    def is_text_entry(self) -> bool:
        return self in (InputMode.ADDING_TASK, InputMode.ADDING_SUBTASK)

    @property
    def is_confirmation(self) -> bool:
        return self in (InputMode.CONFIRMING_DELETE, InputMode.CONFIRMING_CLEAR)


class Command(str, Enum):
    UP = "up"
    DOWN = "down"
    ADD_TASK = "add-task"
    ADD_SUBTASK = "add-subtask"
    TOGGLE = "toggle"
    DELETE = "delete"
    CLEAR = "clear"
    TIMER_TOGGLE = "timer-toggle"
    TIMER_RESET = "timer-reset"
    CYCLE_THEME = "cycle-theme"
    SAVE = "save"
    MENU = "menu"
    CONFIRM = "confirm"
    CANCEL = "cancel"
    CHAR = "char"
    BACKSPACE = "backspace"
    QUIT = "quit"


@dataclass(frozen=True)
class Event:
    """A decoded input event. ``text`` is only used by CHAR."""

    command: Command
    text: str = ""


class MenuOption(str, Enum):
    CLOSE = "Close Menu"
    RESET_TIMER = "Reset Pomodoro"
    SAVE = "Save Tasks"
    CLEAR = "Clear All Tasks"
    THEME = "Change Theme"
    QUIT = "Quit"


MENU_OPTIONS: tuple[MenuOption, ...] = tuple(MenuOption)


class Session:
    """Composition root holding the tree, the timer and transient UI state.

    Args:
        repository: Where snapshots and exports go. None disables persistence.
        clock: Wall clock shared with the timer.
        monotonic: Monotonic seconds, used for the save banner.
        notification_seconds: How long the "Saved" banner stays up.
    """

    def __init__(
        self,
        repository: Optional[StateRepository] = None,
        clock: Clock = datetime.now,
        monotonic: Callable[[], float] = time.monotonic,
        notification_seconds: float = 1.0,
    ) -> None:
        self.repository = repository
        self._clock = clock
        self._monotonic = monotonic
        self.notification_seconds = notification_seconds

        self.tree = TaskTree()
        self.timer = PomodoroTimer(clock=clock)
        self.theme_name = ThemeName.DEFAULT
        self.mode = InputMode.NORMAL
        self.input_buffer = ""
        self.menu_selection = 0
        self.saved_at: Optional[float] = None

    @property
    def theme(self) -> Theme:
        return get_theme(self.theme_name)

    @property
    def save_notification_active(self) -> bool:
        return self.saved_at is not None

    # =========================================================================
    # Dispatch
    # =========================================================================

    def dispatch(self, event: Event) -> bool:
        """Apply one input event.

        Returns:
            True when the application should exit.
        """
        if self.mode == InputMode.NORMAL:
            return self._handle_normal(event)
        if self.mode.is_text_entry:
            self._handle_text_entry(event)
        elif self.mode == InputMode.MENU:
            return self._handle_menu(event)
        elif self.mode.is_confirmation:
            self._handle_confirmation(event)
        return False

    def _handle_normal(self, event: Event) -> bool:
        command = event.command
        if command == Command.QUIT:
            self.persist()
            return True
        if command == Command.ADD_TASK:
            self._enter(InputMode.ADDING_TASK)
        elif command == Command.ADD_SUBTASK:
            if self.tree.selected_task() is not None:
                self._enter(InputMode.ADDING_SUBTASK)
        elif command == Command.TOGGLE:
            if self.tree.toggle_completion():
                self.persist()
        elif command == Command.UP:
            self.tree.move_selection_up()
        elif command == Command.DOWN:
            self.tree.move_selection_down()
        elif command == Command.TIMER_TOGGLE:
            self.timer.toggle()
        elif command == Command.TIMER_RESET:
            self.timer.reset()
        elif command == Command.CYCLE_THEME:
            self.cycle_theme()
            self.save()
        elif command == Command.SAVE:
            self.persist()
            self.notify_saved()
        elif command == Command.DELETE:
            self.mode = InputMode.CONFIRMING_DELETE
        elif command == Command.CLEAR:
            self.mode = InputMode.CONFIRMING_CLEAR
        elif command == Command.MENU:
            self.mode = InputMode.MENU
            self.menu_selection = 0
        return False

    def _handle_text_entry(self, event: Event) -> None:
        command = event.command
        if command == Command.CONFIRM:
            if self.mode == InputMode.ADDING_TASK:
                added = self.tree.insert_root(self.input_buffer)
            else:
                added = self.tree.insert_child(self.input_buffer)
            if added:
                self._leave()
                self.persist()
        elif command == Command.CANCEL:
            self._leave()
        elif command == Command.CHAR:
            self.input_buffer += event.text
        elif command == Command.BACKSPACE:
            self.input_buffer = self.input_buffer[:-1]

    def _handle_menu(self, event: Event) -> bool:
        command = event.command
        if command in (Command.CANCEL, Command.QUIT):
            self.mode = InputMode.NORMAL
        elif command == Command.UP:
            self.menu_selection = (self.menu_selection - 1) % len(MENU_OPTIONS)
        elif command == Command.DOWN:
            self.menu_selection = (self.menu_selection + 1) % len(MENU_OPTIONS)
        elif command == Command.CONFIRM:
            return self.run_menu_option(MENU_OPTIONS[self.menu_selection])
        return False

    def run_menu_option(self, option: MenuOption) -> bool:
        """Run a menu entry. Returns True when it asks to quit."""
        self.mode = InputMode.NORMAL
        if option == MenuOption.RESET_TIMER:
            self.timer.reset()
        elif option == MenuOption.SAVE:
            self.persist()
            self.notify_saved()
        elif option == MenuOption.CLEAR:
            self.mode = InputMode.CONFIRMING_CLEAR
        elif option == MenuOption.THEME:
            self.cycle_theme()
            self.save()
        elif option == MenuOption.QUIT:
            self.persist()
            return True
        return False

    def _handle_confirmation(self, event: Event) -> None:
        if event.command == Command.CONFIRM:
            if self.mode == InputMode.CONFIRMING_DELETE:
                self.tree.delete_selected()
            else:
                self.tree.clear_all()
            self.persist()
            self.mode = InputMode.NORMAL
        elif event.command == Command.CLEAR:
            self.mode = InputMode.CONFIRMING_CLEAR
        elif event.command == Command.CANCEL:
            self.mode = InputMode.NORMAL

    def _enter(self, mode: InputMode) -> None:
        self.mode = mode
        self.input_buffer = ""

    def _leave(self) -> None:
        self.mode = InputMode.NORMAL
        self.input_buffer = ""

    # =========================================================================
    # Loop
    # =========================================================================

    def tick(self) -> bool:
        """Run the non-input half of one loop iteration.

        Returns:
            True if a timer phase finished (state has been persisted).
        """
        self.timer.sync_phase_with_duration()
        if self.saved_at is not None:
            if self._monotonic() - self.saved_at >= self.notification_seconds:
                self.saved_at = None
        finished = self.timer.update()
        if finished:
            self.persist()
        return finished

    def cycle_theme(self) -> None:
        self.theme_name = next_theme(self.theme_name)

    def notify_saved(self) -> None:
        self.saved_at = self._monotonic()

    def current_time_label(self) -> str:
        """Date and 12-hour time, e.g. ``Mon, Jan 05, 2026  03:04 PM``."""
        now = self._clock()
        return f"{now:%a, %b %d, %Y}  {now:%I:%M %p}"

    # =========================================================================
    # Persistence
    # =========================================================================

    def snapshot(self) -> Snapshot:
        return Snapshot(
            tasks=[task.model_copy(deep=True) for task in self.tree.tasks],
            cycles=self.timer.cycles,
            phase=self.timer.phase,
            status=self.timer.status,
            remaining_seconds=self.timer.remaining_seconds(),
            next_task_id=self.tree.next_id,
            theme=self.theme_name,
        )

    def restore(self, snapshot: Snapshot) -> None:
        """Replace the session state with a snapshot, repairing as needed."""
        self.tree = TaskTree(
            [task.model_copy(deep=True) for task in snapshot.tasks],
            next_id=snapshot.next_task_id,
        )
        self.timer.restore(
            snapshot.phase,
            snapshot.status,
            snapshot.remaining_seconds,
            snapshot.cycles,
        )
        self.theme_name = snapshot.theme

    def load(self) -> bool:
        """Restore the last saved state, if any.

        Returns:
            True if prior state was loaded. Failures are logged and the
            session stays fresh.
        """
        if self.repository is None:
            return False
        result = self.repository.load()
        if isinstance(result, Err):
            logger.warning(f"Could not load saved state: {result.error}")
            return False
        if result.value is None:
            return False
        self.restore(result.value)
        logger.info(f"Loaded {len(self.tree)} tasks from {self.repository.state_file}")
        return True

    def save(self) -> bool:
        """Save the snapshot only. Returns True on success."""
        if self.repository is None:
            return False
        result = self.repository.save(self.snapshot())
        if isinstance(result, Err):
            logger.warning(f"Could not save state: {result.error}")
            return False
        return True

    def export(self) -> bool:
        """Write the text export. Returns True on success."""
        if self.repository is None:
            return False
        result = self.repository.export_text(self.tree.tasks)
        if isinstance(result, Err):
            logger.warning(f"Could not export tasks: {result.error}")
            return False
        return True

    def persist(self) -> bool:
        """Save the snapshot and the text export. Never raises.

        Returns:
            True if the snapshot was saved; the export does not affect it.
        """
        saved = self.save()
        self.export()
        return saved
