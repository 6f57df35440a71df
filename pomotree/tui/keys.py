"""Key decoding: textual key names to session events.

The mapping depends on the input mode; in text entry almost every key
is a character for the buffer.
"""

import time
from collections.abc import Callable
from typing import Optional

from pomotree.session import Command, Event, InputMode

# Two presses of "c" closer together than this mean "clear all".
DOUBLE_PRESS_SECONDS = 0.5

NORMAL_KEYS: dict[str, Command] = {
    "q": Command.QUIT,
    "a": Command.ADD_TASK,
    "s": Command.ADD_SUBTASK,
    "x": Command.TOGGLE,
    "up": Command.UP,
    "k": Command.UP,
    "down": Command.DOWN,
    "j": Command.DOWN,
    "p": Command.TIMER_TOGGLE,
    "r": Command.TIMER_RESET,
    "t": Command.CYCLE_THEME,
    "w": Command.SAVE,
    "escape": Command.MENU,
}

TEXT_ENTRY_KEYS: dict[str, Command] = {
    "enter": Command.CONFIRM,
    "escape": Command.CANCEL,
    "ctrl+c": Command.CANCEL,
    "backspace": Command.BACKSPACE,
}

MENU_KEYS: dict[str, Command] = {
    "escape": Command.CANCEL,
    "q": Command.CANCEL,
    "up": Command.UP,
    "k": Command.UP,
    "down": Command.DOWN,
    "j": Command.DOWN,
    "enter": Command.CONFIRM,
}

CONFIRMATION_KEYS: dict[str, Command] = {
    "y": Command.CONFIRM,
    "Y": Command.CONFIRM,
    "n": Command.CANCEL,
    "N": Command.CANCEL,
    "escape": Command.CANCEL,
}


class KeyDecoder:
    """Stateful decoder; it remembers the last "c" press for double-press."""

    def __init__(self, monotonic: Callable[[], float] = time.monotonic) -> None:
        self._monotonic = monotonic
        self._last_c: Optional[float] = None

    def decode(
        self,
        key: str,
        character: Optional[str],
        mode: InputMode,
    ) -> Optional[Event]:
        """Translate one key press, or return None if it means nothing here."""
        if mode == InputMode.NORMAL:
            return self._decode_normal(key)
        if mode.is_text_entry:
            command = TEXT_ENTRY_KEYS.get(key)
            if command is not None:
                return Event(command)
            if character and character.isprintable():
                return Event(Command.CHAR, character)
            return None
        if mode == InputMode.MENU:
            command = MENU_KEYS.get(key)
        elif key == "c" and mode == InputMode.CONFIRMING_DELETE:
            if not self._is_double_c():
                return None
            self._last_c = None
            return Event(Command.CLEAR)
        else:
            command = CONFIRMATION_KEYS.get(key) or CONFIRMATION_KEYS.get(character or "")
        return Event(command) if command is not None else None

    def _is_double_c(self) -> bool:
        return self._last_c is not None and self._monotonic() - self._last_c < DOUBLE_PRESS_SECONDS

    def _decode_normal(self, key: str) -> Optional[Event]:
        if key == "c":
            if self._is_double_c():
                self._last_c = None
                return Event(Command.CLEAR)
            self._last_c = self._monotonic()
            return Event(Command.DELETE)
        self._last_c = None
        command = NORMAL_KEYS.get(key)
        return Event(command) if command is not None else None
