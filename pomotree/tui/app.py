"""Main pomotree TUI application.

The app is a thin shell around a Session: key presses are decoded and
dispatched, a short interval timer runs the session tick, and every
widget is redrawn from session state afterwards.
"""

import logging
from typing import Optional

from rich.text import Text
from textual import events
from textual.app import App, ComposeResult
from textual.widgets import Static

from pomotree import __version__
from pomotree.config import Settings
from pomotree.session import Session
from pomotree.tui.keys import KeyDecoder
from pomotree.tui.widgets import MenuPanel, PromptBar, TaskListWidget, TimerPanel

logger = logging.getLogger(__name__)


class PomoTreeApp(App):
    """Hierarchical task list with a Pomodoro timer."""

    TITLE = "pomotree"
    ENABLE_COMMAND_PALETTE = False

    CSS = """
    Screen {
        background: $surface;
        layout: vertical;
    }

    #clock {
        border: solid $primary;
        content-align: center middle;
        height: 3;
    }

    #saved-banner {
        width: 100%;
        content-align: center middle;
        text-style: bold;
        height: 1;
    }

    #version {
        dock: bottom;
        width: 100%;
        height: 1;
        content-align: right middle;
        color: $text-muted;
    }
    """

    def __init__(
        self,
        session: Session,
        settings: Optional[Settings] = None,
    ) -> None:
        """Initialize the application.

        Args:
            session: The session to drive. Its state should already be loaded.
            settings: Loop and banner settings; defaults if omitted.
        """
        super().__init__()
        self.session = session
        self.settings = settings or Settings()
        self.decoder = KeyDecoder()

    def compose(self) -> ComposeResult:
        yield Static("", id="clock")
        yield TimerPanel(id="timer")
        yield MenuPanel(id="menu")
        yield TaskListWidget(id="tasks")
        yield Static("", id="saved-banner")
        yield PromptBar(id="prompt")
        yield Static(f"v{__version__}", id="version")

    def on_mount(self) -> None:
        self.set_interval(self.settings.poll_interval, self._on_tick)
        self.refresh_view()

    # =========================================================================
    # Loop
    # =========================================================================

    def on_key(self, event: events.Key) -> None:
        """Decode one key press and hand it to the session."""
        command = self.decoder.decode(event.key, event.character, self.session.mode)
        if command is None:
            return
        event.stop()
        event.prevent_default()
        if self.session.dispatch(command):
            self.exit()
            return
        self.refresh_view()

    def _on_tick(self) -> None:
        self.session.tick()
        self.refresh_view()

    async def action_quit(self) -> None:
        """Persist before leaving through the built-in quit binding."""
        self.session.persist()
        self.exit()

    # =========================================================================
    # Rendering
    # =========================================================================

    def refresh_view(self) -> None:
        """Redraw every widget from the session."""
        session = self.session
        theme = session.theme

        self.query_one("#clock", Static).update(
            Text(session.current_time_label(), style=theme.clock)
        )
        self.query_one(TimerPanel).show(session.timer, theme)
        self.query_one(MenuPanel).show(session)
        self.query_one(TaskListWidget).show(session.tree, theme)
        self.query_one(PromptBar).show(session)

        banner = self.query_one("#saved-banner", Static)
        if session.save_notification_active:
            banner.update(Text("Saved", style=f"bold {theme.secondary}"))
        else:
            banner.update("")


__all__ = ["PomoTreeApp"]
