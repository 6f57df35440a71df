"""pomotree - hierarchical task list with a Pomodoro timer."""

__version__ = "0.1.0"
