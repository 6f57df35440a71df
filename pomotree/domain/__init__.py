"""Domain layer for pomotree: the task forest and the Pomodoro timer.

Nothing in this package performs I/O.
"""
