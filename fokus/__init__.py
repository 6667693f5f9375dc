"""A simple Pomodoro timer for the terminal: options, timer state, countdown and screen rendering."""

__version__ = "0.1.7"