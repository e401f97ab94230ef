"""taskdeck - terminal task manager with notes and a pomodoro timer."""

__version__ = "0.1.0"
