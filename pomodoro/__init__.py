"""Pomodoro — a focus timer with a daily quote."""

__version__ = "0.1.0"
