"""Pomodoro timer state machine, settings storage, chimes, idle detection and icon rendering."""

__version__ = "0.1.0"
__all__ = ["__version__"]