"""Command-line names for the remote-control methods and call outcomes."""

from __future__ import annotations

from enum import Enum
from typing import Optional

SERVICE_NAME = "org.dl.commodoro"
OBJECT_PATH = "/org/dl/commodoro"
INTERFACE_NAME = "org.dl.commodoro.Timer"

COMMANDS = {
    "toggle_timer": "ToggleTimer",
    "reset_timer": "ResetTimer",
    "toggle_break": "ToggleBreak",
    "show_hide": "ShowHide",
}


class CommandResult(Enum):
    """Outcome of sending a command to a running instance."""

    SUCCESS = "success"
    NOT_RUNNING = "not_running"
    START_NEEDED = "start_needed"
    ERROR = "error"


def parse_command(text: Optional[str]) -> Optional[str]:
    """The method name for a command-line command, or ``None`` if it is not one."""
    if text is None:
        return None
    return COMMANDS.get(text)