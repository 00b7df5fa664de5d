"""User-adjustable timer, behaviour and sound settings."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Optional

WORK_DURATION_RANGE = (1, 120)
SHORT_BREAK_RANGE = (1, 60)
LONG_BREAK_RANGE = (5, 120)
SESSIONS_RANGE = (2, 10)
IDLE_TIMEOUT_RANGE = (1, 30)
VOLUME_RANGE = (0.0, 1.0)


def _clamp(value, bounds):
    low, high = bounds
    return max(low, min(high, value))


@dataclass
class Settings:
    """Durations in minutes, behaviour switches and sound choices."""

    work_duration: int = 25
    short_break_duration: int = 5
    long_break_duration: int = 15
    sessions_until_long_break: int = 4

    auto_start_work_after_break: bool = True
    enable_idle_detection: bool = False
    idle_timeout_minutes: int = 2

    enable_sounds: bool = True
    sound_volume: float = 0.7
    sound_type: str = "chimes"
    work_start_sound: Optional[str] = None
    break_start_sound: Optional[str] = None
    session_complete_sound: Optional[str] = None
    timer_finish_sound: Optional[str] = None

    def copy(self) -> "Settings":
        """An independent copy of these settings."""
        return dataclasses.replace(self)

    def clamped(self) -> "Settings":
        """A copy with every value held to the range the settings dialog allows."""
        return dataclasses.replace(
            self,
            work_duration=_clamp(self.work_duration, WORK_DURATION_RANGE),
            short_break_duration=_clamp(self.short_break_duration, SHORT_BREAK_RANGE),
            long_break_duration=_clamp(self.long_break_duration, LONG_BREAK_RANGE),
            sessions_until_long_break=_clamp(
                self.sessions_until_long_break, SESSIONS_RANGE
            ),
            idle_timeout_minutes=_clamp(self.idle_timeout_minutes, IDLE_TIMEOUT_RANGE),
            sound_volume=_clamp(self.sound_volume, VOLUME_RANGE),
        )