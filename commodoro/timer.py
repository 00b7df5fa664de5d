"""Pomodoro state machine: work sessions, short and long breaks, pausing."""

from __future__ import annotations

from enum import IntEnum
from typing import Callable, Optional


class TimerState(IntEnum):
    """Phase the timer is in."""

    IDLE = 0
    WORK = 1
    SHORT_BREAK = 2
    LONG_BREAK = 3
    PAUSED = 4


StateCallback = Callable[["Timer", TimerState], None]
TickCallback = Callable[["Timer", int, int], None]
SessionCompleteCallback = Callable[["Timer", TimerState], None]

_BREAKS = (TimerState.SHORT_BREAK, TimerState.LONG_BREAK)
_STOPPED = (TimerState.IDLE, TimerState.PAUSED)


class Timer:
    """A countdown that cycles through work and break phases.

    The timer does not own a clock: the caller invokes :meth:`tick` once per
    second while :attr:`running` is true.
    """

    def __init__(self) -> None:
        self.work_duration = 25
        self.short_break_duration = 5
        self.long_break_duration = 15
        self.sessions_until_long = 4

        self.state = TimerState.IDLE
        self.previous_state = TimerState.IDLE
        self.session = 1
        self.running = False
        self.work_session_just_finished = False

        self.auto_start_work = True
        self.seconds_mode = False

        self._on_state: Optional[StateCallback] = None
        self._on_tick: Optional[TickCallback] = None
        self._on_session_complete: Optional[SessionCompleteCallback] = None

        self.remaining_seconds = self._duration_for(TimerState.WORK)
        self.total_duration = self.remaining_seconds

    def set_durations(
        self, work: int, short_break: int, long_break: int, sessions_until_long: int
    ) -> None:
        """Set phase lengths (minutes, or seconds in seconds mode)."""
        if sessions_until_long < 1:
            raise ValueError("sessions_until_long must be at least 1")
        self.work_duration = work
        self.short_break_duration = short_break
        self.long_break_duration = long_break
        self.sessions_until_long = sessions_until_long

    def set_callbacks(
        self,
        on_state: Optional[StateCallback],
        on_tick: Optional[TickCallback],
        on_session_complete: Optional[SessionCompleteCallback],
    ) -> None:
        """Register the listeners notified on state changes, ticks and completions."""
        self._on_state = on_state
        self._on_tick = on_tick
        self._on_session_complete = on_session_complete

    def start(self) -> None:
        """Start a work session from idle, or resume from pause."""
        if self.state is TimerState.IDLE:
            self.work_session_just_finished = False
            self._set_state(TimerState.WORK)
        elif self.state is TimerState.PAUSED:
            self.state = self.previous_state
            self._notify_state(self.state)
        self.running = True

    def pause(self) -> None:
        """Stop counting and remember the phase that was active."""
        self.running = False
        if self.state not in _STOPPED:
            self.previous_state = self.state
            self.state = TimerState.PAUSED
            self._notify_state(TimerState.PAUSED)

    def reset(self) -> None:
        """Return to idle at session one."""
        self.running = False
        self.session = 1
        self.previous_state = TimerState.IDLE
        self.work_session_just_finished = False
        self._set_state(TimerState.IDLE)

    def remaining(self) -> tuple[int, int]:
        """Remaining time as ``(minutes, seconds)``."""
        return divmod(self.remaining_seconds, 60)

    def tick(self) -> None:
        """Advance one second; moves to the next phase once time has run out."""
        if not self.running:
            return
        if self.remaining_seconds > 0:
            self.remaining_seconds -= 1
            self._notify_tick()
        else:
            self.running = False
            self._advance()

    def extend_break(self, additional_seconds: int) -> None:
        """Lengthen the current break; ignored outside breaks."""
        if self.state not in _BREAKS:
            return
        self.remaining_seconds += additional_seconds
        self.total_duration += additional_seconds
        self._notify_tick()

    def skip_phase(self) -> None:
        """End the current work or break phase and start the next one."""
        self.running = False
        if self.state is TimerState.WORK:
            self._advance()
        elif self.state in _BREAKS:
            self.work_session_just_finished = False
            self._set_state(TimerState.WORK)
            if self.state not in _STOPPED:
                self.running = True

    def _advance(self) -> None:
        auto_start = False
        if self.state is TimerState.WORK:
            self.session += 1
            self.work_session_just_finished = True
            if self._on_session_complete:
                self._on_session_complete(self, TimerState.WORK)
            if (self.session - 1) % self.sessions_until_long == 0:
                next_state = TimerState.LONG_BREAK
            else:
                next_state = TimerState.SHORT_BREAK
            self._set_state(next_state)
            auto_start = True
        elif self.state in _BREAKS:
            self.work_session_just_finished = False
            if self._on_session_complete:
                self._on_session_complete(self, self.state)
            self._set_state(TimerState.IDLE)

        if auto_start and self.state not in _STOPPED:
            self.running = True

    def _set_state(self, new_state: TimerState) -> None:
        self.state = new_state
        target = TimerState.WORK if new_state is TimerState.IDLE else new_state
        self.remaining_seconds = self._duration_for(target)
        self.total_duration = self.remaining_seconds
        self._notify_state(new_state)
        self._notify_tick()

    def _duration_for(self, state: TimerState) -> int:
        if state is TimerState.SHORT_BREAK:
            duration = self.short_break_duration
        elif state is TimerState.LONG_BREAK:
            duration = self.long_break_duration
        else:
            duration = self.work_duration
        return duration if self.seconds_mode else duration * 60

    def _notify_state(self, state: TimerState) -> None:
        if self._on_state:
            self._on_state(self, state)

    def _notify_tick(self) -> None:
        if self._on_tick:
            minutes, seconds = self.remaining()
            self._on_tick(self, minutes, seconds)