"""Detection of renewed user activity from the system idle time."""

from __future__ import annotations

import logging
from typing import Callable, Optional

logger = logging.getLogger(__name__)

POLL_INTERVAL_MS = 500

IdleTimeSource = Callable[[], Optional[int]]
ActivityCallback = Callable[[], object]


class InputMonitor:
    """Watches the idle time and reports when the user becomes active again.

    The owner calls :meth:`poll` every :data:`POLL_INTERVAL_MS` milliseconds
    while :attr:`active` is true. Activity is a drop of more than one second
    in the idle time; it stops the monitor and invokes the callback once.
    """

    def __init__(
        self,
        idle_time_source: Optional[IdleTimeSource] = None,
        callback: Optional[ActivityCallback] = None,
    ) -> None:
        self.idle_time_source = idle_time_source
        self.callback = callback
        self.active = False
        self.last_idle_time: Optional[int] = None

    def start(self) -> None:
        """Begin watching; does nothing if already watching."""
        if self.active:
            logger.info("Input monitor: already active, not starting again")
            return
        logger.info(
            "Input monitor: starting idle monitoring (checking every %dms)",
            POLL_INTERVAL_MS,
        )
        self.active = True
        self.last_idle_time = self.idle_time()

    def stop(self) -> None:
        """Stop watching."""
        if not self.active:
            return
        logger.info("Input monitor: stopping monitoring")
        self.active = False

    def idle_time(self) -> Optional[int]:
        """Seconds since the last user input, or ``None`` if unknown."""
        if self.idle_time_source is None:
            logger.warning("No idle time source available for idle time detection")
            return None
        try:
            value = self.idle_time_source()
        except OSError as exc:
            logger.warning("Failed to query idle time: %s", exc)
            return None
        if value is None or value < 0:
            return None
        return int(value)

    def poll(self) -> bool:
        """Check once for activity; returns whether activity was detected."""
        if not self.active:
            return False
        current = self.idle_time()
        if current is None:
            return False
        last = self.last_idle_time
        if last is not None and current < last - 1:
            logger.info(
                "Input monitor: activity detected! (idle time: %d -> %d)",
                last,
                current,
            )
            self.active = False
            if self.callback is not None:
                self.callback()
            return True
        self.last_idle_time = current
        return False