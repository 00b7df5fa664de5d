"""Rendering of the round status icon shown in the system tray."""

from __future__ import annotations

import math
from typing import Optional

from PIL import Image, ImageDraw, ImageFont

from commodoro.timer import TimerState

DEFAULT_SIZE = 64
DEFAULT_TOOLTIP = "Commodoro Timer"
WHITE = (255, 255, 255, 255)


def _rgba(r: float, g: float, b: float) -> tuple[int, int, int, int]:
    return (int(r * 255 + 0.5), int(g * 255 + 0.5), int(b * 255 + 0.5), 255)


RED = _rgba(0.86, 0.20, 0.18)
GREEN = _rgba(0.18, 0.49, 0.20)

STATE_COLORS = {
    TimerState.IDLE: _rgba(0.5, 0.5, 0.5),
    TimerState.WORK: RED,
    TimerState.SHORT_BREAK: GREEN,
    TimerState.LONG_BREAK: GREEN,
    TimerState.PAUSED: _rgba(0.71, 0.54, 0.0),
}

_FONT_NAMES = ("DejaVuSans-Bold.ttf", "DejaVuSans.ttf", "Arial Bold.ttf", "arialbd.ttf")


def rounded_minutes(remaining_seconds: int) -> int:
    """Whole minutes left, rounding up from thirty seconds."""
    minutes, seconds = divmod(remaining_seconds, 60)
    return minutes + 1 if seconds >= 30 else minutes


def progress(remaining_seconds: int, total_seconds: int) -> float:
    """Fraction of the phase already elapsed, from 0.0 to 1.0."""
    if total_seconds <= 0:
        return 0.0
    return (total_seconds - remaining_seconds) / total_seconds


def icon_text(state: TimerState, remaining_seconds: int) -> str:
    """The label drawn in the middle of the icon."""
    if state is TimerState.IDLE:
        return "●"
    if state is TimerState.PAUSED:
        return "||"
    return str(rounded_minutes(remaining_seconds))


def _load_font(size: int):
    for name in _FONT_NAMES:
        try:
            return ImageFont.truetype(name, size)
        except OSError:
            continue
    try:
        return ImageFont.load_default(size=size)
    except TypeError:
        return ImageFont.load_default()


def render_icon(
    state: TimerState,
    remaining_seconds: int,
    total_seconds: int,
    size: int = DEFAULT_SIZE,
) -> Image.Image:
    """Draw the icon: a state-coloured disc, a progress ring and a label."""
    image = Image.new("RGBA", (size, size), (0, 0, 0, 0))
    draw = ImageDraw.Draw(image)
    center = size / 2.0
    radius = (size - 4) / 2.0

    draw.ellipse(
        (center - radius, center - radius, center + radius, center + radius),
        fill=STATE_COLORS[state],
    )

    if state not in (TimerState.IDLE, TimerState.PAUSED) and total_seconds > 0:
        elapsed = progress(remaining_seconds, total_seconds)
        if elapsed > 0.0:
            line_width = size * 0.15
            margin = size * 0.1
            arc_radius = (size - 2 * margin) / 2.0
            outer = arc_radius + line_width / 2.0
            colour = GREEN if state is TimerState.WORK else RED
            draw.arc(
                (center - outer, center - outer, center + outer, center + outer),
                start=-90.0,
                end=-90.0 + elapsed * 360.0,
                fill=colour,
                width=max(1, round(line_width)),
            )

    text = icon_text(state, remaining_seconds)
    font = _load_font(max(1, round(size * 0.4)))
    try:
        left, top, right, bottom = draw.textbbox((0, 0), text, font=font)
        x = center - ((right - left) / 2.0 + left)
        y = center - ((bottom - top) / 2.0 + top)
        draw.text((x, y), text, font=font, fill=WHITE)
    except UnicodeError:
        # The fallback bitmap font has no glyph for the dot.
        dot = size * 0.12
        draw.ellipse((center - dot, center - dot, center + dot, center + dot), fill=WHITE)
    return image


class TrayIcon:
    """Keeps the rendered icon and tooltip in step with the timer."""

    def __init__(self, size: int = DEFAULT_SIZE) -> None:
        self.size = size
        self.state = TimerState.IDLE
        self.remaining_seconds = 0
        self.total_seconds = 0
        self.tooltip = DEFAULT_TOOLTIP
        self.embedded = False
        self.image: Optional[Image.Image] = None
        self._render()

    def update(
        self, state: TimerState, remaining_seconds: int, total_seconds: int
    ) -> Image.Image:
        """Redraw the icon for a new timer state and time; returns the image."""
        self.state = state
        self.remaining_seconds = remaining_seconds
        self.total_seconds = total_seconds
        return self._render()

    def _render(self) -> Image.Image:
        self.image = render_icon(
            self.state, self.remaining_seconds, self.total_seconds, self.size
        )
        return self.image