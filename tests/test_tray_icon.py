import pytest

from commodoro.timer import TimerState
from commodoro.tray_icon import (
    DEFAULT_SIZE,
    DEFAULT_TOOLTIP,
    GREEN,
    RED,
    STATE_COLORS,
    TrayIcon,
    icon_text,
    progress,
    render_icon,
    rounded_minutes,
)


@pytest.mark.parametrize("minutes", [0, 1, 5, 25])
def test_rounded_minutes_rounds_down_below_half(minutes):
    assert rounded_minutes(minutes * 60 + 29) == minutes
    assert rounded_minutes(minutes * 60) == minutes


@pytest.mark.parametrize("minutes", [0, 1, 5, 25])
def test_rounded_minutes_rounds_up_from_half(minutes):
    assert rounded_minutes(minutes * 60 + 30) == minutes + 1


def test_progress_bounds():
    assert progress(300, 300) == 0.0
    assert progress(0, 300) == 1.0
    assert progress(150, 300) == 0.5


@pytest.mark.parametrize("total", [0, -5])
def test_progress_without_total_is_zero(total):
    assert progress(10, total) == 0.0


def test_icon_text_for_stopped_states():
    assert icon_text(TimerState.IDLE, 1500) == "●"
    assert icon_text(TimerState.PAUSED, 1500) == "||"


@pytest.mark.parametrize(
    "state", [TimerState.WORK, TimerState.SHORT_BREAK, TimerState.LONG_BREAK]
)
def test_icon_text_shows_rounded_minutes(state):
    assert icon_text(state, 1500) == str(rounded_minutes(1500))


@pytest.mark.parametrize("state", list(TimerState))
def test_render_size_and_transparent_corner(state):
    image = render_icon(state, 600, 1500, 48)
    assert image.size == (48, 48)
    assert image.mode == "RGBA"
    assert image.getpixel((0, 0))[3] == 0


@pytest.mark.parametrize("state", list(TimerState))
def test_disc_takes_state_colour(state):
    image = render_icon(state, 1500, 1500, DEFAULT_SIZE)
    # Near the top edge: inside the disc, clear of the label; no progress yet.
    assert image.getpixel((DEFAULT_SIZE // 2, 4)) == STATE_COLORS[state]


def test_work_progress_ring_is_green():
    image = render_icon(TimerState.WORK, 750, 1500, DEFAULT_SIZE)
    right = image.getpixel((DEFAULT_SIZE // 2 + 26, DEFAULT_SIZE // 2))
    left = image.getpixel((DEFAULT_SIZE // 2 - 26, DEFAULT_SIZE // 2))
    assert right == GREEN
    assert left == STATE_COLORS[TimerState.WORK]


def test_break_progress_ring_is_red():
    image = render_icon(TimerState.SHORT_BREAK, 150, 300, DEFAULT_SIZE)
    right = image.getpixel((DEFAULT_SIZE // 2 + 26, DEFAULT_SIZE // 2))
    left = image.getpixel((DEFAULT_SIZE // 2 - 26, DEFAULT_SIZE // 2))
    assert right == RED
    assert left == STATE_COLORS[TimerState.SHORT_BREAK]


def test_paused_has_no_ring():
    image = render_icon(TimerState.PAUSED, 150, 300, DEFAULT_SIZE)
    right = image.getpixel((DEFAULT_SIZE // 2 + 26, DEFAULT_SIZE // 2))
    assert right == STATE_COLORS[TimerState.PAUSED]


def test_label_is_drawn_in_white():
    image = render_icon(TimerState.PAUSED, 0, 0, DEFAULT_SIZE)
    assert (255, 255, 255, 255) in set(image.getdata())


def test_tray_icon_defaults():
    icon = TrayIcon()
    assert icon.state is TimerState.IDLE
    assert icon.tooltip == DEFAULT_TOOLTIP
    assert icon.embedded is False
    assert icon.image.size == (DEFAULT_SIZE, DEFAULT_SIZE)


def test_tray_icon_update_redraws():
    icon = TrayIcon(32)
    image = icon.update(TimerState.WORK, 100, 200)
    assert icon.image is image
    assert icon.state is TimerState.WORK
    assert (icon.remaining_seconds, icon.total_seconds) == (100, 200)
    assert image.size == (32, 32)
    assert list(image.getdata()) == list(render_icon(TimerState.WORK, 100, 200, 32).getdata())