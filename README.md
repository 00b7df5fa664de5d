# commodoro

Building blocks for a Pomodoro timer. Work sessions alternate with short
breaks, and after a set number of sessions a long break follows. The package
holds the timer's state machine, its settings and their storage, synthesised
notification chimes, a watcher that notices when the user becomes active
again, and a renderer for a small round status icon that shows the time left.

## Installation

```
pip install .
```

Pillow is needed to draw the status icon.

## The timer

`commodoro.timer.Timer` is a plain state machine. It has no clock of its own:
call `tick()` once a second while `timer.running` is true.

```python
from commodoro.timer import Timer, TimerState

timer = Timer()
timer.set_durations(25, 5, 15, 4)   # work, short break, long break, sessions until long
timer.start()
assert timer.state is TimerState.WORK
minutes, seconds = timer.remaining()
```

- `TimerState` has the phases `IDLE`, `WORK`, `SHORT_BREAK`, `LONG_BREAK`
  and `PAUSED`.
- Durations are minutes; set `timer.seconds_mode = True` to count them as
  seconds instead.
- `start()` starts a work session from idle or resumes after a pause;
  `pause()` remembers the active phase; `reset()` returns to idle at session
  one.
- When a work session runs out, the session count goes up and a short break
  starts, or a long break every `sessions_until_long` sessions. When a break
  runs out, the timer returns to idle.
- `extend_break(seconds)` lengthens the current break. `skip_phase()` ends
  a work session early (starting its break) or ends a break and starts work.
- `set_callbacks(on_state, on_tick, on_session_complete)` registers
  listeners for state changes, each second, and finished phases.

## Settings and their storage

`commodoro.settings.Settings` is a dataclass holding every option with its
default: 25/5/15 minutes, a long break after 4 sessions, auto-start after
breaks on, idle detection off with a 2-minute timeout, sounds on at volume
0.7. `copy()` returns an independent copy; `clamped()` returns a copy with
each value held to its allowed range.

`commodoro.config.Config` loads and saves settings. By default it uses
`config.json` in `$XDG_CONFIG_HOME/commodoro` (or `~/.config/commodoro`);
pass `config_dir` to use another directory, or `persistent=False` to keep
settings in memory only. `load_settings()` falls back to the defaults when
there is no readable file; `save_settings()` returns whether the file was
written. `parse_config()` and `format_config()` convert between settings and
the file's text.

## Chimes

`commodoro.audio.generate_chime(sound, volume)` renders one of the `Sound`
values (work start, break start, session complete, long break start, timer
finish, idle pause, idle resume) as 16-bit mono samples at 44.1 kHz, and
`to_wav_bytes(samples)` wraps them in a WAV file.

`AudioManager(player)` plays chimes on background threads by handing WAV
bytes to `player`, a callable you supply. Without a player it plays nothing.
`play(sound)` starts a sound, `wait()` blocks until the sounds started so far
have finished, and `volume` and `enabled` control output.

## Status icon

`commodoro.tray_icon.render_icon(state, remaining_seconds, total_seconds)`
returns a Pillow image: a disc coloured by state, a ring showing how much of
the phase has passed, and the minutes left (a dot when idle, `||` when
paused). `TrayIcon` keeps the latest image and a tooltip text.

## Activity detection

`commodoro.input_monitor.InputMonitor(idle_time_source, callback)` takes a
callable that returns the seconds since the last user input. Call `poll()`
every half second while it is `active`; when the idle time drops by more than
a second it stops and calls `callback` once.

## Remote command names

`commodoro.dbus.parse_command()` maps the command names `toggle_timer`,
`reset_timer`, `toggle_break` and `show_hide` to the method names
`ToggleTimer`, `ResetTimer`, `ToggleBreak` and `ShowHide`, and
`CommandResult` lists the outcomes of sending such a command.

## What this package does not do

It installs no command to run and opens no window, tray icon or break
screen: the icon is rendered to an image, not shown. It does not send or
answer remote-control commands; `commodoro.dbus` only names them. It has no
audio device output of its own and no way to read the system idle time;
both are supplied by the caller as callables. Nothing drives the timer once a
second for you.