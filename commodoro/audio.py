"""Synthesised notification chimes and their asynchronous playback."""

from __future__ import annotations

import io
import logging
import math
import sys
import threading
import wave
from array import array
from enum import Enum
from typing import Callable, Iterable, Optional, Union

logger = logging.getLogger(__name__)

SAMPLE_RATE = 44100
CHANNELS = 1
DURATION_MS = 500
ATTACK_MS = 10
DECAY_MS = 50
RELEASE_MS = 200
SUSTAIN_LEVEL = 0.3
HEADROOM = 0.3
MAX_AMPLITUDE = 32767
DEFAULT_VOLUME = 0.7


class Sound(str, Enum):
    """The notification sounds the timer can play."""

    WORK_START = "work_start"
    BREAK_START = "break_start"
    SESSION_COMPLETE = "session_complete"
    LONG_BREAK_START = "long_break_start"
    TIMER_FINISH = "timer_finish"
    IDLE_PAUSE = "idle_pause"
    IDLE_RESUME = "idle_resume"


# (frequency, amplitude) partials for each sound.
_PARTIALS: dict[str, tuple[tuple[float, float], ...]] = {
    # Major chord C4-E4-G4
    Sound.WORK_START.value: ((261.63, 1.0), (329.63, 0.8), (392.00, 0.6)),
    # Minor chord A3-C4-E4
    Sound.BREAK_START.value: ((220.00, 1.0), (261.63, 0.8), (329.63, 0.6)),
    # Perfect fifth C4-G4-C5
    Sound.SESSION_COMPLETE.value: ((261.63, 1.0), (392.00, 0.8), (523.25, 0.5)),
    # Same notes as a break with a heavier mix
    Sound.LONG_BREAK_START.value: ((220.00, 1.2), (261.63, 1.0), (329.63, 0.8)),
    # Octave A4-A5
    Sound.TIMER_FINISH.value: ((440.00, 1.0), (880.00, 0.5)),
    # Descending F4-D4
    Sound.IDLE_PAUSE.value: ((349.23, 0.8), (293.66, 0.6)),
    # Ascending D4-F4
    Sound.IDLE_RESUME.value: ((293.66, 0.6), (349.23, 0.8)),
}
_DEFAULT_PARTIALS = ((440.0, 1.0),)

Player = Callable[[bytes], None]


def _envelope(i: int, total: int, attack: int, decay: int, release: int) -> float:
    if i < attack:
        return i / attack
    if i < attack + decay:
        progress = (i - attack) / decay
        return 1.0 - progress * (1.0 - SUSTAIN_LEVEL)
    if i < total - release:
        return SUSTAIN_LEVEL
    progress = (i - (total - release)) / release
    return SUSTAIN_LEVEL * (1.0 - progress)


def generate_chime(sound: Union[Sound, str], volume: float) -> list[int]:
    """Render a sound as signed 16-bit mono samples at :data:`SAMPLE_RATE`.

    Unknown sound names produce a plain A4 tone.
    """
    key = sound.value if isinstance(sound, Sound) else str(sound)
    partials = _PARTIALS.get(key, _DEFAULT_PARTIALS)

    total = SAMPLE_RATE * DURATION_MS // 1000
    attack = SAMPLE_RATE * ATTACK_MS // 1000
    decay = SAMPLE_RATE * DECAY_MS // 1000
    release = SAMPLE_RATE * RELEASE_MS // 1000
    total_amp = sum(amp for _, amp in partials)

    samples = []
    for i in range(total):
        t = i / SAMPLE_RATE
        value = sum(amp * math.sin(2.0 * math.pi * freq * t) for freq, amp in partials)
        value = (value / total_amp) * _envelope(i, total, attack, decay, release)
        value *= volume * HEADROOM
        samples.append(int(value * MAX_AMPLITUDE))
    return samples


def to_wav_bytes(samples: Iterable[int]) -> bytes:
    """Wrap 16-bit mono samples in a WAV container."""
    data = array("h", samples)
    if sys.byteorder == "big":
        data.byteswap()
    buffer = io.BytesIO()
    with wave.open(buffer, "wb") as wav:
        wav.setnchannels(CHANNELS)
        wav.setsampwidth(2)
        wav.setframerate(SAMPLE_RATE)
        wav.writeframes(data.tobytes())
    return buffer.getvalue()


class AudioManager:
    """Plays chimes in the background through a player that accepts WAV bytes."""

    def __init__(self, player: Optional[Player] = None) -> None:
        self._player = player
        self._volume = DEFAULT_VOLUME
        self.enabled = True
        self._threads: list[threading.Thread] = []
        self._lock = threading.Lock()

    @property
    def volume(self) -> float:
        """Master volume between 0.0 and 1.0."""
        return self._volume

    @volume.setter
    def volume(self, value: float) -> None:
        value = max(0.0, min(1.0, value))
        logger.info("Setting audio volume to %.2f (%.0f%%)", value, value * 100)
        self._volume = value

    def play(self, sound: Union[Sound, str]) -> Optional[threading.Thread]:
        """Start playing a sound; returns the playback thread, if one was started."""
        if not self.enabled:
            return None
        samples = generate_chime(sound, self._volume)
        if self._player is None:
            logger.warning("Cannot open any audio device")
            return None
        thread = threading.Thread(
            target=self._run, args=(to_wav_bytes(samples),), daemon=True
        )
        with self._lock:
            self._threads = [t for t in self._threads if t.is_alive()]
            self._threads.append(thread)
        thread.start()
        return thread

    def wait(self) -> None:
        """Block until every sound started so far has finished playing."""
        with self._lock:
            threads, self._threads = self._threads, []
        for thread in threads:
            thread.join()

    def _run(self, wav: bytes) -> None:
        try:
            self._player(wav)
        except Exception as exc:  # playback failures must not reach the caller
            logger.warning("Write error: %s", exc)