"""Loading and saving settings as a small JSON-style file."""

from __future__ import annotations

import dataclasses
import logging
import os
import re
from pathlib import Path
from typing import Optional, Union

from commodoro.settings import Settings

logger = logging.getLogger(__name__)

APP_DIR_NAME = "commodoro"
CONFIG_FILE_NAME = "config.json"

_INT_RE = re.compile(r"\s*([+-]?\d+)")
_FLOAT_RE = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")

_INT_KEYS = (
    "work_duration",
    "short_break_duration",
    "long_break_duration",
    "sessions_until_long_break",
)
_BOOL_KEYS = ("auto_start_work_after_break", "enable_sounds")
_SOUND_PATH_KEYS = (
    "work_start_sound",
    "break_start_sound",
    "session_complete_sound",
    "timer_finish_sound",
)


def default_config_dir() -> Path:
    """The per-user directory the settings file lives in."""
    base = os.environ.get("XDG_CONFIG_HOME")
    root = Path(base) if base else Path.home() / ".config"
    return root / APP_DIR_NAME


def _leading_int(text: str) -> int:
    match = _INT_RE.match(text)
    return int(match.group(1)) if match else 0


def _leading_float(text: str) -> float:
    match = _FLOAT_RE.match(text)
    return float(match.group(1)) if match else 0.0


def _trim(text: str, leading: str, trailing: str) -> str:
    text = text.lstrip(leading)
    if not text:
        return text
    # The first remaining character is never removed by the trailing trim.
    return text[0] + text[1:].rstrip(trailing)


def parse_config(text: str) -> Settings:
    """Read settings from a config file's text, one ``"key": value`` per line.

    Unknown keys, comments and malformed lines are ignored; keys that are not
    present keep their default values.
    """
    updates: dict[str, object] = {}
    for raw in text.split("\n"):
        line = raw.lstrip(" \t")
        if not line or line[0] in "{}/#":
            continue
        key, sep, value = line.partition(":")
        if not sep:
            continue
        key = _trim(key, ' \t"', ' \t",')
        value = _trim(value, ' \t"', ' \t",\r')

        if key in _INT_KEYS:
            updates[key] = _leading_int(value)
        elif key in _BOOL_KEYS:
            updates[key] = value == "true"
        elif key == "sound_volume":
            updates[key] = _leading_float(value)
        elif key == "sound_type":
            updates[key] = value
    return dataclasses.replace(Settings(), **updates)


def escape_json_string(text: Optional[str]) -> str:
    """Escape quotes and backslashes; ``None`` becomes an empty string."""
    if text is None:
        return ""
    return text.replace("\\", "\\\\").replace('"', '\\"')


def format_config(settings: Settings) -> str:
    """Render settings as the text of a config file."""
    lines = [
        "{",
        f'  "work_duration": {settings.work_duration},',
        f'  "short_break_duration": {settings.short_break_duration},',
        f'  "long_break_duration": {settings.long_break_duration},',
        f'  "sessions_until_long_break": {settings.sessions_until_long_break},',
        '  "auto_start_work_after_break": '
        f'{"true" if settings.auto_start_work_after_break else "false"},',
        f'  "enable_sounds": {"true" if settings.enable_sounds else "false"},',
    ]
    body = "\n".join(lines) + f'\n  "sound_volume": {settings.sound_volume:.2f}'

    optional = [("sound_type", settings.sound_type)]
    optional += [(key, getattr(settings, key)) for key in _SOUND_PATH_KEYS]
    for key, value in optional:
        if value is not None:
            body += f',\n  "{key}": "{escape_json_string(value)}"'
    return body + "\n}\n"


def _ensure_directory(directory: Optional[Path]) -> bool:
    if directory is None:
        return False
    if directory.is_dir():
        return True
    try:
        directory.mkdir(mode=0o755, parents=True, exist_ok=True)
    except OSError:
        return False
    return True


class Config:
    """Settings storage, either on disk or held in memory only."""

    def __init__(
        self,
        persistent: bool = True,
        config_dir: Union[str, os.PathLike, None] = None,
    ) -> None:
        self.persistent = persistent
        if persistent:
            self.config_dir: Optional[Path] = (
                Path(config_dir) if config_dir is not None else default_config_dir()
            )
            self.config_file: Optional[Path] = self.config_dir / CONFIG_FILE_NAME
        else:
            self.config_dir = None
            self.config_file = None

    def load_settings(self) -> Settings:
        """Settings from disk, or the defaults when none can be read."""
        if not self.persistent:
            logger.info("Using in-memory config (test mode)")
            return Settings()
        if not _ensure_directory(self.config_dir):
            logger.warning("Failed to create config directory: %s", self.config_dir)
            return Settings()
        if not self.config_file.exists():
            logger.info("Config file not found, using defaults: %s", self.config_file)
            return Settings()
        try:
            text = self.config_file.read_text(encoding="utf-8", errors="replace")
        except OSError as exc:
            logger.warning("Failed to read config file: %s", exc)
            logger.warning(
                "Failed to parse config file, using defaults: %s", self.config_file
            )
            return Settings()
        settings = parse_config(text)
        logger.info("Loaded settings from: %s", self.config_file)
        return settings

    def save_settings(self, settings: Settings) -> bool:
        """Write settings to disk; returns whether they were stored.

        In-memory storage accepts the settings without writing anything.
        """
        if not self.persistent:
            logger.info("In-memory config: settings not saved to disk")
            return True
        if not _ensure_directory(self.config_dir):
            logger.warning("Failed to create config directory: %s", self.config_dir)
            return False
        try:
            with open(self.config_file, "w", encoding="utf-8", newline="\n") as handle:
                handle.write(format_config(settings))
        except OSError:
            logger.warning("Failed to write config file: %s", self.config_file)
            return False
        logger.info("Saved settings to: %s", self.config_file)
        return True