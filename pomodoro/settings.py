"""Application settings loaded from JSON and the environment.

Settings are read from::

    <user config dir>/Pomodoro/settings.json

and can be overridden per run with ``POMODORO_QUOTE_URL``,
``POMODORO_DATE_URL`` and ``POMODORO_LOG_LEVEL``.

Usage::

    settings = load_settings()
    engine = TimerEngine(duration=settings.work_duration)
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, fields
from pathlib import Path

from platformdirs import user_config_dir

logger = logging.getLogger(__name__)

APP_NAME = "Pomodoro"
CONFIG_DIR = Path(user_config_dir(APP_NAME))
SETTINGS_PATH = CONFIG_DIR / "settings.json"

_ENV_OVERRIDES: dict[str, str] = {
    "POMODORO_QUOTE_URL": "quote_url",
    "POMODORO_DATE_URL": "date_url",
    "POMODORO_LOG_LEVEL": "log_level",
}


@dataclass
class Settings:
    """All user-configurable preferences."""

    # ── timer ─────────────────────────────────────────────────────────
    work_duration: int = 25 * 60           # seconds

    # ── content services ──────────────────────────────────────────────
    quote_url: str = "http://127.0.0.1:5000/api/quote"
    date_url: str = "http://localhost:8081/date"

    # ── window ────────────────────────────────────────────────────────
    window_width: int = 600
    window_height: int = 640

    # ── logging ───────────────────────────────────────────────────────
    log_level: str = "INFO"


def _drop_mistyped(values: dict) -> dict:
    """Keep only values whose type matches the field's default."""
    defaults = Settings()
    kept = {}
    for key, value in values.items():
        expected = type(getattr(defaults, key))
        # bool is an int subclass, but true/false is never a duration
        if isinstance(value, bool) or not isinstance(value, expected):
            logger.warning(
                "Ignoring setting %s=%r: expected %s", key, value, expected.__name__,
            )
            continue
        kept[key] = value
    return kept


def load_settings(path: Path | None = None) -> Settings:
    """Load settings from disk and the environment, falling back to defaults."""
    path = path or SETTINGS_PATH
    settings = Settings()
    if path.exists():
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
            # Only use keys that exist in the dataclass
            valid_keys = {f.name for f in fields(Settings)}
            filtered = {k: v for k, v in data.items() if k in valid_keys}
            settings = Settings(**_drop_mistyped(filtered))
        except (OSError, ValueError, AttributeError, TypeError) as e:
            logger.warning("Ignoring unreadable settings file %s: %s", path, e)

    for env_name, attr in _ENV_OVERRIDES.items():
        value = os.environ.get(env_name)
        if value:
            setattr(settings, attr, value)
    return settings
