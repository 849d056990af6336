"""Environment-driven settings and logging setup."""
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from threading import Lock
from typing import Dict


_ENV_LOADED = False
_ENV_LOCK = Lock()
_LOGGING_CONFIGURED = False

SETTING_KEYS = {"RSVP_NOTIFIER", "RSVP_LOG_LEVEL", "RSVP_SNAPSHOT_FILE", "RSVP_EVENT_TITLE"}


@dataclass(frozen=True)
class Settings:
    """Runtime settings for the registry and dashboard."""

    notifier: str = "logging"
    log_level: str = "INFO"
    snapshot_file: str = "data/rsvps.json"
    event_title: str = "Team Event"


def _read_env_file(env_path: Path) -> Dict[str, str]:
    """KEY=VALUE pairs from a .env file; comments and lines without '=' are ignored."""
    values: Dict[str, str] = {}
    if not env_path.is_file():
        return values

    for line in env_path.read_text(encoding="utf-8").splitlines():
        key, sep, value = line.strip().partition("=")
        if not sep or key.startswith("#"):
            continue
        values[key.strip()] = value.strip().strip('"\'')

    return values


def _load_env(env_path: Path = Path(".env")) -> None:
    """Copy RSVP_* values from .env into the environment, once per process."""
    global _ENV_LOADED

    with _ENV_LOCK:
        if _ENV_LOADED:
            return

        # Variables already set in the real environment take precedence
        for key, value in _read_env_file(env_path).items():
            if key in SETTING_KEYS:
                os.environ.setdefault(key, value)

        _ENV_LOADED = True


def get_settings() -> Settings:
    """
    Read settings from the environment.

    Returns:
        Settings populated from RSVP_* variables, with defaults for unset ones
    """
    _load_env()
    defaults = Settings()

    return Settings(
        notifier=os.getenv("RSVP_NOTIFIER", defaults.notifier),
        log_level=os.getenv("RSVP_LOG_LEVEL", defaults.log_level).upper(),
        snapshot_file=os.getenv("RSVP_SNAPSHOT_FILE", defaults.snapshot_file),
        event_title=os.getenv("RSVP_EVENT_TITLE", defaults.event_title),
    )


def configure_logging(settings: Settings) -> None:
    """Apply the configured log level once per process."""
    global _LOGGING_CONFIGURED

    if _LOGGING_CONFIGURED:
        return

    level = getattr(logging, settings.log_level, logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    _LOGGING_CONFIGURED = True
