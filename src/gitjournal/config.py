"""Configuration management for git-journal."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .core.entries import entry_path
from .errors import ConfigError

logger = logging.getLogger(__name__)

JOURNAL_DATA_PATH = Path(".local") / "share" / "journal"
CONFIG_PATH = Path(".config") / "journal" / "journal.conf"
DEFAULT_TIMEZONE = "UTC"


def home_dir(environ: dict | None = None) -> Path:
    """Resolve the user's home directory from the environment."""
    env = os.environ if environ is None else environ
    home = env.get("HOME", "")
    if not home:
        raise ConfigError("HOME is not set; cannot locate the journal directory")
    return Path(home)


def config_file(environ: dict | None = None) -> Path:
    """Location of the optional journal.conf settings file."""
    env = os.environ if environ is None else environ
    if env.get("JOURNAL_CONFIG"):
        return Path(env["JOURNAL_CONFIG"]).expanduser()
    return home_dir(env) / CONFIG_PATH


@dataclass
class Settings:
    """User settings from journal.conf."""

    editor: str = ""
    timezone: str = DEFAULT_TIMEZONE

    def zone(self) -> ZoneInfo:
        """Timezone used to decide which day it is."""
        try:
            return ZoneInfo(self.timezone)
        except (ZoneInfoNotFoundError, ValueError):
            logger.warning(f"Unknown TIMEZONE {self.timezone!r}, using {DEFAULT_TIMEZONE}")
            return ZoneInfo(DEFAULT_TIMEZONE)


@dataclass(frozen=True)
class RuntimeConfig:
    """Fully resolved configuration for a single invocation."""

    storage_path: Path
    remote_url: str
    date_key: str

    @property
    def entry_path(self) -> Path:
        """Today's entry file."""
        return entry_path(self.storage_path, self.date_key)


def _unquote(value: str) -> str:
    # Quoted values may be followed by an inline comment: "value" # comment
    if value[:1] in ('"', "'"):
        quote = value[0]
        end_quote = value.find(quote, 1)
        if end_quote != -1:
            return value[1:end_quote]
        return value[1:]
    if "#" in value:
        value = value.split("#")[0].strip()
    return value


def load_settings(path: Path | None = None) -> Settings:
    """Load settings from journal.conf. A missing file yields defaults."""
    settings = Settings()
    path = path if path is not None else config_file()

    if not path.exists():
        return settings

    for line in path.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        if "=" not in line:
            continue

        key, _, value = line.partition("=")
        key = key.strip().lower()
        value = _unquote(value.strip())

        match key:
            case "editor":
                settings.editor = value
            case "timezone":
                settings.timezone = value or DEFAULT_TIMEZONE
            case _:
                logger.debug(f"Ignoring unknown setting {key!r} in {path}")

    return settings
