"""
Logging-related settings for mod-config.
"""

import logging
from dataclasses import dataclass, fields
from typing import TYPE_CHECKING, Any, Dict

if TYPE_CHECKING:
    from PySide6.QtCore import QSettings

logger = logging.getLogger(__name__)

LOG_FILE_PATH = "logs/mod_config.csv"
VALID_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class LogConfig:
    """Values read by setup_logging. Field names double as QSettings keys."""
    console_enabled: bool = True
    console_level: str = "INFO"
    console_use_colors: bool = True
    file_enabled: bool = False
    file_path: str = LOG_FILE_PATH


def _to_bool(value: Any, default: bool) -> bool:
    # INI-backed QSettings hands booleans back as strings
    if isinstance(value, str):
        return value.lower() in ("true", "1", "yes")
    return default if value is None else bool(value)


class LoggingSettings:
    """Reads and writes the ``logging/`` group as one LogConfig."""

    GROUP = "logging"

    def __init__(self, settings: "QSettings"):
        self.settings = settings

    def read(self) -> LogConfig:
        defaults = LogConfig()
        values: Dict[str, Any] = {}
        for f in fields(LogConfig):
            default = getattr(defaults, f.name)
            raw = self.settings.value(f"{self.GROUP}/{f.name}", default)
            values[f.name] = _to_bool(raw, default) if isinstance(default, bool) else str(raw)

        if values["console_level"].upper() not in VALID_LEVELS:
            logger.warning(f"Invalid stored console log level {values['console_level']!r}, using INFO")
            values["console_level"] = defaults.console_level
        return LogConfig(**values)

    def update(self, **changes: Any) -> LogConfig:
        """Store the given LogConfig fields and return the resulting config.

        An unknown level is logged and left unchanged; unknown fields raise
        TypeError.
        """
        known = {f.name for f in fields(LogConfig)}
        unknown = set(changes) - known
        if unknown:
            raise TypeError(f"Unknown logging settings: {sorted(unknown)}")

        level = changes.get("console_level")
        if level is not None:
            if str(level).upper() in VALID_LEVELS:
                changes["console_level"] = str(level).upper()
            else:
                logger.warning(f"Invalid console log level: {level}, keeping current")
                del changes["console_level"]

        for name, value in changes.items():
            self.settings.setValue(f"{self.GROUP}/{name}", value)
        self.settings.sync()
        return self.read()
