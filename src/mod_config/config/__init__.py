"""
Application configuration package for mod-config.

Host-side settings (data location, logging, window geometry) kept in Qt's
QSettings for cross-platform storage.

Usage:
    from mod_config.config import AppSettings

    settings = AppSettings()
    result = settings.validate()
"""

from .core import AppSettings
from .paths import PathSettings, STORE_FILE_NAME
from .ui import UISettings
from .logging import LogConfig, LoggingSettings
from .validation import SettingsValidator

__all__ = [
    "AppSettings",
    "PathSettings",
    "STORE_FILE_NAME",
    "UISettings",
    "LogConfig",
    "LoggingSettings",
    "SettingsValidator",
]
