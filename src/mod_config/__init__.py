"""
mod-config: settings registry, persistence and auto-generated options dialog
for mods of a host application.
"""

__version__ = "0.1.0"
__author__ = "mod-config Contributors"

from .options import (
    ABSENT,
    ChangeEvent,
    ConfigError,
    EventKind,
    OptionRegistry,
    OptionSpec,
    OptionType,
    SettingsService,
    SettingsStore,
    StorageUnavailable,
)
from .utils.logging_config import setup_logging

__all__ = [
    # Settings API
    'SettingsService',
    'OptionRegistry',
    'SettingsStore',
    'EventKind',

    # Types
    'ABSENT',
    'ChangeEvent',
    'OptionSpec',
    'OptionType',

    # Errors
    'ConfigError',
    'StorageUnavailable',

    # Logging
    'setup_logging',
]
