"""
Option registry, persistent override store and the settings API.

Usage:
    from mod_config.options import SettingsService, EventKind

    service = SettingsService("ModConfig.data")
    service.register_mod("my_mod", "My Mod")
    service.register_option("my_mod", "enabled", type="boolean", default=True)
    service.load()
    service.set("my_mod", "enabled", False)
"""

from .types import (
    ABSENT,
    ChangeEvent,
    ConfigError,
    EnumChoice,
    ModEntry,
    OptionSpec,
    OptionType,
    StorageUnavailable,
    ValidationResult,
)
from .notifier import ChangeNotifier, EventKind
from .registry import OptionRegistry
from .storage import FileStorage, LocalFileStorage
from .store import SettingsStore
from .service import SettingsService

__all__ = [
    "ABSENT",
    "ChangeEvent",
    "ConfigError",
    "EnumChoice",
    "ModEntry",
    "OptionSpec",
    "OptionType",
    "StorageUnavailable",
    "ValidationResult",
    "ChangeNotifier",
    "EventKind",
    "OptionRegistry",
    "FileStorage",
    "LocalFileStorage",
    "SettingsStore",
    "SettingsService",
]
