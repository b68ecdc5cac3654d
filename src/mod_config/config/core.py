"""
Application configuration for mod-config.
"""

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any, Optional, Union

from PySide6.QtCore import QSettings
from PySide6.QtWidgets import QWidget, QMainWindow

from ..options.types import ValidationResult
from .validation import SettingsValidator
from .paths import PathSettings
from .ui import UISettings
from .logging import LogConfig, LoggingSettings

if TYPE_CHECKING:
    from ..options.registry import OptionRegistry

logger = logging.getLogger(__name__)


class AppSettings:
    """
    Host-side configuration stored with QSettings.

    Covers where the mod settings file lives, how logging is set up and
    window geometry. Mod option values themselves are not kept here; they
    belong to the settings store.
    """

    def __init__(self, profile: str = "default", settings: Optional[QSettings] = None):
        """Initialize settings with a profile.

        Args:
            profile: Settings profile name (default: "default")
            settings: QSettings to use instead of the per-user native store
        """
        self.settings = settings if settings is not None else QSettings("mod_config", "mod_config")
        self.profile = profile

        # Use profile as a group: mod_config/mod_config/default/...
        self.settings.beginGroup(profile)

        self._validator = SettingsValidator(self)
        self._paths = PathSettings(self.settings)
        self._ui = UISettings(self.settings)
        self._logging = LoggingSettings(self.settings)

        logger.debug(
            f"Settings initialized for profile '{profile}', stored at: {self.settings.fileName()}"
        )

    # === SUBSYSTEM ACCESS ===

    @property
    def paths(self) -> PathSettings:
        """Access path settings subsystem."""
        return self._paths

    @property
    def ui(self) -> UISettings:
        """Access UI settings subsystem."""
        return self._ui

    @property
    def logging(self) -> LoggingSettings:
        """Access logging settings subsystem."""
        return self._logging

    # === PATH SETTINGS (DELEGATED) ===

    @property
    def data_dir(self) -> Path:
        """Get directory holding the persisted mod settings."""
        return self._paths.data_dir

    @data_dir.setter
    def data_dir(self, value: Optional[Path]) -> None:
        """Set directory holding the persisted mod settings."""
        self._paths.data_dir = value

    @property
    def store_path(self) -> Path:
        """Get path of the mod settings file."""
        return self._paths.store_path

    # === UI SETTINGS (DELEGATED) ===

    def save_window_geometry(self, widget: Union[QWidget, QMainWindow]) -> None:
        """Save window geometry and state."""
        self._ui.save_window_geometry(widget)

    def restore_window_geometry(self, widget: Union[QWidget, QMainWindow]) -> bool:
        """Restore window geometry and state. Returns True if restored."""
        return self._ui.restore_window_geometry(widget)

    def save_dialog_geometry(self, widget: QWidget) -> None:
        """Save mod options dialog geometry."""
        self._ui.save_dialog_geometry(widget)

    def restore_dialog_geometry(self, widget: QWidget) -> bool:
        """Restore mod options dialog geometry. Returns True if restored."""
        return self._ui.restore_dialog_geometry(widget)

    # === LOGGING SETTINGS (DELEGATED) ===

    @property
    def log_config(self) -> LogConfig:
        """Current logging configuration."""
        return self._logging.read()

    def update_logging(self, **changes: Any) -> LogConfig:
        """Change logging settings; takes LogConfig field names."""
        return self._logging.update(**changes)

    # === VALIDATION ===

    def validate(self, registry: Optional["OptionRegistry"] = None) -> ValidationResult:
        """Validate current configuration, and registered options if given."""
        return self._validator.validate(registry)

    # === UTILITY METHODS ===

    def get_settings_file_path(self) -> str:
        """Get the file path where settings are stored."""
        return self.settings.fileName()

    def sync(self) -> None:
        """Force synchronization of settings to storage."""
        self.settings.sync()
