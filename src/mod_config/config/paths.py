"""
Path-related settings for mod-config.
"""

from pathlib import Path
from typing import Optional, TYPE_CHECKING

from PySide6.QtCore import QStandardPaths

if TYPE_CHECKING:
    from PySide6.QtCore import QSettings

# Name of the persisted override blob inside the data directory
STORE_FILE_NAME = "ModConfig.data"


class PathSettings:
    """Manages path-related settings."""

    def __init__(self, settings: "QSettings"):
        self.settings = settings

    def _get_str(self, key: str, default: str = "") -> str:
        """Type-safe string retrieval from settings."""
        value = self.settings.value(key, default)
        return str(value) if value is not None else default

    @staticmethod
    def default_data_dir() -> Path:
        """Platform application data directory."""
        location = QStandardPaths.writableLocation(
            QStandardPaths.StandardLocation.AppDataLocation
        )
        return Path(location) if location else Path.home() / ".mod_config"

    @property
    def data_dir(self) -> Path:
        """Get directory holding the persisted mod settings."""
        path_str = self._get_str("paths/data_dir", "")
        return Path(path_str) if path_str else self.default_data_dir()

    @data_dir.setter
    def data_dir(self, value: Optional[Path]) -> None:
        """Set directory holding the persisted mod settings (None resets to default)."""
        self.settings.setValue("paths/data_dir", str(value) if value else "")
        self.settings.sync()

    @property
    def store_path(self) -> Path:
        """Get path of the mod settings file (derived from data_dir)."""
        return self.data_dir / STORE_FILE_NAME

    @property
    def backup_path(self) -> Path:
        """Get path of the previous-generation backup (derived from store_path)."""
        store_path = self.store_path
        return store_path.with_name(store_path.name + ".bak")
