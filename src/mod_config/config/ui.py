"""
UI-related settings for mod-config.
"""

from typing import Any, Optional, Union, TYPE_CHECKING

from PySide6.QtCore import QByteArray
from PySide6.QtWidgets import QWidget, QMainWindow

if TYPE_CHECKING:
    from PySide6.QtCore import QSettings


class UISettings:
    """Manages window geometry of the host window and the mod options dialog."""

    def __init__(self, settings: "QSettings"):
        self.settings = settings

    @staticmethod
    def _to_byte_array(value: Any) -> Optional[QByteArray]:
        if not value:
            return None
        if isinstance(value, QByteArray):
            return value
        try:
            return QByteArray(bytes(value))
        except (TypeError, ValueError):
            return None

    def save_window_geometry(self, widget: Union[QWidget, QMainWindow]) -> None:
        """Save host window geometry and state."""
        self.settings.setValue("ui/window_geometry", widget.saveGeometry())
        # Only QMainWindow has saveState
        if isinstance(widget, QMainWindow):
            self.settings.setValue("ui/window_state", widget.saveState())
        self.settings.sync()

    def restore_window_geometry(self, widget: Union[QWidget, QMainWindow]) -> bool:
        """Restore host window geometry and state. Returns True if restored."""
        restored = False

        geometry = self._to_byte_array(self.settings.value("ui/window_geometry"))
        if geometry is not None:
            restored = widget.restoreGeometry(geometry) or restored

        if isinstance(widget, QMainWindow):
            state = self._to_byte_array(self.settings.value("ui/window_state"))
            if state is not None:
                restored = widget.restoreState(state) or restored

        return restored

    def save_dialog_geometry(self, widget: QWidget) -> None:
        """Save mod options dialog geometry."""
        self.settings.setValue("ui/mod_options_geometry", widget.saveGeometry())
        self.settings.sync()

    def restore_dialog_geometry(self, widget: QWidget) -> bool:
        """Restore mod options dialog geometry. Returns True if restored."""
        geometry = self._to_byte_array(self.settings.value("ui/mod_options_geometry"))
        if geometry is None:
            return False
        return bool(widget.restoreGeometry(geometry))
