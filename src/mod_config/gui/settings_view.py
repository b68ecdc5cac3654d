"""
Opening and closing the mod options dialog from a host application.

A host owns one ``SettingsViewController`` per service. The module-level
``open_settings_view`` and ``close_settings_view`` wrap a shared controller
for hosts that only ever show one settings surface.
"""

import logging
from typing import TYPE_CHECKING, Optional

from PySide6.QtWidgets import QWidget

from .dialogs import ModOptionsDialog

if TYPE_CHECKING:
    from ..config import AppSettings
    from ..options.service import SettingsService


class SettingsViewController:
    """Keeps at most one mod options dialog open for a service."""

    def __init__(
        self,
        service: "SettingsService",
        app_settings: Optional["AppSettings"] = None,
        parent: Optional[QWidget] = None,
    ):
        self.service = service
        self.app_settings = app_settings
        self.parent = parent
        self.dialog: Optional[ModOptionsDialog] = None
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    @property
    def is_open(self) -> bool:
        return self.dialog is not None and self.dialog.isVisible()

    def open(self) -> ModOptionsDialog:
        """Show the dialog, or bring the open one to the front.

        A new dialog is built from the registry as it is now; an open one
        keeps the snapshot it was built with.
        """
        if self.dialog is not None and self.dialog.isVisible():
            self.dialog.raise_()
            self.dialog.activateWindow()
            return self.dialog

        dialog = ModOptionsDialog(self.service, self.app_settings, self.parent)
        dialog.finished.connect(lambda _result, d=dialog: self._on_finished(d))
        self.dialog = dialog
        dialog.show()
        self.logger.info(f"Mod options opened with {len(dialog.view.sections)} section(s)")
        return dialog

    def close(self) -> bool:
        """Close the dialog if it is open. Returns True if one was closed."""
        dialog = self.dialog
        if dialog is None or not dialog.isVisible():
            return False
        dialog.close()
        return True

    def _on_finished(self, dialog: ModOptionsDialog) -> None:
        if self.dialog is dialog:
            self.dialog = None
        dialog.deleteLater()
        self.logger.debug("Mod options closed")


_controller: Optional[SettingsViewController] = None


def open_settings_view(
    service: "SettingsService",
    parent: Optional[QWidget] = None,
    app_settings: Optional["AppSettings"] = None,
) -> ModOptionsDialog:
    """Open the mod options dialog for service, reusing an open one."""
    global _controller
    if _controller is None or _controller.service is not service:
        if _controller is not None:
            _controller.close()
        _controller = SettingsViewController(service, app_settings, parent)
    return _controller.open()


def close_settings_view() -> bool:
    """Close the dialog opened by open_settings_view, if any."""
    if _controller is None:
        return False
    return _controller.close()
