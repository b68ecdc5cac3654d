"""
Demo host window for mod-config.
"""

import logging
from typing import Optional

from PySide6.QtGui import QAction, QCloseEvent, QKeySequence
from PySide6.QtWidgets import QListWidget, QMainWindow, QWidget

from ..config import AppSettings
from ..options import ChangeEvent, SettingsService
from .dialogs import StorageLocationDialog
from .menu import install_menu_entry
from .settings_view import SettingsViewController


class MainWindow(QMainWindow):
    """Host window with a Settings menu carrying the mod options entry."""

    action_exit: QAction
    action_options: QAction
    action_mod_options: QAction

    def __init__(
        self,
        settings: AppSettings,
        service: SettingsService,
        parent: Optional[QWidget] = None,
    ) -> None:
        super().__init__(parent)

        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

        self.setObjectName("main_window")
        self.settings = settings
        self.service = service
        self.settings_view = SettingsViewController(service, settings, self)

        # Changes made anywhere are listed in the central widget
        self.change_list = QListWidget(self)
        self.change_list.setObjectName("changeList")
        self.setCentralWidget(self.change_list)
        self._subscription_id = service.on_change(self._on_value_changed)

        self.setup_actions()
        self.setup_menus()
        self.setup_status_bar()

        # Restore window geometry from settings
        if not self.settings.restore_window_geometry(self):
            self.resize(800, 600)

        self.setWindowTitle("mod-config")
        self.logger.info("Main window initialized")

    def setup_actions(self) -> None:
        """Create actions for the menus."""
        self.action_exit = QAction("E&xit", self)
        self.action_exit.setShortcut(QKeySequence.StandardKey.Quit)
        self.action_exit.setStatusTip("Exit the application")
        self.action_exit.triggered.connect(self.close)

        self.action_options = QAction("&Options...", self)
        self.action_options.setObjectName("actionOptions")
        self.action_options.setStatusTip("Choose where mod settings are stored")
        self.action_options.triggered.connect(self.show_options)

    def setup_menus(self) -> None:
        """Setup the menu bar."""
        menubar = self.menuBar()

        file_menu = menubar.addMenu("&File")
        file_menu.addAction(self.action_exit)

        self.settings_menu = menubar.addMenu("&Settings")
        self.settings_menu.addAction(self.action_options)
        self.action_mod_options = install_menu_entry(self.settings_menu, self.open_mod_options)

        self.logger.debug("Menus created")

    def setup_status_bar(self) -> None:
        """Setup the status bar."""
        self.status_bar = self.statusBar()
        self.show_config_info()
        self.logger.debug("Status bar created")

    def show_config_info(self) -> None:
        """Show where mod settings are stored."""
        self.status_bar.showMessage(f"Mod settings: {self.service.store.path}")

    def show_options(self) -> None:
        dialog = StorageLocationDialog(self.settings, self)
        dialog.exec()

    def open_mod_options(self) -> None:
        self.settings_view.open()

    def _on_value_changed(self, event: ChangeEvent) -> None:
        self.change_list.addItem(
            f"{event.mod_id}/{event.option_id}: {event.old_value!r} -> {event.new_value!r}"
        )
        self.change_list.scrollToBottom()
        if self.service.last_save_error is not None:
            self.status_bar.showMessage(
                f"Failed to save mod settings: {self.service.last_save_error}", 10000
            )

    def closeEvent(self, event: QCloseEvent) -> None:
        """Handle window close event to save settings."""
        self.settings_view.close()
        self.service.unsubscribe(self._subscription_id)
        self.settings.save_window_geometry(self)
        self.logger.info("Window geometry saved")
        super().closeEvent(event)
