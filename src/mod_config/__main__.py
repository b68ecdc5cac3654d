"""
Main entry point for the mod-config demo host.
Usage: python -m mod_config
"""

import sys
import logging
from typing import Optional

from PySide6.QtWidgets import QApplication, QMessageBox

from . import __version__
from .config import AppSettings
from .demo import register_demo_options
from .gui.main_window import MainWindow
from .options import SettingsService
from .resources.style_manager import style_manager
from .utils.logging_config import setup_logging


def show_error_dialog(title: str, message: str, details: Optional[str] = None) -> None:
    """Show error dialog to user."""
    app = QApplication.instance()
    if not app:
        app = QApplication(sys.argv)

    msg_box = QMessageBox()
    msg_box.setIcon(QMessageBox.Icon.Critical)
    msg_box.setWindowTitle(title)
    msg_box.setText(message)

    if details:
        msg_box.setDetailedText(details)

    msg_box.exec()


def main() -> int:
    """Main application entry point."""
    logger = logging.getLogger(f"{__name__}.main")
    try:
        # Create Qt application first so QStandardPaths knows the app name
        app = QApplication(sys.argv)
        app.setApplicationName("mod_config")
        app.setApplicationVersion(__version__)
        app.setOrganizationName("mod_config")

        settings = AppSettings()
        setup_logging(settings)

        logger.info("Starting mod-config")
        logger.info(f"Configuration loaded from {settings.get_settings_file_path()}")

        # Mods register first, persisted values are loaded once afterwards
        service = SettingsService(settings.store_path)
        register_demo_options(service)
        service.load()

        validation = settings.validate(service.registry)
        if validation.warnings:
            logger.warning("Configuration warnings detected:")
            for warning in validation.warnings:
                logger.warning(f"  {warning}")

        if not validation.is_valid:
            logger.error("Configuration validation failed:")
            for error in validation.errors:
                logger.error(f"  {error}")
            show_error_dialog(
                "Configuration Error",
                "Configuration validation failed. Please check your settings.",
                "\n".join(validation.errors),
            )
            return 1

        app.setStyle("Fusion")
        style_manager.apply_app_style(app, "main")

        main_window = MainWindow(settings, service)
        main_window.show()

        logger.info("Application started successfully")
        return app.exec()

    except Exception as e:
        logger.exception("Unhandled exception in main")
        show_error_dialog("Application Error", "An unexpected error occurred.", str(e))
        return 1


if __name__ == "__main__":
    sys.exit(main())
