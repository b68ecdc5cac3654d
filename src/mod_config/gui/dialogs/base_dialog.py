"""
Base dialog class for mod-config dialogs.

Provides common functionality:
- Logger initialization
- Standard window flags (dialog, title, close button)
- Optional modal behavior
"""

import logging
from typing import Optional
from PySide6.QtWidgets import QDialog, QWidget
from PySide6.QtCore import Qt


class BaseDialog(QDialog):
    """Base class for application dialogs with common functionality."""

    def __init__(
        self,
        parent: Optional[QWidget] = None,
        title: str = "Dialog",
        modal: bool = True,
    ):
        """
        Initialize the base dialog.

        Args:
            parent: Parent widget
            title: Window title
            modal: Whether dialog is modal (blocks interaction with parent)
        """
        super().__init__(parent)

        # Initialize logger with class name
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

        self.setWindowTitle(title)

        self.setWindowFlags(
            Qt.WindowType.Dialog
            | Qt.WindowType.CustomizeWindowHint
            | Qt.WindowType.WindowTitleHint
            | Qt.WindowType.WindowCloseButtonHint
        )

        self.setModal(modal)

        self.logger.debug(f"{self.__class__.__name__} initialized")
