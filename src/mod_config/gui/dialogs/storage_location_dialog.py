"""
Dialog choosing where the mod settings file is kept.
"""

from pathlib import Path
from typing import Optional

from PySide6.QtWidgets import (
    QDialogButtonBox,
    QFileDialog,
    QFormLayout,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from ...config import STORE_FILE_NAME, AppSettings
from ...config.paths import PathSettings
from ...resources.style_manager import apply_style_class
from .base_dialog import BaseDialog


class StorageLocationDialog(BaseDialog):
    """Picks the data directory holding ModConfig.data and its backup."""

    def __init__(self, settings: AppSettings, parent: Optional[QWidget] = None):
        super().__init__(parent, title="Options")
        self.settings = settings

        self._setup_ui()
        self.set_directory(settings.data_dir)

    def _setup_ui(self) -> None:
        main_vbox = QVBoxLayout(self)
        form = QFormLayout()

        dir_layout = QHBoxLayout()
        self.data_dir_field = QLineEdit()
        self.data_dir_field.setReadOnly(True)
        dir_layout.addWidget(self.data_dir_field)

        browse_button = QPushButton("Browse...")
        browse_button.clicked.connect(self._browse)
        dir_layout.addWidget(browse_button)

        default_button = QPushButton("Default")
        default_button.setToolTip(str(PathSettings.default_data_dir()))
        default_button.clicked.connect(lambda: self.set_directory(PathSettings.default_data_dir()))
        dir_layout.addWidget(default_button)
        form.addRow("Data directory:", dir_layout)

        self.store_label = QLabel()
        form.addRow("Settings file:", self.store_label)
        self.backup_label = QLabel()
        form.addRow("Backup file:", self.backup_label)
        main_vbox.addLayout(form)

        note = QLabel("Existing settings are not moved. The new location is used after restart.")
        note.setWordWrap(True)
        apply_style_class(note, "info")
        main_vbox.addWidget(note)

        button_box = QDialogButtonBox(
            QDialogButtonBox.StandardButton.Ok | QDialogButtonBox.StandardButton.Cancel
        )
        button_box.accepted.connect(self._save_and_accept)
        button_box.rejected.connect(self.reject)
        main_vbox.addWidget(button_box)

    @property
    def directory(self) -> Path:
        return Path(self.data_dir_field.text())

    def set_directory(self, directory: Path) -> None:
        self.data_dir_field.setText(str(directory))
        store_path = directory / STORE_FILE_NAME
        self.store_label.setText(str(store_path))
        self.backup_label.setText(str(store_path.with_name(store_path.name + ".bak")))

    def _browse(self) -> None:
        chosen = QFileDialog.getExistingDirectory(self, "Select Data Directory", str(self.directory))
        if chosen:
            self.set_directory(Path(chosen))

    def _save_and_accept(self) -> None:
        """Store the chosen directory; the default is stored as unset."""
        directory = self.directory
        self.settings.data_dir = None if directory == PathSettings.default_data_dir() else directory
        self.logger.info(f"Mod settings location set to {self.settings.store_path}")
        self.accept()
