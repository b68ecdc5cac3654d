"""
Mod options dialog: the auto-generated settings view for all registered mods.
"""

from typing import TYPE_CHECKING, Dict, Optional, Tuple

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QDialogButtonBox,
    QGridLayout,
    QLabel,
    QScrollArea,
    QToolButton,
    QVBoxLayout,
    QWidget,
)

from ...options.types import ChangeEvent
from ...resources.style_manager import apply_style_class
from ..controls import ControlFactory, OptionWidget
from ..controls.widgets import themed_icon
from ..view_builder import ModSection, SettingsView, build_settings_view
from .base_dialog import BaseDialog

if TYPE_CHECKING:
    from ...config import AppSettings
    from ...options.service import SettingsService


class ModOptionsDialog(BaseDialog):
    """
    Dialog listing every mod's options with a control per option.

    Controls commit on each interaction, so there is only a Close button.
    The content is a snapshot of the registry taken when the dialog is built;
    options registered later show up the next time it is opened.
    """

    def __init__(
        self,
        service: "SettingsService",
        app_settings: Optional["AppSettings"] = None,
        parent: Optional[QWidget] = None,
    ):
        super().__init__(parent, title="Mod Options", modal=False)
        self.setObjectName("modOptionsDialog")
        self.service = service
        self.app_settings = app_settings
        self.factory = ControlFactory(service)
        self.controls: Dict[Tuple[str, str], OptionWidget] = {}

        self.view: SettingsView = build_settings_view(service.registry_snapshot(), service)

        self._setup_ui()
        self._subscription_id: Optional[int] = service.on_change(self._on_value_changed)

        restored = bool(app_settings and app_settings.restore_dialog_geometry(self))
        if not restored:
            self.resize(520, 600)

    def _setup_ui(self) -> None:
        """Setup the user interface."""
        main_vbox = QVBoxLayout(self)

        if self.view.intro:
            intro_label = QLabel(self.view.intro)
            intro_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
            intro_label.setWordWrap(True)
            apply_style_class(intro_label, "info")
            main_vbox.addWidget(intro_label)

        scroll = QScrollArea(self)
        scroll.setObjectName("modOptionsScroll")
        scroll.setWidgetResizable(True)
        scroll.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)

        content = QWidget(scroll)
        content_vbox = QVBoxLayout(content)

        if self.view.placeholder:
            placeholder_label = QLabel(self.view.placeholder)
            placeholder_label.setObjectName("placeholderLabel")
            placeholder_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
            placeholder_label.setWordWrap(True)
            apply_style_class(placeholder_label, "placeholder")
            content_vbox.addWidget(placeholder_label)

        for section in self.view.sections:
            self._add_section(content_vbox, section)

        content_vbox.addStretch()
        scroll.setWidget(content)
        main_vbox.addWidget(scroll, stretch=1)

        button_box = QDialogButtonBox(QDialogButtonBox.StandardButton.Close)
        button_box.rejected.connect(self.reject)
        main_vbox.addWidget(button_box)

    def _add_section(self, parent_layout: QVBoxLayout, section: ModSection) -> None:
        header = QLabel(section.name)
        header.setObjectName(f"section.{section.mod_id}")
        header.setAlignment(Qt.AlignmentFlag.AlignCenter)
        if section.description:
            header.setToolTip(f"<b>{section.name}</b><br>{section.description}")
        apply_style_class(header, "section")
        parent_layout.addWidget(header)

        grid = QGridLayout()
        grid.setColumnStretch(0, 1)
        for row_index, row in enumerate(section.rows):
            spec = row.spec

            label = QLabel(spec.name)
            if spec.description:
                label.setToolTip(f"<b>{spec.name}</b><br>{spec.description}")
            grid.addWidget(label, row_index, 0)

            widget = self.factory.create_widget(row.mod_id, spec, self)
            if spec.description:
                widget.setToolTip(spec.description)
            grid.addWidget(widget, row_index, 1)
            self.controls[(row.mod_id, spec.id)] = widget

            if spec.has_default:
                reset_button = QToolButton(self)
                reset_button.setIcon(themed_icon(self, "mdi.restore"))
                reset_button.setToolTip("Reset to default")
                reset_button.clicked.connect(
                    lambda _checked=False, m=row.mod_id, o=spec.id: self.revert_option(m, o)
                )
                grid.addWidget(reset_button, row_index, 2)

        parent_layout.addLayout(grid)

    # === VALUE SYNC ===

    def control_for(self, mod_id: str, option_id: str) -> Optional[OptionWidget]:
        return self.controls.get((mod_id, option_id))

    def revert_option(self, mod_id: str, option_id: str) -> None:
        """Reset an option to its registered default."""
        self.service.revert(mod_id, option_id)
        self.logger.debug(f"Reverted {mod_id}/{option_id} to default")

    def _on_value_changed(self, event: ChangeEvent) -> None:
        widget = self.control_for(event.mod_id, event.option_id)
        if widget is None or event.token is widget.control:
            return
        widget.refresh()

    def detach(self) -> None:
        """Stop following value changes."""
        if self._subscription_id is not None:
            self.service.unsubscribe(self._subscription_id)
            self._subscription_id = None

    def done(self, arg__1: int) -> None:
        """Unsubscribe and remember geometry when the dialog closes."""
        self.detach()
        if self.app_settings is not None:
            self.app_settings.save_dialog_geometry(self)
        super().done(arg__1)
