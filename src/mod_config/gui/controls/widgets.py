"""
Qt widgets for the option controls.
"""

import logging
from typing import Optional

from PySide6.QtCore import Qt, QSize
from PySide6.QtGui import QIcon, QPalette
from PySide6.QtWidgets import (
    QApplication,
    QHBoxLayout,
    QLabel,
    QSizePolicy,
    QToolButton,
    QWidget,
)
import qtawesome as qta  # type: ignore

from .models import EnumControl, Number, NumberControl, StepModifier, ToggleControl

ICON_SIZE = QSize(18, 18)
REPEAT_DELAY_MS = 300
REPEAT_INTERVAL_MS = 150


def themed_icon(widget: QWidget, name: str) -> QIcon:
    """Load a qtawesome icon coloured for the widget's palette."""
    try:
        color = widget.palette().color(QPalette.ColorRole.WindowText)
        return QIcon(qta.icon(name, color=color))  # type: ignore[arg-type]
    except Exception as e:
        logging.getLogger(__name__).warning(f"Failed to load icon {name}: {e}")
        return QIcon()


def _tool_button(parent: QWidget, icon_name: str, fallback_text: str) -> QToolButton:
    button = QToolButton(parent)
    icon = themed_icon(parent, icon_name)
    if icon.isNull():
        button.setText(fallback_text)
    else:
        button.setIcon(icon)
        button.setIconSize(ICON_SIZE)
    button.setFocusPolicy(Qt.FocusPolicy.StrongFocus)
    return button


def format_number(value: Number) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def current_step_modifier() -> StepModifier:
    """Shift steps x10, Ctrl steps x100."""
    modifiers = QApplication.keyboardModifiers()
    if modifiers & Qt.KeyboardModifier.ShiftModifier:
        return StepModifier.FINE
    if modifiers & Qt.KeyboardModifier.ControlModifier:
        return StepModifier.COARSE
    return StepModifier.NORMAL


class ToggleWidget(QToolButton):
    """Checkable button bound to a boolean option."""

    ICON_ON = "mdi.check-circle"
    ICON_OFF = "mdi.circle-outline"

    def __init__(self, control: ToggleControl, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.control = control
        self.setCheckable(True)
        self.setIconSize(ICON_SIZE)
        self.setToolButtonStyle(Qt.ToolButtonStyle.ToolButtonTextBesideIcon)
        self._icon_on = themed_icon(self, self.ICON_ON)
        self._icon_off = themed_icon(self, self.ICON_OFF)

        self._sync()
        self.toggled.connect(self._on_toggled)

    def _sync(self) -> None:
        checked = self.control.checked
        self.blockSignals(True)
        self.setChecked(checked)
        self.blockSignals(False)
        self.setIcon(self._icon_on if checked else self._icon_off)
        self.setText("On" if checked else "Off")

    def _on_toggled(self, checked: bool) -> None:
        self.control.set_checked(checked)
        self._sync()

    def refresh(self) -> None:
        self.control.refresh()
        self._sync()


class EnumWidget(QWidget):
    """Previous/next pager showing the label of the current enum entry."""

    def __init__(self, control: EnumControl, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.control = control

        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(4)

        self.previous_button = _tool_button(self, "mdi.chevron-left", "<")
        self.previous_button.setToolTip("Previous")
        self.previous_button.clicked.connect(self.previous_page)
        layout.addWidget(self.previous_button)

        self.page_label = QLabel(self)
        self.page_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.page_label.setMinimumWidth(120)
        self.page_label.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Preferred)
        layout.addWidget(self.page_label)

        self.next_button = _tool_button(self, "mdi.chevron-right", ">")
        self.next_button.setToolTip("Next")
        self.next_button.clicked.connect(self.next_page)
        layout.addWidget(self.next_button)

        has_choices = bool(control.choices)
        self.previous_button.setEnabled(has_choices)
        self.next_button.setEnabled(has_choices)
        self._sync()

    def _sync(self) -> None:
        self.page_label.setText(self.control.label)

    def next_page(self) -> None:
        self.control.next()
        self._sync()

    def previous_page(self) -> None:
        self.control.previous()
        self._sync()

    def refresh(self) -> None:
        self.control.refresh()
        self._sync()


class NumberWidget(QWidget):
    """-/+ stepper for number options."""

    def __init__(self, control: NumberControl, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.control = control

        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(4)

        self.decrement_button = _tool_button(self, "mdi.minus", "-")
        self.decrement_button.setAutoRepeat(True)
        self.decrement_button.setAutoRepeatDelay(REPEAT_DELAY_MS)
        self.decrement_button.setAutoRepeatInterval(REPEAT_INTERVAL_MS)
        self.decrement_button.clicked.connect(lambda: self.step_down())
        layout.addWidget(self.decrement_button)

        self.value_label = QLabel(self)
        self.value_label.setAlignment(
            Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignVCenter
        )
        self.value_label.setMinimumWidth(60)
        layout.addWidget(self.value_label)

        self.increment_button = _tool_button(self, "mdi.plus", "+")
        self.increment_button.setAutoRepeat(True)
        self.increment_button.setAutoRepeatDelay(REPEAT_DELAY_MS)
        self.increment_button.setAutoRepeatInterval(REPEAT_INTERVAL_MS)
        self.increment_button.clicked.connect(lambda: self.step_up())
        layout.addWidget(self.increment_button)

        hint = self.step_hint()
        self.decrement_button.setToolTip(f"Decrease\n{hint}")
        self.increment_button.setToolTip(f"Increase\n{hint}")

        self._sync()

    def step_hint(self) -> str:
        step = self.control.step
        return (
            f"Click: x{format_number(step)}\n"
            f"Shift + Click: x{format_number(step * StepModifier.FINE)}\n"
            f"Ctrl + Click: x{format_number(step * StepModifier.COARSE)}"
        )

    def _sync(self) -> None:
        self.value_label.setText(format_number(self.control.value))
        self.decrement_button.setEnabled(self.control.can_decrement)
        self.increment_button.setEnabled(self.control.can_increment)

    def step_up(self, modifier: Optional[StepModifier] = None) -> None:
        self.control.increment(modifier if modifier is not None else current_step_modifier())
        self._sync()

    def step_down(self, modifier: Optional[StepModifier] = None) -> None:
        self.control.decrement(modifier if modifier is not None else current_step_modifier())
        self._sync()

    def refresh(self) -> None:
        self.control.refresh()
        self._sync()
