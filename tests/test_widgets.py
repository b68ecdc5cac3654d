"""Tests for the Qt option widgets."""

from mod_config.gui.controls import (
    ControlFactory,
    EnumWidget,
    NumberWidget,
    StepModifier,
    ToggleWidget,
)
from mod_config.gui.controls.widgets import format_number
from mod_config.options import SettingsService


def _widget(qtbot, service: SettingsService, option_id: str):
    spec = service.registry.get_option("mod_a", option_id)
    widget = ControlFactory(service).create_widget("mod_a", spec)
    qtbot.addWidget(widget)
    return widget


class TestToggleWidget:
    """Test the boolean toggle."""

    def test_click_commits(self, qtbot, demo_service: SettingsService) -> None:
        """Test that clicking the toggle writes the value."""
        widget = _widget(qtbot, demo_service, "flag")
        assert isinstance(widget, ToggleWidget)
        assert widget.isChecked()
        assert widget.text() == "On"

        widget.click()

        assert demo_service.get("mod_a", "flag") is False
        assert not widget.isChecked()
        assert widget.text() == "Off"

    def test_refresh_does_not_commit(self, qtbot, demo_service: SettingsService) -> None:
        """Test that refreshing the widget writes nothing."""
        widget = _widget(qtbot, demo_service, "flag")
        events = []
        demo_service.set("mod_a", "flag", False)
        demo_service.on_change(events.append)

        widget.refresh()

        assert not widget.isChecked()
        assert events == []


class TestEnumWidget:
    """Test the enum pager."""

    def test_buttons_page_through_values(self, qtbot, demo_service: SettingsService) -> None:
        """Test paging through choices with the arrow buttons."""
        widget = _widget(qtbot, demo_service, "mode")
        assert isinstance(widget, EnumWidget)
        assert widget.objectName() == "mod_a.mode"
        assert widget.page_label.text() == "Beta"

        widget.next_button.click()
        assert widget.page_label.text() == "Gamma"
        widget.next_button.click()
        assert widget.page_label.text() == "Alpha"
        widget.previous_button.click()
        assert widget.page_label.text() == "Gamma"
        assert demo_service.get("mod_a", "mode") == "c"


class TestNumberWidget:
    """Test the number stepper."""

    def test_buttons_disable_at_bounds(self, qtbot, demo_service: SettingsService) -> None:
        """Test that step buttons disable at the bounds."""
        widget = _widget(qtbot, demo_service, "count")
        assert isinstance(widget, NumberWidget)
        assert widget.value_label.text() == "4"

        widget.step_up(StepModifier.NORMAL)
        widget.step_up(StepModifier.NORMAL)
        widget.step_up(StepModifier.NORMAL)

        assert widget.value_label.text() == "10"
        assert not widget.increment_button.isEnabled()
        assert widget.decrement_button.isEnabled()

        widget.step_down(StepModifier.COARSE)
        assert widget.value_label.text() == "0"
        assert not widget.decrement_button.isEnabled()
        assert demo_service.get("mod_a", "count") == 0

    def test_button_click_steps(self, qtbot, demo_service: SettingsService) -> None:
        """Test that clicking a step button changes the value."""
        widget = _widget(qtbot, demo_service, "count")
        widget.increment_button.click()
        assert demo_service.get("mod_a", "count") == 6

    def test_hint_lists_step_sizes(self, qtbot, demo_service: SettingsService) -> None:
        """Test that the tooltip lists the modifier step sizes."""
        widget = _widget(qtbot, demo_service, "count")
        hint = widget.step_hint()
        assert "x2" in hint
        assert "x20" in hint
        assert "x200" in hint
        assert hint in widget.increment_button.toolTip()

    def test_format_number(self) -> None:
        """Test number formatting."""
        assert format_number(3.0) == "3"
        assert format_number(0.25) == "0.25"
        assert format_number(7) == "7"
