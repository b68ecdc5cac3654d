"""Tests for the demo host window."""

from mod_config.config.paths import PathSettings
from mod_config.demo import register_demo_options
from mod_config.gui.dialogs import StorageLocationDialog
from mod_config.gui.main_window import MainWindow
from mod_config.gui.menu import ENTRY_OBJECT_NAME
from mod_config.options import SettingsService


class TestMainWindow:
    """Test menu wiring and change listing."""

    def test_mod_options_entry_follows_options(self, qtbot, app_settings, service) -> None:
        """Test that the mod options entry sits after Options."""
        window = MainWindow(app_settings, service)
        qtbot.addWidget(window)

        names = [action.objectName() for action in window.settings_menu.actions()]
        assert names == ["actionOptions", ENTRY_OBJECT_NAME]
        assert window.action_mod_options.objectName() == ENTRY_OBJECT_NAME

    def test_entry_opens_dialog(self, qtbot, app_settings, service) -> None:
        """Test that the menu entry opens the settings dialog."""
        window = MainWindow(app_settings, service)
        qtbot.addWidget(window)

        window.action_mod_options.trigger()

        assert window.settings_view.is_open
        window.settings_view.close()

    def test_changes_are_listed(self, qtbot, app_settings, service) -> None:
        """Test that value changes are listed in the window."""
        window = MainWindow(app_settings, service)
        qtbot.addWidget(window)

        service.set("m", "v", 1)

        assert window.change_list.count() == 1
        assert window.change_list.item(0).text() == "m/v: ABSENT -> 1"


class TestDemoOptions:
    """Test the demo registrations."""

    def test_demo_options_are_valid(self, store_path) -> None:
        """Test that the demo registrations validate cleanly."""
        settings_service = SettingsService(store_path)
        register_demo_options(settings_service)
        settings_service.load()

        result = settings_service.registry.validate()
        assert result.is_valid
        assert result.warnings == []
        assert settings_service.get("hud_tweaks", "clock") == "24h"
        assert settings_service.get("hud_tweaks", "compact") is False


class TestStorageLocationDialog:
    """Test the dialog choosing where mod settings are kept."""

    def test_shows_current_location(self, qtbot, app_settings, tmp_path) -> None:
        """Test that the dialog opens on the configured data directory."""
        dialog = StorageLocationDialog(app_settings)
        qtbot.addWidget(dialog)

        assert dialog.data_dir_field.text() == str(tmp_path / "data")
        assert dialog.store_label.text() == str(tmp_path / "data" / "ModConfig.data")
        assert dialog.backup_label.text() == str(tmp_path / "data" / "ModConfig.data.bak")

    def test_saves_chosen_directory(self, qtbot, app_settings, tmp_path) -> None:
        """Test that accepting stores the chosen directory."""
        dialog = StorageLocationDialog(app_settings)
        qtbot.addWidget(dialog)

        dialog.set_directory(tmp_path / "elsewhere")
        assert dialog.store_label.text() == str(tmp_path / "elsewhere" / "ModConfig.data")
        dialog._save_and_accept()

        assert app_settings.store_path == tmp_path / "elsewhere" / "ModConfig.data"

    def test_default_directory_is_stored_as_unset(self, qtbot, app_settings) -> None:
        """Test that picking the default directory clears the stored override."""
        dialog = StorageLocationDialog(app_settings)
        qtbot.addWidget(dialog)

        dialog.set_directory(PathSettings.default_data_dir())
        dialog._save_and_accept()

        assert app_settings.data_dir == PathSettings.default_data_dir()
        assert app_settings.settings.value("paths/data_dir") in (None, "")
