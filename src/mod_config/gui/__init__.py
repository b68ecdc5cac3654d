"""
Qt user interface for mod-config.
"""

from .menu import install_menu_entry
from .settings_view import SettingsViewController, close_settings_view, open_settings_view
from .view_builder import build_settings_view

__all__ = [
    "install_menu_entry",
    "SettingsViewController",
    "open_settings_view",
    "close_settings_view",
    "build_settings_view",
]
