"""
Dialog windows for mod-config.
"""

from .base_dialog import BaseDialog
from .mod_options_dialog import ModOptionsDialog
from .storage_location_dialog import StorageLocationDialog

__all__ = ["BaseDialog", "ModOptionsDialog", "StorageLocationDialog"]
