"""
Shared pytest fixtures for mod-config tests.
"""

import os
from pathlib import Path
from typing import Dict, List, Tuple

# Must be set before the first QApplication is created
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PySide6.QtCore import QSettings

from mod_config.config import AppSettings
from mod_config.options import LocalFileStorage, SettingsService


class FailingStorage(LocalFileStorage):
    """Local storage whose writes can be switched off."""

    def __init__(self) -> None:
        self.fail_writes = True
        self.calls: List[Tuple[str, str]] = []

    def write(self, path, data: bytes) -> None:
        self.calls.append(("write", str(path)))
        if self.fail_writes:
            raise PermissionError(f"read-only: {path}")
        super().write(path, data)

    def copy(self, src, dst) -> None:
        self.calls.append(("copy", str(src)))
        super().copy(src, dst)

    def delete(self, path) -> None:
        self.calls.append(("delete", str(path)))
        super().delete(path)


class MemoryStorage:
    """In-memory FileStorage recording the order of operations."""

    def __init__(self) -> None:
        self.files: Dict[str, bytes] = {}
        self.calls: List[Tuple[str, str]] = []

    def read(self, path) -> bytes:
        self.calls.append(("read", str(path)))
        try:
            return self.files[str(path)]
        except KeyError:
            raise FileNotFoundError(str(path)) from None

    def write(self, path, data: bytes) -> None:
        self.calls.append(("write", str(path)))
        self.files[str(path)] = data

    def delete(self, path) -> None:
        self.calls.append(("delete", str(path)))
        self.files.pop(str(path), None)

    def copy(self, src, dst) -> None:
        self.calls.append(("copy", str(src)))
        self.files[str(dst)] = self.read(src)


@pytest.fixture
def store_path(tmp_path: Path) -> Path:
    return tmp_path / "AppData" / "ModConfig.data"


@pytest.fixture
def service(store_path: Path) -> SettingsService:
    """Loaded service with no registrations, backed by a temp file."""
    settings_service = SettingsService(store_path)
    settings_service.load()
    return settings_service


@pytest.fixture
def demo_service(store_path: Path) -> SettingsService:
    """Loaded service with one option of every type."""
    settings_service = SettingsService(store_path)
    settings_service.register_mod("mod_a", "Mod A", "First test mod")
    settings_service.register_option("mod_a", "flag", name="Flag", type="boolean", default=True)
    settings_service.register_option(
        "mod_a",
        "mode",
        name="Mode",
        type="enum",
        default="b",
        values=[
            {"value": "a", "label": "Alpha"},
            {"value": "b", "label": "Beta"},
            {"value": "c", "label": "Gamma"},
        ],
        order=2,
    )
    settings_service.register_option(
        "mod_a", "count", name="Count", type="number", default=4, min=0, max=10, step=2, order=3
    )
    settings_service.load()
    return settings_service


@pytest.fixture
def failing_storage() -> FailingStorage:
    return FailingStorage()


@pytest.fixture
def memory_storage() -> MemoryStorage:
    return MemoryStorage()


@pytest.fixture
def app_settings(tmp_path: Path, qapp) -> AppSettings:
    """AppSettings backed by an INI file in a temp directory."""
    qsettings = QSettings(str(tmp_path / "app.ini"), QSettings.Format.IniFormat)
    settings_obj = AppSettings(profile="test", settings=qsettings)
    settings_obj.data_dir = tmp_path / "data"
    return settings_obj
