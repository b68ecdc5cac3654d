"""
Durable storage of user-overridden option values.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

import orjson

from .storage import FileStorage, LocalFileStorage
from .types import ABSENT, StorageUnavailable, is_storable

OverrideMap = Dict[str, Dict[str, Any]]

BACKUP_SUFFIX = ".bak"


class SettingsStore:
    """Holds the override map and persists it as one orjson blob.

    Only options a user actually changed are kept. A key that is present
    with a falsy value (``False``, ``0``, ``""``) is a real override and is
    kept apart from a missing key.
    """

    def __init__(
        self,
        path: Union[str, Path],
        storage: Optional[FileStorage] = None,
    ):
        """
        Args:
            path: Location of the persisted blob; the backup sits next to it
                with a ``.bak`` suffix.
            storage: File primitives to use (default: local filesystem).
        """
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.path = Path(path)
        self.backup_path = self.path.with_name(self.path.name + BACKUP_SUFFIX)
        self.storage: FileStorage = storage if storage is not None else LocalFileStorage()
        self._data: OverrideMap = {}

    # === PERSISTENCE ===

    def load(self) -> None:
        """Read the persisted overrides.

        A missing, unreadable or malformed file leaves the store empty. This
        is a normal startup condition and is never raised.
        """
        self._data = {}

        try:
            raw = self.storage.read(self.path)
        except FileNotFoundError:
            self.logger.info(f"No saved mod settings at {self.path}, starting empty")
            return
        except OSError as e:
            self.logger.warning(f"Could not read mod settings from {self.path}: {e}")
            return

        try:
            data = orjson.loads(raw)
        except orjson.JSONDecodeError as e:
            self.logger.warning(f"Mod settings file {self.path} is malformed, ignoring it: {e}")
            return

        if not isinstance(data, dict):
            self.logger.warning(
                f"Mod settings file {self.path} holds {type(data).__name__}, expected an object"
            )
            return

        for mod_id, options in data.items():
            if not isinstance(options, dict):
                self.logger.warning(f"Dropping malformed settings entry for mod '{mod_id}'")
                continue
            values = {
                option_id: value
                for option_id, value in options.items()
                if is_storable(value)
            }
            if len(values) != len(options):
                self.logger.warning(f"Dropped unsupported values saved for mod '{mod_id}'")
            if values:
                self._data[mod_id] = values

        self.logger.info(
            f"Loaded {sum(len(v) for v in self._data.values())} overrides "
            f"for {len(self._data)} mods from {self.path}"
        )

    def save(self) -> None:
        """Persist the full override map.

        The previous generation is copied to the ``.bak`` sibling first, then
        the new content replaces the primary file atomically.

        Raises:
            StorageUnavailable: If the overrides cannot be encoded or a file
                operation fails.
        """
        try:
            payload = orjson.dumps(self._data, option=orjson.OPT_INDENT_2)
        except orjson.JSONEncodeError as e:
            raise StorageUnavailable(f"Could not encode mod settings for {self.path}: {e}") from e

        try:
            self.storage.delete(self.backup_path)
            try:
                self.storage.copy(self.path, self.backup_path)
            except FileNotFoundError:
                # First save, nothing to back up yet
                pass
            self.storage.write(self.path, payload)
        except OSError as e:
            raise StorageUnavailable(f"Could not save mod settings to {self.path}: {e}") from e

        self.logger.debug(f"Saved mod settings to {self.path}")

    # === OVERRIDE ACCESS ===

    def lookup(self, mod_id: str, option_id: str) -> Tuple[bool, Any]:
        """Return ``(found, value)``; value is ABSENT when not found."""
        options = self._data.get(mod_id)
        if options is None or option_id not in options:
            return False, ABSENT
        return True, options[option_id]

    def put(self, mod_id: str, option_id: str, value: Any) -> None:
        self._data.setdefault(mod_id, {})[option_id] = value

    def remove(self, mod_id: str, option_id: str) -> bool:
        """Drop an override. Returns True if one was present."""
        options = self._data.get(mod_id)
        if options is None or option_id not in options:
            return False
        del options[option_id]
        if not options:
            del self._data[mod_id]
        return True

    def as_dict(self) -> OverrideMap:
        """Copy of the override map."""
        return {mod_id: dict(options) for mod_id, options in self._data.items()}
