"""
Public settings API for mods: register, get, set, toggle, revert.
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from .notifier import Callback, ChangeNotifier, EventKind
from .registry import OptionRegistry
from .storage import FileStorage
from .store import SettingsStore
from .types import (
    ABSENT,
    ChangeEvent,
    ModEntry,
    OptionSpec,
    OptionType,
    StorageUnavailable,
    is_storable,
    values_equal,
)


class SettingsService:
    """
    Merges registered defaults with stored overrides and announces changes.

    Create one instance, register options, call :meth:`load` once, then use
    :meth:`get`/:meth:`set`. The registry and store are owned by the service.
    """

    def __init__(
        self,
        store_path: Union[str, Path],
        storage: Optional[FileStorage] = None,
        registry: Optional[OptionRegistry] = None,
        notifier: Optional[ChangeNotifier] = None,
    ):
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.registry = registry if registry is not None else OptionRegistry()
        self.store = SettingsStore(store_path, storage)
        self.notifier = notifier if notifier is not None else ChangeNotifier()
        self.last_save_error: Optional[StorageUnavailable] = None
        self._ready = False

    # === LIFECYCLE ===

    @property
    def is_ready(self) -> bool:
        """Whether load() has completed."""
        return self._ready

    def load(self) -> None:
        """Load persisted overrides and fire STORE_READY. Only the first call counts."""
        if self._ready:
            self.logger.debug("Settings already loaded, ignoring repeated load()")
            return
        self.store.load()
        self._ready = True
        self.logger.info("Mod settings ready")
        self.notifier.publish(EventKind.STORE_READY)

    def save(self) -> None:
        """Persist overrides now.

        Raises:
            StorageUnavailable: If the write failed.
        """
        try:
            self.store.save()
        except StorageUnavailable as e:
            self.last_save_error = e
            raise
        self.last_save_error = None

    # === REGISTRATION ===

    def register_mod(
        self,
        mod_id: str,
        name: Optional[str] = None,
        description: Optional[str] = None,
    ) -> ModEntry:
        """Register a display name and description for a mod."""
        return self.registry.register_mod(mod_id, name, description)

    def register_option(
        self,
        mod_id: str,
        option_id: str,
        spec: Union[OptionSpec, Dict[str, Any], None] = None,
        **params: Any,
    ) -> OptionSpec:
        """Declare an option so it shows up in the settings view."""
        return self.registry.register_option(mod_id, option_id, spec, **params)

    def registry_snapshot(self) -> List[ModEntry]:
        return self.registry.snapshot()

    # === VALUES ===

    def get_default(self, mod_id: str, option_id: str) -> Any:
        """Registered default of an option, or ABSENT."""
        return self.registry.get_default(mod_id, option_id)

    def get(self, mod_id: str, option_id: str) -> Any:
        """Current value: the override if one is present, else the default, else ABSENT."""
        found, value = self.store.lookup(mod_id, option_id)
        if found:
            return value
        return self.get_default(mod_id, option_id)

    def set(self, mod_id: str, option_id: str, value: Any, token: Any = None) -> Any:
        """
        Set an option's value, save, and announce the change.

        Options that were never registered can still be stored. Nothing
        happens when the value equals the current one, or when the value
        cannot be persisted (not a bool, number or string, an integer beyond
        64 bits, or a non-finite float); the latter is logged.

        Returns:
            The value passed in
        """
        if not is_storable(value):
            self.logger.error(
                f"Rejected value {value!r} for {mod_id}/{option_id}: cannot be stored"
            )
            return value

        old_value = self.get(mod_id, option_id)
        if values_equal(value, old_value):
            return value

        self.store.put(mod_id, option_id, value)
        try:
            self.save()
        except StorageUnavailable as e:
            # The in-memory value stays applied
            self.logger.error(str(e))

        self.logger.debug(f"{mod_id}/{option_id}: {old_value!r} -> {value!r}")
        self.notifier.publish(
            EventKind.VALUE_CHANGED,
            ChangeEvent(mod_id, option_id, value, old_value, token),
        )
        return value

    def toggle(self, mod_id: str, option_id: str, token: Any = None) -> Any:
        """Flip a boolean option. Returns the new value, or ABSENT for other types."""
        option = self.registry.get_option(mod_id, option_id)
        if option is ABSENT or option.type is not OptionType.BOOLEAN:
            self.logger.debug(f"Ignoring toggle of non-boolean option {mod_id}/{option_id}")
            return ABSENT
        return self.set(mod_id, option_id, not self.get(mod_id, option_id), token)

    def revert(self, mod_id: str, option_id: str, token: Any = None) -> Any:
        """Set an option back to its default. Returns the default, or ABSENT."""
        default = self.get_default(mod_id, option_id)
        if default is ABSENT:
            return ABSENT
        self.set(mod_id, option_id, default, token)
        return default

    # === NOTIFICATIONS ===

    def subscribe(self, kind: EventKind, callback: Callback) -> int:
        return self.notifier.subscribe(kind, callback)

    def unsubscribe(self, subscription_id: int) -> bool:
        return self.notifier.unsubscribe(subscription_id)

    def on_ready(self, callback: Callback) -> int:
        """Subscribe to STORE_READY; runs immediately if already loaded."""
        subscription_id = self.notifier.subscribe(EventKind.STORE_READY, callback)
        if self._ready:
            try:
                callback(None)
            except Exception:
                self.logger.exception("STORE_READY subscriber failed")
        return subscription_id

    def on_change(self, callback: Callback) -> int:
        return self.notifier.subscribe(EventKind.VALUE_CHANGED, callback)
