"""
In-memory catalog of mods and the options they declare.
"""

import dataclasses
import logging
from typing import Any, Dict, Iterator, List, Optional, Union

from .types import (
    ABSENT,
    ModEntry,
    OptionSpec,
    OptionType,
    ValidationResult,
    values_equal,
)


class OptionRegistry:
    """Holds option schemas only; values live in the settings store."""

    def __init__(self) -> None:
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self._mods: Dict[str, ModEntry] = {}

    def __len__(self) -> int:
        return len(self._mods)

    def __iter__(self) -> Iterator[ModEntry]:
        return iter(list(self._mods.values()))

    def __contains__(self, mod_id: object) -> bool:
        return mod_id in self._mods

    def is_empty(self) -> bool:
        return not self._mods

    # === REGISTRATION ===

    def register_mod(
        self,
        mod_id: str,
        name: Optional[str] = None,
        description: Optional[str] = None,
    ) -> ModEntry:
        """Register a mod, or update the fields explicitly given for a known one.

        A call that only relies on defaults never overwrites a name or
        description set earlier, and previously registered options are kept.
        """
        entry = self._mods.get(mod_id)
        if entry is None:
            entry = ModEntry(
                id=mod_id,
                name=name if name else mod_id,
                description=description or "",
            )
            self._mods[mod_id] = entry
            self.logger.debug(f"Registered mod '{mod_id}'")
            return entry

        if name:
            entry.name = name
        if description:
            entry.description = description
        return entry

    def register_option(
        self,
        mod_id: str,
        option_id: str,
        spec: Union[OptionSpec, Dict[str, Any], None] = None,
        **params: Any,
    ) -> OptionSpec:
        """Insert or replace a single option of a mod.

        ``spec`` may be a ready :class:`OptionSpec` or a mapping of the same
        keyword arguments :meth:`OptionSpec.create` takes; keyword arguments
        are merged on top. The mod is registered on the fly if unknown.
        """
        if isinstance(spec, OptionSpec):
            if params:
                raise TypeError("Keyword parameters cannot be combined with an OptionSpec")
            option = spec if spec.id == option_id else dataclasses.replace(spec, id=option_id)
        else:
            merged: Dict[str, Any] = dict(spec or {})
            merged.update(params)
            option = OptionSpec.create(option_id, **merged)

        entry = self._mods.get(mod_id) or self.register_mod(mod_id)
        if option_id in entry.options:
            self.logger.debug(f"Replacing option '{mod_id}/{option_id}'")
        entry.options[option_id] = option
        return option

    # === LOOKUPS ===

    def get_mod(self, mod_id: str) -> Union[ModEntry, Any]:
        """Return the mod entry, or ABSENT."""
        return self._mods.get(mod_id, ABSENT)

    def get_option(self, mod_id: str, option_id: str) -> Union[OptionSpec, Any]:
        """Return the option spec, or ABSENT."""
        entry = self._mods.get(mod_id)
        if entry is None:
            return ABSENT
        return entry.options.get(option_id, ABSENT)

    def get_default(self, mod_id: str, option_id: str) -> Any:
        """Return the registered default, or ABSENT."""
        option = self.get_option(mod_id, option_id)
        if option is ABSENT:
            return ABSENT
        return option.default

    def snapshot(self) -> List[ModEntry]:
        """Copy of all entries; later registrations do not show up in it."""
        return [
            ModEntry(
                id=entry.id,
                name=entry.name,
                description=entry.description,
                options=dict(entry.options),
            )
            for entry in self._mods.values()
        ]

    # === VALIDATION ===

    def validate(self) -> ValidationResult:
        """Check registered options for declarations that cannot render well."""
        errors: List[str] = []
        warnings: List[str] = []

        for entry in self._mods.values():
            for option in entry.options.values():
                key = f"{entry.id}/{option.id}"
                if option.type is OptionType.ENUM:
                    if not option.choices:
                        errors.append(f"Enum option {key} declares no values")
                    elif option.has_default and not any(
                        values_equal(choice.value, option.default)
                        for choice in option.choices
                    ):
                        warnings.append(
                            f"Default of enum option {key} is not one of its values"
                        )
                elif option.type is OptionType.NUMBER:
                    default = option.default
                    if isinstance(default, bool) or not isinstance(default, (int, float)):
                        warnings.append(f"Default of number option {key} is not a number")
                    elif (option.min is not None and default < option.min) or (
                        option.max is not None and default > option.max
                    ):
                        warnings.append(
                            f"Default of number option {key} is outside [{option.min}, {option.max}]"
                        )

        return ValidationResult(
            is_valid=len(errors) == 0, errors=errors, warnings=warnings
        )
