"""
Builds the ordered section/row tree shown by the mod options dialog.

Kept free of Qt so the ordering rules can be checked without a display.
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Iterable, List, Optional, Tuple

from ..options.types import ModEntry, OptionSpec

if TYPE_CHECKING:
    from ..options.service import SettingsService

INTRO_TEXT = "Mouse over options to see a description of what they mean."
EMPTY_TEXT = "There are no mods currently active which use this settings dialogue."


@dataclass(frozen=True)
class OptionRow:
    """One option with the value it had when the view was built."""
    mod_id: str
    spec: OptionSpec
    value: Any

    @property
    def option_id(self) -> str:
        return self.spec.id


@dataclass(frozen=True)
class ModSection:
    """All rows of one mod, in display order."""
    mod_id: str
    name: str
    description: str
    rows: Tuple[OptionRow, ...]


@dataclass(frozen=True)
class SettingsView:
    """Snapshot of what the dialog renders.

    Exactly one of ``sections`` and ``placeholder`` is populated.
    """
    sections: Tuple[ModSection, ...] = field(default_factory=tuple)
    placeholder: Optional[str] = None
    intro: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        return not self.sections


def section_sort_key(entry: ModEntry) -> Tuple[str, str, str]:
    return (entry.name.casefold(), entry.name, entry.id)


def option_sort_key(spec: OptionSpec) -> Tuple[int, str, str, str]:
    # Single composite key, so the result does not depend on sort stability
    return (spec.order, spec.name.casefold(), spec.name, spec.id)


def build_section(entry: ModEntry, service: "SettingsService") -> ModSection:
    rows = tuple(
        OptionRow(entry.id, spec, service.get(entry.id, spec.id))
        for spec in sorted(entry.options.values(), key=option_sort_key)
    )
    return ModSection(entry.id, entry.name, entry.description, rows)


def build_settings_view(
    registry_snapshot: Iterable[ModEntry], service: "SettingsService"
) -> SettingsView:
    """
    Build the view tree from a registry snapshot.

    Args:
        registry_snapshot: Mod entries as returned by ``registry_snapshot()``
        service: Used to read each option's current value

    Returns:
        One section per mod sorted by display name, or a placeholder message
        when no mod registered anything
    """
    entries: List[ModEntry] = sorted(registry_snapshot, key=section_sort_key)
    if not entries:
        return SettingsView(placeholder=EMPTY_TEXT)

    sections = tuple(build_section(entry, service) for entry in entries)
    return SettingsView(sections=sections, intro=INTRO_TEXT)
