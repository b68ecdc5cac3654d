"""
Creates the control matching an option's declared type.
"""

import logging
from typing import TYPE_CHECKING, Callable, Dict, Optional, Tuple, Type, Union

from PySide6.QtWidgets import QWidget

from ...options.types import OptionSpec, OptionType
from .models import EnumControl, NumberControl, OptionControl, ToggleControl
from .widgets import EnumWidget, NumberWidget, ToggleWidget

if TYPE_CHECKING:
    from ...options.service import SettingsService

OptionWidget = Union[ToggleWidget, EnumWidget, NumberWidget]


class ControlFactory:
    """Maps every OptionType to a control model and the widget showing it."""

    CONTROLS: Dict[OptionType, Tuple[Type[OptionControl], Callable[..., OptionWidget]]] = {
        OptionType.BOOLEAN: (ToggleControl, ToggleWidget),
        OptionType.ENUM: (EnumControl, EnumWidget),
        OptionType.NUMBER: (NumberControl, NumberWidget),
    }

    def __init__(self, service: "SettingsService"):
        self.service = service
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

        missing = set(OptionType) - set(self.CONTROLS)
        if missing:
            raise TypeError(f"No control registered for option types: {sorted(t.value for t in missing)}")

    def create_control(self, mod_id: str, spec: OptionSpec) -> OptionControl:
        """Create the Qt-free control bound to an option."""
        try:
            control_class, _ = self.CONTROLS[spec.type]
        except KeyError:
            raise TypeError(f"Unsupported option type: {spec.type!r}") from None
        return control_class(self.service, mod_id, spec)

    def create_widget(
        self, mod_id: str, spec: OptionSpec, parent: Optional[QWidget] = None
    ) -> OptionWidget:
        """Create the widget for an option, with its control already bound."""
        _, widget_class = self.CONTROLS[spec.type]
        widget = widget_class(self.create_control(mod_id, spec), parent)
        widget.setObjectName(f"{mod_id}.{spec.id}")
        self.logger.debug(f"Created {widget_class.__name__} for {mod_id}/{spec.id}")
        return widget
