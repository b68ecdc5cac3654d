"""
Interactive controls for mod options.

``models`` holds the widget-independent state of each control, ``widgets``
the Qt views, and ``factory`` picks both from an option's type.
"""

from .models import (
    EnumControl,
    NumberControl,
    OptionControl,
    StepModifier,
    ToggleControl,
)
from .widgets import EnumWidget, NumberWidget, ToggleWidget
from .factory import ControlFactory, OptionWidget

__all__ = [
    "EnumControl",
    "NumberControl",
    "OptionControl",
    "StepModifier",
    "ToggleControl",
    "EnumWidget",
    "NumberWidget",
    "ToggleWidget",
    "ControlFactory",
    "OptionWidget",
]
