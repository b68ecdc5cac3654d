"""
State of the interactive option controls, independent of any widget.

Every control commits through ``SettingsService.set`` on each interaction;
nothing is buffered, so closing the dialog never loses an edit.
"""

import logging
import math
from enum import IntEnum
from typing import TYPE_CHECKING, Any, Optional, Tuple, Union

from ...options.types import ABSENT, EnumChoice, OptionSpec, values_equal

if TYPE_CHECKING:
    from ...options.service import SettingsService

Number = Union[int, float]


class StepModifier(IntEnum):
    """Multiplier applied to a number option's step."""
    NORMAL = 1
    FINE = 10
    COARSE = 100


class OptionControl:
    """Common binding of a control to one option of one mod."""

    def __init__(self, service: "SettingsService", mod_id: str, spec: OptionSpec):
        self.service = service
        self.mod_id = mod_id
        self.spec = spec
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    @property
    def option_id(self) -> str:
        return self.spec.id

    def current_value(self) -> Any:
        return self.service.get(self.mod_id, self.spec.id)

    def commit(self, value: Any) -> Any:
        # The control itself is the token, so listeners can skip its own edits
        return self.service.set(self.mod_id, self.spec.id, value, token=self)

    def refresh(self) -> None:
        """Re-read the stored value without committing anything."""
        raise NotImplementedError


class ToggleControl(OptionControl):
    """On/off control for boolean options."""

    def __init__(self, service: "SettingsService", mod_id: str, spec: OptionSpec):
        super().__init__(service, mod_id, spec)
        self.checked = False
        self.refresh()

    def refresh(self) -> None:
        value = self.current_value()
        self.checked = bool(value) if value is not ABSENT else False

    def set_checked(self, checked: bool) -> bool:
        """Commit a new state; the displayed state follows the stored result."""
        self.checked = bool(self.commit(bool(checked)))
        return self.checked

    def toggle(self) -> bool:
        return self.set_checked(not self.checked)


class EnumControl(OptionControl):
    """Cyclic pager over the declared values of an enum option.

    ``page`` is 1-based, matching the position of the entry in the declared
    value list.
    """

    def __init__(self, service: "SettingsService", mod_id: str, spec: OptionSpec):
        super().__init__(service, mod_id, spec)
        self.choices: Tuple[EnumChoice, ...] = spec.choices
        self.page = 0
        if not self.choices:
            self.logger.warning(f"Enum option {mod_id}/{spec.id} has no values to show")
        self.refresh()

    @property
    def label(self) -> str:
        if not self.choices:
            return ""
        return self.choices[self.page - 1].label

    @property
    def value(self) -> Any:
        if not self.choices:
            return ABSENT
        return self.choices[self.page - 1].value

    def find_page(self, value: Any) -> int:
        """Page of the first entry holding value, or 1 when none does."""
        for index, choice in enumerate(self.choices, start=1):
            if values_equal(choice.value, value):
                return index
        return 1

    def refresh(self) -> None:
        self.page = self.find_page(self.current_value()) if self.choices else 0

    def set_page(self, page: int, commit: bool = True) -> None:
        if not self.choices:
            return
        self.page = page
        if commit:
            self.commit(self.choices[page - 1].value)

    def next(self) -> int:
        """Advance one entry, wrapping from the last to the first."""
        if self.choices:
            self.set_page(self.page % len(self.choices) + 1)
        return self.page

    def previous(self) -> int:
        """Go back one entry, wrapping from the first to the last."""
        if self.choices:
            self.set_page((self.page - 2) % len(self.choices) + 1)
        return self.page


def _step_decimals(step: Number) -> int:
    text = repr(float(step))
    if "e" in text or float(step).is_integer():
        return 0
    return len(text.split(".")[1])


class NumberControl(OptionControl):
    """Stepper for number options, clamped to the declared bounds."""

    def __init__(self, service: "SettingsService", mod_id: str, spec: OptionSpec):
        super().__init__(service, mod_id, spec)
        self.min: Optional[Number] = spec.min
        self.max: Optional[Number] = spec.max
        self.step: Number = spec.step
        self._decimals = _step_decimals(spec.step)
        self.value: Number = 0

        current = self.current_value()
        self.value = self.normalize(current)
        # Out-of-range or non-numeric values are replaced by what the control shows
        if current is ABSENT or not values_equal(current, self.value):
            self.commit(self.value)

    @staticmethod
    def coerce(value: Any) -> Number:
        """Non-numeric or non-finite input becomes 0."""
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return 0
        if isinstance(value, float) and not math.isfinite(value):
            return 0
        return value

    def clamp(self, value: Number) -> Number:
        if self.min is not None and value < self.min:
            return self.min
        if self.max is not None and value > self.max:
            return self.max
        return value

    def normalize(self, value: Any) -> Number:
        return self.clamp(self.coerce(value))

    def _stepped(self, delta: Number) -> Number:
        value = self.value + delta
        # Rounded to the precision of the step
        if self._decimals and isinstance(value, float):
            value = round(value, self._decimals)
        return value

    @property
    def can_decrement(self) -> bool:
        return self.min is None or self.value > self.min

    @property
    def can_increment(self) -> bool:
        return self.max is None or self.value < self.max

    def refresh(self) -> None:
        self.value = self.normalize(self.current_value())

    def set_value(self, value: Any) -> Number:
        self.value = self.normalize(value)
        self.commit(self.value)
        return self.value

    def increment(self, modifier: StepModifier = StepModifier.NORMAL) -> Number:
        return self.set_value(self._stepped(self.step * int(modifier)))

    def decrement(self, modifier: StepModifier = StepModifier.NORMAL) -> Number:
        return self.set_value(self._stepped(-self.step * int(modifier)))
