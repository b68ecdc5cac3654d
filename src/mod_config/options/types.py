"""
Option type definitions and exceptions for mod-config.
"""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

# Values an option may hold. Option values are scalar by construction.
OptionValue = Union[bool, int, float, str]


class _Absent:
    """Distinguished "no value" marker, distinct from any falsy option value."""

    _instance: Optional["_Absent"] = None

    def __new__(cls) -> "_Absent":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "ABSENT"

    def __reduce__(self) -> str:
        return "ABSENT"


ABSENT = _Absent()


class ConfigError(Exception):
    """Raised when an option is declared with invalid parameters."""
    pass


class StorageUnavailable(Exception):
    """Raised when the persisted settings cannot be read or written."""
    pass


class OptionType(Enum):
    """Kinds of option a mod can declare."""
    BOOLEAN = "boolean"
    ENUM = "enum"
    NUMBER = "number"

    @classmethod
    def parse(cls, value: Union["OptionType", str, None]) -> "OptionType":
        """Accept an OptionType or its legacy string name. Missing means BOOLEAN."""
        if value is None:
            return cls.BOOLEAN
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ConfigError(f"Unknown option type: {value!r}") from None


@dataclass(frozen=True)
class EnumChoice:
    """One selectable entry of an enumerated option."""
    value: OptionValue
    label: str


@dataclass(frozen=True)
class ValidationResult:
    """Result of configuration validation."""
    is_valid: bool
    errors: List[str]
    warnings: List[str]


def is_scalar(value: Any) -> bool:
    """Check whether a value is of an option value type."""
    return isinstance(value, (bool, int, float, str))


# Integer range the persisted JSON encoder accepts
MIN_STORABLE_INT = -(2 ** 63)
MAX_STORABLE_INT = 2 ** 64 - 1


def is_storable(value: Any) -> bool:
    """Check whether a value can be stored and persisted unchanged."""
    if not is_scalar(value):
        return False
    if isinstance(value, bool) or isinstance(value, str):
        return True
    if isinstance(value, int):
        return MIN_STORABLE_INT <= value <= MAX_STORABLE_INT
    return math.isfinite(value)


def values_equal(left: Any, right: Any) -> bool:
    """Structural equality over scalar option values.

    ``True == 1`` holds in Python, but a boolean and a number are different
    option values, so the type family is compared too.
    """
    if left is ABSENT or right is ABSENT:
        return left is right
    if isinstance(left, bool) != isinstance(right, bool):
        return False
    return left == right


def _coerce_choices(
    choices: Optional[Iterable[Union[EnumChoice, Dict[str, Any], Tuple[Any, str]]]],
) -> Tuple[EnumChoice, ...]:
    if not choices:
        return ()
    result: List[EnumChoice] = []
    for choice in choices:
        if isinstance(choice, EnumChoice):
            result.append(choice)
        elif isinstance(choice, dict):
            if "value" not in choice:
                raise ConfigError(f"Enum choice without a value: {choice!r}")
            value = choice["value"]
            result.append(EnumChoice(value, str(choice.get("label", value))))
        else:
            value, label = choice
            result.append(EnumChoice(value, str(label)))
    return tuple(result)


@dataclass(frozen=True)
class OptionSpec:
    """Schema of a single option: how it is shown and what it defaults to.

    Use :meth:`create` rather than the constructor to get the same defaults a
    mod gets through ``register_option``.
    """
    id: str
    name: str
    type: OptionType
    default: Any = ABSENT
    description: str = ""
    order: int = 1
    choices: Tuple[EnumChoice, ...] = ()
    min: Optional[float] = None
    max: Optional[float] = None
    step: float = 1

    def __post_init__(self) -> None:
        if self.step <= 0:
            raise ConfigError(f"Option '{self.id}': step must be positive, got {self.step}")
        if self.min is not None and self.max is not None and self.min > self.max:
            raise ConfigError(
                f"Option '{self.id}': min ({self.min}) is greater than max ({self.max})"
            )

    @classmethod
    def create(
        cls,
        option_id: str,
        type: Union[OptionType, str, None] = None,
        name: Optional[str] = None,
        description: Optional[str] = None,
        order: Optional[int] = None,
        default: Any = ABSENT,
        choices: Optional[Iterable[Any]] = None,
        values: Optional[Iterable[Any]] = None,
        min: Optional[float] = None,
        max: Optional[float] = None,
        step: Optional[float] = None,
        desc: Optional[str] = None,
    ) -> "OptionSpec":
        """Build a normalised spec.

        ``values`` and ``desc`` are accepted as aliases of ``choices`` and
        ``description``, the names older mods declare their options with.
        A ``None`` default counts as not supplied.
        """
        option_type = OptionType.parse(type)
        if default is None:
            default = ABSENT
        if default is ABSENT:
            if option_type is OptionType.BOOLEAN:
                default = False
            elif option_type is OptionType.NUMBER:
                default = 0

        return cls(
            id=option_id,
            name=name if name else option_id,
            type=option_type,
            default=default,
            description=description or desc or "",
            order=1 if order is None else int(order),
            choices=_coerce_choices(choices if choices is not None else values),
            min=min,
            max=max,
            step=1 if step is None else step,
        )

    @property
    def has_default(self) -> bool:
        return self.default is not ABSENT


@dataclass
class ModEntry:
    """A mod and the options it declared."""
    id: str
    name: str
    description: str = ""
    options: Dict[str, OptionSpec] = field(default_factory=dict)


@dataclass(frozen=True)
class ChangeEvent:
    """Announces that an option's effective value changed."""
    mod_id: str
    option_id: str
    new_value: Any
    old_value: Any
    token: Any = None
