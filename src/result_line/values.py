"""Value types for result lines."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Union


# ---------------------------------------------------------------------------
# Empty — singleton absence marker
# ---------------------------------------------------------------------------

class _EmptyType:
    """Sentinel for a missing value. A pair holding it is left out of the line."""

    __slots__ = ()

    _instance: _EmptyType | None = None

    def __new__(cls) -> _EmptyType:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "Empty"

    def __str__(self) -> str:
        return ""

    def __bool__(self) -> bool:
        return False

    def is_empty(self) -> bool:
        return True


Empty = _EmptyType()


# ---------------------------------------------------------------------------
# Scalars
# ---------------------------------------------------------------------------

class _Item:
    __slots__ = ()

    def is_empty(self) -> bool:
        return False


@dataclass(frozen=True, slots=True)
class Integer(_Item):
    value: int

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True, slots=True)
class Float(_Item):
    value: float

    def __str__(self) -> str:
        v = self.value
        if math.isnan(v):
            return "NaN"
        if math.isinf(v):
            return "inf" if v > 0 else "-inf"
        if v == int(v):
            return str(int(v))
        return repr(v)


@dataclass(frozen=True, slots=True)
class Boolean(_Item):
    value: bool

    def __str__(self) -> str:
        return "true" if self.value else "false"


@dataclass(frozen=True, slots=True)
class Character(_Item):
    value: str  # exactly one code point

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or len(self.value) != 1:
            raise ValueError(f"Character needs a single code point, got {self.value!r}")

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class Text(_Item):
    value: str

    def __str__(self) -> str:
        return self.value


_SCALARS = (Integer, Float, Boolean, Character, Text)


def is_scalar(value: object) -> bool:
    """True for the variants allowed in key position."""
    return isinstance(value, _SCALARS)


# ---------------------------------------------------------------------------
# Named pairs
# ---------------------------------------------------------------------------

def _render(value: ResultValue) -> str:
    text = str(value)
    if any(c.isspace() for c in text):
        return f'"{text}"'
    return text


@dataclass(frozen=True, slots=True)
class NamedItem:
    """One ``key=value`` unit of a result line.

    Native values are converted with :func:`to_result_value`, so
    ``NamedItem("a key", 12)`` renders as ``"a key"=12``.  Text containing
    whitespace is wrapped in double quotes; nothing is escaped.
    """

    name: ResultValue
    value: ResultValue = Empty

    def __post_init__(self) -> None:
        name = to_result_value(self.name)
        if not is_scalar(name):
            raise ValueError(f"name of a NamedItem must be a scalar, got {name!r}")
        object.__setattr__(self, "name", name)
        object.__setattr__(self, "value", to_result_value(self.value))

    def __str__(self) -> str:
        return f"{_render(self.name)}={_render(self.value)}"


@dataclass(frozen=True, slots=True)
class Named(_Item):
    item: NamedItem

    @property
    def key(self) -> ResultValue:
        return self.item.name

    @property
    def value(self) -> ResultValue:
        return self.item.value

    def __str__(self) -> str:
        return str(self.item)


ResultValue = Union[Named, Integer, Float, Boolean, Character, Text, _EmptyType]


# ---------------------------------------------------------------------------
# Conversions from native values
# ---------------------------------------------------------------------------

def to_result_value(obj: object) -> ResultValue:
    """Convert a native primitive to a ResultValue.

    - ResultValue → unchanged
    - bool → Boolean (checked before int)
    - int → Integer
    - float → Float
    - str → Text
    - None → Empty
    """
    if obj is Empty or isinstance(obj, _Item):
        return obj
    if isinstance(obj, bool):
        return Boolean(obj)
    if isinstance(obj, int):
        return Integer(int(obj))
    if isinstance(obj, float):
        return Float(obj)
    if isinstance(obj, str):
        return Text(obj)
    if obj is None:
        return Empty
    raise TypeError(f"cannot convert {type(obj).__name__} to a result value")
