"""Visitor protocol and the driver that walks Python values through it.

The writer never inspects Python objects itself.  :func:`walk` reflects a
value onto a :class:`Visitor`, one call per shape:

    bool / int / float / str / bytes  → visit_bool / _integer / _float / _text
    None, Empty                       → visit_unit
    Character                         → visit_char
    enum.Enum member, Variant         → visit_variant
    Mapping                           → begin_map("map") … end()
    dataclass instance                → begin_map(<class name>) … end()
    list / tuple / set, Named         → visit_sequence
    obj.__result_line__(visitor)      → whatever the object does

Anything else raises :class:`CustomError`.
"""

from __future__ import annotations

import dataclasses
import enum
from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from .errors import CustomError
from .values import (
    Boolean,
    Character,
    Empty,
    Float,
    Integer,
    Named,
    NamedItem,
    ResultValue,
    Text,
)

FLATTEN = "result_line.flatten"


# ---------------------------------------------------------------------------
# Variant — tagged-union values
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Variant:
    """A tagged-union value: a tag plus zero, one or several payloads.

    ``Variant("A")`` has no payload, ``Variant("C", (12,))`` carries one
    value, ``Variant("T", (1, 2))`` is a tuple variant and
    ``Variant("S", fields={"x": 1})`` a struct variant.
    """

    name: str
    values: tuple = ()
    fields: Mapping[str, Any] | None = None

    @property
    def shape(self) -> str:
        if self.fields is not None:
            return "struct"
        if not self.values:
            return "unit"
        if len(self.values) == 1:
            return "newtype"
        return "tuple"

    @property
    def payload(self) -> Any:
        """The single payload of a newtype variant."""
        if self.shape != "newtype":
            raise ValueError(f"{self.shape} variant {self.name!r} has no single payload")
        return self.values[0]


def flatten(**kwargs: Any) -> Any:
    """A dataclass field whose entries are written in place of the field.

    ::

        @dataclass
        class Run:
            name: str
            params: dict = flatten(default_factory=dict)
    """
    metadata = dict(kwargs.pop("metadata", None) or {})
    metadata[FLATTEN] = True
    return field(metadata=metadata, **kwargs)


def is_flattened(f: dataclasses.Field) -> bool:
    return bool(f.metadata.get(FLATTEN, False))


# ---------------------------------------------------------------------------
# Visitor
# ---------------------------------------------------------------------------

class Visitor(ABC):
    """Capabilities a consumer of :func:`walk` has to provide."""

    @abstractmethod
    def visit_bool(self, value: bool) -> ResultValue: ...

    @abstractmethod
    def visit_integer(self, value: int) -> ResultValue: ...

    @abstractmethod
    def visit_float(self, value: float) -> ResultValue: ...

    @abstractmethod
    def visit_char(self, value: str) -> ResultValue: ...

    @abstractmethod
    def visit_text(self, value: str) -> ResultValue: ...

    @abstractmethod
    def visit_unit(self) -> ResultValue: ...

    @abstractmethod
    def visit_variant(self, variant: Variant) -> ResultValue: ...

    @abstractmethod
    def visit_sequence(self, name: str) -> ResultValue: ...

    @abstractmethod
    def begin_map(self, name: str) -> None: ...

    @abstractmethod
    def visit_key(self, key: Any) -> None: ...

    @abstractmethod
    def visit_value(self, value: Any) -> None: ...

    @abstractmethod
    def visit_flattened(self, value: Any) -> None:
        """Visit the entries of *value* as if they belonged to the map
        currently being visited."""

    @abstractmethod
    def end(self) -> ResultValue: ...


# ---------------------------------------------------------------------------
# Driver
# ---------------------------------------------------------------------------

_SEQUENCE_NAMES = {
    list: "seq",
    tuple: "tuple",
    set: "set",
    frozenset: "set",
}


def walk(obj: Any, visitor: Visitor) -> ResultValue:
    """Drive *visitor* over *obj*. Returns what the visitor returns."""
    adapter = getattr(type(obj), "__result_line__", None)
    if adapter is not None:
        return adapter(obj, visitor)

    if obj is None or obj is Empty:
        return visitor.visit_unit()
    if isinstance(obj, (bool, Boolean)):
        return visitor.visit_bool(bool(_unwrap(obj)))
    if isinstance(obj, Character):
        return visitor.visit_char(obj.value)
    if isinstance(obj, enum.Enum):
        return visitor.visit_variant(Variant(obj.name))
    if isinstance(obj, (int, Integer)):
        return visitor.visit_integer(int(_unwrap(obj)))
    if isinstance(obj, (float, Float)):
        return visitor.visit_float(float(_unwrap(obj)))
    if isinstance(obj, (str, Text)):
        return visitor.visit_text(str(_unwrap(obj)))
    if isinstance(obj, (bytes, bytearray)):
        return visitor.visit_text(bytes(obj).decode("utf-8", errors="replace"))
    if isinstance(obj, Variant):
        return visitor.visit_variant(obj)
    if isinstance(obj, (Named, NamedItem)):
        return visitor.visit_sequence("named item")
    if isinstance(obj, Mapping):
        return _walk_map("map", obj.items(), visitor)
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return _walk_record(obj, visitor)
    for kind, name in _SEQUENCE_NAMES.items():
        if isinstance(obj, kind):
            return visitor.visit_sequence(name)
    raise CustomError(f"cannot express value of type {type(obj).__name__}")


def _unwrap(obj: Any) -> Any:
    if isinstance(obj, (Boolean, Integer, Float, Text)):
        return obj.value
    return obj


def _walk_map(name: str, items, visitor: Visitor) -> ResultValue:
    visitor.begin_map(name)
    for key, value in items:
        visitor.visit_key(key)
        visitor.visit_value(value)
    return visitor.end()


def _walk_record(obj: Any, visitor: Visitor) -> ResultValue:
    visitor.begin_map(type(obj).__name__)
    for f in dataclasses.fields(obj):
        value = getattr(obj, f.name)
        if is_flattened(f):
            visitor.visit_flattened(value)
        else:
            visitor.visit_key(f.name)
            visitor.visit_value(value)
    return visitor.end()
