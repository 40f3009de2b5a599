"""Writer: renders maps and records as result lines.

Only flat values work.  A nested map or record has to sit in a field
declared with :func:`~result_line.walker.flatten`; its entries are then
written at the top level.  Fields holding ``None`` or a variant without
payload are left out.

Example::

    class E(enum.Enum):
        A = 1

    @dataclass
    class Test:
        a: str
        b: int
        c: dict = flatten(default_factory=dict)
        d: bool = True
        e: E = E.A

    to_string(Test("hello world", -123423904, {"map key": 100}))
    → 'RESULT a="hello world" b=-123423904 "map key"=100 d=true'
"""

from __future__ import annotations

import logging
from typing import Any

from .config import DEFAULT_FORMAT, LineFormat
from .errors import UnnamedItemError, UnsupportedShapeError
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
    is_scalar,
)
from .walker import Variant, Visitor, walk

logger = logging.getLogger(__name__)

_SHAPE_NAMES = {
    Boolean: "bool",
    Integer: "integer",
    Float: "float",
    Character: "char",
    Text: "text",
}


class ResultLineEncoder(Visitor):
    """Collects the ``key=value`` items of one value.

    ``pending_key`` holds the last key visited until its value arrives;
    ``output`` holds the finished items in visiting order.
    """

    def __init__(self, fmt: LineFormat = DEFAULT_FORMAT) -> None:
        self.fmt = fmt
        self._reset()

    def _reset(self) -> None:
        self.pending_key: ResultValue | None = None
        self.output: list[NamedItem] = []
        self._depth = 0
        self._in_key = False
        self._flatten_next = False

    # -- Entry points ---------------------------------------------------

    def encode(self, obj: Any) -> str:
        """Render *obj* as one line (no trailing newline)."""
        return " ".join([self.fmt.prefix, *(str(item) for item in self.items(obj))])

    def items(self, obj: Any) -> list[NamedItem]:
        """Collect the items of *obj* without joining them."""
        self._reset()
        walk(obj, self)
        return self.output

    # -- Scalars --------------------------------------------------------

    def _eat(self, item: ResultValue) -> ResultValue:
        """Pair *item* with the pending key, if there is one."""
        if self._depth == 0 and item is not Empty:
            raise UnsupportedShapeError(_SHAPE_NAMES[type(item)])
        if self.pending_key is None:
            return item
        name, self.pending_key = self.pending_key, None
        return Named(NamedItem(name, item))

    def visit_bool(self, value: bool) -> ResultValue:
        return self._eat(Boolean(value))

    def visit_integer(self, value: int) -> ResultValue:
        return self._eat(Integer(value))

    def visit_float(self, value: float) -> ResultValue:
        return self._eat(Float(value))

    def visit_char(self, value: str) -> ResultValue:
        return self._eat(Character(value))

    def visit_text(self, value: str) -> ResultValue:
        return self._eat(Text(value))

    def visit_unit(self) -> ResultValue:
        return self._eat(Empty)

    def visit_variant(self, variant: Variant) -> ResultValue:
        shape = variant.shape
        if shape == "unit":
            return self.visit_unit()
        if shape == "newtype":
            return walk(variant.payload, self)
        raise UnsupportedShapeError(f"{shape} variant")

    def visit_sequence(self, name: str) -> ResultValue:
        raise UnsupportedShapeError(name)

    # -- Maps and records -----------------------------------------------

    def begin_map(self, name: str) -> None:
        if self._in_key:
            raise UnnamedItemError()
        if self._depth > 0 and not self._flatten_next:
            raise UnsupportedShapeError(f"nested {name}")
        if self._flatten_next:
            logger.debug("Flattening %s into the enclosing line", name)
        self._flatten_next = False
        self._depth += 1

    def visit_key(self, key: Any) -> None:
        # Only the map a flattened field starts with is taken in place.
        self._flatten_next = False
        self.pending_key = None
        self._in_key = True
        try:
            name = walk(key, self)
        finally:
            self._in_key = False
        if not is_scalar(name):
            raise UnnamedItemError()
        self.pending_key = name

    def visit_value(self, value: Any) -> None:
        self._flatten_next = False
        if self.pending_key is None:
            raise UnnamedItemError()
        result = walk(value, self)
        if not isinstance(result, Named):
            raise UnnamedItemError()
        if result.value.is_empty():
            logger.debug("Leaving out %s, it has no value", result.key)
            return
        self.output.append(result.item)

    def visit_flattened(self, value: Any) -> None:
        self.pending_key = None
        self._flatten_next = True
        try:
            result = walk(value, self)
        finally:
            unused = self._flatten_next
            self._flatten_next = False
        if unused and result is not Empty:
            raise UnsupportedShapeError(f"flattened {_SHAPE_NAMES.get(type(result), 'value')}")

    def end(self) -> ResultValue:
        self._depth -= 1
        return Empty


def to_items(obj: Any) -> list[NamedItem]:
    """The items *obj* would be written as, in order."""
    return ResultLineEncoder().items(obj)


def to_string(obj: Any, fmt: LineFormat = DEFAULT_FORMAT) -> str:
    """Serialize a map or dataclass instance into a result line.

    Raises:
        UnsupportedShapeError: *obj* (or a field of it) is a sequence, a
            tuple or struct variant, an unflattened nested map, or a bare
            scalar.
        UnnamedItemError: a key is not a scalar.
        CustomError: a value cannot be expressed at all.
    """
    return ResultLineEncoder(fmt).encode(obj)
