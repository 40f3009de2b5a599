"""result_line — read and write ``RESULT key=value ...`` lines."""

from .config import DEFAULT_FORMAT, LineFormat
from .errors import (
    CustomError,
    MalformedLineError,
    ResultLineError,
    UnnamedItemError,
    UnsupportedShapeError,
)
from .reader import from_string, iter_pairs, parse_pairs
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
    to_result_value,
)
from .walker import Variant, Visitor, flatten, walk
from .writer import ResultLineEncoder, to_items, to_string

__all__ = [
    "from_string",
    "iter_pairs",
    "parse_pairs",
    "to_string",
    "to_items",
    "ResultLineEncoder",
    "Visitor",
    "Variant",
    "flatten",
    "walk",
    "LineFormat",
    "DEFAULT_FORMAT",
    "ResultValue",
    "Named",
    "NamedItem",
    "Integer",
    "Float",
    "Boolean",
    "Character",
    "Text",
    "Empty",
    "is_scalar",
    "to_result_value",
    "ResultLineError",
    "MalformedLineError",
    "UnsupportedShapeError",
    "UnnamedItemError",
    "CustomError",
]
