"""Reader layer: turns a result line into (key, value) pairs.

Every helper takes the full line and a start offset and returns
``(result, new_offset)``, or ``None`` when nothing could be matched there.
Nothing is consumed on failure, so alternatives can simply be tried in turn.
"""

from __future__ import annotations

import logging
import re
from typing import Callable, Iterator, TypeVar

from .config import DEFAULT_FORMAT, LineFormat
from .errors import MalformedLineError
from .values import Boolean, Float, Integer, ResultValue, Text

logger = logging.getLogger(__name__)

T = TypeVar("T")
Pair = tuple[str, ResultValue]
Step = tuple[T, int]

_WS_RE = re.compile(r"[ \t]+")
_INT_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(
    r"[+-]?(?:(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|infinity|inf|nan)",
    re.IGNORECASE,
)

_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1


# ---------------------------------------------------------------------------
# Tokens
# ---------------------------------------------------------------------------

def parse_quoted(line: str, pos: int) -> Step[str] | None:
    """``"..."`` with at least one character inside. No escapes."""
    if not line.startswith('"', pos):
        return None
    end = line.find('"', pos + 1)
    if end <= pos + 1:
        return None
    return line[pos + 1:end], end + 1


def parse_key(line: str, pos: int) -> Step[str] | None:
    """A quoted string, or everything up to the next ``=``.

    A bare key may contain spaces: ``a b=1`` has the key ``a b``.
    """
    quoted = parse_quoted(line, pos)
    if quoted is not None:
        return quoted
    end = line.find("=", pos)
    if end <= pos:
        return None
    return line[pos:end], end


def _parse_bool(line: str, pos: int) -> Step[ResultValue] | None:
    for literal, flag in (("true", True), ("false", False)):
        if line.startswith(literal, pos):
            return Boolean(flag), pos + len(literal)
    return None


def _parse_int(line: str, pos: int) -> Step[ResultValue] | None:
    # Only taken when whitespace follows; otherwise 8123.23 would stop after
    # 8123. The whitespace itself is left for the next pair.
    m = _INT_RE.match(line, pos)
    if m is None or not _WS_RE.match(line, m.end()):
        return None
    value = int(m.group())
    if not _I64_MIN <= value <= _I64_MAX:
        return None
    return Integer(value), m.end()


def _parse_float(line: str, pos: int) -> Step[ResultValue] | None:
    m = _FLOAT_RE.match(line, pos)
    if m is None:
        return None
    return Float(float(m.group())), m.end()


def _parse_text(line: str, pos: int) -> Step[ResultValue] | None:
    quoted = parse_quoted(line, pos)
    if quoted is not None:
        return Text(quoted[0]), quoted[1]
    return None


def _parse_fallback(line: str, pos: int) -> Step[ResultValue] | None:
    quoted = _parse_text(line, pos)
    if quoted is not None:
        return quoted
    bare = parse_key(line, pos)
    if bare is None:
        return None
    return Text(bare[0]), bare[1]


# Order matters: first match wins.
_VALUE_PARSERS: tuple[Callable[[str, int], Step[ResultValue] | None], ...] = (
    _parse_text,
    _parse_bool,
    _parse_int,
    _parse_float,
    _parse_fallback,
)


def parse_value(line: str, pos: int) -> Step[ResultValue] | None:
    """Parse one value, inferring its type.

    Tried in order:
        "quoted text"      → Text
        true / false       → Boolean
        -123 + whitespace  → Integer
        1.5, 1e3, 7, nan   → Float
        anything else      → Text, read like a key (up to the next =)

    An integer at the very end of the line has no whitespace after it and
    therefore comes back as Float.  A bare text value runs up to the next
    ``=``, so in ``a=hello b=1`` the value of ``a`` is ``hello b``; with no
    ``=`` left on the line it fails and parsing stops.
    """
    for parser in _VALUE_PARSERS:
        result = parser(line, pos)
        if result is not None:
            return result
    return None


def parse_named_item(line: str, pos: int) -> Step[Pair] | None:
    """``key=value``"""
    key = parse_key(line, pos)
    if key is None:
        return None
    name, pos = key
    if not line.startswith("=", pos):
        return None
    value = parse_value(line, pos + 1)
    if value is None:
        return None
    item, pos = value
    return (name, item), pos


# ---------------------------------------------------------------------------
# Lines
# ---------------------------------------------------------------------------

def _iter_items(line: str, pos: int) -> Iterator[Pair]:
    while True:
        ws = _WS_RE.match(line, pos)
        if ws is None:
            break
        parsed = parse_named_item(line, ws.end())
        if parsed is None:
            break
        pair, pos = parsed
        yield pair

    if pos < len(line):
        logger.debug("Discarding unparsed remainder %r", line[pos:])


def iter_pairs(line: str, fmt: LineFormat = DEFAULT_FORMAT) -> Iterator[Pair]:
    """Yield the pairs of *line* lazily.

    The prefix is checked immediately; a line without it raises
    :class:`MalformedLineError`.  Anything after the last pair that can be
    parsed is dropped without an error.
    """
    if not isinstance(line, str):
        raise TypeError(f"expected str, got {type(line).__name__}")
    if not line.startswith(fmt.prefix):
        raise MalformedLineError(line, fmt.prefix)
    return _iter_items(line, len(fmt.prefix))


def parse_pairs(line: str, fmt: LineFormat = DEFAULT_FORMAT) -> list[Pair]:
    """Parse *line* into an ordered list of ``(key, value)`` pairs."""
    return list(iter_pairs(line, fmt))


def from_string(
    line: str,
    target: Callable[[Iterator[Pair]], T] = dict,
    fmt: LineFormat = DEFAULT_FORMAT,
) -> T:
    """Parse *line* and hand the pairs to *target*.

    *target* is anything built from an iterable of pairs: ``dict`` keeps the
    last value of a repeated key, ``list`` keeps every pair in order.

    Example::

        from_string('RESULT a="some value" "a key"=12315 c=true')
        → {"a": Text("some value"), "a key": Integer(12315), "c": Boolean(True)}
    """
    return target(iter_pairs(line, fmt))
