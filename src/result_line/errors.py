"""Error types for result line encoding and decoding."""

from __future__ import annotations


class ResultLineError(Exception):
    """Base class for all errors raised by result_line."""


class MalformedLineError(ResultLineError):
    """The line does not start with the literal prefix."""

    def __init__(self, line: str, prefix: str = "RESULT") -> None:
        self.line = line
        self.prefix = prefix
        super().__init__(f"line does not start with {prefix!r}: {line[:40]!r}")


class UnsupportedShapeError(ResultLineError):
    """The encoder was handed a shape it cannot flatten into a line."""

    def __init__(self, shape: str) -> None:
        self.shape = shape
        super().__init__(f'unsupported input type "{shape}"')


class UnnamedItemError(ResultLineError):
    """A value was produced without a scalar key to pair it with."""

    def __init__(self) -> None:
        super().__init__("unnamed item found")


class CustomError(ResultLineError):
    """Raised by the value-producing side, passed through unchanged."""

    def __init__(self, message: str) -> None:
        self.message = str(message)
        super().__init__(self.message)
