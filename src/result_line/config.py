"""Line format configuration."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class LineFormat:
    """Settings shared by the reader and the writer.

    ``prefix`` is the literal token every line starts with.
    """

    prefix: str = "RESULT"

    def __post_init__(self) -> None:
        if not self.prefix:
            raise ValueError("prefix must not be empty")
        if any(c.isspace() for c in self.prefix):
            raise ValueError(f"prefix must not contain whitespace: {self.prefix!r}")
        if "=" in self.prefix or '"' in self.prefix:
            raise ValueError(f"prefix must not contain '=' or '\"': {self.prefix!r}")


DEFAULT_FORMAT = LineFormat()
