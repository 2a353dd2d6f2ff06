"""Positional scanner over one StatsD line."""

from __future__ import annotations

import re

from .errors import FloatParseError

# float() also accepts surrounding whitespace and digit underscores; the wire
# format does not.
_FLOAT_RE = re.compile(
    r"^[+-]?(?:inf|infinity|nan|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)$",
    re.IGNORECASE,
)


def parse_float(text: str) -> float:
    """Parse a float literal strictly, raising FloatParseError otherwise."""
    if not _FLOAT_RE.match(text):
        raise FloatParseError(text)
    return float(text)


class Cursor:
    """Scan a line code point by code point.

    Trailing whitespace (line terminators included) is trimmed up front, so a
    line read from a socket or file decodes the same as the bare message.
    """

    __slots__ = ("text", "pos")

    def __init__(self, line: str) -> None:
        self.text = line.rstrip()
        self.pos = 0

    def __len__(self) -> int:
        return len(self.text)

    def take_until(self, stop: str) -> str:
        """Consume up to and past the first char in `stop`; return what preceded it."""
        start = self.pos
        end = len(self.text)
        while self.pos < end:
            ch = self.text[self.pos]
            self.pos += 1
            if ch in stop:
                return self.text[start : self.pos - 1]
        return self.text[start:]

    def take_float_until(self, stop: str) -> float:
        return parse_float(self.take_until(stop))

    def peek(self) -> str | None:
        if self.pos >= len(self.text):
            return None
        return self.text[self.pos]

    def last(self) -> str | None:
        if self.pos == 0:
            return None
        return self.text[self.pos - 1]

    def skip(self) -> None:
        if self.pos < len(self.text):
            self.pos += 1
