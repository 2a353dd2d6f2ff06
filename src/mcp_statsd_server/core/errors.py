"""Decode failure taxonomy."""

from __future__ import annotations

from enum import Enum


class ParseErrorKind(str, Enum):
    """Closed set of reasons a line can be rejected."""

    EMPTY_INPUT = "empty_input"
    INCOMPLETE_INPUT = "incomplete_input"  # reserved: no grammar path produces it yet
    NO_NAME = "no_name"
    VALUE_NOT_FLOAT = "value_not_float"
    SAMPLE_RATE_NOT_FLOAT = "sample_rate_not_float"
    UNKNOWN_METRIC_TYPE = "unknown_metric_type"

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]


_DESCRIPTIONS = {
    ParseErrorKind.EMPTY_INPUT: "Empty input",
    ParseErrorKind.INCOMPLETE_INPUT: "Incomplete input",
    ParseErrorKind.NO_NAME: "No name in input",
    ParseErrorKind.VALUE_NOT_FLOAT: "Value is not a float",
    ParseErrorKind.SAMPLE_RATE_NOT_FLOAT: "Sample rate is not a float",
    ParseErrorKind.UNKNOWN_METRIC_TYPE: "Unknown metric type",
}


class ParseError(ValueError):
    """A line was rejected; the whole line is discarded, never partially decoded."""

    def __init__(self, kind: ParseErrorKind, line: str | None = None) -> None:
        super().__init__(kind.description)
        self.kind = kind
        self.line = line

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParseError):
            return NotImplemented
        return self.kind is other.kind and self.line == other.line

    def __hash__(self) -> int:
        return hash((self.kind, self.line))

    def __repr__(self) -> str:
        return f"ParseError({self.kind.name}, line={self.line!r})"


class FloatParseError(ValueError):
    """Raised by the cursor when a field is not a float literal."""

    def __init__(self, text: str) -> None:
        super().__init__(f"not a float literal: {text!r}")
        self.text = text
