"""Exceptions raised by the corpus stream."""

from __future__ import annotations


class UkWacStreamError(Exception):
    """Base class for errors raised by this package."""


class StreamExhaustedError(UkWacStreamError, LookupError):
    """A document was requested from a stream with nothing left to return."""


class UnsupportedOperationError(UkWacStreamError, NotImplementedError):
    """The stream is read-only; documents cannot be removed from it."""


class MalformedRowError(UkWacStreamError, ValueError):
    """A token row has fewer fields than the parser requires."""

    def __init__(self, row: int, found: int, expected: int) -> None:
        super().__init__(
            f"Malformed token row {row}: {found} fields, expected at least {expected}"
        )
        self.row = row
        self.found = found
        self.expected = expected
