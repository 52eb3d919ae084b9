"""Splits cleaned block text into token rows."""

from __future__ import annotations

from typing import TextIO

from ukwac_stream.config.schema import ParserConfig
from ukwac_stream.stream.errors import MalformedRowError

TokenRows = tuple[tuple[str, ...], ...]


class TokenRowParser:
    """Minimal tree parser that returns each token line as a tuple of fields.

    Heads and relations are left as the raw column values; no tree is built.
    """

    def __init__(self, delimiter: str = "\t", min_fields: int = 0) -> None:
        self.delimiter = delimiter
        self.min_fields = min_fields

    @classmethod
    def from_config(cls, config: ParserConfig) -> TokenRowParser:
        return cls(delimiter=config.delimiter, min_fields=config.min_fields)

    def read_next_tree(self, reader: TextIO) -> TokenRows:
        rows = []
        for row_no, line in enumerate(reader, start=1):
            line = line.rstrip("\n")
            if not line:
                continue
            fields = tuple(line.split(self.delimiter))
            if len(fields) < self.min_fields:
                raise MalformedRowError(row_no, len(fields), self.min_fields)
            rows.append(fields)
        return tuple(rows)
