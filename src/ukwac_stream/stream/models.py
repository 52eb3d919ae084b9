"""Data models for the corpus stream."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class RawBlock:
    """Cleaned text of one ``<text>`` region, ready for the tree parser.

    ``first_line`` and ``last_line`` are 1-based corpus line numbers covering
    the opening line through the closing tag (or the last line before EOF).
    """

    index: int
    text: str
    first_line: int
    last_line: int
    truncated: bool = False

    @property
    def line_count(self) -> int:
        return self.text.count("\n")


@dataclass(frozen=True)
class ParsedDocument:
    """A single dependency-parsed sentence block from the corpus."""

    tree: Any
    block_index: int = 0
    first_line: int = 0
    last_line: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "block_index": self.block_index,
            "first_line": self.first_line,
            "last_line": self.last_line,
            "tree": self.tree,
        }
