"""Base protocol for dependency tree parsers."""

from __future__ import annotations

from typing import Any, Protocol, TextIO, runtime_checkable


@runtime_checkable
class TreeParser(Protocol):
    """Protocol that all tree parsers must implement."""

    def read_next_tree(self, reader: TextIO) -> Any:
        """Read one dependency tree from *reader*."""
        ...
