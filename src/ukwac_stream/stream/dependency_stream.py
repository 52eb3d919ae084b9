"""Document stream over a ukWaC-style dependency-parsed corpus file."""

from __future__ import annotations

import io
import logging
import threading
from pathlib import Path
from typing import TextIO

from ukwac_stream.config.schema import CorpusConfig, MarkupConfig
from ukwac_stream.stream.base import TreeParser
from ukwac_stream.stream.errors import StreamExhaustedError, UnsupportedOperationError
from ukwac_stream.stream.models import ParsedDocument
from ukwac_stream.stream.scanner import scan_block

logger = logging.getLogger(__name__)


class UkWacDependencyStream:
    """Iterates over a corpus file yielding one :class:`ParsedDocument` per block.

    Each block is the content of a ``<text>`` region in the CoNLL format,
    with sentence tags and blank lines removed. The cleaned text is handed to
    *parser*, which turns it into a dependency tree.

    The next document is always read one step ahead: construction parses the
    first block and every :meth:`pull` parses the following one before
    returning. :meth:`has_next` therefore never touches the file.

    Intended for a single consumer. :meth:`pull` and ``next()`` are serialized,
    and ``next()`` checks and advances under one lock, but a separate
    :meth:`has_next` followed by :meth:`pull` is not atomic.

    The file is closed once the last block has been read, on :meth:`close`, on
    leaving a ``with`` block, and after any read or parse failure.
    """

    def __init__(
        self,
        path: Path | str,
        parser: TreeParser,
        *,
        encoding: str = "utf-8",
        markup: MarkupConfig | None = None,
    ) -> None:
        self.path = Path(path)
        self._parser = parser
        self._markup = markup or MarkupConfig()
        self._lock = threading.RLock()
        self._blocks_read = 0
        self._lines_consumed = 0
        self._next_doc: ParsedDocument | None = None
        self._reader: TextIO | None = self.path.open("r", encoding=encoding)
        logger.info("Opened corpus %s", self.path)
        self._prime()

    @classmethod
    def from_config(
        cls, corpus: CorpusConfig, parser: TreeParser
    ) -> UkWacDependencyStream:
        return cls(corpus.path, parser, encoding=corpus.encoding, markup=corpus.markup)

    @property
    def blocks_read(self) -> int:
        return self._blocks_read

    @property
    def closed(self) -> bool:
        return self._reader is None

    def has_next(self) -> bool:
        """Return ``True`` if there are more documents to return."""
        return self._next_doc is not None

    def pull(self) -> ParsedDocument:
        """Return the next document and read ahead to the one after it."""
        with self._lock:
            current = self._next_doc
            if current is None:
                raise StreamExhaustedError(f"No more documents in {self.path}")
            self._prime()
            return current

    def remove(self) -> None:
        raise UnsupportedOperationError("removing documents is not supported")

    def close(self) -> None:
        with self._lock:
            self._next_doc = None
            if self._reader is not None:
                self._reader.close()
                self._reader = None

    def __iter__(self) -> UkWacDependencyStream:
        return self

    def __next__(self) -> ParsedDocument:
        with self._lock:
            if self._next_doc is None:
                raise StopIteration
            return self.pull()

    def __enter__(self) -> UkWacDependencyStream:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def __repr__(self) -> str:
        state = "closed" if self.closed else "open"
        return f"<{type(self).__name__} {str(self.path)!r} {state} blocks_read={self._blocks_read}>"

    def _prime(self) -> None:
        try:
            self._next_doc = self._advance()
        except Exception:
            self.close()
            raise

    def _advance(self) -> ParsedDocument | None:
        if self._reader is None:
            return None

        block = scan_block(
            self._reader, self._blocks_read, self._lines_consumed, self._markup
        )
        if block is None:
            logger.info(
                "Finished %s: %d documents from %d lines",
                self.path,
                self._blocks_read,
                self._lines_consumed,
            )
            self.close()
            return None

        self._blocks_read += 1
        self._lines_consumed = block.last_line
        logger.debug(
            "Block %d: lines %d-%d, %d token lines",
            block.index,
            block.first_line,
            block.last_line,
            block.line_count,
        )

        try:
            tree = self._parser.read_next_tree(io.StringIO(block.text))
        except Exception as exc:
            exc.add_note(
                f"while parsing block {block.index} "
                f"(lines {block.first_line}-{block.last_line}) of {self.path}"
            )
            raise
        return ParsedDocument(
            tree=tree,
            block_index=block.index,
            first_line=block.first_line,
            last_line=block.last_line,
        )
