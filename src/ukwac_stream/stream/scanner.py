"""Block scanning over a tagged corpus stream."""

from __future__ import annotations

import logging
from typing import TextIO

from ukwac_stream.config.schema import MarkupConfig
from ukwac_stream.stream.models import RawBlock

logger = logging.getLogger(__name__)


def scan_block(
    reader: TextIO,
    index: int = 0,
    lines_consumed: int = 0,
    markup: MarkupConfig | None = None,
) -> RawBlock | None:
    """Consume one ``<text>`` region from *reader*.

    Returns ``None`` when the reader is already at end-of-file. The first line
    read is taken as the opening tag and discarded whatever it contains.
    Sentence delimiters and zero-length lines are dropped; every other line is
    kept verbatim and terminated with a newline. Reaching end-of-file before
    the closing tag ends the block without error.

    *lines_consumed* is the number of corpus lines read before this call and is
    used only to number the lines of the returned block.
    """
    markup = markup or MarkupConfig()
    prefixes = tuple(markup.sentence_prefixes)

    # The <text ...> line, or end of file.
    if not reader.readline():
        return None
    line_no = lines_consumed + 1
    first_line = line_no

    parts: list[str] = []
    truncated = True
    for raw in iter(reader.readline, ""):
        line_no += 1
        line = raw.rstrip("\r\n")
        if line == markup.text_close:
            truncated = False
            break
        if prefixes and line.startswith(prefixes):
            continue
        if not line and markup.skip_blank_lines:
            continue
        parts.append(line)
        parts.append("\n")

    if truncated:
        logger.warning(
            "Block %d starting at line %d has no closing %s before end of file",
            index,
            first_line,
            markup.text_close,
        )
    return RawBlock(
        index=index,
        text="".join(parts),
        first_line=first_line,
        last_line=line_no,
        truncated=truncated,
    )
