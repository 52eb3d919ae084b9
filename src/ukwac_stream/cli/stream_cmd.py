"""CLI handlers for the stream-documents and count-documents subcommands."""

from __future__ import annotations

import logging
from itertools import islice
from pathlib import Path

import orjson
import typer

from ukwac_stream.config.loader import load_config
from ukwac_stream.config.schema import StreamConfig
from ukwac_stream.parsers.row_parser import TokenRowParser
from ukwac_stream.stream.dependency_stream import UkWacDependencyStream
from ukwac_stream.utils.logging_setup import setup_logging

logger = logging.getLogger(__name__)


def _prepare(config_path: str, input_path: str | None) -> StreamConfig:
    cfg = load_config(config_path)
    setup_logging(cfg.log_level)
    if input_path:
        cfg.corpus.path = Path(input_path)
    return cfg


def _open_stream(cfg: StreamConfig) -> UkWacDependencyStream:
    parser = TokenRowParser.from_config(cfg.parser)
    return UkWacDependencyStream.from_config(cfg.corpus, parser)


def run_stream(
    config_path: str,
    input_path: str | None,
    output_path: str | None,
    limit: int | None,
) -> None:
    cfg = _prepare(config_path, input_path)
    out = Path(output_path) if output_path else cfg.output_path

    count = 0
    with _open_stream(cfg) as stream:
        documents = islice(stream, limit) if limit is not None else stream
        if out is None:
            for doc in documents:
                typer.echo(orjson.dumps(doc.to_dict()).decode("utf-8"))
                count += 1
        else:
            out.parent.mkdir(parents=True, exist_ok=True)
            with out.open("wb") as fh:
                for doc in documents:
                    fh.write(orjson.dumps(doc.to_dict()) + b"\n")
                    count += 1
    logger.info("Wrote %d documents to %s", count, out or "stdout")


def run_count(config_path: str, input_path: str | None) -> int:
    cfg = _prepare(config_path, input_path)
    count = 0
    with _open_stream(cfg) as stream:
        for _ in stream:
            count += 1
    typer.echo(str(count))
    return count
