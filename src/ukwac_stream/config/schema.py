"""Pydantic v2 configuration models for the corpus stream."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, Field


class MarkupConfig(BaseModel):
    """Structural markup recognised inside a corpus file."""

    text_close: str = Field(default="</text>", min_length=1)
    sentence_prefixes: list[Annotated[str, Field(min_length=1)]] = Field(
        default_factory=lambda: ["<s>", "</s>"]
    )
    skip_blank_lines: bool = True


class CorpusConfig(BaseModel):
    """Location and layout of a single tagged corpus file."""

    path: Path = Path("ukwac.conll")
    encoding: str = "utf-8"
    markup: MarkupConfig = Field(default_factory=MarkupConfig)


class ParserConfig(BaseModel):
    """Settings for the bundled token row parser."""

    delimiter: str = "\t"
    min_fields: int = Field(default=0, ge=0)


class StreamConfig(BaseModel):
    """Top-level configuration."""

    corpus: CorpusConfig = Field(default_factory=CorpusConfig)
    parser: ParserConfig = Field(default_factory=ParserConfig)
    output_path: Path | None = None
    log_level: str = "INFO"
