"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path
from typing import TextIO

import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures"


class RecordingParser:
    """Tree parser stub that returns the text it was given."""

    def __init__(self) -> None:
        self.seen: list[str] = []

    def read_next_tree(self, reader: TextIO) -> str:
        text = reader.read()
        self.seen.append(text)
        return text


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES_DIR


@pytest.fixture
def config_path() -> Path:
    return FIXTURES_DIR / "config_test.yaml"


@pytest.fixture
def sample_corpus() -> Path:
    return FIXTURES_DIR / "sample_ukwac.conll"


@pytest.fixture
def recording_parser() -> RecordingParser:
    return RecordingParser()


@pytest.fixture
def write_corpus(tmp_path: Path):
    """Write corpus text to a temporary file and return its path."""

    def _write(text: str, name: str = "corpus.conll") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write
