"""Tests for configuration schema and loader."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from ukwac_stream.config.loader import load_config
from ukwac_stream.config.schema import (
    CorpusConfig,
    MarkupConfig,
    ParserConfig,
    StreamConfig,
)


class TestStreamConfig:
    def test_defaults(self):
        cfg = StreamConfig()
        assert cfg.log_level == "INFO"
        assert cfg.output_path is None
        assert cfg.corpus.encoding == "utf-8"

    def test_markup_defaults(self):
        markup = MarkupConfig()
        assert markup.text_close == "</text>"
        assert markup.sentence_prefixes == ["<s>", "</s>"]
        assert markup.skip_blank_lines is True

    def test_parser_defaults(self):
        parser = ParserConfig()
        assert parser.delimiter == "\t"
        assert parser.min_fields == 0

    def test_negative_min_fields_rejected(self):
        with pytest.raises(ValidationError):
            ParserConfig(min_fields=-1)

    def test_corpus_path_coerced(self):
        corpus = CorpusConfig(path="data/x.conll")
        assert corpus.path == Path("data/x.conll")


class TestLoadConfig:
    def test_load_test_config(self, config_path: Path):
        cfg = load_config(config_path)
        assert cfg.log_level == "WARNING"
        assert cfg.corpus.path == config_path.parent / "sample_ukwac.conll"
        assert cfg.corpus.path.exists()
        assert cfg.parser.delimiter == "\t"
        assert cfg.parser.min_fields == 6

    def test_load_empty_yaml(self, tmp_path: Path):
        p = tmp_path / "empty.yaml"
        p.write_text("")
        cfg = load_config(p)
        assert cfg.corpus.path == tmp_path / "ukwac.conll"

    def test_relative_paths_follow_config_file(self, tmp_path: Path):
        p = tmp_path / "conf" / "stream.yaml"
        p.parent.mkdir()
        p.write_text("corpus:\n  path: data/c.conll\noutput_path: out/docs.jsonl\n")
        cfg = load_config(p)
        assert cfg.corpus.path == tmp_path / "conf" / "data" / "c.conll"
        assert cfg.output_path == tmp_path / "conf" / "out" / "docs.jsonl"

    def test_absolute_paths_kept(self, tmp_path: Path):
        corpus = tmp_path / "abs.conll"
        p = tmp_path / "conf.yaml"
        p.write_text(f"corpus:\n  path: {corpus}\n")
        cfg = load_config(p)
        assert cfg.corpus.path == corpus
        assert cfg.output_path is None


class TestMarkupValidation:
    def test_empty_text_close_rejected(self):
        with pytest.raises(ValidationError):
            MarkupConfig(text_close="")

    def test_empty_sentence_prefix_rejected(self):
        with pytest.raises(ValidationError):
            MarkupConfig(sentence_prefixes=["<s>", ""])

    def test_no_sentence_prefixes_allowed(self):
        assert MarkupConfig(sentence_prefixes=[]).sentence_prefixes == []

    def test_empty_markup_rejected_from_yaml(self, tmp_path: Path):
        p = tmp_path / "bad.yaml"
        p.write_text('corpus:\n  markup:\n    text_close: ""\n')
        with pytest.raises(ValidationError):
            load_config(p)
