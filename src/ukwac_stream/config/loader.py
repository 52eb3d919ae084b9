"""Load and validate stream configuration from YAML."""

from __future__ import annotations

from pathlib import Path

import yaml

from .schema import StreamConfig


def load_config(path: Path | str) -> StreamConfig:
    """Read a YAML file and return a validated StreamConfig.

    Relative corpus and output paths are taken relative to the directory
    holding the config file.
    """
    path = Path(path)
    with path.open("r", encoding="utf-8") as fh:
        raw = yaml.safe_load(fh)
    if raw is None:
        raw = {}
    cfg = StreamConfig.model_validate(raw)

    base = path.parent
    if not cfg.corpus.path.is_absolute():
        cfg.corpus.path = base / cfg.corpus.path
    if cfg.output_path is not None and not cfg.output_path.is_absolute():
        cfg.output_path = base / cfg.output_path
    return cfg
