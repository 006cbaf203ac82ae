"""Configuration file loading."""

from __future__ import annotations

from pathlib import Path

import yaml

from ..schemas.config import AppConfig, load_config


def load_config_file(path: str | Path | None) -> AppConfig:
    """Load and validate a YAML configuration; ``None`` yields the defaults."""
    if path is None:
        return AppConfig()
    with Path(path).open("r", encoding="utf-8") as handle:
        loaded = yaml.safe_load(handle)
    if loaded is not None and not isinstance(loaded, dict):
        raise ValueError("Config file must be a YAML object")
    return load_config(loaded)


__all__ = ["load_config_file"]
