"""Load and validate configuration from YAML."""

from __future__ import annotations

from pathlib import Path

import yaml

from .schema import AppConfig


def load_config(path: Path | str | None = None) -> AppConfig:
    """Read a YAML file and return a validated AppConfig.

    With no path, the defaults are returned.
    """
    if path is None:
        return AppConfig()
    path = Path(path)
    with path.open("r", encoding="utf-8") as fh:
        raw = yaml.safe_load(fh)
    if raw is None:
        raw = {}
    return AppConfig.model_validate(raw)
