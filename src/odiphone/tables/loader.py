"""Load custom phonetic tables from YAML."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from .builtin import get_table_set
from .models import PhoneticTables

logger = logging.getLogger(__name__)

_MERGED_TABLES = ("vowels", "consonants", "compounds", "modifiers", "attached_forms")


def tables_from_dict(raw: dict[str, Any]) -> PhoneticTables:
    """Build a validated PhoneticTables from a plain mapping.

    If ``extends`` names a built-in set, its entries form the base and the
    mapping's tables override them key by key.
    """
    raw = dict(raw)
    base_name = raw.pop("extends", None)
    if base_name:
        base = get_table_set(base_name).model_dump()
        for table in _MERGED_TABLES:
            base[table] = {**base[table], **(raw.pop(table, None) or {})}
        base["name"] = raw.pop("name", f"{base_name}+custom")
        base.update(raw)
        raw = base
    return PhoneticTables.model_validate(raw)


def load_tables(path: Path | str) -> PhoneticTables:
    """Read a YAML table file and return validated tables."""
    path = Path(path)
    with path.open("r", encoding="utf-8") as fh:
        raw = yaml.safe_load(fh)
    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ValueError(f"Table file {path} must hold a mapping, got {type(raw).__name__}")
    raw.setdefault("name", path.stem)
    tables = tables_from_dict(raw)
    logger.debug("Loaded table set %r from %s", tables.name, path)
    return tables
