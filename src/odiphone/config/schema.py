"""Pydantic v2 configuration models for odiphone."""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class EncoderConfig(BaseModel):
    table_set: str = "odiphone"
    # A YAML table file; takes precedence over table_set when given.
    tables_path: Path | None = None
    unicode_form: Literal["NFC", "NFD", "NFKC", "NFKD"] | None = None


class IndexConfig(BaseModel):
    default_level: int = Field(default=1, ge=0, le=2)
    suggest_limit: int = Field(default=5, ge=1)
    min_similarity: float = Field(default=0.5, ge=0.0, le=1.0)


class AppConfig(BaseModel):
    """Top-level configuration."""

    encoder: EncoderConfig = Field(default_factory=EncoderConfig)
    index: IndexConfig = Field(default_factory=IndexConfig)
    batch_size: int = Field(default=1000, ge=1)
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, v: str) -> str:
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {v!r}")
        return level
