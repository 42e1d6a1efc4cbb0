"""Data models for the phonetic index."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any


class KeyLevel(IntEnum):
    """Which key to compare on: 0 is broadest, 2 is narrowest."""

    KEY0 = 0
    KEY1 = 1
    KEY2 = 2


@dataclass(frozen=True)
class EncodedWord:
    """A word together with its three phonetic keys."""

    word: str
    key0: str
    key1: str
    key2: str

    def key(self, level: KeyLevel | int) -> str:
        return (self.key0, self.key1, self.key2)[KeyLevel(level)]

    def to_dict(self) -> dict[str, Any]:
        return {
            "word": self.word,
            "key0": self.key0,
            "key1": self.key1,
            "key2": self.key2,
        }

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> EncodedWord:
        return cls(
            word=d["word"],
            key0=d.get("key0", ""),
            key1=d.get("key1", ""),
            key2=d.get("key2", ""),
        )
