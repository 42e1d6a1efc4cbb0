"""In-memory phonetic index for spelling-tolerant lookup of Odia words."""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Iterable

from odiphone.encode.encoder import ODIphone, default_encoder
from odiphone.index.models import EncodedWord, KeyLevel
from odiphone.index.similarity import normalised_similarity

logger = logging.getLogger(__name__)


class PhoneticIndex:
    """Buckets words by each of their three phonetic keys.

    Words whose keys are empty (nothing Odia in them) are kept out of the
    buckets, so they never match anything.
    """

    def __init__(self, encoder: ODIphone | None = None) -> None:
        self.encoder = encoder or default_encoder()
        self._entries: dict[str, EncodedWord] = {}
        self._buckets: list[dict[str, list[str]]] = [
            defaultdict(list) for _ in KeyLevel
        ]

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, word: object) -> bool:
        return word in self._entries

    def encode(self, word: str) -> EncodedWord:
        return EncodedWord(word, *self.encoder.encode(word))

    def add(self, word: str) -> EncodedWord:
        """Index *word*; adding the same word twice is a no-op."""
        if word in self._entries:
            return self._entries[word]
        entry = self.encode(word)
        self._entries[word] = entry
        if entry.key2:
            for level in KeyLevel:
                self._buckets[level][entry.key(level)].append(word)
        return entry

    def add_many(self, words: Iterable[str]) -> int:
        """Index several words and return how many were new."""
        before = len(self._entries)
        for word in words:
            self.add(word)
        added = len(self._entries) - before
        logger.debug("Indexed %d new words (%d total)", added, len(self._entries))
        return added

    def lookup(self, word: str, level: KeyLevel | int = KeyLevel.KEY1) -> list[str]:
        """Indexed words sharing *word*'s key at *level*, in insertion order."""
        level = KeyLevel(level)
        key = self.encode(word).key(level)
        if not key:
            return []
        return list(self._buckets[level].get(key, []))

    def suggest(
        self,
        word: str,
        limit: int = 5,
        min_similarity: float = 0.5,
    ) -> list[tuple[str, float]]:
        """Rank words from the broad bucket by closeness of their narrow keys."""
        query = self.encode(word)
        scored = []
        for candidate in self.lookup(word, KeyLevel.KEY0):
            score = normalised_similarity(query.key2, self._entries[candidate].key2)
            if score >= min_similarity:
                scored.append((candidate, score))
        # sorted() is stable, so ties keep insertion order
        scored = sorted(scored, key=lambda item: -item[1])
        return scored[:limit]

    def groups(self, level: KeyLevel | int = KeyLevel.KEY1) -> dict[str, list[str]]:
        """Keys at *level* shared by two or more indexed words."""
        level = KeyLevel(level)
        return {
            key: list(words)
            for key, words in self._buckets[level].items()
            if len(words) > 1
        }
