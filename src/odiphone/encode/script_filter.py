"""Unicode normalisation and Odia script filtering."""

from __future__ import annotations

import re
import unicodedata

# Anything outside the Odia block (U+0B00-U+0B7F)
_NON_ODIA_RE = re.compile(r"[^\u0B00-\u0B7F]+")

# Word separators: as above, but ZWNJ and ZWJ shape conjuncts inside a word
_WORD_SEP_RE = re.compile(r"[^\u0B00-\u0B7F\u200c\u200d]+")


def normalize_unicode(text: str, form: str = "NFC") -> str:
    """Apply Unicode normalisation (NFC, NFD, NFKC or NFKD)."""
    return unicodedata.normalize(form, text)


def strip_non_odia(text: str) -> str:
    """Remove every character that is not Odia script."""
    return _NON_ODIA_RE.sub("", text)


def split_words(text: str) -> list[str]:
    """Split a phrase into Odia words on runs of anything else.

    Zero-width joiners and non-joiners stay inside their word. A run made
    only of joiners is not a word.
    """
    return [w for w in _WORD_SEP_RE.split(text) if strip_non_odia(w)]
