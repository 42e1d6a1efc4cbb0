"""Odia phonetic encoder.

Generates three Romanized phonetic keys of increasing specificity for an
Odia word, in the manner of Metaphone for English:

- ``key0``: a broad key that ignores hard sounds and phonetic modifiers
- ``key1``: also accounts for hard sounds
- ``key2``: the narrowest key, accounting for hard sounds and modifiers

Substitution runs as a series of passes over the input, each consuming
glyphs into tagged tokens so that later passes never see text produced by
earlier ones. Compound clusters go before single consonants and vowels, and
a glyph followed by a modifier mark goes before the same glyph on its own.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Mapping
from functools import lru_cache
from typing import Union

from odiphone.config.schema import EncoderConfig
from odiphone.encode.script_filter import normalize_unicode, strip_non_odia
from odiphone.encode.tokens import Token, TokenKind
from odiphone.tables.builtin import get_table_set
from odiphone.tables.loader import load_tables
from odiphone.tables.models import PhoneticTables

logger = logging.getLogger(__name__)

UNICODE_FORMS = ("NFC", "NFD", "NFKC", "NFKD")

_NON_KEY_RE = re.compile(r"[^0-9A-Z]")

# Raw (not yet substituted) text or a finished token
_Piece = Union[str, Token]


def _alternation(keys: Iterable[str]) -> str:
    """Regex alternation over *keys*, longest first."""
    return "|".join(re.escape(k) for k in sorted(keys, key=lambda k: (-len(k), k)))


def _digit_class_re(digits: Iterable[str]) -> re.Pattern[str] | None:
    digits = sorted(digits)
    if not digits:
        return None
    return re.compile("[" + "".join(digits) + "]")


class _Pass:
    """A single substitution pass: one pattern, one token kind."""

    def __init__(
        self,
        kind: TokenKind,
        glyphs: Mapping[str, str] | None,
        modifiers: Mapping[str, str] | None,
        attached_forms: Mapping[str, str],
    ) -> None:
        self.kind = kind
        # private copies, so later edits to the tables cannot reach a compiled pass
        self.glyphs = dict(glyphs or {})
        self.modifiers = dict(modifiers or {})
        self.attached_forms = dict(attached_forms)
        parts = []
        if glyphs:
            parts.append(f"(?P<glyph>{_alternation(glyphs)})")
        if modifiers:
            parts.append(f"(?P<mod>{_alternation(modifiers)})")
        self.pattern = re.compile("".join(parts))

    def token(self, match: re.Match[str]) -> Token:
        glyph = match.groupdict().get("glyph") or ""
        mod = match.groupdict().get("mod") or ""
        if glyph and mod:
            code = self.attached_forms.get(
                glyph + mod, self.glyphs[glyph] + self.modifiers[mod]
            )
            return Token(self.kind, glyph + mod, code, attached=mod)
        if glyph:
            return Token(self.kind, glyph, self.glyphs[glyph])
        return Token(self.kind, mod, self.modifiers[mod])

    def apply(self, pieces: list[_Piece]) -> list[_Piece]:
        out: list[_Piece] = []
        for piece in pieces:
            if isinstance(piece, Token):
                out.append(piece)
                continue
            pos = 0
            for match in self.pattern.finditer(piece):
                if match.start() > pos:
                    out.append(piece[pos : match.start()])
                out.append(self.token(match))
                pos = match.end()
            if pos < len(piece):
                out.append(piece[pos:])
        return out


class ODIphone:
    """Odia phonetic key encoder.

    Immutable once constructed; a single instance may be shared between
    threads.
    """

    def __init__(
        self,
        tables: PhoneticTables | None = None,
        unicode_form: str | None = None,
    ) -> None:
        if unicode_form is not None and unicode_form not in UNICODE_FORMS:
            raise ValueError(
                f"Unknown Unicode normalisation form: {unicode_form!r} "
                f"(expected one of {', '.join(UNICODE_FORMS)})"
            )
        self.tables = tables if tables is not None else get_table_set()
        self.unicode_form = unicode_form

        t = self.tables
        mods = t.modifiers
        attached = t.attached_forms
        candidates = [
            # glyph + modifier before bare glyph, compounds before their parts
            (TokenKind.COMPOUND, t.compounds, mods),
            (TokenKind.COMPOUND, t.compounds, None),
            (TokenKind.CONSONANT, t.consonants, mods),
            (TokenKind.VOWEL, t.vowels, mods),
            (TokenKind.CONSONANT, t.consonants, None),
            (TokenKind.VOWEL, t.vowels, None),
            (TokenKind.MODIFIER, None, mods),
        ]
        self._passes = [
            _Pass(kind, glyphs, modifiers, attached)
            for kind, glyphs, modifiers in candidates
            # a pass over an empty table would match the empty string
            if all(table is None or table for table in (glyphs, modifiers))
        ]
        self._key1_re = _digit_class_re(t.classes.narrow)
        self._key0_re = _digit_class_re(t.classes.broad)

        logger.debug(
            "Compiled %d passes for table set %r (%d glyphs, %d modifiers)",
            len(self._passes),
            t.name,
            t.glyph_count(),
            len(mods),
        )

    @classmethod
    def from_config(cls, config: EncoderConfig | None = None) -> ODIphone:
        """Build the encoder an EncoderConfig describes."""
        config = config or EncoderConfig()
        if config.tables_path is not None:
            tables = load_tables(config.tables_path)
        else:
            tables = get_table_set(config.table_set)
        return cls(tables, unicode_form=config.unicode_form)

    def tokenize(self, word: str) -> list[Token]:
        """Run the substitution passes and return the resulting tokens.

        Odia characters that no table knows (digits, for instance) are
        dropped.
        """
        if self.unicode_form:
            word = normalize_unicode(word, self.unicode_form)
        pieces: list[_Piece] = [strip_non_odia(word)]
        for p in self._passes:
            pieces = p.apply(pieces)
        return [p for p in pieces if isinstance(p, Token)]

    def encode(self, word: str) -> tuple[str, str, str]:
        """Encode an Odia word into its (key0, key1, key2) phonetic keys.

        Words should be encoded one at a time, not as phrases.
        """
        key2 = _NON_KEY_RE.sub("", "".join(t.code for t in self.tokenize(word)))

        # key1 loses the digits of phonetic modifiers.
        key1 = self._key1_re.sub("", key2) if self._key1_re else key2

        # key0 also loses the digits of hard and doubled sounds.
        key0 = self._key0_re.sub("", key2) if self._key0_re else key2

        return key0, key1, key2


@lru_cache(maxsize=None)
def default_encoder() -> ODIphone:
    """Shared encoder over the default table set."""
    return ODIphone()


def encode(word: str) -> tuple[str, str, str]:
    """Encode *word* with the default encoder."""
    return default_encoder().encode(word)
