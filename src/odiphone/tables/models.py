"""Pydantic v2 models for the phonetic lookup tables.

All consistency checks run when a table set is constructed, so a malformed
table set fails once, up front, and never inside ``encode``.
"""

from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict, Field, model_validator

# Odia Unicode block
ODIA_FIRST = "\u0b00"
ODIA_LAST = "\u0b7f"

_GLYPH_CODE_RE = re.compile(r"^[A-Z][A-Z0-9]*$")
_MODIFIER_CODE_RE = re.compile(r"^[0-9]*$")
_DIGITS = frozenset("0123456789")


def is_odia(text: str) -> bool:
    """True if every character of *text* lies in the Odia block."""
    return bool(text) and all(ODIA_FIRST <= ch <= ODIA_LAST for ch in text)


class ModifierClasses(BaseModel):
    """Modifier digits dropped from key2 to derive the broader keys.

    ``narrow`` digits are removed for key1, ``broad`` digits for key0.
    """

    model_config = ConfigDict(frozen=True)

    narrow: frozenset[str] = frozenset("78")
    broad: frozenset[str] = frozenset("12345678")

    @model_validator(mode="after")
    def _check_digits(self) -> ModifierClasses:
        bad = sorted(d for d in self.narrow | self.broad if d not in _DIGITS)
        if bad:
            raise ValueError(f"Modifier classes must hold single digits, got {bad}")
        if not self.narrow <= self.broad:
            extra = sorted(self.narrow - self.broad)
            raise ValueError(f"Narrow modifier class is not a subset of broad: {extra}")
        return self


class PhoneticTables(BaseModel):
    """A complete, validated set of classification tables."""

    model_config = ConfigDict(frozen=True)

    name: str = "custom"
    vowels: dict[str, str]
    consonants: dict[str, str]
    compounds: dict[str, str] = Field(default_factory=dict)
    modifiers: dict[str, str]
    # Explicit codes for a glyph+modifier pair; otherwise glyph code + digit.
    attached_forms: dict[str, str] = Field(default_factory=dict)
    classes: ModifierClasses = Field(default_factory=ModifierClasses)

    @model_validator(mode="after")
    def _check_tables(self) -> PhoneticTables:
        seen: dict[str, str] = {}
        for table_name, table, single in (
            ("vowels", self.vowels, True),
            ("consonants", self.consonants, True),
            ("compounds", self.compounds, False),
            ("modifiers", self.modifiers, True),
        ):
            for key, code in table.items():
                if not is_odia(key):
                    raise ValueError(f"{table_name}: key {key!r} is not Odia script")
                if single and len(key) != 1:
                    raise ValueError(
                        f"{table_name}: key {key!r} must be a single character"
                    )
                if not single and len(key) < 2:
                    raise ValueError(
                        f"{table_name}: key {key!r} must span two or more characters"
                    )
                if key in seen:
                    raise ValueError(
                        f"Key {key!r} appears in both {seen[key]} and {table_name}"
                    )
                seen[key] = table_name

                code_re = _MODIFIER_CODE_RE if table_name == "modifiers" else _GLYPH_CODE_RE
                if not code_re.match(code):
                    raise ValueError(f"{table_name}: invalid code {code!r} for {key!r}")

        for pair, code in self.attached_forms.items():
            glyph, mod = pair[:-1], pair[-1:]
            if mod not in self.modifiers or seen.get(glyph) not in (
                "vowels",
                "consonants",
                "compounds",
            ):
                raise ValueError(
                    f"attached_forms: {pair!r} is not a known glyph followed by a modifier"
                )
            if not _GLYPH_CODE_RE.match(code):
                raise ValueError(f"attached_forms: invalid code {code!r} for {pair!r}")
        return self

    def glyph_count(self) -> int:
        return len(self.vowels) + len(self.consonants) + len(self.compounds)
