"""Built-in Odia phonetic table sets.

Two independent sets ship with the package:

- ``odiphone`` (default): hard sounds keep their aspirated codes
  (``ଭ`` -> ``BH``, ``ଣ`` -> ``NH``).
- ``odphone``: an alternate set with flatter vowel codes and single-letter
  codes for ``ଫ``, ``ୱ``, ``ଭ`` and ``ଣ``.

Keys produced by different sets are not comparable with each other.
"""

from __future__ import annotations

from odiphone.tables.models import ModifierClasses, PhoneticTables

DEFAULT_TABLE_SET = "odiphone"

_VOWELS: dict[str, str] = {
    "ଅ": "A",
    "ଆ": "A",
    "ଇ": "I",
    "ଈ": "I",
    "ଉ": "U",
    "ଊ": "U",
    "ଋ": "R",
    "ୠ": "R",
    "ଏ": "E",
    "ଐ": "AI",
    "ଓ": "O",
    "ଔ": "OU",
}

_CONSONANTS: dict[str, str] = {
    # Velars
    "କ": "K",
    "ଖ": "KH",
    "ଗ": "G",
    "ଘ": "GH",
    "ଙ": "WN",
    # Palatals
    "ଚ": "CH",
    "ଛ": "CHH",
    "ଜ": "J",
    "ଝ": "JH",
    "ଞ": "NY",
    # Retroflexes
    "ଟ": "T",
    "ଠ": "TH",
    "ଡ": "D",
    "ଢ": "DH",
    "ଣ": "NH",
    # Dentals
    "ତ": "T",
    "ଥ": "TH",
    "ଦ": "D",
    "ଧ": "DH",
    "ନ": "N",
    # Labials
    "ପ": "P",
    "ଫ": "PH",
    "ବ": "B",
    "ଭ": "BH",
    "ମ": "M",
    # Semivowels and liquids
    "ଯ": "J",
    "ର": "R",
    "ଲ": "L",
    "ଳ": "LH",
    "ଵ": "B",
    # Sibilants
    "ଶ": "SH",
    "ଷ": "SH",
    "ସ": "S",
    # Aspirate
    "ହ": "H",
    # Glides
    "ୟ": "Y",
    "ୱ": "UA",
}

# Geminated and conjunct clusters, matched before their parts.
_COMPOUNDS: dict[str, str] = {
    "କ୍ତ": "K2",
    "ଙ୍କ": "K3",
    "ଙ୍ଗ": "NG",
    "ଙ୍ଘ": "NG2",
    "ଞ୍ଜ": "NJ",
}

# Vowel signs and other combining marks -> digit code.
# 1 aa, 2 nukta/virama, 3 e-like, 4 o-like, 5 i-like, 6 u-like,
# 7 nasalisation/visarga, 8 rare signs.
_MODIFIERS: dict[str, str] = {
    "ା": "1",
    "଼": "2",
    "୍": "2",
    "ୖ": "3",
    "େ": "3",
    "ୈ": "3",
    "ୗ": "3",
    "ୋ": "4",
    "ୌ": "4",
    "ି": "5",
    "ୀ": "5",
    "ୁ": "6",
    "ୂ": "6",
    "ୃ": "6",
    "ଃ": "7",
    "ଁ": "7",
    "ଂ": "7",
    "ୄ": "8",
    "ଽ": "8",
}

_ODPHONE_VOWELS: dict[str, str] = {
    "ଇ": "E",
    "ଈ": "E",
    "ଐ": "EI",
}

_ODPHONE_CONSONANTS: dict[str, str] = {
    "ଫ": "F",
    "ୱ": "W",
    "ଣ": "N",
    "ଭ": "V",
}

ODIPHONE = PhoneticTables(
    name="odiphone",
    vowels=_VOWELS,
    consonants=_CONSONANTS,
    compounds=_COMPOUNDS,
    modifiers=_MODIFIERS,
    classes=ModifierClasses(),
)

ODPHONE = PhoneticTables(
    name="odphone",
    vowels={**_VOWELS, **_ODPHONE_VOWELS},
    consonants={**_CONSONANTS, **_ODPHONE_CONSONANTS},
    compounds=_COMPOUNDS,
    modifiers=_MODIFIERS,
    classes=ModifierClasses(),
)

TABLE_SETS: dict[str, PhoneticTables] = {
    ODIPHONE.name: ODIPHONE,
    ODPHONE.name: ODPHONE,
}


def get_table_set(name: str = DEFAULT_TABLE_SET) -> PhoneticTables:
    """Return a copy of a built-in table set by name.

    The table dicts are plain dicts, so callers get their own copy and cannot
    change the built-in set for anyone else.
    """
    try:
        return TABLE_SETS[name].model_copy(deep=True)
    except KeyError:
        available = ", ".join(sorted(TABLE_SETS))
        raise ValueError(
            f"Unknown table set: {name!r} (available: {available})"
        ) from None
