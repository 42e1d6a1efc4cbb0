"""Tests for the Odia phonetic encoder."""

from __future__ import annotations

import re

import pytest

from odiphone import encode
from odiphone.encode.encoder import ODIphone
from odiphone.encode.tokens import TokenKind
from odiphone.tables import get_table_set, tables_from_dict

GOLDEN = [
    ("ଅଂଶ", ("ASH", "ASH", "A7SH")),
    ("ଭ୍ରମର", ("BHRMR", "BH2RMR", "BH2RMR")),
    ("ଭ୍ରମରେ", ("BHRMR", "BH2RMR3", "BH2RMR3")),
    ("ଭ୍ରମଣ", ("BHRMNH", "BH2RMNH", "BH2RMNH")),
]

SAMPLE_WORDS = [
    "ଅଂଶ",
    "ଭ୍ରମର",
    "ଓଡ଼ିଆ",
    "ଗଙ୍ଗା",
    "ଶକ୍ତି",
    "ପଞ୍ଜିକା",
    "କାଁ",
    "ାଂ",
    "",
]

_KEY_RE = re.compile(r"^[0-9A-Z]*$")


class TestGolden:
    @pytest.mark.parametrize("word,expected", GOLDEN)
    def test_reference_words(self, encoder: ODIphone, word: str, expected):
        assert encoder.encode(word) == expected

    def test_module_level_encode(self):
        assert encode("ଅଂଶ") == ("ASH", "ASH", "A7SH")


class TestTotality:
    def test_empty(self, encoder: ODIphone):
        assert encoder.encode("") == ("", "", "")

    def test_non_odia_only(self, encoder: ODIphone):
        assert encoder.encode("hello world 123") == ("", "", "")

    def test_deterministic(self, encoder: ODIphone):
        for word in SAMPLE_WORDS:
            assert encoder.encode(word) == encoder.encode(word)

    def test_fresh_instances_agree(self, encoder: ODIphone):
        other = ODIphone()
        for word in SAMPLE_WORDS:
            assert other.encode(word) == encoder.encode(word)

    def test_alphabet_closure(self, encoder: ODIphone):
        for word in SAMPLE_WORDS:
            for key in encoder.encode(word):
                assert _KEY_RE.match(key), (word, key)


class TestKeyReduction:
    def test_keys_only_lose_digits(self, encoder: ODIphone):
        for word in SAMPLE_WORDS:
            key0, key1, key2 = encoder.encode(word)
            assert len(key0) <= len(key1) <= len(key2)
            assert re.sub(r"[78]", "", key2) == key1
            assert re.sub(r"[1-8]", "", key1) == key0
            assert re.sub(r"\d", "", key2) == re.sub(r"\d", "", key0)

    def test_key0_keeps_unclassified_digits(self):
        tables = tables_from_dict(
            {"extends": "odiphone", "modifiers": {"\u0b3c": "9"}}
        )
        key0, key1, key2 = ODIphone(tables).encode("\u0b21\u0b3c")
        assert (key0, key1, key2) == ("D9", "D9", "D9")


class TestScriptFilter:
    def test_foreign_characters_ignored(self, encoder: ODIphone):
        assert encoder.encode("aଅ-ଂ ଶ1") == encoder.encode("ଅଂଶ")

    @pytest.mark.parametrize("word", SAMPLE_WORDS)
    @pytest.mark.parametrize("foreign", ["a", " ", "1", "-", "\u0915", "\u200c"])
    def test_insertion_at_every_position(
        self, encoder: ODIphone, word: str, foreign: str
    ):
        expected = encoder.encode(word)
        for i in range(len(word) + 1):
            assert encoder.encode(word[:i] + foreign + word[i:]) == expected, i

    def test_danda_and_punctuation(self, encoder: ODIphone):
        assert encoder.encode("ଭ୍ରମର।") == encoder.encode("ଭ୍ରମର")

    def test_unknown_odia_glyph_dropped(self, encoder: ODIphone):
        # Odia digit one is in the block but in no table.
        assert encoder.encode("ଅଂ\u0b67ଶ") == ("ASH", "ASH", "A7SH")


class TestCompoundPriority:
    def test_compound_not_split(self, encoder: ODIphone):
        assert encoder.encode("କ୍ତ")[2] == "K2"
        # Parts coded one by one would give K2T.
        assert encoder.encode("କ୍")[2] + encoder.encode("ତ")[2] == "K2T"

    def test_modified_compound(self, encoder: ODIphone):
        assert encoder.encode("ଙ୍ଗା") == ("NG", "NG1", "NG1")

    def test_compound_inside_word(self, encoder: ODIphone):
        assert encoder.encode("ଶକ୍ତି") == ("SHK", "SHK25", "SHK25")

    def test_compound_tokens(self, encoder: ODIphone):
        tokens = encoder.tokenize("ଗଙ୍ଗା")
        assert [t.kind for t in tokens] == [TokenKind.CONSONANT, TokenKind.COMPOUND]
        assert [t.code for t in tokens] == ["G", "NG1"]
        assert tokens[1].attached == "ା"


class TestModifiers:
    def test_attached_modifier(self, encoder: ODIphone):
        tokens = encoder.tokenize("କା")
        assert len(tokens) == 1
        assert tokens[0].kind == TokenKind.CONSONANT
        assert tokens[0].code == "K1"

    def test_standalone_modifier(self, encoder: ODIphone):
        tokens = encoder.tokenize("ାକ")
        assert [t.kind for t in tokens] == [TokenKind.MODIFIER, TokenKind.CONSONANT]
        assert encoder.encode("ାକ") == ("K", "1K", "1K")

    def test_second_modifier_is_standalone(self, encoder: ODIphone):
        assert encoder.encode("କାଁ") == ("K", "K1", "K17")

    def test_attached_form_overrides_code(self):
        tables = tables_from_dict(
            {"extends": "odiphone", "attached_forms": {"କା": "Q"}}
        )
        od = ODIphone(tables)
        assert od.encode("କା") == ("Q", "Q", "Q")
        # A bare consonant and a loose modifier keep their own codes.
        assert od.encode("ାକ") == ("K", "1K", "1K")


class TestVariants:
    def test_odphone_table_set(self):
        od = ODIphone(get_table_set("odphone"))
        assert od.encode("ଫଲ")[2] == "FL"
        assert od.encode("ଇ")[2] == "E"
        assert od.encode("ଭ୍ରମଣ")[2] == "V2RMN"

    def test_default_table_set(self, encoder: ODIphone):
        assert encoder.tables.name == "odiphone"
        assert encoder.encode("ଫଲ")[2] == "PHL"
        assert encoder.encode("ଇ")[2] == "I"

    def test_unicode_normalisation_off_by_default(self, encoder: ODIphone):
        # e-sign followed by aa-sign, which NFC composes into the o-sign
        assert encoder.encode("\u0b15\u0b47\u0b3e")[2] == "K31"

    def test_unicode_normalisation(self):
        od = ODIphone(unicode_form="NFC")
        assert od.encode("\u0b15\u0b47\u0b3e")[2] == "K4"
        assert od.encode("\u0b15\u0b4b")[2] == "K4"

    @pytest.mark.parametrize("form", ["nfc", "NFX", ""])
    def test_unknown_unicode_form(self, form: str):
        with pytest.raises(ValueError, match="Unknown Unicode normalisation form"):
            ODIphone(unicode_form=form)


class TestTableIsolation:
    def test_builtin_set_cannot_be_changed_by_callers(self):
        tables = get_table_set()
        tables.consonants["ଭ"] = "V"
        del tables.consonants["ର"]
        assert ODIphone().encode("ଭ୍ରମର") == ("BHRMR", "BH2RMR", "BH2RMR")
        assert get_table_set().consonants["ଭ"] == "BH"

    def test_encoder_unaffected_by_later_table_edits(self):
        tables = get_table_set()
        od = ODIphone(tables)
        tables.consonants["ଭ"] = "V"
        tables.modifiers.clear()
        assert od.encode("ଭ୍ରମରେ") == ("BHRMR", "BH2RMR3", "BH2RMR3")

    def test_removed_glyph_does_not_break_encode(self):
        tables = get_table_set()
        od = ODIphone(tables)
        del tables.consonants["ଭ"]
        assert od.encode("ଭ୍ରମର") == ("BHRMR", "BH2RMR", "BH2RMR")
