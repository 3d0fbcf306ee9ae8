"""Tests for slugstr.characters module."""

import pytest

from slugstr.characters import (
    STRIPPABLE,
    add_approximations,
    approximations,
    locales,
)
from slugstr.transform import approximate_ascii


class TestStrippable:
    def test_punctuation_is_strippable(self):
        for char in "!\"#$%&'()*+,./:;<=>?@[\\]^`{|}~":
            assert ord(char) in STRIPPABLE, char

    def test_word_separators_are_kept(self):
        for char in " -\t\n\r":
            assert ord(char) not in STRIPPABLE, repr(char)

    def test_underscore_is_strippable(self):
        assert ord("_") in STRIPPABLE

    def test_punctuation_and_symbols_in_any_script(self):
        for char in "—–“”‘’…‰‽！？、。「」€😀":
            assert ord(char) in STRIPPABLE, char

    def test_combining_marks_are_kept(self):
        assert 0x0301 not in STRIPPABLE

    def test_letters_and_digits_are_kept(self):
        for char in "azAZ09üßŁ日":
            assert ord(char) not in STRIPPABLE, char

    def test_latin1_symbols_and_invisibles(self):
        for char in "\u00a1\u00bf\u00a9\u00ae\u00b0\u00ab\u00bb\u00d7\u00f7\u00a0\u200b\u202f\ufeff":
            assert ord(char) in STRIPPABLE, repr(char)


class TestApproximationTables:
    def test_builtin_locales(self):
        assert {"latin", "german", "spanish"} <= set(locales())

    def test_latin_lookup(self):
        assert approximations("latin")["ü"] == "u"
        assert approximations("latin")["Ł"] == "L"
        assert approximations("latin")["ß"] == "ss"

    def test_override_lookup(self):
        assert approximations("german")["ü"] == "ue"
        assert approximations("spanish")["ñ"] == "ni"

    def test_unknown_locale(self):
        assert approximations("klingon") is None


class TestAddApproximations:
    def test_extend_existing_map(self):
        add_approximations("spanish", {"ñ": "nh"})
        assert approximate_ascii("año", "spanish") == "anho"

    def test_new_locale(self):
        add_approximations("danish", {"å": "aa", ord("ø"): "oe"})
        assert "danish" in locales()
        assert approximations("danish") == {"å": "aa", "ø": "oe"}
        assert approximate_ascii("Århus, Køge", "danish") == "Arhus, Koege"

    def test_last_write_wins(self):
        add_approximations("custom", {"é": "e1"})
        add_approximations("custom", {"é": "e2"})
        assert approximations("custom")["é"] == "e2"

    def test_existing_readers_keep_old_table(self):
        before = approximations("german")
        add_approximations("german", {"ß": "sz"})
        assert "ß" not in before
        assert approximations("german")["ß"] == "sz"

    def test_rejects_multi_character_key(self):
        with pytest.raises(ValueError):
            add_approximations("latin", {"ab": "x"})

    def test_rejects_out_of_range_codepoint(self):
        with pytest.raises(ValueError):
            add_approximations("latin", {0x110000: "x"})

    def test_rejects_non_string_value(self):
        with pytest.raises(TypeError):
            add_approximations("latin", {"é": 5})

    def test_rejects_surrogate_value(self):
        with pytest.raises(ValueError, match="not encodable"):
            add_approximations("latin", {"é": "\ud800"})
        assert approximations("latin")["é"] == "e"

    def test_failed_registration_changes_nothing(self):
        with pytest.raises(ValueError):
            add_approximations("latin", {"é": "E", "bad": "x"})
        assert approximations("latin")["é"] == "e"
