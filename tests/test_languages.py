# tests/test_languages.py
from __future__ import annotations

import pytest

from charset_sleuth.languages import (
    ENCODING_TO_LANGUAGE,
    LANGUAGE_NAMES,
    language_tables,
    languages_for_alphabet,
    multi_byte_languages,
    ranked_letters,
)


def test_language_names_are_unique():
    assert len(LANGUAGE_NAMES) == len(set(LANGUAGE_NAMES))
    assert LANGUAGE_NAMES[0] == "English"


def test_ranked_letters():
    assert ranked_letters("French").startswith("eas")
    assert ranked_letters("Russian").startswith("оае")


def test_ranked_letters_unknown():
    with pytest.raises(ValueError, match="not a supported language"):
        ranked_letters("Klingon")


def test_multiple_tables():
    assert len(language_tables("English")) == 2
    assert len(language_tables("Japanese")) == 3
    assert language_tables("Klingon") == ()


def test_languages_for_alphabet():
    cyrillic = languages_for_alphabet("Cyrillic")
    assert "Russian" in cyrillic
    assert "Bulgarian" in cyrillic
    assert "English" not in cyrillic
    assert "English" in languages_for_alphabet("Basic Latin")
    assert "French" in languages_for_alphabet("Latin-1 Supplement")
    assert languages_for_alphabet("Klingon") == ()


def test_multi_byte_languages():
    assert multi_byte_languages("shift_jis") == ["Japanese"]
    assert multi_byte_languages("euc_kr") == ["Korean"]
    assert multi_byte_languages("gb18030") == ["Chinese"]
    assert multi_byte_languages("utf_8") == []


def test_encoding_to_language_targets_exist():
    assert set(ENCODING_TO_LANGUAGE.values()) <= set(LANGUAGE_NAMES)
