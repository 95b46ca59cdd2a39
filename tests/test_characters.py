# tests/test_characters.py
from __future__ import annotations

import pytest

from charset_sleuth import characters


@pytest.mark.parametrize("char", ["é", "à", "ç", "ü", "ê", "ñ"])
def test_accentuated(char: str):
    assert characters.is_accentuated(char)


@pytest.mark.parametrize("char", ["e", "A", "ß", "я", "1"])
def test_not_accentuated(char: str):
    assert not characters.is_accentuated(char)


@pytest.mark.parametrize(("char", "base"), [("é", "e"), ("Ç", "C"), ("ü", "u"), ("a", "a")])
def test_remove_accent(char: str, base: str):
    assert characters.remove_accent(char) == base


def test_remove_accent_ignores_compatibility_decomposition():
    assert characters.remove_accent("ﬁ") == "ﬁ"


def test_unicode_range():
    assert characters.unicode_range("a") == "Basic Latin"
    assert characters.unicode_range("é") == "Latin-1 Supplement"
    assert characters.unicode_range("я") == "Cyrillic"
    assert characters.unicode_range("中") == "CJK Unified Ideographs"


def test_is_latin():
    assert characters.is_latin("a")
    assert characters.is_latin("é")
    assert not characters.is_latin("я")
    assert not characters.is_latin("1")


@pytest.mark.parametrize("char", ["!", "?", "«", "\u2014", "¿"])
def test_is_punctuation(char: str):
    assert characters.is_punctuation(char)


@pytest.mark.parametrize("char", ["$", "+", "©", "5", "½"])
def test_is_symbol(char: str):
    assert characters.is_symbol(char)


@pytest.mark.parametrize("char", [" ", "\t", "\n", "\u00a0", "｜", ",", ";"])
def test_is_separator(char: str):
    assert characters.is_separator(char)


def test_letter_is_not_separator():
    assert not characters.is_separator("a")


def test_is_case_variable():
    assert characters.is_case_variable("a")
    assert characters.is_case_variable("Я")
    assert not characters.is_case_variable("中")
    assert not characters.is_case_variable("1")


def test_script_predicates():
    assert characters.is_cjk("中")
    assert characters.is_hiragana("の")
    assert characters.is_katakana("カ")
    assert characters.is_hangul("한")
    assert characters.is_thai("ก")
    assert not characters.is_cjk("a")


def test_is_emoticon():
    assert characters.is_emoticon("\U0001f600")
    assert not characters.is_emoticon("a")


@pytest.mark.parametrize("char", ["\x00", "\x01", "\x7f", "\u00ad"])
def test_is_control(char: str):
    assert characters.is_control(char)


@pytest.mark.parametrize("char", ["\n", "\r", "\t", "\x1a", "\ufeff", "\u200d", "a"])
def test_is_not_control(char: str):
    assert not characters.is_control(char)


def test_is_invalid_code_point():
    assert characters.is_invalid_code_point("\ue000")
    assert characters.is_invalid_code_point("\udc80")
    assert not characters.is_invalid_code_point("a")


def test_secondary_ranges():
    assert characters.is_unicode_range_secondary("Latin-1 Supplement")
    assert characters.is_unicode_range_secondary("Latin Extended-A")
    assert not characters.is_unicode_range_secondary("Cyrillic")
    assert not characters.is_unicode_range_secondary("Basic Latin")
