# tests/test_coherence.py
from __future__ import annotations

import pytest

from charset_sleuth.languages import ranked_letters
from charset_sleuth.pipeline.coherence import (
    alpha_unicode_split,
    alphabet_languages,
    characters_popularity_compare,
    coherence_ratio,
    encoding_languages,
    encoding_unicode_ranges,
    merge_coherence_ratios,
    score_coherence,
)


def test_alpha_unicode_split_separates_alphabets():
    assert alpha_unicode_split("Hello Привет") == ["hello", "привет"]


def test_alpha_unicode_split_keeps_latin_together():
    assert alpha_unicode_split("Café Noël") == ["cafénoël"]


def test_alpha_unicode_split_ignores_non_letters():
    assert alpha_unicode_split("123 !?") == []


def test_perfect_ordering_scores_one():
    assert characters_popularity_compare("English", ranked_letters("English")) == 1.0


def test_best_table_is_kept():
    second_english_table = "eationsrhldcumfpgwybvkxjzq"
    assert characters_popularity_compare("English", second_english_table) == 1.0


def test_unrelated_letters_score_zero():
    assert characters_popularity_compare("English", "абвгд") == 0.0


def test_unknown_language_raises():
    with pytest.raises(ValueError, match="not a supported language"):
        characters_popularity_compare("Klingon", "abc")


def test_alphabet_languages():
    assert "Russian" in alphabet_languages(ranked_letters("Russian"))
    assert "English" not in alphabet_languages(ranked_letters("Russian"))


def test_alphabet_languages_with_accents_skips_plain_alphabets():
    languages = alphabet_languages(ranked_letters("French"))
    assert "French" in languages
    assert "English" not in languages


def test_alphabet_languages_latin_only():
    languages = alphabet_languages(ranked_letters("English"), ignore_non_latin=True)
    assert "English" in languages
    assert "Russian" not in languages


def test_coherence_ratio_short_text_is_empty():
    assert coherence_ratio("Bonjour") == ()


def test_coherence_ratio_with_language_restriction(french_text):
    result = coherence_ratio(french_text, 0.1, ("French",))
    assert [language for language, _ in result] == ["French"]
    assert 0.1 <= result[0][1] <= 1.0


def test_coherence_ratio_is_sorted(english_text):
    result = coherence_ratio(english_text, 0.1, ("Latin Based",))
    ratios = [ratio for _, ratio in result]
    assert ratios == sorted(ratios, reverse=True)


def test_merge_coherence_ratios():
    merged = merge_coherence_ratios([[("French", 0.9)], [("French", 0.7), ("English", 0.5)]])
    assert merged == [("French", 0.8), ("English", 0.5)]


def test_encoding_unicode_ranges():
    assert "Cyrillic" in encoding_unicode_ranges("cp1251")
    assert encoding_unicode_ranges("cp1252") == ("Basic Latin",)


def test_encoding_unicode_ranges_rejects_multi_byte():
    with pytest.raises(ValueError, match="multi-byte"):
        encoding_unicode_ranges("shift_jis")


def test_encoding_languages():
    assert "Russian" in encoding_languages("cp1251")
    assert "Greek" in encoding_languages("cp1253")
    assert encoding_languages("cp1252") == ["Latin Based"]
    assert encoding_languages("shift_jis") == ["Japanese"]
    assert encoding_languages("utf_8") == []


def test_score_coherence_ascii_skips_languages(english_text):
    report = score_coherence([english_text], "ascii")
    assert report.languages == ()
    assert report.coherence == 0.0
    assert report.alphabets == ("Basic Latin",)


def test_score_coherence_french(french_text):
    report = score_coherence([french_text], "cp1252")
    assert report.languages[0][0] == "French"
    assert 0.0 < report.coherence <= 100.0
    assert report.alphabets == ("Basic Latin", "Latin-1 Supplement")


def test_score_coherence_language_hint(french_text):
    report = score_coherence([french_text], "cp1252", language_hint="French")
    assert [language for language, _ in report.languages] == ["French"]
