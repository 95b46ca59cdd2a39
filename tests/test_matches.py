# tests/test_matches.py
from __future__ import annotations

import dataclasses
import json

import pytest

from charset_sleuth.matches import CharsetMatch, CharsetMatches


@pytest.fixture
def match() -> CharsetMatch:
    return CharsetMatch(
        encoding="cp1252",
        text="Café crème",
        chaos=0.012,
        coherence=87.5,
        languages=(("French", 0.875), ("Spanish", 0.4)),
        alphabets=("Basic Latin", "Latin-1 Supplement"),
        submatches=(
            CharsetMatch(encoding="latin_1", text="Café crème", chaos=0.012, coherence=87.5),
        ),
        byte_count=10,
    )


def test_is_frozen(match):
    with pytest.raises(dataclasses.FrozenInstanceError):
        match.chaos = 1.0  # type: ignore[misc]


def test_str_is_text(match):
    assert str(match) == "Café crème"


def test_could_be_from_charset(match):
    assert match.could_be_from_charset == ["cp1252", "latin_1"]


def test_aliases(match):
    assert "windows_1252" in match.aliases


def test_language(match):
    assert match.language == "French"


def test_language_fallbacks():
    assert CharsetMatch("ascii", "hello", 0.0, 0.0).language == "English"
    assert CharsetMatch("shift_jis", "こんにちは", 0.0, 0.0).language == "Japanese"
    assert CharsetMatch("koi8_r", "да", 0.0, 0.0).language == "Unknown"


def test_fingerprint_depends_on_text_only(match):
    other = CharsetMatch(encoding="iso8859_15", text="Café crème", chaos=0.5, coherence=0.0)
    assert match.fingerprint == other.fingerprint
    assert match.fingerprint != CharsetMatch("cp1252", "Cafe", 0.0, 0.0).fingerprint


def test_multi_byte_usage():
    assert CharsetMatch("utf_8", "é", 0.0, 0.0, byte_count=2).multi_byte_usage == 0.5
    assert CharsetMatch("cp1252", "é", 0.0, 0.0, byte_count=1).multi_byte_usage == 0.0
    assert CharsetMatch("cp1252", "", 0.0, 0.0).multi_byte_usage == 0.0


def test_output(match):
    assert match.output() == "Café crème".encode("utf_8")
    assert match.output("UTF-16-LE") == "Café crème".encode("utf_16_le")
    assert match.output("ascii") == b"Caf? cr?me"


def test_to_dict_is_json_serializable(match):
    data = json.loads(json.dumps(match.to_dict()))
    assert data["encoding"] == "cp1252"
    assert data["could_be_from_charset"] == ["cp1252", "latin_1"]
    assert data["language"] == "French"
    assert data["languages"][0] == ["French", 0.875]
    assert data["has_signature"] is False
    assert data["lossy"] is False


def test_matches_access(match):
    other = CharsetMatch("koi8_r", "Cafц", 0.1, 0.0)
    results = CharsetMatches([match, other])
    assert len(results) == 2
    assert results[0] is match
    assert results[-1] is other
    assert results.best() is match
    assert results.encodings == ["cp1252", "koi8_r"]
    assert list(results) == [match, other]


def test_matches_lookup_by_name(match):
    results = CharsetMatches([match])
    assert results["windows-1252"] is match
    assert results["ISO-8859-1"] is match
    with pytest.raises(KeyError):
        results["koi8-r"]


def test_matches_repr_and_list(match):
    results = CharsetMatches([match])
    assert repr(results) == "<CharsetMatches ['cp1252']>"
    assert results.to_list() == [match.to_dict()]


def test_empty_matches():
    results = CharsetMatches()
    assert results.best() is None
    assert results.to_list() == []
