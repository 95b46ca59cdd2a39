# tests/test_ranking.py
from __future__ import annotations

from charset_sleuth.matches import CharsetMatch
from charset_sleuth.pipeline.ranking import rank


def _match(encoding: str, text: str = "café", chaos: float = 0.0, coherence: float = 50.0):
    return CharsetMatch(encoding=encoding, text=text, chaos=chaos, coherence=coherence)


def test_identical_text_is_merged():
    results = rank([_match("latin_1"), _match("cp1252"), _match("iso8859_15")])
    assert len(results) == 1
    best = results.best()
    assert best.encoding == "cp1252"
    assert best.could_be_from_charset == ["cp1252", "latin_1", "iso8859_15"]


def test_lower_chaos_first():
    results = rank([_match("cp1252", "a", chaos=0.1), _match("koi8_r", "b", chaos=0.05)])
    assert results.encodings == ["koi8_r", "cp1252"]


def test_higher_coherence_breaks_chaos_ties():
    results = rank(
        [_match("cp1252", "a", coherence=20.0), _match("koi8_r", "b", coherence=80.0)]
    )
    assert results.encodings == ["koi8_r", "cp1252"]


def test_era_then_name_break_remaining_ties():
    results = rank([_match("cp437", "a"), _match("latin_1", "b"), _match("cp1251", "c")])
    assert results.encodings == ["cp1251", "latin_1", "cp437"]


def test_preferred_encoding_leads_its_group():
    results = rank([_match("latin_1"), _match("cp1252")], preferred_encoding="latin_1")
    best = results.best()
    assert best.encoding == "latin_1"
    assert best.is_preferred
    assert best.could_be_from_charset == ["latin_1", "cp1252"]


def test_preferred_encoding_wins_exact_ties():
    results = rank([_match("cp1252", "a"), _match("latin_1", "b")], preferred_encoding="latin_1")
    assert results.encodings == ["latin_1", "cp1252"]
    assert [match.is_preferred for match in results] == [True, False]


def test_preferred_encoding_does_not_beat_lower_chaos():
    results = rank(
        [_match("cp1252", "a", chaos=0.0), _match("latin_1", "b", chaos=0.1)],
        preferred_encoding="latin_1",
    )
    assert results.encodings == ["cp1252", "latin_1"]


def test_near_equal_chaos_defers_to_coherence():
    results = rank(
        [
            _match("cp1251", "a", chaos=0.0, coherence=16.8),
            _match("cp1252", "b", chaos=0.004, coherence=90.5),
        ]
    )
    assert results.encodings == ["cp1252", "cp1251"]


def test_small_coherence_gap_leaves_chaos_in_charge():
    results = rank(
        [
            _match("cp1252", "a", chaos=0.008, coherence=51.0),
            _match("cp1251", "b", chaos=0.0, coherence=50.0),
        ]
    )
    assert results.encodings == ["cp1251", "cp1252"]


def test_clear_chaos_gap_beats_coherence():
    results = rank(
        [
            _match("cp1252", "a", chaos=0.05, coherence=90.0),
            _match("cp1251", "b", chaos=0.0, coherence=10.0),
        ]
    )
    assert results.encodings == ["cp1251", "cp1252"]


def test_near_equal_chaos_prefers_multi_byte_usage():
    wide = CharsetMatch(encoding="gb18030", text="ab", chaos=0.005, coherence=0.0, byte_count=4)
    narrow = CharsetMatch(encoding="cp1252", text="abcd", chaos=0.0, coherence=0.0, byte_count=4)
    assert rank([narrow, wide]).encodings == ["gb18030", "cp1252"]


def test_common_code_page_leads_identical_group():
    results = rank([_match("cp1250"), _match("cp1257"), _match("cp1252")])
    assert results.best().could_be_from_charset == ["cp1252", "cp1250", "cp1257"]


def test_empty():
    results = rank([])
    assert len(results) == 0
    assert results.best() is None
