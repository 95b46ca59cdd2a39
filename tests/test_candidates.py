# tests/test_candidates.py
from __future__ import annotations

from charset_sleuth import registry
from charset_sleuth.config import DetectionConfig
from charset_sleuth.enums import EncodingEra
from charset_sleuth.pipeline.candidates import enumerate_candidates, prioritized_encodings


def test_prioritized_ascii(english_ascii):
    assert prioritized_encodings(english_ascii, DetectionConfig()) == ("ascii",)


def test_prioritized_utf8(russian_utf8):
    assert prioritized_encodings(russian_utf8, DetectionConfig()) == ("utf_8",)


def test_prioritized_legacy(french_cp1252):
    assert prioritized_encodings(french_cp1252, DetectionConfig()) == ()


def test_declared_encoding_comes_first():
    data = b'<meta charset="koi8-r"><p>' + "Привет".encode("koi8_r") + b"</p>"
    assert prioritized_encodings(data, DetectionConfig()) == ("koi8_r",)
    assert enumerate_candidates(data, DetectionConfig())[0] == "koi8_r"


def test_declared_encoding_ignored_when_not_preemptive():
    data = b'<meta charset="koi8-r"><p>' + "Привет".encode("koi8_r") + b"</p>"
    assert prioritized_encodings(data, DetectionConfig(preemptive=False)) == ()


def test_empty_buffer_has_no_candidates():
    assert enumerate_candidates(b"", DetectionConfig()) == ()


def test_candidates_are_unique_and_ordered(french_cp1252):
    candidates = enumerate_candidates(french_cp1252, DetectionConfig())
    assert len(candidates) == len(set(candidates))
    keys = [(registry.get(name).priority, name) for name in candidates]
    assert keys == sorted(keys)
    assert "cp1252" in candidates


def test_signature_only_codecs_are_never_candidates(french_cp1252):
    candidates = enumerate_candidates(french_cp1252, DetectionConfig())
    assert not {"utf_8_sig", "utf_16", "utf_32"} & set(candidates)


def test_include_and_exclude(french_cp1252):
    config = DetectionConfig(
        include_encodings={"latin_1", "cp1252", "koi8_r"}, excluded_encodings={"koi8_r"}
    )
    assert enumerate_candidates(french_cp1252, config) == ("cp1252", "latin_1")


def test_excluded_prioritized_encoding_is_dropped(russian_utf8):
    config = DetectionConfig(excluded_encodings={"utf_8"})
    assert "utf_8" not in enumerate_candidates(russian_utf8, config)


def test_era_filter(french_cp1252):
    candidates = enumerate_candidates(french_cp1252, DetectionConfig(encoding_era=EncodingEra.DOS))
    assert candidates
    assert all(registry.get(name).era is EncodingEra.DOS for name in candidates)


def test_ascii_data_skips_multi_byte_codecs(english_ascii):
    candidates = enumerate_candidates(english_ascii, DetectionConfig())
    assert candidates[0] == "ascii"
    assert "shift_jis" not in candidates
    assert "utf_8" not in candidates
    assert "cp1252" in candidates


def test_ascii_escape_codec_is_kept():
    data = b"Hello ~{CEDE~} World"
    assert "hz" in enumerate_candidates(data, DetectionConfig())


def test_wide_layout_is_required():
    data = "Hello world".encode("utf_16_le")
    candidates = enumerate_candidates(data, DetectionConfig())
    assert "utf_16_le" in candidates
    assert "utf_16_be" not in candidates

    assert "utf_16_le" not in enumerate_candidates(b"Hello world", DetectionConfig())
