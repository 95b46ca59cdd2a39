# tests/test_registry.py
from __future__ import annotations

import pytest

from charset_sleuth import registry
from charset_sleuth.enums import EncodingEra
from charset_sleuth.registry import EncodingInfo


def test_encoding_info_is_frozen():
    info = registry.load_registry()[0]
    assert isinstance(info, EncodingInfo)
    with pytest.raises(AttributeError):
        info.name = "something"  # type: ignore[misc]


def test_registry_is_built_once():
    assert registry.load_registry() is registry.load_registry()
    assert isinstance(registry.load_registry(), tuple)


def test_registry_has_entries():
    assert len(registry.all_known_encodings()) > 80


def test_names_are_sorted_and_unique():
    names = registry.all_known_encodings()
    assert list(names) == sorted(set(names))


@pytest.mark.parametrize("name", ["utf_8", "ascii", "cp1252", "latin_1", "shift_jis", "gb18030"])
def test_common_codecs_present(name: str):
    assert name in registry.all_known_encodings()


@pytest.mark.parametrize("name", ["base64_codec", "rot_13", "zlib_codec", "hex_codec", "mbcs"])
def test_non_text_codecs_absent(name: str):
    assert name not in registry.all_known_encodings()


def test_utf8_is_modern_web():
    assert registry.get("utf_8").era is EncodingEra.MODERN_WEB


def test_cp037_is_mainframe():
    assert registry.get("cp037").era is EncodingEra.MAINFRAME


def test_mac_roman_is_legacy_mac():
    assert registry.get("mac_roman").era is EncodingEra.LEGACY_MAC


@pytest.mark.parametrize(
    ("alias", "expected"),
    [
        ("UTF-8", "utf_8"),
        ("utf8", "utf_8"),
        ("windows-1252", "cp1252"),
        ("latin1", "latin_1"),
        ("ISO-8859-1", "latin_1"),
        ("Shift_JIS", "shift_jis"),
        ("ascii", "ascii"),
        ("us-ascii", "ascii"),
    ],
)
def test_iana_name(alias: str, expected: str):
    assert registry.iana_name(alias) == expected


def test_iana_name_unknown_raises():
    with pytest.raises(ValueError, match="Unable to retrieve a codec"):
        registry.iana_name("klingon-8")


def test_iana_name_non_strict_returns_normalized():
    assert registry.iana_name("Klingon 8", strict=False) == "klingon_8"


def test_iana_name_rejects_binary_codec():
    with pytest.raises(ValueError, match="Unable to retrieve a codec"):
        registry.iana_name("base64")


def test_multi_byte_flags():
    assert registry.is_multi_byte_encoding("shift_jis")
    assert registry.is_multi_byte_encoding("utf_8")
    assert registry.is_multi_byte_encoding("utf_16_le")
    assert not registry.is_multi_byte_encoding("cp1252")
    assert not registry.is_multi_byte_encoding("koi8_r")


def test_code_units():
    assert registry.get("utf-16-le").code_unit == 2
    assert registry.get("utf_32_be").code_unit == 4
    assert registry.get("cp1252").code_unit == 1


def test_aliases():
    assert "windows_1252" in registry.aliases("cp1252")
    assert "latin1" in registry.aliases("latin_1")


def test_decode_and_encode():
    assert registry.decode("cp1252", b"caf\xe9") == "café"
    assert registry.encode("cp1252", "café") == b"caf\xe9"


def test_decode_invalid_raises():
    with pytest.raises(UnicodeDecodeError):
        registry.decode("utf_8", b"caf\xe9")


def test_encode_unsupported_raises():
    with pytest.raises(UnicodeEncodeError):
        registry.encode("ascii", "café")


def test_priority_follows_era():
    assert registry.get("cp1252").priority < registry.get("latin_1").priority
    assert registry.get("latin_1").priority < registry.get("cp437").priority
