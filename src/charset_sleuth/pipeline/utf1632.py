"""Null-byte layout check for UTF-16 and UTF-32 without a BOM.

Single-byte and most multi-byte encodings never produce NUL bytes in text,
while UTF-16/UTF-32 text shows them at regular positions.  The candidate
enumerator only tries the BOM-less wide encodings whose layout matches.
"""

from __future__ import annotations

_SAMPLE_SIZE = 4096

# Shorter samples carry too few code units to show a layout.
_MIN_BYTES_UTF32 = 16
_MIN_BYTES_UTF16 = 10

# Share of UTF-16 units whose high byte must be NUL; CJK text stays above 15%.
_UTF16_MIN_NULL_FRACTION = 0.10


def _utf32_layouts(data: bytes) -> set[str]:
    """UTF-32 code points never exceed 0x10FFFF, so one end byte is always 0."""
    sample_len = len(data) - len(data) % 4
    if sample_len < _MIN_BYTES_UTF32:
        return set()
    units = range(0, sample_len, 4)
    found = set()
    if all(data[i] == 0 for i in units):
        found.add("utf_32_be")
    if all(data[i + 3] == 0 for i in units):
        found.add("utf_32_le")
    return found


def _utf16_layouts(data: bytes) -> set[str]:
    sample_len = len(data) - len(data) % 2
    if sample_len < _MIN_BYTES_UTF16:
        return set()
    num_units = sample_len // 2
    be_null_count = sum(1 for i in range(0, sample_len, 2) if data[i] == 0)
    le_null_count = sum(1 for i in range(1, sample_len, 2) if data[i] == 0)
    found = set()
    if be_null_count / num_units >= _UTF16_MIN_NULL_FRACTION:
        found.add("utf_16_be")
    if le_null_count / num_units >= _UTF16_MIN_NULL_FRACTION:
        found.add("utf_16_le")
    return found


def wide_unicode_layouts(data: bytes) -> frozenset[str]:
    """Return the BOM-less UTF-16/UTF-32 codecs whose NUL layout *data* shows."""
    sample = data[:_SAMPLE_SIZE]
    if b"\x00" not in sample:
        return frozenset()
    return frozenset(_utf32_layouts(sample) | _utf16_layouts(sample))
