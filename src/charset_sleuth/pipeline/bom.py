"""Byte order mark and encoding signature detection."""

from __future__ import annotations

# Ordered longest-first so a shorter mark never masks a longer one
# (the UTF-32-LE BOM starts with the UTF-16-LE BOM).
_BOMS: tuple[tuple[bytes, str], ...] = tuple(
    sorted(
        (
            (b"\x00\x00\xfe\xff", "utf_32_be"),
            (b"\xff\xfe\x00\x00", "utf_32_le"),
            (b"\x84\x31\x95\x33", "gb18030"),
            (b"\x2b\x2f\x76\x38\x2d", "utf_7"),
            (b"\x2b\x2f\x76\x38", "utf_7"),
            (b"\x2b\x2f\x76\x39", "utf_7"),
            (b"\x2b\x2f\x76\x2b", "utf_7"),
            (b"\x2b\x2f\x76\x2f", "utf_7"),
            (b"\xef\xbb\xbf", "utf_8"),
            (b"\xfe\xff", "utf_16_be"),
            (b"\xff\xfe", "utf_16_le"),
        ),
        key=lambda entry: len(entry[0]),
        reverse=True,
    )
)

_UTF32_BOMS: frozenset[bytes] = frozenset({b"\x00\x00\xfe\xff", b"\xff\xfe\x00\x00"})


def detect_bom(data: bytes) -> tuple[str, bytes] | None:
    """Return ``(encoding, mark)`` for a signature at the start of *data*."""
    for bom_bytes, encoding in _BOMS:
        if data.startswith(bom_bytes):
            # FF FE 00 00 may just be a UTF-16-LE BOM followed by U+0000.
            # Only accept UTF-32 when the payload is whole 4-byte units.
            if bom_bytes in _UTF32_BOMS:
                payload_len = len(data) - len(bom_bytes)
                if payload_len % 4 != 0:
                    continue
            return encoding, bom_bytes
    return None


def decode_with_signature(data: bytes, encoding: str) -> str:
    """Decode *data* including its signature and drop the leading U+FEFF.

    Decoding the whole buffer keeps UTF-7 intact, whose signature shares
    bits with the first encoded character.

    :raises UnicodeDecodeError: If the payload is invalid for *encoding*.
    """
    text = data.decode(encoding)
    return text.removeprefix("\ufeff")
