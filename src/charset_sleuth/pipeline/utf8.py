"""UTF-8 structural pre-check.

A byte-pattern scan that never decodes: it only tells the candidate
enumerator whether UTF-8 is worth trying first.
"""

from __future__ import annotations

# Bytes inspected by the pre-check; the scorer still sees the whole buffer.
_SCAN_LIMIT = 64 * 1024

# Allowed range of the byte following a lead byte, where it is narrower than
# the general continuation range (no overlongs, no surrogates, <= U+10FFFF).
_SECOND_BYTE_RANGES: dict[int, range] = {
    0xE0: range(0xA0, 0xC0),
    0xED: range(0x80, 0xA0),
    0xF0: range(0x90, 0xC0),
    0xF4: range(0x80, 0x90),
}
_CONTINUATION = range(0x80, 0xC0)


def _sequence_length(lead: int) -> int:
    if 0xC2 <= lead <= 0xDF:
        return 2
    if 0xE0 <= lead <= 0xEF:
        return 3
    if 0xF0 <= lead <= 0xF4:
        return 4
    return 0


def looks_like_utf8(data: bytes) -> bool:
    """Return True if *data* holds well-formed multi-byte UTF-8 sequences.

    Pure ASCII returns False (the ASCII check covers it).  A sequence
    truncated by the scan limit counts as valid.

    :param data: The raw byte data to examine.
    """
    view = data[:_SCAN_LIMIT]
    size = len(view)
    sequences = 0
    pos = 0
    while pos < size:
        lead = view[pos]
        if lead < 0x80:
            pos += 1
            continue
        width = _sequence_length(lead)
        if not width:
            return False
        if pos + width > size:
            break
        tail = view[pos + 1 : pos + width]
        if tail[0] not in _SECOND_BYTE_RANGES.get(lead, _CONTINUATION):
            return False
        if any(b not in _CONTINUATION for b in tail[1:]):
            return False
        sequences += 1
        pos += width
    return sequences > 0
