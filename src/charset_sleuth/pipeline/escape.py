"""Escape-sequence encodings (ISO-2022, HZ, UTF-7) in 7-bit data.

These codecs are multi-byte but use only ASCII-range bytes, so the candidate
enumerator keeps them for pure-ASCII input only when their shift sequences
are actually present.
"""

from __future__ import annotations

import re

_ISO2022_JP_ESCAPES: tuple[bytes, ...] = (b"\x1b$B", b"\x1b$@", b"\x1b(J", b"\x1b$(D")
_ISO2022_KR_ESCAPE = b"\x1b$)C"
_ISO2022_JP_FAMILY = frozenset(
    {
        "iso2022_jp",
        "iso2022_jp_1",
        "iso2022_jp_2",
        "iso2022_jp_2004",
        "iso2022_jp_3",
        "iso2022_jp_ext",
    }
)

# GB2312 rows and cells are both printable ASCII between the HZ shift marks.
_HZ_REGION = re.compile(rb"~\{([\x21-\x7e]*?)~\}")
_UTF7_RUN = re.compile(rb"\+([A-Za-z0-9+/]*)")
_B64_VALUE: dict[int, int] = {
    c: i
    for i, c in enumerate(
        b"ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
    )
}


def _has_hz_pairs(data: bytes) -> bool:
    return any(
        len(region) >= 2 and not len(region) % 2
        for region in _HZ_REGION.findall(data)
    )


def _utf7_run_is_complete(run: bytes) -> bool:
    """A shifted run must carry one UTF-16 unit and pad with zero bits."""
    if len(run) < 3:
        return False
    spare_bits = len(run) * 6 % 16
    if not spare_bits:
        return True
    return not _B64_VALUE[run[-1]] & ((1 << spare_bits) - 1)


def _has_utf7_runs(data: bytes) -> bool:
    # "+-" is a literal plus and yields an empty run.
    return any(_utf7_run_is_complete(run) for run in _UTF7_RUN.findall(data))


def escape_encodings(data: bytes) -> frozenset[str]:
    """Return the escape-based codecs whose shift sequences occur in *data*.

    :param data: The raw byte data to examine.
    :returns: Canonical codec names, possibly empty.
    """
    found: set[str] = set()
    if b"\x1b" in data:
        if any(escape in data for escape in _ISO2022_JP_ESCAPES):
            found |= _ISO2022_JP_FAMILY
        if _ISO2022_KR_ESCAPE in data:
            found.add("iso2022_kr")
    if b"~{" in data and _has_hz_pairs(data):
        found.add("hz")
    if b"+" in data and _has_utf7_runs(data):
        found.add("utf_7")
    return frozenset(found)
