"""Result deduplication and ordering."""

from __future__ import annotations

import dataclasses
import functools
from collections.abc import Iterable

from charset_sleuth import registry
from charset_sleuth.matches import CharsetMatch, CharsetMatches

# Chaos values closer than this are compared on coherence instead.
_CHAOS_TOLERANCE = 0.01
# Coherence points (out of 100) that count as a real difference.
_COHERENCE_TOLERANCE = 2.0
_MULTI_BYTE_TOLERANCE = 1e-6

# Within an era, these win exact ties over rarer code pages, in this order.
_COMMON_ENCODINGS: tuple[str, ...] = ("utf_8", "ascii", "cp1252", "latin_1")


def _tie_key(
    match: CharsetMatch, preferred_encoding: str | None
) -> tuple[float, float, bool, int, int, str]:
    encoding = match.encoding
    common = (
        _COMMON_ENCODINGS.index(encoding)
        if encoding in _COMMON_ENCODINGS
        else len(_COMMON_ENCODINGS)
    )
    return (
        match.chaos,
        -match.coherence,
        preferred_encoding not in match.could_be_from_charset,
        registry.get(encoding).priority,
        common,
        encoding,
    )


def _compare(a: CharsetMatch, b: CharsetMatch, preferred_encoding: str | None) -> int:
    """Order two matches, best first.

    Chaos decides unless the two are within ``_CHAOS_TOLERANCE``; then a
    clear coherence gap decides, then the larger multi-byte usage.
    """
    if abs(a.chaos - b.chaos) < _CHAOS_TOLERANCE:
        if abs(a.coherence - b.coherence) > _COHERENCE_TOLERANCE:
            return -1 if a.coherence > b.coherence else 1
        usage_a, usage_b = a.multi_byte_usage, b.multi_byte_usage
        if abs(usage_a - usage_b) > _MULTI_BYTE_TOLERANCE:
            return -1 if usage_a > usage_b else 1
    key_a = _tie_key(a, preferred_encoding)
    key_b = _tie_key(b, preferred_encoding)
    return (key_a > key_b) - (key_a < key_b)


def rank(
    matches: Iterable[CharsetMatch], preferred_encoding: str | None = None
) -> CharsetMatches:
    """Merge matches with identical text and order what remains.

    Within a group of interchangeable encodings the one sorting first stays
    primary and the others become its submatches.  Order is chaos ascending,
    with near-equal chaos settled by coherence and multi-byte usage; the
    preferred encoding, era and common code pages break remaining ties.

    :param matches: One match per surviving candidate.
    :param preferred_encoding: Canonical name of the caller's preferred codec.
    """
    order = functools.cmp_to_key(
        functools.partial(_compare, preferred_encoding=preferred_encoding)
    )

    groups: dict[str, list[CharsetMatch]] = {}
    for match in matches:
        groups.setdefault(match.fingerprint, []).append(match)

    primaries = []
    for members in groups.values():
        members.sort(key=order)
        primary, *others = members
        primaries.append(
            dataclasses.replace(
                primary,
                submatches=tuple(others),
                is_preferred=preferred_encoding is not None
                and any(match.encoding == preferred_encoding for match in members),
            )
        )

    primaries.sort(key=order)
    return CharsetMatches(primaries)
