"""Coherence scoring: does the decoded text look like a real language?

Letters of the decoded text are split into alphabet layers, ranked by how
often they occur, and that ranking is compared against the reference ranking
of each plausible language.
"""

from __future__ import annotations

import functools
from collections import Counter
from collections.abc import Iterable, Sequence

from charset_sleuth import registry
from charset_sleuth.characters import (
    is_accentuated,
    is_unicode_range_secondary,
    unicode_range,
)
from charset_sleuth.languages import (
    LANGUAGES,
    LATIN_BASED,
    language_tables,
    languages_for_alphabet,
    multi_byte_languages,
    ranked_letters,
)
from charset_sleuth.pipeline import CoherenceReport
from charset_sleuth.pipeline.mess import is_suspiciously_successive_range

#: Layers with this many letters or fewer are too short to rank.
TOO_SMALL_SEQUENCE = 32

_SUFFICIENT_RATIO = 0.8
_MAX_SUFFICIENT_MATCHES = 3
_ALPHABET_OVERLAP = 0.2
_RANGE_SHARE = 0.15
_RANK_WINDOW = 4
_NEIGHBOUR_AGREEMENT = 0.4


@functools.lru_cache(maxsize=128)
def encoding_unicode_ranges(encoding: str) -> tuple[str, ...]:
    """Return the Unicode blocks a single-byte code page mostly decodes to.

    Bytes 0x40-0xFE are decoded one at a time; blocks holding at least 15% of
    the non-secondary characters are returned, sorted by name.

    :raises ValueError: If *encoding* is multi-byte.
    """
    if registry.is_multi_byte_encoding(encoding):
        msg = f"{encoding} is a multi-byte encoding"
        raise ValueError(msg)
    counts: Counter[str] = Counter()
    for byte in range(0x40, 0xFF):
        try:
            character = bytes([byte]).decode(encoding)
        except UnicodeDecodeError:
            continue
        if not character:
            continue
        character_range = unicode_range(character[0])
        if character_range is None or is_unicode_range_secondary(character_range):
            continue
        counts[character_range] += 1
    total = sum(counts.values())
    return tuple(
        sorted(name for name, count in counts.items() if count / total >= _RANGE_SHARE)
    )


@functools.lru_cache(maxsize=128)
def _encoding_languages(encoding: str) -> tuple[str, ...]:
    if registry.is_multi_byte_encoding(encoding):
        return tuple(multi_byte_languages(encoding))
    for character_range in encoding_unicode_ranges(encoding):
        if "Latin" not in character_range:
            return languages_for_alphabet(character_range) or (LATIN_BASED,)
    return (LATIN_BASED,)


def encoding_languages(encoding: str) -> list[str]:
    """Return the languages *encoding* is usually written in.

    ``["Latin Based"]`` stands for any pure-Latin language; an empty list
    means no restriction.
    """
    return list(_encoding_languages(encoding))


def alpha_unicode_split(text: str) -> list[str]:
    """Split the letters of *text* into lower-cased layers, one per alphabet.

    Letters from blocks that commonly mix (Latin and Latin-1 Supplement,
    Hiragana and CJK) share a layer.
    """
    layers: dict[str, list[str]] = {}
    for ch in text:
        if not ch.isalpha():
            continue
        character_range = unicode_range(ch)
        if character_range is None:
            continue
        target = next(
            (
                discovered
                for discovered in layers
                if not is_suspiciously_successive_range(discovered, character_range)
            ),
            character_range,
        )
        layers.setdefault(target, []).append(ch.lower())
    return ["".join(layer) for layer in layers.values()]


def alphabet_languages(characters: Iterable[str], ignore_non_latin: bool = False) -> list[str]:
    """Return languages whose reference letters overlap *characters* by 20% or more.

    Best overlap first.  When the sample carries accents, languages written
    without accents are skipped.
    """
    source = set(characters)
    source_has_accents = any(is_accentuated(ch) for ch in source)
    scored: list[tuple[str, float]] = []
    for language, letters, has_accents, pure_latin in LANGUAGES:
        if (ignore_non_latin and not pure_latin) or (source_has_accents and not has_accents):
            continue
        reference = set(letters)
        ratio = len(reference & source) / len(reference)
        if ratio >= _ALPHABET_OVERLAP:
            scored.append((language, ratio))
    scored.sort(key=lambda item: item[1], reverse=True)
    return list(dict.fromkeys(language for language, _ in scored))


def _rank_agreement(reference: str, ordered: str) -> float:
    ordered_count = len(ordered)
    if not ordered_count:
        return 0.0
    reference_count = len(reference)
    reference_rank = {ch: rank for rank, ch in enumerate(reference)}
    window = reference_count / 3 if reference_count > 26 else _RANK_WINDOW
    projection = reference_count / ordered_count

    approved = 0.0
    total = 0.0
    for rank, ch in enumerate(ordered):
        # Frequent letters weigh up to twice as much as the rarest ones.
        weight = 1 + (1 - rank / ordered_count)
        total += weight
        expected = reference_rank.get(ch)
        if expected is None:
            continue
        if abs(int(rank * projection) - expected) <= window:
            approved += weight
            continue

        before_reference = set(reference[:expected])
        after_reference = set(reference[expected:])
        if not before_reference:
            approved += weight
            continue
        before = len(set(ordered[:rank]) & before_reference) / len(before_reference)
        after = len(set(ordered[rank:]) & after_reference) / len(after_reference)
        if before >= _NEIGHBOUR_AGREEMENT or after >= _NEIGHBOUR_AGREEMENT:
            approved += weight
    return approved / total


def characters_popularity_compare(language: str, ordered_characters: str) -> float:
    """Compare letters ranked by frequency with *language*'s reference ranking.

    Returns a ratio in [0, 1]: 0 means no resemblance, 1 a near-perfect fit.
    The comparison is tolerant; a letter counts as in place when its
    projected rank is close to the reference rank, or when most of the
    letters around it agree.

    :raises ValueError: If *language* has no reference table.
    """
    ranked_letters(language)
    return max(
        _rank_agreement(reference, ordered_characters)
        for reference in language_tables(language)
    )


@functools.lru_cache(maxsize=2048)
def coherence_ratio(
    text: str, threshold: float = 0.1, languages: tuple[str, ...] | None = None
) -> tuple[tuple[str, float], ...]:
    """Return ``(language, ratio)`` pairs for *text*, best first.

    :param text: Decoded text.
    :param threshold: Minimum ratio for a language to be reported.
    :param languages: Languages to consider; ``("Latin Based",)`` means any
        pure-Latin language and ``None`` means any language at all.
    """
    include = list(languages or ())
    ignore_non_latin = include == [LATIN_BASED]
    if ignore_non_latin:
        include = []

    results: dict[str, float] = {}
    sufficient_matches = 0
    for layer in alpha_unicode_split(text):
        if len(layer) <= TOO_SMALL_SEQUENCE:
            continue
        ordered = "".join(ch for ch, _ in Counter(layer).most_common())
        candidates = include or alphabet_languages(ordered, ignore_non_latin)
        for language in candidates:
            ratio = characters_popularity_compare(language, ordered)
            if ratio < threshold:
                continue
            if ratio >= _SUFFICIENT_RATIO:
                sufficient_matches += 1
            results[language] = max(results.get(language, 0.0), round(ratio, 4))
            if sufficient_matches >= _MAX_SUFFICIENT_MATCHES:
                break

    return tuple(sorted(results.items(), key=lambda item: item[1], reverse=True))


def merge_coherence_ratios(
    results: Iterable[Sequence[tuple[str, float]]],
) -> list[tuple[str, float]]:
    """Average per-language ratios over several chunks, best first."""
    index: dict[str, list[float]] = {}
    for result in results:
        for language, ratio in result:
            index.setdefault(language, []).append(ratio)
    merged = [
        (language, round(sum(ratios) / len(ratios), 4))
        for language, ratios in index.items()
    ]
    merged.sort(key=lambda item: item[1], reverse=True)
    return merged


def _alphabets(texts: Iterable[str]) -> tuple[str, ...]:
    found = set()
    for text in texts:
        for ch in set(text):
            if ch.isalpha():
                character_range = unicode_range(ch)
                if character_range is not None:
                    found.add(character_range)
    return tuple(sorted(found))


def score_coherence(
    texts: Sequence[str],
    encoding: str,
    language_hint: str | None = None,
    threshold: float = 0.1,
) -> CoherenceReport:
    """Score the language fit of the decoded chunks of one candidate.

    :param texts: Decoded chunks of the candidate.
    :param encoding: The candidate encoding, used to narrow the languages.
    :param language_hint: A language that replaces the narrowing.
    :param threshold: Minimum ratio for a language to be reported.
    """
    alphabets = _alphabets(texts)
    if encoding == "ascii":
        return CoherenceReport(alphabets=alphabets)
    if language_hint is not None:
        languages: tuple[str, ...] | None = (language_hint,)
    else:
        languages = _encoding_languages(encoding) or None
    merged = merge_coherence_ratios(
        coherence_ratio(text, threshold, languages) for text in texts
    )
    return CoherenceReport(languages=tuple(merged), alphabets=alphabets)
