"""Mess (chaos) scoring of decoded text.

Text decoded with the wrong code page shows telltale noise: control
characters, runs of symbols, letters from unrelated Unicode blocks glued
together, words made mostly of accents.  Each kind of noise is measured by a
detector, a pure function returning a ratio in [0, 1]; the chaos of a chunk
is the weighted sum of those ratios.

The battery is :data:`DETECTORS`, an ordered tuple of ``(function, weight)``
pairs.  Heavier detectors come first so the sum crosses the threshold early
on hopeless text.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable, Iterable

from charset_sleuth._utils import TRACE
from charset_sleuth.characters import (
    COMMON_SAFE_ASCII_CHARACTERS,
    is_accentuated,
    is_case_variable,
    is_cjk,
    is_control,
    is_emoticon,
    is_hangul,
    is_hiragana,
    is_invalid_code_point,
    is_katakana,
    is_latin,
    is_punctuation,
    is_separator,
    is_symbol,
    is_thai,
    is_unicode_range_secondary,
    remove_accent,
    unicode_range,
)
from charset_sleuth.pipeline import ChaosReport
from charset_sleuth.pipeline.cache import DETECTOR_CACHE, MemoCache, text_digest
from charset_sleuth.pipeline.chunks import Chunk

logger = logging.getLogger(__name__)

_WEIRD_SAFE = frozenset("<>-=~|_")
_CJK_INVALID_STOPS = frozenset("丅丄")

# Words at least this long, with foreign letters and no camel case, are noise.
_FOREIGN_LONG_WORD = 24
# Longest run of letters still considered a word by the case-flip check.
_ARCHAIC_WORD_LIMIT = 64


def _is_unprintable(character: str) -> bool:
    return is_control(character) or is_invalid_code_point(character)


def control_characters(text: str) -> float:
    """Share of control and invisible format characters."""
    if not text:
        return 0.0
    return sum(1 for ch in text if is_control(ch)) / len(text)


def invalid_code_points(text: str) -> float:
    """Share of surrogates, private-use and unassigned code points."""
    if not text:
        return 0.0
    return sum(1 for ch in text if is_invalid_code_point(ch)) / len(text)


def symbol_and_punctuation_excess(text: str) -> float:
    """Density of punctuation and symbols, ignoring repeats and markup characters.

    Symbols weigh twice as much as punctuation.  Densities under 0.3 are
    normal for prose and code and count as zero.
    """
    character_count = 0
    noise = 0
    last_printable = None
    for ch in text:
        if _is_unprintable(ch):
            continue
        character_count += 1
        if ch != last_printable and ch not in COMMON_SAFE_ASCII_CHARACTERS:
            if is_punctuation(ch):
                noise += 1
            elif not ch.isnumeric() and is_symbol(ch) and not is_emoticon(ch):
                noise += 2
        last_printable = ch
    if not character_count:
        return 0.0
    ratio = noise / character_count
    return min(ratio, 1.0) if ratio >= 0.3 else 0.0


def accent_excess(text: str) -> float:
    """Share of accented letters, once it is implausible for any language."""
    letters = [ch for ch in text if ch.isalpha()]
    if len(letters) < 8:
        return 0.0
    ratio = sum(1 for ch in letters if is_accentuated(ch)) / len(letters)
    return ratio if ratio >= 0.35 else 0.0


def duplicate_accents(text: str) -> float:
    """Successive accented Latin letters, worse when both are upper case or share a base."""
    character_count = 0
    successive = 0
    previous = None
    for ch in text:
        if not (ch.isalpha() and is_latin(ch)):
            continue
        character_count += 1
        if previous is not None and is_accentuated(ch) and is_accentuated(previous):
            if ch.isupper() and previous.isupper():
                successive += 1
            if remove_accent(ch) == remove_accent(previous):
                successive += 1
        previous = ch
    if not character_count:
        return 0.0
    return min(successive / character_count, 1.0)


@functools.lru_cache(maxsize=1024)
def is_suspiciously_successive_range(range_a: str | None, range_b: str | None) -> bool:
    """Return True if characters of *range_a* rarely precede ones of *range_b*.

    Unknown ranges are always suspicious.
    """
    if range_a is None or range_b is None:
        return True
    pair = (range_a, range_b)
    if range_a == range_b:
        return False
    if all("Latin" in name for name in pair) or any("Emoticons" in name for name in pair):
        return False
    # Vietnamese and others stack combining marks on Latin letters.
    if any("Latin" in name for name in pair) and any("Combining" in name for name in pair):
        return False

    shared = set(range_a.split()) & set(range_b.split())
    if any(not is_unicode_range_secondary(keyword) for keyword in shared):
        return False

    japanese_a = range_a in {"Hiragana", "Katakana"}
    japanese_b = range_b in {"Hiragana", "Katakana"}
    has_cjk = any("CJK" in name for name in pair)
    if (japanese_a or japanese_b) and has_cjk:
        return False
    if japanese_a and japanese_b:
        return False
    if any("Hangul" in name for name in pair) and (has_cjk or "Basic Latin" in pair):
        return False
    # Chinese uses dedicated blocks for punctuation and full-width forms.
    return not (
        has_cjk and any("Punctuation" in name or "Forms" in name for name in pair)
    )


def suspicious_ranges(text: str) -> float:
    """Share of neighbouring characters from blocks that do not mix."""
    character_count = 0
    suspicious = 0
    previous = None
    for ch in text:
        if _is_unprintable(ch):
            continue
        character_count += 1
        if ch.isspace() or is_punctuation(ch) or ch in COMMON_SAFE_ASCII_CHARACTERS:
            previous = None
            continue
        if previous is not None and is_suspiciously_successive_range(
            unicode_range(previous), unicode_range(ch)
        ):
            suspicious += 1
        previous = ch
    if not character_count:
        return 0.0
    ratio = suspicious / character_count
    return min(ratio, 1.0) if ratio >= 0.05 else 0.0


def _is_foreign_letter(ch: str) -> bool:
    return (
        (not is_latin(ch) or is_accentuated(ch))
        and not is_cjk(ch)
        and not is_hangul(ch)
        and not is_katakana(ch)
        and not is_hiragana(ch)
        and not is_thai(ch)
    )


def weird_words(text: str) -> float:
    """Share of letters inside words that no language would write.

    A word is bad when it mixes in symbols, is more than a third accents,
    ends with an upper-case accented letter, or is very long, foreign and not
    camel cased.
    """
    character_count = 0
    word_count = 0
    foreign_long_count = 0
    bad_character_count = 0
    buffer: list[str] = []
    accent_count = 0
    foreign_long_watch = False
    is_current_word_bad = False

    # The trailing newline flushes the last word.
    for ch in f"{text}\n":
        if ch.isalpha():
            buffer.append(ch)
            if is_accentuated(ch):
                accent_count += 1
            if not foreign_long_watch and _is_foreign_letter(ch):
                foreign_long_watch = True
            continue
        if not buffer:
            continue

        if ch.isspace() or is_punctuation(ch) or is_separator(ch):
            word_count += 1
            buffer_length = len(buffer)
            character_count += buffer_length

            if buffer_length >= 4:
                if accent_count / buffer_length > 0.34:
                    is_current_word_bad = True
                last = buffer[-1]
                if is_accentuated(last) and last.isupper():
                    foreign_long_count += 1
                    is_current_word_bad = True
            if buffer_length >= _FOREIGN_LONG_WORD and foreign_long_watch:
                uppercase_count = sum(1 for c in buffer if c.isupper())
                probable_camel_cased = (
                    uppercase_count > 0 and uppercase_count / buffer_length <= 0.3
                )
                if not probable_camel_cased:
                    foreign_long_count += 1
                    is_current_word_bad = True

            if is_current_word_bad:
                bad_character_count += buffer_length
                is_current_word_bad = False

            foreign_long_watch = False
            buffer = []
            accent_count = 0
        elif (
            ch not in _WEIRD_SAFE
            and not (ch.isascii() and ch.isdigit())
            and is_symbol(ch)
        ):
            is_current_word_bad = True
            buffer.append(ch)

    if word_count <= 10 and foreign_long_count == 0:
        return 0.0
    return bad_character_count / character_count


def cjk_invalid_stops(text: str) -> float:
    """Overuse of '丅' and '丄', which GB code pages produce from misread stops."""
    wrong_stops = 0
    cjk_count = 0
    for ch in text:
        if ch in _CJK_INVALID_STOPS:
            wrong_stops += 1
        elif is_cjk(ch):
            cjk_count += 1
    if cjk_count < 16:
        return 0.0
    return min(wrong_stops / cjk_count, 1.0)


def archaic_upper_lower(text: str) -> float:
    """Letters flipping case back and forth inside short non-ASCII words (``sHeLl``)."""
    character_count = 0
    since_separator = 0
    successive = 0
    successive_final = 0
    current_ascii_only = True
    pending_flip = False
    last_alpha = None

    for ch in f"{text}\n":
        if not (ch.isalpha() and is_case_variable(ch)) and since_separator > 0:
            if (
                since_separator <= _ARCHAIC_WORD_LIMIT
                and not (ch.isascii() and ch.isdigit())
                and not current_ascii_only
            ):
                successive_final += successive
            successive = 0
            since_separator = 0
            last_alpha = None
            pending_flip = False
            character_count += 1
            current_ascii_only = True
            continue

        if current_ascii_only and not ch.isascii():
            current_ascii_only = False

        if last_alpha is not None:
            if (ch.isupper() and last_alpha.islower()) or (
                ch.islower() and last_alpha.isupper()
            ):
                if pending_flip:
                    successive += 2
                    pending_flip = False
                else:
                    pending_flip = True
            else:
                pending_flip = False

        character_count += 1
        since_separator += 1
        last_alpha = ch

    if not character_count:
        return 0.0
    return min(successive_final / character_count, 1.0)


Detector = Callable[[str], float]

#: The weighted detector battery, in evaluation order.
DETECTORS: tuple[tuple[Detector, int], ...] = (
    (control_characters, 8),
    (invalid_code_points, 8),
    (symbol_and_punctuation_excess, 1),
    (accent_excess, 1),
    (duplicate_accents, 2),
    (suspicious_ranges, 2),
    (weird_words, 1),
    (cjk_invalid_stops, 1),
    (archaic_upper_lower, 1),
)


def _safe_ratio(detector: Detector, text: str) -> float:
    try:
        ratio = detector(text)
    except Exception:  # noqa: BLE001
        logger.debug("Detector %s failed, counting its ratio as 1.0", detector.__name__)
        return 1.0
    return min(max(ratio, 0.0), 1.0)


def mess_ratio(
    text: str, threshold: float = 0.2, cache: MemoCache = DETECTOR_CACHE
) -> float:
    """Return the chaos of *text* in [0, 1], rounded to 3 digits.

    Summing stops as soon as the running total exceeds *threshold*; the
    result is then only known to be above it.

    :param text: A decoded chunk.
    :param threshold: The acceptance threshold of the caller.
    :param cache: Where detector ratios are memoized.
    """
    digest = text_digest(text)
    total = 0.0
    for detector, weight in DETECTORS:
        ratio = cache.get_or_compute(
            (detector.__name__, digest), functools.partial(_safe_ratio, detector, text)
        )
        total += weight * ratio
        if total > threshold:
            break
    return round(min(total, 1.0), 3)


def score_chaos(
    encoding: str,
    chunks: Iterable[Chunk],
    threshold: float,
    gave_up_limit: int,
    slack: float,
) -> ChaosReport | None:
    """Measure the chaos of *encoding* over its sampled *chunks*.

    A chunk that did not decode counts as 1.0.  Scoring stops early when the
    first chunk is far above *threshold* or when *gave_up_limit* chunks are
    above it.

    :returns: The report, or ``None`` if no chunk decoded at all.
    """
    ratios: list[float] = []
    texts: list[str] = []
    failed = 0
    above = 0
    gave_up = False
    for index, chunk in enumerate(chunks):
        if chunk.text is None:
            failed += 1
            ratio = 1.0
        else:
            ratio = mess_ratio(chunk.text, threshold)
            texts.append(chunk.text)
        ratios.append(ratio)
        if ratio > threshold:
            above += 1
        if (index == 0 and ratio > threshold + slack) or above >= gave_up_limit:
            gave_up = True
            break

    if not texts:
        logger.log(TRACE, "%s could not decode any chunk", encoding)
        return None
    report = ChaosReport(
        encoding=encoding,
        chunk_ratios=tuple(ratios),
        texts=tuple(texts),
        failed_chunks=failed,
        gave_up=gave_up,
    )
    logger.log(
        TRACE,
        "%s chaos=%.3f over %d chunk(s), %d failed%s",
        encoding,
        report.chaos,
        len(ratios),
        failed,
        ", gave up" if gave_up else "",
    )
    return report
