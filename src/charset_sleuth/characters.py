"""Per-character Unicode predicates used by the mess and coherence scorers.

All predicates are pure functions of a single character, so they are memoized
process-wide.
"""

from __future__ import annotations

import functools
import unicodedata

from charset_sleuth.unicode_ranges import UNICODE_SECONDARY_RANGE_KEYWORD, find_range

# Enough slots for every code point a UTF-8 payload of typical size can hold.
_CACHE_SIZE = 8192

_ACCENT_MARKERS: tuple[str, ...] = (
    "WITH GRAVE",
    "WITH ACUTE",
    "WITH CEDILLA",
    "WITH DIAERESIS",
    "WITH CIRCUMFLEX",
    "WITH TILDE",
)

_EXTRA_SEPARATORS = frozenset({"｜", "+", ",", ";", "<", ">"})  # noqa: RUF001

#: ASCII punctuation too common in markup and code to count as noise.
COMMON_SAFE_ASCII_CHARACTERS: frozenset[str] = frozenset(
    {"<", ">", "=", ":", "/", "&", ";", "{", "}", "[", "]", ",", "|", '"', "-", "(", ")"}
)


def _name(character: str) -> str:
    try:
        return unicodedata.name(character)
    except ValueError:
        return ""


def category(character: str) -> str:
    """Return the general category of *character*."""
    return unicodedata.category(character)


@functools.lru_cache(maxsize=_CACHE_SIZE)
def unicode_range(character: str) -> str | None:
    """Return the official Unicode block name of *character*."""
    return find_range(ord(character))


block = unicode_range


def is_printable(character: str) -> bool:
    return character.isprintable()


@functools.lru_cache(maxsize=_CACHE_SIZE)
def is_accentuated(character: str) -> bool:
    description = _name(character)
    return any(marker in description for marker in _ACCENT_MARKERS)


@functools.lru_cache(maxsize=_CACHE_SIZE)
def remove_accent(character: str) -> str:
    """Return the base letter of *character* when it decomposes, else itself."""
    decomposed = unicodedata.decomposition(character)
    if not decomposed:
        return character
    codes = decomposed.split(" ")
    # Compatibility decompositions start with a <tag>.
    if codes[0].startswith("<"):
        return character
    return chr(int(codes[0], 16))


@functools.lru_cache(maxsize=_CACHE_SIZE)
def is_latin(character: str) -> bool:
    return "LATIN" in _name(character)


def is_ascii(character: str) -> bool:
    return character.isascii()


@functools.lru_cache(maxsize=_CACHE_SIZE)
def is_punctuation(character: str) -> bool:
    if unicodedata.category(character).startswith("P"):
        return True
    character_range = unicode_range(character)
    return character_range is not None and "Punctuation" in character_range


@functools.lru_cache(maxsize=_CACHE_SIZE)
def is_symbol(character: str) -> bool:
    if unicodedata.category(character)[0] in {"S", "N"}:
        return True
    character_range = unicode_range(character)
    return character_range is not None and "Forms" in character_range


@functools.lru_cache(maxsize=_CACHE_SIZE)
def is_emoticon(character: str) -> bool:
    character_range = unicode_range(character)
    return character_range is not None and "Emoticons" in character_range


@functools.lru_cache(maxsize=_CACHE_SIZE)
def is_separator(character: str) -> bool:
    if character.isspace() or character in _EXTRA_SEPARATORS:
        return True
    return unicodedata.category(character).startswith("Z")


def is_case_variable(character: str) -> bool:
    return character.islower() != character.isupper()


@functools.lru_cache(maxsize=_CACHE_SIZE)
def is_cjk(character: str) -> bool:
    return "CJK" in _name(character)


@functools.lru_cache(maxsize=_CACHE_SIZE)
def is_hiragana(character: str) -> bool:
    return "HIRAGANA" in _name(character)


@functools.lru_cache(maxsize=_CACHE_SIZE)
def is_katakana(character: str) -> bool:
    return "KATAKANA" in _name(character)


@functools.lru_cache(maxsize=_CACHE_SIZE)
def is_hangul(character: str) -> bool:
    return "HANGUL" in _name(character)


@functools.lru_cache(maxsize=_CACHE_SIZE)
def is_thai(character: str) -> bool:
    return "THAI" in _name(character)


@functools.lru_cache(maxsize=len(UNICODE_SECONDARY_RANGE_KEYWORD) * 32)
def is_unicode_range_secondary(range_name: str) -> bool:
    return any(keyword in range_name for keyword in UNICODE_SECONDARY_RANGE_KEYWORD)


@functools.lru_cache(maxsize=_CACHE_SIZE)
def is_control(character: str) -> bool:
    """Return True for control and invisible format characters.

    Whitespace, the ASCII substitute character and the zero-width no-break
    space (a BOM that survived decoding) are tolerated.  Format characters
    from General Punctuation (joiners, direction marks) are legitimate in
    Arabic, Farsi and Hebrew text.
    """
    if character.isspace() or character in {"\x1a", "\ufeff"}:
        return False
    character_category = unicodedata.category(character)
    if character_category == "Cc":
        return True
    return character_category == "Cf" and unicode_range(character) != "General Punctuation"


@functools.lru_cache(maxsize=_CACHE_SIZE)
def is_invalid_code_point(character: str) -> bool:
    """Return True for surrogates, private-use and unassigned code points."""
    return unicodedata.category(character) in {"Cs", "Co", "Cn"}
