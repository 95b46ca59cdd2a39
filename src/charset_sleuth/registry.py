"""Codec catalog: every text codec of the running interpreter we can probe.

The catalog is derived from :mod:`encodings.aliases` plus a handful of stdlib
codecs that have no alias entry.  Names are canonical Python codec names
(``cp1252``, ``utf_8``, ``shift_jis``).
"""

from __future__ import annotations

import codecs
import dataclasses
import functools
import threading
from encodings.aliases import aliases as _ALIASES

from _multibytecodec import MultibyteIncrementalDecoder  # type: ignore[import-not-found]

from charset_sleuth.enums import ERA_PRIORITY, EncodingEra

# Stdlib codecs that are missing from encodings.aliases.
_UNALIASED_CODECS: tuple[str, ...] = (
    "cp720",
    "cp737",
    "cp856",
    "cp874",
    "cp875",
    "cp1006",
    "koi8_t",
    "koi8_u",
    "mac_arabic",
    "mac_croatian",
    "mac_farsi",
    "mac_romanian",
)

# Not text codecs, platform-specific, or never worth probing.
_EXCLUDED_CODECS = frozenset({"rot_13", "tactis", "mbcs", "oem", "undefined"})

_UNICODE_MULTI_BYTE = frozenset(
    {
        "utf_7",
        "utf_8",
        "utf_8_sig",
        "utf_16",
        "utf_16_be",
        "utf_16_le",
        "utf_32",
        "utf_32_be",
        "utf_32_le",
    }
)

_CODE_UNITS: dict[str, int] = {
    "utf_16": 2,
    "utf_16_be": 2,
    "utf_16_le": 2,
    "utf_32": 4,
    "utf_32_be": 4,
    "utf_32_le": 4,
}


@dataclasses.dataclass(frozen=True, slots=True)
class EncodingInfo:
    """Static description of one codec.

    :param name: Canonical Python codec name.
    :param aliases: Other names :mod:`encodings.aliases` maps to *name*.
    :param multi_byte: Whether a character may span several bytes.
    :param era: The :class:`EncodingEra` the codec belongs to.
    :param code_unit: Size in bytes of the codec's smallest unit.
    """

    name: str
    aliases: tuple[str, ...]
    multi_byte: bool
    era: EncodingEra
    code_unit: int = 1

    @property
    def priority(self) -> int:
        return ERA_PRIORITY[self.era]


_REGISTRY: tuple[EncodingInfo, ...] | None = None
_INDEX: dict[str, EncodingInfo] | None = None
_REGISTRY_LOCK = threading.Lock()


def _codec_exists(name: str) -> bool:
    try:
        info = codecs.lookup(name)
    except LookupError:
        return False
    # Binary transforms such as base64_codec are not text encodings.
    return getattr(info, "_is_text_encoding", True)


def _is_multi_byte(name: str) -> bool:
    if name in _UNICODE_MULTI_BYTE:
        return True
    decoder = codecs.lookup(name).incrementaldecoder
    return decoder is not None and issubclass(decoder, MultibyteIncrementalDecoder)


def _build() -> tuple[EncodingInfo, ...]:
    alias_map: dict[str, list[str]] = {}
    for alias, target in _ALIASES.items():
        alias_map.setdefault(target, []).append(alias)

    names = sorted(
        name
        for name in {*alias_map, *_UNALIASED_CODECS}
        if not name.endswith("_codec")
        and name not in _EXCLUDED_CODECS
        and _codec_exists(name)
    )
    return tuple(
        EncodingInfo(
            name=name,
            aliases=tuple(sorted(alias_map.get(name, ()))),
            multi_byte=_is_multi_byte(name),
            era=EncodingEra.of(name),
            code_unit=_CODE_UNITS.get(name, 1),
        )
        for name in names
    )


def load_registry() -> tuple[EncodingInfo, ...]:
    """Return the process-wide codec catalog, building it on first use."""
    global _REGISTRY, _INDEX  # noqa: PLW0603
    if _REGISTRY is not None:
        return _REGISTRY
    with _REGISTRY_LOCK:
        if _REGISTRY is None:
            registry = _build()
            _INDEX = {info.name: info for info in registry}
            _REGISTRY = registry
    return _REGISTRY


def _index() -> dict[str, EncodingInfo]:
    load_registry()
    return _INDEX  # type: ignore[return-value]


def all_known_encodings() -> tuple[str, ...]:
    """Return the canonical names of every probe-able codec, sorted."""
    return tuple(info.name for info in load_registry())


@functools.lru_cache(maxsize=512)
def iana_name(name: str, strict: bool = True) -> str:
    """Resolve any spelling of a codec name to its canonical catalog name.

    ``"UTF-8"``, ``"utf8"`` and ``"windows-1252"`` become ``"utf_8"``,
    ``"utf_8"`` and ``"cp1252"``.

    :param name: The name to resolve.
    :param strict: Raise for unknown names instead of returning them normalized.
    :raises ValueError: If *strict* and the name does not resolve.
    """
    normalized = name.strip().lower().replace("-", "_").replace(" ", "_")
    index = _index()
    if _ALIASES.get(normalized) in index:
        return _ALIASES[normalized]
    if normalized in index:
        return normalized
    try:
        looked_up = codecs.lookup(normalized).name.replace("-", "_")
    except LookupError:
        looked_up = None
    if looked_up is not None:
        resolved = _ALIASES.get(looked_up, looked_up)
        if resolved in index:
            return resolved
    if strict:
        msg = f"Unable to retrieve a codec for '{name}'"
        raise ValueError(msg)
    return normalized


def get(name: str) -> EncodingInfo:
    """Return the :class:`EncodingInfo` for *name* (any spelling).

    :raises ValueError: If the codec is unknown.
    """
    return _index()[iana_name(name)]


def aliases(name: str) -> tuple[str, ...]:
    return get(name).aliases


def is_multi_byte_encoding(name: str) -> bool:
    return get(name).multi_byte


def decode(encoding: str, data: bytes) -> str:
    """Decode *data* losslessly.

    :raises UnicodeDecodeError: At the first invalid sequence.
    """
    return str(data, encoding, "strict")


def encode(encoding: str, text: str) -> bytes:
    """Encode *text* back to bytes.

    :raises UnicodeEncodeError: If *text* holds characters outside *encoding*.
    """
    return text.encode(encoding, "strict")
