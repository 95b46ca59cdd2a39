"""Candidate encoding enumeration.

Turns the codec catalog into the ordered list of encodings worth scoring for
one buffer: configuration filters first, then cheap byte pre-scans that rule
out whole families.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from charset_sleuth import registry
from charset_sleuth._utils import TRACE
from charset_sleuth.pipeline.escape import escape_encodings
from charset_sleuth.pipeline.markup import find_declared_encoding
from charset_sleuth.pipeline.utf8 import looks_like_utf8
from charset_sleuth.pipeline.utf1632 import wide_unicode_layouts

if TYPE_CHECKING:
    from charset_sleuth.config import DetectionConfig

logger = logging.getLogger(__name__)

# Only meaningful with their signature, which the BOM stage handles.
_SIGNATURE_ONLY = frozenset({"utf_8_sig", "utf_16", "utf_32"})

_WIDE_UNICODE = frozenset({"utf_16_be", "utf_16_le", "utf_32_be", "utf_32_le"})


def prioritized_encodings(data: bytes, config: DetectionConfig) -> tuple[str, ...]:
    """Return the encodings to score before all others, most likely first.

    An encoding declared in the content comes first (when preemptive
    detection is on), then ``ascii`` for 7-bit data or ``utf_8`` when the
    bytes have the shape of UTF-8.
    """
    found = []
    if config.preemptive:
        declared = find_declared_encoding(data)
        if declared is not None:
            logger.debug("Content declares %s", declared)
            found.append(declared)
    if data.isascii():
        found.append("ascii")
    elif looks_like_utf8(data):
        found.append("utf_8")
    return tuple(dict.fromkeys(found))


def enumerate_candidates(
    data: bytes,
    config: DetectionConfig,
    prioritized: tuple[str, ...] | None = None,
) -> tuple[str, ...]:
    """Return the encodings to score for *data*, in scoring order.

    :param data: The input buffer.
    :param config: Filters to apply.
    :param prioritized: Encodings to put first; computed when ``None``.
    :returns: Canonical codec names, empty for an empty buffer.
    """
    if not data:
        return ()
    if prioritized is None:
        prioritized = prioritized_encodings(data, config)

    pool = set(registry.all_known_encodings())
    if config.include_encodings:
        pool &= config.include_encodings
    pool -= config.excluded_encodings
    pool -= _SIGNATURE_ONLY
    pool = {name for name in pool if registry.get(name).era & config.encoding_era}

    wide = wide_unicode_layouts(data)
    pool = {name for name in pool if name not in _WIDE_UNICODE or name in wide}

    if data.isascii():
        # Multi-byte codecs need high-bit bytes, except the 7-bit escape ones
        # and UTF-16/32 of ASCII text.
        escapes = escape_encodings(data)
        pool = {
            name
            for name in pool
            if not registry.is_multi_byte_encoding(name) or name in escapes or name in wide
        }

    first = [name for name in prioritized if name in pool]
    rest = sorted(
        pool.difference(first), key=lambda name: (registry.get(name).priority, name)
    )
    candidates = (*first, *rest)
    logger.log(TRACE, "%d candidate(s), prioritized: %s", len(candidates), first)
    return candidates
