"""Chunk sampling: pick byte windows of a buffer and decode them.

Large inputs are not decoded in full while candidates are being scored;
instead a few evenly spaced windows are decoded and measured.  Window
positions depend only on the buffer length and the configuration, so every
candidate encoding sees the same bytes.
"""

from __future__ import annotations

import codecs
import dataclasses
from collections.abc import Iterator, Sequence

from charset_sleuth import registry

# Bytes a multi-byte window may be moved back to find a sequence start.
_MAX_REALIGN = 3


@dataclasses.dataclass(frozen=True, slots=True)
class Chunk:
    """One decoded window.

    :param offset: First byte decoded, after realignment.
    :param end: Byte position the window stops at (exclusive).
    :param text: The decoded text, or ``None`` if the window did not decode.
    """

    offset: int
    end: int
    text: str | None

    @property
    def failed(self) -> bool:
        return self.text is None

    @property
    def size(self) -> int:
        """Length of the decoded text in characters."""
        return len(self.text) if self.text is not None else 0


def chunk_offsets(length: int, chunk_size: int, steps: int) -> tuple[int, ...]:
    """Return the start offsets of the windows sampled from *length* bytes.

    Buffers that fit in ``chunk_size * steps`` bytes are read as one window.
    """
    if length <= chunk_size * steps:
        return (0,)
    stride = length // steps
    return tuple(k * stride for k in range(steps))


def effective_chunk_size(length: int, chunk_size: int, steps: int) -> int:
    if length <= chunk_size * steps:
        return length
    return chunk_size


def _shifts(info: registry.EncodingInfo, offset: int) -> tuple[int, ...]:
    if offset == 0:
        return (0,)
    if info.code_unit > 1:
        return (0, info.code_unit)
    if info.multi_byte:
        return tuple(range(_MAX_REALIGN + 1))
    return (0,)


def _decode_window(data: bytes, encoding: str, start: int, end: int) -> str:
    if end >= len(data):
        return str(data[start:end], encoding, "strict")
    # A sequence split by the window end is not an error.
    decoder = codecs.getincrementaldecoder(encoding)("strict")
    return decoder.decode(data[start:end], final=False)


def sample_chunks(
    data: bytes, encoding: str, offsets: Sequence[int], chunk_size: int
) -> Iterator[Chunk]:
    """Lazily decode the windows of *data* starting at *offsets*.

    Offsets are aligned down to the codec's code unit.  A multi-byte window
    that starts inside a sequence is moved back until it decodes; a window
    that never decodes is yielded with ``text=None``.

    :param data: The full byte buffer.
    :param encoding: Canonical codec name.
    :param offsets: Window starts, as returned by :func:`chunk_offsets`.
    :param chunk_size: Window length in bytes.
    """
    info = registry.get(encoding)
    length = len(data)
    for offset in offsets:
        aligned = offset - offset % info.code_unit
        end = min(aligned + chunk_size, length)
        chunk = Chunk(offset=aligned, end=end, text=None)
        for shift in _shifts(info, aligned):
            start = max(0, aligned - shift)
            try:
                text = _decode_window(data, encoding, start, end)
            except UnicodeDecodeError:
                continue
            chunk = Chunk(offset=start, end=end, text=text)
            break
        yield chunk
