"""Detection results."""

from __future__ import annotations

import dataclasses
import hashlib
from collections.abc import Iterable, Iterator
from typing import Any

from charset_sleuth import registry
from charset_sleuth.languages import ENCODING_TO_LANGUAGE


@dataclasses.dataclass(frozen=True, slots=True)
class CharsetMatch:
    """One encoding that decodes the input into plausible text.

    :param encoding: Canonical codec name.
    :param text: The input decoded with *encoding*.
    :param chaos: Mess ratio in [0, 1]; lower is cleaner.
    :param coherence: Language fit in [0, 100]; higher is better.
    :param languages: ``(language, ratio)`` pairs, best first.
    :param alphabets: Unicode blocks the decoded letters belong to.
    :param has_signature: The input started with a BOM or signature.
    :param is_preferred: This match holds the caller's preferred encoding.
    :param submatches: Other encodings producing exactly the same text.
    :param byte_count: Size of the input in bytes.
    :param lossy: Part of the input could not be decoded and was replaced.
    """

    encoding: str
    text: str
    chaos: float
    coherence: float
    languages: tuple[tuple[str, float], ...] = ()
    alphabets: tuple[str, ...] = ()
    has_signature: bool = False
    is_preferred: bool = False
    submatches: tuple[CharsetMatch, ...] = ()
    byte_count: int = 0
    lossy: bool = False

    def __str__(self) -> str:
        return self.text

    @property
    def aliases(self) -> tuple[str, ...]:
        return registry.aliases(self.encoding)

    @property
    def could_be_from_charset(self) -> list[str]:
        """This encoding followed by every merged encoding."""
        return [self.encoding, *(match.encoding for match in self.submatches)]

    @property
    def language(self) -> str:
        """Most probable language, with a best guess when coherence found none."""
        if self.languages:
            return self.languages[0][0]
        if "ascii" in self.could_be_from_charset:
            return "English"
        language = ENCODING_TO_LANGUAGE.get(self.encoding)
        return language if language is not None else "Unknown"

    @property
    def fingerprint(self) -> str:
        """SHA-256 of the decoded text; equal for interchangeable encodings."""
        return hashlib.sha256(self.text.encode("utf-8", "surrogatepass")).hexdigest()

    @property
    def multi_byte_usage(self) -> float:
        """Share of input bytes taken by characters wider than one byte."""
        if not self.byte_count:
            return 0.0
        return max(0.0, 1 - len(self.text) / self.byte_count)

    def output(self, encoding: str = "utf_8") -> bytes:
        """Re-encode the decoded text, replacing what *encoding* cannot hold."""
        return self.text.encode(registry.iana_name(encoding), "replace")

    def to_dict(self) -> dict[str, Any]:
        return {
            "encoding": self.encoding,
            "aliases": list(self.aliases),
            "could_be_from_charset": self.could_be_from_charset,
            "language": self.language,
            "languages": [list(item) for item in self.languages],
            "alphabets": list(self.alphabets),
            "chaos": self.chaos,
            "coherence": self.coherence,
            "has_signature": self.has_signature,
            "is_preferred": self.is_preferred,
            "lossy": self.lossy,
        }


class CharsetMatches:
    """Ordered, deduplicated results of one detection; best first."""

    def __init__(self, results: Iterable[CharsetMatch] = ()) -> None:
        self._results: tuple[CharsetMatch, ...] = tuple(results)

    def __iter__(self) -> Iterator[CharsetMatch]:
        return iter(self._results)

    def __len__(self) -> int:
        return len(self._results)

    def __getitem__(self, item: int | str) -> CharsetMatch:
        """Return a match by position, or by any encoding it stands for."""
        if isinstance(item, int):
            return self._results[item]
        encoding = registry.iana_name(item, strict=False)
        for result in self._results:
            if encoding in result.could_be_from_charset:
                return result
        raise KeyError(item)

    def __repr__(self) -> str:
        return f"<CharsetMatches {self.encodings!r}>"

    def best(self) -> CharsetMatch | None:
        return self._results[0] if self._results else None

    @property
    def encodings(self) -> list[str]:
        return [result.encoding for result in self._results]

    def to_list(self) -> list[dict[str, Any]]:
        return [result.to_dict() for result in self._results]
