"""Detection settings."""

from __future__ import annotations

import dataclasses
import os
from collections.abc import Iterable

from charset_sleuth import registry
from charset_sleuth._utils import _validate_positive_int, _validate_ratio
from charset_sleuth.enums import EncodingEra
from charset_sleuth.languages import LANGUAGE_NAMES, LATIN_BASED

#: Default maximum accepted mean chaos.
DEFAULT_CHAOS_THRESHOLD: float = 0.2
#: Default number of chunks sampled from large inputs.
DEFAULT_STEPS: int = 5
#: Default chunk size in bytes.
DEFAULT_CHUNK_SIZE: int = 512


def _normalize_encodings(names: Iterable[str], field: str) -> frozenset[str]:
    if isinstance(names, str):
        msg = f"{field} must be a collection of encoding names, not a string"
        raise ValueError(msg)
    return frozenset(registry.iana_name(name) for name in names)


@dataclasses.dataclass(frozen=True, slots=True)
class DetectionConfig:
    """Options for a single detection call.

    Encoding names may be given in any spelling Python understands; they are
    stored as canonical codec names.

    :param chaos_threshold: Maximum mean chaos a candidate may show to survive.
    :param preferred_encoding: Encoding to flag ``is_preferred`` and favour in ties.
    :param excluded_encodings: Encodings never tried.
    :param include_encodings: When non-empty, the only encodings tried.
    :param language_hint: Language to score coherence against, instead of the
        languages the candidate encoding suggests.
    :param steps: Maximum number of chunks sampled from a large input.
    :param chunk_size: Size in bytes of each sampled chunk.
    :param language_threshold: Minimum ratio for a language to be reported.
    :param early_exit_slack: How far above the threshold the first chunk must
        score for the rest of a candidate's chunks to be skipped.
    :param preemptive: Prioritize an encoding declared inside the content.
    :param encoding_era: Eras whose codecs are eligible.
    :param explain: Log the detection process to stderr at TRACE level.
    :param workers: Thread count for candidate scoring; ``None`` reads
        ``CHARSET_SLEUTH_WORKERS`` and falls back to the CPU count.
    """

    chaos_threshold: float = DEFAULT_CHAOS_THRESHOLD
    preferred_encoding: str | None = None
    excluded_encodings: frozenset[str] = frozenset()
    include_encodings: frozenset[str] = frozenset()
    language_hint: str | None = None
    steps: int = DEFAULT_STEPS
    chunk_size: int = DEFAULT_CHUNK_SIZE
    language_threshold: float = 0.1
    early_exit_slack: float = 0.3
    preemptive: bool = True
    encoding_era: EncodingEra = EncodingEra.ALL
    explain: bool = False
    workers: int | None = None

    def __post_init__(self) -> None:
        _validate_ratio(self.chaos_threshold, "chaos_threshold")
        _validate_ratio(self.language_threshold, "language_threshold")
        _validate_ratio(self.early_exit_slack, "early_exit_slack")
        _validate_positive_int(self.steps, "steps")
        _validate_positive_int(self.chunk_size, "chunk_size")
        if self.workers is not None:
            _validate_positive_int(self.workers, "workers")
        if self.language_hint is not None and self.language_hint not in (
            *LANGUAGE_NAMES,
            LATIN_BASED,
        ):
            msg = f"Unknown language hint: {self.language_hint!r}"
            raise ValueError(msg)
        if self.preferred_encoding is not None:
            object.__setattr__(
                self, "preferred_encoding", registry.iana_name(self.preferred_encoding)
            )
        object.__setattr__(
            self,
            "excluded_encodings",
            _normalize_encodings(self.excluded_encodings, "excluded_encodings"),
        )
        object.__setattr__(
            self,
            "include_encodings",
            _normalize_encodings(self.include_encodings, "include_encodings"),
        )

    @property
    def max_chunk_gave_up(self) -> int:
        """Number of over-threshold chunks after which a candidate is abandoned."""
        return max(2, self.steps // 4)

    def resolve_workers(self) -> int:
        if self.workers is not None:
            return self.workers
        return int(os.environ.get("CHARSET_SLEUTH_WORKERS", "0")) or os.cpu_count() or 1
