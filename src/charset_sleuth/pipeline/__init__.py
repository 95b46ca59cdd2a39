"""Detection pipeline stages and shared types."""

from __future__ import annotations

import dataclasses
from dataclasses import field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from charset_sleuth.config import DetectionConfig


@dataclasses.dataclass(frozen=True, slots=True)
class ChaosReport:
    """Mess measurements of one candidate encoding over the sampled chunks.

    ``chunk_ratios`` holds one value per chunk that was examined, with 1.0 for
    a chunk that could not be decoded.  ``texts`` holds the decoded chunks that
    were scored, in sampling order.
    """

    encoding: str
    chunk_ratios: tuple[float, ...]
    texts: tuple[str, ...]
    failed_chunks: int = 0
    gave_up: bool = False

    @property
    def chaos(self) -> float:
        if not self.chunk_ratios:
            return 0.0
        return round(sum(self.chunk_ratios) / len(self.chunk_ratios), 3)

    @property
    def peak(self) -> float:
        """Highest single chunk ratio."""
        return max(self.chunk_ratios, default=0.0)

    def passes(self, threshold: float) -> bool:
        """Return True if the candidate survives *threshold*."""
        return not self.gave_up and self.chaos <= threshold


@dataclasses.dataclass(frozen=True, slots=True)
class CoherenceReport:
    """Language fit of decoded text.

    :param languages: ``(language, ratio)`` pairs, best first.
    :param alphabets: Unicode blocks found in the text.
    """

    languages: tuple[tuple[str, float], ...] = ()
    alphabets: tuple[str, ...] = ()

    @property
    def coherence(self) -> float:
        """Best language ratio as a percentage in [0, 100]."""
        if not self.languages:
            return 0.0
        return round(self.languages[0][1] * 100, 3)


@dataclasses.dataclass(slots=True)
class PipelineContext:
    """Per-run mutable state for a single pipeline invocation.

    Created once at the start of ``run_pipeline()`` and threaded through the
    call chain.  Each concurrent ``detect()`` call gets its own context.
    """

    data: bytes
    config: DetectionConfig
    prioritized: list[str] = field(default_factory=list)
    #: Candidates that decoded but did not survive the threshold.
    rejected: dict[str, ChaosReport] = field(default_factory=dict)
