"""Pipeline orchestrator: runs every stage for one buffer."""

from __future__ import annotations

import concurrent.futures
import dataclasses
import logging
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

from charset_sleuth import registry
from charset_sleuth._utils import TRACE, EmptyInputError
from charset_sleuth.matches import CharsetMatch, CharsetMatches
from charset_sleuth.pipeline import ChaosReport, PipelineContext
from charset_sleuth.pipeline.bom import decode_with_signature, detect_bom
from charset_sleuth.pipeline.candidates import enumerate_candidates, prioritized_encodings
from charset_sleuth.pipeline.chunks import (
    chunk_offsets,
    effective_chunk_size,
    sample_chunks,
)
from charset_sleuth.pipeline.coherence import score_coherence
from charset_sleuth.pipeline.mess import score_chaos
from charset_sleuth.pipeline.ranking import rank

if TYPE_CHECKING:
    from charset_sleuth.config import DetectionConfig

logger = logging.getLogger(__name__)

_PARALLEL_THRESHOLD = 6

# A prioritized candidate with every chunk this clean ends detection on its
# own.  Chunk ratios below the threshold are never cut short, so the decision
# does not depend on the threshold.
_FAST_PATH_CHAOS = 0.1


def _is_allowed(encoding: str, config: DetectionConfig) -> bool:
    if encoding in config.excluded_encodings:
        return False
    return not config.include_encodings or encoding in config.include_encodings


def _signature_match(ctx: PipelineContext) -> CharsetMatch | None:
    found = detect_bom(ctx.data)
    if found is None:
        return None
    encoding, mark = found
    if not _is_allowed(encoding, ctx.config):
        logger.debug("Signature of %s found but the encoding is filtered out", encoding)
        return None
    try:
        text = decode_with_signature(ctx.data, encoding)
    except UnicodeDecodeError:
        logger.debug("Signature of %s found but the payload does not decode", encoding)
        return None
    logger.debug("Signature of %s (%d bytes) found", encoding, len(mark))
    coherence = score_coherence(
        [text], encoding, ctx.config.language_hint, ctx.config.language_threshold
    )
    return CharsetMatch(
        encoding=encoding,
        text=text,
        chaos=0.0,
        coherence=100.0,
        languages=coherence.languages,
        alphabets=coherence.alphabets,
        has_signature=True,
        is_preferred=encoding == ctx.config.preferred_encoding,
        byte_count=len(ctx.data),
    )


def _full_text(ctx: PipelineContext, report: ChaosReport) -> tuple[str, bool]:
    """Decode the whole buffer for a surviving candidate.

    :returns: The text and whether undecodable bytes had to be replaced.
    """
    if report.failed_chunks == 0 and len(report.texts) == 1 and len(ctx.data) <= (
        ctx.config.chunk_size * ctx.config.steps
    ):
        return report.texts[0], False
    try:
        return registry.decode(report.encoding, ctx.data), False
    except UnicodeDecodeError:
        logger.debug("%s needed replacement characters for the full payload", report.encoding)
        return str(ctx.data, report.encoding, "replace"), True


def _build_match(ctx: PipelineContext, report: ChaosReport) -> CharsetMatch:
    text, lossy = _full_text(ctx, report)
    coherence = score_coherence(
        report.texts,
        report.encoding,
        ctx.config.language_hint,
        ctx.config.language_threshold,
    )
    logger.log(
        TRACE,
        "%s coherence=%.3f languages=%s",
        report.encoding,
        coherence.coherence,
        coherence.languages[:3],
    )
    return CharsetMatch(
        encoding=report.encoding,
        text=text,
        chaos=report.chaos,
        coherence=coherence.coherence,
        languages=coherence.languages,
        alphabets=coherence.alphabets,
        byte_count=len(ctx.data),
        lossy=lossy,
    )


def _same_text_matches(
    ctx: PipelineContext, match: CharsetMatch, candidates: Sequence[str]
) -> list[CharsetMatch]:
    """Single-byte candidates decoding the whole buffer to *match*'s text."""
    if match.lossy or len(match.text) != len(ctx.data):
        return []
    same = []
    for encoding in candidates:
        if encoding == match.encoding or registry.is_multi_byte_encoding(encoding):
            continue
        try:
            text = registry.decode(encoding, ctx.data)
        except UnicodeDecodeError:
            continue
        if text == match.text:
            same.append(dataclasses.replace(match, encoding=encoding))
    logger.log(TRACE, "%s decodes the same as %d other encoding(s)", match.encoding, len(same))
    return same


def _score_all(
    encodings: Sequence[str],
    score: Callable[[str], ChaosReport | None],
    workers: int,
) -> list[ChaosReport | None]:
    """Score *encodings*, in a thread pool when there are enough of them.

    Results come back in the order of *encodings* whatever the completion
    order.
    """
    if len(encodings) > _PARALLEL_THRESHOLD and workers > 1:
        results: dict[str, ChaosReport | None] = {}
        try:
            with concurrent.futures.ThreadPoolExecutor(
                max_workers=min(workers, len(encodings))
            ) as pool:
                futures = {pool.submit(score, name): name for name in encodings}
                for future in concurrent.futures.as_completed(futures):
                    results[futures[future]] = future.result()
        except (RuntimeError, OSError):
            logger.debug("Thread pool unavailable, scoring sequentially")
        else:
            return [results[name] for name in encodings]
    return [score(name) for name in encodings]


def _least_bad(rejected: dict[str, ChaosReport]) -> list[ChaosReport]:
    if not rejected:
        return []
    lowest = min(report.chaos for report in rejected.values())
    return [report for report in rejected.values() if report.chaos == lowest]


def run_pipeline(data: bytes, config: DetectionConfig) -> CharsetMatches:
    """Detect the encoding of *data*.

    :param data: The raw bytes to analyze.
    :param config: Detection settings.
    :returns: Every surviving encoding, best first.  When nothing survives the
        chaos threshold, the least chaotic candidates with their real chaos.
    :raises EmptyInputError: If *data* is empty.
    """
    if not data:
        msg = "Cannot detect the encoding of an empty buffer"
        raise EmptyInputError(msg)

    ctx = PipelineContext(data=data, config=config)

    signature = _signature_match(ctx)
    if signature is not None:
        return CharsetMatches([signature])

    prioritized = prioritized_encodings(data, config)
    candidates = enumerate_candidates(data, config, prioritized)
    ctx.prioritized = [name for name in prioritized if name in candidates]

    length = len(data)
    offsets = chunk_offsets(length, config.chunk_size, config.steps)
    size = effective_chunk_size(length, config.chunk_size, config.steps)
    threshold = config.chaos_threshold

    def score(encoding: str) -> ChaosReport | None:
        return score_chaos(
            encoding,
            sample_chunks(data, encoding, offsets, size),
            threshold,
            config.max_chunk_gave_up,
            config.early_exit_slack,
        )

    passed: list[ChaosReport] = []

    for encoding in ctx.prioritized:
        report = score(encoding)
        if report is None:
            continue
        if not report.passes(threshold):
            ctx.rejected[encoding] = report
            continue
        if report.peak < _FAST_PATH_CHAOS:
            logger.debug("%s is clean enough to stop early (chaos=%.3f)", encoding, report.chaos)
            match = _build_match(ctx, report)
            return rank(
                [match, *_same_text_matches(ctx, match, candidates)],
                config.preferred_encoding,
            )
        passed.append(report)

    remaining = [name for name in candidates if name not in ctx.prioritized]
    for report in _score_all(remaining, score, config.resolve_workers()):
        if report is None:
            continue
        if report.passes(threshold):
            passed.append(report)
        else:
            ctx.rejected[report.encoding] = report

    if not passed:
        passed = _least_bad(ctx.rejected)
        logger.debug(
            "No candidate under chaos %.3f; keeping %s",
            threshold,
            [report.encoding for report in passed],
        )

    results = rank((_build_match(ctx, report) for report in passed), config.preferred_encoding)
    logger.debug("Detected %s", results.encodings[:5])
    return results
