"""Character encoding detection by measuring how messy the decoded text looks."""

from __future__ import annotations

import dataclasses
import logging
import os
from typing import IO, Any

from charset_sleuth._utils import (
    LOGGER_NAME,
    TRACE,
    EmptyInputError,
    _ensure_bytes,
    set_logging_handler,
)
from charset_sleuth.config import DetectionConfig
from charset_sleuth.enums import EncodingEra
from charset_sleuth.matches import CharsetMatch, CharsetMatches
from charset_sleuth.pipeline.orchestrator import run_pipeline

__version__ = "1.0.0"
__all__ = [
    "CharsetMatch",
    "CharsetMatches",
    "DetectionConfig",
    "EmptyInputError",
    "EncodingEra",
    "detect",
    "detect_file",
    "detect_fp",
    "set_logging_handler",
]

logging.getLogger(LOGGER_NAME).addHandler(logging.NullHandler())


def _resolve_config(config: DetectionConfig | None, options: dict[str, Any]) -> DetectionConfig:
    if config is None:
        return DetectionConfig(**options)
    if options:
        return dataclasses.replace(config, **options)
    return config


def detect(
    data: bytes | bytearray | memoryview,
    config: DetectionConfig | None = None,
    **options: Any,
) -> CharsetMatches:
    """Detect the encoding of *data*.

    Keyword *options* are :class:`DetectionConfig` fields; they override the
    matching fields of *config*.

    :param data: The raw bytes to analyze.
    :param config: Detection settings, defaults when ``None``.
    :returns: Plausible encodings, best first.
    :raises EmptyInputError: If *data* is empty.
    :raises TypeError: If *data* is not binary.
    :raises ValueError: If an option is invalid.
    """
    data = _ensure_bytes(data)
    config = _resolve_config(config, options)

    if not config.explain:
        return run_pipeline(data, config)

    logger = logging.getLogger(LOGGER_NAME)
    previous_level = logger.level
    handler = set_logging_handler(level=TRACE)
    try:
        return run_pipeline(data, config)
    finally:
        logger.removeHandler(handler)
        logger.setLevel(previous_level)


def detect_fp(
    fp: IO[bytes], config: DetectionConfig | None = None, **options: Any
) -> CharsetMatches:
    """Detect the encoding of everything left to read in binary file object *fp*."""
    return detect(fp.read(), config, **options)


def detect_file(
    path: str | os.PathLike[str], config: DetectionConfig | None = None, **options: Any
) -> CharsetMatches:
    """Detect the encoding of the file at *path*.

    :raises OSError: If the file cannot be read.
    """
    with open(path, "rb") as fp:
        return detect_fp(fp, config, **options)
