"""Internal shared utilities for charset_sleuth."""

from __future__ import annotations

import logging

#: Log level below DEBUG used for per-candidate chatter.
TRACE: int = 5

logging.addLevelName(TRACE, "TRACE")

#: Root logger of the package; module loggers are its children.
LOGGER_NAME = "charset_sleuth"

_EXPLAIN_FORMAT = "%(asctime)s | %(levelname)s | %(message)s"


def set_logging_handler(
    name: str = LOGGER_NAME,
    level: int = logging.INFO,
    format_string: str = _EXPLAIN_FORMAT,
) -> logging.Handler:
    """Attach a stream handler to the package logger and return it."""
    logger = logging.getLogger(name)
    logger.setLevel(level)
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(format_string))
    logger.addHandler(handler)
    return handler


def _validate_ratio(value: float, field: str) -> None:
    """Raise ValueError if *value* is not a number within [0, 1]."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        msg = f"{field} must be a number between 0 and 1"
        raise ValueError(msg)
    if not 0.0 <= value <= 1.0:
        msg = f"{field} must be between 0 and 1, got {value}"
        raise ValueError(msg)


def _validate_positive_int(value: int, field: str) -> None:
    """Raise ValueError if *value* is not a positive integer."""
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        msg = f"{field} must be a positive integer"
        raise ValueError(msg)


def _ensure_bytes(data: bytes | bytearray | memoryview) -> bytes:
    """Return *data* as immutable bytes, rejecting non-binary input."""
    if isinstance(data, bytes):
        return data
    if isinstance(data, (bytearray, memoryview)):
        return bytes(data)
    msg = f"Expected bytes or bytearray, got {type(data).__name__}"
    raise TypeError(msg)


class EmptyInputError(ValueError):
    """Raised when detection is asked for an empty byte buffer."""
