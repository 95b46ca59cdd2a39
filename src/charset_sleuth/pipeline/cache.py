"""Content-addressed memoization of detector ratios.

Keys are ``(detector name, digest of the decoded chunk)``, so a hit is
always valid no matter which candidate encoding produced the text.  Reads
take no lock; inserts go through a lock with insert-if-absent semantics so
two threads computing the same ratio both end up seeing the first value.
"""

from __future__ import annotations

import hashlib
import threading
from collections.abc import Callable, Hashable

#: Entries kept before the whole cache is dropped.
DEFAULT_MAXSIZE = 262_144


def text_digest(text: str) -> bytes:
    """Return a 16-byte digest of *text*, tolerating lone surrogates."""
    return hashlib.blake2b(
        text.encode("utf-8", "surrogatepass"), digest_size=16
    ).digest()


class MemoCache:
    """A thread-safe map that is only ever added to, until it is cleared."""

    def __init__(self, maxsize: int = DEFAULT_MAXSIZE) -> None:
        self.maxsize = maxsize
        self._data: dict[Hashable, float] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, key: Hashable) -> bool:
        return key in self._data

    def get(self, key: Hashable) -> float | None:
        return self._data.get(key)

    def get_or_compute(self, key: Hashable, compute: Callable[[], float]) -> float:
        """Return the cached value for *key*, computing and storing it if absent.

        *compute* runs outside the lock, so it may run more than once for the
        same key under contention; only the first result is kept.
        """
        value = self._data.get(key)
        if value is not None:
            return value
        value = compute()
        with self._lock:
            if len(self._data) >= self.maxsize:
                self._data = {}
            return self._data.setdefault(key, value)

    def clear(self) -> None:
        with self._lock:
            self._data = {}


#: Process-wide cache shared by every detection call.
DETECTOR_CACHE = MemoCache()
