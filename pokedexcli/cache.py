"""A thread-safe byte cache whose entries expire after a fixed interval."""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass


@dataclass(frozen=True)
class _Entry:
    created_at: float
    value: bytes


class Cache:
    """Stores byte values by key and drops them once they are older than ``interval`` seconds.

    A background thread wakes every ``interval`` seconds and removes expired entries.
    """

    def __init__(self, interval: float) -> None:
        if interval <= 0:
            raise ValueError(f"cache interval must be positive, got {interval!r}")
        self.interval = float(interval)
        self._entries: dict[str, _Entry] = {}
        self._lock = threading.Lock()
        self._stopped = threading.Event()
        self._reaper = threading.Thread(
            target=self._reap_loop, name="cache-reaper", daemon=True
        )
        self._reaper.start()

    def add(self, key: str, value: bytes) -> None:
        """Store ``value`` under ``key``, replacing any earlier entry."""
        entry = _Entry(created_at=time.monotonic(), value=bytes(value))
        with self._lock:
            self._entries[key] = entry

    def get(self, key: str) -> bytes | None:
        """Return the value stored under ``key``, or None if there is none."""
        with self._lock:
            entry = self._entries.get(key)
        return entry.value if entry is not None else None

    def reap(self) -> None:
        """Remove every entry older than the cache interval."""
        now = time.monotonic()
        with self._lock:
            expired = [
                key
                for key, entry in self._entries.items()
                if now - entry.created_at > self.interval
            ]
            for key in expired:
                del self._entries[key]

    def close(self) -> None:
        """Stop the background reaper."""
        self._stopped.set()
        if self._reaper is not threading.current_thread():
            self._reaper.join()

    def _reap_loop(self) -> None:
        while not self._stopped.wait(self.interval):
            self.reap()

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __enter__(self) -> Cache:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()