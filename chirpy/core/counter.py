from __future__ import annotations

import threading

class VisitCounter:
    """Process-wide count of static file hits.

    One instance is built per app and shared by reference with the
    middleware and the admin handlers. All access goes through the lock.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._hits = 0

    def increment(self) -> None:
        with self._lock:
            self._hits += 1

    def snapshot(self) -> int:
        with self._lock:
            return self._hits

    def reset(self) -> None:
        with self._lock:
            self._hits = 0
