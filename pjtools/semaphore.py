"""A mutex with optional recursion, timed acquisition and diagnostic logging."""

from __future__ import annotations

import logging
import threading

__all__ = ["Semaphore"]

logger = logging.getLogger(__name__)


class Semaphore:
    """Mutex that can be taken with a timeout and used as a context manager.

    A ``timeout`` of ``None`` waits forever, 0 never blocks.
    """

    def __init__(self, recursive: bool = False) -> None:
        self.recursive = recursive
        self._lock = threading.RLock() if recursive else threading.Lock()
        self._depth = 0

    def take(
        self,
        timeout: float | None = None,
        func: str | None = None,
        line: int | None = None,
    ) -> bool:
        """Acquire the mutex; return False if it was not obtained in time."""
        if timeout is None:
            acquired = self._lock.acquire()
        elif timeout <= 0:
            acquired = self._lock.acquire(blocking=False)
        else:
            acquired = self._lock.acquire(timeout=timeout)
        if acquired:
            self._depth += 1
        elif func:
            logger.warning("[%s:%s]: Semaphore timeout or error", func, line)
        return acquired

    def give(self, func: str | None = None, line: int | None = None) -> bool:
        """Release the mutex; return False if it was not held."""
        if self._depth == 0:
            released = False
        else:
            self._depth -= 1
            try:
                self._lock.release()
                released = True
            except RuntimeError:
                self._depth += 1
                released = False
        if not released and func:
            logger.warning("[%s:%s]: Semaphore give error", func, line)
        return released

    def get_count(self) -> int:
        """1 while the mutex is free, 0 while it is held."""
        return 0 if self._depth else 1

    def __enter__(self) -> "Semaphore":
        self.take()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.give()