"""A bounded, thread-safe FIFO queue with timed send and receive."""

from __future__ import annotations

import threading
import time
from collections import deque
from queue import Empty, Full
from typing import Any

__all__ = ["MessageQueue", "Empty", "Full"]


class MessageQueue:
    """Fixed-capacity FIFO shared between threads.

    A ``timeout`` of 0 never blocks, ``None`` waits forever, and a positive
    number waits that many seconds.
    """

    def __init__(self, queue_length: int) -> None:
        if queue_length <= 0:
            raise ValueError("queue length must be positive")
        self._length = queue_length
        self._items: deque[Any] = deque()
        self._lock = threading.Lock()
        self._not_empty = threading.Condition(self._lock)
        self._not_full = threading.Condition(self._lock)

    def messages_waiting(self) -> int:
        """Number of items currently stored."""
        with self._lock:
            return len(self._items)

    def spaces_available(self) -> int:
        """Number of free slots."""
        with self._lock:
            return self._length - len(self._items)

    @staticmethod
    def _wait(condition: threading.Condition, ready, timeout: float | None) -> bool:
        if timeout is None:
            condition.wait_for(ready)
            return True
        deadline = time.monotonic() + timeout
        while not ready():
            remaining = deadline - time.monotonic()
            if remaining <= 0:
                return False
            condition.wait(remaining)
        return True

    def send(self, item: Any, timeout: float | None = 0) -> None:
        """Append ``item``; raise ``queue.Full`` if no slot frees up in time."""
        with self._not_full:
            if not self._wait(
                self._not_full, lambda: len(self._items) < self._length, timeout
            ):
                raise Full
            self._items.append(item)
            self._not_empty.notify()

    def overwrite(self, item: Any) -> None:
        """Store ``item`` in a single-slot queue, replacing what is there."""
        if self._length != 1:
            raise ValueError("overwrite is only for queues of length one")
        with self._lock:
            self._items.clear()
            self._items.append(item)
            self._not_empty.notify()

    def receive(self, timeout: float | None = None) -> Any:
        """Remove and return the oldest item; raise ``queue.Empty`` on timeout."""
        with self._not_empty:
            if not self._wait(self._not_empty, lambda: bool(self._items), timeout):
                raise Empty
            item = self._items.popleft()
            self._not_full.notify()
            return item

    def reset(self) -> None:
        """Discard all stored items."""
        with self._lock:
            self._items.clear()
            self._not_full.notify_all()