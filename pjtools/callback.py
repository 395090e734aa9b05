"""Callback dispatcher that copies values into a ring buffer and fans them out on a worker thread."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from .message_queue import Empty, Full, MessageQueue
from .semaphore import Semaphore
from .simple_callback import SimpleCallback
from .worker import Worker

__all__ = ["Callback"]

logger = logging.getLogger(__name__)

Handler = Callable[[bytes, Any], Any]

_POLL_INTERVAL = 0.05


@dataclass
class _Slot:
    handler: Handler | None = None
    parameters: Any = None
    only_index: bool = False


@dataclass(frozen=True)
class _Entry:
    index_item: int
    index_buffer: int


class Callback:
    """Up to ``init(num)`` handlers called with copies of values passed to :meth:`call`.

    Each value is copied into one of ``num`` buffer slots of ``size`` bytes.
    A handler that returns a true value causes ``parent_callback`` to be
    called with the same data.
    """

    def __init__(
        self,
        num: int,
        size: int,
        name: str,
        stack_depth: int = 3072,
        priority: int = 18,
    ) -> None:
        if num <= 0 or size <= 0:
            raise ValueError("Required parameters are missing")
        self.worker = Worker(name, stack_depth, priority)
        self.queue = MessageQueue(num)
        self.parent_callback = SimpleCallback()
        self._num_buffer = num
        self._size_buffer = size
        self._index_buffer = 0
        self._buffer: list[bytes] = [bytes(size)] * num
        self._slots: list[_Slot] | None = None
        self._semaphore = Semaphore(recursive=False)
        logger.info("Callback created")

    def init(self, num: int) -> None:
        """Allocate ``num`` handler slots and start the worker thread."""
        if num <= 0:
            raise ValueError("number of callbacks must be positive")
        if self._slots is not None:
            raise RuntimeError("callback is already initialized")
        self._slots = [_Slot() for _ in range(num)]
        if not self.worker.start(self._run, self):
            raise RuntimeError(f"worker {self.worker.name} could not be started")

    def is_init(self) -> bool:
        """True once :meth:`init` has allocated the handler slots."""
        return self._slots is not None

    def set(
        self,
        item: Handler,
        parameters: Any = None,
        only_index: bool = False,
    ) -> int:
        """Store ``item`` in the first free slot and return that slot's index."""
        if self._slots is None:
            raise RuntimeError("The object is not initialized")
        with self._semaphore:
            for index, slot in enumerate(self._slots):
                if slot.handler is None:
                    slot.handler = item
                    slot.parameters = parameters
                    slot.only_index = only_index
                    logger.debug("A callback with index %d was recorded", index)
                    return index
        raise RuntimeError("There is no free cell to record the callback")

    def clear(self) -> None:
        """Empty every handler slot."""
        if self._slots is None:
            logger.debug("The object is not initialized")
            return
        with self._semaphore:
            self._slots = [_Slot() for _ in self._slots]
            logger.debug("Clearing all cells")

    def call(self, value: bytes, index: int = -1) -> None:
        """Copy ``size`` bytes of ``value`` into the buffer and queue them for the handlers.

        Handlers registered with ``only_index`` run only when ``index`` matches
        their slot. The value is dropped if the queue is full.
        """
        data = bytes(value)
        if len(data) < self._size_buffer:
            raise ValueError(
                f"value must hold at least {self._size_buffer} bytes, got {len(data)}"
            )
        with self._semaphore:
            position = self._index_buffer
            self._buffer[position] = data[: self._size_buffer]
            self._index_buffer = (position + 1) % self._num_buffer
            try:
                self.queue.send(_Entry(index, position), timeout=0)
            except Full:
                logger.debug("Queue is full, value dropped")
                return
            logger.debug("Calling the callback function")

    def read(self) -> bytes | None:
        """Take the oldest queued value without waiting; None if nothing is queued."""
        with self._semaphore:
            try:
                entry = self.queue.receive(timeout=0)
            except Empty:
                return None
            return self._buffer[entry.index_buffer]

    def close(self) -> None:
        """Stop the worker thread."""
        self.worker.stop()

    def __enter__(self) -> "Callback":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def _call_items(self, entry: _Entry) -> None:
        with self._semaphore:
            slots = [
                (index, _Slot(slot.handler, slot.parameters, slot.only_index))
                for index, slot in enumerate(self._slots or ())
            ]
            data = self._buffer[entry.index_buffer]
        for index, slot in slots:
            if slot.handler is None:
                continue
            if slot.only_index and entry.index_item != index:
                continue
            if slot.handler(data, slot.parameters):
                self.parent_callback.call(data)

    def _run(self, _parameters: Any) -> None:
        while self.worker.wait_if_suspended():
            try:
                entry = self.queue.receive(timeout=_POLL_INTERVAL)
            except Empty:
                continue
            self._call_items(entry)