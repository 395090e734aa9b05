"""A named background thread that can be started, suspended, resumed and stopped."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from typing import Any

__all__ = ["Worker", "NAME_SIZE"]

logger = logging.getLogger(__name__)

NAME_SIZE = 32


class Worker:
    """Runs ``target(parameters)`` in a thread.

    Long-running targets loop on :meth:`wait_if_suspended`, which blocks while
    the worker is suspended and returns False once it has been stopped.
    """

    def __init__(self, name: str, stack_depth: int = 3072, priority: int = 18) -> None:
        self.name = name[: NAME_SIZE - 1]
        self.stack_depth = stack_depth
        self.priority = priority
        self.core_id: int | None = None
        self._thread: threading.Thread | None = None
        self._stopping = threading.Event()
        self._running = threading.Event()
        self._running.set()

    def start(
        self,
        target: Callable[[Any], Any],
        parameters: Any = None,
        core_id: int | None = None,
    ) -> bool:
        """Start the thread unless already started; False if it could not start."""
        if self._thread is not None:
            return True
        self._stopping.clear()
        self._running.set()
        thread = threading.Thread(
            target=target, args=(parameters,), name=self.name, daemon=True
        )
        try:
            thread.start()
        except RuntimeError:
            logger.info("Task %s not created", self.name)
            return False
        self.core_id = core_id
        self._thread = thread
        logger.info("Task %s created", self.name)
        return True

    def stop(self) -> None:
        """Signal the target to finish and wait for it."""
        thread = self._thread
        if thread is None:
            return
        self._stopping.set()
        self._running.set()
        if thread is not threading.current_thread():
            thread.join()
        self._thread = None
        logger.info("Task %s deleted", self.name)

    def is_started(self) -> bool:
        """True between a successful start and stop."""
        return self._thread is not None

    def suspend(self) -> None:
        """Pause the target at its next :meth:`wait_if_suspended`."""
        if self._thread is not None:
            self._running.clear()
            logger.info("Task %s is suspended", self.name)

    def resume(self) -> None:
        """Let a suspended target continue."""
        if self._thread is not None:
            self._running.set()
            logger.info("Task %s has been resumed", self.name)

    def wait_if_suspended(self) -> bool:
        """Block while suspended; return False once the worker is stopping."""
        self._running.wait()
        return not self._stopping.is_set()