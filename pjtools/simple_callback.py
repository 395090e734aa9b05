"""A single stored callback with a bound parameter."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

__all__ = ["SimpleCallback"]

Receiver = Callable[[Any, Any], Any]


class SimpleCallback:
    """Holds one function and the extra parameter passed to it on each call."""

    def __init__(self, cb: Receiver | None = None, parameters: Any = None) -> None:
        self._cb: Receiver | None = None
        self._parameters: Any = None
        self.set(cb, parameters)

    def set(self, cb: Receiver | None, parameters: Any = None) -> None:
        """Store the function and its parameter."""
        self._cb = cb
        self._parameters = parameters

    def free(self) -> None:
        """Forget the stored function and parameter."""
        self._cb = None
        self._parameters = None

    def call(self, value: Any) -> None:
        """Invoke the function with ``value`` and the stored parameter, if set."""
        if self._cb is not None:
            self._cb(value, self._parameters)