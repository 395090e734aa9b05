"""Status LED driver with steady, blinking and multi-blink patterns."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from enum import IntEnum

__all__ = ["LedType", "Led"]

logger = logging.getLogger(__name__)

Writer = Callable[[int, bool], None]

_HIGH = True
_LOW = False


class LedType(IntEnum):
    """How the LED behaves."""

    OFF = 0
    LIGHT = 1
    BLINK = 2
    DOUBLE_BLINK = 3
    TRIPLE_BLINK = 4


def _millis() -> int:
    return int(time.monotonic() * 1000)


def _no_write(pin: int, level: bool) -> None:
    pass


class Led:
    """Active-low LED on a pin, driven by periodic calls to :meth:`handle`.

    ``write(pin, level)`` sets the pin output; ``level`` True means HIGH,
    which turns the LED off.
    """

    def __init__(self, pin: int | None = None, write: Writer | None = None) -> None:
        self.blink = 500
        self.state = False
        self._write = write or _no_write
        self._pin: int | None = None
        self._type = LedType.OFF
        self._step = 0
        self._ms = 0
        self.set(pin)

    def set(self, pin: int | None) -> None:
        """Attach the LED to ``pin`` and switch it off; ignored once a pin is set."""
        if self._pin is None and pin is not None:
            self._pin = pin
            self._write(pin, _HIGH)
            logger.debug("Pin mode OUTPUT for LED = HIGH")

    def set_type(self, led_type: LedType) -> None:
        """Change the pattern and restart it at the next :meth:`handle`."""
        self._type = LedType(led_type)
        self._step = 0
        self._ms = 0
        logger.info("Change LED state to %d", self._type)

    def _output(self, on: bool) -> None:
        self._write(self._pin, _LOW if on else _HIGH)
        self.state = on
        logger.debug("Set LED pin = %s", "LOW" if on else "HIGH")

    def handle(self, ms: int | None = None) -> None:
        """Advance the pattern if its time has come; ``ms`` defaults to the monotonic clock."""
        if not ms:
            ms = _millis()
        if self._ms > ms:
            return
        timeout = self.blink
        if self._pin is not None:
            if self._type is LedType.LIGHT:
                self._output(True)
            elif self._type is LedType.BLINK:
                on = self._step == 0
                self._output(on)
                self._step = 1 if on else 0
            elif self._type is LedType.DOUBLE_BLINK:
                self._output(self._step in (0, 2))
                self._step = 0 if self._step >= 6 else self._step + 1
                timeout = self.blink // 2
            elif self._type is LedType.TRIPLE_BLINK:
                self._output(self._step in (0, 2, 4))
                self._step = 0 if self._step >= 8 else self._step + 1
                timeout = self.blink // 3
            else:
                self._output(False)
        self._ms = ms + timeout