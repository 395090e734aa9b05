"""Byte and hex helpers, uptime formatting, callbacks, a bounded queue, a mutex, a worker thread and LED patterns."""

__version__ = "0.1.0"
__all__ = [
    "bytes_tools",
    "clock",
    "simple_callback",
    "message_queue",
    "semaphore",
    "worker",
    "callback",
    "led",
]