# pjtools

Helpers for firmware-style Python code: byte and hex conversion, uptime
formatting, callbacks, a bounded thread-safe queue, a mutex with timed
acquisition, a background worker thread and LED blink patterns.

The package has no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `pjtools.bytes_tools`

- `bytes2hex(data, upper_case=True)`: two hex digits per byte, upper case by default.
- `hex2bytes(hex_string, size)`: decodes into exactly `size` bytes, zero-filling
  missing bytes and ignoring surplus digits. Raises `ValueError` for an empty or
  odd-length string or a non-positive size.
- `byte2hex(byte)`: reads a byte as packed decimal (`0x42` gives `42`); returns 0
  if either digit is above 9.
- `compare(buf1, buf2, size=None)`: compares the first `size` bytes, or the whole
  buffers when `size` is omitted. Raises `ValueError` if `size` is negative or
  longer than either buffer.
- `byte_swap(value)`: swaps the two bytes of a 16-bit value.

### `pjtools.clock`

`get_time(time_ms, day=False, hour=True, minute=True, second=True)` formats a
32-bit millisecond counter as `D.HH:MM:SS`, showing only the chosen fields.

### `pjtools.simple_callback`

`SimpleCallback(cb=None, parameters=None)` holds one function and a parameter.
`call(value)` invokes `cb(value, parameters)` if a function is set; `set()`
replaces them and `free()` forgets them.

### `pjtools.message_queue`

`MessageQueue(queue_length)` is a fixed-capacity FIFO shared between threads.
For `send(item, timeout=0)` and `receive(timeout=None)` a timeout of 0 never
blocks, `None` waits forever and a positive number waits that many seconds.
`send` raises `queue.Full` and `receive` raises `queue.Empty` when time runs out
(both are also importable from this module). `overwrite(item)` replaces the
content of a queue of length one and raises `ValueError` on any other length.
`messages_waiting()`, `spaces_available()` and `reset()` complete the set.

### `pjtools.semaphore`

`Semaphore(recursive=False)` wraps a plain or re-entrant lock.
`take(timeout=None, func=None, line=None)` and `give(func=None, line=None)`
return `True` or `False`; when they fail and `func` is given, a warning naming
`func` and `line` is logged. `get_count()` is 1 while free and 0 while held.
The object is also a context manager.

### `pjtools.worker`

`Worker(name, stack_depth=3072, priority=18)` runs `target(parameters)` in a
daemon thread after `start(target, parameters=None, core_id=None)`. The name is
cut to 31 characters. A long-running target loops on `wait_if_suspended()`,
which blocks while the worker is suspended and returns `False` once `stop()`
has been called. `stop()` waits for the thread to finish; `is_started()`,
`suspend()` and `resume()` do what their names say.

### `pjtools.callback`

`Callback(num, size, name, stack_depth=3072, priority=18)` keeps `num` buffer
slots of `size` bytes. After `init(n)` allocates `n` handler slots and starts
its worker:

- `set(item, parameters=None, only_index=False)` stores a handler in the first
  free slot and returns its index; raises `RuntimeError` when not initialized or
  when every slot is taken.
- `call(value, index=-1)` copies the first `size` bytes of `value` (which must
  hold at least that many) into the next buffer slot and queues it. The worker
  calls every handler as `item(data, parameters)`; handlers set with
  `only_index` run only when `index` matches their slot. A handler returning a
  true value makes `parent_callback` (a `SimpleCallback`) be called with the
  same data. The value is dropped if the queue is full.
- `read()` takes the oldest queued value without waiting, or returns `None`.
- `clear()` empties all handler slots; `close()` stops the worker. The object
  is also a context manager that closes on exit.

### `pjtools.led`

`Led(pin=None, write=None)` drives an active-low LED through a
`write(pin, level)` function you supply, where `level` `True` means HIGH (LED
off). `set_type(LedType...)` picks `OFF`, `LIGHT`, `BLINK`, `DOUBLE_BLINK` or
`TRIPLE_BLINK`; `handle(ms=None)` advances the pattern when its time has come,
using the monotonic clock when `ms` is not given. `blink` (default 500 ms) sets
the interval and `state` tells whether the LED is on.

## Examples

```python
from pjtools.bytes_tools import bytes2hex, hex2bytes, byte_swap
from pjtools.clock import get_time

bytes2hex(b"\x01\xab")          # "01AB"
hex2bytes("01ab", 4)            # b"\x01\xab\x00\x00"
byte_swap(0x1234)               # 0x3412
get_time(93_784_000, day=True)  # "1.02:03:04"
```

```python
from pjtools.callback import Callback

received = []
with Callback(num=4, size=2, name="events") as dispatcher:
    dispatcher.init(2)
    dispatcher.set(lambda data, params: received.append(data))
    dispatcher.call(b"\x01\x02")
```

```python
from pjtools.led import Led, LedType

levels = []
led = Led(pin=2, write=lambda pin, level: levels.append(level))
led.set_type(LedType.BLINK)
led.handle(1)   # levels == [True, False]: off at setup, then on
```

## What it does not do

- It touches no hardware: `Led` only calls the `write` function it is given.
- `Worker` records `stack_depth`, `priority` and `core_id` but they have no
  effect on the thread.
- There is no command-line program; everything is used as a library.