# dmrgw

Building blocks for a DMR (Digital Mobile Radio) gateway, in plain Python
with no third-party dependencies.

## What is inside

- `dmrgw.defines`: frame sizes, sync patterns, CRC masks, data type and
  packet format codes, `VERSION`, and the `FLCO` enumeration of full link
  control opcodes (`GROUP`, `USER_USER`, talker alias blocks, `GPS_INFO`).
- `dmrgw.sync`: `add_data_sync(frame, duplex)` and `add_audio_sync(frame, duplex)`
  return a copy of a frame with the base-station (`duplex=True`) or
  mobile-station sync pattern written in at byte 13. A frame too short to
  hold the pattern raises `ValueError`.
- `dmrgw.utils`: `hex_lines(data)` yields hex dump lines of 16 bytes with
  offset and printable text. `dump(title, data, level)` and
  `dump_bits(title, bits, level)` write such a dump to the `logging` module
  (INFO by default). `byte_to_bits_be`, `byte_to_bits_le`, `bits_to_byte_be`
  and `bits_to_byte_le` convert between a byte and eight bits in either bit
  order, raising `ValueError` on bad input.
- `dmrgw.timer`: `Timer(ticks_per_sec, secs, msecs)`, a timeout timer that is
  advanced by `clock(ticks)`. It has `start`, `stop`, `set_timeout`,
  `is_running`, `has_expired`, and `timeout`, `timer` and `remaining`, all in
  whole seconds. A zero timeout never expires.
- `dmrgw.ringbuffer`: `RingBuffer(length, name)`, a fixed-size FIFO holding at
  most `length - 1` items. `add_data` raises `RingBufferOverflow` and clears
  the buffer when the items do not fit; `get_data` and `peek` raise
  `RingBufferUnderflow` when fewer items are held than asked for.
- `dmrgw.sha256`: `SHA256`, an incremental hasher with `update`,
  `process_block` (whole 64-byte blocks), `read`, `finish` and `reset`, and the
  `sha256(data)` helper returning the 32-byte digest.
- `dmrgw.stopwatch`: `StopWatch` with `time()` (wall-clock milliseconds),
  `start()` and `elapsed()` (monotonic milliseconds since `start`).
- `dmrgw.thread`: `Thread`, an abstract base class; override `entry()`, call
  `run()` to start it on a background thread and `wait()` to join it. Also
  `sleep(ms)`.
- `dmrgw.udpsocket`: `UDPSocket`, `SocketAddress`, `IPMatchType`, `lookup`,
  `match` and `is_none`. `lookup` returns the IPv4 "none" address
  (255.255.255.255) for a host it cannot resolve, which `is_none` detects.
  `UDPSocket.read(length)` never blocks: it returns `(data, sender)` or `None`
  when nothing is waiting. `write(data, address)` returns `True` only when the
  whole datagram was sent. `open` raises `OSError` when the socket cannot be
  created or bound. The socket is a context manager.
- `dmrgw.rewrite`: call rewrite rules, each with `process(data, trace)`
  returning a `ProcessResult` (`MATCHED` or `UNMATCHED`) and changing the frame
  in place when it matches:
  - `RewriteSrc`: private calls from a range of source ids on one slot become
    group calls to a talkgroup.
  - `RewriteSrcId`: replaces one source id with another.
  - `RewriteTG`: maps a range of talkgroups on one slot onto a range on
    another slot.
  - `RewriteType`: group calls to a range of talkgroups become private calls
    to a range of ids.

  A frame is any object with `flco`, `src_id`, `dst_id` and `slot_no`
  attributes. Each rule takes an optional `on_rewrite` callback, called with
  the frame when its addressing was changed. With `trace=True` the rule logs
  what it did at DEBUG level. Slots must be 1 or 2 and range sizes at least 1,
  else `ValueError` is raised.

## Installing

```
pip install .
```

## Examples

Rewrite talkgroups 9 to 18 on slot 1 into 91 to 100 on slot 2:

```python
from dataclasses import dataclass

from dmrgw.defines import FLCO
from dmrgw.rewrite import ProcessResult, RewriteTG


@dataclass
class Frame:
    flco: FLCO
    src_id: int
    dst_id: int
    slot_no: int


rule = RewriteTG("Network", 1, 9, 2, 91, 10)
frame = Frame(FLCO.GROUP, 1234567, 12, 1)
if rule.process(frame, True) is ProcessResult.MATCHED:
    print(frame.slot_no, frame.dst_id)  # 2 94
```

Time out after 5 seconds with a timer clocked in milliseconds:

```python
from dmrgw.timer import Timer

timer = Timer(1000, 5, 0)
timer.start()
timer.clock(5000)
assert timer.has_expired()
```

Hash some bytes:

```python
from dmrgw.sha256 import sha256

digest = sha256(b"abc")
```

Send a datagram:

```python
from dmrgw.udpsocket import UDPSocket, lookup

with UDPSocket("127.0.0.1", 0) as sock:
    sock.write(b"ping", lookup("127.0.0.1", 62031))
```

## What this package does not do

There is no gateway program and no command to run. The package has no
configuration file reader, no client for any DMR network or repeater
protocol, no link control, slot type or embedded data encoding, and no voice
announcements. It provides the pieces listed above for building such things.

## Running the tests

```
pip install .[test]
pytest
```