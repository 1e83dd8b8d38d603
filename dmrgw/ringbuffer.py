"""A fixed-size ring buffer."""

import logging
from collections.abc import Sequence
from typing import Any

logger = logging.getLogger(__name__)


class RingBufferOverflow(Exception):
    """Raised when data does not fit; the buffer has been cleared."""


class RingBufferUnderflow(Exception):
    """Raised when more items are requested than the buffer holds."""


class RingBuffer:
    """Circular FIFO of a fixed length, holding at most length - 1 items."""

    def __init__(self, length: int, name: str) -> None:
        if length <= 0:
            raise ValueError("length must be positive")
        self._length = length
        self.name = name
        self._buffer: list[Any] = [0] * length
        self._in = 0
        self._out = 0

    def add_data(self, data: Sequence[Any]) -> None:
        """Append items; on overflow the buffer is cleared and an error raised."""
        free = self.free_space()
        if len(data) >= free:
            logger.error(
                "%s buffer overflow, clearing the buffer. (%u >= %u)",
                self.name, len(data), free,
            )
            self.clear()
            raise RingBufferOverflow(f"{self.name}: {len(data)} >= {free}")
        for item in data:
            self._buffer[self._in] = item
            self._in = (self._in + 1) % self._length

    def _check_available(self, count: int, action: str) -> None:
        size = self.data_size()
        if size < count:
            logger.error("**** Underflow %s in %s ring buffer, %u < %u", action, self.name, size, count)
            raise RingBufferUnderflow(f"{self.name}: {size} < {count}")

    def _items_from(self, start: int, count: int) -> list[Any]:
        return [self._buffer[(start + i) % self._length] for i in range(count)]

    def get_data(self, count: int) -> list[Any]:
        """Remove and return the oldest count items."""
        self._check_available(count, "get")
        items = self._items_from(self._out, count)
        self._out = (self._out + count) % self._length
        return items

    def peek(self, count: int) -> list[Any]:
        """Return the oldest count items without removing them."""
        self._check_available(count, "peek")
        return self._items_from(self._out, count)

    def clear(self) -> None:
        self._in = 0
        self._out = 0
        self._buffer = [0] * self._length

    def free_space(self) -> int:
        if self._out > self._in:
            return self._out - self._in
        if self._in > self._out:
            return self._length - (self._in - self._out)
        return self._length

    def data_size(self) -> int:
        return self._length - self.free_space()

    def has_space(self, length: int) -> bool:
        return self.free_space() > length

    def has_data(self) -> bool:
        return self._out != self._in

    def is_empty(self) -> bool:
        return self._out == self._in