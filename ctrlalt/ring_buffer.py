"""Fixed-size byte ring buffer that overwrites its oldest entry when full."""

from __future__ import annotations


class RingBuffer:
    """Byte FIFO of fixed capacity; writing to a full buffer drops the oldest byte.

    Reading from an empty buffer does not fail: it returns whatever byte sits
    at the read position, as the hardware output path expects.
    """

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError("size must be positive")
        self._buffer = bytearray(size)
        self._head = 0
        self._tail = 0
        self._full = False

    @property
    def capacity(self) -> int:
        return len(self._buffer)

    def put(self, data: int) -> None:
        """Append a byte, overwriting the oldest one if the buffer is full."""
        size = len(self._buffer)
        self._buffer[self._head] = data & 0xFF
        if self._full:
            self._tail = (self._tail + 1) % size
        self._head = (self._head + 1) % size
        self._full = self._head == self._tail

    def get(self) -> int:
        """Remove and return the oldest byte."""
        data = self._buffer[self._tail]
        self._tail = (self._tail + 1) % len(self._buffer)
        self._full = False
        return data

    def reset(self) -> None:
        """Discard all entries."""
        self._head = 0
        self._tail = 0
        self._full = False

    def is_empty(self) -> bool:
        return not self._full and self._head == self._tail

    def is_full(self) -> bool:
        return self._full

    def __len__(self) -> int:
        if self._full:
            return len(self._buffer)
        return (self._head - self._tail) % len(self._buffer)