"""Bit-level reading and writing over binary streams, MSB first."""

from __future__ import annotations

from typing import BinaryIO


class BitReader:
    """Reads single bits and bytes from a binary stream."""

    def __init__(self, stream: BinaryIO) -> None:
        self._stream = stream
        self._buffer = 0
        self._count = 8

    def read_bit(self) -> int:
        """Return the next bit; raise EOFError when the stream is exhausted."""
        if self._count == 8:
            chunk = self._stream.read(1)
            if not chunk:
                raise EOFError("no more bits in stream")
            self._buffer = chunk[0]
            self._count = 0
        bit = (self._buffer >> (7 - self._count)) & 1
        self._count += 1
        return bit

    def read_byte(self) -> int:
        """Return the next eight bits as an integer, most significant first."""
        value = 0
        for _ in range(8):
            value = (value << 1) | self.read_bit()
        return value


class BitWriter:
    """Packs single bits and bytes into a binary stream."""

    def __init__(self, stream: BinaryIO) -> None:
        self._stream = stream
        self._buffer = 0
        self._count = 0

    def write_bit(self, bit: int) -> None:
        """Append one bit; a full byte is written once the next bit arrives."""
        if self._count == 8:
            self._stream.write(bytes([self._buffer]))
            self._stream.flush()
            self._count = 0
            self._buffer = 0
        self._buffer |= (bit << (7 - self._count)) & 0xFF
        self._count += 1

    def write_byte(self, byte: int) -> None:
        """Append the low eight bits of ``byte``, most significant first."""
        for shift in range(7, -1, -1):
            self.write_bit((byte >> shift) & 1)

    def flush(self) -> None:
        """Write the pending byte, zero padded, and start a new one."""
        self._stream.write(bytes([self._buffer]))
        self._buffer = 0
        self._count = 0