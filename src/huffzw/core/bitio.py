"""Byte/bit stream adapters used by the Huffman path.

Capabilities (the core never opens files itself):
  - ByteSource : read_byte() with explicit exhaustion (None) + rewind()
  - BitWriter  : write_bit(0|1), write_bytes() for the header, flush()
  - BitReader  : read_byte() for the header, read_bit(), remaining_bits()

Bits are packed MSB-first; the last byte is zero-padded.
"""

from __future__ import annotations

import io
from typing import BinaryIO

from huffzw.errors import UnsupportedSource

CHUNK_SIZE_DEFAULT = 64 * 1024


class ByteSource:
    """Rewindable byte source over a seekable binary stream."""

    def __init__(self, stream: BinaryIO, chunk_size: int = CHUNK_SIZE_DEFAULT):
        seekable = getattr(stream, "seekable", None)
        if seekable is None or not seekable():
            raise UnsupportedSource("lo stream di input deve essere seekable (viene letto due volte)")
        self._stream = stream
        self._start = stream.tell()
        self._chunk_size = int(chunk_size)
        self._buf = b""
        self._pos = 0

    @classmethod
    def from_bytes(cls, data: bytes) -> "ByteSource":
        return cls(io.BytesIO(bytes(data)))

    def read_byte(self) -> int | None:
        if self._pos >= len(self._buf):
            self._buf = self._stream.read(self._chunk_size)
            self._pos = 0
            if not self._buf:
                return None
        b = self._buf[self._pos]
        self._pos += 1
        return b

    def __iter__(self):
        while True:
            b = self.read_byte()
            if b is None:
                return
            yield b

    def rewind(self) -> None:
        self._stream.seek(self._start)
        self._buf = b""
        self._pos = 0


class BitWriter:
    def __init__(self, out: BinaryIO):
        self.out = out
        self._cur = 0
        self._nbits = 0  # bit in _cur (0..7)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, exc_traceback):
        self.flush()

    def write_bit(self, bit: int) -> None:
        if bit not in (0, 1):
            raise ValueError(f"bit non valido: {bit}")
        self._cur = (self._cur << 1) | bit
        self._nbits += 1
        if self._nbits == 8:
            self.out.write(bytes([self._cur]))
            self._cur = 0
            self._nbits = 0

    def write_bytes(self, raw: bytes) -> None:
        # header text: only between whole bytes
        if self._nbits:
            raise ValueError("write_bytes richiede allineamento al byte")
        self.out.write(bytes(raw))

    def flush(self) -> None:
        if self._nbits > 0:
            self.out.write(bytes([self._cur << (8 - self._nbits)]))
            self._cur = 0
            self._nbits = 0


class BitReader:
    def __init__(self, data: bytes):
        self.data = bytes(data)
        self.i = 0
        self.bit = 0  # bit index in current byte (0..7), MSB-first

    @classmethod
    def from_stream(cls, stream: BinaryIO) -> "BitReader":
        return cls(stream.read())

    def read_byte(self) -> int | None:
        if self.bit:
            raise ValueError("read_byte richiede allineamento al byte")
        if self.i >= len(self.data):
            return None
        b = self.data[self.i]
        self.i += 1
        return b

    def read_bit(self) -> int:
        if self.i >= len(self.data):
            raise EOFError("fine inattesa del bitstream")
        b = (self.data[self.i] >> (7 - self.bit)) & 1
        self.bit += 1
        if self.bit == 8:
            self.bit = 0
            self.i += 1
        return b

    def remaining_bits(self) -> int:
        return (len(self.data) - self.i) * 8 - self.bit
