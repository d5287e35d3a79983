"""Huffman file header.

Layout (all ASCII except the symbol bytes):
  N + b" "                       N = number of pairs, END_OF_STREAM excluded
  repeat N: sym(u8) + count + b" "
The table is scrambled before writing and descrambled after reading.
END_OF_STREAM is never written: its count is always 1.
"""

from __future__ import annotations

from huffzw.core.bitio import BitReader, BitWriter
from huffzw.core.scramble import descramble_table, scramble_table
from huffzw.core.symbols import END_OF_STREAM, FrequencyTable, is_byte_symbol
from huffzw.errors import BadHeader, MissingEndOfStream, PreconditionError

_SPACE = 0x20
_DIGITS = frozenset(b"0123456789")


def encode_header(freq: FrequencyTable, *, scramble: bool = True) -> bytes:
    table = scramble_table(freq) if scramble else dict(freq)

    if END_OF_STREAM not in table:
        raise MissingEndOfStream("tabella frequenze senza END_OF_STREAM: header non scrivibile")

    pairs = []
    for sym in sorted(table):
        if sym == END_OF_STREAM:
            continue
        if not is_byte_symbol(sym):
            raise PreconditionError(f"simbolo non serializzabile nell'header: {sym}")
        pairs.append((sym, int(table[sym])))

    out = bytearray()
    out += str(len(pairs)).encode("ascii")
    out.append(_SPACE)
    for sym, count in pairs:
        out.append(sym)
        out += str(count).encode("ascii")
        out.append(_SPACE)
    return bytes(out)


def write_header(writer: BitWriter, freq: FrequencyTable, *, scramble: bool = True) -> None:
    writer.write_bytes(encode_header(freq, scramble=scramble))


def _read_decimal(reader: BitReader, what: str) -> int:
    digits = bytearray()
    while True:
        b = reader.read_byte()
        if b is None:
            raise BadHeader(f"header troncato ({what})")
        if b == _SPACE:
            break
        if b not in _DIGITS:
            raise BadHeader(f"header: {what} non numerico (byte 0x{b:02x})")
        digits.append(b)
    if not digits:
        raise BadHeader(f"header: {what} mancante")
    return int(digits.decode("ascii"))


def read_header(reader: BitReader, *, scramble: bool = True) -> FrequencyTable:
    n = _read_decimal(reader, "numero coppie")
    if n > 256:
        raise BadHeader(f"header: troppe coppie ({n})")

    table: FrequencyTable = {}
    for _ in range(n):
        sym = reader.read_byte()
        if sym is None:
            raise BadHeader("header troncato (simbolo)")
        table[sym] = _read_decimal(reader, "frequenza")

    table[END_OF_STREAM] = 1
    return descramble_table(table) if scramble else table
