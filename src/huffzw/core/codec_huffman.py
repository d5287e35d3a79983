from __future__ import annotations

import io
from dataclasses import dataclass
from typing import BinaryIO

from huffzw.core.bitio import BitReader, BitWriter, ByteSource
from huffzw.core.codec_base import Codec
from huffzw.core.frequency import build_frequency_table
from huffzw.core.header import read_header, write_header
from huffzw.core.prefix_codes import PrefixTables, derive_prefix_tables
from huffzw.core.symbols import END_OF_STREAM
from huffzw.core.tree import HuffmanNode, build_encoding_tree
from huffzw.errors import CorruptPayload


def write_code(writer: BitWriter, code: str) -> None:
    for ch in code:
        writer.write_bit(0 if ch == "0" else 1)


def encode_symbols(source: ByteSource, root: HuffmanNode, writer: BitWriter) -> None:
    """
    Scrive il codice di ogni byte della sorgente, poi quello di END_OF_STREAM.
    Il padding dell'ultimo byte è compito di writer.flush().
    """
    codes = derive_prefix_tables(root).encode
    for b in source:
        write_code(writer, codes[b])
    write_code(writer, codes[END_OF_STREAM])


def decode_symbols(reader: BitReader, tables: PrefixTables, out: BinaryIO) -> int:
    """
    Decodifica bit per bit fino a END_OF_STREAM.

    Reads at most reader.remaining_bits() bits. Returns the number of bytes written.
    """
    budget = reader.remaining_bits()
    max_len = tables.max_code_length
    lookup = tables.decode

    prefix = ""
    buf = bytearray()
    written = 0
    bits_read = 0

    while bits_read < budget:
        prefix += "1" if reader.read_bit() else "0"
        bits_read += 1

        sym = lookup.get(prefix)
        if sym is None:
            if len(prefix) >= max_len:
                raise CorruptPayload(f"bitstream: codice sconosciuto dopo {bits_read} bit")
            continue

        prefix = ""
        if sym == END_OF_STREAM:
            if buf:
                out.write(bytes(buf))
                written += len(buf)
            return written

        buf.append(sym)
        if len(buf) >= 64 * 1024:
            out.write(bytes(buf))
            written += len(buf)
            buf.clear()

    raise CorruptPayload("bitstream terminato prima di END_OF_STREAM")


def huffman_compress(source: BinaryIO, sink: BinaryIO, *, scramble: bool = True) -> None:
    """
    Two passes over source (must be seekable): frequencies, then the bitstream.

    Output: header (see huffzw.core.header) + Huffman bitstream.
    """
    src = ByteSource(source)
    freq = build_frequency_table(src)
    root = build_encoding_tree(freq)

    with BitWriter(sink) as writer:
        write_header(writer, freq, scramble=scramble)
        src.rewind()
        encode_symbols(src, root, writer)


def huffman_decompress(source: BinaryIO, sink: BinaryIO, *, scramble: bool = True) -> int:
    reader = BitReader.from_stream(source)
    freq = read_header(reader, scramble=scramble)
    root = build_encoding_tree(freq)
    return decode_symbols(reader, derive_prefix_tables(root), sink)


def huffman_compress_bytes(data: bytes, *, scramble: bool = True) -> bytes:
    out = io.BytesIO()
    huffman_compress(io.BytesIO(bytes(data)), out, scramble=scramble)
    return out.getvalue()


def huffman_decompress_bytes(blob: bytes, *, scramble: bool = True) -> bytes:
    out = io.BytesIO()
    huffman_decompress(io.BytesIO(bytes(blob)), out, scramble=scramble)
    return out.getvalue()


@dataclass
class CodecHuffman(Codec):
    scramble: bool = True
    codec_id: str = "huffman"

    def compress(self, data: bytes) -> bytes:
        return huffman_compress_bytes(data, scramble=self.scramble)

    def decompress(self, blob: bytes) -> bytes:
        return huffman_decompress_bytes(blob, scramble=self.scramble)

    def compress_stream(self, source: BinaryIO, sink: BinaryIO) -> None:
        huffman_compress(source, sink, scramble=self.scramble)

    def decompress_stream(self, source: BinaryIO, sink: BinaryIO) -> None:
        huffman_decompress(source, sink, scramble=self.scramble)
