from __future__ import annotations

from abc import ABC, abstractmethod
from typing import BinaryIO


class Codec(ABC):
    """
    Interfaccia minima per codec pluggabili (bytes -> bytes).

    NOTA: il formato di uscita è quello nativo del codec:
      - huffman: header ASCII + bitstream
      - lzw: codici decimali separati da newline

    Le varianti *_stream di default bufferizzano tutto l'input;
    i codec che sanno lavorare a due passate sullo stream le ridefiniscono.
    """

    codec_id: str

    @abstractmethod
    def compress(self, data: bytes) -> bytes:
        raise NotImplementedError

    @abstractmethod
    def decompress(self, blob: bytes) -> bytes:
        raise NotImplementedError

    def compress_stream(self, source: BinaryIO, sink: BinaryIO) -> None:
        sink.write(self.compress(source.read()))

    def decompress_stream(self, source: BinaryIO, sink: BinaryIO) -> None:
        sink.write(self.decompress(source.read()))
