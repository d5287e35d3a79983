"""LZW dictionary codec.

The dictionary is seeded with the 256 single-byte strings and only grows.
There is no code-width cap and no dictionary reset: codes are plain Python
ints and keep growing with the input.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List

from huffzw.core.codec_base import Codec
from huffzw.core.lzw_text import decode_codes, encode_codes
from huffzw.errors import CorruptLZWStream

FIRST_FREE_CODE = 256


def lzw_compress(data: bytes) -> List[int]:
    dict_size = FIRST_FREE_CODE
    dictionary: Dict[bytes, int] = {bytes([i]): i for i in range(dict_size)}
    w = b""
    result: List[int] = []

    for c in bytes(data):
        wc = w + bytes([c])
        if wc in dictionary:
            w = wc
        else:
            result.append(dictionary[w])
            dictionary[wc] = dict_size
            dict_size += 1
            w = bytes([c])

    if w:
        result.append(dictionary[w])
    return result


def lzw_decompress(codes: Iterable[int]) -> bytes:
    it = iter(codes)
    first = next(it, None)
    if first is None:
        return b""

    dict_size = FIRST_FREE_CODE
    dictionary: Dict[int, bytes] = {i: bytes([i]) for i in range(dict_size)}

    if first not in dictionary:
        raise CorruptLZWStream(f"LZW: primo codice non valido: {first}")

    w = dictionary[first]
    result = bytearray(w)

    for k in it:
        if k in dictionary:
            entry = dictionary[k]
        elif k == dict_size:
            # caso cScSc: il codice che sta per essere assegnato
            entry = w + w[:1]
        else:
            raise CorruptLZWStream(f"LZW: codice non valido {k} (atteso <= {dict_size})")

        result += entry
        dictionary[dict_size] = w + entry[:1]
        dict_size += 1
        w = entry

    return bytes(result)


@dataclass
class CodecLZW(Codec):
    codec_id: str = "lzw"

    def compress(self, data: bytes) -> bytes:
        return encode_codes(lzw_compress(data))

    def decompress(self, blob: bytes) -> bytes:
        return lzw_decompress(decode_codes(blob))
