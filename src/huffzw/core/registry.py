from __future__ import annotations

from huffzw.core.codec_base import Codec
from huffzw.core.codec_huffman import CodecHuffman
from huffzw.core.codec_lzw import CodecLZW
from huffzw.errors import UsageError

CODEC_IDS: tuple[str, ...] = ("huffman", "lzw")


def make_codec(codec_id: str, *, scramble: bool = True) -> Codec:
    cid = codec_id.strip().lower()
    if cid == "huffman":
        return CodecHuffman(scramble=scramble)
    if cid == "lzw":
        return CodecLZW()
    raise UsageError(f"codec non supportato: {codec_id!r} (validi: {', '.join(CODEC_IDS)})")
