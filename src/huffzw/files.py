"""Path-level helpers used by the CLI.

The core works on already-opened streams; this module opens them.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from huffzw.codec_spec import CodecSpecV1
from huffzw.core.bitio import BitReader
from huffzw.core.header import read_header
from huffzw.core.prefix_codes import derive_prefix_tables
from huffzw.core.registry import make_codec
from huffzw.core.symbols import symbol_name
from huffzw.core.tree import build_encoding_tree


def compress_file(input_path: str | Path, output_path: str | Path, spec: CodecSpecV1) -> None:
    codec = make_codec(spec.codec, scramble=spec.scramble)
    with Path(input_path).open("rb") as src, Path(output_path).open("wb") as dst:
        codec.compress_stream(src, dst)


def decompress_file(input_path: str | Path, output_path: str | Path, spec: CodecSpecV1) -> None:
    codec = make_codec(spec.codec, scramble=spec.scramble)
    with Path(input_path).open("rb") as src, Path(output_path).open("wb") as dst:
        codec.decompress_stream(src, dst)


@dataclass(frozen=True)
class HeaderRow:
    symbol: int
    count: int
    code: str


def inspect_huffman_file(input_path: str | Path, *, scramble: bool = True) -> list[HeaderRow]:
    """Decode the header of a Huffman file and rebuild its code table."""
    with Path(input_path).open("rb") as src:
        reader = BitReader.from_stream(src)
    freq = read_header(reader, scramble=scramble)
    codes = derive_prefix_tables(build_encoding_tree(freq)).encode
    return [HeaderRow(symbol=s, count=freq[s], code=codes[s]) for s in sorted(freq)]


def print_header_rows(rows: list[HeaderRow]) -> None:
    print(f"{'simbolo':>8}  {'freq':>10}  codice")
    for r in rows:
        print(f"{symbol_name(r.symbol):>8}  {r.count:>10}  {r.code}")


def print_stats(original_path: str | Path, compressed_path: str | Path, label: str) -> None:
    in_size = Path(original_path).stat().st_size
    out_size = Path(compressed_path).stat().st_size
    ratio = out_size / in_size if in_size else 0.0

    print(f"=== {label} ===")
    print(f"File originale : {original_path} ({in_size} byte)")
    print(f"File compresso : {compressed_path} ({out_size} byte)")
    print(f"Rapporto       : {ratio:.3f} (1.0 = nessuna compressione)")
    print("=" * (len(label) + 8))
