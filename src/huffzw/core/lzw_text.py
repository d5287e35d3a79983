from __future__ import annotations

from typing import List, Sequence

from huffzw.errors import CorruptPayload


def encode_codes(codes: Sequence[int]) -> bytes:
    """Codici LZW come interi decimali ASCII separati da newline (niente newline finale)."""
    return "\n".join(str(int(c)) for c in codes).encode("ascii")


def decode_codes(raw: bytes) -> List[int]:
    """
    Inverso di encode_codes.

    Tollerante: NUL e spazi attorno a ogni riga vengono scartati, righe vuote
    ignorate (anche un eventuale newline finale).
    """
    out: List[int] = []
    for lineno, line in enumerate(bytes(raw).split(b"\n"), start=1):
        s = line.replace(b"\x00", b"").strip()
        if not s:
            continue
        if not s.isdigit():
            raise CorruptPayload(f"LZW: riga {lineno} non numerica: {s[:20]!r}")
        out.append(int(s))
    return out
