"""Frequency-table transposition ("scramble").

Toy obfuscation, not cryptography: every byte symbol s is paired with
|s - 255| and the counts of each pair are swapped. 255 is odd, so no byte is
paired with itself and the transform is an involution.
"""

from __future__ import annotations

from huffzw.core.symbols import SENTINELS, FrequencyTable


def paired_symbol(sym: int) -> int:
    return abs(sym - 255)


def _transpose(freq: FrequencyTable) -> FrequencyTable:
    out: FrequencyTable = dict(freq)
    visited: set[int] = set()

    for sym in sorted(freq):
        if sym in SENTINELS or sym in visited:
            continue
        other = paired_symbol(sym)
        visited.add(sym)
        visited.add(other)

        count = out[sym]
        if other in out:
            out[sym] = out[other]
            out[other] = count
        else:
            # il partner non esiste: sposto, non duplico
            del out[sym]
            out[other] = count

    return out


def scramble_table(freq: FrequencyTable) -> FrequencyTable:
    """Return a transposed copy of freq (the input is not modified)."""
    return _transpose(freq)


def descramble_table(freq: FrequencyTable) -> FrequencyTable:
    return _transpose(freq)
