from __future__ import annotations

from huffzw.core.bitio import ByteSource
from huffzw.core.symbols import END_OF_STREAM, FrequencyTable


def build_frequency_table(source: ByteSource) -> FrequencyTable:
    """
    Conta le occorrenze di ogni byte della sorgente.

    END_OF_STREAM viene sempre inserito con conteggio 1 (anche per input vuoto),
    così ogni albero costruito da questa tabella ha un codice per la fine stream.
    La sorgente NON viene riavvolta: è compito del chiamante.
    """
    freq: FrequencyTable = {}
    while True:
        b = source.read_byte()
        if b is None:
            break
        freq[b] = freq.get(b, 0) + 1
    freq[END_OF_STREAM] = 1
    return freq


def frequency_table_of(data: bytes) -> FrequencyTable:
    return build_frequency_table(ByteSource.from_bytes(data))
