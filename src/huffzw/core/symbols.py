from __future__ import annotations

from typing import Dict

# 0..255 sono i byte; i due sentinella stanno subito dopo.
END_OF_STREAM = 256
NOT_A_SYMBOL = 257

SENTINELS = frozenset({END_OF_STREAM, NOT_A_SYMBOL})

# symbol -> count
FrequencyTable = Dict[int, int]


def is_byte_symbol(sym: int) -> bool:
    return 0 <= sym <= 255


def symbol_name(sym: int) -> str:
    if sym == END_OF_STREAM:
        return "EOS"
    if sym == NOT_A_SYMBOL:
        return "NAS"
    if 0x21 <= sym <= 0x7E:
        return repr(chr(sym))
    return f"0x{sym:02x}"
