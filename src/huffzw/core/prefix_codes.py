from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict

from huffzw.core.symbols import NOT_A_SYMBOL
from huffzw.core.tree import HuffmanNode


@dataclass
class PrefixTables:
    """Symbol <-> bitstring ("0101...") in both directions."""

    encode: Dict[int, str] = field(default_factory=dict)
    decode: Dict[str, int] = field(default_factory=dict)

    @property
    def max_code_length(self) -> int:
        return max((len(c) for c in self.encode.values()), default=0)


def derive_prefix_tables(root: HuffmanNode) -> PrefixTables:
    """
    DFS sull'albero: '0' per il ramo zero, '1' per il ramo one.
    I placeholder NOT_A_SYMBOL (albero degenere) non finiscono nelle tabelle.
    """
    tables = PrefixTables()
    stack = [(root, "")]
    while stack:
        node, so_far = stack.pop()
        if node.is_leaf:
            if node.symbol is None or node.symbol == NOT_A_SYMBOL:
                continue
            tables.encode[node.symbol] = so_far
            tables.decode[so_far] = node.symbol
            continue
        if node.one is not None:
            stack.append((node.one, so_far + "1"))
        if node.zero is not None:
            stack.append((node.zero, so_far + "0"))
    return tables
