from __future__ import annotations

import heapq
import itertools
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

from huffzw.core.symbols import NOT_A_SYMBOL, FrequencyTable


# -------------------
# Strutture di base Huffman
# -------------------
@dataclass
class HuffmanNode:
    weight: int
    symbol: Optional[int] = None  # foglie: simbolo, interni: None
    zero: Optional["HuffmanNode"] = None
    one: Optional["HuffmanNode"] = None

    @property
    def is_leaf(self) -> bool:
        return self.zero is None and self.one is None


def build_encoding_tree(freq: FrequencyTable) -> HuffmanNode:
    """
    Build the prefix tree for a frequency table.

    Tie-break: heap entries are (weight, seq, node) where seq is a global
    insertion counter. Leaves are pushed in ascending symbol order, so on equal
    weight the node inserted first is extracted first. The first extraction
    becomes the "zero" branch, the second the "one" branch.

    A table with a single symbol gets a synthetic root whose "one" branch is a
    zero-weight NOT_A_SYMBOL placeholder, so the real symbol's code is "0".
    """
    if not freq:
        raise ValueError("tabella frequenze vuota: impossibile costruire l'albero")

    heap: List[Tuple[int, int, HuffmanNode]] = []
    counter = itertools.count()

    for sym in sorted(freq):
        node = HuffmanNode(weight=int(freq[sym]), symbol=sym)
        heapq.heappush(heap, (node.weight, next(counter), node))

    if len(heap) == 1:
        _, _, only = heap[0]
        placeholder = HuffmanNode(weight=0, symbol=NOT_A_SYMBOL)
        return HuffmanNode(weight=only.weight, zero=only, one=placeholder)

    while len(heap) > 1:
        w1, _, lowest = heapq.heappop(heap)
        w2, _, second = heapq.heappop(heap)
        parent = HuffmanNode(weight=w1 + w2, zero=lowest, one=second)
        heapq.heappush(heap, (parent.weight, next(counter), parent))

    return heap[0][2]


def iter_leaves(root: HuffmanNode) -> Iterator[HuffmanNode]:
    stack = [root]
    while stack:
        node = stack.pop()
        if node.is_leaf:
            yield node
            continue
        # one prima di zero sullo stack => visita zero-first
        if node.one is not None:
            stack.append(node.one)
        if node.zero is not None:
            stack.append(node.zero)


def tree_depth(root: HuffmanNode) -> int:
    best = 0
    stack = [(root, 0)]
    while stack:
        node, d = stack.pop()
        best = max(best, d)
        for child in (node.zero, node.one):
            if child is not None:
                stack.append((child, d + 1))
    return best
