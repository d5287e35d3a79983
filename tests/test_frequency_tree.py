from __future__ import annotations

import itertools

import pytest

from huffzw.core.bitio import ByteSource
from huffzw.core.frequency import build_frequency_table, frequency_table_of
from huffzw.core.prefix_codes import derive_prefix_tables
from huffzw.core.symbols import END_OF_STREAM, NOT_A_SYMBOL
from huffzw.core.tree import build_encoding_tree, iter_leaves, tree_depth


def _assert_prefix_free(codes: dict[int, str]) -> None:
    for (s1, c1), (s2, c2) in itertools.permutations(codes.items(), 2):
        assert not c2.startswith(c1), f"{s1}:{c1} is a prefix of {s2}:{c2}"


def _assert_strictly_binary(root) -> None:
    stack = [root]
    while stack:
        node = stack.pop()
        kids = [c for c in (node.zero, node.one) if c is not None]
        assert len(kids) in (0, 2)
        stack.extend(kids)


def test_frequency_table_counts_and_eos() -> None:
    freq = frequency_table_of(b"abracadabra")
    assert freq == {
        ord("a"): 5,
        ord("b"): 2,
        ord("r"): 2,
        ord("c"): 1,
        ord("d"): 1,
        END_OF_STREAM: 1,
    }


def test_frequency_table_empty_input_has_only_eos() -> None:
    assert frequency_table_of(b"") == {END_OF_STREAM: 1}


def test_frequency_table_does_not_rewind_source() -> None:
    src = ByteSource.from_bytes(b"xyz")
    build_frequency_table(src)
    assert src.read_byte() is None
    src.rewind()
    assert src.read_byte() == ord("x")


def test_tree_weights_and_leaves() -> None:
    freq = frequency_table_of(b"the quick brown fox jumps over the lazy dog" * 3)
    root = build_encoding_tree(freq)

    leaves = list(iter_leaves(root))
    assert root.weight == sum(freq.values())
    assert sum(leaf.weight for leaf in leaves) == root.weight
    assert len(leaves) == len(freq)
    assert sorted(leaf.symbol for leaf in leaves) == sorted(freq)
    _assert_strictly_binary(root)


def test_codes_are_prefix_free_and_bidirectional() -> None:
    freq = frequency_table_of(bytes(range(256)) + b"aaaaabbbc")
    tables = derive_prefix_tables(build_encoding_tree(freq))

    assert set(tables.encode) == set(freq)
    assert {v: k for k, v in tables.encode.items()} == tables.decode
    _assert_prefix_free(tables.encode)


def test_tie_break_is_insertion_order() -> None:
    # weights all 1: 'a' (first pushed) -> zero, 'b' -> one, then EOS vs parent(2)
    freq = {ord("a"): 1, ord("b"): 1, END_OF_STREAM: 1}
    codes = derive_prefix_tables(build_encoding_tree(freq)).encode
    assert codes == {END_OF_STREAM: "0", ord("a"): "10", ord("b"): "11"}


def test_single_repeated_byte_gets_short_codes() -> None:
    codes = derive_prefix_tables(build_encoding_tree(frequency_table_of(b"AAAA"))).encode
    assert codes == {END_OF_STREAM: "0", ord("A"): "1"}


def test_only_eos_table_gets_non_empty_code() -> None:
    root = build_encoding_tree({END_OF_STREAM: 1})
    _assert_strictly_binary(root)
    assert root.one is not None and root.one.symbol == NOT_A_SYMBOL

    tables = derive_prefix_tables(root)
    assert tables.encode == {END_OF_STREAM: "0"}
    assert NOT_A_SYMBOL not in tables.encode


def test_empty_table_rejected() -> None:
    with pytest.raises(ValueError):
        build_encoding_tree({})


def test_fibonacci_weights_give_skewed_tree() -> None:
    # every merge is (chain so far) + next leaf
    fib = [1, 1]
    while len(fib) < 60:
        fib.append(fib[-1] + fib[-2])
    freq = {i: w for i, w in enumerate(fib)}
    root = build_encoding_tree(freq)
    tables = derive_prefix_tables(root)
    assert tree_depth(root) == tables.max_code_length
    assert tables.max_code_length >= 50
    _assert_prefix_free(tables.encode)
