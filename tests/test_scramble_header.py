from __future__ import annotations

import random

import pytest

from huffzw.core.bitio import BitReader
from huffzw.core.frequency import frequency_table_of
from huffzw.core.header import encode_header, read_header
from huffzw.core.scramble import descramble_table, paired_symbol, scramble_table
from huffzw.core.symbols import END_OF_STREAM
from huffzw.errors import BadHeader, CorruptPayload, MissingEndOfStream


def test_no_byte_is_its_own_pair() -> None:
    for s in range(256):
        assert paired_symbol(s) != s
        assert paired_symbol(paired_symbol(s)) == s


def test_scramble_moves_unpaired_entries() -> None:
    t = {ord("a"): 5, ord("b"): 2, END_OF_STREAM: 1}
    assert scramble_table(t) == {158: 5, 157: 2, END_OF_STREAM: 1}
    # input untouched
    assert t == {ord("a"): 5, ord("b"): 2, END_OF_STREAM: 1}


def test_scramble_swaps_present_pairs() -> None:
    t = {0: 7, 255: 3, 10: 1, END_OF_STREAM: 1}
    assert scramble_table(t) == {0: 3, 255: 7, 245: 1, END_OF_STREAM: 1}


def test_scramble_is_involution() -> None:
    rng = random.Random(1234)
    for _ in range(50):
        t = {rng.randrange(256): rng.randrange(1, 1000) for _ in range(rng.randrange(0, 120))}
        t[END_OF_STREAM] = 1
        assert descramble_table(scramble_table(t)) == t


def test_header_golden_bytes() -> None:
    t = {ord("a"): 5, ord("b"): 2, END_OF_STREAM: 1}
    assert encode_header(t) == b"2 \x9d2 \x9e5 "
    assert encode_header(t, scramble=False) == b"2 a5 b2 "


def test_header_roundtrip() -> None:
    t = {ord("a"): 5, ord("b"): 2, END_OF_STREAM: 1}
    got = read_header(BitReader(encode_header(t)))
    assert got == {ord("a"): 5, ord("b"): 2, END_OF_STREAM: 1}


def test_header_roundtrip_with_digit_and_space_symbols() -> None:
    t = frequency_table_of(b"  0123 456 \xdf\xff\x00 789 " * 4)
    blob = encode_header(t)
    reader = BitReader(blob + b"tail")
    assert read_header(reader) == t
    assert reader.read_byte() == ord("t")


def test_header_requires_eos() -> None:
    with pytest.raises(MissingEndOfStream):
        encode_header({ord("a"): 1})


@pytest.mark.parametrize(
    "blob",
    [
        b"",
        b"x ",
        b"2 a5 ",
        b"1 a5",
        b"1 a5x ",
        b" ",
    ],
)
def test_bad_header_rejected(blob: bytes) -> None:
    with pytest.raises(BadHeader):
        read_header(BitReader(blob))


def test_bad_header_is_corrupt_payload() -> None:
    assert issubclass(BadHeader, CorruptPayload)
