from __future__ import annotations

import json
from pathlib import Path

import pytest

from huffzw.codec_spec import SPEC_ID_V1, CodecSpecError, CodecSpecV1, load_codec_spec
from huffzw.errors import EXIT_USAGE, UsageError


def test_spec_inline_minimal() -> None:
    spec = load_codec_spec(json.dumps({"spec": SPEC_ID_V1, "codec": "lzw"}))
    assert spec == CodecSpecV1(name="default", codec="lzw", scramble=True)


def test_spec_scramble_off() -> None:
    obj = {"spec": SPEC_ID_V1, "name": "plain", "codec": "Huffman", "scramble": False}
    spec = load_codec_spec(json.dumps(obj))
    assert spec.codec == "huffman"
    assert spec.scramble is False
    assert load_codec_spec(spec.to_json()) == spec


@pytest.mark.parametrize(
    "obj",
    [
        {"spec": SPEC_ID_V1, "codec": "zlib"},
        {"spec": "huffzw.codec.v0", "codec": "lzw"},
        {"spec": SPEC_ID_V1, "codec": "lzw", "wat": 1},
        {"spec": SPEC_ID_V1, "scramble": "yes"},
        {"spec": SPEC_ID_V1, "name": ""},
    ],
)
def test_spec_rejected(obj: dict) -> None:
    with pytest.raises(CodecSpecError):
        load_codec_spec(json.dumps(obj))


@pytest.mark.parametrize("arg", ["", "   ", "[1, 2]", "{not json", "@/definitely/not/here.json"])
def test_spec_bad_argument(arg: str) -> None:
    with pytest.raises(CodecSpecError):
        load_codec_spec(arg)


def test_spec_from_file(tmp_path: Path) -> None:
    p = tmp_path / "s.json"
    p.write_text(json.dumps({"spec": SPEC_ID_V1, "name": "f", "codec": "lzw"}), encoding="utf-8")
    assert load_codec_spec("@" + str(p)).codec == "lzw"


def test_spec_error_is_usage_error() -> None:
    assert issubclass(CodecSpecError, UsageError)
    assert CodecSpecError.exit_code == EXIT_USAGE


@pytest.mark.parametrize(
    "obj,msg",
    [
        ({"spec": SPEC_ID_V1, "wat": 1}, "chiavi non supportate: wat"),
        ({"spec": "huffzw.codec.v0"}, "spec non supportata"),
        ({"spec": SPEC_ID_V1, "codec": "zlib"}, "codec sconosciuto 'zlib'"),
        ({"spec": SPEC_ID_V1, "scramble": 1}, "campo 'scramble' deve essere booleano"),
        ({"spec": SPEC_ID_V1, "name": "  "}, "campo 'name' deve essere una stringa non vuota"),
    ],
)
def test_spec_error_messages(obj: dict, msg: str) -> None:
    with pytest.raises(CodecSpecError, match=msg):
        load_codec_spec(json.dumps(obj))


def test_spec_missing_file_message() -> None:
    with pytest.raises(CodecSpecError, match="file non trovato"):
        load_codec_spec("@/definitely/not/here.json")
