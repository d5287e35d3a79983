"""huffzw CLI.

This is the stable CLI entrypoint (console-script: ``huffzw``).

UX policy:
  - Non-interactive: every path is an argument, nothing is prompted.
  - ``--spec`` (JSON) is the source of truth when given; otherwise
    ``--codec`` / ``--no-scramble`` build the spec.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from huffzw.codec_spec import CodecSpecV1, load_codec_spec
from huffzw.core.registry import CODEC_IDS
from huffzw.errors import EXIT_GENERIC, EXIT_OK, HuffzwError, UsageError


def _add_common_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--debug", action="store_true", help="Show stack traces on errors")


def _add_spec_args(p: argparse.ArgumentParser, *, with_codec: bool = True) -> None:
    p.add_argument(
        "--spec",
        default=None,
        help=(
            "Codec spec (JSON). Use '@file.json' to load from file, or pass JSON inline. "
            "When set, --codec/--no-scramble are ignored."
        ),
    )
    if with_codec:
        p.add_argument("--codec", default="huffman", choices=CODEC_IDS, help="Codec id")
    p.add_argument(
        "--no-scramble",
        action="store_true",
        help="Huffman: do not transpose the frequency table in the header",
    )


def _resolve_spec(ns: argparse.Namespace) -> CodecSpecV1:
    if ns.spec is not None:
        return load_codec_spec(str(ns.spec))
    return CodecSpecV1(
        name="cli",
        codec=getattr(ns, "codec", "huffman"),
        scramble=not bool(ns.no_scramble),
    )


def _cmd_compress(input_path: Path, output_path: Path, spec: CodecSpecV1, *, stats: bool) -> int:
    from huffzw.files import compress_file, print_stats

    compress_file(input_path, output_path, spec)
    if stats:
        print_stats(input_path, output_path, label=f"huffzw {spec.codec}")
    return EXIT_OK


def _cmd_decompress(input_path: Path, output_path: Path, spec: CodecSpecV1) -> int:
    from huffzw.files import decompress_file

    decompress_file(input_path, output_path, spec)
    return EXIT_OK


def _cmd_inspect(input_path: Path, spec: CodecSpecV1) -> int:
    from huffzw.files import inspect_huffman_file, print_header_rows

    if spec.codec != "huffman":
        raise UsageError(f"inspect: solo i file huffman hanno un header (codec={spec.codec})")
    print_header_rows(inspect_huffman_file(input_path, scramble=spec.scramble))
    return EXIT_OK


def _cmd_spec_validate(spec_arg: str) -> int:
    # load is the validation
    load_codec_spec(spec_arg)
    print("OK")
    return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="huffzw", description="Huffman / LZW file compressor")
    sub = p.add_subparsers(dest="cmd", required=True)

    p_c = sub.add_parser("compress", help="Lossless compress a file")
    p_c.add_argument("input", type=Path)
    p_c.add_argument("output", type=Path)
    _add_spec_args(p_c)
    p_c.add_argument("--stats", action="store_true", help="Print sizes and ratio")
    _add_common_args(p_c)

    p_d = sub.add_parser("decompress", help="Lossless decompress a file")
    p_d.add_argument("input", type=Path)
    p_d.add_argument("output", type=Path)
    _add_spec_args(p_d)
    _add_common_args(p_d)

    p_i = sub.add_parser("inspect", help="Show the frequency table and codes of a Huffman file")
    p_i.add_argument("input", type=Path)
    _add_spec_args(p_i, with_codec=False)
    _add_common_args(p_i)

    p_v = sub.add_parser("spec-validate", help="Validate a codec spec (v1)")
    p_v.add_argument("spec", help="Codec spec JSON (@file.json or inline JSON)")
    _add_common_args(p_v)

    return p


def main(argv: list[str] | None = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)
    p = build_parser()
    ns = p.parse_args(argv)

    try:
        if ns.cmd == "compress":
            return _cmd_compress(ns.input, ns.output, _resolve_spec(ns), stats=bool(ns.stats))
        if ns.cmd == "decompress":
            return _cmd_decompress(ns.input, ns.output, _resolve_spec(ns))
        if ns.cmd == "inspect":
            return _cmd_inspect(ns.input, _resolve_spec(ns))
        if ns.cmd == "spec-validate":
            return _cmd_spec_validate(str(ns.spec))
        raise AssertionError("unreachable")

    except SystemExit:
        raise
    except HuffzwError as e:
        if getattr(ns, "debug", False):
            raise
        print(f"[huffzw] {e}", file=sys.stderr)
        return int(getattr(e, "exit_code", EXIT_GENERIC) or EXIT_GENERIC)
    except Exception as e:
        if getattr(ns, "debug", False):
            raise
        print(f"[huffzw] error: {e}", file=sys.stderr)
        return EXIT_GENERIC


if __name__ == "__main__":
    raise SystemExit(main())
