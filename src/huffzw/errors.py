"""Typed errors for huffzw.

Single source of truth for exit codes lives here.

Policy:
- Errors are small and boring.
- The CLI maps errors to stable exit codes (see EXIT_* constants).
- docs/exit_codes.md is generated from this module (scripts/gen_exit_codes_md.py).
"""

from __future__ import annotations

from dataclasses import dataclass

# -------------------------
# Exit codes (single source)
# -------------------------

EXIT_OK = 0
EXIT_USAGE = 2
EXIT_GENERIC = 10
EXIT_CORRUPT = 11
EXIT_PRECONDITION = 12


@dataclass(frozen=True, slots=True)
class ExitCodeInfo:
    code: int
    name: str
    description: str


EXIT_CODES: tuple[ExitCodeInfo, ...] = (
    ExitCodeInfo(EXIT_OK, "OK", "Success"),
    ExitCodeInfo(EXIT_USAGE, "USAGE", "Usage/config error (invalid args, invalid codec spec, unseekable input)"),
    ExitCodeInfo(EXIT_GENERIC, "GENERIC", "Generic failure (I/O error, unexpected error)"),
    ExitCodeInfo(EXIT_CORRUPT, "CORRUPT", "Corrupt input (bad Huffman header, truncated bitstream, bad LZW code)"),
    ExitCodeInfo(EXIT_PRECONDITION, "PRECONDITION", "Internal precondition violated (e.g. table without end-of-stream)"),
)

_EXIT_CODE_BY_CODE: dict[int, ExitCodeInfo] = {e.code: e for e in EXIT_CODES}


def exit_code_info(code: int) -> ExitCodeInfo | None:
    return _EXIT_CODE_BY_CODE.get(int(code))


def render_exit_codes_markdown() -> str:
    """Render docs/exit_codes.md content."""
    lines: list[str] = []
    lines.append("# Exit codes\n")
    lines.append("> GENERATED FILE - do not edit manually.\n")
    lines.append("> Source of truth: `src/huffzw/errors.py` (EXIT_CODES).\n")
    lines.append("> Regenerate: `python scripts/gen_exit_codes_md.py`.\n\n")
    lines.append("These are the CLI exit codes you can rely on.\n\n")
    lines.append("| Code | Name | Meaning |\n")
    lines.append("|---:|---|---|\n")
    for e in sorted(EXIT_CODES, key=lambda x: x.code):
        lines.append(f"| {e.code} | `{e.name}` | {e.description} |\n")
    lines.append("\n## Notes\n")
    lines.append("- Internal errors extend `HuffzwError` and carry an `exit_code`.\n")
    lines.append("- `--debug` re-raises errors to show full stack traces.\n")
    return "".join(lines)


# ---------------
# Typed exceptions
# ---------------


class HuffzwError(Exception):
    """Base error for huffzw."""

    exit_code: int = EXIT_GENERIC


class UsageError(HuffzwError):
    exit_code = EXIT_USAGE


class UnsupportedSource(UsageError):
    """The Huffman path needs to read its input twice; the stream cannot seek."""


class CorruptPayload(HuffzwError):
    exit_code = EXIT_CORRUPT


class BadHeader(CorruptPayload):
    pass


class CorruptLZWStream(CorruptPayload):
    pass


class PreconditionError(HuffzwError):
    exit_code = EXIT_PRECONDITION


class MissingEndOfStream(PreconditionError):
    pass
