from __future__ import annotations

import argparse
import io
import json
import logging
import sys
from pathlib import Path
from typing import Sequence

from rtf2text.parsing.extractors.data_types import RtfContent
from rtf2text.parsing.extractors.serialization import serialize_extraction


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rtf2text",
        description="Extract the text of an RTF file and emit it to stdout (or JSON with --json).",
    )
    parser.add_argument(
        "path",
        type=Path,
        help="Path to the RTF file to extract.",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Emit structured JSON (text, paragraphs, return code, warnings) instead of plain text.",
    )
    parser.add_argument(
        "--copy-if-not-rtf",
        action="store_true",
        help="Copy the input unchanged when it is not an RTF document instead of failing.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log parser diagnostics down to debug level on stderr.",
    )
    return parser


def _read(path: Path, copy_if_not_rtf: bool) -> RtfContent:
    from rtf2text.parsing.extractors.rtf_extractor import read_rtf

    with open(path, "rb") as f:
        results = list(read_rtf(io.BytesIO(f.read()), str(path), copy_if_not_rtf))
    if not results:
        raise RuntimeError(f"No extraction results for {path}")
    return results[0]


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    try:
        args, unknown = parser.parse_known_args(argv)
    except SystemExit as exc:
        code = exc.code if isinstance(exc.code, int) else 1
        return code

    if unknown:
        unknown_str = " ".join(unknown)
        print(
            f"rtf2text: warning: unsupported arguments: {unknown_str}",
            file=sys.stderr,
        )
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        result = _read(args.path, args.copy_if_not_rtf)
        if args.json:
            json.dump(serialize_extraction(result), sys.stdout)
            sys.stdout.write("\n")
        else:
            sys.stdout.write(result.get_full_text())
            sys.stdout.write("\n")
        return 0
    except Exception as exc:
        print(f"rtf2text: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
