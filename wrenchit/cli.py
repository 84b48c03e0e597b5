from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .commands import decode_base64, encode_base64, fix_json
from .security.exceptions import WrenchError
from .utils.config import RepairConfig


def build_cli() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wrenchit", description="Repair mangled JSON and convert Base64 text"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log each repair step")
    subparsers = parser.add_subparsers(dest="command", required=True)

    fix_cmd = subparsers.add_parser("fix-json", help="Repair and pretty-print JSON")
    fix_cmd.add_argument("file", nargs="?", help="Input file (default: stdin)")
    fix_cmd.add_argument("--indent", type=int, default=2)
    fix_cmd.add_argument(
        "--in-place",
        action="store_true",
        help="Write the result back to the input file",
    )

    encode_cmd = subparsers.add_parser("encode-base64", help="Encode text as Base64")
    encode_cmd.add_argument("file", nargs="?", help="Input file (default: stdin)")

    decode_cmd = subparsers.add_parser("decode-base64", help="Decode Base64 text")
    decode_cmd.add_argument("file", nargs="?", help="Input file (default: stdin)")

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_cli()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if args.command == "fix-json" and args.in_place and not args.file:
        parser.error("--in-place requires a file argument")

    try:
        text = _read_input(args.file)
        if args.command == "fix-json":
            return _run_fix_json(args, text)
        if args.command == "encode-base64":
            _write_output(None, encode_base64(text))
            return 0
        if args.command == "decode-base64":
            _write_output(None, decode_base64(text))
            return 0
    except (WrenchError, OSError, UnicodeDecodeError) as exc:
        print(f"wrenchit error: {exc}", file=sys.stderr)
        return 2

    parser.error(f"Unsupported command: {args.command}")
    return 2


def _run_fix_json(args: argparse.Namespace, text: str) -> int:
    outcome = fix_json(text, RepairConfig(indent=args.indent))
    _write_output(args.file if args.in_place else None, outcome.text)
    if not outcome.ok:
        print(f"wrenchit warning: {outcome.message}", file=sys.stderr)
        return 1
    return 0


def _read_input(file: str | None) -> str:
    if file is None:
        return sys.stdin.read()
    return Path(file).read_text(encoding="utf-8")


def _write_output(file: str | None, text: str) -> None:
    if file is None:
        sys.stdout.write(text)
        if not text.endswith("\n"):
            sys.stdout.write("\n")
        return
    Path(file).write_text(text, encoding="utf-8")
