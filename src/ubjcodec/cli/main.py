"""Main CLI entry point for ubjcodec."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from .. import __version__
from ..cli.dump import dump_tokens
from ..codec import decode, encode
from ..exceptions import UbjcodecError
from ..models.options import MAX_DEPTH, CodecOptions, TargetShape


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the ubjcodec CLI.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = argparse.ArgumentParser(
        description="ubjcodec: compact binary codec for JSON-like data",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  ubjcodec --encode data.json -o data.ubj     Encode JSON to binary
  ubjcodec --decode data.ubj                   Decode binary to JSON
  ubjcodec --decode data.ubj --shape array     Decode objects as key/value lists
  ubjcodec --dump data.ubj                     List tokens
  ubjcodec --version                           Show version
        """,
    )

    action = parser.add_mutually_exclusive_group()
    action.add_argument("--encode", metavar="FILE", type=str, help="Encode a JSON file")
    action.add_argument("--decode", metavar="FILE", type=str, help="Decode a binary file to JSON")
    action.add_argument("--dump", metavar="FILE", type=str, help="List the tokens of a binary file")

    parser.add_argument(
        "-o",
        "--output",
        metavar="FILE",
        type=str,
        help="Write the result to FILE instead of stdout",
    )
    parser.add_argument(
        "--shape",
        choices=[shape.value for shape in TargetShape],
        default=TargetShape.OBJECT.value,
        help="Representation of decoded objects (default: object)",
    )
    parser.add_argument(
        "--max-depth",
        type=int,
        default=MAX_DEPTH,
        help=f"Maximum container nesting (default: {MAX_DEPTH})",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "--version",
        action="version",
        version=f"ubjcodec {__version__}",
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    input_name = args.encode or args.decode or args.dump
    if not input_name:
        # If no command specified, show help
        parser.print_help()
        return 0

    file_path = Path(input_name)
    if not file_path.exists():
        print(f"Error: File not found: {file_path}", file=sys.stderr)
        return 1

    try:
        options = CodecOptions(target_shape=TargetShape(args.shape), max_depth=args.max_depth)
    except ValueError as e:
        print(f"Error: Invalid options: {e}", file=sys.stderr)
        return 1

    try:
        if args.encode:
            value = json.loads(file_path.read_text(encoding="utf-8"))
            _write_bytes(encode(value, options=options), args.output)
        elif args.decode:
            value = decode(file_path.read_bytes(), options=options)
            _write_text(json.dumps(value, indent=2) + "\n", args.output)
        else:
            if args.output:
                with open(args.output, "w", encoding="utf-8") as out:
                    dump_tokens(file_path.read_bytes(), out)
            else:
                dump_tokens(file_path.read_bytes(), sys.stdout)
        return 0
    except (UbjcodecError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def _write_bytes(data: bytes, output: str | None) -> None:
    if output:
        Path(output).write_bytes(data)
    else:
        sys.stdout.buffer.write(data)
        sys.stdout.buffer.flush()


def _write_text(text: str, output: str | None) -> None:
    if output:
        Path(output).write_text(text, encoding="utf-8")
    else:
        sys.stdout.write(text)


if __name__ == "__main__":
    sys.exit(main())
