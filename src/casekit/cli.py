"""Command line interface for the casekit converters."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Iterable, Sequence, TextIO

from .config import ConversionConfig
from .convert import describe, split_words
from .render import Style


def _read_values(values: Sequence[str], stream: TextIO) -> Iterable[str]:
    if values:
        yield from values
        return
    for line in stream:
        yield line.rstrip("\r\n")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="casekit", description="Convert text to kebab-case, camelCase or dot.case"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "values",
        nargs="*",
        metavar="VALUE",
        help="Values to convert. One value per line is read from stdin when omitted",
    )
    common.add_argument(
        "--ascii",
        action="store_true",
        help="Only treat A-Z, a-z and 0-9 as word characters",
    )
    common.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    for style in Style:
        style_parser = subparsers.add_parser(
            style.value, parents=[common], help=f"convert values to {style.value} case"
        )
        style_parser.add_argument(
            "--json",
            action="store_true",
            help="Emit one JSON document per value including the detected words",
        )

    subparsers.add_parser("words", parents=[common], help="print the words found in each value")

    return parser


def _handle_words(args: argparse.Namespace, config: ConversionConfig, stream: TextIO) -> int:
    for value in _read_values(args.values, stream):
        sys.stdout.write(" ".join(split_words(value, config=config)) + "\n")
    return 0


def _handle_style(args: argparse.Namespace, config: ConversionConfig, stream: TextIO) -> int:
    for value in _read_values(args.values, stream):
        result = describe(value, args.command, config=config)
        if args.json:
            sys.stdout.write(json.dumps(result.model_dump(mode="json"), ensure_ascii=False) + "\n")
        else:
            sys.stdout.write(result.result + "\n")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    config = ConversionConfig.ascii() if args.ascii else ConversionConfig()
    if args.command == "words":
        return _handle_words(args, config, sys.stdin)
    if args.command in {style.value for style in Style}:
        return _handle_style(args, config, sys.stdin)
    parser.error("no command provided")
    return 2


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
