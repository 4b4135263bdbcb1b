"""Command-line entry point.

    svgdom path "M 0,0 L 10,10 L 20,20"     # print canonical path data
    svgdom roundtrip drawing.svg -o out.svg  # read into the element tree and write back
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
import xml.etree.ElementTree as ET
from typing import Sequence

from svgdom.config import configure_logging, settings
from svgdom.errors import SvgError
from svgdom.markup import MarkupDocument, read_tree, write_tree
from svgdom.types.path import parse_path

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="svgdom", description="SVG element tree and path-data codec")
    parser.add_argument("--log-level", help="Override SVGDOM_LOG_LEVEL (debug, info, warning, ...)")
    sub = parser.add_subparsers(dest="command", required=True)

    path_cmd = sub.add_parser("path", help="Print path data in canonical form")
    path_cmd.add_argument("data", help="Path data, e.g. 'M 0,0 L 10,10'")

    rt_cmd = sub.add_parser("roundtrip", help="Read an SVG file into the element tree and write it back")
    rt_cmd.add_argument("input", help="SVG file")
    rt_cmd.add_argument("-o", "--output", help="Output file (default: stdout)")
    return parser


def _handle_path(args: argparse.Namespace) -> int:
    try:
        path = parse_path(args.data)
    except SvgError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    print(path.to_text())
    return 0


def _handle_roundtrip(args: argparse.Namespace) -> int:
    if not os.path.exists(args.input):
        print(f"File not found: {args.input}", file=sys.stderr)
        return 1

    try:
        source = MarkupDocument.from_file(args.input)
        root = read_tree(source)
    except (ET.ParseError, SvgError) as e:
        print(f"Error reading {args.input}: {e}", file=sys.stderr)
        return 1

    namespace = source.namespace_uri or settings.svgdom_namespace
    output = write_tree(root, namespace).to_string(indent=settings.svgdom_indent)

    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(output + "\n")
        logger.info("Saved %s", args.output)
    else:
        print(output)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    configure_logging(args.log_level)

    if args.command == "path":
        return _handle_path(args)
    return _handle_roundtrip(args)


if __name__ == "__main__":
    sys.exit(main())
