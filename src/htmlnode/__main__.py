#!/usr/bin/env python3
"""Command-line interface for htmlnode."""

from __future__ import annotations

import argparse
import logging
import sys
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import NoReturn

from . import Node, parse_document
from .filter import Filter
from .predicates import all_of, attr, has_attr, has_class, match_depth, tag

logger = logging.getLogger("htmlnode")


def _get_version() -> str:
    try:
        return version("htmlnode")
    except PackageNotFoundError:  # pragma: no cover
        return "dev"


def _attr_filter(option: str) -> Filter:
    key, sep, value = option.partition("=")
    if not key:
        raise argparse.ArgumentTypeError(f"invalid attribute filter: {option!r}")
    if sep:
        return attr(key, value)
    return has_attr(key)


def _parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="htmlnode",
        description="Parse HTML and print the nodes matched by a chain of filters.",
        epilog=(
            "Filters are applied in the order given; each one after the first is\n"
            "tested below the node that passed the previous one.\n"
            "\n"
            "Examples:\n"
            "  htmlnode page.html --tag tbody --tag tr --child\n"
            "  curl -s https://example.com | htmlnode - --tag a --format text\n"
            "  htmlnode page.html --class content --attr href --first\n"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "path",
        nargs="?",
        help="HTML file to parse, or '-' to read from stdin",
    )
    parser.add_argument(
        "--tag",
        dest="chain",
        action="append",
        type=tag,
        help="Add a filter matching elements with this tag name",
    )
    parser.add_argument(
        "--class",
        dest="chain",
        action="append",
        type=has_class,
        help="Add a filter matching elements with this class",
    )
    parser.add_argument(
        "--attr",
        dest="chain",
        action="append",
        type=_attr_filter,
        metavar="KEY[=VALUE]",
        help="Add a filter matching elements with this attribute (and value)",
    )
    parser.add_argument(
        "--child",
        action="store_true",
        help="Require each filter after the first to match a direct child of the previous match",
    )
    parser.add_argument(
        "--format",
        choices=["html", "text"],
        default="html",
        help="Output format (default: html)",
    )
    parser.add_argument(
        "--first",
        action="store_true",
        help="Only output the first matching node",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log debug information to stderr",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"htmlnode {_get_version()}",
    )

    args = parser.parse_args(argv)

    if not args.path:
        parser.print_help(sys.stderr)
        raise SystemExit(1)

    return args


def _read_html(path: str) -> bytes:
    # Bytes go to justhtml so it can sniff the document encoding itself
    if path == "-":
        return sys.stdin.buffer.read()

    return Path(path).read_bytes()


def _build_chain(filters: list[Filter] | None, child: bool) -> list[Filter]:
    if not filters:
        return []
    if not child:
        return filters
    direct = match_depth(1)
    return [filters[0], *(all_of(f, direct) for f in filters[1:])]


def main() -> NoReturn | None:
    args = _parse_args(sys.argv[1:])
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    root = parse_document(_read_html(args.path))
    chain = _build_chain(args.chain, args.child)

    nodes: list[Node]
    if not chain:
        nodes = [root]
    elif args.first:
        node, ok = root.find_node(*chain)
        nodes = [node] if ok else []
    else:
        nodes = root.filter_nodes(*chain)

    if not nodes:
        logger.debug("no node matched %d filter(s)", len(chain))
        raise SystemExit(1)

    if args.format == "html":
        outputs = [node.encode_html() for node in nodes]
    else:
        outputs = [node.encode_text() for node in nodes]
    sys.stdout.write("\n".join(outputs))
    sys.stdout.write("\n")
    return None


if __name__ == "__main__":
    main()
