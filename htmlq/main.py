#!/usr/bin/env python3
"""
htmlq - Command line entry point.

Reads an HTML document from a file or stdin, selects nodes with a CSS
selector and prints one line per match.
"""

import sys
import argparse
import logging
from typing import List, Optional

from htmlq import __version__
from htmlq.exceptions import HtmlQError, SelectorError
from htmlq.nodeset import NodeSet
from htmlq.parser.html_parser import HTMLParser
from htmlq.utils.config import get_config, reset_config
from htmlq.utils.logging import setup_logging, get_default_log_file, log_exception, PerformanceLogger

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_BAD_SELECTOR = 2

logger = logging.getLogger("htmlq.main")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="htmlq",
        description="Select nodes from an HTML document with a CSS selector")

    parser.add_argument("selector", help="CSS selector to match")
    parser.add_argument("file", nargs="?", default=None,
                        help="HTML file to read (default: stdin)")
    output = parser.add_mutually_exclusive_group()
    output.add_argument("--attr", metavar="NAME", default=None,
                        help="Print this attribute of each match instead of its inner HTML")
    output.add_argument("--value", action="store_true",
                        help="Print the form value of each match")
    parser.add_argument("--index", type=int, default=None,
                        help="Only output the match at this position")
    parser.add_argument("--parser", dest="features", default=None,
                        help="BeautifulSoup tree builder (default: html5lib)")
    parser.add_argument("--config", default=None, help="Path to a JSON config file")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("--log", action="store_true",
                        help="Also write a debug log under ~/.htmlq/logs")
    parser.add_argument("--version", action="version", version=f"htmlq {__version__}")

    return parser.parse_args(argv)


def read_input(path: Optional[str]) -> bytes:
    """Read the raw document from a file, or from stdin when path is None or '-'."""
    if path is None or path == "-":
        return sys.stdin.buffer.read()
    with open(path, "rb") as f:
        return f.read()


def extract(matches: NodeSet, attr: Optional[str] = None, value: bool = False) -> List[str]:
    """
    Collect one output string per matched node.

    Args:
        matches: Nodes to read from
        attr: Attribute to read instead of inner HTML
        value: Read the form value instead of inner HTML

    Returns:
        List[str]: Output lines, in set order
    """
    lines: List[str] = []

    def collect(node: NodeSet) -> None:
        if attr:
            lines.append(node.get_attr(attr))
        elif value:
            lines.append(node.get_value())
        else:
            lines.append(node.text())

    matches.for_each(collect)
    return lines


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the command line tool."""
    args = parse_args(argv)

    config = reset_config(args.config) if args.config else get_config()
    console_level = "DEBUG" if args.debug else config.get("logging.console_level", "WARNING")
    log_file = get_default_log_file() if args.log else config.get("logging.file")
    log = setup_logging(log_file=log_file,
                        console_level=console_level,
                        file_level=config.get("logging.file_level", "DEBUG"))
    perf = PerformanceLogger(log, "htmlq")

    try:
        data = read_input(args.file)

        perf.start("parse")
        document = NodeSet().parse(data, HTMLParser(features=args.features))
        perf.end("parse")

        perf.start("find")
        matches = document.find(args.selector)
        perf.end("find")

        if args.index is not None:
            matches = matches.index(args.index)

        for line in extract(matches, attr=args.attr, value=args.value):
            print(line)
    except SelectorError as e:
        log_exception(logger, e, "Invalid selector")
        return EXIT_BAD_SELECTOR
    except (HtmlQError, OSError) as e:
        log_exception(logger, e, "Failed to process document")
        return EXIT_ERROR

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
