"""
Command line tools:

  yangparse FILE         print the syntax tree of a yang document
  yangparse-lex [FILE]   print the tokens of a yang document, read from
                         standard input when no file is given
"""

import argparse
import logging
import sys

from _yangparse.formatting import format_tokens, format_tree
from _yangparse.reading import read, read_tokens
from _yangparse.scanner import YangParseError, YangScanner

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def add_verbose_argument(parser):
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug messages to standard error.",
    )


def configure_logging(verbose):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING, format=LOG_FORMAT
    )


def read_stdin_lines():
    """
    Read standard input as bytes, so that invalid utf-8 is reported by the
    scanner. Lines end at "\\n" with one trailing "\\r" dropped, and are
    joined with "\\n" plus a final "\\n".
    """
    lines = sys.stdin.buffer.read().split(b"\n")
    if lines[-1] == b"":
        lines.pop()
    lines = [line[:-1] if line.endswith(b"\r") else line for line in lines]
    return b"\n".join(lines) + b"\n"


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="yangparse", description="Parse a yang document and print its tree."
    )
    parser.add_argument("path", help="Path to the yang document.")
    add_verbose_argument(parser)
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    try:
        tree = read(args.path)
    except (YangParseError, OSError) as err:
        logger.debug("Failed to parse %s", args.path, exc_info=True)
        print(f"Failed to parse input: {err}", file=sys.stderr)
        return 1

    print(format_tree(tree))
    return 0


def lex_main(argv=None):
    parser = argparse.ArgumentParser(
        prog="yangparse-lex",
        description="Print the tokens of a yang document.",
    )
    parser.add_argument(
        "path",
        nargs="?",
        help="Path to the yang document, standard input is read if omitted.",
    )
    add_verbose_argument(parser)
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    try:
        if args.path is None:
            tokens = list(YangScanner(read_stdin_lines()))
        else:
            tokens = read_tokens(args.path)
    except (YangParseError, OSError) as err:
        print(f"Scan failed: {err}", file=sys.stderr)
        return 1

    sys.stdout.write(format_tokens(tokens))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
