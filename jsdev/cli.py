"""
Command line entry point.

    jsdev debug log:console.log alarm:alert -comment "Devel Edition"

reads a program from stdin and writes the expanded program to stdout,
starting with ``// Devel Edition``.
"""
import argparse
import io
import logging
import sys

from .core import process
from .exceptions import JSDevError, WriteError
from .log import get_logger, setup_base_logger
from .tags import build_tag_table

logger = get_logger(__name__)

ENCODING = "utf-8"
COMMENT_OPTION = "-comment"


def split_comments(argv):
    """
    Pull every ``-comment TEXT`` pair out of argv. TEXT is taken verbatim,
    even when it looks like an option. A trailing ``-comment`` is left in
    place for argparse to reject.
    """
    rest = []
    comments = []
    tokens = iter(argv)
    for token in tokens:
        if token != COMMENT_OPTION:
            rest.append(token)
            continue
        text = next(tokens, None)
        if text is None:
            rest.append(token)
        else:
            comments.append(text)
    return rest, comments


def parse_args(argv=None):
    if argv is None:
        argv = sys.argv[1:]
    argv, comments = split_comments(argv)
    parser = argparse.ArgumentParser(
        prog="jsdev",
        description="Activate tagged comments in a JavaScript program.",
        allow_abbrev=False,
    )
    parser.add_argument(
        "tags", nargs="*", metavar="tag[:method]",
        help="tag to activate, optionally bound to a method",
    )
    parser.add_argument(
        COMMENT_OPTION, action="append", default=[], metavar="TEXT",
        help="prepend '// TEXT' to the output (may be repeated)",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="log expansions to stderr",
    )
    args = parser.parse_intermixed_args(argv)
    args.comment = comments
    return args


def _wrap(stream, **kwargs):
    # newline="" keeps CR and CRLF intact in both directions.
    return io.TextIOWrapper(
        stream.buffer, encoding=ENCODING, errors="surrogateescape",
        newline="", **kwargs
    )


def run(args):
    stdin = _wrap(sys.stdin)
    stdout = _wrap(sys.stdout)
    try:
        tags = build_tag_table(args.tags)
        process(stdin, stdout, tags, args.comment)
    finally:
        stdin.detach()
        try:
            # Flushes whatever is still buffered.
            stdout.detach()
        except OSError as exc:
            raise WriteError() from exc


def main(argv=None):
    args = parse_args(argv)
    setup_base_logger(level=logging.DEBUG if args.verbose else logging.INFO)
    try:
        run(args)
    except JSDevError as exc:
        logger.error("%s", exc)
        return 1
    return 0
