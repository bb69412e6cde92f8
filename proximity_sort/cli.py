# proximity_sort/cli.py
from __future__ import annotations

import argparse
import os
import sys
from itertools import islice
from typing import BinaryIO, List, Optional, Sequence

from loguru import logger
from pydantic import ValidationError

from .config import LOG_FORMAT, LOG_LEVEL, VERSION, RankOptions, ScoringMode, TieBreak
from .ranking import reorder


def configure_logging(level: str = LOG_LEVEL) -> None:
    """Single stderr sink; stdout is reserved for ranked paths."""
    logger.remove()
    logger.add(sys.stderr, level=level.upper(), format=LOG_FORMAT)


def split_input(data: bytes, delimiter: bytes) -> List[bytes]:
    """
    Split raw input into paths. A trailing delimiter does not produce an
    empty last entry; empty entries in the middle are kept.
    """
    if not data:
        return []
    lines = data.split(delimiter)
    if lines[-1] == b"":
        lines.pop()
    return lines


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="proximity-sort",
        description="Sort inputs by proximity to the given path",
    )
    ap.add_argument("path", metavar="PATH",
                    help="Compute the proximity to this path")
    ap.add_argument("-0", "--read0", action="store_true",
                    help="Read input delimited by ASCII NUL characters instead of newlines")
    ap.add_argument("--print0", action="store_true",
                    help="Print output delimited by ASCII NUL characters instead of newlines")
    ap.add_argument("--sort-ties", action="store_true",
                    help="Order equally close paths alphabetically instead of by input order")
    ap.add_argument("--dedupe", action="store_true",
                    help="With --sort-ties, print identical paths of equal proximity once")
    ap.add_argument("--scoring", choices=[m.value for m in ScoringMode],
                    default=ScoringMode.PROXIMITY.value,
                    help="Score formula (default: %(default)s)")
    ap.add_argument("-n", "--limit", type=int, default=None, metavar="K",
                    help="Only print the K closest paths")
    ap.add_argument("--log-level", default=LOG_LEVEL,
                    help="Log level for stderr (default: %(default)s)")
    ap.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    return ap


def options_from_args(ap: argparse.ArgumentParser, args: argparse.Namespace) -> RankOptions:
    try:
        return RankOptions(
            reference=os.fsencode(args.path),
            read0=args.read0,
            print0=args.print0,
            tie_break=TieBreak.LEXICOGRAPHIC if args.sort_ties else TieBreak.INPUT_ORDER,
            scoring=ScoringMode(args.scoring),
            collapse_duplicates=args.dedupe,
            limit=args.limit,
            log_level=args.log_level,
        )
    except ValidationError as e:
        msgs = "; ".join(err["msg"] for err in e.errors())
        ap.error(msgs)  # exits with status 2


def main(
    argv: Optional[Sequence[str]] = None,
    stdin: Optional[BinaryIO] = None,
    stdout: Optional[BinaryIO] = None,
) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)
    opts = options_from_args(ap, args)
    configure_logging(opts.log_level)

    owns_stdout = stdout is None
    stdin = stdin if stdin is not None else sys.stdin.buffer
    stdout = stdout if stdout is not None else sys.stdout.buffer

    try:
        data = stdin.read()
    except OSError as e:
        logger.error("failed to read more paths: {}", e)
        return 1

    paths = split_input(data, opts.input_delimiter)
    logger.info("Read {} paths; reference={!r}", len(paths), opts.reference)

    ranked = reorder(
        paths,
        opts.reference,
        tie_break=opts.tie_break,
        scoring=opts.scoring,
        collapse_duplicates=opts.collapse_duplicates,
    )
    if opts.limit is not None:
        ranked = islice(ranked, opts.limit)

    sep = opts.output_delimiter
    written = 0
    try:
        for path in ranked:
            stdout.write(path + sep)
            written += 1
        stdout.flush()
    except BrokenPipeError:
        # reader went away (e.g. `| head`); stop quietly
        logger.debug("Output closed after {} paths", written)
        if owns_stdout:
            _silence_stdout()
        return 0
    except OSError as e:
        logger.error("failed to write path: {}", e)
        return 1

    logger.info("Wrote {} paths", written)
    return 0


def _silence_stdout() -> None:
    # keep the interpreter's final flush of a closed pipe from raising again
    try:
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
    except (OSError, ValueError) as e:
        logger.debug("Could not redirect stdout to devnull: {}", e)


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
