"""Command-line front ends.

Usage:
    lexgram-subtlex --subtlex SUBTLEX-US.csv -k 20
    lexgram-subtlex --subtlex SUBTLEX-US.csv --json > ngrams.json
    lexgram-dict words.txt -k 5 --jobs 4
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Callable, Sequence

from . import __version__, analyze
from ._errors import LexgramError
from ._logging import configure_logging
from ._report import dump_tables, encode_dump, format_summary, summarize
from ._sources import SubtlexImporter, WordCountFile, WordSource

logger = logging.getLogger(__name__)

DEFAULT_TOP_K = 10
TOP_K_RANGE = (1, 100)


def _top_k(value: str) -> int:
    lo, hi = TOP_K_RANGE
    try:
        k = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"{value!r} is not an integer")
    if not lo <= k <= hi:
        raise argparse.ArgumentTypeError(f"{k} is not in range [{lo}, {hi}]")
    return k


def _positive_int(value: str) -> int:
    try:
        n = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"{value!r} is not an integer")
    if n < 1:
        raise argparse.ArgumentTypeError(f"{n} must be at least 1")
    return n


def _build_parser(prog: str, description: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=prog, description=description)
    parser.add_argument(
        "-k", dest="top_k", type=_top_k, default=DEFAULT_TOP_K,
        help=f"Top K n-grams to display per length (default {DEFAULT_TOP_K})",
    )
    fmt = parser.add_mutually_exclusive_group()
    fmt.add_argument(
        "--json", dest="dump_format", action="store_const", const="json",
        help="Output the full n-gram tables as JSON",
    )
    fmt.add_argument(
        "--msgpack", dest="dump_format", action="store_const", const="msgpack",
        help="Output the full n-gram tables as msgpack",
    )
    parser.add_argument(
        "-j", "--jobs", type=_positive_int, default=1,
        help="Worker processes for aggregation (default 1)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _write_output(args: argparse.Namespace, source: WordSource) -> None:
    result = analyze(source.weighted_words(), jobs=args.jobs)

    if args.dump_format is None:
        summary = summarize(result.aggregator, args.top_k)
        sys.stdout.write(format_summary(summary))
        return

    tables = dump_tables(result.aggregator, result.classification)
    data = encode_dump(tables, args.dump_format)
    if args.dump_format == "json":
        sys.stdout.write(data.decode("utf-8"))
    else:
        sys.stdout.flush()
        sys.stdout.buffer.write(data)
        sys.stdout.buffer.flush()


def _run(
    args: argparse.Namespace,
    load_source: Callable[[argparse.Namespace], WordSource],
) -> int:
    configure_logging(logging.DEBUG if args.verbose else None)
    try:
        source = load_source(args)
    except LexgramError as exc:
        logger.error("Error loading input: %s", exc)
        return 1

    try:
        _write_output(args, source)
    except LexgramError as exc:
        logger.error("Analysis failed: %s", exc)
        return 1
    return 0


def _load_subtlex(args: argparse.Namespace) -> WordSource:
    # weighted_words() defaults to the frequency-per-million column
    return SubtlexImporter(args.subtlex)


def _load_dictionary(args: argparse.Namespace) -> WordSource:
    return WordCountFile(args.dictionary)


def main_subtlex(argv: Sequence[str] | None = None) -> int:
    """N-gram analysis weighted by SUBTLEX frequency per million."""
    parser = _build_parser("lexgram-subtlex", "Dictionary n-gram analyzer (SUBTLEX input)")
    parser.add_argument(
        "--subtlex", required=True, metavar="PATH",
        help="Path to SUBTLEX CSV file to load",
    )
    return _run(parser.parse_args(argv), _load_subtlex)


def main_dictionary(argv: Sequence[str] | None = None) -> int:
    """N-gram analysis weighted by integer counts from a word-count file."""
    parser = _build_parser("lexgram-dict", "Dictionary n-gram analyzer (word-count input)")
    parser.add_argument(
        "dictionary", metavar="DICTIONARY",
        help="Whitespace-separated file of word/count pairs",
    )
    return _run(parser.parse_args(argv), _load_dictionary)


def subtlex_entry() -> None:
    sys.exit(main_subtlex())


def dictionary_entry() -> None:
    sys.exit(main_dictionary())
