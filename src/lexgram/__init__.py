"""Lexgram: weighted character n-gram statistics over a lexicon."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ._aggregator import NGramAggregator, aggregate, extract_ngrams
from ._alphabet import ALPHABET, CONSONANTS, VOWELS
from ._canonical import FOLDS, canonicalize
from ._classifier import classify, is_consonant_only, is_vowel_only
from ._errors import (
    DataValidityError,
    InputError,
    InputNotFoundError,
    InputReadError,
    LexgramError,
    SchemaError,
    ValueParseError,
)
from ._report import dump_tables, encode_dump, format_summary, rank_bucket, summarize
from ._sources import (
    SUBTLEX_COLUMNS,
    DatasetImporter,
    SubtlexImporter,
    WordCountFile,
    WordSource,
)
from ._types import (
    Analysis,
    Bucket,
    BucketSummary,
    Classification,
    RankedNGram,
    Summary,
)

if TYPE_CHECKING:
    from collections.abc import Iterable

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "analyze",
    "aggregate",
    "canonicalize",
    "classify",
    "dump_tables",
    "encode_dump",
    "extract_ngrams",
    "format_summary",
    "is_consonant_only",
    "is_vowel_only",
    "rank_bucket",
    "summarize",
    "ALPHABET",
    "Analysis",
    "Bucket",
    "BucketSummary",
    "Classification",
    "CONSONANTS",
    "DataValidityError",
    "DatasetImporter",
    "FOLDS",
    "InputError",
    "InputNotFoundError",
    "InputReadError",
    "LexgramError",
    "NGramAggregator",
    "RankedNGram",
    "SchemaError",
    "SUBTLEX_COLUMNS",
    "SubtlexImporter",
    "Summary",
    "ValueParseError",
    "VOWELS",
    "WordCountFile",
    "WordSource",
]


def analyze(pairs: Iterable[tuple[str, float]], *, jobs: int = 1) -> Analysis:
    """Aggregate all (word, weight) pairs, then classify the result.

    Args:
        pairs: Lowercase ASCII words with non-negative weights, e.g.
            ``SubtlexImporter(path).weighted_words()``.
        jobs: Worker processes used for aggregation.
    """
    aggregator = aggregate(pairs, jobs=jobs)
    return Analysis(
        aggregator=aggregator,
        classification=classify(aggregator.buckets),
    )
