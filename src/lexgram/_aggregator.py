"""Substring extraction and length-bucketed weight accumulation."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from concurrent.futures import ProcessPoolExecutor

from ._canonical import canonicalize
from ._types import Bucket

logger = logging.getLogger(__name__)

PROGRESS_INTERVAL = 10000


def _substrings(word: str) -> Iterator[str]:
    length = len(word)
    for n in range(1, length + 1):
        for i in range(length - n + 1):
            yield word[i:i + n]


def extract_ngrams(word: str) -> Iterator[tuple[str, int]]:
    """Yield (raw_substring, canonical_length) for every substring of word.

    Substrings are enumerated by raw length n, then by start offset. Each
    substring is canonicalized on its own, so the canonical length can be
    shorter than n.
    """
    for raw in _substrings(word):
        yield raw, len(canonicalize(raw))


class NGramAggregator:
    """Per-canonical-length n-gram weights built in a single pass."""

    __slots__ = ("_buckets", "_word_count")

    def __init__(self) -> None:
        self._buckets: list[Bucket] = []
        self._word_count = 0

    @property
    def buckets(self) -> list[Bucket]:
        """Buckets indexed by canonical length. Index 0 is always empty."""
        return self._buckets

    @property
    def word_count(self) -> int:
        return self._word_count

    @property
    def grand_total(self) -> float:
        return sum(b.total for b in self._buckets)

    def _ensure_length(self, size: int) -> None:
        while len(self._buckets) < size:
            self._buckets.append(Bucket())

    def accumulate(self, word: str, weight: float) -> None:
        """Add weight to every canonical substring of word."""
        self._ensure_length(len(word) + 1)
        weight = float(weight)
        buckets = self._buckets
        for raw in _substrings(word):
            ngram = canonicalize(raw)
            buckets[len(ngram)].add(ngram, weight)
        self._word_count += 1

    def update(self, pairs: Iterable[tuple[str, float]]) -> NGramAggregator:
        """Accumulate every (word, weight) pair. Returns self."""
        for word, weight in pairs:
            self.accumulate(word, weight)
            if self._word_count % PROGRESS_INTERVAL == 0:
                logger.debug("Processed %d words...", self._word_count)
        return self

    def merge(self, other: NGramAggregator) -> NGramAggregator:
        """Fold another partial aggregation into this one. Returns self."""
        self._ensure_length(len(other._buckets))
        for mine, theirs in zip(self._buckets, other._buckets):
            for ngram, weight in theirs.counts.items():
                mine.counts[ngram] = mine.counts.get(ngram, 0.0) + weight
            mine.total += theirs.total
        self._word_count += other._word_count
        return self


def _aggregate_chunk(pairs: list[tuple[str, float]]) -> NGramAggregator:
    return NGramAggregator().update(pairs)


def aggregate(
    pairs: Iterable[tuple[str, float]], jobs: int = 1
) -> NGramAggregator:
    """Build an aggregator over all pairs.

    Args:
        pairs: (word, weight) pairs from any source.
        jobs: Worker processes. With more than one, the input is split into
            chunks that are aggregated independently and then merged; the
            result is the same as a serial pass.
    """
    if jobs < 1:
        raise ValueError(f"jobs must be >= 1, got {jobs}")
    if jobs == 1:
        return NGramAggregator().update(pairs)

    items = list(pairs)
    chunk_size = -(-len(items) // jobs) or 1
    chunks = [items[i:i + chunk_size] for i in range(0, len(items), chunk_size)]
    logger.debug(
        "Aggregating %d words in %d chunks across %d workers",
        len(items), len(chunks), jobs,
    )

    result = NGramAggregator()
    with ProcessPoolExecutor(max_workers=jobs) as executor:
        # map() preserves chunk order, so merging is deterministic
        for partial in executor.map(_aggregate_chunk, chunks):
            result.merge(partial)
    return result
