"""Data structures for lexgram."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ._aggregator import NGramAggregator


@dataclass(slots=True)
class Bucket:
    """Accumulated weight per canonical n-gram of one canonical length."""

    counts: dict[str, float] = field(default_factory=dict)
    total: float = 0.0   # sum of every contribution, not just distinct keys

    def add(self, ngram: str, weight: float) -> None:
        self.counts[ngram] = self.counts.get(ngram, 0.0) + weight
        self.total += weight

    def __len__(self) -> int:
        return len(self.counts)


@dataclass(slots=True)
class Classification:
    vowels: dict[str, float] = field(default_factory=dict)
    consonants: dict[str, float] = field(default_factory=dict)
    vowel_total: float = 0.0
    consonant_total: float = 0.0


@dataclass(slots=True, frozen=True)
class RankedNGram:
    ngram: str
    weight: float
    percentage: float   # share of the bucket total, 0-100


@dataclass(slots=True, frozen=True)
class BucketSummary:
    length: int         # canonical length
    distinct: int       # distinct canonical n-grams in the bucket
    total: float
    top: list[RankedNGram]


@dataclass(slots=True, frozen=True)
class Summary:
    top_k: int
    buckets: list[BucketSummary]
    word_count: int
    grand_total: float


@dataclass(slots=True, frozen=True)
class Analysis:
    """Result of one pass over a word/weight stream."""

    aggregator: NGramAggregator
    classification: Classification
