"""Split aggregated n-grams into vowel-only and consonant-only tables."""

from __future__ import annotations

from collections.abc import Iterable

from ._alphabet import CONSONANTS, VOWELS
from ._types import Bucket, Classification


def is_vowel_only(ngram: str) -> bool:
    return all(c in VOWELS for c in ngram)


def is_consonant_only(ngram: str) -> bool:
    return all(c in CONSONANTS for c in ngram)


def classify(buckets: Iterable[Bucket]) -> Classification:
    """Build the vowel-only and consonant-only tables from final buckets.

    N-grams mixing both sets are left out of either table; they remain only
    in their bucket.
    """
    result = Classification()
    vowels = result.vowels
    consonants = result.consonants

    for bucket in buckets:
        for ngram, weight in bucket.counts.items():
            if is_vowel_only(ngram):
                vowels[ngram] = vowels.get(ngram, 0.0) + weight
                result.vowel_total += weight
            elif is_consonant_only(ngram):
                consonants[ngram] = consonants.get(ngram, 0.0) + weight
                result.consonant_total += weight

    return result
