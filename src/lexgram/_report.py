"""Ranked summaries and structured dumps of aggregated n-grams."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import msgpack

from ._types import BucketSummary, RankedNGram, Summary

if TYPE_CHECKING:
    from ._aggregator import NGramAggregator
    from ._types import Bucket, Classification

DUMP_FORMATS = ("json", "msgpack")


def rank_bucket(bucket: Bucket, top_k: int) -> list[RankedNGram]:
    """Top-K n-grams of a bucket by weight, with their share of its total.

    Equal weights are ordered lexicographically by n-gram so output is
    reproducible.
    """
    ranked = sorted(bucket.counts.items(), key=lambda kv: (-kv[1], kv[0]))
    total = bucket.total
    return [
        RankedNGram(
            ngram=ngram,
            weight=weight,
            percentage=weight / total * 100.0 if total > 0.0 else 0.0,
        )
        for ngram, weight in ranked[:top_k]
    ]


def summarize(aggregator: NGramAggregator, top_k: int = 10) -> Summary:
    """Rank every non-empty bucket, smallest canonical length first."""
    if top_k < 1:
        raise ValueError(f"top_k must be >= 1, got {top_k}")

    summaries = [
        BucketSummary(
            length=length,
            distinct=len(bucket),
            total=bucket.total,
            top=rank_bucket(bucket, top_k),
        )
        for length, bucket in enumerate(aggregator.buckets)
        if bucket.counts
    ]
    return Summary(
        top_k=top_k,
        buckets=summaries,
        word_count=aggregator.word_count,
        grand_total=aggregator.grand_total,
    )


def format_summary(summary: Summary) -> str:
    lines: list[str] = []
    for bs in summary.buckets:
        lines.append(f"Total {bs.length}-grams counted: {bs.distinct}")
        lines.append(f"Top {summary.top_k} {bs.length}-grams:")
        for r in bs.top:
            lines.append(f"{r.ngram}: {r.weight:g} ({r.percentage:g}%)")
        lines.append("")
    lines.append(f"Total words processed: {summary.word_count}")
    lines.append(f"Total weight of n-grams processed: {summary.grand_total:g}")
    return "\n".join(lines) + "\n"


def dump_tables(
    aggregator: NGramAggregator, classification: Classification
) -> dict[str, Any]:
    """Full bucket, vowel-only and consonant-only tables.

    ``ngrams[L]`` holds the n-grams of canonical length L; empty buckets are
    kept so list indices line up with lengths.
    """
    return {
        "ngrams": [dict(b.counts) for b in aggregator.buckets],
        "vowels": dict(classification.vowels),
        "consonants": dict(classification.consonants),
    }


def encode_dump(tables: dict[str, Any], fmt: str = "json") -> bytes:
    """Serialize a structured dump as UTF-8 JSON or msgpack."""
    if fmt == "json":
        return (json.dumps(tables, indent=2) + "\n").encode("utf-8")
    if fmt == "msgpack":
        return msgpack.packb(tables, use_bin_type=True)
    raise ValueError(f"Unknown dump format {fmt!r}, expected one of {DUMP_FORMATS}")
