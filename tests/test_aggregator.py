"""Tests for substring extraction and bucketed accumulation."""

import random

import pytest

from lexgram import analyze
from lexgram._aggregator import NGramAggregator, aggregate, extract_ngrams
from lexgram._canonical import canonicalize

WORDS = [
    ("quiet", 3.0), ("happy", 2.5), ("snow", 1.0), ("queue", 0.5),
    ("yellow", 4.0), ("strength", 1.25), ("a", 7.0), ("everyway", 0.75),
]


def _expected_bucket_totals(pairs):
    totals = {}
    for word, weight in pairs:
        for n in range(1, len(word) + 1):
            for i in range(len(word) - n + 1):
                length = len(canonicalize(word[i:i + n]))
                totals[length] = totals.get(length, 0.0) + weight
    return totals


def test_extract_counts():
    for word, _ in WORDS:
        items = list(extract_ngrams(word))
        n = len(word)
        assert len(items) == n * (n + 1) // 2
        for size in range(1, n + 1):
            raws = [raw for raw, _ in items if len(raw) == size]
            assert len(raws) == n - size + 1


def test_extract_order():
    assert [raw for raw, _ in extract_ngrams("abc")] == [
        "a", "b", "c", "ab", "bc", "abc",
    ]


def test_extract_canonical_length():
    items = dict(extract_ngrams("quit"))
    assert items["qu"] == 1
    assert items["qui"] == 2
    assert items["q"] == 1


def test_simple_accumulate():
    agg = NGramAggregator()
    agg.accumulate("ab", 2)
    assert len(agg.buckets) == 3
    assert agg.buckets[0].counts == {}
    assert agg.buckets[1].counts == {"a": 2.0, "b": 2.0}
    assert agg.buckets[1].total == 4.0
    assert agg.buckets[2].counts == {"ab": 2.0}
    assert agg.buckets[2].total == 2.0
    assert agg.word_count == 1


def test_qu_counted_in_bucket_one():
    agg = NGramAggregator()
    agg.accumulate("qu", 1.0)
    assert agg.buckets[1].counts == {"q": 1.0, "u": 1.0, "Q": 1.0}
    assert agg.buckets[1].total == 3.0
    assert agg.buckets[2].counts == {}
    assert agg.buckets[2].total == 0.0


def test_weights_are_floats():
    agg = NGramAggregator()
    agg.accumulate("to", 3)
    assert isinstance(agg.buckets[1].counts["t"], float)


def test_repeated_ngram_sums():
    agg = NGramAggregator()
    agg.accumulate("aa", 1.5)
    assert agg.buckets[1].counts == {"a": 3.0}
    assert agg.buckets[1].total == 3.0


def test_growing_keeps_existing_buckets():
    agg = NGramAggregator()
    agg.accumulate("abc", 1.0)
    before = dict(agg.buckets[3].counts)
    agg.accumulate("a", 1.0)
    assert len(agg.buckets) == 4
    agg.accumulate("abcdef", 1.0)
    assert len(agg.buckets) == 7
    assert agg.buckets[3].counts["abc"] == before["abc"] + 1.0
    assert agg.buckets[1].counts["a"] == 3.0


def test_bucket_totals_invariant():
    agg = NGramAggregator().update(WORDS)
    expected = _expected_bucket_totals(WORDS)
    for length, bucket in enumerate(agg.buckets):
        assert bucket.total == pytest.approx(expected.get(length, 0.0))
        assert bucket.total == pytest.approx(sum(bucket.counts.values()))
        for ngram in bucket.counts:
            assert len(ngram) == length


def test_bucket_count_sized_by_longest_word():
    agg = NGramAggregator().update(WORDS)
    assert len(agg.buckets) == max(len(w) for w, _ in WORDS) + 1


def test_order_independent():
    forward = NGramAggregator().update(WORDS)
    shuffled = list(WORDS)
    random.Random(7).shuffle(shuffled)
    backward = NGramAggregator().update(reversed(WORDS))
    mixed = NGramAggregator().update(shuffled)
    for other in (backward, mixed):
        assert len(other.buckets) == len(forward.buckets)
        for a, b in zip(forward.buckets, other.buckets):
            assert a.total == pytest.approx(b.total)
            assert a.counts.keys() == b.counts.keys()
            for key in a.counts:
                assert a.counts[key] == pytest.approx(b.counts[key])


def test_merge_matches_single_pass():
    whole = NGramAggregator().update(WORDS)
    left = NGramAggregator().update(WORDS[:3])
    right = NGramAggregator().update(WORDS[3:])
    merged = NGramAggregator().merge(right).merge(left)
    assert merged.word_count == whole.word_count
    assert merged.grand_total == pytest.approx(whole.grand_total)
    for a, b in zip(whole.buckets, merged.buckets):
        assert a.counts == pytest.approx(b.counts)


def test_grand_total():
    agg = NGramAggregator().update([("ab", 1.0), ("c", 2.0)])
    # ab -> a, b, ab (3 x 1.0); c -> c (1 x 2.0)
    assert agg.grand_total == 5.0


def test_empty_input():
    agg = aggregate([])
    assert agg.buckets == []
    assert agg.word_count == 0
    assert agg.grand_total == 0.0


def test_aggregate_parallel_matches_serial():
    serial = aggregate(WORDS)
    parallel = aggregate(WORDS, jobs=2)
    assert parallel.word_count == serial.word_count
    assert len(parallel.buckets) == len(serial.buckets)
    for a, b in zip(serial.buckets, parallel.buckets):
        assert a.total == pytest.approx(b.total)
        assert a.counts == pytest.approx(b.counts)


def test_aggregate_rejects_zero_jobs():
    with pytest.raises(ValueError, match="jobs"):
        aggregate(WORDS, jobs=0)


def test_analyze_classifies():
    result = analyze([("queue", 1.0)])
    assert result.aggregator.word_count == 1
    assert "eue" in result.classification.vowels
    assert "Q" in result.classification.consonants
