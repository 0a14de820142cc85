"""Benchmark membership checks and set construction.

Run with:
    pytest benchmarks/benchmark_codepoints.py -v --benchmark-only

Or for a quick timing table:
    python benchmarks/benchmark_codepoints.py
"""

from __future__ import annotations

import time

import pytest

from japanese_codepoints import (
    contains_all_in_any,
    jisx0208,
    jisx0208kanji,
    jisx0213kanji,
)


@pytest.mark.benchmark(group="contains")
def test_benchmark_contains_kana(benchmark, kana_document):
    """Whole-document check against the union of hiragana and katakana."""
    kana = jisx0208.hiragana() | jisx0208.katakana()
    assert benchmark(kana.contains, kana_document)


@pytest.mark.benchmark(group="contains")
def test_benchmark_contains_all_in_any_kana(benchmark, kana_document):
    """Same check, but probing each set per character."""
    sets = [jisx0208.hiragana(), jisx0208.katakana()]
    assert benchmark(contains_all_in_any, kana_document, sets)


@pytest.mark.benchmark(group="contains")
def test_benchmark_contains_kanji(benchmark, kanji_document):
    """Large set, many distinct characters."""
    kanji = jisx0213kanji.kanji()
    assert benchmark(kanji.contains, kanji_document)


@pytest.mark.benchmark(group="exclusion")
def test_benchmark_all_excluded(benchmark, mixed_documents):
    """Collect offending characters for many short inputs."""
    allowed = jisx0208.hiragana() | jisx0208.katakana() | jisx0208kanji.kanji()

    def scan_all():
        return [allowed.all_excluded(doc) for doc in mixed_documents]

    benchmark(scan_all)


@pytest.mark.benchmark(group="construction")
def test_benchmark_build_jisx0213_kanji(benchmark):
    """Uncached construction of the largest set."""
    result = benchmark(jisx0213kanji.kanji.__wrapped__)
    assert len(result) == 10050


@pytest.mark.benchmark(group="construction")
def test_benchmark_hash_jisx0208_kanji(benchmark):
    """First hash of a large set (sorts before hashing)."""
    benchmark(lambda: hash(jisx0208kanji.kanji.__wrapped__()))


def main() -> None:
    """Print a quick timing table without pytest-benchmark."""
    import sys

    print("japanese_codepoints membership benchmark")
    print("=" * 60)
    print(f"Python {sys.version.split()[0]}\n")

    text = "こんにちはコンニチハ" * 10_000
    candidates = {
        "union.contains": (jisx0208.hiragana() | jisx0208.katakana()).contains,
        "contains_all_in_any": lambda t: contains_all_in_any(
            t, [jisx0208.hiragana(), jisx0208.katakana()]
        ),
    }

    for name, check in candidates.items():
        start = time.perf_counter()
        for _ in range(10):
            check(text)
        elapsed = (time.perf_counter() - start) / 10
        print(f"{name:28} {elapsed * 1000:8.2f}ms  ({len(text):,} chars)")


if __name__ == "__main__":
    main()
