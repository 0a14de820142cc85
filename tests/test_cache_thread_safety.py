"""Thread safety tests for the lazily built shared sets.

Verifies that:
1. Concurrent first access builds a set exactly once
2. Every thread receives the same instance
3. Concurrent validation against shared sets gives consistent results

These tests use real threading to catch actual concurrency bugs.
"""

import threading
import time
from concurrent.futures import ThreadPoolExecutor, as_completed

from japanese_codepoints import CodePoints, ValidationError, jisx0208, jisx0213kanji
from japanese_codepoints.cache import LazyCodePoints, cached_codepoints

THREADS = 16


class TestLazyCodePoints:
    """LazyCodePoints once-cell behavior."""

    def test_builds_once_under_contention(self) -> None:
        calls: list[int] = []
        barrier = threading.Barrier(THREADS)

        def factory() -> CodePoints:
            calls.append(1)
            time.sleep(0.01)
            return CodePoints.from_string("abc")

        cell = LazyCodePoints("test.contention", factory)

        def first_access() -> CodePoints:
            barrier.wait()
            return cell.get()

        with ThreadPoolExecutor(max_workers=THREADS) as pool:
            results = [f.result() for f in [pool.submit(first_access) for _ in range(THREADS)]]

        assert len(calls) == 1
        assert all(r is results[0] for r in results)

    def test_initialized_flag(self) -> None:
        cell = LazyCodePoints("test.flag", CodePoints)
        assert not cell.initialized
        assert "pending" in repr(cell)
        cell()
        assert cell.initialized
        assert "initialized" in repr(cell)
        assert cell.name == "test.flag"

    def test_decorator_exposes_cell(self) -> None:
        @cached_codepoints("test.decorated")
        def vowels() -> CodePoints:
            """Vowels."""
            return CodePoints.from_string("aeiou")

        assert not vowels.cell.initialized
        assert vowels() is vowels()
        assert vowels.cell.initialized
        assert vowels.__doc__ == "Vowels."


class TestSharedSetsUnderConcurrency:
    """Well-known sets are safe to share across threads."""

    def test_same_instance_across_threads(self) -> None:
        accessors = [
            CodePoints.ascii_printable_cached,
            jisx0208.hiragana,
            jisx0208.katakana,
            jisx0213kanji.kanji,
        ]
        barrier = threading.Barrier(THREADS)

        def fetch_all() -> list[CodePoints]:
            barrier.wait()
            return [accessor() for accessor in accessors]

        with ThreadPoolExecutor(max_workers=THREADS) as pool:
            futures = [pool.submit(fetch_all) for _ in range(THREADS)]
            results = [f.result() for f in as_completed(futures)]

        for column, accessor in enumerate(accessors):
            expected = accessor()
            assert all(row[column] is expected for row in results)

    def test_concurrent_validation(self) -> None:
        errors: list[str] = []
        lock = threading.Lock()

        def check(thread_id: int) -> None:
            hiragana = jisx0208.hiragana()
            for _ in range(100):
                if not hiragana.contains("ひらがな"):
                    with lock:
                        errors.append(f"Thread {thread_id}: false negative")
                try:
                    hiragana.validate(f"ひら{thread_id}")
                except ValidationError as e:
                    if e.position != 2:
                        with lock:
                            errors.append(f"Thread {thread_id}: position {e.position}")
                else:
                    with lock:
                        errors.append(f"Thread {thread_id}: no error raised")

        threads = [threading.Thread(target=check, args=(i,)) for i in range(THREADS)]
        for t in threads:
            t.start()
        for t in threads:
            t.join(timeout=10.0)

        assert not errors, f"Thread errors: {errors}"
