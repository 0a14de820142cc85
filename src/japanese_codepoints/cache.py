"""Lazily built, process-wide code point sets.

Well-known sets (ASCII printable, JIS X 0208 hiragana, ...) are built on first
use and then shared. Every caller gets the same object, so ``is`` identity
can be used to recognise a cached instance.

Thread Safety:
    Construction is guarded by a per-cell threading.Lock with a double-checked
    read. Concurrent first access builds the set exactly once; racing callers
    wait on the lock and receive the completed instance. After that, reads
    take no lock (a CodePoints is immutable).

Example:
    >>> from japanese_codepoints import CodePoints
    >>> from japanese_codepoints.cache import cached_codepoints
    >>> @cached_codepoints("demo.vowels")
    ... def vowels() -> CodePoints:
    ...     return CodePoints.from_string("aeiou")
    >>> vowels() is vowels()
    True
"""

from __future__ import annotations

import functools
import threading
from collections.abc import Callable
from typing import TYPE_CHECKING

from japanese_codepoints.utils.logger import get_logger

if TYPE_CHECKING:
    from japanese_codepoints.codepoints import CodePoints

logger = get_logger(__name__)


class LazyCodePoints:
    """Once-cell holding a CodePoints built by factory on first access."""

    __slots__ = ("_factory", "_lock", "_name", "_value")

    def __init__(self, name: str, factory: Callable[[], CodePoints]) -> None:
        self._name = name
        self._factory = factory
        self._lock = threading.Lock()
        self._value: CodePoints | None = None

    @property
    def name(self) -> str:
        return self._name

    @property
    def initialized(self) -> bool:
        """True once the set has been built."""
        return self._value is not None

    def get(self) -> CodePoints:
        """Return the cached set, building it on first call."""
        value = self._value
        if value is not None:
            return value
        with self._lock:
            if self._value is None:
                built = self._factory()
                logger.debug("Built cached code point set %r (%d code points)", self._name, len(built))
                self._value = built
            return self._value

    def __call__(self) -> CodePoints:
        return self.get()

    def __repr__(self) -> str:
        state = "initialized" if self.initialized else "pending"
        return f"LazyCodePoints({self._name!r}, {state})"


def cached_codepoints(
    name: str,
) -> Callable[[Callable[[], CodePoints]], Callable[[], CodePoints]]:
    """Turn a zero-argument CodePoints factory into a cached accessor.

    The returned accessor keeps the factory's name and docstring. The
    original factory stays reachable as ``accessor.__wrapped__`` for callers
    that want a fresh, uncached instance, and the once-cell as
    ``accessor.cell``.

    Args:
        name: Name used in log records (e.g. "jisx0208.hiragana")

    Returns:
        Decorator producing the cached accessor
    """

    def decorator(factory: Callable[[], CodePoints]) -> Callable[[], CodePoints]:
        cell = LazyCodePoints(name, factory)

        @functools.wraps(factory)
        def accessor() -> CodePoints:
            return cell.get()

        accessor.cell = cell  # type: ignore[attr-defined]
        return accessor

    return decorator


__all__ = [
    "LazyCodePoints",
    "cached_codepoints",
]
