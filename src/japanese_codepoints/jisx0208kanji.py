"""JIS X 0208 kanji (levels 1 and 2, 6,355 characters).

Example:
    >>> from japanese_codepoints import jisx0208kanji
    >>> jisx0208kanji.kanji().contains("亜愛安以伊位一乙王黄")
    True
    >>> len(jisx0208kanji.level1()), len(jisx0208kanji.level2())
    (2965, 3390)
"""

from __future__ import annotations

from japanese_codepoints.cache import cached_codepoints
from japanese_codepoints.codepoints import CodePoints
from japanese_codepoints.data import jisx0208kanji as data


@cached_codepoints("jisx0208kanji.all")
def kanji() -> CodePoints:
    return CodePoints(data.JISX0208_KANJI)


@cached_codepoints("jisx0208kanji.level1")
def level1() -> CodePoints:
    return CodePoints(data.LEVEL1_KANJI)


@cached_codepoints("jisx0208kanji.level2")
def level2() -> CodePoints:
    return CodePoints(data.LEVEL2_KANJI)


__all__ = [
    "kanji",
    "level1",
    "level2",
]
