"""JIS X 0213 kanji (levels 1-4, 10,050 characters).

Levels 1 and 2 are the JIS X 0208 kanji; level3() and level4() hold only the
kanji JIS X 0213 adds.

Example:
    >>> from japanese_codepoints import jisx0213kanji
    >>> jisx0213kanji.kanji().contains("堯槇遙瑤凜熙")
    True
    >>> len(jisx0213kanji.kanji())
    10050
"""

from __future__ import annotations

from japanese_codepoints.cache import cached_codepoints
from japanese_codepoints.codepoints import CodePoints
from japanese_codepoints.data import jisx0213kanji as data


@cached_codepoints("jisx0213kanji.all")
def kanji() -> CodePoints:
    return CodePoints(data.JISX0213_KANJI)


@cached_codepoints("jisx0213kanji.level3")
def level3() -> CodePoints:
    return CodePoints(data.LEVEL3_KANJI)


@cached_codepoints("jisx0213kanji.level4")
def level4() -> CodePoints:
    return CodePoints(data.LEVEL4_KANJI)


__all__ = [
    "kanji",
    "level3",
    "level4",
]
