"""JIS X 0208 non-kanji character sets.

Each accessor returns a shared, lazily built CodePoints for one block of the
JIS X 0208 chart. For kanji see :mod:`japanese_codepoints.jisx0208kanji`.

Example:
    >>> from japanese_codepoints import jisx0208
    >>> jisx0208.hiragana().contains("ひらがな")
    True
    >>> jisx0208.katakana().first_excluded("カタカナa")
    97
"""

from __future__ import annotations

from japanese_codepoints.cache import cached_codepoints
from japanese_codepoints.codepoints import CodePoints
from japanese_codepoints.data import jisx0208 as data


@cached_codepoints("jisx0208.hiragana")
def hiragana() -> CodePoints:
    """Hiragana, row 4: U+3041-U+3093 (83 code points)."""
    return CodePoints(data.HIRAGANA)


@cached_codepoints("jisx0208.katakana")
def katakana() -> CodePoints:
    """Fullwidth katakana, row 5: U+30A1-U+30F6 (86 code points)."""
    return CodePoints(data.KATAKANA)


@cached_codepoints("jisx0208.latin_letters")
def latin_letters() -> CodePoints:
    """Fullwidth digits and Latin letters, row 3 (62 code points)."""
    return CodePoints(data.LATIN_LETTERS)


@cached_codepoints("jisx0208.greek_letters")
def greek_letters() -> CodePoints:
    """Greek capital and small letters, row 6 (48 code points)."""
    return CodePoints(data.GREEK_LETTERS)


@cached_codepoints("jisx0208.cyrillic_letters")
def cyrillic_letters() -> CodePoints:
    """Cyrillic capital and small letters, row 7 (66 code points)."""
    return CodePoints(data.CYRILLIC_LETTERS)


@cached_codepoints("jisx0208.special_chars")
def special_chars() -> CodePoints:
    """Punctuation and symbols, rows 1-2 (147 code points)."""
    return CodePoints(data.SPECIAL_CHARS)


@cached_codepoints("jisx0208.box_drawing_chars")
def box_drawing_chars() -> CodePoints:
    """Box drawing characters, row 8 (32 code points)."""
    return CodePoints(data.BOX_DRAWING_CHARS)


@cached_codepoints("jisx0208.all")
def all_chars() -> CodePoints:
    """Every JIS X 0208 non-kanji character (524 code points)."""
    return CodePoints(data.ALL_JISX0208)


__all__ = [
    "all_chars",
    "box_drawing_chars",
    "cyrillic_letters",
    "greek_letters",
    "hiragana",
    "katakana",
    "latin_letters",
    "special_chars",
]
