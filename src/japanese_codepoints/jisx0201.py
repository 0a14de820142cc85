"""JIS X 0201 character sets.

- latin_letters: JIS-Roman (ASCII printable with ¥ and ‾)
- katakana: halfwidth katakana and punctuation (U+FF61-U+FF9F)
- all_chars: both halves

Example:
    >>> from japanese_codepoints import jisx0201
    >>> jisx0201.katakana().contains("ｱｲｳｴｵ")
    True
    >>> jisx0201.latin_letters().contains("Hello¥")
    True
"""

from __future__ import annotations

from japanese_codepoints.cache import cached_codepoints
from japanese_codepoints.codepoints import CodePoints
from japanese_codepoints.data import jisx0201 as data


@cached_codepoints("jisx0201.latin_letters")
def latin_letters() -> CodePoints:
    """JIS-Roman: ASCII printable with U+00A5 for 0x5C and U+203E for 0x7E."""
    return CodePoints(data.LATIN_LETTERS)


@cached_codepoints("jisx0201.katakana")
def katakana() -> CodePoints:
    """Halfwidth katakana, U+FF61-U+FF9F (63 code points)."""
    return CodePoints(data.KATAKANA)


@cached_codepoints("jisx0201.all")
def all_chars() -> CodePoints:
    """Every JIS X 0201 character (158 code points)."""
    return CodePoints(data.ALL_JISX0201)


__all__ = [
    "all_chars",
    "katakana",
    "latin_letters",
]
