"""Lookup of well-known character sets by name.

Names are ``<standard>.<category>``, e.g. ``"ascii.printable"`` or
``"jisx0208.hiragana"``. Every name resolves to the same shared instance the
module accessors return.

Thread Safety:
The name table is built at import and never modified. Safe to share.

Example:
    >>> from japanese_codepoints.registry import get_codepoints
    >>> get_codepoints("jisx0208.hiragana").contains("ひらがな")
    True
    >>> get_codepoints("jisx0208.hiragana") is get_codepoints("jisx0208.hiragana")
    True
"""

from __future__ import annotations

from collections.abc import Callable
from types import MappingProxyType

from japanese_codepoints import jisx0201, jisx0208, jisx0208kanji, jisx0213kanji
from japanese_codepoints.codepoints import CodePoints
from japanese_codepoints.errors import UnknownCharacterSetError

_ACCESSORS: MappingProxyType[str, Callable[[], CodePoints]] = MappingProxyType(
    {
        "ascii.control": CodePoints.ascii_control_cached,
        "ascii.printable": CodePoints.ascii_printable_cached,
        "ascii.crlf": CodePoints.crlf_cached,
        "ascii.all": CodePoints.ascii_all_cached,
        "jisx0201.latin_letters": jisx0201.latin_letters,
        "jisx0201.katakana": jisx0201.katakana,
        "jisx0201.all": jisx0201.all_chars,
        "jisx0208.hiragana": jisx0208.hiragana,
        "jisx0208.katakana": jisx0208.katakana,
        "jisx0208.latin_letters": jisx0208.latin_letters,
        "jisx0208.greek_letters": jisx0208.greek_letters,
        "jisx0208.cyrillic_letters": jisx0208.cyrillic_letters,
        "jisx0208.special_chars": jisx0208.special_chars,
        "jisx0208.box_drawing_chars": jisx0208.box_drawing_chars,
        "jisx0208.all": jisx0208.all_chars,
        "jisx0208kanji.all": jisx0208kanji.kanji,
        "jisx0208kanji.level1": jisx0208kanji.level1,
        "jisx0208kanji.level2": jisx0208kanji.level2,
        "jisx0213kanji.all": jisx0213kanji.kanji,
        "jisx0213kanji.level3": jisx0213kanji.level3,
        "jisx0213kanji.level4": jisx0213kanji.level4,
    }
)


def get_codepoints(name: str) -> CodePoints:
    """Get the shared set registered under name.

    Args:
        name: Dotted set name (see available_sets())

    Returns:
        The cached CodePoints instance

    Raises:
        UnknownCharacterSetError: If name is not registered
    """
    try:
        accessor = _ACCESSORS[name]
    except KeyError:
        raise UnknownCharacterSetError(name, _ACCESSORS) from None
    return accessor()


def has_set(name: str) -> bool:
    """Check if a set is registered under name."""
    return name in _ACCESSORS


def available_sets() -> tuple[str, ...]:
    """All registered set names, sorted."""
    return tuple(sorted(_ACCESSORS))


__all__ = [
    "available_sets",
    "get_codepoints",
    "has_set",
]
