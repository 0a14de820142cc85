"""Validation helpers built on CodePoints.

- validate_all_in_any: validate text against several sets at once
- validate_codepoints: CodePoints.validate with an optional message override
- validate_hiragana, validate_katakana, validate_japanese_kana,
  validate_japanese_mixed, validate_jisx0201_katakana,
  validate_jisx0201_latin: checks against the shared well-known sets

All helpers return None on success and raise ValidationError on failure.

Example:
    >>> from japanese_codepoints import CodePoints, ValidationError
    >>> from japanese_codepoints.validation import validate_all_in_any
    >>> hiragana = CodePoints([0x3042, 0x3044])
    >>> katakana = CodePoints([0x30A2])
    >>> validate_all_in_any("あア", [hiragana, katakana])
    >>> try:
    ...     validate_all_in_any("あx", [hiragana, katakana])
    ... except ValidationError as err:
    ...     err.position
    1
"""

from __future__ import annotations

from collections.abc import Iterable

from japanese_codepoints import jisx0201, jisx0208
from japanese_codepoints.codepoints import CodePoints
from japanese_codepoints.errors import ValidationError


def validate_all_in_any(text: str, sets: Iterable[CodePoints]) -> None:
    """Validate that every character of text is in at least one set.

    Use this for text that legitimately mixes scripts, such as hiragana with
    ASCII punctuation.

    Empty text is always valid, even with no sets. Non-empty text with no
    sets fails at position 0.

    Args:
        text: String to validate
        sets: Candidate sets; a character may come from any of them

    Raises:
        ValidationError: For the first character covered by none of the sets
    """
    members = tuple(cp.codepoints for cp in sets)
    for position, char in enumerate(text):
        code_point = ord(char)
        if not any(code_point in m for m in members):
            raise ValidationError(code_point, position)


def validate_codepoints(value: str, codepoints: CodePoints, message: str | None = None) -> None:
    """Validate value against codepoints.

    Args:
        value: String to validate
        codepoints: Allowed characters
        message: Replaces the default message; code_point and position
            are kept

    Raises:
        ValidationError: For the first character not in codepoints
    """
    try:
        codepoints.validate(value)
    except ValidationError as err:
        if message is None:
            raise
        raise ValidationError.with_message(err.code_point, err.position, message) from None


def validate_hiragana(value: str) -> None:
    """Validate that value is JIS X 0208 hiragana only."""
    jisx0208.hiragana().validate(value)


def validate_katakana(value: str) -> None:
    """Validate that value is JIS X 0208 (fullwidth) katakana only."""
    jisx0208.katakana().validate(value)


def validate_japanese_kana(value: str) -> None:
    """Validate that each character is hiragana or katakana; mixing is allowed."""
    validate_all_in_any(value, (jisx0208.hiragana(), jisx0208.katakana()))


def validate_japanese_mixed(value: str) -> None:
    """Validate that each character is hiragana, katakana or ASCII printable."""
    validate_all_in_any(
        value,
        (jisx0208.hiragana(), jisx0208.katakana(), CodePoints.ascii_printable_cached()),
    )


def validate_jisx0201_katakana(value: str) -> None:
    """Validate that value is JIS X 0201 halfwidth katakana only."""
    jisx0201.katakana().validate(value)


def validate_jisx0201_latin(value: str) -> None:
    """Validate that value is JIS X 0201 Roman (Latin) characters only."""
    jisx0201.latin_letters().validate(value)


__all__ = [
    "validate_all_in_any",
    "validate_codepoints",
    "validate_hiragana",
    "validate_japanese_kana",
    "validate_japanese_mixed",
    "validate_jisx0201_katakana",
    "validate_jisx0201_latin",
    "validate_katakana",
]
