"""Code point formatting helpers.

Example:
    >>> from japanese_codepoints.utils.text import format_codepoint
    >>> format_codepoint(0x3042)
    'U+3042'
"""

from __future__ import annotations

MAX_CODE_POINT = 0x10FFFF
REPLACEMENT_CHARACTER = "\ufffd"

_SURROGATE_START = 0xD800
_SURROGATE_END = 0xDFFF


def format_codepoint(code_point: int) -> str:
    """Format a code point in ``U+XXXX`` notation.

    At least four upper-case hex digits, more for supplementary planes.

    Examples:
        >>> format_codepoint(0)
        'U+0000'
        >>> format_codepoint(0x2000B)
        'U+2000B'
    """
    return f"U+{code_point:04X}"


def is_scalar_value(code_point: int) -> bool:
    """Check if code_point is a Unicode scalar value (not a surrogate, in range)."""
    if not 0 <= code_point <= MAX_CODE_POINT:
        return False
    return not _SURROGATE_START <= code_point <= _SURROGATE_END


def display_char(code_point: int, replacement: str = REPLACEMENT_CHARACTER) -> str:
    """Return the character for code_point, or replacement if it has none.

    Args:
        code_point: Code point to render
        replacement: Character used for surrogates and out-of-range values

    Returns:
        A one-character string safe to embed in messages

    Examples:
        >>> display_char(0x3042)
        'あ'
        >>> display_char(0xD800) == REPLACEMENT_CHARACTER
        True
    """
    if is_scalar_value(code_point):
        return chr(code_point)
    return replacement
