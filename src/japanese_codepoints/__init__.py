"""
japanese_codepoints: Character-set validation for Japanese text standards

Checks whether a string consists only of characters from a set of Unicode
code points, and reports the first offending character and its position when
it does not. Ships the ASCII, JIS X 0201, JIS X 0208 and JIS X 0213 kanji
character sets, with zero runtime dependencies.

Quick Start:
    >>> from japanese_codepoints import CodePoints
    >>> allowed = CodePoints([0x3041, 0x3042])  # ぁ, あ
    >>> allowed.contains("あ")
    True
    >>> allowed.contains("う")
    False

Well-known sets:
    >>> from japanese_codepoints import jisx0208, get_codepoints
    >>> jisx0208.hiragana().contains("こんにちは")
    True
    >>> get_codepoints("ascii.printable") is CodePoints.ascii_printable_cached()
    True

Multi-set validation:
    >>> from japanese_codepoints import contains_all_in_any
    >>> contains_all_in_any("こんにちはHello", [jisx0208.hiragana(), CodePoints.ascii_printable_cached()])
    True
"""

from japanese_codepoints import jisx0201, jisx0208, jisx0208kanji, jisx0213kanji
from japanese_codepoints.cache import LazyCodePoints, cached_codepoints
from japanese_codepoints.codepoints import CodePoints, CodePointSet, contains_all_in_any
from japanese_codepoints.config import (
    ValidationConfig,
    get_validation_config,
    reset_validation_config,
    set_validation_config,
    validation_config_context,
)
from japanese_codepoints.errors import (
    JapaneseCodepointsError,
    UnknownCharacterSetError,
    ValidationError,
)
from japanese_codepoints.registry import available_sets, get_codepoints, has_set
from japanese_codepoints.validation import (
    validate_all_in_any,
    validate_codepoints,
    validate_hiragana,
    validate_japanese_kana,
    validate_japanese_mixed,
    validate_jisx0201_katakana,
    validate_jisx0201_latin,
    validate_katakana,
)

__version__ = "0.1.0"

__all__ = [
    # Core
    "CodePointSet",
    "CodePoints",
    "contains_all_in_any",
    # Errors
    "JapaneseCodepointsError",
    "UnknownCharacterSetError",
    "ValidationError",
    # Configuration
    "ValidationConfig",
    "get_validation_config",
    "reset_validation_config",
    "set_validation_config",
    "validation_config_context",
    # Caching
    "LazyCodePoints",
    "cached_codepoints",
    # Named sets
    "available_sets",
    "get_codepoints",
    "has_set",
    "jisx0201",
    "jisx0208",
    "jisx0208kanji",
    "jisx0213kanji",
    # Validation helpers
    "validate_all_in_any",
    "validate_codepoints",
    "validate_hiragana",
    "validate_japanese_kana",
    "validate_japanese_mixed",
    "validate_jisx0201_katakana",
    "validate_jisx0201_latin",
    "validate_katakana",
    "__version__",
]
