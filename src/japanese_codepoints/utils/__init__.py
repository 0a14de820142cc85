"""Utility modules for japanese_codepoints.

Provides:
- text: format_codepoint, display_char for error messages
- logger: get_logger for logging
"""

from japanese_codepoints.utils.logger import get_logger
from japanese_codepoints.utils.text import (
    MAX_CODE_POINT,
    REPLACEMENT_CHARACTER,
    display_char,
    format_codepoint,
    is_scalar_value,
)

__all__ = [
    "MAX_CODE_POINT",
    "REPLACEMENT_CHARACTER",
    "display_char",
    "format_codepoint",
    "get_logger",
    "is_scalar_value",
]
