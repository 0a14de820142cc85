"""Exception classes for japanese_codepoints.

Provides standardized exceptions for error handling throughout the package.
"""

from __future__ import annotations

from collections.abc import Iterable
from difflib import get_close_matches

from japanese_codepoints.config import get_validation_config
from japanese_codepoints.utils.text import display_char, format_codepoint


class JapaneseCodepointsError(Exception):
    """Base exception for all japanese_codepoints errors.

    Subclass this for specific error categories.
    """

    pass


class ValidationError(JapaneseCodepointsError):
    """A string contains a character outside the allowed set.

    Pinpoints the offending character, its position and a human-readable
    message. ``position`` counts characters (code points), never bytes, so a
    character outside the Basic Multilingual Plane occupies one position.

    Attributes:
        code_point: The code point that is not allowed
        position: Zero-based character index in the validated string
        message: Human-readable description

    Example:
        >>> from japanese_codepoints import CodePoints
        >>> try:
        ...     CodePoints.ascii_printable().validate("hello\\0world")
        ... except ValidationError as err:
        ...     print(err.code_point, err.position, err.codepoint_label)
        0 5 U+0000
    """

    def __init__(self, code_point: int, position: int, message: str | None = None) -> None:
        """Initialize validation error.

        Args:
            code_point: The rejected code point
            position: Zero-based character index of the rejected character
            message: Explicit message; when None the message is rendered from
                the active ValidationConfig
        """
        if message is None:
            message = get_validation_config().format_message(code_point, position)
        self.code_point = code_point
        self.position = position
        self.message = message
        super().__init__(message)

    @classmethod
    def with_message(cls, code_point: int, position: int, message: str) -> ValidationError:
        """Create an error with an explicit message, overriding the default formatting."""
        return cls(code_point, position, message)

    @property
    def char(self) -> str:
        """The rejected character (U+FFFD if the code point is not a scalar value)."""
        return display_char(self.code_point, get_validation_config().replacement_char)

    @property
    def codepoint_label(self) -> str:
        """The rejected code point in ``U+XXXX`` notation."""
        return format_codepoint(self.code_point)

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(code_point={self.code_point:#06x}, "
            f"position={self.position}, message={self.message!r})"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ValidationError):
            return NotImplemented
        return (self.code_point, self.position, self.message) == (
            other.code_point,
            other.position,
            other.message,
        )

    def __hash__(self) -> int:
        return hash((self.code_point, self.position, self.message))

    def __reduce__(self) -> tuple[type[ValidationError], tuple[int, int, str]]:
        return (type(self), (self.code_point, self.position, self.message))


class UnknownCharacterSetError(JapaneseCodepointsError, KeyError):
    """Lookup of a character set name that is not registered.

    Also a KeyError, so mapping-style callers can catch it as one.
    """

    def __init__(self, name: str, available: Iterable[str] = ()) -> None:
        """Initialize unknown set error.

        Args:
            name: The requested set name
            available: Registered names, used to suggest close matches
        """
        self.name = name
        self.suggestions = tuple(get_close_matches(name, list(available), n=3))
        message = f"Unknown character set '{name}'"
        if self.suggestions:
            message += f" (did you mean: {', '.join(self.suggestions)}?)"
        self.message = message
        super().__init__(message)

    def __str__(self) -> str:
        return self.message

    def __reduce__(self) -> tuple[type[UnknownCharacterSetError], tuple[str, tuple[str, ...]]]:
        return (type(self), (self.name, self.suggestions))


__all__ = [
    "JapaneseCodepointsError",
    "UnknownCharacterSetError",
    "ValidationError",
]
