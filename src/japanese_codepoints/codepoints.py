"""Code point sets: membership, exclusion diagnostics and set algebra.

CodePoints wraps a frozenset of Unicode code points. Strings are scanned one
Python character at a time, so a character outside the Basic Multilingual
Plane is always a single unit for membership and position counting.

Thread Safety:
    CodePoints is immutable after construction and safe to share across
    threads. The ``*_cached()`` constructors return process-wide singletons
    built once under a lock (see :mod:`japanese_codepoints.cache`).

Example:
    >>> from japanese_codepoints import CodePoints
    >>> cp = CodePoints([0x3042, 0x3044])  # あ, い
    >>> cp.contains("あい")
    True
    >>> cp.first_excluded_with_position("あいう")
    (12358, 2)
    >>> cp.all_excluded("あいうえう")
    [12358, 12360]
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from japanese_codepoints.cache import LazyCodePoints
from japanese_codepoints.data import ascii as ascii_data
from japanese_codepoints.errors import ValidationError
from japanese_codepoints.utils.text import MAX_CODE_POINT, format_codepoint

# Code points shown by repr() before eliding
_REPR_LIMIT = 8


def _coerce(values: Iterable[int]) -> frozenset[int]:
    codepoints = frozenset(values)
    for value in codepoints:
        if isinstance(value, bool) or not isinstance(value, int):
            msg = f"code points must be int, got {type(value).__name__}: {value!r}"
            raise TypeError(msg)
        if not 0 <= value <= MAX_CODE_POINT:
            msg = f"code point out of range 0..0x10FFFF: {value:#x}"
            raise ValueError(msg)
    return codepoints


class CodePoints:
    """An immutable set of Unicode code points.

    Membership is exact: no ranges, no case folding, no normalization.
    The empty set is valid and accepts only the empty string.

    Two instances are equal when they hold the same code points, regardless
    of construction order or duplicates. The hash is computed over the sorted
    code points, so equal sets always hash equal.

    Set algebra (union, intersection, difference, symmetric_difference and
    the ``| & - ^`` operators) returns a new CodePoints; operands are never
    modified.

    Example:
        >>> a = CodePoints([0x3042, 0x3044])
        >>> b = CodePoints.from_string("いう")
        >>> len(a | b), len(a & b)
        (3, 1)
        >>> (a - b).contains("あ")
        True

    """

    __slots__ = ("_codepoints", "_hash")

    def __init__(self, codepoints: Iterable[int] = ()) -> None:
        """Create a set from an iterable of code points.

        Args:
            codepoints: Code points as ints; duplicates are dropped

        Raises:
            TypeError: If a value is not an int
            ValueError: If a value is outside 0..0x10FFFF
        """
        self._codepoints: frozenset[int] = _coerce(codepoints)
        self._hash: int | None = None

    @classmethod
    def _wrap(cls, codepoints: frozenset[int]) -> CodePoints:
        # Skips validation; only for frozensets derived from existing instances.
        instance = cls.__new__(cls)
        instance._codepoints = codepoints
        instance._hash = None
        return instance

    # =========================================================================
    # Construction
    # =========================================================================

    @classmethod
    def from_codepoints(cls, codepoints: Iterable[int]) -> CodePoints:
        """Create a set from code points. Same as ``CodePoints(codepoints)``."""
        return cls(codepoints)

    @classmethod
    def from_string(cls, text: str) -> CodePoints:
        """Create a set holding every distinct character of text.

        Example:
            >>> sorted(CodePoints.from_string("あいあ"))
            [12354, 12356]
        """
        return cls._wrap(frozenset(map(ord, text)))

    # =========================================================================
    # Membership
    # =========================================================================

    @property
    def codepoints(self) -> frozenset[int]:
        """The underlying code points."""
        return self._codepoints

    def contains(self, text: str) -> bool:
        """Check if every character of text is in the set.

        The empty string is vacuously contained.

        Args:
            text: String to check

        Returns:
            True if text consists only of member characters
        """
        members = self._codepoints
        for char in text:
            if ord(char) not in members:
                return False
        return True

    def contains_char(self, char: str | int) -> bool:
        """Check if a single character (or int code point) is in the set.

        Raises:
            ValueError: If char is a string whose length is not 1
        """
        if isinstance(char, str):
            if len(char) != 1:
                msg = f"expected a single character, got {char!r}"
                raise ValueError(msg)
            return ord(char) in self._codepoints
        return char in self._codepoints

    def __contains__(self, item: object) -> bool:
        """Support ``"あ" in cp`` and ``0x3042 in cp``."""
        if isinstance(item, (str, int)) and not isinstance(item, bool):
            return self.contains_char(item)
        return False

    # =========================================================================
    # Exclusion diagnostics
    # =========================================================================

    def first_excluded_with_position(self, text: str) -> tuple[int, int] | None:
        """Find the first character of text that is not in the set.

        Args:
            text: String to scan left to right

        Returns:
            (code_point, position) with position a zero-based character
            index, or None if every character is a member
        """
        members = self._codepoints
        for position, char in enumerate(text):
            code_point = ord(char)
            if code_point not in members:
                return code_point, position
        return None

    def first_excluded(self, text: str) -> int | None:
        """Return the first code point of text not in the set, or None."""
        found = self.first_excluded_with_position(text)
        if found is None:
            return None
        return found[0]

    def all_excluded(self, text: str) -> list[int]:
        """Return every distinct excluded code point in first-occurrence order.

        Example:
            >>> CodePoints.from_string("a").all_excluded("bcbab")
            [98, 99]
        """
        members = self._codepoints
        return list(dict.fromkeys(cp for cp in map(ord, text) if cp not in members))

    # =========================================================================
    # Validation
    # =========================================================================

    def validate(self, text: str) -> None:
        """Validate that text contains only characters from the set.

        Args:
            text: String to validate

        Raises:
            ValidationError: For the first character not in the set, with its
                code point and character position
        """
        found = self.first_excluded_with_position(text)
        if found is not None:
            code_point, position = found
            raise ValidationError(code_point, position)

    # =========================================================================
    # Set algebra
    # =========================================================================

    def union(self, other: CodePoints) -> CodePoints:
        """Code points in either set."""
        return self._wrap(self._codepoints | other._codepoints)

    def intersection(self, other: CodePoints) -> CodePoints:
        """Code points in both sets."""
        return self._wrap(self._codepoints & other._codepoints)

    def difference(self, other: CodePoints) -> CodePoints:
        """Code points in this set but not in other."""
        return self._wrap(self._codepoints - other._codepoints)

    def symmetric_difference(self, other: CodePoints) -> CodePoints:
        """Code points in exactly one of the two sets."""
        return self._wrap(self._codepoints ^ other._codepoints)

    def is_subset_of(self, other: CodePoints) -> bool:
        """True if every code point of this set is in other (inclusive)."""
        return self._codepoints <= other._codepoints

    def is_superset_of(self, other: CodePoints) -> bool:
        """True if every code point of other is in this set (inclusive)."""
        return self._codepoints >= other._codepoints

    def __or__(self, other: object) -> CodePoints:
        if not isinstance(other, CodePoints):
            return NotImplemented
        return self.union(other)

    def __and__(self, other: object) -> CodePoints:
        if not isinstance(other, CodePoints):
            return NotImplemented
        return self.intersection(other)

    def __sub__(self, other: object) -> CodePoints:
        if not isinstance(other, CodePoints):
            return NotImplemented
        return self.difference(other)

    def __xor__(self, other: object) -> CodePoints:
        if not isinstance(other, CodePoints):
            return NotImplemented
        return self.symmetric_difference(other)

    def __le__(self, other: object) -> bool:
        if not isinstance(other, CodePoints):
            return NotImplemented
        return self.is_subset_of(other)

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, CodePoints):
            return NotImplemented
        return self.is_superset_of(other)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, CodePoints):
            return NotImplemented
        return self._codepoints < other._codepoints

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, CodePoints):
            return NotImplemented
        return self._codepoints > other._codepoints

    # =========================================================================
    # Size and introspection
    # =========================================================================

    def __len__(self) -> int:
        return len(self._codepoints)

    def is_empty(self) -> bool:
        return not self._codepoints

    def __iter__(self) -> Iterator[int]:
        """Iterate over the code points in no particular order."""
        return iter(self._codepoints)

    def to_list(self) -> list[int]:
        """Return the code points sorted ascending (the canonical form)."""
        return sorted(self._codepoints)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CodePoints):
            return NotImplemented
        return self._codepoints == other._codepoints

    def __hash__(self) -> int:
        if self._hash is None:
            self._hash = hash(tuple(sorted(self._codepoints)))
        return self._hash

    def __str__(self) -> str:
        return f"CodePoints({len(self._codepoints)} items)"

    def __repr__(self) -> str:
        ordered = self.to_list()
        shown = ", ".join(format_codepoint(cp) for cp in ordered[:_REPR_LIMIT])
        if len(ordered) > _REPR_LIMIT:
            shown += f", ... ({len(ordered)} total)"
        return f"CodePoints([{shown}])"

    # =========================================================================
    # Well-known ASCII sets
    # =========================================================================

    @classmethod
    def ascii_control(cls) -> CodePoints:
        """ASCII control characters: 0x00-0x1F and DEL (33 code points)."""
        return cls(ascii_data.CONTROL_CHARS)

    @classmethod
    def ascii_printable(cls) -> CodePoints:
        """ASCII printable characters: 0x20-0x7E (95 code points)."""
        return cls(ascii_data.PRINTABLE_CHARS)

    @classmethod
    def crlf(cls) -> CodePoints:
        """Carriage return and line feed."""
        return cls(ascii_data.CRLF_CHARS)

    @classmethod
    def ascii_all(cls) -> CodePoints:
        """All 128 ASCII characters (control and printable)."""
        return cls(ascii_data.ALL_ASCII)

    @staticmethod
    def ascii_control_cached() -> CodePoints:
        """Shared instance of :meth:`ascii_control`."""
        return _ASCII_CONTROL.get()

    @staticmethod
    def ascii_printable_cached() -> CodePoints:
        """Shared instance of :meth:`ascii_printable`."""
        return _ASCII_PRINTABLE.get()

    @staticmethod
    def crlf_cached() -> CodePoints:
        """Shared instance of :meth:`crlf`."""
        return _CRLF.get()

    @staticmethod
    def ascii_all_cached() -> CodePoints:
        """Shared instance of :meth:`ascii_all`."""
        return _ASCII_ALL.get()


# CodePointSet is the descriptive name; CodePoints is the historical one.
CodePointSet = CodePoints

_ASCII_CONTROL = LazyCodePoints("ascii.control", CodePoints.ascii_control)
_ASCII_PRINTABLE = LazyCodePoints("ascii.printable", CodePoints.ascii_printable)
_CRLF = LazyCodePoints("ascii.crlf", CodePoints.crlf)
_ASCII_ALL = LazyCodePoints("ascii.all", CodePoints.ascii_all)


def contains_all_in_any(text: str, codepoints_list: Iterable[CodePoints]) -> bool:
    """Check if every character of text is in at least one of the sets.

    An empty list of sets never matches, not even the empty string.

    Args:
        text: String to check
        codepoints_list: Candidate sets; a character may come from any of them

    Returns:
        True if each character is covered by some set

    Example:
        >>> hiragana = CodePoints([0x3042, 0x3044, 0x3046])
        >>> katakana = CodePoints([0x30A2, 0x30A4, 0x30A6])
        >>> contains_all_in_any("あア", [hiragana, katakana])
        True
        >>> contains_all_in_any("", [])
        False
    """
    members = tuple(cp.codepoints for cp in codepoints_list)
    if not members:
        return False
    for char in text:
        code_point = ord(char)
        if not any(code_point in m for m in members):
            return False
    return True


__all__ = [
    "CodePointSet",
    "CodePoints",
    "contains_all_in_any",
]
