"""ContextVar-based validation configuration for japanese_codepoints.

Controls how validation failures are rendered. Config is read when a
ValidationError is created, so it applies to every validator in the context.

Thread Safety:
    ContextVars are thread-local. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    from japanese_codepoints.config import ValidationConfig, validation_config_context

    config = ValidationConfig(message_template="{codepoint} is not allowed (index {position})")
    with validation_config_context(config):
        CodePoints.ascii_printable().validate("abc\\n")  # uses the template above

"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass

from japanese_codepoints.utils.text import REPLACEMENT_CHARACTER, display_char, format_codepoint

DEFAULT_MESSAGE_TEMPLATE = "invalid character '{char}' ({codepoint}) at position {position}"


@dataclass(frozen=True, slots=True)
class ValidationConfig:
    """Immutable validation configuration.

    Attributes:
        message_template: str.format template for ValidationError messages.
            Available fields: ``char``, ``codepoint`` (``U+XXXX``),
            ``code_point`` (int) and ``position``.
        replacement_char: Shown in place of code points that are not Unicode
            scalar values (surrogates, values above U+10FFFF)

    """

    message_template: str = DEFAULT_MESSAGE_TEMPLATE
    replacement_char: str = REPLACEMENT_CHARACTER

    def __post_init__(self) -> None:
        if len(self.replacement_char) != 1:
            msg = f"replacement_char must be a single character, got {self.replacement_char!r}"
            raise ValueError(msg)

    def format_message(self, code_point: int, position: int) -> str:
        """Render the failure message for code_point at position.

        Example:
            >>> ValidationConfig().format_message(0x3046, 2)
            "invalid character 'う' (U+3046) at position 2"
        """
        return self.message_template.format(
            char=display_char(code_point, self.replacement_char),
            codepoint=format_codepoint(code_point),
            code_point=code_point,
            position=position,
        )

    @classmethod
    def from_dict(cls, config_dict: dict) -> ValidationConfig:
        """Create ValidationConfig from dictionary.

        Only includes keys that are valid ValidationConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> config = ValidationConfig.from_dict({
            ...     "replacement_char": "?",
            ...     "unknown_key": "ignored",
            ... })
            >>> config.replacement_char
            '?'

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ValidationConfig = ValidationConfig()

_validation_config: ContextVar[ValidationConfig] = ContextVar(
    "validation_config",
    default=_DEFAULT_CONFIG,
)


def get_validation_config() -> ValidationConfig:
    """Get current validation configuration (thread-local)."""
    return _validation_config.get()


def set_validation_config(config: ValidationConfig) -> None:
    """Set validation configuration for current context.

    Thread Safety:
        Only affects the current thread's context. Other threads are unaffected.

    """
    _validation_config.set(config)


def reset_validation_config() -> None:
    """Reset to the module-level default configuration."""
    _validation_config.set(_DEFAULT_CONFIG)


@contextmanager
def validation_config_context(config: ValidationConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with validation_config_context(ValidationConfig(replacement_char="?")):
        ...     get_validation_config().replacement_char
        '?'
        >>> get_validation_config().replacement_char == "\\ufffd"
        True

    """
    previous = _validation_config.get()
    _validation_config.set(config)
    try:
        yield
    finally:
        _validation_config.set(previous)


__all__ = [
    "DEFAULT_MESSAGE_TEMPLATE",
    "ValidationConfig",
    "get_validation_config",
    "reset_validation_config",
    "set_validation_config",
    "validation_config_context",
]
