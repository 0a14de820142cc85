"""Tests for ContextVar-based validation configuration.

Validates thread isolation, context manager behavior, and that the active
config shapes ValidationError messages.
"""

from threading import Thread

import pytest

from japanese_codepoints import (
    CodePoints,
    ValidationConfig,
    ValidationError,
    get_validation_config,
    reset_validation_config,
    set_validation_config,
    validation_config_context,
)
from japanese_codepoints.config import DEFAULT_MESSAGE_TEMPLATE


@pytest.fixture(autouse=True)
def _reset_config():
    reset_validation_config()
    yield
    reset_validation_config()


class TestValidationConfigDataclass:
    """Test ValidationConfig frozen dataclass behavior."""

    def test_default_values(self) -> None:
        """Default config uses the standard template and U+FFFD."""
        config = ValidationConfig()
        assert config.message_template == DEFAULT_MESSAGE_TEMPLATE
        assert config.replacement_char == "�"

    def test_immutability(self) -> None:
        """Config is frozen and cannot be modified."""
        config = ValidationConfig()
        with pytest.raises(AttributeError):
            config.replacement_char = "?"  # type: ignore[misc]

    def test_replacement_must_be_one_char(self) -> None:
        with pytest.raises(ValueError):
            ValidationConfig(replacement_char="")
        with pytest.raises(ValueError):
            ValidationConfig(replacement_char="??")

    def test_format_message(self) -> None:
        config = ValidationConfig(message_template="{codepoint}/{code_point}/{position}/{char}")
        assert config.format_message(0x41, 3) == "U+0041/65/3/A"

    def test_format_message_non_scalar(self) -> None:
        config = ValidationConfig(message_template="[{char}]", replacement_char="?")
        assert config.format_message(0xD800, 0) == "[?]"


class TestFromDict:
    """ValidationConfig.from_dict() filters unknown keys."""

    def test_known_keys(self) -> None:
        config = ValidationConfig.from_dict({"message_template": "bad {position}"})
        assert config.message_template == "bad {position}"
        assert config.replacement_char == "�"

    def test_unknown_keys_ignored(self) -> None:
        config = ValidationConfig.from_dict({"replacement_char": "?", "colour": "red"})
        assert config == ValidationConfig(replacement_char="?")

    def test_empty_dict(self) -> None:
        assert ValidationConfig.from_dict({}) == ValidationConfig()


class TestContextVarFunctions:
    """Test get/set/reset functions."""

    def test_get_default(self) -> None:
        assert get_validation_config() == ValidationConfig()

    def test_set_and_get(self) -> None:
        custom = ValidationConfig(replacement_char="?")
        set_validation_config(custom)
        assert get_validation_config() is custom

    def test_reset(self) -> None:
        set_validation_config(ValidationConfig(replacement_char="?"))
        reset_validation_config()
        assert get_validation_config() == ValidationConfig()


class TestContextManager:
    """Test validation_config_context."""

    def test_temporary_override(self) -> None:
        custom = ValidationConfig(replacement_char="?")
        with validation_config_context(custom):
            assert get_validation_config() is custom
        assert get_validation_config() == ValidationConfig()

    def test_restores_on_exception(self) -> None:
        custom = ValidationConfig(replacement_char="?")
        with pytest.raises(RuntimeError), validation_config_context(custom):
            raise RuntimeError("boom")
        assert get_validation_config() == ValidationConfig()

    def test_nesting(self) -> None:
        outer = ValidationConfig(replacement_char="o")
        inner = ValidationConfig(replacement_char="i")
        with validation_config_context(outer):
            with validation_config_context(inner):
                assert get_validation_config() is inner
            assert get_validation_config() is outer


class TestConfigAffectsMessages:
    """The active config is used when a ValidationError is raised."""

    def test_custom_template(self) -> None:
        config = ValidationConfig(message_template="{codepoint} not allowed (index {position})")
        with validation_config_context(config), pytest.raises(ValidationError) as exc_info:
            CodePoints.ascii_printable_cached().validate("ab\n")
        assert str(exc_info.value) == "U+000A not allowed (index 2)"

    def test_default_template_outside_context(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            CodePoints.ascii_printable_cached().validate("ab\n")
        assert str(exc_info.value) == "invalid character '\n' (U+000A) at position 2"


class TestThreadIsolation:
    """Config set in one thread is invisible to others."""

    def test_threads_have_independent_config(self) -> None:
        seen: dict[str, str] = {}

        def worker(name: str, replacement: str) -> None:
            set_validation_config(ValidationConfig(replacement_char=replacement))
            seen[name] = get_validation_config().replacement_char

        threads = [Thread(target=worker, args=(f"t{i}", str(i))) for i in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert seen == {f"t{i}": str(i) for i in range(8)}
        assert get_validation_config() == ValidationConfig()
