"""Validate form fields with custom messages and a per-request message template."""

from japanese_codepoints import (
    CodePoints,
    ValidationConfig,
    ValidationError,
    jisx0201,
    jisx0208,
    validate_all_in_any,
    validate_codepoints,
    validation_config_context,
)

FIELDS = {
    "furigana": ("ヤマダ タロウ", [jisx0208.katakana(), CodePoints.from_string(" ")]),
    "halfwidth": ("ﾔﾏﾀﾞ ﾀﾛｳ", [jisx0201.katakana(), CodePoints.from_string(" ")]),
    "romaji": ("Yamada Tarō", [CodePoints.ascii_printable_cached()]),
}

config = ValidationConfig(message_template="{codepoint} '{char}' is not allowed (column {position})")

with validation_config_context(config):
    for field, (value, sets) in FIELDS.items():
        try:
            validate_all_in_any(value, sets)
        except ValidationError as e:
            print(f"{field}: {e}")
        else:
            print(f"{field}: ok")

try:
    validate_codepoints("ｶﾀｶﾅ", jisx0208.katakana(), "Please use fullwidth katakana")
except ValidationError as e:
    print(e, e.codepoint_label, e.position)
