"""Check a string against a character set and report what went wrong."""

from japanese_codepoints import ValidationError, jisx0208

hiragana = jisx0208.hiragana()

print(hiragana.contains("こんにちは"))
print(hiragana.first_excluded_with_position("こんにちはWorld"))

try:
    hiragana.validate("ひらがなカタカナ")
except ValidationError as e:
    print(e)
