"""Code point tables for the supported character standards.

Every table is a flat ``tuple[int, ...]`` of Unicode code points. Tables are
plain data; wrap one in :class:`japanese_codepoints.CodePoints` to query it.

Modules:
- ascii: control, printable and CR/LF characters
- jisx0201: JIS-Roman and halfwidth katakana
- jisx0208: hiragana, katakana, Latin, Greek, Cyrillic, symbols, box drawing
- jisx0208kanji: JIS X 0208 level 1 and 2 kanji
- jisx0213kanji: JIS X 0213 level 3 and 4 kanji, and levels 1-4 combined
"""
