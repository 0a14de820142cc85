"""Benchmark fixtures and configuration."""

from __future__ import annotations

import pytest

from japanese_codepoints.data.jisx0208kanji import LEVEL1_KANJI


@pytest.fixture
def kana_document() -> str:
    """A ~100K character run of hiragana and katakana."""
    line = "こんにちはコンニチハ" * 10
    return "".join(line for _ in range(1000))


@pytest.fixture
def kanji_document() -> str:
    """Every JIS X 0208 level 1 kanji, repeated."""
    return "".join(chr(cp) for cp in LEVEL1_KANJI) * 10


@pytest.fixture
def mixed_documents() -> list[str]:
    """Short form-field style inputs mixing scripts."""
    return [
        "山田太郎",
        "やまだ たろう",
        "ヤマダ タロウ",
        "Taro Yamada",
        "東京都千代田区千代田1-1",
        "ﾔﾏﾀﾞ ﾀﾛｳ",
        "𠀋𩸽",
        "email@example.com",
    ] * 100
