"""End-to-end usage of the public API."""

import pytest

from japanese_codepoints import CodePoints, ValidationError, contains_all_in_any

HIRAGANA = CodePoints([0x3042, 0x3044, 0x3046])  # あいう
KATAKANA = CodePoints([0x30A2, 0x30A4, 0x30A6])  # アイウ


class TestScenarios:
    """Typical flows a caller goes through."""

    def test_membership_and_first_excluded(self) -> None:
        s = CodePoints([0x3042, 0x3044])
        assert s.contains("あい")
        assert not s.contains("あいう")
        assert s.first_excluded("あいう") == 0x3046
        assert s.first_excluded_with_position("あいう") == (0x3046, 2)

    def test_all_excluded(self) -> None:
        s = CodePoints([0x3042, 0x3044])
        assert s.all_excluded("あいうえ") == [0x3046, 0x3048]

    def test_ascii_printable(self) -> None:
        s = CodePoints.ascii_printable()
        assert s.contains("Hello World!")
        assert not s.contains("Hello\n")
        with pytest.raises(ValidationError) as exc_info:
            s.validate("Hello\0World")
        assert exc_info.value.code_point == 0
        assert exc_info.value.position == 5

    def test_set_algebra(self) -> None:
        a = CodePoints([0x3042, 0x3044])
        b = CodePoints([0x3044, 0x3046])

        union = a.union(b)
        assert len(union) == 3
        assert union.contains("あいう")

        inter = a.intersection(b)
        assert len(inter) == 1
        assert inter.contains("い")
        assert not inter.contains("あ")

        diff = a.difference(b)
        assert diff.contains("あ")
        assert not diff.contains("い")

        sym = a.symmetric_difference(b)
        assert sym.contains("あう")
        assert not sym.contains("い")

    def test_multi_set(self) -> None:
        assert contains_all_in_any("あア", [HIRAGANA, KATAKANA])
        assert not contains_all_in_any("xyz", [HIRAGANA, KATAKANA])
        assert not contains_all_in_any("any", [])

    def test_supplementary_plane(self) -> None:
        s = CodePoints([0x2000B, 0x3042, 0x3044])
        assert s.contains("𠀋あい")
        assert s.all_excluded("𠀋あいう") == [0x3046]


class TestFormValidation:
    """Checking user input against a combination of standard sets."""

    def test_name_field(self) -> None:
        from japanese_codepoints import jisx0208, jisx0208kanji

        allowed = jisx0208.hiragana() | jisx0208.katakana() | jisx0208kanji.kanji()
        assert allowed.contains("やまだタロウ山田")
        assert allowed.all_excluded("山田 太郎!") == [0x20, 0x21]

    def test_report_all_problems(self) -> None:
        from japanese_codepoints import get_codepoints

        allowed = get_codepoints("jisx0201.katakana") | get_codepoints("ascii.printable")
        bad = [f"{cp:04X}" for cp in allowed.all_excluded("ﾃｽﾄ テスト\t")]
        assert bad == ["30C6", "30B9", "30C8", "0009"]
