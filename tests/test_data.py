"""Tests for the code point tables and the named sets built from them."""

import pytest

from japanese_codepoints import CodePoints, jisx0201, jisx0208, jisx0208kanji, jisx0213kanji
from japanese_codepoints.data import ascii as ascii_data
from japanese_codepoints.data import jisx0201 as jisx0201_data
from japanese_codepoints.data import jisx0208 as jisx0208_data
from japanese_codepoints.data import jisx0208kanji as jisx0208kanji_data
from japanese_codepoints.data import jisx0213kanji as jisx0213kanji_data

LEVEL1_SAMPLE = "亜唖娃阿哀愛挨姶逢葵茜穐悪握渥旭葦芦鯵梓圧斡扱宛姐虻飴絢綾鮎或粟袷安庵按暗案闇鞍杏"
LEVEL2_SAMPLE = "弌丐丕个丱丶丼丿乂乖乘亂亅豫亊舒弍于亞亟亠亢亰亳亶从仍仄仆仂仗"


class TestTableShapes:
    """Sizes and uniqueness of every table."""

    @pytest.mark.parametrize(
        ("table", "size"),
        [
            (ascii_data.CONTROL_CHARS, 33),
            (ascii_data.PRINTABLE_CHARS, 95),
            (ascii_data.CRLF_CHARS, 2),
            (jisx0201_data.LATIN_LETTERS, 95),
            (jisx0201_data.KATAKANA, 63),
            (jisx0208_data.SPECIAL_CHARS, 147),
            (jisx0208_data.LATIN_LETTERS, 62),
            (jisx0208_data.HIRAGANA, 83),
            (jisx0208_data.KATAKANA, 86),
            (jisx0208_data.GREEK_LETTERS, 48),
            (jisx0208_data.CYRILLIC_LETTERS, 66),
            (jisx0208_data.BOX_DRAWING_CHARS, 32),
            (jisx0208kanji_data.LEVEL1_KANJI, 2965),
            (jisx0208kanji_data.LEVEL2_KANJI, 3390),
            (jisx0213kanji_data.LEVEL3_KANJI, 1259),
            (jisx0213kanji_data.LEVEL4_KANJI, 2436),
        ],
    )
    def test_size_and_unique(self, table: tuple[int, ...], size: int) -> None:
        assert len(table) == size
        assert len(set(table)) == size

    def test_merged_tables(self) -> None:
        assert len(set(ascii_data.ALL_ASCII)) == 128
        assert len(jisx0201_data.ALL_JISX0201) == 158
        assert len(set(jisx0208_data.ALL_JISX0208)) == 524
        assert len(set(jisx0208kanji_data.JISX0208_KANJI)) == 6355
        assert len(set(jisx0213kanji_data.JISX0213_KANJI)) == 10050

    def test_ascii_ranges(self) -> None:
        assert set(ascii_data.CONTROL_CHARS) == set(range(0x20)) | {0x7F}
        assert set(ascii_data.PRINTABLE_CHARS) == set(range(0x20, 0x7F))


class TestJisX0201:
    """JIS X 0201 sets."""

    def test_katakana(self) -> None:
        cp = jisx0201.katakana()
        assert cp.contains("｡｢｣､･ｦｧｨｩｪｫｬｭｮｯｰｱｲｳｴｵｶｷｸｹｺｻｼｽｾｿﾀﾁﾂﾃﾄﾅﾆﾇﾈﾉﾊﾋﾌﾍﾎﾏﾐﾑﾒﾓﾔﾕﾖﾗﾘﾙﾚﾛﾜﾝﾞﾟ")
        assert not cp.contains("アイウエオ")
        assert cp.first_excluded("ﾊﾝｶｸA") == 0x41

    def test_latin_letters(self) -> None:
        cp = jisx0201.latin_letters()
        assert cp.contains("ABCDEFGHIJKLMNOPQRSTUVWXYZ")
        assert cp.contains("Hello World")
        assert cp.contains("¥‾")
        assert not cp.contains("Hello\\World")
        assert cp.first_excluded("abc\\") == 0x5C
        assert cp.first_excluded("~") == 0x7E

    def test_all(self) -> None:
        assert jisx0201.all_chars() == jisx0201.latin_letters() | jisx0201.katakana()


class TestJisX0208:
    """JIS X 0208 non-kanji sets."""

    def test_hiragana(self) -> None:
        cp = jisx0208.hiragana()
        assert cp.contains("あいうえお")
        assert cp.contains("がぎぐげご")
        assert cp.contains("ぁゎゐゑをん")
        assert not cp.contains("アイウエオ")
        assert not cp.contains("漢字")
        assert cp.first_excluded("ひらがなA") == 0x41

    def test_katakana(self) -> None:
        cp = jisx0208.katakana()
        assert cp.contains("アイウエオ")
        assert cp.contains("ガギグゲゴヴヵヶ")
        assert not cp.contains("あいうえお")
        assert cp.first_excluded("カタカナa") == 0x61

    def test_latin_letters(self) -> None:
        cp = jisx0208.latin_letters()
        assert cp.contains("ＡＢＣＤＥＦＧ")
        assert cp.contains("ａｂｃｄｅｆｇ")
        assert cp.contains("０１２３４５６７８９")
        assert not cp.contains("ABCDEFG")
        assert cp.first_excluded("ＺＥＮＫＡＫＵ1") == 0x31

    def test_greek_letters(self) -> None:
        cp = jisx0208.greek_letters()
        assert cp.contains("ΑΒΓΔΕΖΗΘΙΚΛΜΝΞΟΠΡΣΤΥΦΧΨΩ")
        assert cp.contains("αβγδεζηθικλμνξοπρστυφχψω")
        assert not cp.contains("ABC")

    def test_cyrillic_letters(self) -> None:
        cp = jisx0208.cyrillic_letters()
        assert cp.contains("АБВГДЕЁЖЗИЙКЛМНОПРСТУФХЦЧШЩЪЫЬЭЮЯ")
        assert cp.contains("абвгдеёжзийклмнопрстуфхцчшщъыьэюя")
        assert not cp.contains("ABC")

    def test_box_drawing_chars(self) -> None:
        cp = jisx0208.box_drawing_chars()
        assert cp.contains("─│┌┐┘└├┬┤┴┼")
        assert not cp.contains("-|")

    def test_special_chars(self) -> None:
        cp = jisx0208.special_chars()
        assert cp.contains("、。，．・：；？！")
        assert cp.contains("　")  # ideographic space
        assert not cp.contains("abc")

    def test_all_is_union_of_blocks(self) -> None:
        union = CodePoints()
        for accessor in (
            jisx0208.hiragana,
            jisx0208.katakana,
            jisx0208.latin_letters,
            jisx0208.greek_letters,
            jisx0208.cyrillic_letters,
            jisx0208.special_chars,
            jisx0208.box_drawing_chars,
        ):
            union = union | accessor()
        assert jisx0208.all_chars() == union
        assert len(union) == 524


class TestKanji:
    """JIS X 0208 and JIS X 0213 kanji sets."""

    def test_jisx0208_kanji(self) -> None:
        cp = jisx0208kanji.kanji()
        assert len(cp) == 6355
        assert cp.contains(LEVEL1_SAMPLE)
        assert cp.contains(LEVEL2_SAMPLE)
        assert not cp.contains("a")
        assert not cp.contains("あ")
        assert not cp.contains("ア")

    def test_jisx0208_levels(self) -> None:
        assert jisx0208kanji.level1().contains(LEVEL1_SAMPLE)
        assert not jisx0208kanji.level1().contains("弌")
        assert jisx0208kanji.level2().contains(LEVEL2_SAMPLE)
        assert jisx0208kanji.level1() | jisx0208kanji.level2() == jisx0208kanji.kanji()

    def test_jisx0213_kanji(self) -> None:
        cp = jisx0213kanji.kanji()
        assert len(cp) == 10050
        assert cp.contains(LEVEL1_SAMPLE)
        assert cp.contains(LEVEL2_SAMPLE)
        assert cp.contains("㐂㠯㒵")
        assert cp.contains("俱剝頰")
        assert cp.contains("堯槇遙瑤凜熙")
        assert not cp.contains("a")
        assert not cp.contains("あ")

    def test_jisx0213_is_superset_of_jisx0208(self) -> None:
        assert jisx0213kanji.kanji().is_superset_of(jisx0208kanji.kanji())
        added = jisx0213kanji.kanji() - jisx0208kanji.kanji()
        assert added == jisx0213kanji.level3() | jisx0213kanji.level4()

    def test_supplementary_plane_kanji(self) -> None:
        # 𠀋 (U+2000B) and 𩸽 (U+29E3D) are JIS X 0213 kanji outside the BMP
        cp = jisx0213kanji.kanji()
        assert cp.contains("𠀋𩸽")
        assert cp.first_excluded_with_position("𠀋𩸽あ") == (0x3042, 2)
        assert not jisx0208kanji.kanji().contains("𠀋")

    def test_levels_disjoint(self) -> None:
        assert (jisx0213kanji.level3() & jisx0213kanji.level4()).is_empty()
        assert (jisx0213kanji.level3() & jisx0208kanji.kanji()).is_empty()


class TestNamedSetCaching:
    """Accessors return shared singletons; __wrapped__ builds fresh ones."""

    @pytest.mark.parametrize(
        "accessor",
        [
            jisx0201.katakana,
            jisx0201.latin_letters,
            jisx0208.hiragana,
            jisx0208.all_chars,
            jisx0208kanji.kanji,
            jisx0213kanji.kanji,
        ],
    )
    def test_identity(self, accessor) -> None:
        assert accessor() is accessor()

    def test_wrapped_factory_builds_fresh_instance(self) -> None:
        fresh = jisx0208.hiragana.__wrapped__()
        assert fresh == jisx0208.hiragana()
        assert fresh is not jisx0208.hiragana()

    def test_accessor_keeps_docstring(self) -> None:
        assert jisx0208.hiragana.__name__ == "hiragana"
        assert "row 4" in jisx0208.hiragana.__doc__
