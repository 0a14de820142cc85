"""Tests for CodePoints construction, membership, exclusion and set algebra."""

import pytest

from japanese_codepoints import CodePoints, CodePointSet, ValidationError

# あ い う え
A, I, U, E = 0x3042, 0x3044, 0x3046, 0x3048
# 𠀋 (outside the Basic Multilingual Plane)
SUPPLEMENTARY = 0x2000B


@pytest.fixture
def ai() -> CodePoints:
    return CodePoints([A, I])


class TestConstruction:
    """CodePoints() / from_codepoints() / from_string()."""

    def test_from_list(self) -> None:
        cp = CodePoints([A, I])
        assert len(cp) == 2
        assert A in cp
        assert I in cp

    def test_duplicates_are_dropped(self) -> None:
        cp = CodePoints([A, A, I, A])
        assert len(cp) == 2

    def test_input_order_irrelevant(self) -> None:
        assert CodePoints([A, I, U]) == CodePoints([U, A, I])

    def test_from_codepoints_matches_constructor(self) -> None:
        assert CodePoints.from_codepoints([A, I]) == CodePoints([A, I])

    def test_from_generator(self) -> None:
        cp = CodePoints(cp for cp in range(0x41, 0x44))
        assert cp.contains("ABC")

    def test_from_string(self) -> None:
        cp = CodePoints.from_string("あいあい")
        assert len(cp) == 2
        assert cp == CodePoints([A, I])

    def test_from_string_supplementary_is_one_code_point(self) -> None:
        cp = CodePoints.from_string("𠀋")
        assert len(cp) == 1
        assert cp.to_list() == [SUPPLEMENTARY]

    def test_empty(self) -> None:
        cp = CodePoints()
        assert len(cp) == 0
        assert cp.is_empty()
        assert CodePoints.from_string("").is_empty()

    def test_rejects_non_int(self) -> None:
        with pytest.raises(TypeError):
            CodePoints(["a"])  # type: ignore[list-item]

    def test_rejects_bool(self) -> None:
        with pytest.raises(TypeError):
            CodePoints([True])

    @pytest.mark.parametrize("value", [-1, 0x110000])
    def test_rejects_out_of_range(self, value: int) -> None:
        with pytest.raises(ValueError):
            CodePoints([value])

    def test_alias(self) -> None:
        assert CodePointSet is CodePoints


class TestMembership:
    """contains() / contains_char() / __contains__."""

    def test_contains(self, ai: CodePoints) -> None:
        assert ai.contains("あ")
        assert ai.contains("あい")
        assert ai.contains("いあいあ")
        assert not ai.contains("あいう")
        assert not ai.contains("う")

    def test_empty_string_is_contained(self, ai: CodePoints) -> None:
        assert ai.contains("")
        assert CodePoints().contains("")

    def test_empty_set_rejects_everything_else(self) -> None:
        assert not CodePoints().contains("a")

    def test_contains_char_str_and_int(self, ai: CodePoints) -> None:
        assert ai.contains_char("あ")
        assert ai.contains_char(A)
        assert not ai.contains_char("う")
        assert not ai.contains_char(U)

    def test_contains_char_rejects_multi_char_string(self, ai: CodePoints) -> None:
        with pytest.raises(ValueError):
            ai.contains_char("あい")
        with pytest.raises(ValueError):
            ai.contains_char("")

    def test_in_operator(self, ai: CodePoints) -> None:
        assert "あ" in ai
        assert A in ai
        assert "う" not in ai
        assert None not in ai
        assert 1.5 not in ai

    def test_no_case_folding(self) -> None:
        cp = CodePoints.from_string("abc")
        assert not cp.contains("ABC")

    def test_supplementary_membership(self) -> None:
        cp = CodePoints([SUPPLEMENTARY, A, I])
        assert cp.contains("𠀋あい")
        assert cp.contains_char("𠀋")


class TestExclusion:
    """first_excluded(), first_excluded_with_position(), all_excluded()."""

    def test_first_excluded(self, ai: CodePoints) -> None:
        assert ai.first_excluded("あいう") == U
        assert ai.first_excluded("あい") is None
        assert ai.first_excluded("") is None

    def test_first_excluded_with_position(self, ai: CodePoints) -> None:
        assert ai.first_excluded_with_position("あいう") == (U, 2)
        assert ai.first_excluded_with_position("うあ") == (U, 0)
        assert ai.first_excluded_with_position("あい") is None

    def test_position_counts_characters_not_bytes(self, ai: CodePoints) -> None:
        # 𠀋 is 4 bytes in UTF-8 and 2 units in UTF-16, but one character
        cp = CodePoints([SUPPLEMENTARY, A, I])
        assert cp.first_excluded_with_position("𠀋あいう") == (U, 3)
        assert ai.first_excluded_with_position("あ𠀋") == (SUPPLEMENTARY, 1)

    def test_all_excluded_first_occurrence_order(self, ai: CodePoints) -> None:
        assert ai.all_excluded("あいうえ") == [U, E]
        assert ai.all_excluded("えあう") == [E, U]

    def test_all_excluded_no_duplicates(self, ai: CodePoints) -> None:
        assert ai.all_excluded("うえうえう") == [U, E]

    def test_all_excluded_empty(self, ai: CodePoints) -> None:
        assert ai.all_excluded("") == []
        assert ai.all_excluded("あいあ") == []

    def test_all_excluded_supplementary_member(self) -> None:
        cp = CodePoints([SUPPLEMENTARY, A, I])
        assert cp.all_excluded("𠀋あいう") == [U]


class TestValidate:
    """validate() raises ValidationError for the first offending character."""

    def test_valid(self, ai: CodePoints) -> None:
        assert ai.validate("あい") is None
        assert ai.validate("") is None

    def test_invalid(self, ai: CodePoints) -> None:
        with pytest.raises(ValidationError) as exc_info:
            ai.validate("あいう")
        err = exc_info.value
        assert err.code_point == U
        assert err.position == 2
        assert str(err) == "invalid character 'う' (U+3046) at position 2"

    def test_ascii_printable_null(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            CodePoints.ascii_printable().validate("Hello\0World")
        assert exc_info.value.code_point == 0
        assert exc_info.value.position == 5
        assert "U+0000" in str(exc_info.value)

    def test_supplementary_message_has_five_hex_digits(self, ai: CodePoints) -> None:
        with pytest.raises(ValidationError, match=r"U\+2000B"):
            ai.validate("𠀋")


class TestSetAlgebra:
    """union / intersection / difference / symmetric_difference and operators."""

    @pytest.fixture
    def b(self) -> CodePoints:
        return CodePoints([I, U])

    def test_union(self, ai: CodePoints, b: CodePoints) -> None:
        union = ai.union(b)
        assert len(union) == 3
        assert union.contains("あいう")

    def test_intersection(self, ai: CodePoints, b: CodePoints) -> None:
        inter = ai.intersection(b)
        assert len(inter) == 1
        assert inter.contains("い")
        assert not inter.contains("あ")
        assert not inter.contains("う")

    def test_difference(self, ai: CodePoints, b: CodePoints) -> None:
        diff = ai.difference(b)
        assert diff.contains("あ")
        assert not diff.contains("い")
        assert len(diff) == 1

    def test_symmetric_difference(self, ai: CodePoints, b: CodePoints) -> None:
        sym = ai.symmetric_difference(b)
        assert sym.contains("あ")
        assert sym.contains("う")
        assert not sym.contains("い")

    def test_operators(self, ai: CodePoints, b: CodePoints) -> None:
        assert ai | b == ai.union(b)
        assert ai & b == ai.intersection(b)
        assert ai - b == ai.difference(b)
        assert ai ^ b == ai.symmetric_difference(b)

    def test_operators_reject_other_types(self, ai: CodePoints) -> None:
        with pytest.raises(TypeError):
            ai | {A}  # type: ignore[operator]

    def test_operands_unchanged(self, ai: CodePoints, b: CodePoints) -> None:
        ai.union(b)
        ai.difference(b)
        assert ai == CodePoints([A, I])
        assert b == CodePoints([I, U])

    def test_result_is_new_instance(self, ai: CodePoints) -> None:
        assert ai.union(ai) is not ai

    def test_subset_superset(self, ai: CodePoints) -> None:
        small = CodePoints([A])
        assert small.is_subset_of(ai)
        assert ai.is_superset_of(small)
        assert not ai.is_subset_of(small)
        assert small <= ai
        assert ai >= small
        assert small < ai
        assert ai > small

    def test_subset_is_inclusive(self, ai: CodePoints) -> None:
        assert ai.is_subset_of(ai)
        assert ai.is_superset_of(ai)
        assert not ai < ai

    def test_empty_set_is_subset_of_everything(self, ai: CodePoints) -> None:
        assert CodePoints().is_subset_of(ai)
        assert CodePoints().is_subset_of(CodePoints())


class TestEqualityAndHashing:
    """__eq__ / __hash__ are order-independent."""

    def test_equal_regardless_of_order_and_duplicates(self) -> None:
        a = CodePoints([A, I, U])
        b = CodePoints([U, U, I, A])
        assert a == b
        assert hash(a) == hash(b)

    def test_equal_to_from_string(self) -> None:
        assert CodePoints.from_string("いあ") == CodePoints([A, I])
        assert hash(CodePoints.from_string("いあ")) == hash(CodePoints([A, I]))

    def test_not_equal(self, ai: CodePoints) -> None:
        assert ai != CodePoints([A])
        assert ai != {A, I}

    def test_usable_as_dict_key(self, ai: CodePoints) -> None:
        table = {ai: "kana"}
        assert table[CodePoints([I, A])] == "kana"


class TestIntrospection:
    """len(), iteration, to_list(), str() and repr()."""

    def test_iter(self, ai: CodePoints) -> None:
        assert set(ai) == {A, I}

    def test_to_list_sorted(self) -> None:
        assert CodePoints([U, A, I]).to_list() == [A, I, U]

    def test_codepoints_property(self, ai: CodePoints) -> None:
        assert ai.codepoints == frozenset({A, I})

    def test_str(self, ai: CodePoints) -> None:
        assert str(ai) == "CodePoints(2 items)"

    def test_repr_short(self, ai: CodePoints) -> None:
        assert repr(ai) == "CodePoints([U+3042, U+3044])"

    def test_repr_elides_long_sets(self) -> None:
        text = repr(CodePoints.ascii_printable())
        assert text.startswith("CodePoints([U+0020, U+0021")
        assert "(95 total)" in text


class TestAsciiSets:
    """Well-known ASCII sets and their cached singletons."""

    def test_control(self) -> None:
        cp = CodePoints.ascii_control()
        assert len(cp) == 33
        assert cp.contains("\n\r\t")
        assert cp.contains("\x00\x7f")
        assert not cp.contains("a\n\r\t")
        assert cp.first_excluded("\n\rA\t") == 0x41

    def test_printable(self) -> None:
        cp = CodePoints.ascii_printable()
        assert len(cp) == 95
        assert cp.contains("Hello World!")
        assert cp.contains("Hello World 123!@#")
        assert not cp.contains("Hello\n")
        assert cp.first_excluded("a-b-c-あ") == A

    def test_crlf(self) -> None:
        cp = CodePoints.crlf()
        assert cp == CodePoints([0x0A, 0x0D])
        assert cp.contains("\r\n")
        assert cp.first_excluded("\r\n\t") == 0x09

    def test_all(self) -> None:
        cp = CodePoints.ascii_all()
        assert len(cp) == 128
        assert cp == CodePoints.ascii_control() | CodePoints.ascii_printable()
        assert cp.contains("".join(chr(i) for i in range(128)))
        assert not cp.contains("\x80")

    @pytest.mark.parametrize(
        "cached",
        [
            CodePoints.ascii_control_cached,
            CodePoints.ascii_printable_cached,
            CodePoints.crlf_cached,
            CodePoints.ascii_all_cached,
        ],
    )
    def test_cached_identity(self, cached) -> None:
        assert cached() is cached()

    def test_cached_equals_fresh(self) -> None:
        assert CodePoints.ascii_control_cached() == CodePoints.ascii_control()
        assert CodePoints.ascii_printable_cached() == CodePoints.ascii_printable()
        assert CodePoints.crlf_cached() == CodePoints.crlf()
        assert CodePoints.ascii_all_cached() == CodePoints.ascii_all()

    def test_fresh_instances_are_distinct(self) -> None:
        assert CodePoints.ascii_printable() is not CodePoints.ascii_printable()
