import random
from io import StringIO

import pytest

from onpdiff.diff import Diff, diff, edit_distance
from onpdiff.ses import SesElem, SesType
from tests.helpers import apply_ses, count, is_subsequence, render, source_of

PAIRS = [
    ("", ""),
    ("a", ""),
    ("", "a"),
    ("abc", "abc"),
    ("abc", "abd"),
    ("ABCABBA", "CBABAC"),
    ("CBABAC", "ABCABBA"),
    ("kitten", "sitting"),
    ("abcdef", "ghijkl"),
    ("aaaa", "aa"),
    ("acbdeacbed", "acebdabbabed"),
    ("日本語のテキスト", "日本のテキスト"),
]


def random_pairs(seed: int, n: int):
    rng = random.Random(seed)
    for _ in range(n):
        a = "".join(rng.choice("abc") for _ in range(rng.randint(0, 12)))
        b = "".join(rng.choice("abc") for _ in range(rng.randint(0, 12)))
        yield a, b


ALL_PAIRS = PAIRS + list(random_pairs(20261019, 60))


class TestScenarios:
    def test_the_classic_example(self):
        d = diff("ABCABBA", "CBABAC")
        assert d.edit_distance() == 5
        assert d.lcs() == "CABA"
        assert render(d.ses()) == ["-A", "-B", " C", "+B", " A", " B", "-B", " A", "+C"]

    def test_identical_strings_are_all_common(self):
        d = diff("abc", "abc")
        assert d.edit_distance() == 0
        assert d.ses() == [
            SesElem("a", SesType.COMMON, 0, 0),
            SesElem("b", SesType.COMMON, 1, 1),
            SesElem("c", SesType.COMMON, 2, 2),
        ]

    def test_two_empty_strings(self):
        d = diff("", "")
        assert d.edit_distance() == 0
        assert d.ses() == []
        assert d.lcs() == ""

    def test_a_replaced_character_is_deleted_then_added(self):
        d = diff("abc", "abd")
        assert d.edit_distance() == 2
        assert d.lcs() == "ab"
        assert render(d.ses()) == [" a", " b", "-c", "+d"]

    def test_inserting_into_a_shorter_sequence(self):
        d = diff("ac", "abc")
        assert render(d.ses()) == [" a", "+b", " c"]
        assert d.ses()[1] == SesElem("b", SesType.ADD, None, 1)

    def test_deleting_from_a_longer_sequence(self):
        d = diff("abc", "ac")
        assert render(d.ses()) == [" a", "-b", " c"]
        assert d.ses()[1] == SesElem("b", SesType.DELETE, 1, None)


class TestDegenerateCases:
    def test_against_an_empty_b_everything_is_deleted(self):
        d = diff("hello", "")
        assert d.edit_distance() == 5
        assert all(e.ty is SesType.DELETE for e in d.ses())
        assert [e.a_index for e in d.ses()] == [0, 1, 2, 3, 4]

    def test_from_an_empty_a_everything_is_added(self):
        d = diff("", "hello")
        assert d.edit_distance() == 5
        assert all(e.ty is SesType.ADD for e in d.ses())
        assert [e.b_index for e in d.ses()] == [0, 1, 2, 3, 4]


class TestProperties:
    @pytest.mark.parametrize("a, b", ALL_PAIRS)
    def test_symmetry(self, a, b):
        assert edit_distance(a, b) == edit_distance(b, a)

    @pytest.mark.parametrize("a", [a for a, _ in ALL_PAIRS])
    def test_identity(self, a):
        d = diff(a, a)
        assert d.edit_distance() == 0
        assert d.lcs() == a
        assert all(e.ty is SesType.COMMON for e in d.ses())
        assert "".join(e.symbol for e in d.ses()) == a

    @pytest.mark.parametrize("a, b", ALL_PAIRS)
    def test_conservation(self, a, b):
        d = diff(a, b)
        ses = d.ses()
        adds, deletes = count(ses, SesType.ADD), count(ses, SesType.DELETE)

        assert adds - deletes == len(b) - len(a)
        assert adds + deletes == d.edit_distance()
        assert len(d.lcs()) == (len(a) + len(b) - d.edit_distance()) // 2
        assert count(ses, SesType.COMMON) == len(d.lcs())

    @pytest.mark.parametrize("a, b", ALL_PAIRS)
    def test_the_script_turns_a_into_b(self, a, b):
        ses = diff(a, b).ses()
        assert "".join(apply_ses(ses)) == b
        assert "".join(source_of(ses)) == a

    @pytest.mark.parametrize("a, b", ALL_PAIRS)
    def test_indexes_point_into_the_inputs(self, a, b):
        for e in diff(a, b).ses():
            if e.a_index is not None:
                assert a[e.a_index] == e.symbol
            if e.b_index is not None:
                assert b[e.b_index] == e.symbol

    @pytest.mark.parametrize("a, b", ALL_PAIRS)
    def test_lcs_is_a_common_subsequence(self, a, b):
        lcs = diff(a, b).lcs()
        assert is_subsequence(lcs, a)
        assert is_subsequence(lcs, b)

    @pytest.mark.parametrize("a, b", ALL_PAIRS)
    def test_distance_only_mode_agrees(self, a, b):
        only = Diff(a, b)
        only.only_ed()
        only.compose()

        assert only.edit_distance() == diff(a, b).edit_distance()
        assert only.ses() == []
        assert only.lcs() == ""

    def test_lcs_is_as_long_as_possible(self):
        for a, b in random_pairs(7, 40):
            assert len(diff(a, b).lcs()) == lcs_length(a, b)


def lcs_length(a: str, b: str) -> int:
    row = [0] * (len(b) + 1)
    for x in a:
        prev = 0
        for j, y in enumerate(b, 1):
            cur = row[j]
            row[j] = prev + 1 if x == y else max(row[j], row[j - 1])
            prev = cur
    return row[-1]


class TestSequencesOfLines:
    def test_it_diffs_lists_of_lines(self):
        a = ["alpha", "beta", "gamma"]
        b = ["alpha", "gamma", "delta"]
        d = diff(a, b)

        assert d.edit_distance() == 2
        assert d.lcs() == ["alpha", "gamma"]
        assert apply_ses(d.ses()) == b

    def test_it_diffs_tuples_of_numbers(self):
        d = diff((1, 2, 3, 4), (2, 4, 5))
        assert d.lcs() == [2, 4]
        assert d.edit_distance() == 3


class TestContext:
    def test_accessors_are_empty_before_compose(self):
        d = Diff("abc", "abd")
        assert d.edit_distance() == 0
        assert d.ses() == []
        assert d.lcs() == ""

    def test_compose_returns_the_context(self):
        d = Diff("a", "b")
        assert d.compose() is d

    def test_ses_returns_a_copy(self):
        d = diff("ab", "b")
        d.ses().clear()
        assert len(d.ses()) == 2

    def test_print_ses(self):
        out = StringIO()
        diff("abc", "abd").print_ses(out)
        assert out.getvalue() == "  a\n  b\n- c\n+ d\n"

    def test_print_ses_of_lines(self):
        out = StringIO()
        diff(["one", "two"], ["one", "three"]).print_ses(out)
        assert out.getvalue() == "  one\n- two\n+ three\n"


class TestSesElem:
    def test_operation_values_are_unified_diff_signs(self):
        assert [ty.value for ty in SesType] == ["-", " ", "+"]

    @pytest.mark.parametrize(
        "elem, text",
        [
            (SesElem("x", SesType.DELETE, a_index=0), "-x"),
            (SesElem("x", SesType.ADD, b_index=0), "+x"),
            (SesElem("line", SesType.COMMON, 0, 0), " line"),
            (SesElem(42, SesType.ADD, b_index=3), "+42"),
        ],
    )
    def test_str_prefixes_the_symbol_with_its_sign(self, elem, text):
        assert str(elem) == text
