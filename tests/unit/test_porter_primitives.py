"""
Unit tests for the Porter reducer's buffer and classification primitives.
"""

import pytest

from polystem.stemmers.porter import PorterReducer

pytestmark = pytest.mark.unit


def reducer_at(word: str, j: int) -> PorterReducer:
    """Reducer for word with the cursor placed at j"""
    p = PorterReducer(word)
    p.j = j
    return p


class TestConstruction:
    """Test buffer setup"""

    def test_initial_state(self):
        p = PorterReducer("Caresses")
        assert p.buf == list("caresses")
        assert p.k == 8
        assert p.j == 0

    def test_empty_word(self):
        p = PorterReducer("")
        assert p.k == 0
        assert p.result() == ""


class TestIsConsonant:
    """Test consonant/vowel classification including the 'y' rule"""

    def test_y_at_start_is_consonant(self):
        assert PorterReducer("y").is_consonant(0) is True

    def test_y_after_vowel_is_consonant(self):
        assert PorterReducer("ey").is_consonant(1) is True

    def test_y_after_consonant_is_vowel(self):
        assert PorterReducer("ly").is_consonant(1) is False

    def test_vowels(self):
        p = PorterReducer("aeiou")
        assert all(not p.is_consonant(i) for i in range(len(p.buf)))

    def test_consonants(self):
        p = PorterReducer("bcdfghjklmnpqrstvwxz")
        assert all(p.is_consonant(i) for i in range(len(p.buf)))

    def test_run_of_y_alternates(self):
        """Each 'y' is the opposite of the letter before it"""
        p = PorterReducer("yyyy")
        assert [p.is_consonant(i) for i in range(4)] == [True, False, True, False]

    def test_y_run_after_vowel(self):
        p = PorterReducer("ayy")
        assert [p.is_consonant(i) for i in range(3)] == [False, True, False]

    def test_long_y_run_does_not_recurse(self):
        p = PorterReducer("y" * 5000)
        assert p.is_consonant(4999) is False


class TestHasVowel:
    """Test vowel detection in [0, j)"""

    def test_vowel_in_prefix(self):
        assert reducer_at("follow", 2).has_vowel() is True

    def test_no_vowel(self):
        assert reducer_at("fllw", 4).has_vowel() is False

    def test_empty_prefix(self):
        assert reducer_at("apple", 0).has_vowel() is False

    def test_y_counts_as_vowel_after_consonant(self):
        assert reducer_at("by", 2).has_vowel() is True

    def test_only_prefix_is_inspected(self):
        assert reducer_at("sky", 2).has_vowel() is False


class TestCount:
    """Test the measure m of [0, j)"""

    @pytest.mark.parametrize("word,j,expected", [
        ("be", 0, 0),
        ("b", 1, 0),
        ("bc", 2, 0),
        ("beb", 3, 1),
        ("bebebe", 6, 2),
        ("bebebebe", 8, 3),
    ])
    def test_synthetic_words(self, word, j, expected):
        assert reducer_at(word, j).count() == expected

    @pytest.mark.parametrize("word,expected", [
        ("tr", 0), ("ee", 0), ("tree", 0), ("y", 0), ("by", 0),
        ("trouble", 1), ("oats", 1), ("trees", 1), ("ivy", 1),
        ("troubles", 2), ("private", 2), ("oaten", 2),
    ])
    def test_classic_examples(self, word, expected):
        """Examples from Porter's paper, measured over the whole word"""
        assert reducer_at(word, len(word)).count() == expected

    def test_trailing_consonants_not_counted_without_cursor(self):
        """Measure only looks at [0, j), not at [0, k)"""
        assert reducer_at("troubles", 3).count() == 0


class TestDoubleConsonant:
    """Test double consonant detection"""

    def test_index_zero(self):
        assert PorterReducer("be").double_consonant(0) is False

    def test_double(self):
        assert PorterReducer("bbee").double_consonant(1) is True

    def test_consonant_then_vowel(self):
        assert PorterReducer("bbee").double_consonant(2) is False

    def test_double_vowel(self):
        assert PorterReducer("bbee").double_consonant(3) is False

    def test_out_of_range(self):
        assert PorterReducer("bbee").double_consonant(4) is False
        assert PorterReducer("bbee").double_consonant(-1) is False

    def test_respects_effective_end(self):
        p = PorterReducer("hopp")
        p.k = 3
        assert p.double_consonant(3) is False


class TestCvc:
    """Test consonant-vowel-consonant detection"""

    @pytest.mark.parametrize("index,expected", [(0, False), (1, False), (2, True), (3, False)])
    def test_bab(self, index, expected):
        assert PorterReducer("bab").cvc(index) is expected

    @pytest.mark.parametrize("word,index", [("cave", 2), ("lov", 2), ("hop", 2), ("crim", 3)])
    def test_cvc_words(self, word, index):
        assert PorterReducer(word).cvc(index) is True

    @pytest.mark.parametrize("word,index", [("snow", 3), ("box", 2), ("tray", 3)])
    def test_wxy_endings_excluded(self, word, index):
        assert PorterReducer(word).cvc(index) is False

    def test_negative_index(self):
        assert PorterReducer("bab").cvc(-1) is False


class TestEndsWith:
    """Test suffix matching and cursor placement"""

    def test_match_moves_cursor(self):
        p = PorterReducer("session")
        assert p.ends_with("ion") is True
        assert p.j == 4

    def test_no_match_keeps_cursor(self):
        p = PorterReducer("session")
        p.j = 2
        assert p.ends_with("ions") is False
        assert p.j == 2

    def test_whole_word(self):
        p = PorterReducer("s")
        assert p.ends_with("s") is True
        assert p.j == 0

    def test_suffix_longer_than_word(self):
        p = PorterReducer("ab")
        assert p.ends_with("cab") is False

    def test_uses_effective_end(self):
        p = PorterReducer("cats")
        p.k = 3
        assert p.ends_with("s") is False
        assert p.ends_with("at") is True
        assert p.j == 1


class TestReplace:
    """Test suffix rewriting"""

    def test_same_length(self):
        p = PorterReducer("session")
        p.j = 4
        p.replace("bar")
        assert p.buf == list("sessbar")
        assert p.k == 7

    def test_shorter(self):
        p = PorterReducer("session")
        p.j = 4
        p.replace("")
        assert p.result() == "sess"

    def test_longer_grows_buffer(self):
        p = PorterReducer("ab")
        p.j = 2
        p.replace("cde")
        assert p.result() == "abcde"
        assert len(p.buf) == 5

    def test_conditional_replace_applies_when_measure_positive(self):
        p = PorterReducer("bebing")
        assert p.ends_with("ing")
        p.r("x")
        assert p.result() == "bebx"

    def test_conditional_replace_skipped_when_measure_zero(self):
        p = PorterReducer("bing")
        assert p.ends_with("ing")
        p.r("x")
        assert p.result() == "bing"
