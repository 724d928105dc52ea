"""Unit tests for utility functions"""

import pytest

from polystem.utils import ascii_lower


class TestAsciiLower:
    """Test ASCII-only case folding"""

    def test_ascii_letters(self):
        assert ascii_lower("PoNiEs") == "ponies"

    def test_already_lowercase(self):
        assert ascii_lower("ponies") == "ponies"

    def test_non_ascii_untouched(self):
        """Only A-Z are folded"""
        assert ascii_lower("ÉCOLE") == "École"

    def test_length_preserved(self):
        """str.lower() may change length ("İ"), ascii_lower never does"""
        word = "İSTANBUL"
        assert len(ascii_lower(word)) == len(word)

    def test_digits_and_punctuation(self):
        assert ascii_lower("BM25-Index") == "bm25-index"

    @pytest.mark.parametrize("text", ["", " ", "123"])
    def test_no_letters(self, text):
        assert ascii_lower(text) == text
