"""
Tests for language_tokenizer/text/normalizer.py

Tests Unicode cleanup: compatibility forms, apostrophes, case folding,
diacritics, contraction clitics and elisions.
"""

import pytest
from language_tokenizer.lang import Algorithm
from language_tokenizer.text.normalizer import fold_case, normalize, strip_diacritics


# ============================================================================
# Tests for normalize() - language independent steps
# ============================================================================

class TestNormalizeCommon:
    """Test the steps applied to every language."""

    def test_fullwidth_forms(self):
        """Test NFKC folds fullwidth letters and digits."""
        assert normalize("ＺＯＯＭＥＲ ６７") == "zoomer 67"

    def test_ligatures(self):
        """Test NFKC expands ligatures."""
        assert normalize("ﬁnd") == "find"

    def test_full_case_folding(self):
        """Test full Unicode folding (not just lower())."""
        assert normalize("Straße") == "strasse"

    @pytest.mark.parametrize("apostrophe", ['‘', '’', '‛', 'ʼ', '′', '＇'])
    def test_apostrophe_variants_unified(self, apostrophe):
        """Test apostrophe-like characters become "'"."""
        assert normalize(f"rock{apostrophe}n") == "rock'n"

    def test_unknown_characters_pass_through(self):
        """Test that symbols and emoji are left alone."""
        assert normalize("a → b 🙂") == "a → b 🙂"

    def test_empty_string(self):
        assert normalize("") == ""

    def test_none_algorithm_keeps_diacritics(self):
        """Test NONE only folds case."""
        assert normalize("Café") == "café"


# ============================================================================
# Tests for normalize() - English
# ============================================================================

class TestNormalizeEnglish:
    """Test English clitics and diacritics."""

    def test_docstring_example(self):
        assert normalize("That’s Café", Algorithm.ENGLISH) == "that cafe"

    @pytest.mark.parametrize("text,expected", [
        ("that's", "that"),
        ("they're", "they"),
        ("we've", "we"),
        ("you'll", "you"),
        ("she'd", "she"),
        ("i'm", "i"),
    ])
    def test_clitics_dropped(self, text, expected):
        assert normalize(text, Algorithm.ENGLISH) == expected

    def test_unrecognized_marker_kept(self):
        """Test that a marker not followed by a clitic stays in place."""
        assert normalize("don't", Algorithm.ENGLISH) == "don't"
        assert normalize("rock'n'roll", Algorithm.ENGLISH) == "rock'n'roll"

    def test_clitic_needs_word_end(self):
        """Test 's followed by more letters is not a clitic."""
        assert normalize("it'sy", Algorithm.ENGLISH) == "it'sy"

    def test_clitic_before_punctuation(self):
        assert normalize("that's!", Algorithm.ENGLISH) == "that!"


# ============================================================================
# Tests for normalize() - other languages
# ============================================================================

class TestNormalizeLanguages:
    """Test language-specific settings."""

    def test_french_elision(self):
        assert normalize("L'homme d'affaires", Algorithm.FRENCH) == "homme affaires"

    def test_italian_elision(self):
        assert normalize("dell'anno", Algorithm.ITALIAN) == "anno"

    def test_elision_only_at_word_start(self):
        """Test that an elided form inside a word is not removed."""
        assert normalize("aujourd'hui", Algorithm.FRENCH) == "aujourd'hui"

    def test_german_keeps_umlauts(self):
        """Test languages whose rules rely on accented letters keep them."""
        assert normalize("Häuser", Algorithm.GERMAN) == "häuser"

    def test_spanish_keeps_accents(self):
        assert normalize("Rápidamente", Algorithm.SPANISH) == "rápidamente"

    def test_turkish_dotted_capital_i(self):
        assert normalize("İSTANBUL", Algorithm.TURKISH) == "istanbul"

    def test_turkish_dotless_capital_i(self):
        assert normalize("IĞDIR", Algorithm.TURKISH) == "ığdır"

    def test_non_turkish_capital_i(self):
        assert normalize("IĞDIR", Algorithm.ENGLISH) == "igdir"


# ============================================================================
# Tests for helpers
# ============================================================================

class TestHelpers:
    """Test fold_case() and strip_diacritics()."""

    def test_strip_diacritics(self):
        assert strip_diacritics("crème brûlée") == "creme brulee"

    def test_strip_diacritics_keeps_non_latin_marks(self):
        """Test marks outside the Combining Diacritical Marks block survive."""
        assert strip_diacritics("สวัสดี") == "สวัสดี"

    def test_fold_case_default(self):
        assert fold_case("ΣΊΣΥΦΟΣ") == "σίσυφοσ"

    def test_fold_case_turkish(self):
        assert fold_case("Iİ", Algorithm.TURKISH) == "ıi"
