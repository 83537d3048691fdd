"""
Tests for language_tokenizer/text/dispatcher.py

Tests tokenize() across the three pipelines, input validation, the
stopword policy and backend failures.
"""

import pytest
from unittest.mock import MagicMock
from language_tokenizer.core.exceptions import (
    CollaboratorFailure,
    EmptyInput,
    InvalidEncoding,
    TokenizerError,
    UnsupportedLanguage,
)
from language_tokenizer.lang import Algorithm
from language_tokenizer.matching import find_match
from language_tokenizer.models import MatchMode, MatchSpan
from language_tokenizer.text.dispatcher import decode_input, tokenize

EXPECTED = ('that', 'someon', 'who', 'can', 'rizz', 'just', 'like', 'a', 'skibidi',
            'zoomer', 'slang', 'rock', '67')


# ============================================================================
# Tests for tokenize() - alphabetic pipeline
# ============================================================================

class TestTokenizeAlphabetic:
    """Test normalize -> split -> stem."""

    def test_sentence(self, tokenizer, sentence):
        assert tokenizer.tokenize(sentence, Algorithm.ENGLISH) == EXPECTED

    def test_returns_tuple(self, tokenizer):
        assert isinstance(tokenizer.tokenize("rocks", Algorithm.ENGLISH), tuple)

    def test_number_kept(self, tokenizer):
        assert "67" in tokenizer.tokenize("67", Algorithm.ENGLISH)

    def test_clitic(self, tokenizer):
        assert tokenizer.tokenize("that's", Algorithm.ENGLISH) == ("that",)

    def test_trailing_punctuation(self, tokenizer):
        assert tokenizer.tokenize("rocks,", Algorithm.ENGLISH) == ("rock",)

    def test_numbers_not_stemmed(self, tokenizer):
        assert tokenizer.tokenize("3.14 1,000", Algorithm.ENGLISH) == ('3.14', '1,000')

    def test_letters_and_digits_split(self, tokenizer):
        assert tokenizer.tokenize("mp3", Algorithm.ENGLISH) == ('mp', '3')

    def test_case_insensitive_input(self, tokenizer):
        assert tokenizer.tokenize("ROCKS", Algorithm.ENGLISH) == tokenizer.tokenize("rocks", Algorithm.ENGLISH)

    @pytest.mark.parametrize("algorithm", [
        Algorithm.ENGLISH,
        Algorithm.GERMAN,
        Algorithm.DUTCH_PORTER,
        Algorithm.DANISH,
        Algorithm.NORWEGIAN,
        Algorithm.SWEDISH,
        Algorithm.SPANISH,
        Algorithm.PORTUGUESE,
        Algorithm.ITALIAN,
    ])
    def test_deterministic(self, tokenizer, sentence, algorithm):
        first = tokenizer.tokenize(sentence, algorithm)
        assert first == tokenizer.tokenize(sentence, algorithm)
        assert all(token and not token.isspace() for token in first)

    def test_german_sentence(self, tokenizer):
        assert tokenizer.tokenize("Die Kinder laufen!", Algorithm.GERMAN) == ('die', 'kind', 'lauf')

    def test_module_level_tokenize(self, sentence):
        assert tokenize(sentence, Algorithm.ENGLISH) == EXPECTED


# ============================================================================
# Tests for tokenize() - input validation and errors
# ============================================================================

class TestTokenizeErrors:
    """Test InvalidEncoding, EmptyInput and UnsupportedLanguage."""

    @pytest.mark.parametrize("text", ["", "   ", "!!! ... ?", "→ ★"])
    def test_empty_input(self, tokenizer, text):
        with pytest.raises(EmptyInput):
            tokenizer.tokenize(text, Algorithm.ENGLISH)

    def test_invalid_utf8_bytes(self, tokenizer):
        with pytest.raises(InvalidEncoding):
            tokenizer.tokenize(b'rocks \xff\xfe', Algorithm.ENGLISH)

    def test_lone_surrogate(self, tokenizer):
        with pytest.raises(InvalidEncoding):
            tokenizer.tokenize("rocks \ud800", Algorithm.ENGLISH)

    def test_invalid_encoding_is_value_error(self):
        with pytest.raises(ValueError):
            decode_input(b'\xc3')

    def test_utf8_bytes_accepted(self, tokenizer):
        assert tokenizer.tokenize("rocks café".encode('utf-8'), Algorithm.ENGLISH) == ('rock', 'cafe')

    def test_wrong_type(self, tokenizer):
        with pytest.raises(TypeError):
            tokenizer.tokenize(42, Algorithm.ENGLISH)
        with pytest.raises(TypeError):
            tokenizer.tokenize("rocks", 'english')

    def test_none_algorithm(self, tokenizer):
        with pytest.raises(UnsupportedLanguage) as exc_info:
            tokenizer.tokenize("rocks", Algorithm.NONE)
        assert exc_info.value.algorithm is Algorithm.NONE

    def test_unregistered_segmenter(self, tokenizer):
        with pytest.raises(UnsupportedLanguage):
            tokenizer.tokenize("你好", Algorithm.CHINESE)

    def test_errors_share_base_class(self, tokenizer):
        with pytest.raises(TokenizerError):
            tokenizer.tokenize("", Algorithm.ENGLISH)


# ============================================================================
# Tests for tokenize() - stopwords
# ============================================================================

class TestTokenizeStopwords:
    """Test the stopword policy."""

    def test_no_stopwords_by_default(self, tokenizer):
        assert 'who' in tokenizer.tokenize("who can", Algorithm.ENGLISH)

    def test_configured_stopwords_dropped(self, make_tokenizer, sentence):
        tokenizer = make_tokenizer(stopwords={Algorithm.ENGLISH: ['who', 'a', 'can']})
        tokens = tokenizer.tokenize(sentence, Algorithm.ENGLISH)
        assert 'who' not in tokens
        assert 'a' not in tokens
        assert tokens[:2] == ('that', 'someon')

    def test_keep_stopwords(self, make_tokenizer, sentence):
        tokenizer = make_tokenizer(stopwords={Algorithm.ENGLISH: ['who', 'a']})
        assert tokenizer.tokenize(sentence, Algorithm.ENGLISH, keep_stopwords=True) == EXPECTED

    def test_stopword_matches_stem(self, make_tokenizer):
        tokenizer = make_tokenizer(stopwords={Algorithm.ENGLISH: ['rock']})
        assert tokenizer.tokenize("rocks slang", Algorithm.ENGLISH) == ('slang',)

    def test_stopwords_are_case_folded(self, make_tokenizer):
        tokenizer = make_tokenizer(stopwords={Algorithm.ENGLISH: ['WHO']})
        assert tokenizer.tokenize("Who rocks", Algorithm.ENGLISH) == ('rock',)

    def test_all_stopwords_gives_empty_tuple(self, make_tokenizer):
        """Test removed stopwords are not an EmptyInput error."""
        tokenizer = make_tokenizer(stopwords={Algorithm.ENGLISH: ['who']})
        assert tokenizer.tokenize("who? who!", Algorithm.ENGLISH) == ()

    def test_stopwords_per_language(self, make_tokenizer):
        tokenizer = make_tokenizer(stopwords={Algorithm.GERMAN: ['die']})
        assert tokenizer.tokenize("die", Algorithm.ENGLISH) == ('die',)
        assert tokenizer.tokenize("die kinder", Algorithm.GERMAN) == ('kind',)

    def test_stopwords_directory(self, make_tokenizer, tmp_path):
        (tmp_path / 'english.txt').write_text("# common words\nwho\n\na  # article\n", encoding='utf-8')
        tokenizer = make_tokenizer(stopwords_dir=str(tmp_path))
        assert tokenizer.stopwords(Algorithm.ENGLISH) == frozenset({'who', 'a'})
        assert tokenizer.tokenize("who rocks a", Algorithm.ENGLISH) == ('rock',)

    def test_stopwords_directory_and_config_merged(self, make_tokenizer, tmp_path):
        (tmp_path / 'english.txt').write_text("who\n", encoding='utf-8')
        tokenizer = make_tokenizer(stopwords={Algorithm.ENGLISH: ['can']}, stopwords_dir=str(tmp_path))
        assert tokenizer.stopwords(Algorithm.ENGLISH) == frozenset({'who', 'can'})


# ============================================================================
# Tests for tokenize() - CJK pipeline
# ============================================================================

class TestTokenizeCJK:
    """Test dictionary segmenter dispatch with injected fakes."""

    def test_segments_returned_in_order(self, make_tokenizer, make_segmenter):
        segmenter = make_segmenter(['我', '爱', '北京', '天安门'])
        tokenizer = make_tokenizer({Algorithm.CHINESE: segmenter})
        assert tokenizer.tokenize("我爱北京天安门", Algorithm.CHINESE) == ('我', '爱', '北京', '天安门')

    def test_input_is_nfkc_and_case_folded(self, make_tokenizer, make_segmenter):
        segmenter = make_segmenter(['abc'])
        tokenizer = make_tokenizer({Algorithm.JAPANESE: segmenter})
        tokenizer.tokenize("ＡＢＣ東京", Algorithm.JAPANESE)
        assert segmenter.calls == ["abc東京"]

    def test_punctuation_and_space_segments_dropped(self, make_tokenizer, make_segmenter):
        segmenter = make_segmenter(['東京', '。', ' ', '、', ' 2024 '])
        tokenizer = make_tokenizer({Algorithm.JAPANESE: segmenter})
        assert tokenizer.tokenize("東京。 、2024", Algorithm.JAPANESE) == ('東京', '2024')

    def test_no_word_segments(self, make_tokenizer, make_segmenter):
        tokenizer = make_tokenizer({Algorithm.CHINESE: make_segmenter(['。', '！'])})
        with pytest.raises(EmptyInput):
            tokenizer.tokenize("。！", Algorithm.CHINESE)

    def test_stopwords(self, make_tokenizer, make_segmenter):
        tokenizer = make_tokenizer(
            {Algorithm.CHINESE: make_segmenter(['我', '的', '书'])},
            stopwords={Algorithm.CHINESE: ['的']},
        )
        assert tokenizer.tokenize("我的书", Algorithm.CHINESE) == ('我', '书')
        assert tokenizer.tokenize("我的书", Algorithm.CHINESE, keep_stopwords=True) == ('我', '的', '书')

    def test_no_stemming(self, make_tokenizer, make_segmenter):
        tokenizer = make_tokenizer({Algorithm.KOREAN: make_segmenter(['running'])})
        assert tokenizer.tokenize("running", Algorithm.KOREAN) == ('running',)

    def test_backend_failure_wrapped(self, make_tokenizer):
        segmenter = MagicMock()
        segmenter.name = 'jieba'
        segmenter.segment.side_effect = RuntimeError("dictionary corrupted")
        tokenizer = make_tokenizer({Algorithm.CHINESE: segmenter})
        with pytest.raises(CollaboratorFailure) as exc_info:
            tokenizer.tokenize("你好", Algorithm.CHINESE)
        assert exc_info.value.backend == 'jieba'
        assert isinstance(exc_info.value.__cause__, RuntimeError)
        assert exc_info.value.original is exc_info.value.__cause__


# ============================================================================
# Tests for tokenize() - Southeast Asian pipeline
# ============================================================================

class TestTokenizeSoutheastAsian:
    """Test boundary model dispatch with injected fakes."""

    def test_spans_stripped_and_filtered(self, make_tokenizer, make_boundary_model):
        model = make_boundary_model([' สวัสดี ', ' ', '!', 'ครับ'])
        tokenizer = make_tokenizer({Algorithm.THAI: model})
        assert tokenizer.tokenize("สวัสดี ! ครับ", Algorithm.THAI) == ('สวัสดี', 'ครับ')

    def test_raw_text_passed(self, make_tokenizer, make_boundary_model):
        model = make_boundary_model(['Hello'])
        tokenizer = make_tokenizer({Algorithm.LAO: model})
        tokenizer.tokenize("Hello ສະບາຍດີ", Algorithm.LAO)
        assert model.calls == ["Hello ສະບາຍດີ"]

    def test_no_word_spans(self, make_tokenizer, make_boundary_model):
        tokenizer = make_tokenizer({Algorithm.KHMER: make_boundary_model([' ', '។'])})
        with pytest.raises(EmptyInput):
            tokenizer.tokenize(" ។", Algorithm.KHMER)

    def test_backend_failure_wrapped(self, make_tokenizer):
        model = MagicMock()
        model.name = 'pythainlp'
        model.predict_boundaries.side_effect = ValueError("bad engine")
        tokenizer = make_tokenizer({Algorithm.BURMESE: model})
        with pytest.raises(CollaboratorFailure):
            tokenizer.tokenize("မင်္ဂလာပါ", Algorithm.BURMESE)


# ============================================================================
# End-to-end
# ============================================================================

@pytest.mark.integration
class TestEndToEnd:
    """Test tokenize() and find_match() together."""

    def test_phrase_found(self, tokenizer, sentence):
        haystack = tokenizer.tokenize(sentence, Algorithm.ENGLISH)
        needle = tokenizer.tokenize("like a skibidi", Algorithm.ENGLISH)
        assert find_match(haystack, needle, MatchMode.EXACT) == MatchSpan(6, 3)

    def test_inflected_phrase_found(self, tokenizer, sentence):
        """Test stemming lets other inflections match."""
        haystack = tokenizer.tokenize(sentence, Algorithm.ENGLISH)
        needle = tokenizer.tokenize("Slang ROCK", Algorithm.ENGLISH)
        assert find_match(haystack, needle) == MatchSpan(10, 2)

    def test_fuzzy_phrase(self, tokenizer, sentence):
        haystack = tokenizer.tokenize(sentence, Algorithm.ENGLISH)
        needle = tokenizer.tokenize("skibidi like", Algorithm.ENGLISH)
        assert find_match(haystack, needle, MatchMode.EXACT) is None
        assert find_match(haystack, needle, MatchMode.FUZZY) == MatchSpan(6, 3)
