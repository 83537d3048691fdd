"""
Tests for language_tokenizer/lang.py

Tests the Algorithm enum, its integer codes, lookups and per-language settings.
"""

import pytest
from language_tokenizer.lang import Algorithm, Pipeline, language_mapping


# ============================================================================
# Tests for Algorithm codes
# ============================================================================

class TestAlgorithmCodes:
    """Test the stable integer representation."""

    def test_none_is_minus_one(self):
        assert Algorithm.NONE.code == -1

    def test_declaration_order(self):
        members = [m for m in Algorithm if m is not Algorithm.NONE]
        assert [m.code for m in members] == list(range(len(members)))

    @pytest.mark.parametrize("member,code", [
        (Algorithm.ARABIC, 0),
        (Algorithm.ENGLISH, 7),
        (Algorithm.YIDDISH, 32),
        (Algorithm.JAPANESE, 33),
        (Algorithm.KHMER, 39),
    ])
    def test_known_codes(self, member, code):
        assert member.code == code
        assert Algorithm.from_code(code) is member

    def test_unknown_code(self):
        assert Algorithm.from_code(99) is Algorithm.NONE


# ============================================================================
# Tests for Algorithm lookups and pipelines
# ============================================================================

class TestAlgorithmLookup:
    """Test from_name() and pipeline predicates."""

    @pytest.mark.parametrize("name,member", [
        ('english', Algorithm.ENGLISH),
        ('ENGLISH', Algorithm.ENGLISH),
        ('en', Algorithm.ENGLISH),
        ('eng', Algorithm.ENGLISH),
        ('DutchPorter', Algorithm.DUTCH_PORTER),
        ('dutch-porter', Algorithm.DUTCH_PORTER),
        ('zh', Algorithm.CHINESE),
        ('tha', Algorithm.THAI),
    ])
    def test_from_name(self, name, member):
        assert Algorithm.from_name(name) is member

    @pytest.mark.parametrize("name", ['klingon', '', 'xx'])
    def test_from_name_unknown(self, name):
        with pytest.raises(KeyError):
            Algorithm.from_name(name)

    def test_every_member_has_one_pipeline(self):
        for member in Algorithm:
            if member is Algorithm.NONE:
                assert member.pipeline is None
            else:
                assert isinstance(member.pipeline, Pipeline)

    def test_predicates(self):
        assert Algorithm.GERMAN.is_snowball()
        assert Algorithm.KOREAN.is_cjk()
        assert Algorithm.BURMESE.is_southeast_asian()
        assert not Algorithm.NONE.is_snowball()
        assert not Algorithm.THAI.is_cjk()

    def test_alphabetic_members_have_stemmer_names(self):
        for member, settings in language_mapping.items():
            if settings['pipeline'] is Pipeline.ALPHABETIC:
                assert settings['stemmer']
            else:
                assert settings['stemmer'] is None

    def test_mapping_is_read_only(self):
        with pytest.raises(TypeError):
            language_mapping[Algorithm.ENGLISH]['min_length'] = 1
