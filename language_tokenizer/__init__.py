"""
language_tokenizer
Multilingual word tokenization and token sequence matching.

    >>> from language_tokenizer import Algorithm, MatchMode, find_match, tokenize
    >>> haystack = tokenize("that's someone who can rizz just like a skibidi!", Algorithm.ENGLISH)
    >>> find_match(haystack, tokenize("like a skibidi", Algorithm.ENGLISH), MatchMode.EXACT)
    MatchSpan(start=6, length=3)
"""

from language_tokenizer.core.exceptions import (
    CollaboratorFailure,
    EmptyInput,
    InvalidEncoding,
    TokenizerError,
    UnsupportedLanguage,
)
from language_tokenizer.lang import Algorithm, Pipeline
from language_tokenizer.matching import find_all_matches, find_match
from language_tokenizer.models import MatchMode, MatchSpan, Span, SpanKind
from language_tokenizer.text import Tokenizer, TokenizerConfig, normalize, split, stem, tokenize

__version__ = '1.0.0'

__all__ = [
    'tokenize',
    'find_match',
    'find_all_matches',
    'normalize',
    'split',
    'stem',
    'Algorithm',
    'Pipeline',
    'MatchMode',
    'MatchSpan',
    'Span',
    'SpanKind',
    'Tokenizer',
    'TokenizerConfig',
    'TokenizerError',
    'UnsupportedLanguage',
    'EmptyInput',
    'CollaboratorFailure',
    'InvalidEncoding',
]
