"""
Text Module
Provides normalization, word splitting, stemming and the tokenize() dispatcher.
"""

from .normalizer import normalize, fold_case, strip_diacritics
from .splitter import split
from .stemmer import stem
from .dispatcher import Tokenizer, TokenizerConfig, tokenize

__all__ = [
    # Normalizer
    'normalize',
    'fold_case',
    'strip_diacritics',
    # Splitter
    'split',
    # Stemmer
    'stem',
    # Dispatcher
    'Tokenizer',
    'TokenizerConfig',
    'tokenize',
]
