"""
Native Rule Tables
Maps each algorithm with a hand-written rule table to its RuleSet.
"""

from types import MappingProxyType

from language_tokenizer.lang import Algorithm
from language_tokenizer.text.stemmer.rules import (
    danish,
    dutch_porter,
    english,
    german,
    italian,
    norwegian,
    portuguese,
    spanish,
    swedish,
)

native_rules = MappingProxyType({
    Algorithm.ENGLISH: english.RULES,
    Algorithm.GERMAN: german.RULES,
    Algorithm.DUTCH_PORTER: dutch_porter.RULES,
    Algorithm.DANISH: danish.RULES,
    Algorithm.NORWEGIAN: norwegian.RULES,
    Algorithm.SWEDISH: swedish.RULES,
    Algorithm.SPANISH: spanish.RULES,
    Algorithm.PORTUGUESE: portuguese.RULES,
    Algorithm.ITALIAN: italian.RULES,
})

__all__ = ['native_rules']
