"""
Stemmer Module
Reduces alphabetic words to their stems.

Languages with a native rule table (English, German, DutchPorter, Danish,
Norwegian, Swedish, Spanish, Portuguese, Italian) are stemmed by the rule
engine in this package. Every other alphabetic language goes through the
PyStemmer backend when the installed build provides its algorithm.
"""

from language_tokenizer.core.exceptions import UnsupportedLanguage
from language_tokenizer.lang import Algorithm, Pipeline, language_mapping
from language_tokenizer.text.stemmer.backend import available_algorithms, get_snowball_stemmer
from language_tokenizer.text.stemmer.rules import native_rules


def get_stemmer(algorithm: Algorithm):
    """
    Resolve the stemming function of an alphabetic language.

    Args:
        algorithm: Alphabetic Algorithm member

    Returns:
        callable: word -> stem, without the short-word guard

    Raises:
        UnsupportedLanguage: for non-alphabetic members and missing backends
    """
    if algorithm.pipeline is not Pipeline.ALPHABETIC:
        raise UnsupportedLanguage(algorithm, "stemming applies to alphabetic languages only")
    rules = native_rules.get(algorithm)
    if rules is not None:
        return rules.stem
    return get_snowball_stemmer(algorithm).stem


def stem(word: str, algorithm: Algorithm) -> str:
    """
    Stem one normalized word.

    Words shorter than the language minimum are returned unchanged.

    Args:
        word: A lowercase alphabetic span produced by the splitter
        algorithm: Alphabetic Algorithm member

    Returns:
        str: The stem (may equal the word)

    Raises:
        UnsupportedLanguage: for non-alphabetic members and missing backends

    Example:
        >>> stem('running', Algorithm.ENGLISH)
        'run'
    """
    stemmer = get_stemmer(algorithm)
    if len(word) < language_mapping[algorithm]['min_length']:
        return word
    return stemmer(word)


def supported_algorithms() -> tuple:
    """Alphabetic algorithms that can be stemmed in this process."""
    available = available_algorithms()
    return tuple(
        algorithm for algorithm in Algorithm
        if algorithm.pipeline is Pipeline.ALPHABETIC
        and (algorithm in native_rules or language_mapping[algorithm]['stemmer'] in available)
    )


__all__ = ['stem', 'get_stemmer', 'supported_algorithms']
