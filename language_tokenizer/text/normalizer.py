"""
Text Normalizer Module
Handles Unicode cleanup of raw text before word boundaries are detected.
"""

import unicodedata
from functools import lru_cache

import regex as re

from language_tokenizer.lang import Algorithm, language_mapping

# Characters used as apostrophes / contraction markers in the wild
APOSTROPHES = '\u2018\u2019\u201b\u02bc\u2032\uff07'

_apostrophe_table = str.maketrans({ch: "'" for ch in APOSTROPHES})

# Combining Diacritical Marks block: accents that sit on Latin, Greek and Cyrillic letters.
# Marks outside this block (Devanagari vowel signs, Thai tone marks...) are letters' own parts.
_diacritics_pattern = re.compile(r'[\u0300-\u036f]+')


@lru_cache(maxsize=None)
def _clitic_pattern(clitics: tuple):
    alternatives = '|'.join(re.escape(c) for c in sorted(clitics, key=len, reverse=True))
    return re.compile(rf"(?<=[\p{{L}}\p{{M}}])'(?:{alternatives})(?![\p{{L}}\p{{M}}\p{{N}}])")


@lru_cache(maxsize=None)
def _elision_pattern(elisions: tuple):
    alternatives = '|'.join(re.escape(e) for e in sorted(elisions, key=len, reverse=True))
    return re.compile(rf"(?<![\p{{L}}\p{{M}}\p{{N}}'])(?:{alternatives})'(?=[\p{{L}}\p{{M}}])")


@lru_cache(maxsize=None)
def _fold_table(fold_items: tuple):
    return str.maketrans(dict(fold_items))


def fold_case(text: str, algorithm: Algorithm = Algorithm.NONE) -> str:
    """
    Lowercase text with full Unicode case folding.

    Languages with locale-specific letters (Turkish dotted / dotless I) get
    their folding table applied before the generic fold.

    Args:
        text: Input text
        algorithm: Language whose folding table applies

    Returns:
        str: Case-folded text
    """
    settings = language_mapping.get(algorithm)
    fold = settings['fold'] if settings else None
    if fold:
        text = text.translate(_fold_table(tuple(fold.items())))
    return text.casefold()


def strip_diacritics(text: str) -> str:
    """
    Remove accents from base letters.

    Args:
        text: Input text

    Returns:
        str: Text with combining diacritical marks removed, recomposed to NFC
    """
    decomposed = unicodedata.normalize('NFD', text)
    return unicodedata.normalize('NFC', _diacritics_pattern.sub('', decomposed))


def normalize(text: str, algorithm: Algorithm = Algorithm.NONE) -> str:
    """
    Normalize text for word boundary detection and stemming.

    Steps, in order:
    - NFKC compatibility composition (fullwidth forms, ligatures)
    - Apostrophe variants unified to "'"
    - Language-aware full case folding
    - Diacritic stripping for languages whose rules use base letters
    - Contraction clitics ("that's" -> "that") and elided prefixes
      ("l'homme" -> "homme") dropped

    The function is total: characters it does not know pass through.

    Args:
        text: Raw input text
        algorithm: Language selecting diacritic, clitic and folding rules

    Returns:
        str: Normalized text

    Example:
        >>> normalize("That’s Café", Algorithm.ENGLISH)
        'that cafe'
    """
    settings = language_mapping.get(algorithm)

    # Compatibility forms
    text = unicodedata.normalize('NFKC', text)

    # Unify contraction markers
    text = text.translate(_apostrophe_table)

    text = fold_case(text, algorithm)

    if settings is None:
        return text

    if settings['strip_diacritics']:
        text = strip_diacritics(text)

    # Drop clitic suffixes together with their marker
    if settings['clitics']:
        text = _clitic_pattern(settings['clitics']).sub('', text)

    # Drop elided articles and prepositions
    if settings['elisions']:
        text = _elision_pattern(settings['elisions']).sub('', text)

    return text
