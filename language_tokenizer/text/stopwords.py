"""
Stopwords Module
Loads per-language stopword sets from plain text files.

No lists are bundled: a language has stopwords only when the caller
provides them or a `<language>.txt` file exists in the configured directory.
"""

import logging
import os
from typing import FrozenSet, Iterable, Optional

from language_tokenizer.lang import Algorithm
from language_tokenizer.text.normalizer import fold_case

logger = logging.getLogger(__name__)


def parse_stopwords(lines: Iterable[str], algorithm: Algorithm = Algorithm.NONE) -> FrozenSet[str]:
    """
    Parse stopword file lines: one word per line, '#' starts a comment.

    Words are case-folded the way the normalizer folds text.
    """
    words = set()
    for line in lines:
        word = line.split('#', 1)[0].strip()
        if word:
            words.add(fold_case(word, algorithm))
    return frozenset(words)


def stopwords_path(directory: str, algorithm: Algorithm) -> str:
    return os.path.join(directory, f"{algorithm.name.lower()}.txt")


def load_stopwords(algorithm: Algorithm, directory: Optional[str]) -> FrozenSet[str]:
    """
    Load the stopword set of `algorithm` from `directory`.

    Args:
        algorithm: Language whose file is read
        directory: Directory of stopword files, or None

    Returns:
        frozenset: The stopwords; empty when there is no directory or file
    """
    if not directory:
        return frozenset()
    path = stopwords_path(directory, algorithm)
    if not os.path.isfile(path):
        logger.debug(f"No stopword file for {algorithm.name} at {path}")
        return frozenset()
    with open(path, 'r', encoding='utf-8') as f:
        words = parse_stopwords(f, algorithm)
    logger.info(f"Loaded {len(words)} stopwords for {algorithm.name} from {path}")
    return words
