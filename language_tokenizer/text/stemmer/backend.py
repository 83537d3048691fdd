"""
Snowball Backend Module
Serves alphabetic languages without a native rule table through PyStemmer,
the Python binding of the Snowball C library.
"""

import logging
import threading
from functools import lru_cache

from language_tokenizer.core.exceptions import CollaboratorFailure, UnsupportedLanguage
from language_tokenizer.lang import Algorithm, language_mapping

logger = logging.getLogger(__name__)


@lru_cache(maxsize=None)
def available_algorithms() -> frozenset:
    """
    Snowball algorithm names compiled into the installed PyStemmer.

    Returns:
        frozenset: e.g. {'english', 'french', ...}; empty if PyStemmer is missing
    """
    try:
        import Stemmer
    except ImportError:
        logger.warning("PyStemmer is not installed, Snowball backend disabled")
        return frozenset()
    return frozenset(Stemmer.algorithms())


class SnowballStemmer:
    """
    Adapter exposing a PyStemmer stemmer as a `stem(word)` method.

    PyStemmer stemmers keep an internal cache and are not safe to share
    between threads, so calls are serialized.
    """

    def __init__(self, algorithm: Algorithm, stemmer):
        self.algorithm = algorithm
        self._stemmer = stemmer
        self._lock = threading.Lock()

    def stem(self, word: str) -> str:
        try:
            with self._lock:
                return self._stemmer.stemWord(word)
        except Exception as e:
            raise CollaboratorFailure('PyStemmer', e) from e


@lru_cache(maxsize=None)
def get_snowball_stemmer(algorithm: Algorithm) -> SnowballStemmer:
    """
    Create (once per process) the Snowball stemmer serving `algorithm`.

    Raises:
        UnsupportedLanguage: if PyStemmer is missing or lacks the algorithm
    """
    settings = language_mapping.get(algorithm)
    name = settings['stemmer'] if settings else None
    if not name:
        raise UnsupportedLanguage(algorithm, "not an alphabetic language")
    if name not in available_algorithms():
        raise UnsupportedLanguage(algorithm, f"Snowball algorithm '{name}' is not available")

    import Stemmer
    stemmer = SnowballStemmer(algorithm, Stemmer.Stemmer(name))
    logger.info(f"Snowball backend loaded for {algorithm.name} ({name})")
    return stemmer
