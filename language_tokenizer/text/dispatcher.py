"""
Algorithm Dispatcher Module
Routes text to the pipeline of its language and assembles the token sequence.

Pipelines:
    ALPHABETIC       normalize -> split -> stem (numbers kept verbatim)
    CJK              NFKC + case fold -> dictionary segmenter
    SOUTHEAST_ASIAN  raw text -> boundary model

Every pipeline ends with the same stopword policy.
"""

import logging
import unicodedata
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Callable, Dict, FrozenSet, Iterable, List, Mapping, Optional, Tuple, Union

import regex as re

from language_tokenizer import conf
from language_tokenizer.core.exceptions import (
    CollaboratorFailure,
    EmptyInput,
    InvalidEncoding,
    TokenizerError,
    UnsupportedLanguage,
)
from language_tokenizer.lang import Algorithm, Pipeline
from language_tokenizer.text.normalizer import fold_case, normalize
from language_tokenizer.text.splitter import split
from language_tokenizer.text.stemmer import get_stemmer, stem
from language_tokenizer.text.stopwords import load_stopwords, parse_stopwords
from language_tokenizer.text.tokenizers import SegmenterRegistry, default_registry

logger = logging.getLogger(__name__)

# A segment is a word candidate only if it holds at least one letter or digit
_word_char = re.compile(r'[\p{L}\p{N}]')


def decode_input(text: Union[str, bytes]) -> str:
    """
    Validate input text and return it as str.

    Args:
        text: str, or UTF-8 encoded bytes

    Returns:
        str: The decoded text

    Raises:
        InvalidEncoding: bytes that are not strict UTF-8, or str with lone surrogates
        TypeError: for any other type
    """
    if isinstance(text, (bytes, bytearray)):
        try:
            return bytes(text).decode('utf-8')
        except UnicodeDecodeError as e:
            raise InvalidEncoding(f"Input is not valid UTF-8: {e}") from e
    if not isinstance(text, str):
        raise TypeError(f"Expected str or bytes, got {type(text).__name__}")
    try:
        text.encode('utf-8')
    except UnicodeEncodeError as e:
        raise InvalidEncoding(f"Input contains a lone surrogate at index {e.start}") from e
    return text


@dataclass
class TokenizerConfig:
    """
    Configuration of a Tokenizer instance.

    Attributes:
        stopwords: Extra stopwords per language, merged with the file lists
        stopwords_dir: Directory of <language>.txt stopword files
    """
    stopwords: Mapping[Algorithm, Iterable[str]] = field(default_factory=dict)
    stopwords_dir: Optional[str] = conf.STOPWORDS_DIR


class Tokenizer:
    """
    Multilingual tokenizer.

    Binds a configuration (stopwords) and a segmenter registry. Stopword
    files are read once, here; tokenize() does no I/O of its own and can be
    called from several threads.
    """

    def __init__(self, config: Optional[TokenizerConfig] = None, registry: Optional[SegmenterRegistry] = None):
        self.config = config or TokenizerConfig()
        self.registry = registry if registry is not None else default_registry()
        self._stopwords: Dict[Algorithm, FrozenSet[str]] = {}
        for algorithm in Algorithm:
            if algorithm is Algorithm.NONE:
                continue
            words = load_stopwords(algorithm, self.config.stopwords_dir)
            extra = self.config.stopwords.get(algorithm)
            if extra:
                words = words | parse_stopwords(extra, algorithm)
            if words:
                self._stopwords[algorithm] = words

    def stopwords(self, algorithm: Algorithm) -> FrozenSet[str]:
        return self._stopwords.get(algorithm, frozenset())

    def tokenize(self, text: Union[str, bytes], algorithm: Algorithm, keep_stopwords: bool = False) -> Tuple[str, ...]:
        """
        Tokenize text with the pipeline of `algorithm`.

        Args:
            text: Input text (str, or UTF-8 bytes)
            algorithm: Language / script selector
            keep_stopwords: Keep tokens found in the language's stopword set

        Returns:
            tuple: Tokens in input order

        Raises:
            InvalidEncoding: malformed input
            UnsupportedLanguage: no pipeline, rule table or backend for `algorithm`
            EmptyInput: the input holds no word candidates
            CollaboratorFailure: an external segmenter failed

        Example:
            >>> Tokenizer().tokenize("zoomer slang rocks, 67", Algorithm.ENGLISH)
            ('zoomer', 'slang', 'rock', '67')
        """
        if not isinstance(algorithm, Algorithm):
            raise TypeError(f"Expected an Algorithm, got {type(algorithm).__name__}")
        text = decode_input(text)
        stopwords = frozenset() if keep_stopwords else self.stopwords(algorithm)

        match algorithm.pipeline:
            case Pipeline.ALPHABETIC:
                tokens = self._tokenize_alphabetic(text, algorithm, stopwords)
            case Pipeline.CJK:
                tokens = self._tokenize_cjk(text, algorithm, stopwords)
            case Pipeline.SOUTHEAST_ASIAN:
                tokens = self._tokenize_southeast_asian(text, algorithm, stopwords)
            case _:
                raise UnsupportedLanguage(algorithm)

        logger.debug(f"{algorithm.name}: {len(tokens)} tokens from {len(text)} characters")
        return tokens

    def _tokenize_alphabetic(self, text: str, algorithm: Algorithm, stopwords: FrozenSet[str]) -> Tuple[str, ...]:
        # Fails early for languages without a stemmer, whatever the input
        get_stemmer(algorithm)
        spans = list(split(normalize(text, algorithm)))
        if not spans:
            raise EmptyInput(f"No words found in input ({algorithm.name})")

        tokens = []
        for span in spans:
            if span.is_numeric:
                token = span.text
            else:
                token = stem(span.text, algorithm)
            if span.text in stopwords or token in stopwords:
                continue
            tokens.append(token)
        return tuple(tokens)

    def _tokenize_cjk(self, text: str, algorithm: Algorithm, stopwords: FrozenSet[str]) -> Tuple[str, ...]:
        segmenter = self.registry.get(algorithm)
        prepared = fold_case(unicodedata.normalize('NFKC', text), algorithm)
        segments = _call_backend(segmenter, segmenter.segment, prepared)
        return _collect(segments, algorithm, stopwords)

    def _tokenize_southeast_asian(self, text: str, algorithm: Algorithm, stopwords: FrozenSet[str]) -> Tuple[str, ...]:
        model = self.registry.get(algorithm)
        segments = _call_backend(model, model.predict_boundaries, text)
        return _collect(segments, algorithm, stopwords)


def _call_backend(backend, method: Callable[[str], Iterable[str]], text: str) -> List[str]:
    """Run a segmenter method, wrapping any failure in CollaboratorFailure."""
    name = getattr(backend, 'name', type(backend).__name__)
    try:
        return list(method(text))
    except TokenizerError:
        raise
    except Exception as e:
        logger.error(f"Segmenter {name} failed: {e}")
        raise CollaboratorFailure(name, e) from e


def _collect(segments: Iterable[str], algorithm: Algorithm, stopwords: FrozenSet[str]) -> Tuple[str, ...]:
    candidates = [s.strip() for s in segments if _word_char.search(s)]
    if not candidates:
        raise EmptyInput(f"No words found in input ({algorithm.name})")
    return tuple(token for token in candidates if token not in stopwords)


@lru_cache(maxsize=1)
def get_default_tokenizer() -> Tokenizer:
    """Process-wide Tokenizer used by the module-level tokenize()."""
    return Tokenizer()


def tokenize(text: Union[str, bytes], algorithm: Algorithm, keep_stopwords: bool = False) -> Tuple[str, ...]:
    """
    Tokenize text with the default Tokenizer.

    See Tokenizer.tokenize.
    """
    return get_default_tokenizer().tokenize(text, algorithm, keep_stopwords)
