"""
Tokenizers Module
Provides the external word segmenters used for languages written without spaces.

- Chinese (jieba)
- Japanese (sudachi)
- Korean (soynlp)
- Thai (pythainlp)
- Lao / Burmese / Khmer (ICU word break rules, PyICU)

CJK and Thai can be switched to ICU as well (conf.CJK_BACKEND, conf.THAI_BACKEND).

Backends are imported and constructed on first use, once per registry.
A missing library makes its languages unsupported; it never breaks the others.
"""

import logging
import threading
from functools import partial
from typing import Callable, Dict, Iterable, Optional, Protocol, Union, runtime_checkable

from language_tokenizer import conf
from language_tokenizer.core.exceptions import UnsupportedLanguage
from language_tokenizer.lang import Algorithm, Pipeline, language_mapping

logger = logging.getLogger(__name__)


@runtime_checkable
class Segmenter(Protocol):
    """Dictionary-based word segmenter (CJK)."""

    def segment(self, text: str) -> Iterable[str]:
        ...


@runtime_checkable
class BoundaryModel(Protocol):
    """Model-based word boundary detector (Southeast Asian scripts)."""

    def predict_boundaries(self, text: str) -> Iterable[str]:
        ...


Capability = Union[Segmenter, BoundaryModel]
Factory = Callable[[], Capability]


class SegmenterRegistry:
    """
    Maps Algorithm members to segmenter capabilities.

    Capabilities are registered either as ready instances (test fakes) or as
    factories, which are called once on first lookup and cached.
    """

    def __init__(self, factories: Optional[Dict[Algorithm, Factory]] = None):
        self._factories: Dict[Algorithm, Factory] = dict(factories or {})
        self._instances: Dict[Algorithm, Capability] = {}
        self._lock = threading.Lock()

    def register(self, algorithm: Algorithm, capability: Union[Capability, Factory]):
        """
        Register a capability instance or a zero-argument factory for `algorithm`.
        """
        with self._lock:
            self._instances.pop(algorithm, None)
            if isinstance(capability, (Segmenter, BoundaryModel)):
                self._instances[algorithm] = capability
            else:
                self._factories[algorithm] = capability

    def __contains__(self, algorithm: Algorithm) -> bool:
        return algorithm in self._instances or algorithm in self._factories

    def get(self, algorithm: Algorithm) -> Capability:
        """
        Return the capability serving `algorithm`, building it if needed.

        Raises:
            UnsupportedLanguage: if nothing is registered or the backend library is missing
        """
        with self._lock:
            if algorithm in self._instances:
                return self._instances[algorithm]
            factory = self._factories.get(algorithm)
            if factory is None:
                raise UnsupportedLanguage(algorithm, "no segmenter registered")
            try:
                capability = factory()
            except ImportError as e:
                logger.warning(f"Segmenter for {algorithm.name} unavailable: {e}")
                raise UnsupportedLanguage(algorithm, f"missing library ({e.name or e})") from e
            self._instances[algorithm] = capability
            logger.info(f"Segmenter loaded for {algorithm.name}: {type(capability).__name__}")
            return capability


def _chinese():
    from language_tokenizer.text.tokenizers.chinese import JiebaSegmenter
    return JiebaSegmenter()


def _japanese():
    from language_tokenizer.text.tokenizers.japanese import SudachiSegmenter
    return SudachiSegmenter()


def _korean():
    from language_tokenizer.text.tokenizers.korean import SoynlpSegmenter
    return SoynlpSegmenter()


def _thai():
    from language_tokenizer.text.tokenizers.thai import PythaiBoundaryModel
    return PythaiBoundaryModel()


def _icu(algorithm: Algorithm):
    from language_tokenizer.text.tokenizers.icu import IcuWordSegmenter
    return IcuWordSegmenter(language_mapping[algorithm]['iso1'])


CJK_BACKENDS = ('dictionary', 'icu')
THAI_BACKENDS = ('pythainlp', 'icu')


def default_registry(
    cjk_backend: Optional[str] = None,
    thai_backend: Optional[str] = None
) -> SegmenterRegistry:
    """
    Registry wired to the real backends.

    Args:
        cjk_backend: 'dictionary' (jieba / sudachi / soynlp) or 'icu'; defaults to conf.CJK_BACKEND
        thai_backend: 'pythainlp' or 'icu'; defaults to conf.THAI_BACKEND

    Lao, Burmese and Khmer always use ICU word break rules.

    Raises:
        ValueError: on an unknown backend name
    """
    cjk_backend = (cjk_backend or conf.CJK_BACKEND).lower()
    thai_backend = (thai_backend or conf.THAI_BACKEND).lower()
    if cjk_backend not in CJK_BACKENDS:
        raise ValueError(f"Unknown CJK backend: {cjk_backend!r} (expected one of {CJK_BACKENDS})")
    if thai_backend not in THAI_BACKENDS:
        raise ValueError(f"Unknown Thai backend: {thai_backend!r} (expected one of {THAI_BACKENDS})")

    dictionary = {
        Algorithm.CHINESE: _chinese,
        Algorithm.JAPANESE: _japanese,
        Algorithm.KOREAN: _korean,
    }
    factories = {}
    for algorithm in Algorithm:
        if algorithm.pipeline is Pipeline.CJK and cjk_backend == 'dictionary':
            factories[algorithm] = dictionary[algorithm]
        elif algorithm is Algorithm.THAI and thai_backend == 'pythainlp':
            factories[algorithm] = _thai
        elif algorithm.pipeline in (Pipeline.CJK, Pipeline.SOUTHEAST_ASIAN):
            factories[algorithm] = partial(_icu, algorithm)
    logger.debug(f"Segmenter backends: CJK={cjk_backend}, Thai={thai_backend}")
    return SegmenterRegistry(factories)


__all__ = [
    'Segmenter',
    'BoundaryModel',
    'SegmenterRegistry',
    'default_registry',
]
