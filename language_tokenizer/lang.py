"""
Language Module
Defines the closed set of tokenizer algorithms and their per-language settings.

Every Algorithm member maps to exactly one pipeline. Alphabetic members also
carry the settings the normalizer and stemmer need (diacritic policy,
contraction clitics, elided prefixes, case folding table, minimum stem length).
"""

from enum import Enum
from types import MappingProxyType
from typing import Optional


class Pipeline(Enum):
    """Segmentation pipeline an algorithm is dispatched to."""
    ALPHABETIC = 'alphabetic'
    CJK = 'cjk'
    SOUTHEAST_ASIAN = 'southeast_asian'


class Algorithm(Enum):
    """
    Language / script selector.

    Values are stable integer codes: NONE is -1, the remaining members are
    numbered in declaration order starting at 0.

    LOVINS has no native rule table and is served by PyStemmer only when the
    installed build compiles the 'lovins' algorithm. Current PyStemmer 3.x
    wheels do not, and stemming LOVINS then raises UnsupportedLanguage
    (see stemmer.supported_algorithms()).
    """
    NONE = -1

    ARABIC = 0
    ARMENIAN = 1
    BASQUE = 2
    CATALAN = 3
    DANISH = 4
    DUTCH = 5
    DUTCH_PORTER = 6
    ENGLISH = 7
    ESPERANTO = 8
    ESTONIAN = 9
    FINNISH = 10
    FRENCH = 11
    GERMAN = 12
    GREEK = 13
    HINDI = 14
    HUNGARIAN = 15
    INDONESIAN = 16
    IRISH = 17
    ITALIAN = 18
    LITHUANIAN = 19
    LOVINS = 20
    NEPALI = 21
    NORWEGIAN = 22
    PORTER = 23
    PORTUGUESE = 24
    ROMANIAN = 25
    RUSSIAN = 26
    SERBIAN = 27
    SPANISH = 28
    SWEDISH = 29
    TAMIL = 30
    TURKISH = 31
    YIDDISH = 32

    JAPANESE = 33
    CHINESE = 34
    KOREAN = 35

    THAI = 36
    BURMESE = 37
    LAO = 38
    KHMER = 39

    @property
    def code(self) -> int:
        return self.value

    @property
    def pipeline(self) -> Optional[Pipeline]:
        settings = language_mapping.get(self)
        return settings['pipeline'] if settings else None

    def is_snowball(self) -> bool:
        return self.pipeline is Pipeline.ALPHABETIC

    def is_cjk(self) -> bool:
        return self.pipeline is Pipeline.CJK

    def is_southeast_asian(self) -> bool:
        return self.pipeline is Pipeline.SOUTHEAST_ASIAN

    @classmethod
    def from_code(cls, code: int) -> 'Algorithm':
        """Return the member for an integer code, NONE for unknown codes."""
        try:
            return cls(code)
        except ValueError:
            return cls.NONE

    @classmethod
    def from_name(cls, name: str) -> 'Algorithm':
        """
        Look up an algorithm by member name or ISO 639-1 / 639-3 code.

        Args:
            name: e.g. 'english', 'DutchPorter', 'dutch_porter', 'en', 'eng'

        Returns:
            Algorithm: matching member

        Raises:
            KeyError: if nothing matches
        """
        key = name.strip().lower().replace('-', '_')
        compact = key.replace('_', '')
        for member in cls:
            if member.name.lower().replace('_', '') == compact:
                return member
        for member, settings in language_mapping.items():
            if key and key in (settings['iso1'], settings['iso3']):
                return member
        raise KeyError(name)


ENGLISH_CLITICS = ('s', 're', 've', 'll', 'd', 'm')
FRENCH_ELISIONS = (
    'l', 'd', 'j', 'm', 'n', 's', 't', 'c', 'qu',
    'jusqu', 'lorsqu', 'puisqu', 'quoiqu'
)
ITALIAN_ELISIONS = (
    'l', 'd', 'c', 'un', 'dell', 'all', 'dall', 'nell', 'sull',
    'coll', 'pell', 'quest', 'quell', 'sant'
)
CATALAN_ELISIONS = ('l', 'd', 'm', 'n', 's', 't')
TURKISH_FOLD = MappingProxyType({'I': 'ı', 'İ': 'i'})


def _alphabetic(
    iso1: str,
    iso3: str,
    stemmer: str,
    strip_diacritics: bool = False,
    clitics: tuple = (),
    elisions: tuple = (),
    fold: Optional[MappingProxyType] = None,
    min_length: int = 3
) -> MappingProxyType:
    return MappingProxyType({
        'pipeline': Pipeline.ALPHABETIC,
        'iso1': iso1,
        'iso3': iso3,
        'stemmer': stemmer,
        'strip_diacritics': strip_diacritics,
        'clitics': clitics,
        'elisions': elisions,
        'fold': fold,
        'min_length': min_length,
    })


def _delegated(pipeline: Pipeline, iso1: str, iso3: str) -> MappingProxyType:
    return MappingProxyType({
        'pipeline': pipeline,
        'iso1': iso1,
        'iso3': iso3,
        'stemmer': None,
        'strip_diacritics': False,
        'clitics': (),
        'elisions': (),
        'fold': None,
        'min_length': 1,
    })


# `stemmer` is the Snowball algorithm name used by the PyStemmer backend.
# Backend languages use min_length 1 so that the Snowball algorithm sees every word.
language_mapping = MappingProxyType({
    Algorithm.ARABIC: _alphabetic('ar', 'ara', 'arabic', min_length=1),
    Algorithm.ARMENIAN: _alphabetic('hy', 'hye', 'armenian', min_length=1),
    Algorithm.BASQUE: _alphabetic('eu', 'eus', 'basque', min_length=1),
    Algorithm.CATALAN: _alphabetic('ca', 'cat', 'catalan', elisions=CATALAN_ELISIONS, min_length=1),
    Algorithm.DANISH: _alphabetic('da', 'dan', 'danish'),
    Algorithm.DUTCH: _alphabetic('nl', 'nld', 'dutch', min_length=1),
    Algorithm.DUTCH_PORTER: _alphabetic('', 'nld-porter', 'dutch_porter'),
    Algorithm.ENGLISH: _alphabetic('en', 'eng', 'english', strip_diacritics=True, clitics=ENGLISH_CLITICS),
    Algorithm.ESPERANTO: _alphabetic('eo', 'epo', 'esperanto', min_length=1),
    Algorithm.ESTONIAN: _alphabetic('et', 'est', 'estonian', min_length=1),
    Algorithm.FINNISH: _alphabetic('fi', 'fin', 'finnish', min_length=1),
    Algorithm.FRENCH: _alphabetic('fr', 'fra', 'french', elisions=FRENCH_ELISIONS, min_length=1),
    Algorithm.GERMAN: _alphabetic('de', 'deu', 'german'),
    Algorithm.GREEK: _alphabetic('el', 'ell', 'greek', min_length=1),
    Algorithm.HINDI: _alphabetic('hi', 'hin', 'hindi', min_length=1),
    Algorithm.HUNGARIAN: _alphabetic('hu', 'hun', 'hungarian', min_length=1),
    Algorithm.INDONESIAN: _alphabetic('id', 'ind', 'indonesian', min_length=1),
    Algorithm.IRISH: _alphabetic('ga', 'gle', 'irish', min_length=1),
    Algorithm.ITALIAN: _alphabetic('it', 'ita', 'italian', elisions=ITALIAN_ELISIONS),
    Algorithm.LITHUANIAN: _alphabetic('lt', 'lit', 'lithuanian', min_length=1),
    Algorithm.LOVINS: _alphabetic('', 'eng-lovins', 'lovins', strip_diacritics=True, clitics=ENGLISH_CLITICS, min_length=1),
    Algorithm.NEPALI: _alphabetic('ne', 'nep', 'nepali', min_length=1),
    Algorithm.NORWEGIAN: _alphabetic('no', 'nor', 'norwegian'),
    Algorithm.PORTER: _alphabetic('', 'eng-porter', 'porter', strip_diacritics=True, clitics=ENGLISH_CLITICS, min_length=1),
    Algorithm.PORTUGUESE: _alphabetic('pt', 'por', 'portuguese'),
    Algorithm.ROMANIAN: _alphabetic('ro', 'ron', 'romanian', min_length=1),
    Algorithm.RUSSIAN: _alphabetic('ru', 'rus', 'russian', min_length=1),
    Algorithm.SERBIAN: _alphabetic('sr', 'srp', 'serbian', min_length=1),
    Algorithm.SPANISH: _alphabetic('es', 'spa', 'spanish'),
    Algorithm.SWEDISH: _alphabetic('sv', 'swe', 'swedish'),
    Algorithm.TAMIL: _alphabetic('ta', 'tam', 'tamil', min_length=1),
    Algorithm.TURKISH: _alphabetic('tr', 'tur', 'turkish', fold=TURKISH_FOLD, min_length=1),
    Algorithm.YIDDISH: _alphabetic('yi', 'yid', 'yiddish', min_length=1),

    Algorithm.JAPANESE: _delegated(Pipeline.CJK, 'ja', 'jpn'),
    Algorithm.CHINESE: _delegated(Pipeline.CJK, 'zh', 'zho'),
    Algorithm.KOREAN: _delegated(Pipeline.CJK, 'ko', 'kor'),

    Algorithm.THAI: _delegated(Pipeline.SOUTHEAST_ASIAN, 'th', 'tha'),
    Algorithm.BURMESE: _delegated(Pipeline.SOUTHEAST_ASIAN, 'my', 'mya'),
    Algorithm.LAO: _delegated(Pipeline.SOUTHEAST_ASIAN, 'lo', 'lao'),
    Algorithm.KHMER: _delegated(Pipeline.SOUTHEAST_ASIAN, 'km', 'khm'),
})
