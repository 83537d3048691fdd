"""
Swedish Stemming Rules
"""

from language_tokenizer.text.stemmer.engine import (
    RuleSet,
    StemState,
    SuffixStep,
    delete,
    keep,
    preceded_by,
    replace,
    standard_regions,
)

VOWELS = frozenset('aeiouyäåö')
S_ENDINGS = tuple('bcdfghjklmnoprtvy')


def regions(word: str, vowels) -> dict:
    return standard_regions(word, vowels, min_r1=3)


main_suffix = SuffixStep([
    (('a', 'arna', 'erna', 'heterna', 'orna', 'ad', 'e', 'ade', 'ande', 'arne',
      'are', 'aste', 'en', 'anden', 'aren', 'heten', 'ern', 'ar', 'er', 'heter',
      'or', 'as', 'arnas', 'ernas', 'ornas', 'es', 'ades', 'andes', 'ens',
      'arens', 'hetens', 'erns', 'at', 'andet', 'het', 'ast'), delete()),
    (('s',), delete(when=preceded_by(*S_ENDINGS))),
], within='r1')

_consonant_pairs = SuffixStep([
    (('dd', 'gd', 'nn', 'dt', 'gt', 'kt', 'tt'), keep),
], within='r1')

other_suffix = SuffixStep([
    (('lig', 'ig', 'els'), delete()),
    (('löst',), replace('lös')),
    (('fullt',), replace('full')),
], within='r1')


def consonant_pair(state: StemState):
    if _consonant_pairs(state):
        state.word = state.word[:-1]


def program(state: StemState):
    main_suffix(state)
    consonant_pair(state)
    other_suffix(state)


RULES = RuleSet(
    name='swedish',
    vowels=VOWELS,
    program=program,
    regions=regions,
)
