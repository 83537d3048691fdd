"""
Norwegian Stemming Rules
"""

from language_tokenizer.text.stemmer.engine import (
    RuleSet,
    StemState,
    SuffixStep,
    delete,
    keep,
    replace,
    standard_regions,
)

VOWELS = frozenset('aeiouyæåø')
S_ENDINGS = tuple('bcdfghjlmnoprtvyz')


def regions(word: str, vowels) -> dict:
    return standard_regions(word, vowels, min_r1=3)


def _valid_s(state: StemState, suffix: str) -> bool:
    # s after a valid s-ending, or after a k that follows a non-vowel
    before = state.preceding(suffix)
    if before.endswith(S_ENDINGS):
        return True
    return len(before) >= 2 and before[-1] == 'k' and before[-2] not in VOWELS


main_suffix = SuffixStep([
    (('a', 'e', 'ede', 'ande', 'ende', 'ane', 'ene', 'hetene', 'en', 'heten', 'ar',
      'er', 'heter', 'as', 'es', 'edes', 'endes', 'enes', 'hetenes', 'ens',
      'hetens', 'ers', 'ets', 'et', 'het', 'ast'), delete()),
    (('s',), delete(when=_valid_s)),
    (('erte', 'ert'), replace('er')),
], within='r1')

_consonant_pairs = SuffixStep([
    (('dt', 'vt'), keep),
], within='r1')

other_suffix = SuffixStep([
    (('leg', 'eleg', 'ig', 'eig', 'lig', 'elig', 'els', 'lov', 'elov', 'slov',
      'hetslov'), delete()),
], within='r1')


def consonant_pair(state: StemState):
    # dt, vt inside R1 lose the t
    if _consonant_pairs(state):
        state.word = state.word[:-1]


def program(state: StemState):
    main_suffix(state)
    consonant_pair(state)
    other_suffix(state)


RULES = RuleSet(
    name='norwegian',
    vowels=VOWELS,
    program=program,
    regions=regions,
)
