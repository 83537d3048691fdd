"""
Danish Stemming Rules
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

VOWELS = frozenset('aeiouyæåø')
S_ENDINGS = tuple('abcdfghjklmnoprtvyzå')


def regions(word: str, vowels) -> dict:
    return standard_regions(word, vowels, min_r1=3)


main_suffix = SuffixStep([
    (('hed', 'ethed', 'ered', 'e', 'erede', 'ende', 'erende', 'ene', 'erne', 'ere',
      'en', 'heden', 'eren', 'er', 'heder', 'erer', 'heds', 'es', 'endes',
      'erendes', 'enes', 'ernes', 'eres', 'ens', 'hedens', 'erens', 'ers', 'ets',
      'erets', 'et', 'eret'), delete()),
    (('s',), delete(when=preceded_by(*S_ENDINGS))),
], within='r1')

_consonant_pairs = SuffixStep([
    (('gd', 'dt', 'gt', 'kt'), keep),
], within='r1')


def consonant_pair(state: StemState):
    # gd, dt, gt, kt inside R1 lose their last letter
    if _consonant_pairs(state):
        state.word = state.word[:-1]


def _ig_lig_elig_els(state: StemState, suffix: str) -> bool:
    state.delete(suffix)
    consonant_pair(state)
    return True


other_suffix = SuffixStep([
    (('ig', 'lig', 'elig', 'els'), _ig_lig_elig_els),
    (('løst',), replace('løs')),
], within='r1')


def undouble(state: StemState):
    # A doubled consonant at the end (last letter inside R1) loses one letter
    word = state.word
    if (
        len(word) >= 2
        and len(word) - 1 >= state.r1
        and word[-1] not in VOWELS
        and word[-1] == word[-2]
    ):
        state.word = word[:-1]


def program(state: StemState):
    main_suffix(state)
    consonant_pair(state)
    if state.ends('igst'):
        state.word = state.word[:-2]
    other_suffix(state)
    undouble(state)


RULES = RuleSet(
    name='danish',
    vowels=VOWELS,
    program=program,
    regions=regions,
)
