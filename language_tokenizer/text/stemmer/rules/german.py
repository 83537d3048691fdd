"""
German Stemming Rules
"""

from language_tokenizer.text.stemmer.engine import (
    RuleSet,
    StemState,
    SuffixStep,
    delete,
    mark_between_vowels,
    not_preceded_by,
    preceded_by,
    standard_regions,
)

VOWELS = frozenset('aeiouyäöü')
S_ENDINGS = tuple('bdfghklmnrt')
ST_ENDINGS = tuple('bdfghklmnt')

_postlude_table = str.maketrans({'U': 'u', 'Y': 'y', 'ä': 'a', 'ö': 'o', 'ü': 'u'})


def prelude(word: str) -> str:
    # u and y between vowels are consonants
    return mark_between_vowels(word.replace('ß', 'ss'), VOWELS, 'uy')


def postlude(word: str) -> str:
    return word.translate(_postlude_table)


def regions(word: str, vowels) -> dict:
    return standard_regions(word, vowels, min_r1=3)


def _e_en_es(state: StemState, suffix: str) -> bool:
    if not state.in_region(suffix, 'r1'):
        return False
    state.delete(suffix)
    if state.ends('niss'):
        state.word = state.word[:-1]
    return True


def _st(state: StemState, suffix: str) -> bool:
    # st after a valid st-ending that is itself preceded by at least 3 letters
    before = state.preceding(suffix)
    if state.in_region(suffix, 'r1') and before.endswith(ST_ENDINGS) and len(before) >= 4:
        state.delete(suffix)
        return True
    return False


def _end_ung(state: StemState, suffix: str) -> bool:
    if not state.in_region(suffix, 'r2'):
        return False
    state.delete(suffix)
    if state.ends('ig') and state.in_region('ig', 'r2') and not state.preceding('ig').endswith('e'):
        state.delete('ig')
    return True


def _lich_heit(state: StemState, suffix: str) -> bool:
    if not state.in_region(suffix, 'r2'):
        return False
    state.delete(suffix)
    for ending in ('er', 'en'):
        if state.ends(ending):
            state.strip(ending, 'r1')
            break
    return True


def _keit(state: StemState, suffix: str) -> bool:
    if not state.in_region(suffix, 'r2'):
        return False
    state.delete(suffix)
    for ending in ('lich', 'ig'):
        if state.ends(ending):
            state.strip(ending, 'r2')
            break
    return True


step_1 = SuffixStep([
    (('em', 'ern', 'er'), delete('r1')),
    (('e', 'en', 'es'), _e_en_es),
    (('s',), delete('r1', when=preceded_by(*S_ENDINGS))),
])

step_2 = SuffixStep([
    (('en', 'er', 'est'), delete('r1')),
    (('st',), _st),
])

step_3 = SuffixStep([
    (('end', 'ung'), _end_ung),
    (('ig', 'ik', 'isch'), delete('r2', when=not_preceded_by('e'))),
    (('lich', 'heit'), _lich_heit),
    (('keit',), _keit),
])


def program(state: StemState):
    step_1(state)
    step_2(state)
    step_3(state)


RULES = RuleSet(
    name='german',
    vowels=VOWELS,
    program=program,
    regions=regions,
    prelude=prelude,
    postlude=postlude,
)
