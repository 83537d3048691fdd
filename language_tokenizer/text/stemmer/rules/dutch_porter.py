"""
Dutch Stemming Rules
Classic (Porter-style) Dutch algorithm.
"""

from language_tokenizer.text.stemmer.engine import (
    RuleSet,
    StemState,
    SuffixStep,
    delete,
    preceded_by_non_vowel,
    standard_regions,
)

VOWELS = frozenset('aeiouyè')

_accent_table = str.maketrans({
    'ä': 'a', 'á': 'a',
    'ë': 'e', 'é': 'e',
    'ï': 'i', 'í': 'i',
    'ö': 'o', 'ó': 'o',
    'ü': 'u', 'ú': 'u',
})

_postlude_table = str.maketrans({'I': 'i', 'Y': 'y'})

E_FOUND = 'e_found'


def prelude(word: str) -> str:
    # Initial y, y after a vowel and i between two vowels are consonants
    chars = list(word.translate(_accent_table))
    if chars and chars[0] == 'y':
        chars[0] = 'Y'
    for i in range(1, len(chars)):
        if chars[i - 1] not in VOWELS:
            continue
        if chars[i] == 'i' and i + 1 < len(chars) and chars[i + 1] in VOWELS:
            chars[i] = 'I'
        elif chars[i] == 'y':
            chars[i] = 'Y'
    return ''.join(chars)


def postlude(word: str) -> str:
    return word.translate(_postlude_table)


def regions(word: str, vowels) -> dict:
    return standard_regions(word, vowels, min_r1=3)


def undouble(state: StemState):
    if state.word.endswith(('kk', 'dd', 'tt')):
        state.word = state.word[:-1]


def _en_ending(state: StemState, suffix: str) -> bool:
    # en/ene in R1 after a non-vowel, unless the word part is ...gem
    before = state.preceding(suffix)
    if not state.in_region(suffix, 'r1'):
        return False
    if not before or before[-1] in VOWELS or before.endswith('gem'):
        return False
    state.delete(suffix)
    undouble(state)
    return True


def _heden(state: StemState, suffix: str) -> bool:
    if state.in_region(suffix, 'r1'):
        state.replace(suffix, 'heid')
        return True
    return False


def e_ending(state: StemState) -> bool:
    # Final e in R1 after a non-vowel
    state.flags.discard(E_FOUND)
    word = state.word
    if not word.endswith('e') or not state.in_region('e', 'r1'):
        return False
    if len(word) < 2 or word[-2] in VOWELS:
        return False
    state.delete('e')
    state.flags.add(E_FOUND)
    undouble(state)
    return True


def _end_ing(state: StemState, suffix: str) -> bool:
    if not state.in_region(suffix, 'r2'):
        return False
    state.delete(suffix)
    if state.ends('ig') and state.in_region('ig', 'r2') and not state.preceding('ig').endswith('e'):
        state.delete('ig')
    else:
        undouble(state)
    return True


def _ig(state: StemState, suffix: str) -> bool:
    if state.in_region(suffix, 'r2') and not state.preceding(suffix).endswith('e'):
        state.delete(suffix)
        return True
    return False


def _lijk(state: StemState, suffix: str) -> bool:
    if not state.in_region(suffix, 'r2'):
        return False
    state.delete(suffix)
    e_ending(state)
    return True


def _baar(state: StemState, suffix: str) -> bool:
    return state.strip(suffix, 'r2')


def _bar(state: StemState, suffix: str) -> bool:
    if state.in_region(suffix, 'r2') and E_FOUND in state.flags:
        state.delete(suffix)
        return True
    return False


step_1 = SuffixStep([
    (('heden',), _heden),
    (('en', 'ene'), _en_ending),
    (('s', 'se'), delete('r1', when=preceded_by_non_vowel(exclude='j'))),
])

step_3b = SuffixStep([
    (('end', 'ing'), _end_ing),
    (('ig',), _ig),
    (('lijk',), _lijk),
    (('baar',), _baar),
    (('bar',), _bar),
])


def step_3a(state: StemState):
    # heid in R2, not after c; a preceding en is then treated as in step 1
    if state.ends('heid') and state.in_region('heid', 'r2') and not state.preceding('heid').endswith('c'):
        state.delete('heid')
        if state.ends('en'):
            _en_ending(state, 'en')


def undouble_vowel(state: StemState):
    # CVD with a doubled vowel: maan -> man
    word = state.word
    if len(word) < 4:
        return
    last, pair, first = word[-1], word[-3:-1], word[-4]
    if last in VOWELS or last == 'I':
        return
    if pair in ('aa', 'ee', 'oo', 'uu') and first not in VOWELS:
        state.word = word[:-2] + last


def program(state: StemState):
    step_1(state)
    e_ending(state)
    step_3a(state)
    step_3b(state)
    undouble_vowel(state)


RULES = RuleSet(
    name='dutch_porter',
    vowels=VOWELS,
    program=program,
    regions=regions,
    prelude=prelude,
    postlude=postlude,
)
