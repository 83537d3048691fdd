"""
English Stemming Rules
Porter2 ("English") algorithm.
"""

from types import MappingProxyType

from language_tokenizer.text.stemmer.engine import (
    RuleSet,
    StemState,
    SuffixStep,
    delete,
    find_region,
    keep,
    preceded_by,
    replace,
)

VOWELS = frozenset('aeiouy')
DOUBLES = ('bb', 'dd', 'ff', 'gg', 'mm', 'nn', 'pp', 'rr', 'tt')
LI_ENDINGS = tuple('cdeghkmnrt')

# Words whose R1 starts after these prefixes rather than at the usual place
R1_PREFIXES = ('gener', 'commun', 'arsen')

EXCEPTIONS = MappingProxyType({
    'skis': 'ski',
    'skies': 'sky',
    'dying': 'die',
    'lying': 'lie',
    'tying': 'tie',
    'idly': 'idl',
    'gently': 'gentl',
    'ugly': 'ugli',
    'early': 'earli',
    'only': 'onli',
    'singly': 'singl',
    'sky': 'sky',
    'news': 'news',
    'howe': 'howe',
    'atlas': 'atlas',
    'cosmos': 'cosmos',
    'bias': 'bias',
    'andes': 'andes',
})

# Left untouched once plural endings are gone
INVARIANT_AFTER_STEP_1A = frozenset({
    'inning', 'outing', 'canning', 'herring', 'earring',
    'proceed', 'exceed', 'succeed',
})


def prelude(word: str) -> str:
    # Initial y, and y after a vowel, are consonants: mark them as Y
    if word.startswith("'"):
        word = word[1:]
    chars = list(word)
    if chars and chars[0] == 'y':
        chars[0] = 'Y'
    for i in range(1, len(chars)):
        if chars[i] == 'y' and chars[i - 1] in VOWELS:
            chars[i] = 'Y'
    return ''.join(chars)


def postlude(word: str) -> str:
    return word.replace('Y', 'y')


def regions(word: str, vowels) -> dict:
    for prefix in R1_PREFIXES:
        if word.startswith(prefix):
            r1 = len(prefix)
            break
    else:
        r1 = find_region(word, vowels)
    return {'r1': r1, 'r2': find_region(word, vowels, r1)}


def ends_short_syllable(word: str) -> bool:
    """
    A short syllable is a vowel followed by a non-vowel other than w, x or Y
    and preceded by a non-vowel, or a vowel at the start of the word
    followed by a non-vowel.
    """
    if len(word) >= 3:
        return (
            word[-3] not in VOWELS
            and word[-2] in VOWELS
            and word[-1] not in VOWELS
            and word[-1] not in 'wxY'
        )
    return len(word) == 2 and word[0] in VOWELS and word[1] not in VOWELS


def _has_vowel(text: str) -> bool:
    return any(ch in VOWELS for ch in text)


def _ied(state: StemState, suffix: str) -> bool:
    state.replace(suffix, 'i' if len(state.preceding(suffix)) > 1 else 'ie')
    return True


def _plural_s(state: StemState, suffix: str) -> bool:
    # The letter right before the s does not count
    if _has_vowel(state.preceding(suffix)[:-1]):
        state.delete(suffix)
        return True
    return False


def _eed(state: StemState, suffix: str) -> bool:
    if state.in_region(suffix, 'r1'):
        state.replace(suffix, 'ee')
        return True
    return False


def _ed_ing(state: StemState, suffix: str) -> bool:
    if not _has_vowel(state.preceding(suffix)):
        return False
    state.delete(suffix)
    word = state.word
    if word.endswith(('at', 'bl', 'iz')):
        state.word = word + 'e'
    elif word.endswith(DOUBLES):
        state.word = word[:-1]
    elif state.r1 == len(word) and ends_short_syllable(word):
        state.word = word + 'e'
    return True


def _final_e(state: StemState, suffix: str) -> bool:
    if state.in_region(suffix, 'r2') or (
        state.in_region(suffix, 'r1') and not ends_short_syllable(state.preceding(suffix))
    ):
        state.delete(suffix)
        return True
    return False


step_0 = SuffixStep([
    (("'s'", "'s", "'"), delete()),
])

step_1a = SuffixStep([
    (('sses',), replace('ss')),
    (('ied', 'ies'), _ied),
    (('s',), _plural_s),
    (('us', 'ss'), keep),
])

step_1b = SuffixStep([
    (('eed', 'eedly'), _eed),
    (('ed', 'edly', 'ing', 'ingly'), _ed_ing),
])

step_2 = SuffixStep([
    (('tional',), replace('tion', 'r1')),
    (('enci',), replace('ence', 'r1')),
    (('anci',), replace('ance', 'r1')),
    (('abli',), replace('able', 'r1')),
    (('entli',), replace('ent', 'r1')),
    (('izer', 'ization'), replace('ize', 'r1')),
    (('ational', 'ation', 'ator'), replace('ate', 'r1')),
    (('alism', 'aliti', 'alli'), replace('al', 'r1')),
    (('fulness',), replace('ful', 'r1')),
    (('ousli', 'ousness'), replace('ous', 'r1')),
    (('iveness', 'iviti'), replace('ive', 'r1')),
    (('biliti', 'bli'), replace('ble', 'r1')),
    (('ogi',), replace('og', 'r1', when=preceded_by('l'))),
    (('fulli',), replace('ful', 'r1')),
    (('lessli',), replace('less', 'r1')),
    (('li',), delete('r1', when=preceded_by(*LI_ENDINGS))),
])

step_3 = SuffixStep([
    (('tional',), replace('tion', 'r1')),
    (('ational',), replace('ate', 'r1')),
    (('alize',), replace('al', 'r1')),
    (('icate', 'iciti', 'ical'), replace('ic', 'r1')),
    (('ful', 'ness'), delete('r1')),
    (('ative',), delete('r2')),
])

step_4 = SuffixStep([
    (('al', 'ance', 'ence', 'er', 'ic', 'able', 'ible', 'ant', 'ement', 'ment',
      'ent', 'ism', 'ate', 'iti', 'ous', 'ive', 'ize'), delete('r2')),
    (('ion',), delete('r2', when=preceded_by('s', 't'))),
])

step_5 = SuffixStep([
    (('e',), _final_e),
    (('l',), delete('r2', when=preceded_by('l'))),
])


def step_1c(state: StemState):
    # y/Y -> i after a non-vowel that is not the first letter
    word = state.word
    if len(word) > 2 and word[-1] in 'yY' and word[-2] not in VOWELS:
        state.word = word[:-1] + 'i'


def program(state: StemState):
    step_0(state)
    step_1a(state)
    if state.word in INVARIANT_AFTER_STEP_1A:
        return
    step_1b(state)
    step_1c(state)
    step_2(state)
    step_3(state)
    step_4(state)
    step_5(state)


RULES = RuleSet(
    name='english',
    vowels=VOWELS,
    program=program,
    regions=regions,
    prelude=prelude,
    postlude=postlude,
    exceptions=EXCEPTIONS,
)
