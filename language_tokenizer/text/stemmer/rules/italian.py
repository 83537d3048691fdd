"""
Italian Stemming Rules
"""

from language_tokenizer.text.stemmer.engine import (
    RuleSet,
    StemState,
    SuffixStep,
    delete,
    mark_between_vowels,
    replace,
    romance_regions,
)
from language_tokenizer.text.stemmer.rules.romance import amente, then_strip

VOWELS = frozenset('aeiouàèìòù')

_acute_to_grave = str.maketrans({'á': 'à', 'é': 'è', 'í': 'ì', 'ó': 'ò', 'ú': 'ù'})
_postlude_table = str.maketrans({'I': 'i', 'U': 'u'})

PRONOUNS = (
    'ci', 'gli', 'la', 'le', 'li', 'lo', 'mi', 'ne', 'si', 'ti', 'vi',
    'sela', 'sele', 'seli', 'selo', 'sene',
    'tela', 'tele', 'teli', 'telo', 'tene',
    'cela', 'cele', 'celi', 'celo', 'cene',
    'vela', 'vele', 'veli', 'velo', 'vene',
    'gliela', 'gliele', 'glieli', 'glielo', 'gliene',
    'mela', 'mele', 'meli', 'melo', 'mene',
)


def prelude(word: str) -> str:
    # u after q, and u / i between vowels, are consonants
    word = word.translate(_acute_to_grave).replace('qu', 'qU')
    return mark_between_vowels(word, VOWELS, 'ui')


def postlude(word: str) -> str:
    return word.translate(_postlude_table)


def _attached_pronoun(state: StemState, suffix: str) -> bool:
    before = state.preceding(suffix)
    if before.endswith(('ando', 'endo')):
        if len(before) - 4 < state.rv:
            return False
        state.delete(suffix)
        return True
    if before.endswith(('ar', 'er', 'ir')):
        if len(before) - 2 < state.rv:
            return False
        state.replace(suffix, 'e')
        return True
    return False


attached_pronoun = SuffixStep([
    (PRONOUNS, _attached_pronoun),
])


def _ivo(state: StemState, suffix: str) -> bool:
    if not state.in_region(suffix, 'r2'):
        return False
    state.delete(suffix)
    if state.strip('at', 'r2'):
        state.strip('ic', 'r2')
    return True


standard_suffix = SuffixStep([
    (('anza', 'anze', 'ico', 'ici', 'ica', 'ice', 'iche', 'ichi', 'ismo',
      'ismi', 'abile', 'abili', 'ibile', 'ibili', 'ista', 'iste', 'isti',
      'istà', 'istè', 'istì', 'oso', 'osi', 'osa', 'ose', 'mente', 'atrice',
      'atrici', 'ante', 'anti'), delete('r2')),
    (('azione', 'azioni', 'atore', 'atori'), then_strip('ic')),
    (('logia', 'logie'), replace('log', 'r2')),
    (('uzione', 'uzioni', 'usione', 'usioni'), replace('u', 'r2')),
    (('enza', 'enze'), replace('ente', 'r2')),
    (('amento', 'amenti', 'imento', 'imenti'), delete('rv')),
    (('amente',), amente('iv', 'os', 'ic', 'abil')),
    (('ità',), then_strip('abil', 'ic', 'iv')),
    (('ivo', 'ivi', 'iva', 'ive'), _ivo),
])

verb_suffix = SuffixStep([
    (('ammo', 'ando', 'ano', 'are', 'arono', 'asse', 'assero', 'assi', 'assimo',
      'ata', 'ate', 'ati', 'ato', 'ava', 'avamo', 'avano', 'avate', 'avi', 'avo',
      'emmo', 'enda', 'ende', 'endi', 'endo', 'erà', 'erai', 'eranno', 'ere',
      'erebbe', 'erebbero', 'erei', 'eremmo', 'eremo', 'ereste', 'eresti',
      'erete', 'erò', 'erono', 'essero', 'ete', 'eva', 'evamo', 'evano',
      'evate', 'evi', 'evo', 'Iamo', 'iamo', 'immo', 'irà', 'irai', 'iranno',
      'ire', 'irebbe', 'irebbero', 'irei', 'iremmo', 'iremo', 'ireste',
      'iresti', 'irete', 'irò', 'irono', 'isca', 'iscano', 'isce', 'isci',
      'isco', 'iscono', 'issero', 'ita', 'ite', 'iti', 'ito', 'iva', 'ivamo',
      'ivano', 'ivate', 'ivi', 'ivo', 'ono', 'ar', 'ir', 'uta', 'ute', 'uti', 'uto'),
     delete()),
], within='rv')


def vowel_suffix(state: StemState):
    # Final vowel in RV, then an i before it in RV
    if state.word and state.word[-1] in 'aeioàèìò' and state.strip(state.word[-1], 'rv'):
        state.strip('i', 'rv')
    # ch / gh in RV lose the h
    if state.ends(('ch', 'gh')) and state.in_region('ch', 'rv'):
        state.word = state.word[:-1]


def program(state: StemState):
    attached_pronoun(state)
    if not standard_suffix(state):
        verb_suffix(state)
    vowel_suffix(state)


RULES = RuleSet(
    name='italian',
    vowels=VOWELS,
    program=program,
    regions=romance_regions,
    prelude=prelude,
    postlude=postlude,
)
