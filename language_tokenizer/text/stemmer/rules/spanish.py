"""
Spanish Stemming Rules
"""

from language_tokenizer.text.stemmer.engine import (
    RuleSet,
    StemState,
    SuffixStep,
    delete,
    replace,
    romance_regions,
)
from language_tokenizer.text.stemmer.rules.romance import amente, strip_in_rv_after, then_strip

VOWELS = frozenset('aeiouáéíóúü')

_postlude_table = str.maketrans({'á': 'a', 'é': 'e', 'í': 'i', 'ó': 'o', 'ú': 'u'})

PRONOUNS = (
    'me', 'se', 'sela', 'selo', 'selas', 'selos', 'la', 'le', 'lo',
    'las', 'les', 'los', 'nos',
)

# Verb endings a pronoun may be attached to, with the unaccented form they take
_ACCENTED_VERB_ENDINGS = {'iéndo': 'iendo', 'ándo': 'ando', 'ár': 'ar', 'ér': 'er', 'ír': 'ir'}
_PLAIN_VERB_ENDINGS = ('ando', 'iendo', 'ar', 'er', 'ir')


def postlude(word: str) -> str:
    return word.translate(_postlude_table)


def _verb_ending_before(text: str):
    """Longest verb ending that closes `text`, or None."""
    candidates = list(_ACCENTED_VERB_ENDINGS) + list(_PLAIN_VERB_ENDINGS) + ['yendo']
    for ending in sorted(candidates, key=len, reverse=True):
        if text.endswith(ending):
            return ending
    return None


def _attached_pronoun(state: StemState, suffix: str) -> bool:
    before = state.preceding(suffix)
    ending = _verb_ending_before(before)
    if ending is None or len(before) - len(ending) < state.rv:
        return False
    if ending in _ACCENTED_VERB_ENDINGS:
        # Drop the pronoun and the accent the verb carried because of it
        state.word = before[:len(before) - len(ending)] + _ACCENTED_VERB_ENDINGS[ending]
        return True
    if ending == 'yendo' and not before[:-len(ending)].endswith('u'):
        return False
    state.delete(suffix)
    return True


attached_pronoun = SuffixStep([
    (PRONOUNS, _attached_pronoun),
])


standard_suffix = SuffixStep([
    (('anza', 'anzas', 'ico', 'ica', 'icos', 'icas', 'ismo', 'ismos', 'able',
      'ables', 'ible', 'ibles', 'ista', 'istas', 'oso', 'osa', 'osos', 'osas',
      'amiento', 'amientos', 'imiento', 'imientos'), delete('r2')),
    (('adora', 'ador', 'ación', 'adoras', 'adores', 'aciones', 'ante', 'antes',
      'ancia', 'ancias'), then_strip('ic')),
    (('logía', 'logías'), replace('log', 'r2')),
    (('ución', 'uciones'), replace('u', 'r2')),
    (('encia', 'encias'), replace('ente', 'r2')),
    (('amente',), amente('iv', 'os', 'ic', 'ad')),
    (('mente',), then_strip('ante', 'able', 'ible')),
    (('idad', 'idades'), then_strip('abil', 'ic', 'iv')),
    (('iva', 'ivo', 'ivas', 'ivos'), then_strip('at')),
])


def _after_u(state: StemState, suffix: str) -> bool:
    if state.preceding(suffix).endswith('u'):
        state.delete(suffix)
        return True
    return False


y_verb_suffix = SuffixStep([
    (('ya', 'ye', 'yan', 'yen', 'yeron', 'yendo', 'yo', 'yó', 'yas', 'yes',
      'yais', 'yamos'), _after_u),
], within='rv')


def _drop_gu(state: StemState, suffix: str) -> bool:
    # en, es, éis, emos also take the u of a preceding gu
    if state.preceding(suffix).endswith('gu'):
        state.word = state.preceding(suffix)[:-1]
    else:
        state.delete(suffix)
    return True


verb_suffix = SuffixStep([
    (('en', 'es', 'éis', 'emos'), _drop_gu),
    (('arían', 'arías', 'arán', 'arás', 'aríais', 'aría', 'aréis', 'aríamos',
      'aremos', 'ará', 'aré', 'erían', 'erías', 'erán', 'erás', 'eríais', 'ería',
      'eréis', 'eríamos', 'eremos', 'erá', 'eré', 'irían', 'irías', 'irán',
      'irás', 'iríais', 'iría', 'iréis', 'iríamos', 'iremos', 'irá', 'iré',
      'aba', 'ada', 'ida', 'ía', 'ara', 'iera', 'ad', 'ed', 'id', 'ase', 'iese',
      'aste', 'iste', 'an', 'aban', 'ían', 'aran', 'ieran', 'asen', 'iesen',
      'aron', 'ieron', 'ado', 'ido', 'ando', 'iendo', 'ió', 'ar', 'er', 'ir',
      'as', 'abas', 'adas', 'idas', 'ías', 'aras', 'ieras', 'ases', 'ieses',
      'ís', 'áis', 'abais', 'íais', 'arais', 'ierais', 'aseis', 'ieseis',
      'asteis', 'isteis', 'ados', 'idos', 'amos', 'ábamos', 'íamos', 'imos',
      'áramos', 'iéramos', 'iésemos', 'ásemos'), delete()),
], within='rv')


strip_u_after_g = strip_in_rv_after('u', 'g')


def _residual_e(state: StemState, suffix: str) -> bool:
    if not state.in_region(suffix, 'rv'):
        return False
    state.delete(suffix)
    strip_u_after_g(state)
    return True


residual_suffix = SuffixStep([
    (('os', 'a', 'o', 'á', 'í', 'ó'), delete('rv')),
    (('e', 'é'), _residual_e),
])


def program(state: StemState):
    attached_pronoun(state)
    if not standard_suffix(state) and not y_verb_suffix(state):
        verb_suffix(state)
    residual_suffix(state)


RULES = RuleSet(
    name='spanish',
    vowels=VOWELS,
    program=program,
    regions=romance_regions,
    postlude=postlude,
)
