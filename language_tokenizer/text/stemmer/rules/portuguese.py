"""
Portuguese Stemming Rules
"""

from language_tokenizer.text.stemmer.engine import (
    RuleSet,
    StemState,
    SuffixStep,
    delete,
    preceded_by,
    replace,
    romance_regions,
)
from language_tokenizer.text.stemmer.rules.romance import amente, strip_in_rv_after, then_strip

VOWELS = frozenset('aeiouáéíóúâêô')


def prelude(word: str) -> str:
    # Nasal vowels become two letters so that a~ and o~ are never vowels
    return word.replace('ã', 'a~').replace('õ', 'o~')


def postlude(word: str) -> str:
    return word.replace('a~', 'ã').replace('o~', 'õ')


standard_suffix = SuffixStep([
    (('eza', 'ezas', 'ico', 'ica', 'icos', 'icas', 'ismo', 'ismos', 'ável',
      'ível', 'ista', 'istas', 'oso', 'osa', 'osos', 'osas', 'amento',
      'amentos', 'imento', 'imentos', 'adora', 'ador', 'aça~o', 'adoras',
      'adores', 'aço~es', 'ante', 'antes', 'ância'), delete('r2')),
    (('logia', 'logias'), replace('log', 'r2')),
    (('uça~o', 'uço~es'), replace('u', 'r2')),
    (('ência', 'ências'), replace('ente', 'r2')),
    (('amente',), amente('iv', 'os', 'ic', 'ad')),
    (('mente',), then_strip('ante', 'avel', 'ível')),
    (('idade', 'idades'), then_strip('abil', 'ic', 'iv')),
    (('iva', 'ivo', 'ivas', 'ivos'), then_strip('at')),
    (('ira', 'iras'), replace('ir', 'rv', when=preceded_by('e'))),
])

verb_suffix = SuffixStep([
    (('ada', 'ida', 'ia', 'aria', 'eria', 'iria', 'ará', 'ara', 'erá', 'era',
      'irá', 'ava', 'asse', 'esse', 'isse', 'aste', 'este', 'iste', 'ei',
      'arei', 'erei', 'irei', 'am', 'iam', 'ariam', 'eriam', 'iriam', 'aram',
      'eram', 'iram', 'avam', 'em', 'arem', 'erem', 'irem', 'assem', 'essem',
      'issem', 'ado', 'ido', 'ando', 'endo', 'indo', 'ara~o', 'era~o', 'ira~o',
      'ar', 'er', 'ir', 'as', 'adas', 'idas', 'ias', 'arias', 'erias', 'irias',
      'arás', 'aras', 'erás', 'eras', 'irás', 'avas', 'es', 'ardes', 'erdes',
      'irdes', 'ares', 'eres', 'ires', 'asses', 'esses', 'isses', 'astes',
      'estes', 'istes', 'is', 'ais', 'eis', 'íeis', 'aríeis', 'eríeis',
      'iríeis', 'áreis', 'areis', 'éreis', 'ereis', 'íreis', 'ireis', 'ásseis',
      'ésseis', 'ísseis', 'áveis', 'ados', 'idos', 'ámos', 'amos', 'íamos',
      'aríamos', 'eríamos', 'iríamos', 'áramos', 'éramos', 'íramos', 'ávamos',
      'emos', 'aremos', 'eremos', 'iremos', 'ássemos', 'êssemos', 'íssemos',
      'imos', 'armos', 'ermos', 'irmos', 'eu', 'iu', 'ou', 'ira', 'iras'),
     delete()),
], within='rv')

strip_u_after_g = strip_in_rv_after('u', 'g')
strip_i_after_c = strip_in_rv_after('i', 'c')

residual_suffix = SuffixStep([
    (('os', 'a', 'i', 'o', 'á', 'í', 'ó'), delete('rv')),
])


def _residual_e(state: StemState, suffix: str) -> bool:
    if not state.in_region(suffix, 'rv'):
        return False
    state.delete(suffix)
    # gu -> g, ci -> c when the u / i is in RV
    if not strip_u_after_g(state):
        strip_i_after_c(state)
    return True


residual_form = SuffixStep([
    (('e', 'é', 'ê'), _residual_e),
    (('ç',), replace('c')),
])


def program(state: StemState):
    if standard_suffix(state) or verb_suffix(state):
        strip_i_after_c(state)
    else:
        residual_suffix(state)
    residual_form(state)


RULES = RuleSet(
    name='portuguese',
    vowels=VOWELS,
    program=program,
    regions=romance_regions,
    prelude=prelude,
    postlude=postlude,
)
