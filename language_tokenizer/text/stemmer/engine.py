"""
Stemming Rule Engine Module
Implements the staged suffix-stripping procedure shared by the native rule tables.

A rule table is a RuleSet: a vowel table, a prelude, a region finder, a
program of ordered SuffixSteps and a postlude. Each SuffixStep looks up the
longest suffix of its candidate list at the end of the word and runs the
action attached to it. Actions check region and context conditions before
rewriting the word.

Regions are absolute offsets from the start of the word, so they stay valid
while suffixes are removed.

    R1: the region after the first non-vowel following a vowel
    R2: the same rule applied again inside R1
    RV: the Romance-language verb region (see romance_rv)
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Callable, Dict, FrozenSet, Iterable, Mapping, Optional, Tuple


class StemState:
    """
    Working copy of one word during a stemming pass.

    A new state is created for every call and never shared.
    """

    __slots__ = ('word', 'vowels', 'r1', 'r2', 'rv', 'flags')

    def __init__(
        self,
        word: str,
        vowels: FrozenSet[str],
        r1: Optional[int] = None,
        r2: Optional[int] = None,
        rv: Optional[int] = None
    ):
        self.word = word
        self.vowels = vowels
        self.r1 = len(word) if r1 is None else r1
        self.r2 = len(word) if r2 is None else r2
        self.rv = len(word) if rv is None else rv
        self.flags = set()

    def __repr__(self) -> str:
        return f"StemState({self.word!r}, r1={self.r1}, r2={self.r2}, rv={self.rv})"

    def region(self, name: str) -> int:
        return getattr(self, name)

    def ends(self, suffix: str) -> bool:
        return self.word.endswith(suffix)

    def preceding(self, suffix: str) -> str:
        """Part of the word before `suffix` (the suffix must end the word)."""
        return self.word[:len(self.word) - len(suffix)]

    def in_region(self, suffix: str, name: str) -> bool:
        """True if `suffix`, ending the word, lies entirely inside region `name`."""
        return len(self.word) - len(suffix) >= self.region(name)

    def replace(self, suffix: str, replacement: str):
        self.word = self.preceding(suffix) + replacement

    def delete(self, suffix: str):
        self.replace(suffix, '')

    def strip(self, suffix: str, region: Optional[str] = None) -> bool:
        """
        Delete `suffix` if the word ends with it (inside `region` when given).

        Returns:
            bool: True if the suffix was removed
        """
        if not self.ends(suffix):
            return False
        if region and not self.in_region(suffix, region):
            return False
        self.delete(suffix)
        return True


# Actions --------------------------------------------------------------------

Action = Callable[[StemState, str], bool]
Condition = Callable[[StemState, str], bool]


def delete(region: Optional[str] = None, when: Optional[Condition] = None) -> Action:
    """Action removing the matched suffix, if inside `region` and `when` holds."""
    def action(state: StemState, suffix: str) -> bool:
        if region and not state.in_region(suffix, region):
            return False
        if when and not when(state, suffix):
            return False
        state.delete(suffix)
        return True
    return action


def replace(replacement: str, region: Optional[str] = None, when: Optional[Condition] = None) -> Action:
    """Action rewriting the matched suffix, if inside `region` and `when` holds."""
    def action(state: StemState, suffix: str) -> bool:
        if region and not state.in_region(suffix, region):
            return False
        if when and not when(state, suffix):
            return False
        state.replace(suffix, replacement)
        return True
    return action


def keep(state: StemState, suffix: str) -> bool:
    """Action for suffixes that block shorter ones without changing the word."""
    return True


def preceded_by(*endings: str) -> Condition:
    """Condition: the text before the suffix ends with one of `endings`."""
    def condition(state: StemState, suffix: str) -> bool:
        return state.preceding(suffix).endswith(endings)
    return condition


def not_preceded_by(*endings: str) -> Condition:
    def condition(state: StemState, suffix: str) -> bool:
        return not state.preceding(suffix).endswith(endings)
    return condition


def preceded_by_non_vowel(exclude: str = '') -> Condition:
    """Condition: the letter before the suffix exists, is not a vowel and not in `exclude`."""
    def condition(state: StemState, suffix: str) -> bool:
        before = state.preceding(suffix)
        return bool(before) and before[-1] not in state.vowels and before[-1] not in exclude
    return condition


# Steps ----------------------------------------------------------------------

class SuffixStep:
    """
    One ordered stripping step.

    The longest suffix of the candidate list that ends the word is selected;
    its action decides whether the word changes. A failing action ends the
    step: shorter candidates are not tried.

    With `within` set, only suffixes lying entirely inside that region are
    candidates (the search itself is limited to the region).
    """

    def __init__(self, rules: Iterable[Tuple[Iterable[str], Action]], within: Optional[str] = None):
        table = {}
        for suffixes, action in rules:
            for suffix in suffixes:
                table[suffix] = action
        self._table = MappingProxyType(table)
        self._lengths = tuple(sorted({len(s) for s in table}, reverse=True))
        self.within = within

    def find(self, state: StemState) -> Optional[str]:
        word = state.word
        size = len(word)
        floor = state.region(self.within) if self.within else 0
        for length in self._lengths:
            if length > size - floor:
                continue
            candidate = word[size - length:]
            if candidate in self._table:
                return candidate
        return None

    def __call__(self, state: StemState) -> bool:
        suffix = self.find(state)
        if suffix is None:
            return False
        return self._table[suffix](state, suffix)


# Regions --------------------------------------------------------------------

def find_region(word: str, vowels: FrozenSet[str], start: int = 0) -> int:
    """
    Index right after the first non-vowel that follows a vowel, at or after `start`.

    Returns len(word) when there is no such position (the region is empty).
    """
    for i in range(start + 1, len(word)):
        if word[i - 1] in vowels and word[i] not in vowels:
            return i + 1
    return len(word)


def standard_regions(word: str, vowels: FrozenSet[str], min_r1: int = 0) -> Dict[str, int]:
    """
    Compute R1 and R2.

    Args:
        word: Word after the prelude
        vowels: Vowel table of the language
        min_r1: Minimum number of letters before R1 (Germanic languages use 3)

    R2 is searched from the unadjusted R1; `min_r1` only moves R1 itself.
    """
    r1 = find_region(word, vowels)
    r2 = find_region(word, vowels, r1)
    if r1 < min_r1:
        r1 = min(min_r1, len(word))
    return {'r1': r1, 'r2': r2}


def romance_rv(word: str, vowels: FrozenSet[str]) -> int:
    """
    Compute RV for Spanish, Portuguese and Italian.

    If the second letter is a consonant, RV starts after the next vowel;
    if the first two letters are vowels, RV starts after the next consonant;
    otherwise (consonant-vowel) RV starts after the third letter.
    """
    size = len(word)
    if size < 2:
        return size
    if word[1] not in vowels:
        for i in range(2, size):
            if word[i] in vowels:
                return i + 1
        return size
    if word[0] in vowels:
        for i in range(2, size):
            if word[i] not in vowels:
                return i + 1
        return size
    return min(3, size)


def romance_regions(word: str, vowels: FrozenSet[str]) -> Dict[str, int]:
    regions = standard_regions(word, vowels)
    regions['rv'] = romance_rv(word, vowels)
    return regions


def mark_between_vowels(word: str, vowels: FrozenSet[str], letters: str) -> str:
    """
    Upper-case each of `letters` found between two vowels, scanning left to right.

    Upper-cased letters are consonants for every later test, so a marked
    letter never opens the next match.
    """
    chars = list(word)
    for i in range(1, len(chars) - 1):
        if chars[i] in letters and chars[i - 1] in vowels and chars[i + 1] in vowels:
            chars[i] = chars[i].upper()
    return ''.join(chars)


def _identity(word: str) -> str:
    return word


@dataclass(frozen=True)
class RuleSet:
    """
    A complete native stemming algorithm for one language.

    Attributes:
        name: Algorithm name (matches the Snowball name)
        vowels: Vowel table used for regions and conditions
        program: Runs the ordered steps on a StemState
        regions: Computes the region offsets of the prepared word
        prelude: Rewrites the word before regions are computed
        postlude: Rewrites the stem after the program ran
        exceptions: Whole-word overrides checked before the prelude
    """
    name: str
    vowels: FrozenSet[str]
    program: Callable[[StemState], None]
    regions: Callable[[str, FrozenSet[str]], Dict[str, int]] = standard_regions
    prelude: Callable[[str], str] = _identity
    postlude: Callable[[str], str] = _identity
    exceptions: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))

    def stem(self, word: str) -> str:
        if word in self.exceptions:
            return self.exceptions[word]
        prepared = self.prelude(word)
        state = StemState(prepared, self.vowels, **self.regions(prepared, self.vowels))
        self.program(state)
        return self.postlude(state.word)
