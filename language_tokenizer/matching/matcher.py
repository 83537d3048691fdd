"""
Match Engine Module
Locates a needle token sequence inside a haystack token sequence.

EXACT   contiguous, ordered occurrence (Knuth-Morris-Pratt, linear time)
FUZZY   shortest window holding every needle token, in any order
        (sliding window over token counts, linear time)
"""

from collections import Counter
from typing import List, Optional, Sequence

from language_tokenizer.models import MatchMode, MatchSpan


def _prepare(tokens: Sequence[str], case_sensitive: bool) -> Sequence[str]:
    if case_sensitive:
        return tokens
    return [token.casefold() for token in tokens]


def _failure_table(needle: Sequence[str]) -> List[int]:
    """failure[i]: length of the longest proper border of needle[:i + 1]."""
    failure = [0] * len(needle)
    k = 0
    for i in range(1, len(needle)):
        while k and needle[i] != needle[k]:
            k = failure[k - 1]
        if needle[i] == needle[k]:
            k += 1
        failure[i] = k
    return failure


def _find_exact(haystack: Sequence[str], needle: Sequence[str], start: int, failure: List[int]) -> Optional[MatchSpan]:
    size = len(needle)
    k = 0
    for i in range(start, len(haystack)):
        while k and haystack[i] != needle[k]:
            k = failure[k - 1]
        if haystack[i] == needle[k]:
            k += 1
            if k == size:
                return MatchSpan(i - size + 1, size)
    return None


def _find_fuzzy(haystack: Sequence[str], needle: Sequence[str], start: int) -> Optional[MatchSpan]:
    need = Counter(needle)
    window = Counter()
    missing = len(needle)
    best = None
    left = start
    for right in range(start, len(haystack)):
        token = haystack[right]
        if token not in need:
            continue
        window[token] += 1
        if window[token] <= need[token]:
            missing -= 1
        if missing:
            continue
        # Shrink from the left while the window still covers the needle
        while haystack[left] not in need or window[haystack[left]] > need[haystack[left]]:
            if haystack[left] in need:
                window[haystack[left]] -= 1
            left += 1
        length = right - left + 1
        if best is None or length < best.length:
            best = MatchSpan(left, length)
    return best


def find_match(
    haystack: Sequence[str],
    needle: Sequence[str],
    mode: MatchMode = MatchMode.EXACT,
    case_sensitive: bool = True
) -> Optional[MatchSpan]:
    """
    Find the first occurrence of `needle` in `haystack`.

    Args:
        haystack: Token sequence to search
        needle: Token sequence to find
        mode: EXACT for a contiguous ordered run, FUZZY for the shortest
            window containing every needle token (ties: lowest start)
        case_sensitive: Compare case-folded tokens when False

    Returns:
        MatchSpan: (start, length) in haystack token indices; MatchSpan(0, 0)
            for an empty needle
        None: no match

    Example:
        >>> find_match(('a', 'b', 'c', 'b'), ('c', 'b'))
        MatchSpan(start=2, length=2)
    """
    if not needle:
        return MatchSpan(0, 0)
    if len(needle) > len(haystack):
        return None
    haystack = _prepare(haystack, case_sensitive)
    needle = _prepare(needle, case_sensitive)
    if mode is MatchMode.EXACT:
        return _find_exact(haystack, needle, 0, _failure_table(needle))
    return _find_fuzzy(haystack, needle, 0)


def find_all_matches(
    haystack: Sequence[str],
    needle: Sequence[str],
    mode: MatchMode = MatchMode.EXACT,
    case_sensitive: bool = True
) -> List[MatchSpan]:
    """
    Find every occurrence of `needle` in `haystack`, overlapping ones included.

    After each match the search resumes one token after its start.

    Returns:
        list: MatchSpans in increasing start order; empty if there is no
            match or the needle is empty
    """
    if not needle or len(needle) > len(haystack):
        return []
    haystack = _prepare(haystack, case_sensitive)
    needle = _prepare(needle, case_sensitive)
    failure = _failure_table(needle) if mode is MatchMode.EXACT else None

    matches = []
    offset = 0
    while offset < len(haystack):
        if mode is MatchMode.EXACT:
            found = _find_exact(haystack, needle, offset, failure)
        else:
            found = _find_fuzzy(haystack, needle, offset)
        if found is None:
            break
        matches.append(found)
        offset = found.start + 1
    return matches
