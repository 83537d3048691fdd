"""
Boundary Splitter Module
Cuts normalized text into raw word candidates by character class.

Letter runs and digit runs are candidates; every transition between letters,
digits, punctuation, symbols and whitespace is a boundary. Punctuation,
symbols and whitespace are never emitted.
"""

from typing import Iterator

import regex as re

from language_tokenizer.models import Span, SpanKind

# Letters with their combining marks; an apostrophe between two letters stays in the word
_alphabetic = r"[\p{L}\p{M}]+(?:'[\p{L}\p{M}]+)*"

# Digits; one '.' or ',' between two digits stays in the number (3.14, 1,000)
_numeric = r"\p{N}+(?:[.,]\p{N}+)*"

_span_pattern = re.compile(rf"(?P<alphabetic>{_alphabetic})|(?P<numeric>{_numeric})")


def split(normalized: str) -> Iterator[Span]:
    """
    Split normalized text into word candidates.

    The result is a lazy generator; calling split() again restarts the scan.

    Args:
        normalized: Output of normalize()

    Yields:
        Span: candidate text, its class and its offsets in `normalized`

    Example:
        >>> [s.text for s in split("zoomer slang rocks, 67")]
        ['zoomer', 'slang', 'rocks', '67']
    """
    for match in _span_pattern.finditer(normalized):
        kind = SpanKind.ALPHABETIC if match.lastgroup == 'alphabetic' else SpanKind.NUMERIC
        yield Span(match.group(), kind, match.start(), match.end())
