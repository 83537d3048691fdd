"""
Models Module
Defines the value types passed between the tokenizer stages.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class SpanKind(Enum):
    """Character class of a word candidate."""
    ALPHABETIC = 'alphabetic'
    NUMERIC = 'numeric'


@dataclass(frozen=True)
class Span:
    """
    A raw word candidate produced by the boundary splitter.

    start/end are indices into the normalized string the span was cut from.
    """
    text: str
    kind: SpanKind
    start: int
    end: int

    @property
    def is_numeric(self) -> bool:
        return self.kind is SpanKind.NUMERIC


class MatchMode(Enum):
    """
    Strictness of find_match.

    EXACT: the needle must appear as a contiguous, ordered run of the haystack.
    FUZZY: every needle token must appear in one haystack window, any order.
    """
    EXACT = 'exact'
    FUZZY = 'fuzzy'


@dataclass(frozen=True)
class MatchSpan:
    """
    Represents a successful match: a window of the haystack token sequence.
    """
    start: int
    length: int

    @property
    def end(self) -> int:
        """Index one past the last matched token."""
        return self.start + self.length

    def to_tuple(self) -> Tuple[int, int]:
        """Convert the span to a (start, length) pair."""
        return (self.start, self.length)
