"""
Matching Module
Provides token sequence search on the output of tokenize().
"""

from .matcher import find_match, find_all_matches

__all__ = [
    'find_match',
    'find_all_matches',
]
