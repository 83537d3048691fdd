"""
Japanese word segmentation with SudachiPy.
"""

import threading
from typing import List

from language_tokenizer import conf


class SudachiSegmenter:
    """
    Segmenter backed by a Sudachi dictionary.

    Split mode A yields the shortest units, C the longest (named entities
    and compounds kept whole).

    Args:
        dict_name: Dictionary edition ('small', 'core', 'full')
        mode: Split mode letter
    """

    name = 'sudachipy'

    def __init__(self, dict_name: str = conf.SUDACHI_DICT, mode: str = conf.SUDACHI_MODE):
        from sudachipy import dictionary, tokenizer

        self._tokenizer = dictionary.Dictionary(dict=dict_name).create()
        self.mode = getattr(tokenizer.Tokenizer.SplitMode, mode.upper())
        # A Sudachi tokenizer reuses its internal buffers between calls
        self._lock = threading.Lock()

    def segment(self, text: str) -> List[str]:
        with self._lock:
            return [m.surface() for m in self._tokenizer.tokenize(text, self.mode)]
