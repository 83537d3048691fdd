"""
Korean word segmentation with soynlp.
"""

from typing import List


class SoynlpSegmenter:
    """
    Segmenter splitting each eojeol into its L part and the remainder.

    Without trained word scores LTokenizer falls back to whitespace
    eojeol boundaries.
    """

    name = 'soynlp'

    def __init__(self, scores: dict = None):
        from soynlp.tokenizer import LTokenizer

        self._tokenizer = LTokenizer(scores=scores)

    def segment(self, text: str) -> List[str]:
        return self._tokenizer.tokenize(text)
