"""
Chinese word segmentation with jieba.
"""

from typing import Iterator

from language_tokenizer import conf


class JiebaSegmenter:
    """
    Segmenter backed by jieba's prefix dictionary.

    Args:
        hmm: Use the HMM model to join characters missing from the dictionary
    """

    name = 'jieba'

    def __init__(self, hmm: bool = conf.JIEBA_HMM):
        import jieba

        self._jieba = jieba
        self.hmm = hmm
        # Loads the dictionary now rather than on the first cut()
        jieba.initialize()

    def segment(self, text: str) -> Iterator[str]:
        return self._jieba.cut(text, HMM=self.hmm)
