"""
Word boundary detection for Thai with PyThaiNLP.
"""

from typing import List

from language_tokenizer import conf


class PythaiBoundaryModel:
    """
    Boundary model delegating to pythainlp.tokenize.word_tokenize.

    Args:
        engine: PyThaiNLP tokenizer engine ('newmm', 'attacut', ...)
    """

    name = 'pythainlp'

    def __init__(self, engine: str = conf.SEA_ENGINE):
        from pythainlp.tokenize import word_tokenize

        self._word_tokenize = word_tokenize
        self.engine = engine

    def predict_boundaries(self, text: str) -> List[str]:
        return self._word_tokenize(text, engine=self.engine, keep_whitespace=False)
