"""
Word segmentation with ICU word break rules (PyICU).

ICU segments Lao, Burmese and Khmer (and optionally Thai and CJK) with its
built-in dictionaries and models.
"""

import threading
from typing import List


class IcuWordSegmenter:
    """
    Segmenter backed by an ICU word BreakIterator.

    Serves both capabilities: segment() for CJK and predict_boundaries()
    for Southeast Asian scripts. ICU offsets count UTF-16 code units, so the
    text is sliced as an icu.UnicodeString.

    Args:
        locale: ICU locale id ('th', 'lo', 'my', 'km', 'zh', 'ja', 'ko')
    """

    name = 'icu'

    def __init__(self, locale: str):
        import icu

        self._icu = icu
        self.locale = locale
        self._iterator = icu.BreakIterator.createWordInstance(icu.Locale(locale))
        # A BreakIterator holds the text it walks
        self._lock = threading.Lock()

    def segment(self, text: str) -> List[str]:
        ustring = self._icu.UnicodeString(text)
        with self._lock:
            self._iterator.setText(ustring)
            boundaries = [self._iterator.first()]
            boundaries.extend(self._iterator)
        return [str(ustring[start:end]) for start, end in zip(boundaries, boundaries[1:])]

    def predict_boundaries(self, text: str) -> List[str]:
        return self.segment(text)
