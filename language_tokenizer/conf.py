"""
Configuration Module
Environment-driven defaults for the tokenizer and its external backends.
"""

import os

# Directory holding <language>.txt stopword files (one word per line)
STOPWORDS_DIR = os.getenv('LANGUAGE_TOKENIZER_STOPWORDS_DIR')

# Chinese (jieba): use the HMM model for out-of-dictionary words
JIEBA_HMM = os.getenv('LANGUAGE_TOKENIZER_JIEBA_HMM', '1').lower() not in ('0', 'false', 'no')

# Japanese (sudachipy): dictionary edition ('small', 'core', 'full') and split mode ('A', 'B', 'C')
SUDACHI_DICT = os.getenv('LANGUAGE_TOKENIZER_SUDACHI_DICT', 'core')
SUDACHI_MODE = os.getenv('LANGUAGE_TOKENIZER_SUDACHI_MODE', 'C').upper()

# Thai (pythainlp): word_tokenize engine
SEA_ENGINE = os.getenv('LANGUAGE_TOKENIZER_SEA_ENGINE', 'newmm')

# Log level used by the command line entry point
LOG_LEVEL = os.getenv('LANGUAGE_TOKENIZER_LOG_LEVEL', 'WARNING').upper()

# CJK segmentation: 'dictionary' (jieba / sudachipy / soynlp) or 'icu'
CJK_BACKEND = os.getenv('LANGUAGE_TOKENIZER_CJK_BACKEND', 'dictionary').lower()

# Thai segmentation: 'pythainlp' or 'icu'; Lao, Burmese and Khmer always use ICU
THAI_BACKEND = os.getenv('LANGUAGE_TOKENIZER_THAI_BACKEND', 'pythainlp').lower()
