"""
Pytest configuration and shared fixtures.

This module provides:
- Project root on sys.path
- Fake segmenter capabilities and a registry wired to them
- A Tokenizer that never touches the real backends
"""
import sys
from pathlib import Path

import pytest

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from language_tokenizer.text.dispatcher import Tokenizer, TokenizerConfig  # noqa: E402
from language_tokenizer.text.tokenizers import SegmenterRegistry  # noqa: E402

SENTENCE = "that's someone who can rizz just like a skibidi! zoomer slang rocks, 67"


class FakeSegmenter:
    """Segmenter returning a fixed list of segments and recording its input."""

    name = 'fake-segmenter'

    def __init__(self, segments):
        self.segments = list(segments)
        self.calls = []

    def segment(self, text):
        self.calls.append(text)
        return iter(self.segments)


class FakeBoundaryModel:
    """Boundary model returning a fixed list of spans and recording its input."""

    name = 'fake-boundary-model'

    def __init__(self, spans):
        self.spans = list(spans)
        self.calls = []

    def predict_boundaries(self, text):
        self.calls.append(text)
        return list(self.spans)


@pytest.fixture
def sentence() -> str:
    return SENTENCE


@pytest.fixture
def empty_registry() -> SegmenterRegistry:
    return SegmenterRegistry()


@pytest.fixture
def tokenizer(empty_registry) -> Tokenizer:
    """Tokenizer without stopword files and without real segmenters."""
    return Tokenizer(TokenizerConfig(stopwords_dir=None), empty_registry)


@pytest.fixture
def make_tokenizer():
    """Build a Tokenizer from a {Algorithm: capability} mapping and stopwords."""
    def factory(capabilities=None, stopwords=None, stopwords_dir=None):
        registry = SegmenterRegistry()
        for algorithm, capability in (capabilities or {}).items():
            registry.register(algorithm, capability)
        config = TokenizerConfig(stopwords=stopwords or {}, stopwords_dir=stopwords_dir)
        return Tokenizer(config, registry)
    return factory


@pytest.fixture
def make_segmenter():
    """Build a FakeSegmenter returning the given segments."""
    return FakeSegmenter


@pytest.fixture
def make_boundary_model():
    """Build a FakeBoundaryModel returning the given spans."""
    return FakeBoundaryModel
