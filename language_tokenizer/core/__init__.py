"""
Core Module
Provides the exception hierarchy shared by every pipeline.
"""

from .exceptions import (
    TokenizerError,
    UnsupportedLanguage,
    EmptyInput,
    CollaboratorFailure,
    InvalidEncoding
)

__all__ = [
    'TokenizerError',
    'UnsupportedLanguage',
    'EmptyInput',
    'CollaboratorFailure',
    'InvalidEncoding',
]
