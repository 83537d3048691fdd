"""
Core Exceptions Module
Defines custom exceptions for the language tokenizer.
"""


class TokenizerError(Exception):
    """
    Base class for every error raised by the tokenizer.
    """
    pass


class UnsupportedLanguage(TokenizerError):
    """
    Exception raised when an algorithm has no pipeline, rule table or backend.

    The call is not retried: the same algorithm will keep failing until the
    missing language pack is installed.
    """

    def __init__(self, algorithm, reason: str = None):
        """
        Initialize the UnsupportedLanguage error.

        Args:
            algorithm: The Algorithm member that could not be served
            reason: Optional detail (e.g. the missing library)
        """
        self.algorithm = algorithm
        self.reason = reason
        name = getattr(algorithm, 'name', algorithm)
        message = f"No tokenizer found for algorithm {name}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class EmptyInput(TokenizerError):
    """
    Exception raised when the input yields no candidate spans.
    """
    pass


class CollaboratorFailure(TokenizerError):
    """
    Exception raised when an external segmenter or boundary model fails.

    The original exception is kept in `original` and as `__cause__`.
    """

    def __init__(self, backend: str, original: BaseException):
        self.backend = backend
        self.original = original
        super().__init__(f"{backend} failed: {original}")


class InvalidEncoding(TokenizerError, ValueError):
    """
    Exception raised when input text is not well-formed Unicode.
    """
    pass
