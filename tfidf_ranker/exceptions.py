"""
Exception types raised by the TF-IDF ranker.
"""


class TfIdfError(Exception):
    """Base class for all errors raised by this package."""


class ConfigurationError(TfIdfError, ValueError):
    """
    Raised for invalid configuration: an unsupported text encoding, a tokenizer
    without a ``tokenize`` method, an unknown tokenizer mode or cache mode, or a
    stopword replacement that is not a collection of strings.
    """


class DocumentIndexError(TfIdfError, IndexError):
    """Raised when a document index falls outside ``[0, N)``."""

    def __init__(self, index, size):
        self.index = index
        self.size = size
        super().__init__(f"Document index {index} out of range for corpus of size {size}")
