# tfidf_ranker/text_processor/base.py
from abc import ABC, abstractmethod
from typing import List

from tfidf_ranker.exceptions import ConfigurationError


class BaseTokenizer(ABC):
    @abstractmethod
    def tokenize(self, text: str) -> List[str]: ...


def validate_tokenizer(tokenizer):
    """
    Check that an object can be used as a tokenizer.

    Any object exposing a callable ``tokenize`` attribute is accepted, so plain
    NLTK tokenizers can be injected without wrapping.

    Raises:
        ConfigurationError: If the object has no callable ``tokenize``
    """
    if not callable(getattr(tokenizer, 'tokenize', None)):
        raise ConfigurationError(f"Expected a valid tokenizer, got {type(tokenizer).__name__}")
    return tokenizer
