# tfidf_ranker/text_processor/tokenizers.py
import logging
import re
from typing import List

import nltk
from nltk.tokenize import RegexpTokenizer, TreebankWordTokenizer, word_tokenize

from tfidf_ranker.text_processor.base import BaseTokenizer


class RegexpWordTokenizer(BaseTokenizer):
    """
    Splits text on every run of characters that are not Latin or Cyrillic
    letters, digits or underscores. This is the default tokenizer.
    """
    GAP_PATTERN = r'[^A-Za-zА-Яа-я0-9_]+'

    def __init__(self):
        self._tokenizer = RegexpTokenizer(self.GAP_PATTERN, gaps=True)

    def tokenize(self, text: str) -> List[str]:
        return [t for t in self._tokenizer.tokenize(text) if t]


class TreebankTokenizer(BaseTokenizer):
    """Penn Treebank tokenization with punctuation tokens dropped."""
    _WORD_PATTERN = re.compile(r'\w')

    def __init__(self):
        self._tokenizer = TreebankWordTokenizer()

    def tokenize(self, text: str) -> List[str]:
        return [t for t in self._tokenizer.tokenize(text) if self._WORD_PATTERN.search(t)]


class PunktTokenizer(BaseTokenizer):
    """
    NLTK's ``word_tokenize`` (Punkt sentence splitting + Treebank words).

    The Punkt models are fetched on first construction if they are not
    installed (newer NLTK releases load ``punkt_tab`` instead of ``punkt``).
    """
    _WORD_PATTERN = re.compile(r'\w')
    PUNKT_RESOURCES = ('punkt', 'punkt_tab')

    def __init__(self):
        self.logger = logging.getLogger('tokenizer')
        for resource in self.PUNKT_RESOURCES:
            try:
                nltk.data.find(f'tokenizers/{resource}')
            except LookupError:
                self.logger.info(f"Downloading NLTK {resource} model")
                nltk.download(resource, quiet=True)

    def tokenize(self, text: str) -> List[str]:
        return [t for t in word_tokenize(text) if self._WORD_PATTERN.search(t)]
