# tfidf_ranker/index/idf_cache.py
"""
Lazily populated inverse document frequency cache.

IDF(t) = 1 + ln(N / (1 + df(t)))

Entries are computed on first request and stay valid until the owning corpus
gains a document, at which point the cache is either cleared or every cached
term is recomputed against the new corpus.
"""
import logging
import math
from enum import Enum
from typing import Dict, List

from tfidf_ranker.exceptions import ConfigurationError


class CacheMode(Enum):
    CLEAR = 'clear'
    RECOMPUTE = 'recompute'

    @classmethod
    def coerce(cls, value) -> 'CacheMode':
        """Accept a CacheMode, its string value, or the boolean ``restore_cache`` flag."""
        if isinstance(value, cls):
            return value
        if value is None or value is False:
            return cls.CLEAR
        if value is True:
            return cls.RECOMPUTE
        try:
            return cls(str(value).lower())
        except ValueError:
            raise ConfigurationError(f"Unknown cache mode: {value!r}") from None


def compute_idf(doc_count: int, doc_freq: int) -> float:
    if doc_count == 0:
        return -math.inf
    return 1 + math.log(doc_count / (1 + doc_freq))


def effective_idf(value: float) -> float:
    """Non-finite IDF values (empty corpus) score as zero."""
    return value if math.isfinite(value) else 0.0


class IdfCache:
    """
    Per-corpus memo of IDF values.

    Attributes:
        corpus (Corpus): The corpus whose statistics are cached
        _values (Dict[str, float]): term -> cached IDF
    """
    def __init__(self, corpus):
        self.corpus = corpus
        self._values: Dict[str, float] = {}
        self.logger = logging.getLogger('idf_cache')

    def idf(self, term: str, force: bool = False) -> float:
        if not force and term in self._values:
            return self._values[term]

        doc_count = self.corpus.size()
        if doc_count == 0:
            self.logger.debug(f"IDF for '{term}' requested on an empty corpus")
        value = compute_idf(doc_count, self.corpus.document_frequency(term))
        self._values[term] = value
        return value

    def clear(self):
        self._values = {}

    def recompute(self):
        terms = list(self._values)
        for term in terms:
            self.idf(term, force=True)
        self.logger.debug(f"Recomputed {len(terms)} cached IDF values for N={self.corpus.size()}")

    def invalidate(self, mode=CacheMode.CLEAR):
        if CacheMode.coerce(mode) is CacheMode.RECOMPUTE:
            self.recompute()
        else:
            self.clear()

    def cached_terms(self) -> List[str]:
        return list(self._values)

    def get(self, term: str, default=None):
        return self._values.get(term, default)

    def __contains__(self, term) -> bool:
        return term in self._values

    def __len__(self) -> int:
        return len(self._values)
