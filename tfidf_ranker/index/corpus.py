# tfidf_ranker/index/corpus.py
import heapq
import json
import logging
from typing import Any, Dict, Iterable, List, Optional, Tuple

from tfidf_ranker.exceptions import DocumentIndexError
from tfidf_ranker.index.document import Document, build_document
from tfidf_ranker.index.idf_cache import CacheMode, IdfCache
from tfidf_ranker.text_processor import (StopwordSet, RegexpWordTokenizer,
                                         read_text, validate_tokenizer)


class Corpus:
    """
    Append-only, index-addressed collection of Documents.

    A document's position is its permanent index. The corpus owns its tokenizer,
    stopword set and IDF cache; none of them are shared with other corpora.

    Attributes:
        tokenizer: Object with ``tokenize(text)`` used for text input
        stopwords (StopwordSet): Terms dropped when building from text
        idf_cache (IdfCache): Cached IDF values for this corpus
    """
    def __init__(self, tokenizer=None, stopwords=None, documents: Optional[Iterable] = None):
        self.tokenizer = validate_tokenizer(tokenizer) if tokenizer is not None else RegexpWordTokenizer()
        if isinstance(stopwords, StopwordSet):
            self.stopwords = stopwords.copy()
        else:
            self.stopwords = StopwordSet(stopwords)

        self._documents: List[Document] = []
        self.idf_cache = IdfCache(self)
        self.logger = logging.getLogger('corpus')

        if documents is not None:
            self.restore_from(documents)

    # ------------------------------ configuration ---------------------------
    def set_tokenizer(self, tokenizer):
        self.tokenizer = validate_tokenizer(tokenizer)

    def set_stopwords(self, words):
        self.stopwords.replace(words)

    # ------------------------------ building --------------------------------
    def build_document(self, value, key=None) -> Document:
        return build_document(value, key, self.tokenizer, self.stopwords)

    def add_document(self, value, key=None, cache_mode=CacheMode.CLEAR) -> int:
        """
        Build a document and append it to the corpus.

        Args:
            value: Text, a sequence of terms, or a term -> count mapping
            key: Opaque identifier reported back with scores
            cache_mode (CacheMode): CLEAR drops the IDF cache; RECOMPUTE refreshes
                                    every cached term against the new corpus

        Returns:
            int: Index of the new document
        """
        mode = CacheMode.coerce(cache_mode)
        document = self.build_document(value, key)
        self._documents.append(document)
        self.idf_cache.invalidate(mode)
        self.logger.debug(f"Added document {len(self._documents) - 1} (key={key!r}, "
                          f"{len(document)} terms, cache {mode.value})")
        return len(self._documents) - 1

    def add_file(self, filepath: str, encoding: str = 'utf8', key=None, cache_mode=CacheMode.CLEAR) -> int:
        """
        Read a text file and add it as a document.

        Raises:
            ConfigurationError: If the encoding is not supported
            OSError: If the file cannot be read; the corpus is left unchanged
        """
        mode = CacheMode.coerce(cache_mode)
        text = read_text(filepath, encoding)
        return self.add_document(text, key, mode)

    def restore_from(self, documents: Iterable):
        """Replace all documents with previously exported ones and empty the IDF cache."""
        self._documents = [
            doc if isinstance(doc, Document) else Document.from_dict(doc)
            for doc in documents
        ]
        self.idf_cache.clear()
        self.logger.info(f"Restored corpus with {len(self._documents)} documents")

    # ------------------------------ access ----------------------------------
    def size(self) -> int:
        return len(self._documents)

    def __len__(self) -> int:
        return len(self._documents)

    @property
    def doc_count(self) -> int:
        return len(self._documents)

    @property
    def documents(self) -> Tuple[Document, ...]:
        return tuple(self._documents)

    @property
    def keys(self) -> List[Any]:
        return [doc.key for doc in self._documents]

    def document_at(self, index: int) -> Document:
        if not isinstance(index, int) or isinstance(index, bool) or not 0 <= index < len(self._documents):
            raise DocumentIndexError(index, len(self._documents))
        return self._documents[index]

    # ------------------------------ statistics ------------------------------
    def document_frequency(self, term: str) -> int:
        return sum(1 for doc in self._documents if doc.has_term(term))

    def idf(self, term: str, force: bool = False) -> float:
        return self.idf_cache.idf(term, force)

    @property
    def vocab_size(self) -> int:
        return len({term for doc in self._documents for term in doc})

    def get_most_frequent_terms(self, n: int = 10) -> List[Tuple[str, int]]:
        term_totals: Dict[str, int] = {}
        for doc in self._documents:
            for term, freq in doc.items():
                term_totals[term] = term_totals.get(term, 0) + freq
        return heapq.nlargest(n, term_totals.items(), key=lambda x: x[1])

    def get_statistics(self) -> Dict[str, Any]:
        """
        Summary statistics about the corpus.

        Returns:
            Dict[str, Any]: Document count, vocabulary size, document length
                            figures and the number of cached IDF entries
        """
        doc_lengths = [sum(doc.values()) for doc in self._documents]
        return {
            "document_count": self.doc_count,
            "vocabulary_size": self.vocab_size,
            "avg_doc_length": sum(doc_lengths) / max(1, len(doc_lengths)),
            "max_doc_length": max(doc_lengths) if doc_lengths else 0,
            "min_doc_length": min(doc_lengths) if doc_lengths else 0,
            "cached_idf_terms": len(self.idf_cache)
        }

    # ------------------------------ persistence -----------------------------
    def to_dict(self) -> Dict[str, Any]:
        return {"documents": [doc.to_dict() for doc in self._documents]}

    @classmethod
    def from_dict(cls, data, tokenizer=None, stopwords=None) -> 'Corpus':
        """
        Rebuild a corpus from ``to_dict()`` output or a bare list of documents.
        The IDF cache starts empty and repopulates on demand.
        """
        documents = data["documents"] if isinstance(data, dict) else data
        return cls(tokenizer=tokenizer, stopwords=stopwords, documents=documents)

    def save(self, filepath: str) -> None:
        """
        Save the documents to a JSON file. The IDF cache is not persisted.

        Args:
            filepath (str): Path where the corpus should be saved
        """
        with open(filepath, 'w', encoding='utf-8') as f:
            json.dump(self.to_dict(), f, indent=2)
        self.logger.info(f"Saved {self.doc_count} documents to {filepath}")

    @classmethod
    def load(cls, filepath: str, tokenizer=None, stopwords=None) -> 'Corpus':
        with open(filepath, 'r', encoding='utf-8') as f:
            data = json.load(f)
        return cls.from_dict(data, tokenizer=tokenizer, stopwords=stopwords)
