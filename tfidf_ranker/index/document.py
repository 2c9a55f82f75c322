# tfidf_ranker/index/document.py
"""
Document representation and the document builder.

A Document is a read-only term -> count mapping. The caller-supplied key lives
in a separate attribute, so no term can ever shadow it.
"""
from collections import Counter
from collections.abc import Mapping
from typing import Any, Dict, Iterable, Optional

from tfidf_ranker.text_processor import RegexpWordTokenizer

LEGACY_KEY_FIELD = '__key'


class Document(Mapping):
    """
    Immutable term-frequency mapping for one document.

    Attributes:
        key: Opaque caller-supplied identifier, used only to annotate results
    """
    __slots__ = ('_counts', 'key')

    def __init__(self, counts: Optional[Mapping] = None, key: Any = None):
        self._counts = dict(counts) if counts else {}
        self.key = key

    def __getitem__(self, term):
        return self._counts[term]

    def __iter__(self):
        return iter(self._counts)

    def __len__(self) -> int:
        return len(self._counts)

    def __eq__(self, other):
        if isinstance(other, Document):
            return self._counts == other._counts and self.key == other.key
        return NotImplemented

    __hash__ = None

    def __repr__(self):
        return f"Document(key={self.key!r}, terms={self._counts!r})"

    def term_frequency(self, term: str) -> int:
        return self._counts.get(term, 0)

    def has_term(self, term: str) -> bool:
        return self._counts.get(term, 0) > 0

    def to_dict(self) -> Dict[str, Any]:
        return {"key": self.key, "terms": dict(self._counts)}

    @classmethod
    def from_dict(cls, data: Mapping) -> 'Document':
        """
        Rebuild a document from its persisted form.

        Both ``{"key": ..., "terms": {...}}`` and the flat legacy layout
        ``{"__key": ..., term: count, ...}`` are accepted.
        """
        if isinstance(data, Document):
            return data
        if isinstance(data.get("terms"), Mapping):
            return cls(data["terms"], data.get("key"))
        counts = {term: count for term, count in data.items() if term != LEGACY_KEY_FIELD}
        return cls(counts, data.get(LEGACY_KEY_FIELD))


def _fold(terms: Iterable[str], stopwords=None) -> Counter:
    counts = Counter()
    for term in terms:
        if stopwords is None or term not in stopwords:
            counts[term] += 1
    return counts


def build_document(value, key=None, tokenizer=None, stopwords=None) -> Document:
    """
    Convert raw input into a Document.

    Args:
        value: Text, a sequence of terms, a term -> count mapping, or a Document
        key: Opaque identifier stored alongside the counts
        tokenizer: Object with ``tokenize(text)``; only used for text input
        stopwords: Container of terms to drop; only applied to text input

    Returns:
        Document: The built document. A Document input is returned unchanged and
        a mapping is copied verbatim, without stopword filtering. A mapping in a
        saved layout (``__key`` field or nested ``terms``) has its key field
        lifted out of the counts; an explicit ``key`` argument takes precedence.
    """
    if isinstance(value, Document):
        return value
    if isinstance(value, Mapping):
        if LEGACY_KEY_FIELD in value or isinstance(value.get("terms"), Mapping):
            saved = Document.from_dict(value)
            return Document(saved, saved.key if key is None else key)
        return Document(value, key)
    if isinstance(value, (list, tuple)):
        return Document(_fold(value), key)

    if tokenizer is None:
        tokenizer = RegexpWordTokenizer()

    terms = tokenizer.tokenize(str(value).lower())
    return Document(_fold(terms, stopwords), key)
