# tfidf_ranker/vsm/tfidf.py
"""
TF-IDF scoring over a Corpus.

Term weights are raw term frequency times the corpus IDF. An IDF that is not
finite (only possible on an empty corpus) contributes zero, so no score is ever
infinite or NaN.
"""
import logging
from collections import namedtuple
from collections.abc import Mapping
from typing import Callable, List, Optional

from tfidf_ranker.index import Corpus, Document
from tfidf_ranker.index.idf_cache import effective_idf

TermScore = namedtuple('TermScore', ['term', 'tf', 'idf', 'tfidf'])


class TfIdfEngine:
    """
    Computes term frequency, TF-IDF scores and TF-IDF vectors for documents
    in a corpus.

    Attributes:
        corpus (Corpus): The scored collection; its IDF cache is shared
    """
    def __init__(self, corpus: Corpus):
        self.corpus = corpus
        self.logger = logging.getLogger('tfidf')

    @staticmethod
    def term_frequency(term: str, document: Mapping) -> int:
        return document.get(term, 0) or 0

    def resolve_terms(self, terms) -> List[str]:
        """
        Turn a query into an ordered term list.

        Text is lower-cased and tokenized with the corpus tokenizer; stopwords
        are not removed here. Lists and tuples are used as given.
        """
        if isinstance(terms, (list, tuple)):
            return list(terms)
        return self.corpus.tokenizer.tokenize(str(terms).lower())

    def idf(self, term: str, force: bool = False) -> float:
        return self.corpus.idf(term, force)

    def effective_idf(self, term: str) -> float:
        return effective_idf(self.corpus.idf(term))

    def tfidf(self, terms, index: int) -> float:
        document = self.corpus.document_at(index)
        return sum(
            (self.term_frequency(term, document) * self.effective_idf(term)
             for term in self.resolve_terms(terms)),
            0.0
        )

    def tfidf_vector(self, terms, index: int) -> List[float]:
        """
        Per-term TF-IDF weights of one document, in query order.

        Duplicate and zero-weight terms are kept so the vector lines up
        position by position with any other vector built from the same terms.
        """
        document = self.corpus.document_at(index)
        return [
            self.term_frequency(term, document) * self.effective_idf(term)
            for term in self.resolve_terms(terms)
        ]

    def list_terms(self, index: int) -> List[TermScore]:
        """
        Every term of a document with its tf, idf and tf-idf.

        Args:
            index (int): Document index

        Returns:
            List[TermScore]: Sorted by tf-idf descending. Ties keep the
                             document's own term order. ``idf`` is the raw
                             value and may be -inf on an empty corpus.
        """
        document: Document = self.corpus.document_at(index)
        scores = []
        for term in document:
            tf = self.term_frequency(term, document)
            idf = self.idf(term)
            scores.append(TermScore(term, tf, idf, tf * effective_idf(idf)))
        return sorted(scores, key=lambda s: s.tfidf, reverse=True)

    def tfidfs(self, terms, callback: Optional[Callable] = None) -> List[float]:
        """
        Score every document in the corpus against the same terms.

        Args:
            terms: Query text or term list
            callback: Optional ``callback(index, score, key)`` invoked per document

        Returns:
            List[float]: Scores in document index order
        """
        resolved = self.resolve_terms(terms)
        scores = []
        for i, document in enumerate(self.corpus.documents):
            score = self.tfidf(resolved, i)
            scores.append(score)
            if callback:
                callback(i, score, document.key)
        return scores
