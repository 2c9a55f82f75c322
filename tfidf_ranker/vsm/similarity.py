# tfidf_ranker/vsm/similarity.py
"""
Cosine-similarity ranking of every document in a corpus against a query.

The query vector is weighted with a fixed IDF of 1 + ln(1/2), as if the query
were the only document in a one-document corpus and each of its terms appeared
in it. Document vectors use the real corpus IDF. The two weightings differ on
purpose; changing either one changes the ranking.
"""
import logging
import math
from collections import namedtuple
from typing import Callable, List, Optional, Tuple

import numpy as np
from sklearn.metrics.pairwise import cosine_similarity

from tfidf_ranker.performance_monitoring import Profiler
from tfidf_ranker.vsm.tfidf import TfIdfEngine

QUERY_IDF = 1 + math.log(1 / (1 + 1))

SimilarityResult = namedtuple('SimilarityResult', ['vector', 'cosine', 'index', 'key'])


class SimilarityRanker:
    """
    Ranks documents by cosine similarity between the query vector and each
    document's TF-IDF vector over the query's terms.

    Attributes:
        engine (TfIdfEngine): Supplies document TF-IDF vectors
        profiler (Profiler): Times each ranking pass
    """
    def __init__(self, engine: TfIdfEngine, profiler: Profiler = None):
        self.engine = engine
        self.profiler = profiler or Profiler()
        self.logger = logging.getLogger('similarity')

    @property
    def corpus(self):
        return self.engine.corpus

    def query_vector(self, query) -> Tuple[List[str], np.ndarray]:
        """
        Build the query's term list and weight vector.

        The query goes through the document builder, so text loses its
        stopwords. Each distinct term, in first-occurrence order, gets
        ``count * QUERY_IDF``.

        Returns:
            Tuple[List[str], np.ndarray]: The distinct query terms and their weights
        """
        query_doc = self.corpus.build_document(query)
        terms = list(query_doc)
        weights = np.array([query_doc[term] * QUERY_IDF for term in terms], dtype=np.float64)
        return terms, weights

    def rank(self, query, callback: Optional[Callable] = None) -> List[SimilarityResult]:
        """
        Rank the whole corpus against a query.

        Args:
            query: Query text, term list, or term -> count mapping
            callback: Optional ``callback(index, vector, key)`` called as each
                      document vector is built

        Returns:
            List[SimilarityResult]: One result per document, sorted by cosine
                                    similarity descending. Ties keep index order.
                                    A zero vector on either side scores 0.0.

        Each result's ``vector`` is built over the query's distinct,
        stopword-filtered terms (see ``query_vector``). For a query that
        repeats a term or contains stopwords it is therefore shorter than
        ``tfidf_vector(query, i)``, which keeps one entry per raw query term.
        """
        doc_count = self.corpus.size()
        if doc_count == 0:
            return []

        with self.profiler.timer("Similarity Ranking"):
            terms, query_vec = self.query_vector(query)

            vectors = []
            for i in range(doc_count):
                vector = self.engine.tfidf_vector(terms, i)
                vectors.append(vector)
                if callback:
                    callback(i, vector, self.corpus.document_at(i).key)

            if terms:
                doc_matrix = np.array(vectors, dtype=np.float64)
                cosines = cosine_similarity(query_vec.reshape(1, -1), doc_matrix)[0]
            else:
                self.logger.debug("Query has no terms after preprocessing; all similarities are 0")
                cosines = np.zeros(doc_count)

            results = [
                SimilarityResult(vectors[i], float(cosines[i]), i, self.corpus.document_at(i).key)
                for i in range(doc_count)
            ]

        return sorted(results, key=lambda r: r.cosine, reverse=True)
