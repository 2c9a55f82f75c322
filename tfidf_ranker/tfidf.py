# tfidf_ranker/tfidf.py
"""
One TF-IDF scoring session: a corpus with its IDF cache, the scoring engine
and the similarity ranker, behind a single object.
"""
import json
from typing import Callable, List, Optional

from tfidf_ranker.index import CacheMode, Corpus, Document
from tfidf_ranker.performance_monitoring import Profiler
from tfidf_ranker.vsm import SimilarityRanker, SimilarityResult, TermScore, TfIdfEngine


class TfIdf:
    """
    Facade over Corpus, TfIdfEngine and SimilarityRanker.

    Args:
        tokenizer: Object with ``tokenize(text)``; defaults to RegexpWordTokenizer
        stopwords: Iterable of stopwords or a StopwordSet; defaults to the English list
        documents: Previously exported documents to restore
        profiler (Profiler, optional): Timer sink for ranking passes
    """
    def __init__(self, tokenizer=None, stopwords=None, documents=None, profiler: Profiler = None):
        self.corpus = Corpus(tokenizer=tokenizer, stopwords=stopwords, documents=documents)
        self.engine = TfIdfEngine(self.corpus)
        self.ranker = SimilarityRanker(self.engine, profiler)

    # ------------------------------ corpus ----------------------------------
    def add_document(self, document, key=None, cache_mode=CacheMode.CLEAR) -> int:
        return self.corpus.add_document(document, key, cache_mode)

    def add_file(self, filepath: str, encoding: str = 'utf8', key=None, cache_mode=CacheMode.CLEAR) -> int:
        return self.corpus.add_file(filepath, encoding, key, cache_mode)

    def document_at(self, index: int) -> Document:
        return self.corpus.document_at(index)

    @property
    def documents(self):
        return self.corpus.documents

    def restore_from(self, documents):
        self.corpus.restore_from(documents)

    def set_tokenizer(self, tokenizer):
        self.corpus.set_tokenizer(tokenizer)

    def set_stopwords(self, words):
        self.corpus.set_stopwords(words)

    def __len__(self) -> int:
        return len(self.corpus)

    # ------------------------------ scoring ---------------------------------
    def idf(self, term: str, force: bool = False) -> float:
        return self.engine.idf(term, force)

    def tfidf(self, terms, index: int) -> float:
        return self.engine.tfidf(terms, index)

    def tfidf_vector(self, terms, index: int) -> List[float]:
        return self.engine.tfidf_vector(terms, index)

    def tfidfs(self, terms, callback: Optional[Callable] = None) -> List[float]:
        return self.engine.tfidfs(terms, callback)

    def list_terms(self, index: int) -> List[TermScore]:
        return self.engine.list_terms(index)

    def rank_by_similarity(self, query, callback: Optional[Callable] = None) -> List[SimilarityResult]:
        return self.ranker.rank(query, callback)

    tfidfs_cosine = rank_by_similarity

    # ------------------------------ persistence -----------------------------
    def to_dict(self):
        return self.corpus.to_dict()

    @classmethod
    def from_dict(cls, data, tokenizer=None, stopwords=None, profiler: Profiler = None) -> 'TfIdf':
        documents = data["documents"] if isinstance(data, dict) else data
        return cls(tokenizer=tokenizer, stopwords=stopwords, documents=documents, profiler=profiler)

    def save(self, filepath: str) -> None:
        self.corpus.save(filepath)

    @classmethod
    def load(cls, filepath: str, tokenizer=None, stopwords=None, profiler: Profiler = None) -> 'TfIdf':
        with open(filepath, 'r', encoding='utf-8') as f:
            data = json.load(f)
        return cls.from_dict(data, tokenizer=tokenizer, stopwords=stopwords, profiler=profiler)
