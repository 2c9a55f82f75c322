# tfidf_ranker/index/__init__.py
from tfidf_ranker.index.document import Document, build_document
from tfidf_ranker.index.idf_cache import CacheMode, IdfCache, compute_idf, effective_idf
from tfidf_ranker.index.corpus import Corpus

__all__ = [
    'Document',
    'build_document',
    'CacheMode',
    'IdfCache',
    'compute_idf',
    'effective_idf',
    'Corpus'
]
