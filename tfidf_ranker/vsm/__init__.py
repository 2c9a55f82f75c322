# tfidf_ranker/vsm/__init__.py
from .tfidf import TfIdfEngine, TermScore
from .similarity import SimilarityRanker, SimilarityResult, QUERY_IDF
