"""TF-IDF ranker - corpus statistics, TF-IDF scoring and cosine-similarity ranking."""

from tfidf_ranker.exceptions import TfIdfError, ConfigurationError, DocumentIndexError
from tfidf_ranker.text_processor import (
    BaseTokenizer,
    RegexpWordTokenizer,
    TreebankTokenizer,
    PunktTokenizer,
    TokenizerFactory,
    StopwordSet,
    DEFAULT_STOPWORDS,
    load_stopwords,
    read_text,
)
from tfidf_ranker.index import Document, build_document, CacheMode, IdfCache, Corpus
from tfidf_ranker.vsm import TfIdfEngine, TermScore, SimilarityRanker, SimilarityResult
from tfidf_ranker.performance_monitoring import Profiler
from tfidf_ranker.tfidf import TfIdf

__all__ = [
    "TfIdfError",
    "ConfigurationError",
    "DocumentIndexError",
    "BaseTokenizer",
    "RegexpWordTokenizer",
    "TreebankTokenizer",
    "PunktTokenizer",
    "TokenizerFactory",
    "StopwordSet",
    "DEFAULT_STOPWORDS",
    "load_stopwords",
    "read_text",
    "Document",
    "build_document",
    "CacheMode",
    "IdfCache",
    "Corpus",
    "TfIdfEngine",
    "TermScore",
    "SimilarityRanker",
    "SimilarityResult",
    "Profiler",
    "TfIdf",
]
