# tfidf_ranker/text_processor/__init__.py
from .base import BaseTokenizer, validate_tokenizer
from .tokenizers import RegexpWordTokenizer, TreebankTokenizer, PunktTokenizer
from .factory import TokenizerFactory
from .stopwords import StopwordSet, DEFAULT_STOPWORDS, load_stopwords
from .reader import SUPPORTED_ENCODINGS, is_encoding, read_text
