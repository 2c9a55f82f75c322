# tfidf_ranker/utils.py
"""
Utility Functions

Configuration loading and saving, plus the console display helpers used by the
command-line interface.
"""
import json
import logging
import math
import os
from typing import Dict

logger = logging.getLogger('config')

# Define a single default configuration dictionary
DEFAULT_CONFIG = {
    "documents_dir": "documents",
    "stopwords_file": None,
    "index_file": "corpus.json",
    "tokenizer": "regexp",
    "encoding": "utf8",
    "cache_mode": "clear",
    "top_k": 10,
    "log_level": "INFO"
}


def load_config(config_file='config.json') -> Dict:
    """
    Load configuration from a JSON file, falling back to defaults if not found or invalid.

    Args:
        config_file (str): Path to the configuration file

    Returns:
        dict: The loaded or default configuration
    """
    if not os.path.exists(config_file):
        return _create_default_config(config_file)

    try:
        with open(config_file, 'r') as f:
            config = json.load(f)

        # Merge with defaults to ensure all keys exist
        return {**DEFAULT_CONFIG, **config}
    except (OSError, ValueError) as e:
        logger.warning(f"Error loading config file {config_file}: {e}. Using default configuration.")
        return dict(DEFAULT_CONFIG)


def save_config(config: Dict, config_file='config.json'):
    """
    Save the current configuration to a JSON file.

    Args:
        config (dict): The configuration to save
        config_file (str): Path to the configuration file
    """
    with open(config_file, 'w') as f:
        json.dump(config, f, indent=2)


def _create_default_config(config_file='config.json') -> Dict:
    try:
        save_config(DEFAULT_CONFIG, config_file)
        logger.info(f"Created default configuration file: {config_file}")
    except OSError as e:
        logger.warning(f"Could not create default configuration file: {e}")

    return dict(DEFAULT_CONFIG)


def format_score(value: float) -> str:
    if not math.isfinite(value):
        return str(value)
    return f"{value:.6f}"


def display_vocabulary_statistics(corpus):
    """
    Display vocabulary statistics including count and most frequent terms.

    Args:
        corpus (Corpus): The corpus to summarize
    """
    print(f"Documents: {corpus.doc_count:,}")
    print(f"The number of unique terms is: {corpus.vocab_size:,}")
    print("The top 10 most frequent terms are:")
    for i, (term, freq) in enumerate(corpus.get_most_frequent_terms(n=10), 1):
        print(f"    {i}. {term} ({freq:,})")
    print("=" * 55)


def display_detailed_statistics(corpus):
    stats = corpus.get_statistics()

    print("\n=== Corpus Statistics ===")
    print(f"Total Documents: {stats['document_count']:,}")
    print(f"Vocabulary Size: {stats['vocabulary_size']:,}")
    print(f"Average Document Length: {stats['avg_doc_length']:.2f} terms")
    print(f"Max Document Length: {stats['max_doc_length']:,} terms")
    print(f"Min Document Length: {stats['min_doc_length']:,} terms")
    print(f"Cached IDF Entries: {stats['cached_idf_terms']:,}")
    print("=" * 55)


def display_term_listing(term_scores, key=None, limit=None):
    """
    Display the output of ``list_terms`` as a table.

    Args:
        term_scores (List[TermScore]): Scored terms of one document
        key: Document key shown in the header
        limit (int, optional): Maximum number of rows
    """
    print(f"Terms of document {key}:")
    print(f"    {'term'.ljust(20)} {'tf':>5} {'idf':>10} {'tfidf':>10}")
    for score in term_scores[:limit]:
        print(f"    {str(score.term).ljust(20)} {score.tf:>5} "
              f"{format_score(score.idf):>10} {format_score(score.tfidf):>10}")
    print("=" * 55)


def display_ranking(results, scores, k):
    """
    Display the top k documents of a similarity ranking.

    Args:
        results (List[SimilarityResult]): Output of ``rank_by_similarity``
        scores (List[float]): Plain tf-idf scores by document index
        k (int): Number of documents to show
    """
    print(f"The top {k} documents are:")
    if not results:
        print("    No documents indexed.")
    for rank, result in enumerate(results[:k], 1):
        print(f"    {rank}. {result.key} (cosine {result.cosine:.4f}, "
              f"tfidf {format_score(scores[result.index])})")
    print("=" * 55)
