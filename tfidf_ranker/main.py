# tfidf_ranker/main.py
"""
Command-line interface.

Builds a corpus from a directory of text files (or loads a saved one), then
lists the weighted terms of a document and/or ranks the corpus against a query
by cosine similarity.
"""
import argparse
import logging
import os
import sys

from tfidf_ranker.exceptions import TfIdfError
from tfidf_ranker.index import CacheMode
from tfidf_ranker.performance_monitoring import Profiler
from tfidf_ranker.text_processor import DEFAULT_STOPWORDS, TokenizerFactory, load_stopwords
from tfidf_ranker.tfidf import TfIdf
from tfidf_ranker.utils import (display_detailed_statistics, display_ranking,
                                display_term_listing, display_vocabulary_statistics,
                                load_config)

logger = logging.getLogger('tfidf_ranker')


def parse_arguments(argv=None):
    """
    Parse command-line arguments and integrate with configuration file settings.

    Returns:
        argparse.Namespace: The parsed command-line arguments with config file integration
    """
    argv = sys.argv[1:] if argv is None else list(argv)

    pre_parser = argparse.ArgumentParser(add_help=False)
    pre_parser.add_argument('--config', default='config.json')
    config_path = pre_parser.parse_known_args(argv)[0].config
    config = load_config(config_path)

    parser = argparse.ArgumentParser(description='TF-IDF scoring and cosine-similarity ranking.')

    # General Options
    parser.add_argument('--config', default='config.json',
                        help='Path to configuration file')
    parser.add_argument('--documents_dir', default=config['documents_dir'],
                        help=f"Directory containing .txt documents to index (default: {config['documents_dir']})")
    parser.add_argument('--stopwords_file', default=config['stopwords_file'],
                        help="File containing stopwords, one per line (default: built-in English list)")
    parser.add_argument('--index_file', default=config['index_file'],
                        help=f"Path to save/load the corpus as JSON (default: {config['index_file']})")
    parser.add_argument('--use_existing', action='store_true',
                        help='Load the corpus from --index_file instead of re-reading documents')
    parser.add_argument('--no_save', action='store_true',
                        help='Do not write the corpus to --index_file')
    parser.add_argument('--stats', action='store_true',
                        help='Display detailed corpus statistics')
    parser.add_argument('--report_file', default=None,
                        help='Write the timing report to this file')
    parser.add_argument('--log_level', default=config['log_level'],
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                        help=f"Logging level (default: {config['log_level']})")

    # Indexing Options
    parser.add_argument('--tokenizer', default=config['tokenizer'],
                        choices=sorted(TokenizerFactory.TOKENIZER_CLASSES),
                        help=f"Tokenizer implementation (default: {config['tokenizer']})")
    parser.add_argument('--encoding', default=config['encoding'],
                        help=f"Text encoding of the documents (default: {config['encoding']})")
    parser.add_argument('--cache_mode', default=config['cache_mode'],
                        choices=[mode.value for mode in CacheMode],
                        help=f"IDF cache policy on insertion (default: {config['cache_mode']})")

    # Query Options
    parser.add_argument('--query', default=None,
                        help='Rank all documents by cosine similarity to this query')
    parser.add_argument('--top_k', type=int, default=config['top_k'],
                        help=f"Number of ranked documents to display (default: {config['top_k']})")
    parser.add_argument('--list_terms', type=int, default=None, metavar='INDEX',
                        help='List the weighted terms of the document at INDEX')

    return parser.parse_args(argv)


def setup_logging(level):
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler()]
    )


def resolve_stopwords(stopwords_file):
    if not stopwords_file:
        return list(DEFAULT_STOPWORDS)
    try:
        stopwords = load_stopwords(stopwords_file)
        logger.info(f"Loaded {len(stopwords)} stopwords from {stopwords_file}")
        return stopwords
    except OSError as e:
        logger.warning(f"Failed to load stopwords from {stopwords_file}: {e}. Using built-in list.")
        return list(DEFAULT_STOPWORDS)


def build_session(args, profiler):
    """
    Create the TfIdf session, either from a saved corpus or from a documents directory.

    Returns:
        TfIdf: The populated session
    """
    tokenizer = TokenizerFactory.create_tokenizer(args.tokenizer)
    stopwords = resolve_stopwords(args.stopwords_file)

    if args.use_existing and args.index_file and os.path.exists(args.index_file):
        with profiler.timer("Corpus Loading"):
            session = TfIdf.load(args.index_file, tokenizer=tokenizer, stopwords=stopwords, profiler=profiler)
        logger.info(f"Loaded {len(session)} documents from {args.index_file}")
        return session

    session = TfIdf(tokenizer=tokenizer, stopwords=stopwords, profiler=profiler)
    if not args.documents_dir or not os.path.isdir(args.documents_dir):
        logger.warning(f"Document directory '{args.documents_dir}' not found. Starting with an empty corpus.")
        return session

    filenames = sorted(entry.name for entry in os.scandir(args.documents_dir)
                       if entry.is_file() and entry.name.endswith('.txt'))

    with profiler.timer("Corpus Building"):
        for filename in filenames:
            try:
                session.add_file(os.path.join(args.documents_dir, filename), args.encoding,
                                 key=filename, cache_mode=args.cache_mode)
            except OSError as e:
                logger.error(f"Error reading {filename}: {e}")
    logger.info(f"Indexed {len(session)} documents from {args.documents_dir}")

    if args.index_file and not args.no_save:
        with profiler.timer("Corpus Saving"):
            session.save(args.index_file)

    return session


def main(argv=None):
    """
    Main function to run the TF-IDF ranker.

    Returns:
        int: Process exit status
    """
    args = parse_arguments(argv)
    setup_logging(args.log_level)

    profiler = Profiler()
    profiler.start_global_timer()

    try:
        session = build_session(args, profiler)

        display_vocabulary_statistics(session.corpus)
        if args.stats:
            display_detailed_statistics(session.corpus)

        if args.list_terms is not None:
            with profiler.timer("Term Listing"):
                term_scores = session.list_terms(args.list_terms)
            display_term_listing(term_scores, key=session.document_at(args.list_terms).key,
                                 limit=args.top_k)

        if args.query:
            with profiler.timer("Plain TF-IDF Scoring"):
                scores = session.tfidfs(args.query)
            results = session.rank_by_similarity(args.query)
            display_ranking(results, scores, args.top_k)
    except TfIdfError as e:
        logger.error(str(e))
        return 1

    print("\n" + profiler.generate_report(
        doc_count=session.corpus.doc_count,
        vocab_size=session.corpus.vocab_size,
        filename=args.report_file
    ))
    return 0


if __name__ == "__main__":
    sys.exit(main())
