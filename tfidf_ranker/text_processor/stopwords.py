# tfidf_ranker/text_processor/stopwords.py
"""
Stopword handling.

A StopwordSet is owned by one corpus; replacing its contents never affects any
other corpus.
"""
from typing import Iterable, Set

from tfidf_ranker.exceptions import ConfigurationError

DEFAULT_STOPWORDS = (
    'about', 'above', 'after', 'again', 'all', 'also', 'am', 'an', 'and',
    'another', 'any', 'are', 'as', 'at', 'be', 'because', 'been', 'before',
    'being', 'below', 'between', 'both', 'but', 'by', 'came', 'can', 'cannot',
    'come', 'could', 'did', 'do', 'does', 'doing', 'during', 'each', 'few',
    'for', 'from', 'further', 'get', 'got', 'has', 'had', 'he', 'have', 'her',
    'here', 'him', 'himself', 'his', 'how', 'if', 'in', 'into', 'is', 'it',
    'its', 'itself', 'like', 'make', 'many', 'me', 'might', 'more', 'most',
    'much', 'must', 'my', 'myself', 'never', 'now', 'of', 'on', 'only', 'or',
    'other', 'our', 'ours', 'ourselves', 'out', 'over', 'own', 'said', 'same',
    'see', 'should', 'since', 'so', 'some', 'still', 'such', 'take', 'than',
    'that', 'the', 'their', 'theirs', 'them', 'themselves', 'then', 'there',
    'these', 'they', 'this', 'those', 'through', 'to', 'too', 'under', 'until',
    'up', 'very', 'was', 'way', 'we', 'well', 'were', 'what', 'where', 'when',
    'which', 'while', 'who', 'whom', 'with', 'would', 'why', 'you', 'your',
    'yours', 'yourself',
    'a', 'b', 'c', 'd', 'e', 'f', 'g', 'h', 'i', 'j', 'k', 'l', 'm', 'n', 'o',
    'p', 'q', 'r', 's', 't', 'u', 'v', 'w', 'x', 'y', 'z',
    '$', '1', '2', '3', '4', '5', '6', '7', '8', '9', '0', '_',
)


def load_stopwords(filepath: str) -> Set[str]:
    """
    Read a stopword file with one word per line.

    Args:
        filepath (str): Path to the stopword file

    Returns:
        Set[str]: Lower-cased stopwords, blank lines skipped

    Raises:
        OSError: If the file cannot be read
    """
    with open(filepath, encoding="utf-8") as file:
        return {line.strip().lower() for line in file if line.strip()}


class StopwordSet:
    """
    Set of terms excluded when a document is built from free text.

    Attributes:
        _words (Set[str]): Current stopwords
    """
    def __init__(self, words: Iterable[str] = None):
        self._words = set()
        self.replace(DEFAULT_STOPWORDS if words is None else words)

    @staticmethod
    def _validate(words):
        if isinstance(words, (str, bytes)) or not isinstance(words, (list, tuple, set, frozenset)):
            raise ConfigurationError(
                f"Stopwords must be a list of strings, got {type(words).__name__}")
        for word in words:
            if not isinstance(word, str):
                raise ConfigurationError(
                    f"Stopwords must be strings, got {type(word).__name__}: {word!r}")
        return set(words)

    def replace(self, words):
        """
        Replace the whole set.

        Validation happens before anything is changed, so a rejected
        replacement leaves the previous stopwords in place.

        Raises:
            ConfigurationError: If ``words`` is not a list/tuple/set of strings
        """
        self._words = self._validate(words)

    def copy(self) -> 'StopwordSet':
        return StopwordSet(set(self._words))

    def __contains__(self, term) -> bool:
        return term in self._words

    def __iter__(self):
        return iter(self._words)

    def __len__(self) -> int:
        return len(self._words)

    def __repr__(self):
        return f"StopwordSet({len(self._words)} words)"
