import pytest

from tfidf_ranker import TfIdf


@pytest.fixture
def cat_dog():
    """Two-document corpus with "the" as the only stopword."""
    session = TfIdf(stopwords=["the"])
    session.add_document("the cat sat", key="cat")
    session.add_document("the dog sat", key="dog")
    return session


@pytest.fixture
def animals():
    session = TfIdf()
    session.add_document("The quick brown fox jumps over the lazy dog", key="fox")
    session.add_document("A lazy cat sleeps all day, a lazy cat indeed", key="cat")
    session.add_document("Dogs and cats are common household pets", key="pets")
    session.add_document("Quantum chromodynamics describes the strong force", key="physics")
    return session
