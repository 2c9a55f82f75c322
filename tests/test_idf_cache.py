import math

import pytest

from tfidf_ranker.exceptions import ConfigurationError
from tfidf_ranker.index import CacheMode, Corpus, compute_idf, effective_idf
from tfidf_ranker.vsm import TfIdfEngine


def make_corpus(*texts):
    corpus = Corpus(stopwords=["the"])
    for text in texts:
        corpus.add_document(text)
    return corpus


def test_idf_values_for_two_documents():
    corpus = make_corpus("the cat sat", "the dog sat")
    assert corpus.idf("cat") == pytest.approx(1.0)
    assert corpus.idf("sat") == pytest.approx(1 + math.log(2 / 3))
    assert corpus.idf("sat") == pytest.approx(0.594535, abs=1e-6)
    assert corpus.idf("unicorn") == pytest.approx(1 + math.log(2))


def test_idf_is_non_increasing_in_document_frequency():
    corpus = make_corpus("a1 common", "a2 common rare2", "a3 common rare2 mid3", "a4 common mid3")
    values = [corpus.idf(term) for term in ("unseen", "a1", "rare2", "common")]
    assert values == sorted(values, reverse=True)


def test_empty_corpus_idf_is_negative_infinity():
    corpus = Corpus()
    assert corpus.idf("anything") == -math.inf
    assert TfIdfEngine(corpus).effective_idf("anything") == 0.0


def test_effective_idf_zeroes_both_infinities():
    assert effective_idf(math.inf) == 0.0
    assert effective_idf(-math.inf) == 0.0
    assert effective_idf(1.5) == 1.5
    assert compute_idf(0, 0) == -math.inf


def test_cached_value_is_reused(monkeypatch):
    corpus = make_corpus("the cat sat", "the dog sat")
    calls = []
    original = corpus.document_frequency

    def counting(term):
        calls.append(term)
        return original(term)

    monkeypatch.setattr(corpus, "document_frequency", counting)
    first = corpus.idf("cat")
    second = corpus.idf("cat")
    assert first == second
    assert calls == ["cat"]

    corpus.idf("cat", force=True)
    assert calls == ["cat", "cat"]


def test_clear_mode_drops_cache_and_recomputes_lazily():
    corpus = make_corpus("the cat sat", "the dog sat")
    corpus.idf("cat")
    corpus.idf("sat")
    assert len(corpus.idf_cache) == 2

    corpus.add_document("a bird sang", cache_mode=CacheMode.CLEAR)
    assert len(corpus.idf_cache) == 0
    assert corpus.idf("cat") == pytest.approx(1 + math.log(3 / 2))


def test_recompute_mode_refreshes_cached_terms_immediately():
    corpus = make_corpus("the cat sat", "the dog sat")
    corpus.idf("cat")
    corpus.idf("sat")

    corpus.add_document("a bird sang", cache_mode=CacheMode.RECOMPUTE)
    assert corpus.idf_cache.cached_terms() == ["cat", "sat"]
    assert corpus.idf_cache.get("cat") == pytest.approx(1 + math.log(3 / 2))
    assert corpus.idf_cache.get("sat") == pytest.approx(1.0)
    assert "bird" not in corpus.idf_cache


def test_add_file_honours_cache_mode(tmp_path):
    path = tmp_path / "doc.txt"
    path.write_text("cat", encoding="utf-8")
    corpus = make_corpus("the cat sat")
    corpus.idf("cat")
    corpus.add_file(str(path), cache_mode="recompute")
    assert corpus.idf_cache.get("cat") == pytest.approx(1 + math.log(2 / 3))


@pytest.mark.parametrize("value, expected", [
    (CacheMode.RECOMPUTE, CacheMode.RECOMPUTE),
    ("clear", CacheMode.CLEAR),
    ("RECOMPUTE", CacheMode.RECOMPUTE),
    (True, CacheMode.RECOMPUTE),
    (False, CacheMode.CLEAR),
    (None, CacheMode.CLEAR),
])
def test_cache_mode_coercion(value, expected):
    assert CacheMode.coerce(value) is expected


def test_unknown_cache_mode():
    with pytest.raises(ConfigurationError):
        CacheMode.coerce("sometimes")
