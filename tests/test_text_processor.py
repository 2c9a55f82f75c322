import base64

import pytest

from tfidf_ranker.exceptions import ConfigurationError
from tfidf_ranker.text_processor import (DEFAULT_STOPWORDS, RegexpWordTokenizer, StopwordSet,
                                         TokenizerFactory, TreebankTokenizer, is_encoding,
                                         load_stopwords, read_text, validate_tokenizer)


class TestTokenizers:
    def test_regexp_splits_on_non_word_characters(self):
        tokens = RegexpWordTokenizer().tokenize("Hello, World!  foo_bar 42")
        assert tokens == ["Hello", "World", "foo_bar", "42"]

    def test_regexp_keeps_cyrillic_words(self):
        assert RegexpWordTokenizer().tokenize("привет, мир") == ["привет", "мир"]

    def test_regexp_empty_text(self):
        assert RegexpWordTokenizer().tokenize("  ,.; ") == []

    def test_treebank_drops_punctuation(self):
        tokens = TreebankTokenizer().tokenize("the cat sat.")
        assert tokens == ["the", "cat", "sat"]

    def test_factory_default_is_regexp(self):
        assert isinstance(TokenizerFactory.create_tokenizer(), RegexpWordTokenizer)

    def test_factory_modes(self):
        assert isinstance(TokenizerFactory.create_tokenizer("treebank"), TreebankTokenizer)
        assert isinstance(TokenizerFactory.create_tokenizer("REGEXP"), RegexpWordTokenizer)

    def test_factory_unknown_mode(self):
        with pytest.raises(ConfigurationError):
            TokenizerFactory.create_tokenizer("whitespace")

    def test_validate_tokenizer(self):
        class Splitter:
            def tokenize(self, text):
                return text.split()

        splitter = Splitter()
        assert validate_tokenizer(splitter) is splitter
        with pytest.raises(ConfigurationError):
            validate_tokenizer(object())
        with pytest.raises(ConfigurationError):
            validate_tokenizer(str.split)


class TestStopwordSet:
    def test_defaults(self):
        stopwords = StopwordSet()
        assert "the" in stopwords
        assert len(stopwords) == len(set(DEFAULT_STOPWORDS))

    def test_replace(self):
        stopwords = StopwordSet()
        stopwords.replace(["foo", "bar"])
        assert "foo" in stopwords
        assert "the" not in stopwords
        assert len(stopwords) == 2

    @pytest.mark.parametrize("bad", ["the", None, 42, ["ok", 1], {"a": 1}])
    def test_invalid_replacement_leaves_set_unchanged(self, bad):
        stopwords = StopwordSet(["keep"])
        with pytest.raises(ConfigurationError):
            stopwords.replace(bad)
        assert list(stopwords) == ["keep"]

    def test_copy_is_independent(self):
        original = StopwordSet(["a"])
        clone = original.copy()
        clone.replace(["b"])
        assert "b" not in original
        assert "a" in original
        assert list(clone) == ["b"]

    def test_load_stopwords(self, tmp_path):
        path = tmp_path / "stop.txt"
        path.write_text("The\n\n  And \nof\n", encoding="utf-8")
        assert load_stopwords(str(path)) == {"the", "and", "of"}

    def test_load_stopwords_missing_file(self, tmp_path):
        with pytest.raises(OSError):
            load_stopwords(str(tmp_path / "missing.txt"))


class TestReader:
    def test_utf8(self, tmp_path):
        path = tmp_path / "doc.txt"
        path.write_text("naïve café", encoding="utf-8")
        assert read_text(str(path)) == "naïve café"
        assert read_text(str(path), "UTF-8") == "naïve café"

    def test_utf16le(self, tmp_path):
        path = tmp_path / "doc.txt"
        path.write_bytes("hello".encode("utf-16-le"))
        assert read_text(str(path), "ucs2") == "hello"

    @pytest.mark.parametrize("encoding, data, expected", [
        ("ascii", b"abc\xff", "abc\ufffd"),
        ("binary", b"caf\xe9", "caf\u00e9"),
        ("latin1", b"caf\xe9", "caf\u00e9"),
        ("raw", b"\x00\xff", "\x00\u00ff"),
    ])
    def test_single_byte_encodings(self, tmp_path, encoding, data, expected):
        path = tmp_path / "doc.bin"
        path.write_bytes(data)
        assert read_text(str(path), encoding) == expected

    def test_hex_and_base64(self, tmp_path):
        path = tmp_path / "doc.bin"
        path.write_bytes(b"\x00\xffab")
        assert read_text(str(path), "hex") == "00ff6162"
        assert read_text(str(path), "base64") == base64.b64encode(b"\x00\xffab").decode("ascii")

    def test_unsupported_encoding_fails_before_reading(self, tmp_path):
        with pytest.raises(ConfigurationError):
            read_text(str(tmp_path / "does-not-exist.txt"), "ebcdic")

    def test_missing_file(self, tmp_path):
        with pytest.raises(OSError):
            read_text(str(tmp_path / "does-not-exist.txt"))

    def test_is_encoding(self):
        assert is_encoding("binary")
        assert is_encoding("UTF16LE")
        assert not is_encoding("koi8-r")
