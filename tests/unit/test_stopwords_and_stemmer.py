"""
Unit tests for stopword filtering and Snowball stemming.
"""

from wikisearch.analysis.stemmer import stem
from wikisearch.analysis.stopwords import STOPWORDS, filter_stopwords, is_stopword


class TestStopwords:
    """Test the fixed stopword set"""

    def test_exact_stopword_set(self):
        """The set is exactly these ten words"""
        assert STOPWORDS == {"a", "and", "be", "have", "i", "in", "of", "that", "the", "to"}

    def test_filter_removes_stopwords(self):
        tokens = ["the", "cat", "and", "the", "hat"]
        assert list(filter_stopwords(tokens)) == ["cat", "hat"]

    def test_filter_preserves_order_and_duplicates(self):
        tokens = ["dog", "of", "cat", "dog", "in", "cat"]
        assert list(filter_stopwords(tokens)) == ["dog", "cat", "dog", "cat"]

    def test_filter_is_idempotent(self):
        tokens = ["a", "cat", "to", "be", "or", "not", "to", "be", "i", "have"]
        once = list(filter_stopwords(tokens))
        twice = list(filter_stopwords(once))
        assert once == twice == ["cat", "or", "not"]

    def test_common_words_outside_set_are_kept(self):
        """Only the ten listed words are stopwords"""
        for word in ["is", "an", "or", "for", "with", "this"]:
            assert not is_stopword(word)

    def test_match_is_exact(self):
        """Filtering compares exact lowercase strings"""
        assert list(filter_stopwords(["The", "thee", "and"])) == ["The", "thee"]

    def test_empty_sequence(self):
        assert list(filter_stopwords([])) == []


class TestStemmer:
    """Test Snowball stemming"""

    def test_plural_forms(self):
        assert stem("cats") == "cat"
        assert stem("dogs") == "dog"
        assert stem("abstracts") == "abstract"

    def test_verb_forms(self):
        assert stem("running") == "run"
        assert stem("searching") == "search"

    def test_base_forms_unchanged(self):
        for word in ["cat", "dog", "sat", "ran"]:
            assert stem(word) == word

    def test_deterministic(self):
        assert stem("deployments") == stem("deployments")

    def test_stemming_stems_is_stable(self):
        """Re-stemming these stems returns them unchanged"""
        for word in ["cats", "running", "searching", "abstracts"]:
            once = stem(word)
            assert stem(once) == once
