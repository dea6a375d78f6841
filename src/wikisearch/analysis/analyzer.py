"""
Analyzer: the single text → stems pipeline.

Pipeline (order is fixed):
1. Tokenize (lowercase ASCII-alphanumeric runs)
2. Filter stopwords
3. Stem (Snowball English)

Stopwords are removed BEFORE stemming. Stemming first could change a
stopword's surface form and let it slip past the filter.

The index builder and the query engine both take an Analyzer and use
nothing else to turn text into stems. Any divergence between the two
paths would silently produce false negatives.
"""

from typing import Callable, Iterable, List

from .stemmer import stem
from .stopwords import filter_stopwords
from .tokenizer import tokenize


class Analyzer:
    """
    Composes tokenizer, stopword filter and stemmer.

    The default components are the module-level functions. Other
    callables can be injected (e.g. a recording stemmer in tests), but
    the same Analyzer instance must then be used for both indexing and
    querying.
    """

    def __init__(
        self,
        tokenizer: Callable[[str], Iterable[str]] = tokenize,
        stopword_filter: Callable[[Iterable[str]], Iterable[str]] = filter_stopwords,
        stemmer: Callable[[str], str] = stem,
    ):
        self.tokenizer = tokenizer
        self.stopword_filter = stopword_filter
        self.stemmer = stemmer

    def analyze(self, text: str) -> List[str]:
        """
        Turn raw text into a sequence of stems.

        Args:
            text: Document body or query string

        Returns:
            Stems in text order (duplicates kept)

        Examples:
            >>> Analyzer().analyze("The Cats and the dogs")
            ['cat', 'dog']

            >>> Analyzer().analyze("the of and")
            []
        """
        tokens = self.tokenizer(text)
        tokens = self.stopword_filter(tokens)
        return [self.stemmer(t) for t in tokens]

    __call__ = analyze


default_analyzer = Analyzer()


def analyze(text: str) -> List[str]:
    """Analyze text with the default pipeline."""
    return default_analyzer.analyze(text)
