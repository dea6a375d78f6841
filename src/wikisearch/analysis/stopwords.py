"""Stopword filtering for tokenized text."""

from typing import Iterable, Iterator

# Exact set used by the search engine. Tokens arrive lowercased from the
# tokenizer, so membership is a plain string comparison.
STOPWORDS = frozenset([
    'a', 'and', 'be', 'have', 'i', 'in', 'of', 'that', 'the', 'to'
])


def is_stopword(token: str) -> bool:
    return token in STOPWORDS


def filter_stopwords(tokens: Iterable[str]) -> Iterator[str]:
    """
    Drop stopwords from a token sequence.

    Order is preserved and duplicates are kept. Filtering twice gives
    the same sequence as filtering once.

    Examples:
        >>> list(filter_stopwords(['the', 'cat', 'and', 'the', 'hat']))
        ['cat', 'hat']
    """
    return (t for t in tokens if t not in STOPWORDS)
