"""
Snowball Stemmer for English (via NLTK).

Uses the Snowball stemming algorithm (improved Porter2 stemmer):
https://snowballstem.org/

Rule-based, deterministic, no dictionary and no IO. Stems are index keys,
not words:
- "cats" → "cat"
- "dogs" → "dog"
- "running" → "run"
- "abstracts" → "abstract"
- "searching" → "search"
"""

from nltk.stem.snowball import SnowballStemmer

# Initialize stemmer once (reusable, holds no per-call state)
_stemmer = SnowballStemmer('english')


def stem(word: str) -> str:
    """
    Stem a single token using the Snowball algorithm.

    Args:
        word: Lowercase token from the tokenizer

    Returns:
        Stemmed token

    Examples:
        >>> stem("cats")
        'cat'
        >>> stem("searching")
        'search'
    """
    return _stemmer.stem(word)
