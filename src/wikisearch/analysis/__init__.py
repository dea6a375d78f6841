"""
Text analysis shared by indexing and querying.

Components:
- tokenizer: lowercase ASCII-alphanumeric tokens
- stopwords: fixed stopword set and filter
- stemmer: Snowball English stemmer (NLTK)
- analyzer: tokenize → filter → stem, the only text → stems path
"""

from .tokenizer import tokenize, TokenStream
from .stopwords import STOPWORDS, filter_stopwords
from .stemmer import stem
from .analyzer import Analyzer, analyze, default_analyzer

__all__ = [
    "tokenize",
    "TokenStream",
    "STOPWORDS",
    "filter_stopwords",
    "stem",
    "Analyzer",
    "analyze",
    "default_analyzer",
]
