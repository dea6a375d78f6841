"""
Inverted index and boolean AND query engine.

Components:
- builder: documents → InvertedIndex (stem → frozenset of doc ids)
- query: query text → SearchResult (intersection of postings sets)

No ranking: every matching document is returned, unordered.
"""

from .builder import InvertedIndex, build_index
from .query import MatchPolicy, SearchOutcome, SearchResult, search

__all__ = [
    "InvertedIndex",
    "build_index",
    "MatchPolicy",
    "SearchOutcome",
    "SearchResult",
    "search",
]
