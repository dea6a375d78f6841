"""
wikisearch - boolean keyword search over Wikipedia abstracts.

Indexing pipeline:
    documents → analyze (tokenize → drop stopwords → stem) → inverted index

Query pipeline:
    query → analyze (same Analyzer) → postings sets → intersection

The index is built once and is read-only afterwards. It is passed
explicitly to search(); there is no module-level index.
"""

from .analysis import Analyzer, analyze
from .index import InvertedIndex, MatchPolicy, SearchOutcome, SearchResult, build_index, search
from .models import Document, Link

__version__ = "0.1.0"

__all__ = [
    "Analyzer",
    "analyze",
    "InvertedIndex",
    "MatchPolicy",
    "SearchOutcome",
    "SearchResult",
    "build_index",
    "search",
    "Document",
    "Link",
]
