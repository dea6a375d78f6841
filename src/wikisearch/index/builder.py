"""
Inverted index builder - maps stems to the documents containing them.

Creates an in-memory, read-only index held for the process lifetime.
"""

import logging
import time
from collections import defaultdict
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, Iterator, Mapping, Optional, Set

from ..analysis import Analyzer, default_analyzer
from ..models import Document

logger = logging.getLogger(__name__)


class InvertedIndex:
    """
    Immutable mapping: stem → frozenset of document ids.

    No term frequencies, no positions. A document id is listed under a
    stem iff the stem occurs at least once in that document's analyzed
    body. Postings are frozensets behind a read-only proxy, so any
    number of readers can share one index.
    """

    __slots__ = ('_postings', '_document_count')

    def __init__(self, postings: Mapping[str, FrozenSet[int]], document_count: int = 0):
        self._postings = MappingProxyType(dict(postings))
        self._document_count = document_count

    @property
    def document_count(self) -> int:
        """Number of documents the index was built from (including ones with no stems)"""
        return self._document_count

    def postings(self, stem: str) -> Optional[FrozenSet[int]]:
        """Postings set for a stem, or None when the stem was never indexed."""
        return self._postings.get(stem)

    def stems(self) -> Iterator[str]:
        return iter(self._postings)

    def __contains__(self, stem: object) -> bool:
        return stem in self._postings

    def __len__(self) -> int:
        return len(self._postings)

    def __repr__(self) -> str:
        return f"InvertedIndex(stems={len(self)}, documents={self._document_count})"


def build_index(
    documents: Iterable[Document],
    analyzer: Optional[Analyzer] = None,
) -> InvertedIndex:
    """
    Build an inverted index over document bodies.

    Every document is analyzed; each resulting stem gets the document id
    added to its postings set. A document contributes at most once per
    stem, however often the stem occurs.

    Args:
        documents: Loaded corpus (any iterable, consumed once)
        analyzer: Analyzer to use; must be the same one used for queries
            (default: shared default analyzer)

    Returns:
        InvertedIndex (empty for an empty corpus)

    Example:
        >>> docs = [Document(id=0, body="The Cat sat"), Document(id=1, body="Cats and dogs")]
        >>> index = build_index(docs)
        >>> sorted(index.postings("cat"))
        [0, 1]
        >>> index.postings("the") is None
        True
    """
    analyzer = analyzer or default_analyzer
    started = time.perf_counter()

    postings: Dict[str, Set[int]] = defaultdict(set)
    document_count = 0

    for doc in documents:
        for term in analyzer.analyze(doc.body):
            postings[term].add(doc.id)
        document_count += 1

    # Freeze postings so the index cannot be mutated after construction
    index = InvertedIndex(
        {term: frozenset(ids) for term, ids in postings.items()},
        document_count=document_count,
    )

    elapsed_ms = (time.perf_counter() - started) * 1000
    logger.info(f"Built inverted index: {len(index)} unique stems from {document_count} documents in {elapsed_ms:.0f} ms")

    return index
