"""
Query engine: AND-intersection of postings sets.

Steps:
1. Analyze the query with the same Analyzer used to build the index
2. Look up each stem's postings set (stems missing from the index are skipped)
3. Intersect the sets that were found

Outcomes:
- FOUND: at least one document matched
- NO_TERMS: the query analyzed to zero stems (empty, or only stopwords)
- NO_MATCH: stems were given, but nothing matched

NO_TERMS and NO_MATCH are both "no results found" for the user. They are
kept apart on the result so callers can tell them apart if they need to.

Unmatched stems:
    MatchPolicy.MATCHED_TERMS (default) intersects only the stems that are
    in the index; "cat zebra" behaves like "cat" when "zebra" was never
    indexed. MatchPolicy.ALL_TERMS is strict: any unknown stem means
    NO_MATCH. The choice trades recall for precision.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from functools import reduce
from typing import FrozenSet, List, Optional, Tuple

from ..analysis import Analyzer, default_analyzer
from .builder import InvertedIndex

logger = logging.getLogger(__name__)


class MatchPolicy(Enum):
    """How stems missing from the index affect a query"""
    MATCHED_TERMS = "matched"  # Drop unknown stems, intersect the rest
    ALL_TERMS = "all"  # Unknown stem → no results


class SearchOutcome(Enum):
    FOUND = "found"
    NO_TERMS = "no_terms"
    NO_MATCH = "no_match"


@dataclass(frozen=True)
class SearchResult:
    """Result of one query: matching ids plus how the query was resolved"""

    query: str
    stems: Tuple[str, ...]
    doc_ids: FrozenSet[int]
    outcome: SearchOutcome
    missing_stems: Tuple[str, ...] = ()

    @property
    def found(self) -> bool:
        return self.outcome is SearchOutcome.FOUND

    def __len__(self) -> int:
        return len(self.doc_ids)


def search(
    index: InvertedIndex,
    query_text: str,
    analyzer: Optional[Analyzer] = None,
    policy: MatchPolicy = MatchPolicy.MATCHED_TERMS,
) -> SearchResult:
    """
    Find documents containing all query stems.

    Args:
        index: Index built by build_index()
        query_text: Raw query string
        analyzer: Must be the analyzer the index was built with
            (default: shared default analyzer)
        policy: Treatment of stems absent from the index

    Returns:
        SearchResult; doc_ids is the full (unordered, unranked) match set

    Example:
        >>> result = search(index, "cat dog")
        >>> sorted(result.doc_ids)
        [2]
        >>> search(index, "the").outcome
        <SearchOutcome.NO_TERMS: 'no_terms'>
    """
    analyzer = analyzer or default_analyzer
    stems = tuple(analyzer.analyze(query_text))

    if not stems:
        logger.debug(f"Query {query_text!r}: no stems after analysis")
        return SearchResult(query_text, stems, frozenset(), SearchOutcome.NO_TERMS)

    found_sets: List[FrozenSet[int]] = []
    missing: List[str] = []
    for term in stems:
        postings = index.postings(term)
        if postings is None:
            missing.append(term)
        else:
            found_sets.append(postings)

    missing_stems = tuple(missing)

    if missing_stems and policy is MatchPolicy.ALL_TERMS:
        logger.debug(f"Query {query_text!r}: unknown stems {list(missing_stems)} (strict policy)")
        return SearchResult(query_text, stems, frozenset(), SearchOutcome.NO_MATCH, missing_stems)

    # Empty list must be "nothing matched", never the universal set
    if not found_sets:
        logger.debug(f"Query {query_text!r}: none of {list(stems)} indexed")
        return SearchResult(query_text, stems, frozenset(), SearchOutcome.NO_MATCH, missing_stems)

    # Smallest set first keeps intermediate intersections small
    found_sets.sort(key=len)
    doc_ids = reduce(lambda acc, postings: acc & postings, found_sets[1:], found_sets[0])

    outcome = SearchOutcome.FOUND if doc_ids else SearchOutcome.NO_MATCH
    logger.debug(
        f"Query {query_text!r}: stems={list(stems)} missing={list(missing_stems)} "
        f"→ {len(doc_ids)} docs ({outcome.value})"
    )

    return SearchResult(query_text, stems, frozenset(doc_ids), outcome, missing_stems)
