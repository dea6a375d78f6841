"""
Index-free baseline searches.

Linear scans over every document body, kept as a reference point for the
inverted index:

- search_naive: case-sensitive substring test. Cheapest per document, but
  "cat" matches "caterpillar" and "education" and misses "Cat".
- search_regex: case-insensitive whole-word regex. Correct word matching,
  but cost grows linearly with corpus size (seconds on a medium dump).

Neither stems, so "cat" does not find "cats".
"""

import logging
import re
import time
from typing import Iterable, List

from .models import Document

logger = logging.getLogger(__name__)


def search_naive(documents: Iterable[Document], term: str) -> List[Document]:
    """Documents whose body contains `term` as a raw substring."""
    started = time.perf_counter()

    filtered = [doc for doc in documents if term in doc.body]

    elapsed_ms = (time.perf_counter() - started) * 1000
    logger.info(f"Naive filter down to {len(filtered)} docs with term '{term}' in {elapsed_ms:.0f} ms")
    return filtered


def search_regex(documents: Iterable[Document], term: str) -> List[Document]:
    """
    Documents whose body contains `term` as a whole word, ignoring case.

    Args:
        documents: Corpus to scan
        term: Search term (matched literally; regex metacharacters are escaped)

    Returns:
        Matching documents in corpus order
    """
    started = time.perf_counter()
    pattern = re.compile(rf"\b{re.escape(term)}\b", re.IGNORECASE)

    filtered = [doc for doc in documents if pattern.search(doc.body)]

    elapsed_ms = (time.perf_counter() - started) * 1000
    logger.info(f"Regex filter down to {len(filtered)} docs with term '{term}' in {elapsed_ms:.0f} ms")
    return filtered
