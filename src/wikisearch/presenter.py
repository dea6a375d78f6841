"""Rendering search results for the terminal"""

from typing import List, Mapping

from .index import SearchResult
from .models import Document

NO_RESULTS_MESSAGE = "no results found"


def top_results(
    result: SearchResult,
    documents_by_id: Mapping[int, Document],
    limit: int,
) -> List[Document]:
    """
    First `limit` matching documents, ordered by id.

    Never assumes `limit` results exist: a query with 2 matches and
    limit=5 returns 2 documents.

    Raises:
        ValueError: limit is not positive
    """
    if limit < 1:
        raise ValueError(f"limit must be positive, got {limit}")

    shown = sorted(result.doc_ids)[:min(limit, len(result.doc_ids))]
    return [documents_by_id[doc_id] for doc_id in shown]


def format_document(doc: Document) -> str:
    line = f"[{doc.id}] {doc.title}"
    if doc.url:
        line += f" - {doc.url}"
    return line


def format_result(
    result: SearchResult,
    documents_by_id: Mapping[int, Document],
    limit: int,
) -> str:
    if not result.found:
        return NO_RESULTS_MESSAGE

    shown = top_results(result, documents_by_id, limit)
    lines = [f"{len(result)} results for '{result.query}' (showing {len(shown)}):"]
    lines.extend(f"  {format_document(doc)}" for doc in shown)
    return "\n".join(lines)


def format_documents(query: str, documents: List[Document], limit: int) -> str:
    """Same layout as format_result, for baseline scans that return documents"""
    if not documents:
        return NO_RESULTS_MESSAGE

    shown = documents[:min(limit, len(documents))]
    lines = [f"{len(documents)} results for '{query}' (showing {len(shown)}):"]
    lines.extend(f"  {format_document(doc)}" for doc in shown)
    return "\n".join(lines)
