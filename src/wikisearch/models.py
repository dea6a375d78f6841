"""Document records produced by the corpus loader"""

from typing import Dict, Iterable, Tuple

from pydantic import BaseModel, ConfigDict, Field


class Link(BaseModel):
    """Outbound link from a Wikipedia abstract (not indexed)"""
    model_config = ConfigDict(frozen=True)

    linktype: str = ""
    anchor: str = ""
    link: str = ""


class Document(BaseModel):
    """
    Immutable corpus document.

    Identity is `id` (0-based load order). Only `body` is analyzed;
    `title`, `url` and `links` are for display.
    """
    model_config = ConfigDict(frozen=True)

    id: int = Field(..., ge=0, description="Unique id assigned by load order")
    title: str = ""
    body: str = Field(default="", description="Abstract text (the only analyzed field)")
    url: str = ""
    links: Tuple[Link, ...] = ()


def documents_by_id(documents: Iterable[Document]) -> Dict[int, Document]:
    return {doc.id: doc for doc in documents}
