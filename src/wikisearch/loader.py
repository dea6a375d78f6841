"""
Corpus loader for Wikipedia abstract dumps.

Dump layout (enwiki-latest-abstract*.xml):

    <feed>
      <doc>
        <title>Wikipedia: Anarchism</title>
        <url>https://en.wikipedia.org/wiki/Anarchism</url>
        <abstract>Anarchism is a political philosophy...</abstract>
        <links>
          <sublink linktype="nav"><anchor>History</anchor><link>https://...</link></sublink>
        </links>
      </doc>
      ...
    </feed>

Each <doc> becomes a Document with id = position in the dump (0-based);
<abstract> becomes the body. Malformed input is rejected here, before it
reaches the analyzer: a broken dump fails the whole load, with a message
saying what is wrong and where.
"""

import logging
import time
from pathlib import Path
from typing import Any, List, Mapping, Union
from xml.parsers.expat import ExpatError

import xmltodict

from .errors import CorpusLoadError
from .models import Document, Link
from .utils import calculate_file_hash

logger = logging.getLogger(__name__)


def _text(value: Any) -> str:
    """Element text from xmltodict output (None for empty elements, dict when attributed)"""
    if value is None:
        return ""
    if isinstance(value, Mapping):
        return value.get('#text') or ""
    return str(value)


def _parse_links(links_node: Any) -> tuple:
    if not isinstance(links_node, Mapping):
        return ()

    sublinks = links_node.get('sublink') or []
    return tuple(
        Link(
            linktype=_text(sub.get('@linktype')),
            anchor=_text(sub.get('anchor')),
            link=_text(sub.get('link')),
        )
        for sub in sublinks
        if isinstance(sub, Mapping)
    )


def _parse_doc(position: int, node: Any) -> Document:
    if not isinstance(node, Mapping) or 'title' not in node:
        raise CorpusLoadError(
            f"Malformed <doc> at position {position}: missing <title> element.\n"
            f"Every <doc> in an abstract dump needs a <title>.\n"
            f"Reason: documents are identified by load order, so one broken\n"
            f"entry would shift every id after it."
        )

    return Document(
        id=position,
        title=_text(node.get('title')),
        url=_text(node.get('url')),
        body=_text(node.get('abstract')),
        links=_parse_links(node.get('links')),
    )


def parse_documents(xml_text: str, source: str = "<string>") -> List[Document]:
    """
    Parse abstract-dump XML into documents.

    Args:
        xml_text: Full XML content
        source: Name used in error messages (file path)

    Returns:
        Documents in dump order, ids 0..n-1

    Raises:
        CorpusLoadError: XML syntax error, wrong root element, malformed <doc>
    """
    try:
        data = xmltodict.parse(
            xml_text,
            attr_prefix='@',
            cdata_key='#text',
            force_list=('doc', 'sublink'),  # Single <doc> still comes back as a list
        )
    except ExpatError as e:
        raise CorpusLoadError(
            f"Invalid XML syntax in '{source}':\n"
            f"  {str(e)[:300]}\n\n"
            f"Re-download or re-extract the dump and try again."
        ) from e

    if not data or 'feed' not in data:
        root = next(iter(data), None) if data else None
        raise CorpusLoadError(
            f"Unexpected root element <{root}> in '{source}'.\n"
            f"Expected a Wikipedia abstract dump with a <feed> root."
        )

    feed = data['feed']
    if not isinstance(feed, Mapping):
        # <feed/> or a feed holding only text
        return []

    docs = feed.get('doc') or []

    return [_parse_doc(position, node) for position, node in enumerate(docs)]


def load_documents(path: Union[str, Path], encoding: str = "utf-8") -> List[Document]:
    """
    Load a Wikipedia abstract dump from disk.

    Args:
        path: Path to the XML dump
        encoding: Text encoding of the dump

    Returns:
        Documents in dump order

    Raises:
        CorpusLoadError: file missing/unreadable, not valid text, or malformed
    """
    path = Path(path)
    started = time.perf_counter()

    try:
        content = path.read_bytes()
    except FileNotFoundError as e:
        raise CorpusLoadError(
            f"Corpus file not found: '{path}'.\n"
            f"Set WIKISEARCH_CORPUS or pass --corpus with the path to an\n"
            f"enwiki-latest-abstract*.xml dump."
        ) from e
    except OSError as e:
        raise CorpusLoadError(f"Cannot read corpus file '{path}': {e}") from e

    try:
        xml_text = content.decode(encoding)
    except UnicodeDecodeError as e:
        raise CorpusLoadError(
            f"File '{path}' is not valid {encoding} text.\n"
            f"Error at byte position {e.start}: {e.reason}"
        ) from e

    documents = parse_documents(xml_text, source=str(path))

    elapsed = time.perf_counter() - started
    logger.info(f"Loaded {len(documents)} documents from {path} in {elapsed:.2f} seconds")
    logger.debug(f"Corpus fingerprint: sha256={calculate_file_hash(content)} ({len(content)} bytes)")

    return documents
