"""Shared pytest configuration and corpus fixtures"""

import logging
import sys
from pathlib import Path

import pytest

# Add src/ to path so tests run without an editable install
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))

from wikisearch.index import build_index  # noqa: E402
from wikisearch.models import Document  # noqa: E402


@pytest.fixture
def scenario_documents():
    """Three-document corpus used throughout the query tests"""
    return [
        Document(id=0, title="Cat", body="The Cat sat"),
        Document(id=1, title="Dog", body="A dog ran"),
        Document(id=2, title="Pets", body="Cats and dogs"),
    ]


@pytest.fixture
def scenario_index(scenario_documents):
    return build_index(scenario_documents)


@pytest.fixture
def abstract_dump_xml():
    """Small Wikipedia abstract dump in the enwiki-latest-abstract format"""
    return """<?xml version="1.0" encoding="utf-8"?>
<feed>
<doc>
<title>Wikipedia: Cat</title>
<url>https://en.wikipedia.org/wiki/Cat</url>
<abstract>The cat is a small domesticated carnivorous mammal.</abstract>
<links>
<sublink linktype="nav"><anchor>Etymology and naming</anchor><link>https://en.wikipedia.org/wiki/Cat#Etymology_and_naming</link></sublink>
<sublink linktype="nav"><anchor>Taxonomy</anchor><link>https://en.wikipedia.org/wiki/Cat#Taxonomy</link></sublink>
</links>
</doc>
<doc>
<title>Wikipedia: Dog</title>
<url>https://en.wikipedia.org/wiki/Dog</url>
<abstract>The dog is a domesticated descendant of the wolf.</abstract>
<links>
<sublink linktype="nav"><anchor>Taxonomy</anchor><link>https://en.wikipedia.org/wiki/Dog#Taxonomy</link></sublink>
</links>
</doc>
<doc>
<title>Wikipedia: Caterpillar</title>
<url>https://en.wikipedia.org/wiki/Caterpillar</url>
<abstract>Caterpillars are the larval stage of butterflies and moths.</abstract>
<links />
</doc>
<doc>
<title>Wikipedia: Empty</title>
<url>https://en.wikipedia.org/wiki/Empty</url>
<abstract />
</doc>
</feed>
"""


@pytest.fixture
def restore_root_logger():
    """setup_logging() replaces root handlers; put pytest's back afterwards"""
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    yield
    for handler in root.handlers:
        if handler not in saved_handlers:
            handler.close()
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)
