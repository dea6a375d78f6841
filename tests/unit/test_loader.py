"""
Unit tests for the Wikipedia abstract dump loader.
"""

import pytest
from wikisearch.errors import CorpusLoadError
from wikisearch.loader import load_documents, parse_documents
from wikisearch.models import Link


class TestParseDocuments:
    """Parsing XML text into documents"""

    def test_documents_in_order(self, abstract_dump_xml):
        docs = parse_documents(abstract_dump_xml)
        assert [d.id for d in docs] == [0, 1, 2, 3]
        assert [d.title for d in docs] == [
            "Wikipedia: Cat", "Wikipedia: Dog", "Wikipedia: Caterpillar", "Wikipedia: Empty"
        ]

    def test_abstract_becomes_body(self, abstract_dump_xml):
        docs = parse_documents(abstract_dump_xml)
        assert docs[0].body == "The cat is a small domesticated carnivorous mammal."
        assert docs[0].url == "https://en.wikipedia.org/wiki/Cat"

    def test_links_parsed(self, abstract_dump_xml):
        docs = parse_documents(abstract_dump_xml)
        assert docs[0].links == (
            Link(linktype="nav", anchor="Etymology and naming",
                 link="https://en.wikipedia.org/wiki/Cat#Etymology_and_naming"),
            Link(linktype="nav", anchor="Taxonomy",
                 link="https://en.wikipedia.org/wiki/Cat#Taxonomy"),
        )

    def test_single_sublink_is_still_a_tuple(self, abstract_dump_xml):
        docs = parse_documents(abstract_dump_xml)
        assert len(docs[1].links) == 1
        assert docs[1].links[0].anchor == "Taxonomy"

    def test_empty_elements(self, abstract_dump_xml):
        """<abstract /> and <links /> become empty values, missing <links> too"""
        docs = parse_documents(abstract_dump_xml)
        assert docs[2].links == ()
        assert docs[3].body == ""
        assert docs[3].links == ()

    def test_single_doc(self):
        docs = parse_documents("<feed><doc><title>Only</title><abstract>one</abstract></doc></feed>")
        assert len(docs) == 1
        assert docs[0].id == 0
        assert docs[0].body == "one"

    def test_empty_feed(self):
        assert parse_documents("<feed></feed>") == []
        assert parse_documents("<feed/>") == []

    def test_wrong_root(self):
        with pytest.raises(CorpusLoadError) as exc_info:
            parse_documents("<rss><doc><title>x</title></doc></rss>")
        assert "<rss>" in str(exc_info.value)
        assert "<feed>" in str(exc_info.value)

    def test_invalid_xml(self):
        with pytest.raises(CorpusLoadError) as exc_info:
            parse_documents("<feed><doc><title>broken</doc></feed>", source="dump.xml")
        assert "Invalid XML syntax in 'dump.xml'" in str(exc_info.value)

    def test_empty_input(self):
        with pytest.raises(CorpusLoadError):
            parse_documents("")

    def test_doc_without_title(self):
        xml = "<feed><doc><title>ok</title></doc><doc><abstract>no title</abstract></doc></feed>"
        with pytest.raises(CorpusLoadError) as exc_info:
            parse_documents(xml)
        assert "position 1" in str(exc_info.value)

    def test_empty_doc_element(self):
        with pytest.raises(CorpusLoadError):
            parse_documents("<feed><doc/></feed>")


class TestLoadDocuments:
    """Reading dumps from disk"""

    def test_load_from_file(self, tmp_path, abstract_dump_xml):
        dump = tmp_path / "abstracts.xml"
        dump.write_text(abstract_dump_xml, encoding="utf-8")

        docs = load_documents(dump)
        assert len(docs) == 4
        assert docs[1].title == "Wikipedia: Dog"

    def test_load_from_str_path(self, tmp_path, abstract_dump_xml):
        dump = tmp_path / "abstracts.xml"
        dump.write_text(abstract_dump_xml, encoding="utf-8")
        assert len(load_documents(str(dump))) == 4

    def test_non_ascii_content_preserved(self, tmp_path):
        dump = tmp_path / "abstracts.xml"
        dump.write_text(
            "<feed><doc><title>Café</title><abstract>Un café à Paris</abstract></doc></feed>",
            encoding="utf-8",
        )
        docs = load_documents(dump)
        assert docs[0].title == "Café"
        assert docs[0].body == "Un café à Paris"

    def test_missing_file(self, tmp_path):
        with pytest.raises(CorpusLoadError) as exc_info:
            load_documents(tmp_path / "missing.xml")
        assert "Corpus file not found" in str(exc_info.value)

    def test_directory_instead_of_file(self, tmp_path):
        with pytest.raises(CorpusLoadError):
            load_documents(tmp_path)

    def test_invalid_utf8(self, tmp_path):
        dump = tmp_path / "latin1.xml"
        dump.write_bytes("<feed><doc><title>Caf\xe9</title></doc></feed>".encode("latin-1"))

        with pytest.raises(CorpusLoadError) as exc_info:
            load_documents(dump)
        assert "not valid utf-8 text" in str(exc_info.value)
