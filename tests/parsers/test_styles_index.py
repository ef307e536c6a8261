"""
Tests for style id indexes and the manifest model.
"""

import pytest
from lxml import etree

from requirement_template.parser.content_types import ContentTypes
from requirement_template.parser.styles_index import (
    declared_style_ids,
    missing_style_ids,
    referenced_paragraph_styles,
)

W_NS = "http://schemas.openxmlformats.org/wordprocessingml/2006/main"

STYLES_XML = f'''<w:styles xmlns:w="{W_NS}">
    <w:docDefaults/>
    <w:style w:type="paragraph" w:styleId="Normal"><w:name w:val="Normal"/></w:style>
    <w:style w:type="paragraph" styleId="Legacy"><w:name w:val="Legacy"/></w:style>
    <w:style w:type="paragraph"><w:name w:val="No id"/></w:style>
</w:styles>'''

DOCUMENT_XML = f'''<w:document xmlns:w="{W_NS}"><w:body>
    <w:p><w:pPr><w:pStyle w:val="Heading1"/></w:pPr></w:p>
    <w:p><w:pPr><w:pStyle w:val="Normal"/></w:pPr><w:r><w:rPr><w:rStyle w:val="Strong"/></w:rPr></w:r></w:p>
    <w:p><w:pPr><w:pStyle w:val="Heading1"/></w:pPr></w:p>
    <w:p><w:pPr><w:pStyle val="Requirement9"/></w:pPr></w:p>
    <w:p><w:pPr><w:pStyle w:val=""/></w:pPr></w:p>
</w:body></w:document>'''


@pytest.mark.unit
class TestStyleIndexes:
    """Test cases for declared and referenced style ids."""

    def test_declared_style_ids(self):
        """Qualified ids are read, unqualified ids are accepted, missing ids skipped."""
        assert declared_style_ids(etree.fromstring(STYLES_XML)) == {"Normal", "Legacy"}

    def test_declared_style_ids_without_part(self):
        assert declared_style_ids(None) == set()

    def test_referenced_paragraph_styles(self):
        """Distinct paragraph styles in first-reference order; run styles are ignored."""
        referenced = referenced_paragraph_styles(etree.fromstring(DOCUMENT_XML))
        assert referenced == ["Heading1", "Normal", "Requirement9"]

    def test_referenced_without_part(self):
        assert referenced_paragraph_styles(None) == []

    def test_missing_style_ids(self):
        missing = missing_style_ids(etree.fromstring(STYLES_XML), etree.fromstring(DOCUMENT_XML))
        assert missing == ["Heading1", "Requirement9"]

    def test_missing_style_ids_without_styles_part(self):
        """Without a styles part every reference is missing."""
        missing = missing_style_ids(None, etree.fromstring(DOCUMENT_XML))
        assert missing == ["Heading1", "Normal", "Requirement9"]


@pytest.mark.unit
class TestContentTypes:
    """Test cases for ContentTypes."""

    def test_from_element(self, sample_zip_content):
        root = etree.fromstring(sample_zip_content["[Content_Types].xml"].encode("utf-8"))
        content_types = ContentTypes.from_element(root)

        assert content_types.has_default("xml", "application/xml")
        assert not content_types.has_default("xml", "text/xml")
        assert content_types.has_override("/word/styles.xml")
        assert not content_types.has_override("word/styles.xml")
        assert not content_types.has_override("/word/footnotes.xml")

    def test_comments_are_skipped(self):
        root = etree.fromstring(
            b'<Types xmlns="http://schemas.openxmlformats.org/package/2006/content-types">'
            b'<!-- note --><Default Extension="rels" ContentType="a"/></Types>'
        )
        content_types = ContentTypes.from_element(root)

        assert content_types.defaults == {"rels": "a"}
        assert content_types.overrides == {}
