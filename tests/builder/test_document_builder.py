"""
Tests for the document part builder and the generation context.
"""

import xml.etree.ElementTree as ET

import pytest

from requirement_template.builder.context import GenerationContext
from requirement_template.builder.document import (
    CROSS_REFERENCE_EXAMPLE,
    INSTRUCTIONS,
    DocumentBuilder,
    default_sample_paragraphs,
)
from requirement_template.builder.styles import StylesBuilder
from requirement_template.config import SampleParagraph, TemplateConfig

W = "{http://schemas.openxmlformats.org/wordprocessingml/2006/main}"
XML_SPACE = "{http://www.w3.org/XML/1998/namespace}space"


def _paragraphs(root):
    return root.find(f"{W}body").findall(f"{W}p")


def _style_of(paragraph):
    p_style = paragraph.find(f"{W}pPr/{W}pStyle")
    return None if p_style is None else p_style.get(f"{W}val")


def _text(paragraph):
    return "".join(t.text for t in paragraph.iter(f"{W}t"))


@pytest.mark.unit
class TestGenerationContext:
    """Test cases for GenerationContext."""

    def test_bookmark_ids(self):
        context = GenerationContext()

        assert [context.next_bookmark_id() for _ in range(3)] == [0, 1, 2]
        assert context.bookmarks_allocated == 3

    def test_bookmark_names_unique(self):
        context = GenerationContext()

        assert context.bookmark_name("REHeading1") == "REHeading1_1"
        assert context.bookmark_name("REHeading1") == "REHeading1_2"
        assert context.bookmark_name("RERequirement1") == "RERequirement1_1"

    def test_name_collision_skipped(self):
        context = GenerationContext()
        context.registered_names.add("Req_1")

        assert context.bookmark_name("Req") == "Req_2"
        assert context.bookmark_name("Req") == "Req_3"

    def test_contexts_are_independent(self):
        first, second = GenerationContext(), GenerationContext()
        first.next_bookmark_id()

        assert second.next_bookmark_id() == 0


@pytest.mark.unit
class TestDocumentBuilder:
    """Test cases for DocumentBuilder."""

    def test_title_first(self):
        root = DocumentBuilder(TemplateConfig(title="Spec"), GenerationContext()).build()
        title = _paragraphs(root)[0]

        assert _text(title) == "Spec"
        assert title.find(f"{W}pPr/{W}jc").get(f"{W}val") == "center"
        assert title.find(f"{W}r/{W}rPr/{W}sz").get(f"{W}val") == "48"

    def test_default_content_trailer(self):
        root = DocumentBuilder(TemplateConfig(), GenerationContext()).build()
        paragraphs = _paragraphs(root)

        assert [_text(p) for p in paragraphs[-3:]] == [" ", INSTRUCTIONS, CROSS_REFERENCE_EXAMPLE]
        assert paragraphs[-2].find(f"{W}r/{W}rPr/{W}i") is not None
        assert all(_style_of(p) is None for p in paragraphs[-3:])

    def test_referenced_styles_are_declared(self):
        for config in (TemplateConfig(), TemplateConfig(heading_levels=1, requirement_levels=1),
                       TemplateConfig(heading_levels=9, requirement_levels=12, include_notes=False)):
            document = DocumentBuilder(config, GenerationContext()).build()
            declared = {s.get(f"{W}styleId") for s in StylesBuilder(config).build().iter(f"{W}style")}
            referenced = {_style_of(p) for p in _paragraphs(document)} - {None}

            assert referenced <= declared

    def test_every_style_is_exercised(self):
        config = TemplateConfig()
        referenced = {p.style_id for p in default_sample_paragraphs(config)}
        declared = {s.get(f"{W}styleId") for s in StylesBuilder(config).build().iter(f"{W}style")}

        assert declared - referenced == {"Normal"}

    def test_bookmarks_on_anchored_paragraphs(self):
        context = GenerationContext()
        root = DocumentBuilder(TemplateConfig(), context).build()

        starts = list(root.iter(f"{W}bookmarkStart"))
        ends = list(root.iter(f"{W}bookmarkEnd"))
        ids = [b.get(f"{W}id") for b in starts]
        assert ids == [str(i) for i in range(len(starts))]
        assert [b.get(f"{W}id") for b in ends] == ids
        assert len({b.get(f"{W}name") for b in starts}) == len(starts)
        assert context.bookmarks_allocated == len(starts)

        for paragraph in _paragraphs(root):
            style = _style_of(paragraph)
            anchored = style is not None and style.startswith(("REHeading", "RERequirement"))
            names = [child.tag[len(W):] for child in paragraph]
            if anchored:
                assert names == ["pPr", "bookmarkStart", "r", "bookmarkEnd"]
            else:
                assert "bookmarkStart" not in names

    def test_anchors_disabled(self):
        context = GenerationContext()
        root = DocumentBuilder(TemplateConfig(bookmark_anchors=False), context).build()

        assert list(root.iter(f"{W}bookmarkStart")) == []
        assert context.bookmarks_allocated == 0

    def test_custom_samples_used_verbatim(self):
        config = TemplateConfig(sample_paragraphs=[
            SampleParagraph("REHeading1", "Scope"),
            SampleParagraph(None, "plain"),
            SampleParagraph("Unknown", "kept"),
        ])
        root = DocumentBuilder(config, GenerationContext()).build()
        paragraphs = _paragraphs(root)[1:]

        assert [_style_of(p) for p in paragraphs] == ["REHeading1", None, "Unknown"]
        assert [_text(p) for p in paragraphs] == ["Scope", "plain", "kept"]

    def test_whitespace_preserved(self):
        config = TemplateConfig(sample_paragraphs=[SampleParagraph(None, " padded "),
                                                   SampleParagraph(None, "tight")])
        root = DocumentBuilder(config, GenerationContext()).build()
        texts = list(root.iter(f"{W}t"))

        assert texts[1].get(XML_SPACE) == "preserve"
        assert texts[2].get(XML_SPACE) is None

    def test_to_xml_parses(self):
        content = DocumentBuilder(TemplateConfig(), GenerationContext()).to_xml()
        root = ET.fromstring(content)

        assert root.tag == f"{W}document"
        assert 'xml:space="preserve"'.encode("utf-8") in content
