"""
Document part construction with illustrative sample content.

Every paragraph style of the template is exercised at least once. Heading
and requirement paragraphs carry bookmark anchors so they can be targets of
cross-references.
"""

from typing import List, Optional
import xml.etree.ElementTree as ET
import logging

from ..config import SampleParagraph, TemplateConfig
from .context import GenerationContext
from .wordml import to_part_xml, w_root, w_sub, w_text

logger = logging.getLogger(__name__)

TITLE_FONT_SIZE = 48
TITLE_SPACING_AFTER = 400
INSTRUCTIONS = (
    "Instructions: Apply the 'Heading X' styles for section headers and 'Requirement X' "
    "styles for requirements. Use Tab to adjust indent levels."
)
CROSS_REFERENCE_EXAMPLE = "Example cross-reference: See Requirement 2.1 for authentication requirements."


def default_sample_paragraphs(config: TemplateConfig) -> List[SampleParagraph]:
    """
    Built-in illustrative content for a configuration.

    Paragraphs for heading or requirement levels the configuration does not
    define are left out, so the sample never references an undeclared style.
    """
    paragraphs: List[SampleParagraph] = []

    def heading(level: int, text: str) -> None:
        if level <= config.heading_levels:
            paragraphs.append(SampleParagraph(config.heading_style_id(level), text))

    def requirement(level: int, text: str) -> None:
        if level <= config.requirement_levels:
            paragraphs.append(SampleParagraph(config.requirement_style_id(level), text))

    notes = config.active_note_types

    def note(text: str) -> None:
        if notes:
            paragraphs.append(SampleParagraph(config.note_style_id(notes[0]), text))

    heading(1, "Introduction")
    requirement(1, "Requirement for H1: top-level requirement.")
    requirement(1, "Requirement for H1: another top-level requirement.")
    requirement(2, "This is a nested requirement (level 2).")
    requirement(3, "This is a deeply nested requirement (level 3).")

    heading(2, "Background")
    requirement(2, "Requirement for H2.")

    heading(1, "Functional Requirements")
    requirement(1, "The system shall provide user authentication.")
    requirement(2, "Users shall be able to log in with username and password.")
    requirement(2, "Users shall be able to reset their password via email.")
    requirement(1, "The system shall support data export.")

    heading(2, "Performance Requirements")
    requirement(2, "Response time shall be under 2 seconds.")

    heading(1, "Deep Nesting Example")
    for level in range(2, config.heading_levels + 1):
        heading(level, f"Level {level} Heading")

    requirement(1, "Requirement for H1 under deep example.")
    note("Some hints on Level 2.")
    paragraphs.append(SampleParagraph(config.anonymous_style_id, "Second, anonymous for H2."))
    for level in range(3, config.requirement_levels + 1):
        requirement(level, f"Requirement at level {level}.")
        if level == 5:
            note("Second Note for level 5.")

    for note_type in notes:
        paragraphs.append(SampleParagraph(config.note_style_id(note_type), f"Example for {note_type.name}."))

    return paragraphs


class DocumentBuilder:
    """
    Builds ``word/document.xml``.

    Bookmark ids come from the GenerationContext passed in, which is
    scoped to one generation call.
    """

    def __init__(self, config: TemplateConfig, context: GenerationContext):
        self.config = config
        self.context = context
        self._anchored_styles = set()
        if config.bookmark_anchors:
            self._anchored_styles.update(config.heading_style_id(level)
                                         for level in range(1, config.heading_levels + 1))
            self._anchored_styles.update(config.requirement_style_id(level)
                                         for level in range(1, config.requirement_levels + 1))

    def build(self) -> ET.Element:
        root = w_root("document")
        body = w_sub(root, "body")

        self.add_title(body, self.config.title)

        custom = self.config.sample_paragraphs
        paragraphs = list(custom) if custom is not None else default_sample_paragraphs(self.config)
        for paragraph in paragraphs:
            self.add_paragraph(body, paragraph.style_id, paragraph.text)

        if custom is None:
            self.add_paragraph(body, None, " ")
            self.add_paragraph(body, None, INSTRUCTIONS, italic=True)
            self.add_paragraph(body, None, CROSS_REFERENCE_EXAMPLE)

        logger.debug(
            f"Built document with {len(body)} paragraphs, "
            f"{self.context.bookmarks_allocated} bookmarks"
        )
        return root

    def to_xml(self) -> bytes:
        return to_part_xml(self.build())

    def add_title(self, body: ET.Element, text: str) -> ET.Element:
        paragraph = w_sub(body, "p")
        p_pr = w_sub(paragraph, "pPr")
        w_sub(p_pr, "spacing", after=TITLE_SPACING_AFTER)
        w_sub(p_pr, "jc", val="center")

        run = w_sub(paragraph, "r")
        r_pr = w_sub(run, "rPr")
        w_sub(r_pr, "b")
        w_sub(r_pr, "sz", val=TITLE_FONT_SIZE)
        w_sub(r_pr, "szCs", val=TITLE_FONT_SIZE)
        w_text(run, text)
        return paragraph

    def add_paragraph(self, body: ET.Element, style_id: Optional[str], text: str,
                      italic: bool = False) -> ET.Element:
        """
        Append a paragraph with one run.

        Args:
            body: ``w:body`` element
            style_id: Paragraph style id, or None for the default style
            text: Run text
            italic: Whether the run is italic

        Returns:
            The ``w:p`` element
        """
        paragraph = w_sub(body, "p")
        if style_id:
            w_sub(w_sub(paragraph, "pPr"), "pStyle", val=style_id)

        bookmark_id = None
        if style_id in self._anchored_styles:
            bookmark_id = self.context.next_bookmark_id()
            w_sub(paragraph, "bookmarkStart", id=bookmark_id, name=self.context.bookmark_name(style_id))

        run = w_sub(paragraph, "r")
        if italic:
            w_sub(w_sub(run, "rPr"), "i")
        w_text(run, text)

        if bookmark_id is not None:
            w_sub(paragraph, "bookmarkEnd", id=bookmark_id)
        return paragraph
