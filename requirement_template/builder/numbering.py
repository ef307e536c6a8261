"""
Numbering part construction.

Headings and requirements each get a multilevel decimal list whose level
text is a dotted counter template (``%1``, ``%1.%2``, ...). Every note type
gets a single-level list whose "number" is its fixed prefix text.
"""

import xml.etree.ElementTree as ET
import logging

from ..config import NoteType, TemplateConfig
from .wordml import to_part_xml, w_root, w_sub

logger = logging.getLogger(__name__)

HEADING_ABSTRACT_ID = 1
REQUIREMENT_ABSTRACT_ID = 2
NOTE_ABSTRACT_BASE = 3

HEADING_NUM_ID = 1
REQUIREMENT_NUM_ID = 2
NOTE_NUM_BASE = 10


def dotted_counter(level_index: int) -> str:
    """``%1``, ``%1.%2``, ``%1.%2.%3`` ... for a zero-based level index."""
    return ".".join(f"%{j + 1}" for j in range(level_index + 1))


def heading_level_text(level_index: int) -> str:
    """Heading level text: ``%1. `` on the first level, ``%1.%2 `` below it."""
    text = dotted_counter(level_index)
    if level_index == 0:
        text += "."
    return text + " "


def requirement_level_text(level_index: int) -> str:
    """Requirement level text: ``%1.`` on the first level, ``%1.%2`` below it."""
    text = dotted_counter(level_index)
    if level_index == 0:
        text += "."
    return text


def note_num_id(note_index: int) -> int:
    return NOTE_NUM_BASE + note_index


def note_abstract_id(note_index: int) -> int:
    return NOTE_ABSTRACT_BASE + note_index


class NumberingBuilder:
    """Builds ``word/numbering.xml`` from a TemplateConfig."""

    def __init__(self, config: TemplateConfig):
        self.config = config

    def build(self) -> ET.Element:
        root = w_root("numbering")

        headings = self._abstract(root, HEADING_ABSTRACT_ID, "multilevel")
        for index in range(self.config.heading_levels):
            self._decimal_level(headings, index, heading_level_text(index), "nothing")

        requirements = self._abstract(root, REQUIREMENT_ABSTRACT_ID, "multilevel")
        for index in range(self.config.requirement_numbering_levels):
            self._decimal_level(requirements, index, requirement_level_text(index), "tab")

        notes = self.config.active_note_types
        for index, note in enumerate(notes):
            self._note_level(self._abstract(root, note_abstract_id(index), "singleLevel"), note)

        self._instance(root, HEADING_NUM_ID, HEADING_ABSTRACT_ID)
        self._instance(root, REQUIREMENT_NUM_ID, REQUIREMENT_ABSTRACT_ID)
        for index in range(len(notes)):
            self._instance(root, note_num_id(index), note_abstract_id(index))

        logger.debug(
            f"Built numbering: {self.config.heading_levels} heading levels, "
            f"{self.config.requirement_numbering_levels} requirement levels, {len(notes)} note lists"
        )
        return root

    def to_xml(self) -> bytes:
        return to_part_xml(self.build())

    def _abstract(self, root: ET.Element, abstract_id: int, multi_level_type: str) -> ET.Element:
        abstract_el = w_sub(root, "abstractNum", abstractNumId=abstract_id)
        w_sub(abstract_el, "multiLevelType", val=multi_level_type)
        return abstract_el

    def _indentation(self, lvl_el: ET.Element, hanging: int) -> None:
        indent = self.config.text_indent_twips
        p_pr = w_sub(lvl_el, "pPr")
        tabs = w_sub(p_pr, "tabs")
        w_sub(tabs, "tab", val="left", leader="dot", pos=indent)
        w_sub(p_pr, "ind", left=indent, hanging=hanging)

    def _decimal_level(self, abstract_el: ET.Element, index: int, text: str, suffix: str) -> None:
        lvl_el = w_sub(abstract_el, "lvl", ilvl=index)
        w_sub(lvl_el, "start", val=1)
        w_sub(lvl_el, "numFmt", val="decimal")
        w_sub(lvl_el, "suff", val=suffix)
        w_sub(lvl_el, "lvlText", val=text)
        w_sub(lvl_el, "lvlJc", val="left")
        self._indentation(lvl_el, self.config.text_indent_twips)

    def _note_level(self, abstract_el: ET.Element, note: NoteType) -> None:
        lvl_el = w_sub(abstract_el, "lvl", ilvl=0)
        w_sub(lvl_el, "start", val=1)
        w_sub(lvl_el, "numFmt", val="none")
        w_sub(lvl_el, "suff", val="nothing")
        w_sub(lvl_el, "lvlText", val=note.text)
        w_sub(lvl_el, "lvlJc", val="left")
        self._indentation(lvl_el, 0)
        r_pr = w_sub(lvl_el, "rPr")
        w_sub(r_pr, "b")

    def _instance(self, root: ET.Element, num_id: int, abstract_id: int) -> None:
        num_el = w_sub(root, "num", numId=num_id)
        w_sub(num_el, "abstractNumId", val=abstract_id)

