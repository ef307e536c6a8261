"""
Styles part construction.

Document defaults, the ``Normal`` base style, the anonymous supplement
style, one style per note type, and the per-level requirement and heading
styles. Heading and requirement styles are chained through ``basedOn`` so
later levels inherit the first level's run properties.
"""

from typing import Optional
import xml.etree.ElementTree as ET
import logging

from ..config import NoteType, TemplateConfig
from .numbering import HEADING_NUM_ID, REQUIREMENT_NUM_ID, note_num_id
from .wordml import to_part_xml, w_root, w_sub

logger = logging.getLogger(__name__)

BASE_STYLE_ID = "Normal"
SUPPLEMENT_SPACING_BEFORE = 120
HEADING_SPACING_BEFORE = 360
HEADING_SPACING_AFTER = 120
REQUIREMENT_SPACING_BEFORE = 180


class StylesBuilder:
    """Builds ``word/styles.xml`` from a TemplateConfig."""

    def __init__(self, config: TemplateConfig):
        self.config = config

    def build(self) -> ET.Element:
        root = w_root("styles")
        self._doc_defaults(root)
        self._normal_style(root)
        self._anonymous_style(root)

        for index, note in enumerate(self.config.active_note_types):
            self._note_style(root, note, index)
        for level in range(1, self.config.requirement_levels + 1):
            self._requirement_style(root, level)
        for level in range(1, self.config.heading_levels + 1):
            self._heading_style(root, level)

        logger.debug(f"Built {len(root) - 1} styles")
        return root

    def to_xml(self) -> bytes:
        return to_part_xml(self.build())

    def _fonts(self, r_pr: ET.Element) -> None:
        name = self.config.font_name
        w_sub(r_pr, "rFonts", ascii=name, hAnsi=name, cs=name)

    def _size(self, r_pr: ET.Element, size: int) -> None:
        w_sub(r_pr, "sz", val=size)
        w_sub(r_pr, "szCs", val=size)

    def _doc_defaults(self, root: ET.Element) -> None:
        doc_defaults = w_sub(root, "docDefaults")
        r_pr = w_sub(w_sub(doc_defaults, "rPrDefault"), "rPr")
        self._fonts(r_pr)
        self._size(r_pr, self.config.font_size)
        p_pr = w_sub(w_sub(doc_defaults, "pPrDefault"), "pPr")
        w_sub(p_pr, "spacing", lineRule="auto")

    def _custom_style(self, root: ET.Element, style_id: str, name: str, based_on: str,
                      next_style: Optional[str] = None) -> ET.Element:
        style = w_sub(root, "style", type="paragraph", customStyle=1, styleId=style_id)
        w_sub(style, "name", val=name)
        w_sub(style, "basedOn", val=based_on)
        if next_style:
            w_sub(style, "next", val=next_style)
        w_sub(style, "qFormat")
        return style

    def _numbering(self, p_pr: ET.Element, num_id: int, level_index: int) -> None:
        num_pr = w_sub(p_pr, "numPr")
        w_sub(num_pr, "ilvl", val=level_index)
        w_sub(num_pr, "numId", val=num_id)

    def _dotted_tab(self, p_pr: ET.Element) -> None:
        tabs = w_sub(p_pr, "tabs")
        w_sub(tabs, "tab", val="left", leader="dot", pos=self.config.text_indent_twips)

    def _hanging_indent(self, p_pr: ET.Element) -> None:
        indent = self.config.text_indent_twips
        w_sub(p_pr, "ind", left=indent, hanging=indent)

    def _normal_style(self, root: ET.Element) -> None:
        style = w_sub(root, "style", type="paragraph", default=1, styleId=BASE_STYLE_ID)
        w_sub(style, "name", val=BASE_STYLE_ID)
        r_pr = w_sub(style, "rPr")
        self._fonts(r_pr)
        self._size(r_pr, self.config.font_size)

    def _anonymous_style(self, root: ET.Element) -> None:
        style_id = self.config.anonymous_style_id
        style = self._custom_style(root, style_id, f"{self.config.supplement_name_prefix} - Absatz",
                                   BASE_STYLE_ID, next_style=style_id)
        p_pr = w_sub(style, "pPr")
        w_sub(p_pr, "spacing", before=SUPPLEMENT_SPACING_BEFORE)
        w_sub(p_pr, "ind", left=self.config.text_indent_twips)
        w_sub(w_sub(style, "rPr"), "i")

    def _note_style(self, root: ET.Element, note: NoteType, index: int) -> None:
        style = self._custom_style(root, self.config.note_style_id(note),
                                   f"{self.config.supplement_name_prefix} - {note.name}",
                                   BASE_STYLE_ID, next_style=self.config.anonymous_style_id)
        p_pr = w_sub(style, "pPr")
        self._numbering(p_pr, note_num_id(index), 0)
        w_sub(p_pr, "spacing", before=SUPPLEMENT_SPACING_BEFORE)
        w_sub(w_sub(style, "rPr"), "i")

    def _heading_style(self, root: ET.Element, level: int) -> None:
        config = self.config
        based_on = BASE_STYLE_ID if level == 1 else config.heading_style_id(level - 1)
        next_style = None
        if level + 1 <= config.requirement_levels:
            next_style = config.requirement_style_id(level + 1)

        style = self._custom_style(root, config.heading_style_id(level),
                                   f"{config.heading_name_prefix} {level}", based_on, next_style)
        p_pr = w_sub(style, "pPr")
        self._numbering(p_pr, HEADING_NUM_ID, level - 1)
        self._dotted_tab(p_pr)
        w_sub(p_pr, "spacing", before=HEADING_SPACING_BEFORE, after=HEADING_SPACING_AFTER)
        self._hanging_indent(p_pr)
        w_sub(p_pr, "outlineLvl", val=0)

        if level == 1:
            # later levels inherit through basedOn
            r_pr = w_sub(style, "rPr")
            w_sub(r_pr, "b")
            self._size(r_pr, config.heading_font_size)

    def _requirement_style(self, root: ET.Element, level: int) -> None:
        config = self.config
        numbering_level = min(level, config.requirement_numbering_levels) - 1
        based_on = BASE_STYLE_ID if level == 1 else config.requirement_style_id(level - 1)
        style_id = config.requirement_style_id(level)

        style = self._custom_style(root, style_id, f"{config.requirement_name_prefix} {level}",
                                   based_on, next_style=style_id)
        p_pr = w_sub(style, "pPr")
        self._numbering(p_pr, REQUIREMENT_NUM_ID, numbering_level)
        self._dotted_tab(p_pr)
        w_sub(p_pr, "spacing", before=REQUIREMENT_SPACING_BEFORE)
        self._hanging_indent(p_pr)
        w_sub(p_pr, "outlineLvl", val=numbering_level)

        if level == 1:
            self._size(w_sub(style, "rPr"), config.font_size)
