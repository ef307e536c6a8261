"""
Styles part augmentation and normalization.

Adds placeholder styles for paragraph styles the document references but
the styles part does not declare, then makes every style visible in the
style picker with the attribute layout word processors expect.
"""

from typing import List, Optional
import logging

from lxml import etree

from ..constants import STYLES_PART, DOCUMENT_PART, W_NS, w
from ..parser.styles_index import (
    declared_style_ids,
    referenced_paragraph_styles,
    style_elements,
    w_attr,
)
from ..parser.xml_parse import parse_xml, parse_xml_recovering, serialize_xml

logger = logging.getLogger(__name__)

PLACEHOLDER_BASE_STYLE = "Normal"
PLACEHOLDER_RSID = "00000001"
HIDING_ELEMENTS = ("semiHidden", "unhideWhenUsed")
LATENT_STYLES_DEFAULTS = (
    ("defLockedState", "0"),
    ("defUIPriority", "99"),
    ("defSemiHidden", "0"),
    ("defUnhideWhenUsed", "0"),
    ("defQFormat", "0"),
    ("count", "0"),
)


def _attr_key(element: etree._Element, name: str) -> Optional[str]:
    """Key under which ``name`` is stored on ``element`` (qualified first), or None."""
    if element.get(w(name)) is not None:
        return w(name)
    if element.get(name) is not None:
        return name
    return None


def _sub_element(parent: etree._Element, tag: str, **attrs: str) -> etree._Element:
    # created inside the parent's namespace scope, callers reposition it
    element = etree.SubElement(parent, w(tag))
    for name, value in attrs.items():
        element.set(w(name), value)
    return element


def _new_styles_root() -> etree._Element:
    return etree.Element(w("styles"), nsmap={"w": W_NS})


class StylesNormalizer:
    """
    Rewrites the styles part on a tree owned by this instance.

    The styles and document bytes are parsed afresh here, so nothing is
    shared with the trees the detector looked at.
    """

    def __init__(self, styles_xml: Optional[bytes], document_xml: Optional[bytes]) -> None:
        self._styles_xml = styles_xml
        self._document_xml = document_xml
        self.added_styles: List[str] = []

    def normalize(self) -> bytes:
        """
        Produce the rewritten styles part.

        Returns:
            Serialized ``w:styles`` part
        """
        root = self._load_styles_root()
        self._add_placeholders(root)
        self._ensure_latent_styles(root)
        for style in style_elements(root):
            self._normalize_style(style)
        return serialize_xml(root)

    def _load_styles_root(self) -> etree._Element:
        if self._styles_xml is None:
            return _new_styles_root()

        result = parse_xml(self._styles_xml, STYLES_PART)
        if not result.ok:
            logger.warning(f"Styles part is not well-formed, keeping what can be recovered: {result.error}")
            result = parse_xml_recovering(self._styles_xml, STYLES_PART)
            if not result.ok:
                return _new_styles_root()

        root = result.root
        if root.tag != w("styles"):
            # foreign root: move its children under a w:styles root
            styles = _new_styles_root()
            styles.extend(list(root))
            root = styles
        return root

    def _add_placeholders(self, root: etree._Element) -> None:
        if self._document_xml is None:
            return
        result = parse_xml(self._document_xml, DOCUMENT_PART)
        if not result.ok:
            logger.warning(f"Skipping placeholder styles: {result.error}")
            return

        declared = declared_style_ids(root)
        for style_id in referenced_paragraph_styles(result.root):
            if style_id in declared:
                continue
            style = _sub_element(root, "style", type="paragraph", styleId=style_id)
            _sub_element(style, "name", val=style_id)
            _sub_element(style, "basedOn", val=PLACEHOLDER_BASE_STYLE)
            declared.add(style_id)
            self.added_styles.append(style_id)
            logger.debug(f"Added placeholder style {style_id}")

    def _ensure_latent_styles(self, root: etree._Element) -> None:
        if root.find(w("latentStyles")) is not None:
            return
        latent = _sub_element(root, "latentStyles", **dict(LATENT_STYLES_DEFAULTS))
        doc_defaults = root.find(w("docDefaults"))
        if doc_defaults is not None:
            doc_defaults.addnext(latent)
        else:
            root.insert(0, latent)

    def _normalize_style(self, style: etree._Element) -> None:
        name_el = style.find(w("name"))
        if name_el is None:
            name_el = _sub_element(style, "name", val=w_attr(style, "styleId") or "")
            style.insert(0, name_el)

        if style.find(w("qFormat")) is None:
            name_el.addnext(_sub_element(style, "qFormat"))

        for tag in HIDING_ELEMENTS:
            for element in style.findall(w(tag)):
                style.remove(element)

        custom_key = _attr_key(style, "customStyle")
        if custom_key is None:
            return

        if style.get(custom_key) == "true":
            style.set(custom_key, "1")
        self._reorder_custom_attributes(style, custom_key)

        if style.find(w("rsid")) is None:
            anchor = style.find(w("qFormat"))
            if anchor is None:
                anchor = style.find(w("uiPriority"))
            if anchor is None:
                anchor = name_el
            anchor.addnext(_sub_element(style, "rsid", val=PLACEHOLDER_RSID))

    def _reorder_custom_attributes(self, style: etree._Element, custom_key: str) -> None:
        """Re-add attributes so they read type, customStyle, styleId, default."""
        style_id_key = _attr_key(style, "styleId")
        if style_id_key is None or _attr_key(style, "type") is None:
            return
        default_key = _attr_key(style, "default")

        moved = [(custom_key, style.get(custom_key)), (style_id_key, style.get(style_id_key))]
        if default_key is not None:
            moved.append((default_key, style.get(default_key)))

        for key, _ in moved:
            del style.attrib[key]
        for key, value in moved:
            style.set(key, value)
