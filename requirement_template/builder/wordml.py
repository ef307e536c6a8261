"""
ElementTree helpers for writing WordprocessingML parts.
"""

import xml.etree.ElementTree as ET

from ..constants import W_NS, XML_DECLARATION, XML_NS, w

ET.register_namespace("w", W_NS)


def w_root(tag: str) -> ET.Element:
    return ET.Element(w(tag))


def w_sub(parent: ET.Element, tag: str, **attrs) -> ET.Element:
    """Append a ``w:`` child whose keyword attributes are ``w:``-qualified."""
    return ET.SubElement(parent, w(tag), {w(name): str(value) for name, value in attrs.items()})


def w_text(parent: ET.Element, text: str) -> ET.Element:
    """Append a ``w:t``; leading or trailing blanks are kept with ``xml:space``."""
    text_el = ET.SubElement(parent, w("t"))
    if text != text.strip():
        text_el.set(f"{{{XML_NS}}}space", "preserve")
    text_el.text = text
    return text_el


def to_part_xml(root: ET.Element) -> bytes:
    """Serialize a part with the declaration word processors write."""
    xml_str = ET.tostring(root, encoding="unicode", method="xml")
    return (XML_DECLARATION + xml_str).encode("utf-8")
