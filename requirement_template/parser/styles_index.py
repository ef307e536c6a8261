"""
Style id indexes over the styles and document parts.
"""

from typing import List, Optional, Set

from lxml import etree

from ..constants import w


def w_attr(element: etree._Element, name: str) -> Optional[str]:
    """
    Read a WordprocessingML attribute.

    The ``w:``-qualified attribute is preferred; an unqualified attribute of
    the same local name is accepted as a fallback.
    """
    value = element.get(w(name))
    if value is None:
        value = element.get(name)
    return value


def style_elements(styles_root: etree._Element) -> List[etree._Element]:
    """Direct ``w:style`` children of a ``w:styles`` root."""
    return list(styles_root.iterchildren(w("style")))


def declared_style_ids(styles_root: Optional[etree._Element]) -> Set[str]:
    """
    Collect the style ids declared in a styles part.

    Args:
        styles_root: Parsed ``w:styles`` root, or None when the part is absent

    Returns:
        Set of non-empty style ids
    """
    if styles_root is None:
        return set()
    declared = set()
    for style in style_elements(styles_root):
        style_id = w_attr(style, "styleId")
        if style_id:
            declared.add(style_id)
    return declared


def referenced_paragraph_styles(document_root: Optional[etree._Element]) -> List[str]:
    """
    Collect distinct paragraph style references (``w:pStyle``) of a document part.

    Run-level character styles are not collected.

    Returns:
        Style ids in first-reference order
    """
    if document_root is None:
        return []
    referenced: List[str] = []
    seen: Set[str] = set()
    for p_style in document_root.iter(w("pStyle")):
        value = w_attr(p_style, "val")
        if value and value not in seen:
            seen.add(value)
            referenced.append(value)
    return referenced


def missing_style_ids(
    styles_root: Optional[etree._Element], document_root: Optional[etree._Element]
) -> List[str]:
    """Referenced paragraph styles that the styles part does not declare."""
    declared = declared_style_ids(styles_root)
    return [style_id for style_id in referenced_paragraph_styles(document_root) if style_id not in declared]
