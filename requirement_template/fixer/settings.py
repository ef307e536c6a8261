"""
Settings defaulting for repaired archives.

A missing settings part is synthesized with a minimal body, and the main
document's relationships gain a settings relationship when they have none.
"""

from typing import Iterable, Tuple
import logging

from lxml import etree

from ..constants import (
    DEFAULT_SETTINGS_XML,
    NUMBERING_REL_TYPE,
    REL_NS,
    SETTINGS_REL_TYPE,
    STYLES_REL_TYPE,
    W_NS,
)
from ..parser.relationships import RELATIONSHIP_TAG, has_relationship_type

logger = logging.getLogger(__name__)

SETTINGS_RELATIONSHIP = (SETTINGS_REL_TYPE, "settings.xml", "Rsettings")
STYLES_RELATIONSHIP = (STYLES_REL_TYPE, "styles.xml", "Rstyles")
NUMBERING_RELATIONSHIP = (NUMBERING_REL_TYPE, "numbering.xml", "Rnumbering")

EMPTY_NUMBERING_XML = (
    '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'
    f'<w:numbering xmlns:w="{W_NS}"/>'
)


def default_settings_xml() -> bytes:
    """Minimal settings part: style pane shows all visible styles, en-US."""
    return DEFAULT_SETTINGS_XML.encode("utf-8")


def empty_numbering_xml() -> bytes:
    return EMPTY_NUMBERING_XML.encode("utf-8")


def ensure_relationship(root: etree._Element, rel_type: str, target: str, rel_id: str) -> bool:
    """
    Append a relationship unless one of the same type already exists.

    Args:
        root: ``Relationships`` root
        rel_type: Relationship type URI
        target: Target relative to the owning part
        rel_id: Id for the new record

    Returns:
        True if a record was added
    """
    if has_relationship_type(root, rel_type):
        return False
    relationship = etree.SubElement(root, RELATIONSHIP_TAG)
    relationship.set("Type", rel_type)
    relationship.set("Target", target)
    relationship.set("Id", rel_id)
    logger.debug(f"Added relationship {rel_id} -> {target}")
    return True


def new_relationships_root() -> etree._Element:
    return etree.Element(f"{{{REL_NS}}}Relationships", nsmap={None: REL_NS})


def ensure_relationships(root: etree._Element, relationships: Iterable[Tuple[str, str, str]]) -> None:
    for rel_type, target, rel_id in relationships:
        ensure_relationship(root, rel_type, target, rel_id)
