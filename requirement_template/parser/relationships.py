"""
Relationship records for package and part relationship files.

Handles reading relationship records and normalizing their targets to
paths relative to the owning part's directory.
"""

from dataclasses import dataclass
from typing import List, Optional

from lxml import etree

from ..constants import DOCUMENT_RELS_PART, REL_NS

RELATIONSHIP_TAG = f"{{{REL_NS}}}Relationship"
ABSOLUTE_WORD_PREFIX = "/word/"


@dataclass(frozen=True)
class Relationship:
    """A single ``{Id, Type, Target}`` record."""

    id: str
    type: str
    target: str
    target_mode: Optional[str] = None

    @property
    def is_external(self) -> bool:
        return self.target_mode == "External"

    @property
    def has_absolute_word_target(self) -> bool:
        return not self.is_external and self.target.startswith(ABSOLUTE_WORD_PREFIX)


def relationship_elements(root: etree._Element) -> List[etree._Element]:
    """Direct ``Relationship`` children of a ``Relationships`` root."""
    return list(root.iterchildren(RELATIONSHIP_TAG))


def read_relationships(root: etree._Element) -> List[Relationship]:
    """
    Read relationship records from a parsed relationships part.

    Args:
        root: ``Relationships`` root element

    Returns:
        Records in document order
    """
    return [
        Relationship(
            id=el.get("Id", ""),
            type=el.get("Type", ""),
            target=el.get("Target", ""),
            target_mode=el.get("TargetMode"),
        )
        for el in relationship_elements(root)
    ]


def normalize_target(target: str, rels_part_name: str) -> str:
    """
    Turn a relationship target into a path relative to its owning part.

    A leading ``/`` is dropped. In the main document's relationships the
    targets already resolve against ``word/``, so a repeated ``word/``
    segment is dropped as well.

    Args:
        target: Target as stored in the relationships part
        rels_part_name: Name of the relationships part holding the record

    Returns:
        Normalized target
    """
    if target.startswith("/"):
        target = target[1:]
    if rels_part_name == DOCUMENT_RELS_PART and target.startswith("word/"):
        target = target[len("word/"):]
    return target


def has_relationship_type(root: etree._Element, rel_type: str) -> bool:
    return any(el.get("Type") == rel_type for el in relationship_elements(root))
