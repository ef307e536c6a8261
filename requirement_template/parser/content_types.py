"""
Manifest ([Content_Types].xml) model.
"""

from dataclasses import dataclass, field
from typing import Dict

from lxml import etree


def _local_name(element: etree._Element) -> str:
    return etree.QName(element).localname


@dataclass
class ContentTypes:
    """Default (per extension) and Override (per part) content types."""

    defaults: Dict[str, str] = field(default_factory=dict)
    overrides: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_element(cls, root: etree._Element) -> "ContentTypes":
        """
        Collect Default and Override entries from a parsed manifest.

        Entries are matched by local name, whatever namespace they carry.
        """
        content_types = cls()
        for child in root:
            if not isinstance(child.tag, str):
                continue
            name = _local_name(child)
            if name == "Default":
                extension = child.get("Extension")
                if extension is not None:
                    content_types.defaults.setdefault(extension, child.get("ContentType", ""))
            elif name == "Override":
                part_name = child.get("PartName")
                if part_name is not None:
                    content_types.overrides.setdefault(part_name, child.get("ContentType", ""))
        return content_types

    def has_default(self, extension: str, content_type: str) -> bool:
        return self.defaults.get(extension) == content_type

    def has_override(self, part_name: str) -> bool:
        """Check for an Override entry; ``part_name`` is the absolute part name (``/word/...``)."""
        return part_name in self.overrides
