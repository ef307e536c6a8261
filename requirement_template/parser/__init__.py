"""
Parser module for package archives.

Read-only access to archive entries and the small XML models the fixer
inspects: manifest, relationships and style id indexes.
"""

from .xml_parse import ParseResult, parse_xml, parse_xml_recovering, serialize_xml
from .package_reader import ArchiveReader
from .content_types import ContentTypes
from .relationships import Relationship, read_relationships, normalize_target
from .styles_index import declared_style_ids, referenced_paragraph_styles, missing_style_ids

__all__ = [
    "ParseResult",
    "parse_xml",
    "parse_xml_recovering",
    "serialize_xml",
    "ArchiveReader",
    "ContentTypes",
    "Relationship",
    "read_relationships",
    "normalize_target",
    "declared_style_ids",
    "referenced_paragraph_styles",
    "missing_style_ids",
]
