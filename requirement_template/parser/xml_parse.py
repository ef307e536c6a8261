"""
XML parsing with an explicit result contract.

Parse failures are returned as values instead of being raised, so each
caller decides its own fallback (flag the part as defective, byte-copy it,
or continue with a recovered tree).
"""

from dataclasses import dataclass
from typing import Optional

from lxml import etree

from ..exceptions import ParsingError


def _strict_parser() -> etree.XMLParser:
    return etree.XMLParser(resolve_entities=False, no_network=True)


def _recovering_parser() -> etree.XMLParser:
    return etree.XMLParser(recover=True, resolve_entities=False, no_network=True)


@dataclass(frozen=True)
class ParseResult:
    """Outcome of parsing one package part."""

    part_name: str
    root: Optional[etree._Element] = None
    error: Optional[ParsingError] = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.root is not None


def parse_xml(data: bytes, part_name: str) -> ParseResult:
    """
    Parse XML bytes of a package part.

    Args:
        data: Raw part content
        part_name: Part name, used in the error

    Returns:
        ParseResult holding either the root element or the parsing error
    """
    try:
        root = etree.fromstring(data, parser=_strict_parser())
    except (etree.XMLSyntaxError, ValueError) as e:
        return ParseResult(part_name, error=ParsingError(part_name, str(e)))
    return ParseResult(part_name, root=root)


def parse_xml_recovering(data: bytes, part_name: str) -> ParseResult:
    """
    Parse XML bytes, keeping whatever lxml's recovery mode salvages.

    The result is not ok when nothing at all could be recovered.
    """
    try:
        root = etree.fromstring(data, parser=_recovering_parser())
    except (etree.XMLSyntaxError, ValueError) as e:
        return ParseResult(part_name, error=ParsingError(part_name, str(e)))
    if root is None:
        return ParseResult(part_name, error=ParsingError(part_name, "nothing recoverable"))
    return ParseResult(part_name, root=root)


def serialize_xml(root: etree._Element) -> bytes:
    """Serialize a part tree with a UTF-8 standalone declaration."""
    return etree.tostring(root, xml_declaration=True, encoding="UTF-8", standalone=True)
