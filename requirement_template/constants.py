"""
Package constants for WordprocessingML archives.

Namespaces, content types, relationship types and the part names the
generator writes and the fixer checks.
"""

from pathlib import Path
from typing import Union

# Namespaces
W_NS = "http://schemas.openxmlformats.org/wordprocessingml/2006/main"
REL_NS = "http://schemas.openxmlformats.org/package/2006/relationships"
CONTENT_TYPES_NS = "http://schemas.openxmlformats.org/package/2006/content-types"
OFFICE_REL_NS = "http://schemas.openxmlformats.org/officeDocument/2006/relationships"
XML_NS = "http://www.w3.org/XML/1998/namespace"

# Part names
CONTENT_TYPES_PART = "[Content_Types].xml"
PACKAGE_RELS_PART = "_rels/.rels"
DOCUMENT_PART = "word/document.xml"
DOCUMENT_RELS_PART = "word/_rels/document.xml.rels"
STYLES_PART = "word/styles.xml"
NUMBERING_PART = "word/numbering.xml"
SETTINGS_PART = "word/settings.xml"

# Content types
RELS_CONTENT_TYPE = "application/vnd.openxmlformats-package.relationships+xml"
XML_CONTENT_TYPE = "application/xml"
DOCUMENT_MAIN_CONTENT_TYPE = (
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document.main+xml"
)
TEMPLATE_MAIN_CONTENT_TYPE = (
    "application/vnd.openxmlformats-officedocument.wordprocessingml.template.main+xml"
)
STYLES_CONTENT_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.styles+xml"
NUMBERING_CONTENT_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.numbering+xml"
SETTINGS_CONTENT_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.settings+xml"

# Relationship types
OFFICE_DOCUMENT_REL_TYPE = f"{OFFICE_REL_NS}/officeDocument"
STYLES_REL_TYPE = f"{OFFICE_REL_NS}/styles"
NUMBERING_REL_TYPE = f"{OFFICE_REL_NS}/numbering"
SETTINGS_REL_TYPE = f"{OFFICE_REL_NS}/settings"

# Output extensions that denote a document rather than a template
DOCUMENT_EXTENSIONS = frozenset({".docx"})

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>\n'


def w(tag: str) -> str:
    """Return the Clark-notation name of a WordprocessingML tag or attribute."""
    return f"{{{W_NS}}}{tag}"


def is_document_path(path: Union[str, Path]) -> bool:
    """True when the output path's extension denotes a document (case-insensitive)."""
    return Path(path).suffix.lower() in DOCUMENT_EXTENSIONS


def main_document_content_type(path: Union[str, Path]) -> str:
    """
    Select the main document part's content type from the output extension.

    Args:
        path: Output archive path

    Returns:
        Document content type for ``.docx``, template content type otherwise
    """
    if is_document_path(path):
        return DOCUMENT_MAIN_CONTENT_TYPE
    return TEMPLATE_MAIN_CONTENT_TYPE


def canonical_content_types_xml(path: Union[str, Path]) -> str:
    """Canonical ``[Content_Types].xml`` written by the rewriter."""
    return (
        '<?xml version="1.0" encoding="utf-8"?>\n'
        f'<Types xmlns="{CONTENT_TYPES_NS}">\n'
        f'  <Default Extension="rels" ContentType="{RELS_CONTENT_TYPE}"/>\n'
        f'  <Default Extension="xml" ContentType="{XML_CONTENT_TYPE}"/>\n'
        f'  <Override PartName="/{DOCUMENT_PART}" ContentType="{main_document_content_type(path)}"/>\n'
        f'  <Override PartName="/{STYLES_PART}" ContentType="{STYLES_CONTENT_TYPE}"/>\n'
        f'  <Override PartName="/{NUMBERING_PART}" ContentType="{NUMBERING_CONTENT_TYPE}"/>\n'
        f'  <Override PartName="/{SETTINGS_PART}" ContentType="{SETTINGS_CONTENT_TYPE}"/>\n'
        "</Types>\n"
    )


DEFAULT_SETTINGS_XML = (
    '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'
    f'<w:settings xmlns:w="{W_NS}">'
    '<w:stylePaneFormatFilter w:allStyles="1" w:visibleStyles="1"/>'
    '<w:themeFontLang w:val="en-US"/>'
    "</w:settings>"
)
