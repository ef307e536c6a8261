"""
Zip package writer.

Collects parts, their relationships and content type overrides, and writes
them as one archive. Relationship targets are stored relative to the
directory of the part that owns them.
"""

from pathlib import Path
from typing import Dict, List, Optional, Tuple, Union
import posixpath
import xml.etree.ElementTree as ET
import zipfile
import logging

from ..constants import (
    CONTENT_TYPES_NS,
    CONTENT_TYPES_PART,
    PACKAGE_RELS_PART,
    REL_NS,
    RELS_CONTENT_TYPE,
    XML_CONTENT_TYPE,
)

logger = logging.getLogger(__name__)

PACKAGE_SOURCE = ""


class PackageWriter:
    """
    Assembles and writes a package.

    Example:
        >>> writer = PackageWriter()
        >>> writer.add_part("word/document.xml", data, content_type=ct,
        ...                 relationship_type=OFFICE_DOCUMENT_REL_TYPE)
        >>> writer.write("out.dotx")
    """

    def __init__(self):
        # part_name -> content
        self._parts: Dict[str, bytes] = {}
        # source part -> [(rel_id, rel_type, target)]
        self._relationships: Dict[str, List[Tuple[str, str, str]]] = {}
        # part_name -> content_type
        self._content_types: Dict[str, str] = {}
        # extension -> content_type
        self._default_content_types: Dict[str, str] = {
            "rels": RELS_CONTENT_TYPE,
            "xml": XML_CONTENT_TYPE,
        }
        self._rel_id_counters: Dict[str, int] = {}

    def add_part(self, part_name: str, content: bytes, content_type: Optional[str] = None,
                 relationship_type: Optional[str] = None,
                 source: str = PACKAGE_SOURCE) -> None:
        """
        Add a part.

        Args:
            part_name: Part name without leading slash, e.g. ``word/styles.xml``
            content: Serialized part
            content_type: If given, declared as an Override for the part
            relationship_type: If given, a relationship from ``source`` to the part is added
            source: Owning part of the relationship; the empty string is the package
        """
        self._parts[part_name] = content
        if content_type:
            self._content_types[part_name] = content_type
        if relationship_type:
            self.add_relationship(source, relationship_type, part_name)

    def add_relationship(self, source: str, rel_type: str, target_part: str) -> str:
        """
        Add a relationship and return its id.

        The target is written relative to the source part's directory.
        """
        rel_id = self._get_next_rel_id(source)
        base_dir = posixpath.dirname(source) or "."
        target = posixpath.relpath(target_part, base_dir)
        self._relationships.setdefault(source, []).append((rel_id, rel_type, target))
        logger.debug(f"Relationship {rel_id} from '{source or '/'}' to {target}")
        return rel_id

    def write(self, output_path: Union[str, Path]) -> None:
        """
        Write the package.

        Raises:
            OSError: If the file cannot be written
        """
        files_to_write: Dict[str, bytes] = {CONTENT_TYPES_PART: self._generate_content_types_xml()}
        if PACKAGE_SOURCE in self._relationships:
            files_to_write[PACKAGE_RELS_PART] = self._generate_relationships_xml(
                self._relationships[PACKAGE_SOURCE]
            )
        files_to_write.update(self._parts)
        for source, relationships in self._relationships.items():
            if source != PACKAGE_SOURCE and relationships:
                files_to_write[self._get_relationship_path(source)] = \
                    self._generate_relationships_xml(relationships)

        with zipfile.ZipFile(output_path, "w", zipfile.ZIP_DEFLATED) as zip_file:
            for file_name, content in files_to_write.items():
                zip_file.writestr(file_name, content)

        logger.info(f"Wrote package {output_path} ({len(files_to_write)} entries)")

    def _generate_content_types_xml(self) -> bytes:
        ET.register_namespace("", CONTENT_TYPES_NS)
        root = ET.Element(f"{{{CONTENT_TYPES_NS}}}Types")

        for extension, content_type in self._default_content_types.items():
            default_elem = ET.SubElement(root, f"{{{CONTENT_TYPES_NS}}}Default")
            default_elem.set("Extension", extension)
            default_elem.set("ContentType", content_type)

        for part_name, content_type in self._content_types.items():
            override_elem = ET.SubElement(root, f"{{{CONTENT_TYPES_NS}}}Override")
            override_elem.set("PartName", f"/{part_name}")
            override_elem.set("ContentType", content_type)

        ET.indent(root, space="  ")
        return ET.tostring(root, encoding="utf-8", xml_declaration=True)

    def _generate_relationships_xml(self, relationships: List[Tuple[str, str, str]]) -> bytes:
        ET.register_namespace("", REL_NS)
        root = ET.Element(f"{{{REL_NS}}}Relationships")

        for rel_id, rel_type, target in relationships:
            rel_elem = ET.SubElement(root, f"{{{REL_NS}}}Relationship")
            rel_elem.set("Id", rel_id)
            rel_elem.set("Type", rel_type)
            rel_elem.set("Target", target)

        ET.indent(root, space="  ")
        return ET.tostring(root, encoding="utf-8", xml_declaration=True)

    def _get_next_rel_id(self, source: str) -> str:
        self._rel_id_counters[source] = self._rel_id_counters.get(source, 0) + 1
        return f"rId{self._rel_id_counters[source]}"

    def _get_relationship_path(self, part_name: str) -> str:
        """word/document.xml -> word/_rels/document.xml.rels"""
        directory, file_name = posixpath.split(part_name)
        if directory:
            return f"{directory}/_rels/{file_name}.rels"
        return f"_rels/{file_name}.rels"
