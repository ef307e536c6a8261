"""
Selective archive rewriting with atomic replacement.

Streams every entry of the source archive into a new archive next to it.
The manifest, both relationship parts and the styles part are transformed;
every other entry is copied byte for byte. A missing manifest and parts the
canonical manifest declares but the source lacks are synthesized after the
main loop. The new archive replaces the original with a single ``os.replace``.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple, Union
import logging
import os
import shutil
import tempfile
import time
import zipfile

from ..constants import (
    CONTENT_TYPES_PART,
    DOCUMENT_PART,
    DOCUMENT_RELS_PART,
    NUMBERING_PART,
    PACKAGE_RELS_PART,
    SETTINGS_PART,
    STYLES_PART,
    canonical_content_types_xml,
)
from ..parser.package_reader import ArchiveReader
from ..parser.relationships import normalize_target, relationship_elements
from ..parser.xml_parse import parse_xml, serialize_xml
from .settings import (
    NUMBERING_RELATIONSHIP,
    SETTINGS_RELATIONSHIP,
    STYLES_RELATIONSHIP,
    default_settings_xml,
    empty_numbering_xml,
    ensure_relationships,
    new_relationships_root,
)
from .styles_normalizer import StylesNormalizer

logger = logging.getLogger(__name__)

RELATIONSHIP_PARTS = (PACKAGE_RELS_PART, DOCUMENT_RELS_PART)


@dataclass
class RewriteResult:
    """What the rewriter did to each entry."""

    transformed: List[str] = field(default_factory=list)
    copied: List[str] = field(default_factory=list)
    synthesized: List[str] = field(default_factory=list)
    added_styles: List[str] = field(default_factory=list)


class PackageRewriter:
    """
    Writes a corrected copy of an archive and swaps it in atomically.

    The original file is never opened for writing; until the final
    replace it stays exactly as it was.
    """

    def __init__(self, archive_path: Union[str, Path]):
        """
        Initialize rewriter.

        Args:
            archive_path: Archive to repair; its extension selects the
                main document content type
        """
        self.archive_path = Path(archive_path)
        self._added_styles: List[str] = []

    def rewrite(self) -> RewriteResult:
        """
        Rewrite the archive in place.

        Returns:
            RewriteResult listing transformed, copied and synthesized entries

        Raises:
            OSError: If the temporary archive cannot be written or the
                replace fails; the original is left untouched
        """
        fd, temp_name = tempfile.mkstemp(
            prefix=f".{self.archive_path.name}.", suffix=".tmp", dir=self.archive_path.parent
        )
        os.close(fd)
        temp_path = Path(temp_name)

        try:
            result = self._write_repaired(temp_path)
            shutil.copymode(self.archive_path, temp_path)
            os.replace(temp_path, self.archive_path)
        except BaseException:
            temp_path.unlink(missing_ok=True)
            raise

        logger.info(
            f"Rewrote {self.archive_path}: transformed={result.transformed}, "
            f"synthesized={result.synthesized}"
        )
        return result

    def _write_repaired(self, temp_path: Path) -> RewriteResult:
        result = RewriteResult()
        self._added_styles = []

        with ArchiveReader(self.archive_path) as reader, \
                zipfile.ZipFile(temp_path, "w", zipfile.ZIP_DEFLATED) as zout:
            missing_styles = not reader.has_entry(STYLES_PART)
            missing_numbering = not reader.has_entry(NUMBERING_PART)
            missing_settings = not reader.has_entry(SETTINGS_PART)

            document_relationships = [SETTINGS_RELATIONSHIP]
            if missing_styles:
                document_relationships.append(STYLES_RELATIONSHIP)
            if missing_numbering:
                document_relationships.append(NUMBERING_RELATIONSHIP)

            written = set()
            for info in reader.infolist():
                name = info.filename
                if name in written:
                    logger.warning(f"Dropping duplicate entry {name}")
                    continue
                written.add(name)

                data = reader.zip_file.read(info)
                content = self._transform(reader, name, data, document_relationships)
                if content is None:
                    self._write_entry(zout, info, data)
                    result.copied.append(name)
                    logger.debug(f"Copied {name}")
                else:
                    self._write_entry(zout, info, content)
                    result.transformed.append(name)
                    logger.debug(f"Transformed {name}")

            synthesized = []
            if not reader.has_entry(CONTENT_TYPES_PART):
                synthesized.append(
                    (CONTENT_TYPES_PART, canonical_content_types_xml(self.archive_path).encode("utf-8"))
                )
            if missing_styles:
                normalizer = StylesNormalizer(None, reader.read(DOCUMENT_PART))
                synthesized.append((STYLES_PART, normalizer.normalize()))
                self._added_styles.extend(normalizer.added_styles)
            if missing_numbering:
                synthesized.append((NUMBERING_PART, empty_numbering_xml()))
            if missing_settings:
                synthesized.append((SETTINGS_PART, default_settings_xml()))
            if reader.has_entry(DOCUMENT_PART) and not reader.has_entry(DOCUMENT_RELS_PART):
                rels_root = new_relationships_root()
                ensure_relationships(rels_root, document_relationships)
                synthesized.append((DOCUMENT_RELS_PART, serialize_xml(rels_root)))

            for name, content in synthesized:
                info = zipfile.ZipInfo(name, date_time=time.localtime()[:6])
                info.compress_type = zipfile.ZIP_DEFLATED
                self._write_entry(zout, info, content)
                result.synthesized.append(name)
                logger.debug(f"Synthesized {name}")

            result.added_styles = list(self._added_styles)
        return result

    def _transform(self, reader: ArchiveReader, name: str, data: bytes,
                   document_relationships: List[Tuple[str, str, str]]) -> Optional[bytes]:
        """Return the new content of an entry, or None to copy it unchanged."""
        if name == CONTENT_TYPES_PART:
            return canonical_content_types_xml(self.archive_path).encode("utf-8")
        if name in RELATIONSHIP_PARTS:
            return self._rewrite_relationships(name, data, document_relationships)
        if name == STYLES_PART:
            normalizer = StylesNormalizer(data, reader.read(DOCUMENT_PART))
            content = normalizer.normalize()
            self._added_styles.extend(normalizer.added_styles)
            return content
        return None

    def _rewrite_relationships(self, name: str, data: bytes,
                               document_relationships: List[Tuple[str, str, str]]) -> Optional[bytes]:
        """
        Make targets relative; add missing records to the document relationships.

        Returns:
            New content, or None when the part does not parse (copied as is)
        """
        parsed = parse_xml(data, name)
        if not parsed.ok:
            logger.warning(f"Copying relationships part unchanged: {parsed.error}")
            return None

        root = parsed.root
        for relationship in relationship_elements(root):
            target = relationship.get("Target")
            if not target or relationship.get("TargetMode") == "External":
                continue
            normalized = normalize_target(target, name)
            if normalized != target:
                relationship.set("Target", normalized)
                logger.debug(f"{name}: target {target} -> {normalized}")

        if name == DOCUMENT_RELS_PART:
            ensure_relationships(root, document_relationships)
        return serialize_xml(root)

    @staticmethod
    def _write_entry(zout: zipfile.ZipFile, source_info: zipfile.ZipInfo, content: bytes) -> None:
        info = zipfile.ZipInfo(source_info.filename, date_time=source_info.date_time)
        info.compress_type = source_info.compress_type
        info.external_attr = source_info.external_attr
        info.comment = source_info.comment
        zout.writestr(info, content)
