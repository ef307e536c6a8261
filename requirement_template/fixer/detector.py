"""
Structural defect detection for package archives.

Decides, in one read-only pass, whether an archive needs repair. Parse
failures count as defects; absent entries give no evidence for their check.
"""

from pathlib import Path
from typing import Optional, Union
import logging

from ..constants import (
    CONTENT_TYPES_PART,
    DOCUMENT_PART,
    DOCUMENT_RELS_PART,
    NUMBERING_PART,
    PACKAGE_RELS_PART,
    STYLES_PART,
    XML_CONTENT_TYPE,
)
from ..parser.content_types import ContentTypes
from ..parser.package_reader import ArchiveReader
from ..parser.relationships import read_relationships
from ..parser.styles_index import missing_style_ids
from .report import InspectionReport, ValidationLevel

logger = logging.getLogger(__name__)

REQUIRED_OVERRIDES = (f"/{DOCUMENT_PART}", f"/{STYLES_PART}", f"/{NUMBERING_PART}")
CHECKED_RELATIONSHIP_PARTS = (PACKAGE_RELS_PART, DOCUMENT_RELS_PART)


class PackageDetector:
    """
    Inspects an archive without modifying it.

    Runs three checks: manifest completeness, absolute relationship
    targets, and paragraph style references against declared styles.
    """

    def __init__(self, archive_path: Union[str, Path]):
        """
        Initialize detector.

        Args:
            archive_path: Path to an existing archive
        """
        self.archive_path = Path(archive_path)

    def inspect(self) -> InspectionReport:
        """
        Inspect the archive.

        Returns:
            InspectionReport; ``needs_repair`` tells whether to rewrite
        """
        report = InspectionReport()
        with ArchiveReader(self.archive_path) as reader:
            self._check_manifest(reader, report)
            for part_name in CHECKED_RELATIONSHIP_PARTS:
                self._check_relationships(reader, part_name, report)
            self._check_style_references(reader, report)

        logger.info(
            f"Inspected {self.archive_path}: needs_fix={report.needs_fix}, "
            f"leading_slash_targets={report.has_leading_slash_targets}"
        )
        return report

    def _check_manifest(self, reader: ArchiveReader, report: InspectionReport) -> None:
        """Check Default ``xml`` and the required Override entries."""
        result = reader.parse(CONTENT_TYPES_PART)
        if result is None:
            logger.debug(f"{CONTENT_TYPES_PART} absent, skipping manifest check")
            return

        if not result.ok:
            logger.warning(f"Manifest is not well-formed: {result.error}")
            report.needs_fix = True
            report.add_issue(ValidationLevel.ERROR, "Manifest is not well-formed XML",
                             CONTENT_TYPES_PART, error=str(result.error))
            return

        content_types = ContentTypes.from_element(result.root)
        if not content_types.has_default("xml", XML_CONTENT_TYPE):
            report.needs_fix = True
            report.add_issue(ValidationLevel.ERROR, "Manifest has no Default entry for extension xml",
                             CONTENT_TYPES_PART)

        for part_name in REQUIRED_OVERRIDES:
            if not content_types.has_override(part_name):
                report.needs_fix = True
                report.add_issue(ValidationLevel.ERROR, f"Manifest has no Override for {part_name}",
                                 CONTENT_TYPES_PART, part=part_name)

    def _check_relationships(self, reader: ArchiveReader, part_name: str,
                             report: InspectionReport) -> None:
        """Flag relationship targets stored as absolute ``/word/`` paths."""
        result = reader.parse(part_name)
        if result is None:
            logger.debug(f"{part_name} absent, skipping relationship check")
            return

        if not result.ok:
            logger.warning(f"Relationships part is not well-formed: {result.error}")
            report.has_leading_slash_targets = True
            report.add_issue(ValidationLevel.ERROR, "Relationships part is not well-formed XML",
                             part_name, error=str(result.error))
            return

        for relationship in read_relationships(result.root):
            if relationship.has_absolute_word_target:
                report.has_leading_slash_targets = True
                report.add_issue(ValidationLevel.ERROR,
                                 f"Relationship {relationship.id} has absolute target {relationship.target}",
                                 part_name, target=relationship.target)

    def _check_style_references(self, reader: ArchiveReader, report: InspectionReport) -> None:
        """Flag paragraph styles referenced by the document but not declared."""
        styles_root = None
        styles_result = reader.parse(STYLES_PART)
        if styles_result is not None:
            if not styles_result.ok:
                self._flag_unparsable(report, styles_result.part_name, styles_result.error)
                return
            styles_root = styles_result.root

        document_root = None
        document_result = reader.parse(DOCUMENT_PART)
        if document_result is not None:
            if not document_result.ok:
                self._flag_unparsable(report, document_result.part_name, document_result.error)
                return
            document_root = document_result.root

        missing = missing_style_ids(styles_root, document_root)
        if missing:
            report.needs_fix = True
            report.missing_styles = missing
            report.add_issue(ValidationLevel.ERROR,
                             f"Document references undeclared styles: {', '.join(missing)}",
                             DOCUMENT_PART, styles=missing)

    def _flag_unparsable(self, report: InspectionReport, part_name: str,
                         error: Optional[Exception]) -> None:
        logger.warning(f"Part is not well-formed: {error}")
        report.needs_fix = True
        report.add_issue(ValidationLevel.ERROR, f"{part_name} is not well-formed XML",
                         part_name, error=str(error))


def inspect_package(archive_path: Union[str, Path]) -> InspectionReport:
    """Inspect an archive and return its report."""
    return PackageDetector(archive_path).inspect()
