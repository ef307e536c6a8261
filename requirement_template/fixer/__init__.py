"""
Package fixer.

Inspects a produced archive and, only when it is structurally defective,
rewrites the defective parts and atomically replaces the original.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Union
import logging

from .detector import PackageDetector, inspect_package
from .report import InspectionReport, ValidationIssue, ValidationLevel
from .rewriter import PackageRewriter, RewriteResult
from .styles_normalizer import StylesNormalizer

logger = logging.getLogger(__name__)


@dataclass
class FixResult:
    """Outcome of one fixer run."""

    path: Path
    repaired: bool
    report: InspectionReport
    rewritten_parts: List[str] = field(default_factory=list)
    added_parts: List[str] = field(default_factory=list)
    added_styles: List[str] = field(default_factory=list)


class PackageFixer:
    """
    Detect-then-rewrite facade over one archive path.

    Example:
        >>> result = PackageFixer("RequirementTemplate.dotx").fix()
        >>> result.repaired
        True
    """

    def __init__(self, archive_path: Union[str, Path]):
        self.archive_path = Path(archive_path)

    def inspect(self) -> InspectionReport:
        """Read-only inspection of the archive."""
        return PackageDetector(self.archive_path).inspect()

    def fix(self) -> FixResult:
        """
        Repair the archive in place if it needs repair.

        An archive without defects is left untouched, so a second run
        after a repair is a no-op.

        Returns:
            FixResult describing what was done

        Raises:
            FileNotFoundError: If the archive does not exist
            PackageError: If the file is not a zip archive
            OSError: If writing or replacing the archive fails
        """
        report = self.inspect()
        if not report.needs_repair:
            logger.info(f"{self.archive_path} is structurally valid, leaving it untouched")
            return FixResult(path=self.archive_path, repaired=False, report=report)

        rewrite = PackageRewriter(self.archive_path).rewrite()
        logger.info(f"Repaired {self.archive_path}")
        return FixResult(
            path=self.archive_path,
            repaired=True,
            report=report,
            rewritten_parts=rewrite.transformed,
            added_parts=rewrite.synthesized,
            added_styles=rewrite.added_styles,
        )


def fix_package(archive_path: Union[str, Path]) -> FixResult:
    """Inspect an archive and repair it in place when needed."""
    return PackageFixer(archive_path).fix()


__all__ = [
    "FixResult",
    "InspectionReport",
    "PackageDetector",
    "PackageFixer",
    "PackageRewriter",
    "RewriteResult",
    "StylesNormalizer",
    "ValidationIssue",
    "ValidationLevel",
    "fix_package",
    "inspect_package",
]
