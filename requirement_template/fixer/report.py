"""
Inspection report for package archives.

Collects the structural defects found by the detector.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class ValidationLevel(Enum):
    """Validation levels."""
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


class ValidationIssue:
    """Represents a validation issue."""

    def __init__(self, level: ValidationLevel, message: str,
                 part_name: Optional[str] = None,
                 details: Optional[Dict[str, Any]] = None):
        self.level = level
        self.message = message
        self.part_name = part_name
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            'level': self.level.value,
            'message': self.message,
            'part_name': self.part_name,
            'details': self.details,
        }

    def __str__(self) -> str:
        return f"[{self.level.value.upper()}] {self.message}"


@dataclass
class InspectionReport:
    """
    Result of inspecting an archive.

    ``needs_fix`` covers manifest and style defects, ``has_leading_slash_targets``
    covers relationship targets. Repair is required if either is set.
    """

    needs_fix: bool = False
    has_leading_slash_targets: bool = False
    missing_styles: List[str] = field(default_factory=list)
    issues: List[ValidationIssue] = field(default_factory=list)

    @property
    def needs_repair(self) -> bool:
        return self.needs_fix or self.has_leading_slash_targets

    def add_issue(self, level: ValidationLevel, message: str,
                  part_name: Optional[str] = None, **details: Any) -> None:
        self.issues.append(ValidationIssue(level, message, part_name, details))

    def get_errors(self) -> List[ValidationIssue]:
        return [issue for issue in self.issues if issue.level == ValidationLevel.ERROR]

    def to_dict(self) -> Dict[str, Any]:
        return {
            'needs_fix': self.needs_fix,
            'has_leading_slash_targets': self.has_leading_slash_targets,
            'needs_repair': self.needs_repair,
            'missing_styles': list(self.missing_styles),
            'issues': [issue.to_dict() for issue in self.issues],
        }
