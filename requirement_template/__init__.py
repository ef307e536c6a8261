"""
Requirement Template Generator.

Generates a Word template pre-populated with hierarchical heading,
requirement and note paragraph styles plus matching numbering, and repairs
the written package so word processors open it without a repair prompt.

Main Components:
- TemplateBuilder: writes styles, numbering and sample content
- PackageFixer: detects structural package defects and rewrites only the
  defective parts, replacing the archive atomically
- TemplateConfig: every constant of the generated template
"""

from .builder import GenerationContext, TemplateBuilder, generate_template
from .config import AppConfig, NoteType, SampleParagraph, TemplateConfig
from .exceptions import (
    PackageError,
    ParsingError,
    RequirementTemplateError,
    TemplateConfigError,
)
from .fixer import FixResult, InspectionReport, PackageFixer, fix_package, inspect_package

__version__ = "1.0.0"

__all__ = [
    "AppConfig",
    "FixResult",
    "GenerationContext",
    "InspectionReport",
    "NoteType",
    "PackageError",
    "PackageFixer",
    "ParsingError",
    "RequirementTemplateError",
    "SampleParagraph",
    "TemplateBuilder",
    "TemplateConfig",
    "TemplateConfigError",
    "fix_package",
    "generate_template",
    "inspect_package",
]
