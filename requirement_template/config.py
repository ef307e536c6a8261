"""
Configuration for the requirement template generator.

``TemplateConfig`` holds every constant of the generated template (fonts,
indentation, level counts, style naming, note types, sample content).
``AppConfig`` holds the environment-driven settings of the command line.
"""

from dataclasses import dataclass, field, fields
from typing import Any, Dict, List, Mapping, Optional, Sequence
import os

from .exceptions import TemplateConfigError

MAX_NUMBERING_LEVELS = 9


@dataclass(frozen=True)
class NoteType:
    """A supplementary note kind rendered with a fixed text prefix."""
    name: str  # display name, e.g. "Hinweis"
    key: str   # style id suffix, e.g. "Note"
    text: str  # numbering text shown before the paragraph, e.g. "Hinweis: "


@dataclass(frozen=True)
class SampleParagraph:
    """One paragraph of sample content; ``style_id`` None means no paragraph style."""
    style_id: Optional[str]
    text: str


DEFAULT_NOTE_TYPES = (
    NoteType("Hinweis", "Note", "Hinweis: "),
    NoteType("Beispiel", "Example", "Beispiel: "),
    NoteType("Erläuterung/Begründung", "Rationale", "Erläuterung/Begründung: "),
    NoteType("Referenz(en)", "References", "Referenz(en): "),
    NoteType("Ableitung zu", "DerivedFrom", "Ableitung zu: "),
)


@dataclass
class TemplateConfig:
    """
    Settings for one generated template.

    Font sizes are in half-points, indentation in twips (567 per cm).
    """

    font_name: str = "Arial"
    heading_font_size: int = 24
    font_size: int = 22
    text_indent_twips: int = 1701
    heading_levels: int = 5
    requirement_levels: int = 8
    heading_style_prefix: str = "REHeading"
    requirement_style_prefix: str = "RERequirement"
    note_style_prefix: str = "RE"
    heading_name_prefix: str = "RE Überschrift"
    requirement_name_prefix: str = "RE Anforderung"
    supplement_name_prefix: str = "RE Ergänzung"
    anonymous_style_id: str = "REAnonymousPara"
    note_types: Sequence[NoteType] = field(default_factory=lambda: list(DEFAULT_NOTE_TYPES))
    include_notes: bool = True
    include_settings: bool = False
    bookmark_anchors: bool = True
    sample_paragraphs: Optional[Sequence[SampleParagraph]] = None
    title: str = "Requirement Document Template"

    @property
    def requirement_numbering_levels(self) -> int:
        """Requirement levels that get their own numbering level."""
        return min(self.requirement_levels, MAX_NUMBERING_LEVELS)

    @property
    def active_note_types(self) -> List[NoteType]:
        return list(self.note_types) if self.include_notes else []

    def heading_style_id(self, level: int) -> str:
        return f"{self.heading_style_prefix}{level}"

    def requirement_style_id(self, level: int) -> str:
        return f"{self.requirement_style_prefix}{level}"

    def note_style_id(self, note: NoteType) -> str:
        return f"{self.note_style_prefix}{note.key}"

    def validate(self) -> None:
        """
        Check the configuration.

        Raises:
            TemplateConfigError: If a value cannot produce a valid template
        """
        if self.heading_levels < 1:
            raise TemplateConfigError("heading_levels must be at least 1", str(self.heading_levels))
        if self.heading_levels > MAX_NUMBERING_LEVELS:
            raise TemplateConfigError(
                f"heading_levels must not exceed {MAX_NUMBERING_LEVELS}", str(self.heading_levels)
            )
        if self.requirement_levels < 1:
            raise TemplateConfigError("requirement_levels must be at least 1", str(self.requirement_levels))

        for name in ("font_size", "heading_font_size", "text_indent_twips"):
            if getattr(self, name) <= 0:
                raise TemplateConfigError(f"{name} must be positive", str(getattr(self, name)))

        for name in ("heading_style_prefix", "requirement_style_prefix", "anonymous_style_id", "font_name"):
            if not getattr(self, name):
                raise TemplateConfigError(f"{name} must not be empty")
        if self.heading_style_prefix == self.requirement_style_prefix:
            raise TemplateConfigError("Heading and requirement style prefixes must differ",
                                      self.heading_style_prefix)

        keys = [note.key for note in self.note_types]
        duplicates = sorted({key for key in keys if keys.count(key) > 1})
        if duplicates:
            raise TemplateConfigError("Duplicate note keys", ", ".join(duplicates))
        if any(not note.key for note in self.note_types):
            raise TemplateConfigError("Note keys must not be empty")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "TemplateConfig":
        """
        Build a configuration from a plain mapping.

        ``note_types`` and ``sample_paragraphs`` may be given as lists of
        mappings or tuples.

        Raises:
            TemplateConfigError: On unknown keys or invalid values
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise TemplateConfigError("Unknown configuration keys", ", ".join(unknown))

        values: Dict[str, Any] = dict(data)
        if "note_types" in values:
            values["note_types"] = [_coerce(NoteType, item) for item in values["note_types"]]
        if values.get("sample_paragraphs") is not None:
            values["sample_paragraphs"] = [
                _coerce(SampleParagraph, item) for item in values["sample_paragraphs"]
            ]

        config = cls(**values)
        config.validate()
        return config


def _coerce(kind, item):
    if isinstance(item, kind):
        return item
    try:
        if isinstance(item, Mapping):
            return kind(**item)
        return kind(*item)
    except TypeError as e:
        raise TemplateConfigError(f"Invalid {kind.__name__} entry", repr(item)) from e


class AppConfig:
    """Environment-driven settings of the command line."""

    DEFAULT_OUTPUT = os.environ.get("REQUIREMENT_TEMPLATE_OUTPUT", "RequirementTemplate.dotx")
    LOG_LEVEL = os.environ.get("REQUIREMENT_TEMPLATE_LOG_LEVEL", "WARNING")
