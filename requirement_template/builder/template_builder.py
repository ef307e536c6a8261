"""
Template generation.

Writes the styles, numbering and document parts into a fresh package and
then runs the fixer on the written file, exactly as it would on any other
archive.
"""

from pathlib import Path
from typing import Optional, Union
import logging

from ..config import TemplateConfig
from ..constants import (
    DOCUMENT_PART,
    NUMBERING_PART,
    NUMBERING_REL_TYPE,
    OFFICE_DOCUMENT_REL_TYPE,
    SETTINGS_PART,
    SETTINGS_REL_TYPE,
    STYLES_PART,
    STYLES_REL_TYPE,
    main_document_content_type,
)
from ..fixer import FixResult, fix_package
from ..fixer.settings import default_settings_xml
from .context import GenerationContext
from .document import DocumentBuilder
from .numbering import NumberingBuilder
from .package_writer import PackageWriter
from .styles import StylesBuilder

logger = logging.getLogger(__name__)


class TemplateBuilder:
    """
    Generates a requirement document template.

    Example:
        >>> builder = TemplateBuilder(TemplateConfig(requirement_levels=6))
        >>> builder.generate("RequirementTemplate.dotx")
    """

    def __init__(self, config: Optional[TemplateConfig] = None):
        """
        Initialize builder.

        Args:
            config: Template configuration, defaults to TemplateConfig()

        Raises:
            TemplateConfigError: If the configuration is invalid
        """
        self.config = config or TemplateConfig()
        self.config.validate()

    def write(self, output_path: Union[str, Path], context: Optional[GenerationContext] = None) -> Path:
        """
        Write the unrepaired package.

        The manifest only declares the main document; the fixer completes it.

        Args:
            output_path: Target path; ``.docx`` produces a document, anything else a template
            context: Id context for this call, a fresh one if omitted

        Returns:
            The written path
        """
        output_path = Path(output_path)
        context = context or GenerationContext()

        writer = PackageWriter()
        writer.add_part(
            DOCUMENT_PART,
            DocumentBuilder(self.config, context).to_xml(),
            content_type=main_document_content_type(output_path),
            relationship_type=OFFICE_DOCUMENT_REL_TYPE,
        )
        writer.add_part(STYLES_PART, StylesBuilder(self.config).to_xml(),
                        relationship_type=STYLES_REL_TYPE, source=DOCUMENT_PART)
        writer.add_part(NUMBERING_PART, NumberingBuilder(self.config).to_xml(),
                        relationship_type=NUMBERING_REL_TYPE, source=DOCUMENT_PART)
        if self.config.include_settings:
            writer.add_part(SETTINGS_PART, default_settings_xml(),
                            relationship_type=SETTINGS_REL_TYPE, source=DOCUMENT_PART)

        output_path.parent.mkdir(parents=True, exist_ok=True)
        writer.write(output_path)
        return output_path

    def generate(self, output_path: Union[str, Path]) -> FixResult:
        """
        Write the template and repair it in place.

        Args:
            output_path: Target path

        Returns:
            FixResult of the repair step

        Raises:
            OSError: If the file cannot be written (PermissionError included)
        """
        output_path = self.write(output_path)
        result = fix_package(output_path)
        logger.info(f"Template generated: {output_path} (repaired={result.repaired})")
        return result


def generate_template(output_path: Union[str, Path], config: Optional[TemplateConfig] = None) -> FixResult:
    """Generate a template at ``output_path`` with the given or default configuration."""
    return TemplateBuilder(config).generate(output_path)
