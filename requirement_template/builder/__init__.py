"""
Template builder.

Constructs the styles, numbering and document parts of a requirement
template from a TemplateConfig and writes them as a package.
"""

from .context import GenerationContext
from .document import DocumentBuilder, default_sample_paragraphs
from .numbering import NumberingBuilder, heading_level_text, requirement_level_text
from .package_writer import PackageWriter
from .styles import StylesBuilder
from .template_builder import TemplateBuilder, generate_template

__all__ = [
    "DocumentBuilder",
    "GenerationContext",
    "NumberingBuilder",
    "PackageWriter",
    "StylesBuilder",
    "TemplateBuilder",
    "default_sample_paragraphs",
    "generate_template",
    "heading_level_text",
    "requirement_level_text",
]
