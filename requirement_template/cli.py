"""
Command-line interface for the requirement template generator.

Usage:
    requirement-template
    requirement-template RequirementTemplate.dotx
    requirement-template Requirements.docx
"""

import argparse
import logging
import sys
import tempfile
from pathlib import Path
from typing import List, Optional

from .builder import generate_template
from .config import AppConfig
from .utils.rich_logger import setup_logging

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="requirement-template",
        description="Generate a Word template with hierarchical heading and requirement styles",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  requirement-template
  requirement-template RequirementTemplate.dotx
  requirement-template Requirements.docx

Environment:
  REQUIREMENT_TEMPLATE_OUTPUT      default output path
  REQUIREMENT_TEMPLATE_LOG_LEVEL   DEBUG, INFO, WARNING, ERROR or CRITICAL
        """,
    )
    parser.add_argument(
        "output",
        nargs="?",
        help=f"Output file path (default: {AppConfig.DEFAULT_OUTPUT}); "
             ".docx writes a document, any other extension a template"
    )
    return parser


def _generate(output_path: Path) -> None:
    print(f"📄 Generating Word template: {output_path}")
    result = generate_template(output_path)
    if result.repaired:
        print(f"🔧 Package repaired: {', '.join(result.rewritten_parts + result.added_parts)}")
    print(f"✅ Template generated successfully: {output_path}")


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the generator.

    Args:
        argv: Arguments without the program name, ``sys.argv[1:]`` if omitted

    Returns:
        Process exit status
    """
    args = create_parser().parse_args(argv)
    output_path = Path(args.output or AppConfig.DEFAULT_OUTPUT)

    try:
        setup_logging(AppConfig.LOG_LEVEL)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    try:
        _generate(output_path)
    except PermissionError as e:
        logger.error(f"Access denied writing to {output_path}: {e}")
        print(f"Access denied writing to '{output_path}': {e}", file=sys.stderr)
        fallback = Path(tempfile.gettempdir()) / output_path.name
        print(f"⚠️  Attempting fallback output path: {fallback}")
        try:
            _generate(fallback)
        except Exception as fallback_error:
            logger.error(f"Fallback generation failed: {fallback_error}")
            print(f"Error: {fallback_error}", file=sys.stderr)
            return 1
    except Exception as e:
        logger.error(f"Template generation failed: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0
