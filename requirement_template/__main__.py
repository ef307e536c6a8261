"""
Entry point for running requirement_template as a module.

Usage:
    python -m requirement_template RequirementTemplate.dotx
"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
