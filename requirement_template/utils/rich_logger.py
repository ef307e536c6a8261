"""
Rich logging for the command line.

Colored log records on stderr through ``RichHandler``.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

from .logger import resolve_level


def setup_logging(level: str = "WARNING", use_rich: bool = True) -> None:
    """
    Setup logging for the application.

    Args:
        level: Log level
        use_rich: Whether to use rich logging
    """
    level_number = resolve_level(level)

    if use_rich:
        rich_handler = RichHandler(
            console=Console(stderr=True),
            show_time=True,
            show_path=True,
            markup=False,
            rich_tracebacks=True
        )
        rich_handler.setFormatter(logging.Formatter(fmt="%(message)s", datefmt="[%X]"))

        root_logger = logging.getLogger()
        root_logger.setLevel(level_number)
        root_logger.handlers.clear()
        root_logger.addHandler(rich_handler)
    else:
        logging.basicConfig(
            level=level_number,
            format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

    logging.getLogger(__name__).debug(f"Logging initialized at {level} level")

