"""
Per-generation id bookkeeping.

Bookmark ids must be unique within one document part. A fresh context is
created for every generation call, so repeated or concurrent calls never
share counters.
"""

from typing import Dict, Set
import logging

logger = logging.getLogger(__name__)


class GenerationContext:
    """
    Hands out bookmark ids and names for one generated document.

    Numeric ids start at 0 and increase by one; names are made unique by
    appending the prefix counter.
    """

    def __init__(self):
        self._next_bookmark_id = 0
        self.prefix_counter: Dict[str, int] = {}
        self.registered_names: Set[str] = set()

    def next_bookmark_id(self) -> int:
        """Return the next unused numeric bookmark id."""
        bookmark_id = self._next_bookmark_id
        self._next_bookmark_id += 1
        return bookmark_id

    def bookmark_name(self, prefix: str) -> str:
        """
        Generate a unique bookmark name.

        Args:
            prefix: Name prefix, e.g. the paragraph style id

        Returns:
            ``<prefix>_<n>`` not handed out before in this context
        """
        count = self.prefix_counter.get(prefix, 0) + 1
        name = f"{prefix}_{count}"
        while name in self.registered_names:
            count += 1
            name = f"{prefix}_{count}"
        self.prefix_counter[prefix] = count
        self.registered_names.add(name)
        logger.debug(f"Allocated bookmark name {name}")
        return name

    @property
    def bookmarks_allocated(self) -> int:
        return self._next_bookmark_id
