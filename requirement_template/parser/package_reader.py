"""
Package reader for word-processing archives.

Read-only access to the entries of a zip archive. Nothing is extracted
to disk and nothing is ever written through this class.
"""

import zipfile
from pathlib import Path
from typing import Dict, List, Optional, Union
import logging

from ..exceptions import PackageError
from .xml_parse import ParseResult, parse_xml

logger = logging.getLogger(__name__)


class ArchiveReader:
    """
    Reads entries of an archive.

    Keeps the entry order and the original ``ZipInfo`` records so that a
    rewriter can reproduce untouched entries exactly.
    """

    def __init__(self, archive_path: Union[str, Path]):
        """
        Open an archive for reading.

        Args:
            archive_path: Path to the archive

        Raises:
            FileNotFoundError: If the path does not exist
            PackageError: If the file is not a zip archive
        """
        self.archive_path = Path(archive_path)
        if not self.archive_path.exists():
            raise FileNotFoundError(f"Archive not found: {self.archive_path}")

        try:
            self._zip_file: Optional[zipfile.ZipFile] = zipfile.ZipFile(self.archive_path, "r")
        except zipfile.BadZipFile as e:
            raise PackageError(f"Not a zip archive: {self.archive_path}", str(e)) from e

        self._infos: Dict[str, zipfile.ZipInfo] = {}
        for info in self._zip_file.infolist():
            # first occurrence wins for duplicated names
            self._infos.setdefault(info.filename, info)

        logger.debug(f"Opened archive {self.archive_path} ({len(self._infos)} entries)")

    @property
    def zip_file(self) -> zipfile.ZipFile:
        if self._zip_file is None:
            raise ValueError("Archive is closed")
        return self._zip_file

    def namelist(self) -> List[str]:
        """Entry names in archive order."""
        return [info.filename for info in self.zip_file.infolist()]

    def infolist(self) -> List[zipfile.ZipInfo]:
        """Entry records in archive order."""
        return self.zip_file.infolist()

    def has_entry(self, part_name: str) -> bool:
        return part_name in self._infos

    def get_info(self, part_name: str) -> Optional[zipfile.ZipInfo]:
        return self._infos.get(part_name)

    def read(self, part_name: str) -> Optional[bytes]:
        """
        Read the raw bytes of an entry.

        Args:
            part_name: Entry name

        Returns:
            Entry bytes, or None if the archive has no such entry
        """
        info = self._infos.get(part_name)
        if info is None:
            return None
        return self.zip_file.read(info)

    def parse(self, part_name: str) -> Optional[ParseResult]:
        """
        Parse an entry as XML.

        Returns:
            None if the entry is absent, otherwise the ParseResult
        """
        data = self.read(part_name)
        if data is None:
            return None
        return parse_xml(data, part_name)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def close(self):
        """Close the underlying zip file."""
        if self._zip_file is not None:
            self._zip_file.close()
            self._zip_file = None
