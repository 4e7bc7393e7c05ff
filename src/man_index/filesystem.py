"""Filesystem access used by the scanner and page builder."""

import logging
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)


class Filesystem(Protocol):
    """Operations the indexer needs from a filesystem."""

    def list_directory(self, path: Path) -> list[str]: ...

    def read_file(self, path: Path) -> bytes: ...

    def ensure_directory(self, path: Path) -> None: ...


class LocalFilesystem:
    """Filesystem backed by the local disk.

    Every operation is attempted once; failures surface as ``OSError``.
    """

    def list_directory(self, path: Path) -> list[str]:
        """List every entry in a directory.

        Entries that are not readable files are still listed so that
        reading them fails the scan.

        Args:
            path: Directory to list.

        Returns:
            Entry names, sorted.

        Raises:
            OSError: If the directory can not be read.
        """
        logger.debug("Listing directory %s", path)
        return sorted(entry.name for entry in path.iterdir())

    def read_file(self, path: Path) -> bytes:
        """Read the raw bytes of a file.

        Raises:
            OSError: If the file can not be read.
        """
        logger.debug("Reading %s", path)
        return path.read_bytes()

    def ensure_directory(self, path: Path) -> None:
        """Create a directory and its missing ancestors if absent."""
        if path.is_dir():
            return
        logger.info("Creating directory %s", path)
        path.mkdir(parents=True, exist_ok=True)
