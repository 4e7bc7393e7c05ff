"""Construction of Page records from manual page source files."""

import logging
from pathlib import Path

from man_index.errors import DuplicatePageError
from man_index.filename import pack_key, parse_filename
from man_index.filesystem import Filesystem, LocalFilesystem
from man_index.models import Page
from man_index.sections import classify

logger = logging.getLogger(__name__)


class PageBuilder:
    """Builds pages from ``name(section)`` files."""

    def __init__(self, filesystem: Filesystem | None = None) -> None:
        """Initialise builder with a filesystem.

        Args:
            filesystem: Filesystem to read from. Defaults to the local disk.
        """
        self.filesystem = filesystem if filesystem is not None else LocalFilesystem()

    def build(self, path: Path) -> Page:
        """Read a manual page source file into a Page.

        Args:
            path: Path to the source file; its name must be ``name(section)``.

        Returns:
            Page for the file.

        Raises:
            OSError: If the file can not be read.
            MalformedNameError: If the filename has no section marker.
        """
        content = self._read(path)
        name, code = parse_filename(path.name)
        return Page(name=name, section=classify(code), content=content)

    def pack(self, packed: dict[str, str], path: Path) -> None:
        """Add a file's content to a flat name to content mapping.

        Args:
            packed: Mapping being filled; modified in place.
            path: Path to the source file.

        Raises:
            OSError: If the file can not be read.
            MalformedNameError: If the filename has no section marker.
            DuplicatePageError: If another file already packed the same key.
        """
        content = self._read(path)
        key = pack_key(path.name)
        if key in packed:
            raise DuplicatePageError(key)
        packed[key] = content

    def _read(self, path: Path) -> str:
        raw = self.filesystem.read_file(path)
        return raw.decode("utf-8", errors="replace")
