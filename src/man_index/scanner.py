"""Scanner that indexes manual page sources from a documentation tree."""

import logging
from pathlib import Path

from man_index.builder import PageBuilder
from man_index.config import IndexConfig
from man_index.filesystem import Filesystem, LocalFilesystem
from man_index.index import PageIndex

logger = logging.getLogger(__name__)


class ManualScanner:
    """Indexes the manual pages kept under ``<root>/<documentation>/<manuals>``."""

    def __init__(self, filesystem: Filesystem | None = None, builder: PageBuilder | None = None) -> None:
        """Initialise scanner.

        Args:
            filesystem: Filesystem to walk. Defaults to the local disk.
            builder: PageBuilder used per file. Defaults to one over ``filesystem``.
        """
        self.filesystem = filesystem if filesystem is not None else LocalFilesystem()
        self.builder = builder if builder is not None else PageBuilder(self.filesystem)

    def scan(self, root: Path, documentation_folder: str, manuals_folder: str) -> PageIndex:
        """Build an index of every page in the manuals directory.

        The manuals directory is created if it does not exist yet.

        Args:
            root: Root of the documentation tree.
            documentation_folder: Name of the documentation directory under root.
            manuals_folder: Name of the manuals directory under the documentation directory.

        Returns:
            PageIndex in directory listing order.

        Raises:
            OSError: If a directory or file can not be read or created.
            MalformedNameError: If a filename has no section marker.
        """
        pages = []
        for path in self._entries(root, documentation_folder, manuals_folder):
            page = self.builder.build(path)
            pages.append(page)
            logger.debug("Indexed: %s(%s)", page.name, page.section)

        logger.info("Indexed %d manual pages", len(pages))
        return PageIndex(pages)

    def pack(self, root: Path, documentation_folder: str, manuals_folder: str) -> dict[str, str]:
        """Read every page into a flat name to content mapping.

        Raises:
            OSError: If a directory or file can not be read or created.
            MalformedNameError: If a filename has no section marker.
            DuplicatePageError: If two files share a name.
        """
        packed: dict[str, str] = {}
        for path in self._entries(root, documentation_folder, manuals_folder):
            self.builder.pack(packed, path)
        logger.info("Packed %d manual pages", len(packed))
        return packed

    def scan_config(self, config: IndexConfig) -> PageIndex:
        """Scan the manuals directory described by ``config``."""
        return self.scan(config.root, config.documentation_folder, config.manuals_folder)

    def pack_config(self, config: IndexConfig) -> dict[str, str]:
        """Pack the manuals directory described by ``config``."""
        return self.pack(config.root, config.documentation_folder, config.manuals_folder)

    def _entries(self, root: Path, documentation_folder: str, manuals_folder: str) -> list[Path]:
        manuals_path = Path(root).absolute() / documentation_folder / manuals_folder
        self.filesystem.ensure_directory(manuals_path)

        names = self.filesystem.list_directory(manuals_path)
        logger.info("Found %d manual page files in %s", len(names), manuals_path)
        return [manuals_path / name for name in names]
