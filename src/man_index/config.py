"""Configuration for locating the manual page tree and its cache.

Defaults match the conventional layout, ``<root>/documentation/man``, and
each value can be overridden with a ``MAN_INDEX_*`` environment variable.
"""

import os
from dataclasses import dataclass
from pathlib import Path

DEFAULT_DOCUMENTATION_FOLDER = "documentation"
DEFAULT_MANUALS_FOLDER = "man"
DEFAULT_CACHE_NAME = "pages.json"


def _get_env(key: str, default: str) -> str:
    """Get a non-empty string from the environment with fallback."""
    value = os.environ.get(key, "").strip()
    return value or default


@dataclass(frozen=True)
class IndexConfig:
    """Where the manual pages and their cache live."""

    root: Path
    documentation_folder: str = DEFAULT_DOCUMENTATION_FOLDER
    manuals_folder: str = DEFAULT_MANUALS_FOLDER
    cache_name: str = DEFAULT_CACHE_NAME

    def __post_init__(self) -> None:
        object.__setattr__(self, "root", Path(self.root))
        for field_name in ("documentation_folder", "manuals_folder", "cache_name"):
            if not getattr(self, field_name):
                raise ValueError(f"{field_name} must not be empty")

    @property
    def documentation_path(self) -> Path:
        return self.root / self.documentation_folder

    @property
    def manuals_path(self) -> Path:
        return self.documentation_path / self.manuals_folder

    @property
    def cache_path(self) -> Path:
        # Kept beside, not inside, the manuals directory so scans never see it
        return self.documentation_path / self.cache_name

    @classmethod
    def from_env(cls, root: Path | str | None = None) -> "IndexConfig":
        """Load configuration from ``MAN_INDEX_*`` environment variables.

        Args:
            root: Explicit root directory; takes precedence over ``MAN_INDEX_ROOT``.

        Returns:
            IndexConfig instance.
        """
        if root is None:
            root = _get_env("MAN_INDEX_ROOT", os.getcwd())
        return cls(
            root=Path(root).expanduser().absolute(),
            documentation_folder=_get_env("MAN_INDEX_DOCUMENTATION_FOLDER", DEFAULT_DOCUMENTATION_FOLDER),
            manuals_folder=_get_env("MAN_INDEX_MANUALS_FOLDER", DEFAULT_MANUALS_FOLDER),
            cache_name=_get_env("MAN_INDEX_CACHE_NAME", DEFAULT_CACHE_NAME),
        )
