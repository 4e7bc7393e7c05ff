"""JSON cache of a scanned page index.

Two shapes are understood: a list of page objects, which keeps section
metadata, and a flat object mapping page names to content.
"""

import json
import logging
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

from man_index.errors import DuplicatePageError
from man_index.index import PageIndex
from man_index.models import Page

logger = logging.getLogger(__name__)


def save(data: Sequence[Page] | Mapping[str, str], path: Path) -> None:
    """Write pages or a packed mapping to a JSON cache file.

    Args:
        data: PageIndex (or any page sequence) or a name to content mapping.
        path: Target file; missing parent directories are created.

    Raises:
        OSError: If the file can not be written.
    """
    document: Any
    if isinstance(data, Mapping):
        document = dict(data)
    else:
        document = [page.as_payload() for page in data]

    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(document, indent=2, ensure_ascii=False), encoding="utf-8")
    logger.info("Wrote %d pages to %s", len(document), path)


def _read(path: Path) -> Any:
    """Read a cache document and check the shape of its entries.

    Raises:
        OSError: If the file can not be read.
        ValueError: If the document or one of its entries is malformed.
    """
    document = json.loads(Path(path).read_text(encoding="utf-8"))
    if isinstance(document, dict):
        for name, content in document.items():
            if not isinstance(content, str):
                raise ValueError(
                    f"Cache file {path} entry '{name}' must map to a string, not {type(content).__name__}"
                )
    elif isinstance(document, list):
        for position, item in enumerate(document):
            if not isinstance(item, dict) or not isinstance(item.get("name"), str):
                raise ValueError(f"Cache file {path} entry {position} must be an object with a string 'name'")
    else:
        raise ValueError(f"Cache file {path} must hold a JSON list or object, not {type(document).__name__}")
    return document


def load(path: Path) -> PageIndex:
    """Load a cache file of either shape as a PageIndex.

    Raises:
        OSError: If the file can not be read.
        ValueError: If the file is not a valid cache document.
    """
    document = _read(path)
    if isinstance(document, dict):
        index = PageIndex.from_mapping(document)
    else:
        index = PageIndex(Page.from_payload(item) for item in document)
    logger.info("Loaded %d pages from %s", len(index), path)
    return index


def load_mapping(path: Path) -> dict[str, str]:
    """Load a cache file of either shape as a flat name to content mapping.

    Raises:
        OSError: If the file can not be read.
        ValueError: If the file is not a valid cache document.
        DuplicatePageError: If two cached pages share a name.
    """
    document = _read(path)
    if isinstance(document, dict):
        return dict(document)

    packed: dict[str, str] = {}
    for item in document:
        page = Page.from_payload(item)
        key = page.name.casefold()
        if key in packed:
            raise DuplicatePageError(key)
        packed[key] = page.content
    return packed
