"""Title and section lookups over a page index.

Every lookup walks the index in order. A lookup either returns its result
or raises ``PageNotFoundError``; an empty match is never returned as success.
"""

import logging
from collections.abc import Iterable

from man_index.errors import PageNotFoundError
from man_index.index import PageIndex
from man_index.models import Page
from man_index.sections import is_none

logger = logging.getLogger(__name__)


def _normalise(value: str) -> str:
    return str(value).strip().casefold()


def find_by_title(pages: Iterable[Page], name: str) -> Page:
    """Return the first page whose name matches, ignoring case and surrounding whitespace.

    Args:
        pages: Pages to search, in priority order.
        name: Title to look for.

    Returns:
        The first matching Page.

    Raises:
        PageNotFoundError: If no page has that name.
    """
    needle = _normalise(name)
    for page in pages:
        if _normalise(page.name) == needle:
            logger.debug("Matched '%s' to %s(%s)", name, page.name, page.section)
            return page
    raise PageNotFoundError(name=name)


def find_by_section(pages: Iterable[Page], section: str) -> PageIndex:
    """Return every page in a section, in index order.

    Args:
        pages: Pages to search.
        section: Section code; compared exactly after trimming and lowercasing.

    Returns:
        PageIndex of the matching pages; never empty.

    Raises:
        PageNotFoundError: If the section holds no pages.
    """
    needle = _normalise(section)
    matches = PageIndex(page for page in pages if _normalise(page.section) == needle)
    if not matches:
        raise PageNotFoundError(section=str(section))
    logger.debug("Section '%s' holds %d pages", section, len(matches))
    return matches


def find_by_title_in_section(pages: Iterable[Page], name: str, section: str | None) -> Page:
    """Return the first page with a title inside a section.

    A ``None``, empty, or blank section skips the narrowing and searches by title only.

    Raises:
        PageNotFoundError: If the section is empty or has no such title.
    """
    if section is None or is_none(section):
        return find_by_title(pages, name)
    candidates = find_by_section(pages, section)
    try:
        return find_by_title(candidates, name)
    except PageNotFoundError:
        raise PageNotFoundError(name=name, section=str(section)) from None


def find(pages: Iterable[Page], name: str, section: str | None = None) -> Page:
    """Resolve a title, optionally qualified by a section."""
    if is_none(section):
        return find_by_title(pages, name)
    return find_by_title_in_section(pages, name, section)
