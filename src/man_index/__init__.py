"""Index and look up Unix manual-page sources."""

from man_index.errors import DuplicatePageError, MalformedNameError, PageNotFoundError
from man_index.index import PageIndex
from man_index.lookup import find, find_by_section, find_by_title, find_by_title_in_section
from man_index.models import Page
from man_index.scanner import ManualScanner
from man_index.sections import Section, classify

__all__ = [
    "DuplicatePageError",
    "MalformedNameError",
    "ManualScanner",
    "Page",
    "PageIndex",
    "PageNotFoundError",
    "Section",
    "classify",
    "find",
    "find_by_section",
    "find_by_title",
    "find_by_title_in_section",
]
