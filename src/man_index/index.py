"""In-memory collection of indexed pages."""

from collections.abc import Iterable, Iterator, Mapping, Sequence
from typing import overload

from man_index.models import Page
from man_index.sections import Section


class PageIndex(Sequence[Page]):
    """Ordered, read-only collection of pages.

    Lookups scan it linearly; no secondary structure is kept.
    """

    __slots__ = ("_pages",)

    def __init__(self, pages: Iterable[Page] = ()) -> None:
        self._pages: tuple[Page, ...] = tuple(pages)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, str]) -> "PageIndex":
        """Adapt a flat name to content mapping; sections are unknown."""
        return cls(Page(name=name, section=Section.NONE, content=content) for name, content in mapping.items())

    @overload
    def __getitem__(self, index: int) -> Page: ...

    @overload
    def __getitem__(self, index: slice) -> "PageIndex": ...

    def __getitem__(self, index: int | slice) -> "Page | PageIndex":
        if isinstance(index, slice):
            return PageIndex(self._pages[index])
        return self._pages[index]

    def __len__(self) -> int:
        return len(self._pages)

    def __iter__(self) -> Iterator[Page]:
        return iter(self._pages)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, PageIndex):
            return self._pages == other._pages
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._pages)

    def __repr__(self) -> str:
        return f"PageIndex({len(self._pages)} pages)"

    def collect(self) -> tuple[Page, ...]:
        """Return every page in index order."""
        return self._pages
