"""Tests for title and section lookups."""

import pytest

from man_index.errors import PageNotFoundError
from man_index.index import PageIndex
from man_index.lookup import find, find_by_section, find_by_title, find_by_title_in_section
from man_index.models import Page
from man_index.sections import Section


@pytest.fixture
def index() -> PageIndex:
    """Create an index with a name shared by two sections.

    Returns:
        PageIndex instance.
    """
    return PageIndex(
        [
            Page(name="ls", section="1", content="ls user command"),
            Page(name="cat", section="1", content="cat user command"),
            Page(name="open", section="2", content="open system call"),
            Page(name="ls", section="8", content="ls admin command"),
            Page(name="Printf", section="3p", content="printf posix"),
        ]
    )


def test_find_by_title(index: PageIndex) -> None:
    """Test finding a page by its title."""
    page = find_by_title(index, "cat")

    assert page.content == "cat user command"


def test_find_by_title_ignores_case_and_whitespace(index: PageIndex) -> None:
    """Test that titles are trimmed and case-folded before comparison."""
    assert find_by_title(index, "  Ls  ") is find_by_title(index, "ls")
    assert find_by_title(index, "PRINTF").name == "Printf"


def test_find_by_title_first_match_wins(index: PageIndex) -> None:
    """Test that the first page in index order wins on duplicate titles."""
    page = find_by_title(index, "ls")

    assert page.section == "1"


def test_find_by_title_missing(index: PageIndex) -> None:
    """Test that an unknown title raises PageNotFoundError."""
    with pytest.raises(PageNotFoundError, match="Can not find page with name 'grep'"):
        find_by_title(index, "grep")


def test_find_by_title_empty_index() -> None:
    """Test that an empty index finds nothing."""
    with pytest.raises(PageNotFoundError):
        find_by_title(PageIndex(), "ls")


def test_not_found_is_lookup_error(index: PageIndex) -> None:
    """Test that PageNotFoundError can be caught as LookupError."""
    with pytest.raises(LookupError):
        find_by_title(index, "grep")


def test_find_by_section(index: PageIndex) -> None:
    """Test that all pages of a section are returned in index order."""
    pages = find_by_section(index, "1")

    assert isinstance(pages, PageIndex)
    assert [page.name for page in pages] == ["ls", "cat"]


def test_find_by_section_accepts_enum(index: PageIndex) -> None:
    """Test that Section members can be used as the query."""
    pages = find_by_section(index, Section.SYSTEM_CALL)

    assert [page.name for page in pages] == ["open"]


def test_find_by_section_is_exact(index: PageIndex) -> None:
    """Test that section codes do not match on prefixes."""
    with pytest.raises(PageNotFoundError):
        find_by_section(index, "3")


def test_find_by_section_empty(index: PageIndex) -> None:
    """Test that an empty section raises instead of returning nothing."""
    with pytest.raises(PageNotFoundError, match="Can not find pages with section '9'"):
        find_by_section(index, "9")


def test_find_by_section_none_matches_only_unsectioned() -> None:
    """Test that the NONE section never matches a concrete section."""
    index = PageIndex(
        [
            Page(name="ls", section="1", content=""),
            Page(name="legacy", section=Section.NONE, content=""),
        ]
    )

    pages = find_by_section(index, Section.NONE)

    assert [page.name for page in pages] == ["legacy"]


def test_find_by_title_in_section(index: PageIndex) -> None:
    """Test that the section narrows duplicate titles."""
    page = find_by_title_in_section(index, "ls", "8")

    assert page.content == "ls admin command"
    assert find_by_title_in_section(index, "ls", "1").section == "1"


def test_find_by_title_in_section_missing_title(index: PageIndex) -> None:
    """Test a title that is absent from an existing section."""
    with pytest.raises(PageNotFoundError) as excinfo:
        find_by_title_in_section(index, "open", "1")

    assert excinfo.value.name == "open"
    assert excinfo.value.section == "1"


def test_find_by_title_in_section_missing_section(index: PageIndex) -> None:
    """Test that an empty section fails before the title search."""
    with pytest.raises(PageNotFoundError) as excinfo:
        find_by_title_in_section(index, "ls", "5")

    assert excinfo.value.name is None
    assert excinfo.value.section == "5"


@pytest.mark.parametrize("section", [None, "", "   ", Section.NONE])
def test_find_by_title_in_section_without_section(index: PageIndex, section: str | None) -> None:
    """Test that no section falls back to a plain title search."""
    page = find_by_title_in_section(index, "ls", section)

    assert page.section == "1"


def test_find_dispatch(index: PageIndex) -> None:
    """Test the combined lookup entry point."""
    assert find(index, "ls").section == "1"
    assert find(index, "ls", "8").section == "8"
    with pytest.raises(PageNotFoundError):
        find(index, "cat", "8")


def test_lookup_over_plain_sequence() -> None:
    """Test that lookups accept any iterable of pages."""
    pages = [Page(name="ls", section="1", content="")]

    assert find_by_title(pages, "ls") is pages[0]
    assert list(find_by_section(pages, "1")) == pages


def test_find_with_blank_section(index: PageIndex) -> None:
    """Test that a blank section is not treated as a section filter."""
    assert find(index, "ls", "  ").section == "1"
