"""Tests for manual page filename parsing."""

import pytest

from man_index.errors import MalformedNameError
from man_index.filename import pack_key, parse_filename


@pytest.mark.parametrize(
    ("filename", "expected"),
    [
        ("ls(1)", ("ls", "1")),
        ("printf(3p)", ("printf", "3p")),
        ("stat(2type)", ("stat", "2type")),
        ("LS(1)", ("LS", "1")),
        ("git-commit(1)", ("git-commit", "1")),
    ],
)
def test_parse_filename(filename: str, expected: tuple[str, str]) -> None:
    """Test splitting name(section) filenames."""
    assert parse_filename(filename) == expected


def test_parse_filename_without_closing_parenthesis() -> None:
    """Test that the section runs to the end when ')' is missing."""
    assert parse_filename("ls(1") == ("ls", "1")


def test_parse_filename_ignores_trailing_text() -> None:
    """Test that text after ')' is not part of the section."""
    assert parse_filename("ls(1).gz") == ("ls", "1")


def test_parse_filename_splits_on_first_parenthesis() -> None:
    """Test that the first '(' separates name and section."""
    assert parse_filename("a(b(1)") == ("a", "b(1")


def test_parse_filename_strips_leading_separator() -> None:
    """Test that a leading path separator is dropped."""
    assert parse_filename("/ls(1)") == ("ls", "1")


def test_parse_filename_empty_section() -> None:
    """Test that an empty section is accepted."""
    assert parse_filename("intro()") == ("intro", "")


@pytest.mark.parametrize("filename", ["ls", "README.md", "", "ls)1"])
def test_parse_filename_malformed(filename: str) -> None:
    """Test that filenames without '(' are rejected."""
    with pytest.raises(MalformedNameError, match="Can not find token"):
        parse_filename(filename)


def test_malformed_name_is_value_error() -> None:
    """Test that MalformedNameError can be caught as ValueError."""
    with pytest.raises(ValueError):
        parse_filename("ls")


def test_pack_key_casefolds_name() -> None:
    """Test that cache keys drop the section and casing."""
    assert pack_key("LS(1)") == "ls"
    assert pack_key("ls(8)") == "ls"


def test_pack_key_malformed() -> None:
    """Test that cache keys need a section marker."""
    with pytest.raises(MalformedNameError):
        pack_key("ls")
