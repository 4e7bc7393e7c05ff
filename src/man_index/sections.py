"""Catalog of manual page sections."""

from enum import Enum


class Section(str, Enum):
    """Section of the manual a page belongs to.

    The catalog is open: codes that are not listed here are still storable as
    plain strings (see :func:`classify`).
    """

    NONE = ""
    HEADER = "0p"
    COMMAND = "1"
    POSIX_COMMAND = "1p"
    SYSTEM_CALL = "2"
    SYSTEM_TYPE = "2type"
    SYSTEM_CONSTANT = "2const"
    LIBRARY_CALL = "3"
    POSIX_LIBRARY_CALL = "3p"
    EXTENDED_LIBRARY_CALL = "3x"
    LIBRARY_CONSTANT = "3const"
    LIBRARY_TYPE = "3type"
    LIBRARY_HEADER = "3head"
    SPECIAL_FILES = "4"
    FILE_FORMATS = "5"
    MISCELLANEOUS = "6"
    OVERVIEWS = "7"
    ADMINISTRATION_COMMANDS = "8"

    def __str__(self) -> str:
        return self.value

    @property
    def description(self) -> str:
        """Human-readable summary of what the section covers."""
        return _DESCRIPTIONS[self]


_DESCRIPTIONS: dict[Section, str] = {
    Section.NONE: "No section",
    Section.HEADER: "Header files within the POSIX standard",
    Section.COMMAND: "User commands",
    Section.POSIX_COMMAND: "User commands within the POSIX standard",
    Section.SYSTEM_CALL: "System calls",
    Section.SYSTEM_TYPE: "Structures used with system calls",
    Section.SYSTEM_CONSTANT: "Constants used with system calls",
    Section.LIBRARY_CALL: "Functions and subroutines within the standard library",
    Section.POSIX_LIBRARY_CALL: "POSIX-compliant functions within the standard library",
    Section.EXTENDED_LIBRARY_CALL: "Specialized, extended, or non-standard library functions",
    Section.LIBRARY_CONSTANT: "Constants, macros, and defined types within the standard library",
    Section.LIBRARY_TYPE: "Structures used with the standard library",
    Section.LIBRARY_HEADER: "Specific header files within the standard library",
    Section.SPECIAL_FILES: "Special files and device drivers",
    Section.FILE_FORMATS: "File formats, conventions, and configuration files",
    Section.MISCELLANEOUS: "Games, jokes, and amusement programmes",
    Section.OVERVIEWS: "Overviews, conventions, protocols, and character sets",
    Section.ADMINISTRATION_COMMANDS: "System administration and maintenance commands",
}

_BY_CODE: dict[str, Section] = {member.value: member for member in Section}


def classify(code: str) -> str:
    """Map a raw section code onto the catalog.

    Args:
        code: Section code as found in a filename, e.g. ``"3p"``.

    Returns:
        The matching Section member, or the code itself when it is not catalogued.
    """
    return _BY_CODE.get(code, code)


def describe(code: str) -> str:
    """Return the description for a section code."""
    member = _BY_CODE.get(str(code))
    if member is None:
        return f"Unrecognised section '{code}'"
    return member.description


def is_none(section: str | None) -> bool:
    """Return True when the section means 'no section filter'.

    Blank codes, including whitespace only, count as no section.
    """
    return section is None or str(section).strip() == Section.NONE.value
