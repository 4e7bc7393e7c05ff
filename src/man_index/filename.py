"""Parsing of ``name(section)`` manual page filenames."""

import os

from man_index.errors import MalformedNameError

_SEPARATORS = "/" + os.sep + (os.altsep or "")


def parse_filename(raw_filename: str) -> tuple[str, str]:
    """Split a manual page filename into its name and section code.

    Leading path separators are dropped if present; a bare filename is
    accepted as is.

    Args:
        raw_filename: Filename such as ``"ls(1)"``.

    Returns:
        Tuple of the name, in its original casing, and the section code.

    Raises:
        MalformedNameError: If the filename has no ``(``.
    """
    filename = raw_filename.lstrip(_SEPARATORS)
    name, found, rest = filename.partition("(")
    if not found:
        raise MalformedNameError(raw_filename)
    section, _, _ = rest.partition(")")
    return name, section


def pack_key(raw_filename: str) -> str:
    """Return the cache key for a filename: its case-folded name."""
    name, _ = parse_filename(raw_filename)
    return name.casefold()
