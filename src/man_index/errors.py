"""Exceptions raised while indexing and looking up manual pages."""


class MalformedNameError(ValueError):
    """Raised when a filename does not carry a ``(section)`` marker."""

    def __init__(self, filename: str) -> None:
        super().__init__(f"Can not find token '(' in '{filename}'")
        self.filename = filename


class PageNotFoundError(LookupError):
    """Raised when a lookup matches no page."""

    def __init__(self, name: str | None = None, section: str | None = None) -> None:
        if name is not None and section is not None:
            message = f"Can not find page with name '{name}' in section '{section}'."
        elif name is not None:
            message = f"Can not find page with name '{name}'."
        else:
            message = f"Can not find pages with section '{section}'."
        super().__init__(message)
        self.name = name
        self.section = section


class DuplicatePageError(KeyError):
    """Raised when packing two pages onto the same cache key."""

    def __init__(self, key: str) -> None:
        super().__init__(f"Can not pack page '{key}'.")
        self.key = key

    def __str__(self) -> str:
        # KeyError repr()s its argument by default
        return str(self.args[0])
