"""Data models for indexed manual pages."""

from dataclasses import asdict, dataclass
from typing import Any

from man_index.sections import Section


@dataclass(frozen=True)
class Page:
    """A manual page source with its identity and raw content."""

    name: str
    section: str
    content: str

    def __post_init__(self) -> None:
        # Section members compare equal to their code but hash differently
        object.__setattr__(self, "section", str(self.section))

    def as_payload(self) -> dict[str, str]:
        """Return the JSON-serialisable form of the page."""
        return asdict(self)

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> "Page":
        """Build a page from its serialised form.

        Args:
            payload: Mapping with a ``name`` and optional ``section``/``content``.

        Returns:
            Page instance.

        Raises:
            KeyError: If the payload has no name.
        """
        return cls(
            name=str(payload["name"]),
            section=str(payload.get("section") or Section.NONE.value),
            content=str(payload.get("content") or ""),
        )
