"""Link objects attached to documentable entities."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class SeeAlsoLink:
    """A "see also" reference taken from a ``<seealso>`` tag.

    Attributes:
        cref: Member id of a code reference (e.g. ``T:Acme.Widget``)
        href: External URL
        label: Inner text of the tag, if any
    """

    cref: Optional[str] = None
    href: Optional[str] = None
    label: Optional[str] = None

    @property
    def target(self) -> Optional[str]:
        """Code reference if present, otherwise the URL."""
        return self.cref or self.href


@dataclass(frozen=True)
class TopicLink:
    """A conceptual topic associated with an entity."""

    id: str
    name: str
    file_name: Optional[str] = None
